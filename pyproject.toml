[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sliceutil"
version = "0.1.0"
description = "Helpers for working with sequences: mapping, filtering, grouping, chunking, set-style operations, searching and shuffling."
requires-python = ">=3.10"
dependencies = []
keywords = ["list", "sequence", "collection", "utilities", "functional"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sliceutil"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
