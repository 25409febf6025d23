"""Helpers for mapping, filtering, grouping, searching and combining sequences."""

__version__ = "0.1.0"
__all__ = ["core", "setops", "mapreduce"]