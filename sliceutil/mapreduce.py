"""Single-pass folds, searches, partitioning, zipping and shuffling."""

from __future__ import annotations

import random
from collections.abc import Callable, Sequence
from typing import Any, TypeVar

T = TypeVar("T")
M = TypeVar("M")
R = TypeVar("R")

__all__ = [
    "map_reduce",
    "find_first",
    "find_last",
    "partition",
    "zip_pairs",
    "zip_with_index",
    "shuffle",
]

_secure_random = random.SystemRandom()


def map_reduce(
    collection: Sequence[T] | None,
    mapper: Callable[[T, int], M],
    initial_value: R,
    reducer: Callable[[R, M, int], R],
) -> R:
    """Map each element with ``mapper(item, index)`` and fold the results.

    The fold uses ``reducer(acc, mapped, index)`` starting from
    ``initial_value``, which is returned unchanged for an empty input.
    """
    result = initial_value
    for index, item in enumerate(collection or ()):
        result = reducer(result, mapper(item, index), index)
    return result


def find_first(
    collection: Sequence[T] | None, predicate: Callable[[T, int], bool]
) -> tuple[T | None, bool]:
    """Return ``(item, True)`` for the first match, or ``(None, False)``."""
    for index, item in enumerate(collection or ()):
        if predicate(item, index):
            return item, True
    return None, False


def find_last(
    collection: Sequence[T] | None, predicate: Callable[[T, int], bool]
) -> tuple[T | None, bool]:
    """Return ``(item, True)`` for the last match, or ``(None, False)``."""
    items = list(collection or ())
    for index in reversed(range(len(items))):
        item = items[index]
        if predicate(item, index):
            return item, True
    return None, False


def partition(
    collection: Sequence[T] | None, predicate: Callable[[T, int], bool]
) -> tuple[list[T] | None, list[T] | None]:
    """Split elements into those matching ``predicate`` and the rest.

    Returns ``(None, None)`` when ``collection`` is ``None``.
    """
    if collection is None:
        return None, None
    matched: list[T] = []
    unmatched: list[T] = []
    for index, item in enumerate(collection):
        (matched if predicate(item, index) else unmatched).append(item)
    return matched, unmatched


def zip_pairs(
    first: Sequence[Any] | None, second: Sequence[Any] | None
) -> list[tuple[Any, Any]] | None:
    """Pair elements of two sequences, stopping at the shorter one.

    Returns ``None`` when either sequence is ``None``.
    """
    if first is None or second is None:
        return None
    return list(zip(first, second))


def zip_with_index(collection: Sequence[T] | None) -> list[tuple[T, int]] | None:
    """Pair every element with its index as ``(item, index)``."""
    if collection is None:
        return None
    return [(item, index) for index, item in enumerate(collection)]


def shuffle(collection: Sequence[T] | None) -> list[T] | None:
    """A new list holding the elements in a random order.

    Uses the operating system's secure random source; the input is not
    modified.
    """
    if collection is None:
        return None
    result = list(collection)
    if len(result) > 1:
        _secure_random.shuffle(result)
    return result