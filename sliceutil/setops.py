"""Search, set-style and slicing helpers for sequences."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Sequence
from typing import Any, TypeVar

T = TypeVar("T")
H = TypeVar("H", bound=Hashable)

__all__ = [
    "contains",
    "index_of",
    "last_index_of",
    "difference",
    "union",
    "for_each",
    "reverse",
    "take",
    "drop",
]


def contains(collection: Sequence[Any] | None, element: Any) -> bool:
    """Tell whether ``element`` occurs in ``collection``."""
    return collection is not None and element in collection


def index_of(collection: Sequence[Any] | None, element: Any) -> int:
    """Index of the first occurrence of ``element``, or -1."""
    return next(
        (index for index, item in enumerate(collection or ()) if item == element),
        -1,
    )


def last_index_of(collection: Sequence[Any] | None, element: Any) -> int:
    """Index of the last occurrence of ``element``, or -1."""
    items = list(collection or ())
    return next(
        (index for index in reversed(range(len(items))) if items[index] == element),
        -1,
    )


def difference(
    first: Sequence[H] | None, *args: Sequence[H] | None
) -> list[H] | None:
    """Elements of ``first`` that appear in none of the other sequences."""
    if first is None:
        return None
    excluded = {item for other in args for item in (other or ())}
    return [item for item in first if item not in excluded]


def union(*args: Sequence[H] | None) -> list[H] | None:
    """Distinct elements of all sequences in order of first appearance.

    Returns ``None`` when called with no sequences.
    """
    if not args:
        return None
    return list(dict.fromkeys(item for seq in args for item in (seq or ())))


def for_each(
    collection: Sequence[T] | None, action: Callable[[T, int], Any]
) -> None:
    """Call ``action(item, index)`` for every element."""
    for index, item in enumerate(collection or ()):
        action(item, index)


def reverse(collection: Sequence[T] | None) -> list[T] | None:
    """A new list holding the elements in reverse order."""
    if collection is None:
        return None
    return list(reversed(collection))


def take(collection: Sequence[T] | None, n: int) -> list[T] | None:
    """A new list of the first ``n`` elements."""
    if collection is None:
        return None
    if n <= 0:
        return []
    return list(collection[:n])


def drop(collection: Sequence[T] | None, n: int) -> list[T] | None:
    """A new list without the first ``n`` elements."""
    if collection is None:
        return None
    if n <= 0:
        return list(collection)
    return list(collection[n:])