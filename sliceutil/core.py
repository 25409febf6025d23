"""Core helpers for transforming, filtering and grouping sequences."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Sequence
from itertools import chain
from typing import Any, TypeVar

T = TypeVar("T")
R = TypeVar("R")
K = TypeVar("K", bound=Hashable)
H = TypeVar("H", bound=Hashable)

__all__ = [
    "map_items",
    "filter_items",
    "unique",
    "pluck",
    "chunk",
    "flatten",
    "group_by",
    "reduce",
    "intersect",
]


def map_items(
    collection: Sequence[T] | None, iteratee: Callable[[T, int], R]
) -> list[R] | None:
    """Apply ``iteratee(item, index)`` to every element.

    Returns ``None`` when ``collection`` is ``None``.
    """
    if collection is None:
        return None
    return [iteratee(item, index) for index, item in enumerate(collection)]


def filter_items(
    collection: Sequence[T] | None, predicate: Callable[[T, int], bool]
) -> list[T] | None:
    """Keep the elements for which ``predicate(item, index)`` is true.

    Returns ``None`` when ``collection`` is ``None``.
    """
    if collection is None:
        return None
    return [item for index, item in enumerate(collection) if predicate(item, index)]


def unique(collection: Sequence[H] | None) -> list[H] | None:
    """Remove duplicates, keeping the order of first appearance."""
    if collection is None:
        return None
    return list(dict.fromkeys(collection))


def pluck(
    collection: Sequence[T] | None, property_getter: Callable[[T], R]
) -> list[R] | None:
    """Extract one property from every element using ``property_getter``."""
    if collection is None:
        return None
    return [property_getter(item) for item in collection]


def chunk(collection: Sequence[T] | None, size: int) -> list[list[T]] | None:
    """Split ``collection`` into lists of at most ``size`` elements.

    Returns ``None`` when ``collection`` is ``None`` or ``size`` is below 1.
    """
    if collection is None or size < 1:
        return None
    items = list(collection)
    return [items[start:start + size] for start in range(0, len(items), size)]


def flatten(collections: Iterable[Iterable[T]] | None) -> list[T] | None:
    """Concatenate a sequence of sequences into a single list."""
    if collections is None:
        return None
    return list(chain.from_iterable(collections))


def group_by(
    collection: Sequence[T] | None, key_selector: Callable[[T], K]
) -> dict[K, list[T]] | None:
    """Group elements by the key that ``key_selector`` produces for each."""
    if collection is None:
        return None
    groups: dict[K, list[T]] = {}
    for item in collection:
        groups.setdefault(key_selector(item), []).append(item)
    return groups


def reduce(
    collection: Sequence[T] | None,
    initial_value: R,
    reducer: Callable[[R, T, int], R],
) -> R:
    """Fold elements into one value with ``reducer(acc, item, index)``."""
    result = initial_value
    for index, item in enumerate(collection or ()):
        result = reducer(result, item, index)
    return result


def intersect(*args: Sequence[H] | None) -> list[H] | None:
    """Return the distinct elements of the first sequence found in all others.

    Order follows the first sequence. Returns ``None`` when called with no
    sequences.
    """
    if not args:
        return None
    first, *others = args
    if not others:
        return None if first is None else list(first)
    common = set.intersection(*(set(other or ()) for other in others))
    seen: set[Any] = set()
    result: list[H] = []
    for item in first or ():
        if item in common and item not in seen:
            seen.add(item)
            result.append(item)
    return result