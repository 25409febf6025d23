# sliceutil

Small helpers for working with lists and other sequences. They have no
dependencies beyond the standard library. The helpers cover mapping, filtering,
grouping, chunking, set-style operations, searching and shuffling. Each helper
returns a new list and leaves its input as it was.

Most callbacks are called as `callback(item, index)`. The exceptions are
`pluck` and `group_by`, whose callbacks receive only the item.

Most helpers that return a collection give `None` back when they are passed
`None`, and an empty list when they are passed an empty one. The folds
(`reduce`, `map_reduce`) treat `None` like an empty sequence and return the
initial value unchanged.

## Installation

From a checkout of the project:

```
pip install .
```

## Modules

### `sliceutil.core`

- `map_items(collection, iteratee)`: a list of `iteratee(item, index)` results.
- `filter_items(collection, predicate)`: the items for which `predicate(item, index)` is true.
- `unique(collection)`: the items with duplicates removed, kept in the order they first appear.
- `pluck(collection, property_getter)`: `property_getter(item)` for every item.
- `chunk(collection, size)`: the collection split into lists of `size` items. The last chunk may be shorter. If `size` is below 1, the result is `None`.
- `flatten(collections)`: an iterable of iterables joined into one list.
- `group_by(collection, key_selector)`: a dict that maps each key to the list of items that produced it.
- `reduce(collection, initial_value, reducer)`: folds the items with `reducer(acc, item, index)`.
- `intersect(*args)`: the distinct items of the first sequence that occur in every other sequence, in the order of the first sequence. With one sequence, the result is a copy of it. With none, the result is `None`.

### `sliceutil.setops`

- `contains(collection, element)`: `True` if the element occurs. A `None` collection gives `False`.
- `index_of(collection, element)`, `last_index_of(collection, element)`: the index of the first or last occurrence, or `-1` if the element is absent.
- `difference(first, *args)`: the items of `first` that appear in none of the other sequences.
- `union(*args)`: the distinct items of all sequences, in order of first occurrence. With no sequences, the result is `None`.
- `for_each(collection, action)`: calls `action(item, index)` for every item.
- `reverse(collection)`: a reversed copy.
- `take(collection, n)`: the first `n` items. If `n` is 0 or less, the result is an empty list.
- `drop(collection, n)`: everything after the first `n` items.

### `sliceutil.mapreduce`

- `map_reduce(collection, mapper, initial_value, reducer)`: maps each item with `mapper(item, index)` and folds the mapped values with `reducer(acc, mapped, index)`, in one pass.
- `find_first(collection, predicate)`, `find_last(collection, predicate)`: each returns `(item, True)` for a match, or `(None, False)` if nothing matches.
- `partition(collection, predicate)`: a `(matched, unmatched)` pair of lists.
- `zip_pairs(first, second)`: a list of tuples that stops at the shorter sequence. If either sequence is `None`, the result is `None`.
- `zip_with_index(collection)`: a list of `(item, index)` tuples.
- `shuffle(collection)`: a shuffled copy, using the operating system's secure random source.

## Example

```python
from sliceutil.core import chunk, group_by
from sliceutil.setops import union
from sliceutil.mapreduce import partition

chunk([1, 2, 3, 4, 5], 2)            # [[1, 2], [3, 4], [5]]
group_by(["a", "bb", "d"], len)      # {1: ["a", "d"], 2: ["bb"]}
union([3, 2, 1], [4, 3, 2])          # [3, 2, 1, 4]
partition([1, 2, 3, 4], lambda x, i: x % 2 == 0)  # ([2, 4], [1, 3])
```

## Running the tests

```
pip install -e ".[test]"
pytest
```