from collections import Counter

import pytest

from sliceutil.mapreduce import (
    find_first,
    find_last,
    map_reduce,
    partition,
    shuffle,
    zip_pairs,
    zip_with_index,
)


def _is_even(item, index):
    return item % 2 == 0


def _always(item, index):
    return True


# map_reduce


def test_map_reduce_sums_squares():
    result = map_reduce(
        [1, 2, 3, 4, 5],
        lambda item, index: item * item,
        0,
        lambda acc, mapped, index: acc + mapped,
    )
    assert result == 55


def test_map_reduce_builds_comma_separated_string():
    def join(acc, mapped, index):
        return mapped if index == 0 else acc + ", " + mapped

    result = map_reduce(
        ["apple", "banana", "cherry"],
        lambda item, index: item.upper(),
        "",
        join,
    )
    assert result == "APPLE, BANANA, CHERRY"


@pytest.mark.parametrize("collection", [[], None])
def test_map_reduce_returns_initial_value_for_empty_or_none(collection):
    result = map_reduce(
        collection,
        lambda item, index: item,
        10,
        lambda acc, mapped, index: acc + mapped,
    )
    assert result == 10


# find_first


def test_find_first_finds_first_even_number():
    assert find_first([1, 3, 4, 6, 7, 8], _is_even) == (4, True)


def test_find_first_returns_not_found_when_no_match():
    _, found = find_first([1, 3, 5, 7, 9], _is_even)
    assert found is False


@pytest.mark.parametrize("collection", [[], None])
def test_find_first_returns_not_found_for_empty_or_none(collection):
    assert find_first(collection, _always) == (None, False)


def test_find_first_passes_index():
    assert find_first(["a", "b", "c"], lambda item, index: index == 2) == ("c", True)


# find_last


def test_find_last_finds_last_even_number():
    assert find_last([1, 2, 3, 4, 5, 6, 7], _is_even) == (6, True)


def test_find_last_returns_not_found_when_no_match():
    _, found = find_last([1, 3, 5, 7, 9], _is_even)
    assert found is False


@pytest.mark.parametrize("collection", [[], None])
def test_find_last_returns_not_found_for_empty_or_none(collection):
    assert find_last(collection, _always) == (None, False)


def test_find_last_passes_original_index():
    seen = []

    def record(item, index):
        seen.append(index)
        return False

    result = find_last([10, 20, 30], record)
    assert result == (None, False)
    assert seen == [2, 1, 0]


def test_find_last_matches_on_index():
    assert find_last([10, 20, 30], lambda item, index: index == 0) == (10, True)


# partition


def test_partition_even_and_odd():
    assert partition([1, 2, 3, 4, 5, 6], _is_even) == ([2, 4, 6], [1, 3, 5])


def test_partition_all_matching():
    assert partition([2, 4, 6, 8], _is_even) == ([2, 4, 6, 8], [])


def test_partition_none_matching():
    assert partition([1, 3, 5, 7], _is_even) == ([], [1, 3, 5, 7])


def test_partition_none_input():
    assert partition(None, _always) == (None, None)


# zip_pairs


def test_zip_pairs_same_length():
    assert zip_pairs([1, 2, 3], ["a", "b", "c"]) == [(1, "a"), (2, "b"), (3, "c")]


def test_zip_pairs_truncates_to_shorter():
    assert zip_pairs([1, 2, 3, 4, 5], ["a", "b", "c"]) == [
        (1, "a"),
        (2, "b"),
        (3, "c"),
    ]


def test_zip_pairs_first_none():
    assert zip_pairs(None, ["a", "b", "c"]) is None


def test_zip_pairs_second_none():
    assert zip_pairs([1, 2, 3], None) is None


def test_zip_pairs_empty():
    assert zip_pairs([], [1, 2]) == []


# zip_with_index


def test_zip_with_index_pairs_elements_with_indices():
    assert zip_with_index(["a", "b", "c"]) == [("a", 0), ("b", 1), ("c", 2)]


def test_zip_with_index_none_input():
    assert zip_with_index(None) is None


def test_zip_with_index_empty_input():
    assert zip_with_index([]) == []


# shuffle


def test_shuffle_returns_permutation_in_new_order():
    original = list(range(1, 11))
    source = list(original)
    result = shuffle(source)

    assert len(result) == len(original)
    assert Counter(result) == Counter(original)
    assert source == original
    assert result != original


def test_shuffle_returns_new_list():
    source = [1, 2, 3]
    result = shuffle(source)
    result.append(4)
    assert source == [1, 2, 3]


def test_shuffle_none_input():
    assert shuffle(None) is None


def test_shuffle_single_element():
    assert shuffle([1]) == [1]


def test_shuffle_empty():
    assert shuffle([]) == []