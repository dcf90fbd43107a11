from hypothesis import given
from hypothesis import strategies as st

from algokit.sorting import (
    bubble_sort,
    heap_sort,
    insertion_sort,
    merge_sort,
    pivot_first_quick_sort,
    quick_sort,
    selection_sort,
)


def test_demo_array():
    data = [64, 25, 12, 22, 11]
    expected = [11, 12, 22, 25, 64]
    assert bubble_sort(data) == expected
    assert selection_sort(data) == expected
    assert insertion_sort(data) == expected
    assert merge_sort(data) == expected
    assert quick_sort(data) == expected
    assert pivot_first_quick_sort(data) == expected
    assert heap_sort(data) == expected


def test_merge_demo_array():
    data = [12, 11, 13, 5, 6, 7]
    expected = [5, 6, 7, 11, 12, 13]
    assert bubble_sort(data) == expected
    assert selection_sort(data) == expected
    assert insertion_sort(data) == expected
    assert merge_sort(data) == expected
    assert quick_sort(data) == expected
    assert pivot_first_quick_sort(data) == expected
    assert heap_sort(data) == expected


def test_empty_and_single():
    assert bubble_sort([]) == [] and bubble_sort([42]) == [42]
    assert selection_sort([]) == [] and selection_sort([42]) == [42]
    assert insertion_sort([]) == [] and insertion_sort([42]) == [42]
    assert merge_sort([]) == [] and merge_sort([42]) == [42]
    assert quick_sort([]) == [] and quick_sort([42]) == [42]
    assert pivot_first_quick_sort([]) == [] and pivot_first_quick_sort([42]) == [42]
    assert heap_sort([]) == [] and heap_sort([42]) == [42]


def test_input_not_modified():
    data = [3, 1, 2]
    results = [
        bubble_sort(data),
        selection_sort(data),
        insertion_sort(data),
        merge_sort(data),
        quick_sort(data),
        pivot_first_quick_sort(data),
        heap_sort(data),
    ]
    assert data == [3, 1, 2]
    assert results == [[1, 2, 3]] * 7


def test_accepts_any_iterable():
    expected = [4, 7, 9]
    assert bubble_sort(x for x in (9, 4, 7)) == expected
    assert selection_sort(x for x in (9, 4, 7)) == expected
    assert insertion_sort(x for x in (9, 4, 7)) == expected
    assert merge_sort(x for x in (9, 4, 7)) == expected
    assert quick_sort(x for x in (9, 4, 7)) == expected
    assert pivot_first_quick_sort(x for x in (9, 4, 7)) == expected
    assert heap_sort(x for x in (9, 4, 7)) == expected


@given(values=st.lists(st.integers(min_value=-1000, max_value=1000), max_size=60))
def test_matches_builtin(values):
    expected = sorted(values)
    assert bubble_sort(values) == expected
    assert selection_sort(values) == expected
    assert insertion_sort(values) == expected
    assert merge_sort(values) == expected
    assert quick_sort(values) == expected
    assert pivot_first_quick_sort(values) == expected
    assert heap_sort(values) == expected


@given(values=st.lists(st.integers(min_value=0, max_value=3), max_size=40))
def test_many_duplicates(values):
    results = [
        bubble_sort(values),
        selection_sort(values),
        insertion_sort(values),
        merge_sort(values),
        quick_sort(values),
        pivot_first_quick_sort(values),
        heap_sort(values),
    ]
    for result in results:
        assert all(a <= b for a, b in zip(result, result[1:]))
        assert sorted(result) == sorted(values)


@given(values=st.lists(st.tuples(st.integers(0, 3), st.integers()), max_size=40))
def test_merge_sort_is_stable(values):
    class Keyed:
        def __init__(self, pair):
            self.pair = pair

        def __le__(self, other):
            return self.pair[0] <= other.pair[0]

        def __lt__(self, other):
            return self.pair[0] < other.pair[0]

    result = [k.pair for k in merge_sort(Keyed(p) for p in values)]
    assert result == sorted(values, key=lambda p: p[0])


def test_strings():
    data = ["pear", "apple", "fig"]
    expected = ["apple", "fig", "pear"]
    assert bubble_sort(data) == expected
    assert selection_sort(data) == expected
    assert insertion_sort(data) == expected
    assert merge_sort(data) == expected
    assert quick_sort(data) == expected
    assert pivot_first_quick_sort(data) == expected
    assert heap_sort(data) == expected