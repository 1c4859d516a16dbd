from hypothesis import given
from hypothesis import strategies as st

from linearkit.sorting import bubble_sort, insertion_sort, selection_sort


def test_source_example_six_elements():
    data = [5, 58, 48, 6, 54, 47]
    expected = [5, 6, 47, 48, 54, 58]
    assert bubble_sort(data) == expected
    assert insertion_sort(data) == expected
    assert selection_sort(data) == expected


def test_source_example_five_elements():
    data = [9, 13, 6, 21, 17]
    expected = [6, 9, 13, 17, 21]
    assert bubble_sort(data) == expected
    assert insertion_sort(data) == expected
    assert selection_sort(data) == expected


def test_empty_and_single():
    assert bubble_sort([]) == []
    assert insertion_sort([]) == []
    assert selection_sort([]) == []
    assert bubble_sort([42]) == [42]
    assert insertion_sort([42]) == [42]
    assert selection_sort([42]) == [42]


def test_input_is_not_modified():
    data = [3, 1, 2]
    assert bubble_sort(data) == [1, 2, 3]
    assert insertion_sort(data) == [1, 2, 3]
    assert selection_sort(data) == [1, 2, 3]
    assert data == [3, 1, 2]


def test_accepts_any_iterable():
    expected = [1, 2, 2, 4]
    assert bubble_sort(iter((4, 2, 2, 1))) == expected
    assert insertion_sort(iter((4, 2, 2, 1))) == expected
    assert selection_sort(iter((4, 2, 2, 1))) == expected


@given(st.lists(st.integers(min_value=-1000, max_value=1000)))
def test_bubble_sort_matches_builtin_sorted(data):
    assert bubble_sort(data) == sorted(data)


@given(st.lists(st.integers(min_value=-1000, max_value=1000)))
def test_insertion_sort_matches_builtin_sorted(data):
    assert insertion_sort(data) == sorted(data)


@given(st.lists(st.integers(min_value=-1000, max_value=1000)))
def test_selection_sort_matches_builtin_sorted(data):
    assert selection_sort(data) == sorted(data)