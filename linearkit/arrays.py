"""Small operations on sequences of integers: reversing, summing, counting, sorting, inserting."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from typing import NamedTuple


class MinMax(NamedTuple):
    """Smallest and largest element of a sequence."""

    minimum: int
    maximum: int


class EvenOdd(NamedTuple):
    """Elements split by parity, each part in its original order."""

    even: list[int]
    odd: list[int]


def reverse_elements(values: Iterable[int]) -> list[int]:
    """Return the elements in reverse order."""
    return list(values)[::-1]


def sum_elements(values: Iterable[int]) -> int:
    """Return the sum of all elements."""
    return sum(values)


def copy_elements(values: Iterable[int]) -> list[int]:
    """Return a new list holding the same elements."""
    return list(values)


def count_duplicates(values: Iterable[int]) -> int:
    """Count the elements that have an equal element somewhere after them.

    A value occurring k times contributes k - 1 to the total.
    """
    items = list(values)
    return len(items) - len(set(items))


def unique_elements(values: Iterable[int]) -> list[int]:
    """Return the elements that occur exactly once, in their original order."""
    items = list(values)
    counts = Counter(items)
    return [item for item in items if counts[item] == 1]


def merge_descending(first: Sequence[int], second: Sequence[int]) -> list[int]:
    """Merge two sequences of the same length into one list sorted in descending order."""
    if len(first) != len(second):
        raise ValueError(
            f"sequences must have the same length, got {len(first)} and {len(second)}"
        )
    return sorted([*first, *second], reverse=True)


def frequencies(values: Iterable[int]) -> dict[int, int]:
    """Map each distinct element to its number of occurrences, in order of first appearance."""
    return dict(Counter(values))


def min_max(values: Iterable[int]) -> MinMax:
    """Return the smallest and largest element; raise ValueError for an empty input."""
    items = list(values)
    if not items:
        raise ValueError("min_max() of an empty sequence")
    return MinMax(min(items), max(items))


def split_even_odd(values: Iterable[int]) -> EvenOdd:
    """Separate even and odd elements, keeping their relative order."""
    even: list[int] = []
    odd: list[int] = []
    for item in values:
        (even if item % 2 == 0 else odd).append(item)
    return EvenOdd(even, odd)


def sort_ascending(values: Iterable[int]) -> list[int]:
    """Return the elements sorted in ascending order."""
    return sorted(values)


def sort_descending(values: Iterable[int]) -> list[int]:
    """Return the elements sorted in descending order."""
    return sorted(values, reverse=True)


def insert_sorted(values: Iterable[int], value: int) -> list[int]:
    """Insert value before the first element greater than it, or at the end."""
    items = list(values)
    position = next(
        (index for index, item in enumerate(items) if item > value), len(items)
    )
    items.insert(position, value)
    return items


def insert_at(values: Iterable[int], value: int, position: int) -> list[int]:
    """Insert value at a 1-based position, which may be one past the last element.

    Raises IndexError when the position is outside 1 .. len(values) + 1.
    """
    items = list(values)
    if position < 1 or position > len(items) + 1:
        raise IndexError(f"invalid position {position} for {len(items)} elements")
    items.insert(position - 1, value)
    return items