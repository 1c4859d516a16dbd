"""Linear and binary search over sequences of integers."""

from __future__ import annotations

from collections.abc import Sequence


def linear_search(values: Sequence[int], target: int) -> int | None:
    """Return the index of the first element equal to target, or None if absent."""
    return next(
        (index for index, item in enumerate(values) if item == target), None
    )


def binary_search(
    values: Sequence[int], target: int, low: int = 0, high: int | None = None
) -> int | None:
    """Search values[low..high] (inclusive), which must be sorted ascending.

    Returns the index of an element equal to target, or None if none is found.
    """
    if high is None:
        high = len(values) - 1
    while low <= high:
        mid = low + (high - low) // 2
        item = values[mid]
        if item == target:
            return mid
        if item < target:
            low = mid + 1
        else:
            high = mid - 1
    return None