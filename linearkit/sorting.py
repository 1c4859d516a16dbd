"""Classic quadratic sorting algorithms: bubble, insertion and selection sort."""

from __future__ import annotations

from collections.abc import Iterable


def bubble_sort(values: Iterable[int]) -> list[int]:
    """Return the elements sorted ascending by repeatedly swapping adjacent pairs."""
    items = list(values)
    size = len(items)
    for done in range(size - 1):
        for j in range(size - 1 - done):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def insertion_sort(values: Iterable[int]) -> list[int]:
    """Return the elements sorted ascending by inserting each one into the sorted prefix."""
    items = list(values)
    for i in range(1, len(items)):
        current = items[i]
        j = i - 1
        while j >= 0 and items[j] > current:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = current
    return items


def selection_sort(values: Iterable[int]) -> list[int]:
    """Return the elements sorted ascending by selecting the minimum of each suffix."""
    items = list(values)
    size = len(items)
    for i in range(size - 1):
        smallest = min(range(i, size), key=items.__getitem__)
        if smallest != i:
            items[i], items[smallest] = items[smallest], items[i]
    return items