"""Exchange sort (iterative and recursive) and merge sort."""

from __future__ import annotations

from collections.abc import Iterable


def bubble_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy using an exchange sort.

    Each pass fixes position ``i`` by swapping in any smaller later element.
    """
    items = list(values)
    for i in range(len(items) - 1):
        for j in range(i + 1, len(items)):
            if items[j] < items[i]:
                items[i], items[j] = items[j], items[i]
    return items


def _exchange_from(items: list[int], idx: int) -> None:
    if idx >= len(items) - 1:
        return
    for i in range(idx + 1, len(items)):
        if items[i] < items[idx]:
            items[i], items[idx] = items[idx], items[i]
    _exchange_from(items, idx + 1)


def bubble_sort_recursive(values: Iterable[int]) -> list[int]:
    """Return a sorted copy using the exchange sort expressed recursively."""
    items = list(values)
    _exchange_from(items, 0)
    return items


def _merge(left: list[int], right: list[int]) -> list[int]:
    merged: list[int] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy using top-down merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = (len(items) - 1) // 2 + 1
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))