"""An array-backed max-heap, heapify and heap sort."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


class MaxHeap:
    """A max-heap kept in a list, root first."""

    def __init__(self) -> None:
        self._items: list[int] = []

    def insert(self, value: int) -> None:
        """Add ``value`` and sift it up towards the root."""
        items = self._items
        items.append(value)
        index = len(items) - 1
        while index > 0:
            parent = (index - 1) // 2
            if items[parent] < items[index]:
                items[parent], items[index] = items[index], items[parent]
                index = parent
            else:
                return

    def delete_root(self) -> int | None:
        """Remove and return the root, or return None if the heap is empty.

        The last element replaces the root and sinks by swapping with the left
        child when it is larger, otherwise with the right child when that is
        larger.
        """
        items = self._items
        if not items:
            return None
        root = items[0]
        last = items.pop()
        if not items:
            return root
        items[0] = last
        size = len(items)
        i = 0
        while True:
            left, right = 2 * i + 1, 2 * i + 2
            if left < size and items[i] < items[left]:
                items[i], items[left] = items[left], items[i]
                i = left
            elif right < size and items[i] < items[right]:
                items[i], items[right] = items[right], items[i]
                i = right
            else:
                return root

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(list(self._items))


def heapify(values: list[int], size: int, index: int) -> None:
    """Sink ``values[index]`` within the first ``size`` elements (in place)."""
    while True:
        largest = index
        left, right = 2 * index + 1, 2 * index + 2
        if left < size and values[largest] < values[left]:
            largest = left
        if right < size and values[largest] < values[right]:
            largest = right
        if largest == index:
            return
        values[largest], values[index] = values[index], values[largest]
        index = largest


def build_max_heap(values: Iterable[int]) -> list[int]:
    """Return the values rearranged into a max-heap."""
    items = list(values)
    for index in range(len(items) // 2 - 1, -1, -1):
        heapify(items, len(items), index)
    return items


def heap_sort(values: Iterable[int]) -> list[int]:
    """Return the values in ascending order, sorted via a max-heap."""
    items = build_max_heap(values)
    for end in range(len(items) - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        heapify(items, end, 0)
    return items