"""Binary heaps: a bounded min-heap, max-heap helpers, k-th largest and heap sort."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, MutableSequence, Sequence
from typing import Any


def _parent(i: int) -> int:
    return (i - 1) // 2


def _sift_down_max(heap: MutableSequence[Any], size: int, i: int) -> None:
    """Restore the max-heap property below ``i`` within the first ``size`` items."""
    while True:
        largest = i
        left, right = 2 * i + 1, 2 * i + 2
        if left < size and heap[left] > heap[largest]:
            largest = left
        if right < size and heap[right] > heap[largest]:
            largest = right
        if largest == i:
            return
        heap[i], heap[largest] = heap[largest], heap[i]
        i = largest


def _sift_up_max(heap: MutableSequence[Any], i: int) -> None:
    while i > 0 and heap[_parent(i)] < heap[i]:
        parent = _parent(i)
        heap[i], heap[parent] = heap[parent], heap[i]
        i = parent


def _check_k(size: int, k: int) -> None:
    if not 1 <= k <= size:
        raise ValueError(f"k must be between 1 and {size}, got {k}")


class MinHeap:
    """A min-heap holding at most ``capacity`` keys."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[Any] = []

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"MinHeap(capacity={self.capacity}, items={self._items!r})"

    def _check_index(self, i: int) -> None:
        if not 0 <= i < len(self._items):
            raise IndexError(f"heap index {i} out of range")

    def _bubble_up(self, i: int, *, to_root: bool = False) -> None:
        items = self._items
        while i > 0 and (to_root or items[_parent(i)] > items[i]):
            parent = _parent(i)
            items[i], items[parent] = items[parent], items[i]
            i = parent

    def _heapify(self, i: int) -> None:
        items = self._items
        size = len(items)
        while True:
            smallest = i
            left, right = 2 * i + 1, 2 * i + 2
            if left < size and items[left] < items[smallest]:
                smallest = left
            if right < size and items[right] < items[smallest]:
                smallest = right
            if smallest == i:
                return
            items[i], items[smallest] = items[smallest], items[i]
            i = smallest

    def insert(self, key: Any) -> bool:
        """Add ``key``; return False without change when the heap is full."""
        if len(self._items) >= self.capacity:
            return False
        self._items.append(key)
        self._bubble_up(len(self._items) - 1)
        return True

    def extract_min(self) -> Any:
        """Remove and return the smallest key."""
        if not self._items:
            raise IndexError("extract from an empty heap")
        last = self._items.pop()
        if not self._items:
            return last
        root = self._items[0]
        self._items[0] = last
        self._heapify(0)
        return root

    def decrease_key(self, i: int, new_value: Any) -> None:
        """Lower the key at position ``i`` to ``new_value``."""
        self._check_index(i)
        if new_value > self._items[i]:
            raise ValueError("new value is greater than the current key")
        self._items[i] = new_value
        self._bubble_up(i)

    def delete_key(self, i: int) -> Any:
        """Remove the key at position ``i`` and return it."""
        self._check_index(i)
        self._bubble_up(i, to_root=True)
        return self.extract_min()

    def peek(self) -> Any:
        """Return the smallest key without removing it."""
        if not self._items:
            raise IndexError("peek at an empty heap")
        return self._items[0]


def find_kth_largest_heap(nums: Iterable[Any], k: int) -> Any:
    """K-th largest value, keeping a min-heap of the k largest seen so far."""
    values = list(nums)
    _check_k(len(values), k)
    heap: list[Any] = []
    for num in values:
        heapq.heappush(heap, num)
        if len(heap) > k:
            heapq.heappop(heap)
    return heap[0]


def find_kth_largest_heapify(nums: Iterable[Any], k: int) -> Any:
    """K-th largest value, by building a max-heap and popping k - 1 times."""
    values = list(nums)
    _check_k(len(values), k)
    make_max_heap(values)
    size = len(values)
    for _ in range(k - 1):
        size -= 1
        values[0], values[size] = values[size], values[0]
        _sift_down_max(values, size, 0)
    return values[0]


def make_max_heap(values: MutableSequence[Any]) -> None:
    """Rearrange ``values`` in place into a max-heap."""
    size = len(values)
    for i in range(size // 2 - 1, -1, -1):
        _sift_down_max(values, size, i)


def push_max_heap(heap: MutableSequence[Any], value: Any) -> None:
    """Add ``value`` to a max-heap kept in a list."""
    heap.append(value)
    _sift_up_max(heap, len(heap) - 1)


def pop_max_heap(heap: MutableSequence[Any]) -> Any:
    """Remove and return the largest value of a max-heap kept in a list."""
    if not heap:
        raise IndexError("pop from an empty heap")
    heap[0], heap[-1] = heap[-1], heap[0]
    top = heap.pop()
    _sift_down_max(heap, len(heap), 0)
    return top


def heap_sort(values: Iterable[Any]) -> list[Any]:
    """Return the values in ascending order, sorted with a max-heap."""
    items = list(values)
    make_max_heap(items)
    for end in range(len(items) - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        _sift_down_max(items, end, 0)
    return items


def _build_by_insertion(items: list[Any]) -> None:
    for i in range(1, len(items)):
        _sift_up_max(items, i)


def heap_sort_iterative(values: Sequence[Any] | Iterable[Any]) -> list[Any]:
    """Heap sort that builds the heap by sifting up and sifts down with a loop."""
    items = list(values)
    _build_by_insertion(items)
    for end in range(len(items) - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        j = 0
        while True:
            child = 2 * j + 1
            if child >= end:
                break
            if child + 1 < end and items[child] < items[child + 1]:
                child += 1
            if items[j] < items[child]:
                items[j], items[child] = items[child], items[j]
                j = child
            else:
                break
    return items