"""Merge sort, quicksort variants and radix sort."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Return the values in ascending order; equal values keep their order."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = len(items) // 2
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def quick_sort(values: Iterable[Any]) -> list[Any]:
    """Three-way quicksort around the middle element."""
    items = list(values)
    if len(items) <= 1:
        return items
    pivot = items[len(items) // 2]
    lower = [v for v in items if v < pivot]
    equal = [v for v in items if not v < pivot and not pivot < v]
    higher = [v for v in items if pivot < v]
    return quick_sort(lower) + equal + quick_sort(higher)


def _lomuto_partition(items: list[Any], low: int, high: int) -> int:
    pivot = items[high]
    store = low
    for j in range(low, high):
        if items[j] < pivot:
            items[store], items[j] = items[j], items[store]
            store += 1
    items[store], items[high] = items[high], items[store]
    return store


def quick_sort_lomuto(values: Iterable[Any]) -> list[Any]:
    """Quicksort with the last element as pivot (Lomuto partition)."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pivot = _lomuto_partition(items, low, high)
            pending.append((low, pivot - 1))
            pending.append((pivot + 1, high))
    return items


def radix_sort(values: Iterable[int]) -> list[int]:
    """Least-significant-digit radix sort of non-negative integers."""
    items = list(values)
    if any(v < 0 for v in items):
        raise ValueError("radix sort needs non-negative integers")
    if not items:
        return []
    largest = max(items)
    place = 1
    while largest // place > 0:
        buckets: list[list[int]] = [[] for _ in range(10)]
        for value in items:
            buckets[value // place % 10].append(value)
        items = [value for bucket in buckets for value in bucket]
        place *= 10
    return items


def height_checker(heights: Sequence[int]) -> int:
    """Number of positions where ``heights`` differs from its sorted order."""
    ordered = radix_sort(heights)
    return sum(1 for actual, expected in zip(heights, ordered) if actual != expected)