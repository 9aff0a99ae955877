"""Selection of the k-th element: randomised quickselect and median of medians."""

from __future__ import annotations

import random
from collections.abc import Iterable
from typing import Any


def _check_k(size: int, k: int) -> None:
    if not 1 <= k <= size:
        raise ValueError(f"k must be between 1 and {size}, got {k}")


def _partition(items: list[Any], low: int, high: int, pivot_index: int) -> int:
    """Put the pivot at its sorted position inside ``low .. high`` and return it."""
    items[pivot_index], items[high] = items[high], items[pivot_index]
    pivot = items[high]
    store = low
    for i in range(low, high):
        if items[i] < pivot:
            items[i], items[store] = items[store], items[i]
            store += 1
    items[high], items[store] = items[store], items[high]
    return store


def find_kth_largest(nums: Iterable[Any], k: int) -> Any:
    """K-th largest value, found by Hoare's selection with a random pivot."""
    items = list(nums)
    _check_k(len(items), k)
    target = len(items) - k
    left, right = 0, len(items) - 1
    while True:
        pos = _partition(items, left, right, random.randint(left, right))
        if pos == target:
            return items[pos]
        if target < pos:
            right = pos - 1
        else:
            left = pos + 1


def _median_of_group(group: list[Any]) -> Any:
    return sorted(group)[len(group) // 2]


def _select(items: list[Any], k: int) -> Any:
    if len(items) <= 5:
        return sorted(items)[k - 1]
    medians = [_median_of_group(items[i : i + 5]) for i in range(0, len(items), 5)]
    pivot = _select(medians, len(medians) // 2)

    lower = [v for v in items if v < pivot]
    if k <= len(lower):
        return _select(lower, k)
    equal = sum(1 for v in items if v == pivot)
    if k <= len(lower) + equal:
        return pivot
    higher = [v for v in items if pivot < v]
    return _select(higher, k - len(lower) - equal)


def kth_smallest(values: Iterable[Any], k: int) -> Any:
    """K-th smallest value (1-based) in worst-case linear time."""
    items = list(values)
    _check_k(len(items), k)
    return _select(items, k)