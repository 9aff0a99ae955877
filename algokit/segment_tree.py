"""Segment trees for range sums and alternating-parity range checks."""

from __future__ import annotations

from collections.abc import Iterable


def _check_index(n: int, index: int) -> None:
    if not 0 <= index < n:
        raise IndexError(f"index {index} out of range")


def _check_range(n: int, left: int, right: int) -> None:
    if left > right:
        raise ValueError(f"empty range [{left}, {right}]")
    if left < 0 or right >= n:
        raise IndexError(f"range [{left}, {right}] out of bounds")


def _nonempty(nums: Iterable[int]) -> list[int]:
    values = list(nums)
    if not values:
        raise ValueError("a segment tree needs at least one element")
    return values


class SumSegmentTree:
    """Recursive top-down segment tree answering range sums."""

    def __init__(self, nums: Iterable[int]) -> None:
        values = _nonempty(nums)
        self._n = len(values)
        self._tree = [0] * (4 * self._n)
        self._build(0, values, 0, self._n - 1)

    def __len__(self) -> int:
        return self._n

    def _build(self, node: int, values: list[int], lo: int, hi: int) -> None:
        if lo == hi:
            self._tree[node] = values[lo]
            return
        mid = (lo + hi) // 2
        self._build(2 * node + 1, values, lo, mid)
        self._build(2 * node + 2, values, mid + 1, hi)
        self._tree[node] = self._tree[2 * node + 1] + self._tree[2 * node + 2]

    def _update(self, node: int, index: int, value: int, lo: int, hi: int) -> None:
        if lo == hi:
            self._tree[node] = value
            return
        mid = (lo + hi) // 2
        if index <= mid:
            self._update(2 * node + 1, index, value, lo, mid)
        else:
            self._update(2 * node + 2, index, value, mid + 1, hi)
        self._tree[node] = self._tree[2 * node + 1] + self._tree[2 * node + 2]

    def _query(self, node: int, left: int, right: int, lo: int, hi: int) -> int:
        if right < lo or hi < left:
            return 0
        if left <= lo and hi <= right:
            return self._tree[node]
        mid = (lo + hi) // 2
        return self._query(2 * node + 1, left, right, lo, mid) + self._query(
            2 * node + 2, left, right, mid + 1, hi
        )

    def update(self, index: int, value: int) -> None:
        """Set the element at ``index`` to ``value``."""
        _check_index(self._n, index)
        self._update(0, index, value, 0, self._n - 1)

    def sum_range(self, left: int, right: int) -> int:
        """Sum of the elements from ``left`` to ``right`` inclusive."""
        _check_range(self._n, left, right)
        return self._query(0, left, right, 0, self._n - 1)


class ParitySegmentTree:
    """Answers whether every pair of neighbours in a range differs in parity."""

    def __init__(self, nums: Iterable[int]) -> None:
        values = _nonempty(nums)
        self._n = len(values)
        self._odd = [v & 1 for v in values]
        self._tree = [False] * (4 * self._n)
        self._build(0, 0, self._n - 1)

    def __len__(self) -> int:
        return self._n

    def _boundary_alternates(self, mid: int) -> bool:
        return self._odd[mid] != self._odd[mid + 1]

    def _build(self, node: int, lo: int, hi: int) -> None:
        if lo == hi:
            self._tree[node] = True
            return
        mid = (lo + hi) // 2
        self._build(2 * node + 1, lo, mid)
        self._build(2 * node + 2, mid + 1, hi)
        self._tree[node] = (
            self._tree[2 * node + 1]
            and self._tree[2 * node + 2]
            and self._boundary_alternates(mid)
        )

    def _query(self, node: int, left: int, right: int, lo: int, hi: int) -> bool:
        if right < lo or hi < left:
            return True
        if left <= lo and hi <= right:
            return self._tree[node]
        mid = (lo + hi) // 2
        if mid < left:
            return self._query(2 * node + 2, left, right, mid + 1, hi)
        if right < mid + 1:
            return self._query(2 * node + 1, left, right, lo, mid)
        return (
            self._boundary_alternates(mid)
            and self._query(2 * node + 1, left, right, lo, mid)
            and self._query(2 * node + 2, left, right, mid + 1, hi)
        )

    def holds_parity(self, left: int, right: int) -> bool:
        """True if neighbours in ``left .. right`` always differ in parity."""
        _check_range(self._n, left, right)
        return self._query(0, left, right, 0, self._n - 1)


class IterativeSumSegmentTree:
    """Bottom-up segment tree of size 2n answering range sums."""

    def __init__(self, nums: Iterable[int]) -> None:
        values = _nonempty(nums)
        self._n = len(values)
        self._tree = [0] * self._n + values
        for i in range(self._n - 1, 0, -1):
            self._tree[i] = self._tree[2 * i] + self._tree[2 * i + 1]

    def __len__(self) -> int:
        return self._n

    def update(self, index: int, value: int) -> None:
        """Set the element at ``index`` to ``value``."""
        _check_index(self._n, index)
        pos = index + self._n
        self._tree[pos] = value
        while pos > 1:
            self._tree[pos >> 1] = self._tree[pos] + self._tree[pos ^ 1]
            pos >>= 1

    def sum_range(self, left: int, right: int) -> int:
        """Sum of the elements from ``left`` to ``right`` inclusive."""
        _check_range(self._n, left, right)
        lo, hi = left + self._n, right + self._n
        total = 0
        while lo <= hi:
            if lo & 1:
                total += self._tree[lo]
                lo += 1
            if not hi & 1:
                total += self._tree[hi]
                hi -= 1
            lo >>= 1
            hi >>= 1
        return total