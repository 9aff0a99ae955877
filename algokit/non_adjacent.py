"""Maximum sum of non-adjacent elements under point updates, via segment trees."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

MOD = 1_000_000_007
_NEG = -(10**18)

# best[x][y]: best sum over a segment where x tells whether its first element
# is taken and y whether its last element is taken.
_Best = tuple[tuple[int, int], tuple[int, int]]


def _leaf(value: int) -> _Best:
    return ((0, _NEG), (_NEG, value))


def _combine(left: _Best, right: _Best) -> _Best:
    def cell(x: int, y: int) -> int:
        return max(
            left[x][0] + right[0][y],
            left[x][1] + right[0][y],
            left[x][0] + right[1][y],
        )

    return ((cell(0, 0), cell(0, 1)), (cell(1, 0), cell(1, 1)))


def _overall(best: _Best) -> int:
    return max(best[0][0], best[0][1], best[1][0], best[1][1])


def _nonempty(nums: Iterable[int]) -> list[int]:
    values = list(nums)
    if not values:
        raise ValueError("at least one element is required")
    return values


class _Node:
    __slots__ = ("lo", "hi", "left", "right", "best")

    def __init__(self, values: Sequence[int], lo: int, hi: int) -> None:
        self.lo = lo
        self.hi = hi
        self.left: _Node | None = None
        self.right: _Node | None = None
        if lo < hi:
            mid = (lo + hi) // 2
            self.left = _Node(values, lo, mid)
            self.right = _Node(values, mid + 1, hi)
            self.best = _combine(self.left.best, self.right.best)
        else:
            self.best = _leaf(values[lo])

    def update(self, index: int, value: int) -> None:
        if index < self.lo or self.hi < index:
            return
        if self.left is None or self.right is None:
            self.best = _leaf(value)
            return
        self.left.update(index, value)
        self.right.update(index, value)
        self.best = _combine(self.left.best, self.right.best)


class NonAdjacentSumTree:
    """Tracks the best sum of a subsequence with no two neighbouring elements."""

    def __init__(self, nums: Iterable[int]) -> None:
        values = _nonempty(nums)
        self._n = len(values)
        self._root = _Node(values, 0, self._n - 1)

    def __len__(self) -> int:
        return self._n

    def update(self, index: int, value: int) -> None:
        """Set the element at ``index`` to ``value``."""
        if not 0 <= index < self._n:
            raise IndexError(f"index {index} out of range")
        self._root.update(index, value)

    def max_sum(self) -> int:
        """Best sum of non-adjacent elements; the empty choice counts as 0."""
        return _overall(self._root.best)


def maximum_sum_subsequence(
    nums: Iterable[int], queries: Iterable[Sequence[int]]
) -> int:
    """Sum, modulo 10**9 + 7, of the best non-adjacent sum after each update."""
    tree = NonAdjacentSumTree(nums)
    total = 0
    for index, value in queries:
        tree.update(index, value)
        total = (total + tree.max_sum()) % MOD
    return total


def maximum_sum_subsequence_flat(
    nums: Iterable[int], queries: Iterable[Sequence[int]]
) -> int:
    """Same answer as :func:`maximum_sum_subsequence`, on an array-based tree."""
    values = _nonempty(nums)
    n = len(values)
    tree: list[_Best] = [_leaf(0)] * (4 * n)

    def build(node: int, lo: int, hi: int) -> None:
        if lo == hi:
            tree[node] = _leaf(values[lo])
            return
        mid = lo + (hi - lo) // 2
        build(2 * node + 1, lo, mid)
        build(2 * node + 2, mid + 1, hi)
        tree[node] = _combine(tree[2 * node + 1], tree[2 * node + 2])

    def update(node: int, index: int, value: int, lo: int, hi: int) -> None:
        if lo == hi:
            tree[node] = _leaf(value)
            return
        mid = lo + (hi - lo) // 2
        if index <= mid:
            update(2 * node + 1, index, value, lo, mid)
        else:
            update(2 * node + 2, index, value, mid + 1, hi)
        tree[node] = _combine(tree[2 * node + 1], tree[2 * node + 2])

    build(0, 0, n - 1)
    total = 0
    for index, value in queries:
        if not 0 <= index < n:
            raise IndexError(f"index {index} out of range")
        update(0, index, value, 0, n - 1)
        total = (total + max(0, _overall(tree[0]))) % MOD
    return total