"""Disjoint-set union with path compression and union by rank."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


class DisjointSet:
    """Disjoint sets over the elements ``0 .. n - 1``."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("number of elements must not be negative")
        self._parent = list(range(n))
        self._rank = [0] * n

    def __len__(self) -> int:
        return len(self._parent)

    def find(self, i: int) -> int:
        """Return the representative of the set holding ``i``."""
        parent = self._parent
        if not 0 <= i < len(parent):
            raise IndexError(f"element {i} out of range")
        while parent[i] != i:
            parent[i] = parent[parent[i]]
            i = parent[i]
        return i

    def union(self, i: int, j: int) -> bool:
        """Join the sets of ``i`` and ``j``; return False if already joined."""
        i, j = self.find(i), self.find(j)
        if i == j:
            return False
        if self._rank[i] < self._rank[j]:
            i, j = j, i
        self._parent[j] = i
        if self._rank[i] == self._rank[j]:
            self._rank[i] += 1
        return True


def earliest_acquaintance(logs: Iterable[Sequence[int]], n: int) -> int:
    """Earliest timestamp at which all ``n`` people are connected, or -1."""
    entries = sorted(tuple(log) for log in logs)
    if len(entries) < n - 1:
        return -1
    sets = DisjointSet(n)
    groups = n
    for timestamp, a, b in entries:
        if sets.union(a, b):
            groups -= 1
            if groups == 1:
                return timestamp
    return -1


def count_provinces(matrix: Sequence[Sequence[int]]) -> int:
    """Number of connected groups in an adjacency matrix."""
    n = len(matrix)
    if n == 0:
        return 0
    sets = DisjointSet(n)
    groups = n
    for i in range(n - 1):
        for j in range(i + 1, n):
            if matrix[i][j] and sets.union(i, j):
                groups -= 1
    return groups