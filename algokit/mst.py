"""Minimum spanning trees over points with Manhattan distances."""

from __future__ import annotations

import heapq
import math
from collections.abc import Sequence

from algokit.dsu import DisjointSet


def _distance(a: Sequence[int], b: Sequence[int]) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def _as_points(points: Sequence[Sequence[int]]) -> list[tuple[int, int]]:
    result = []
    for point in points:
        if len(point) != 2:
            raise ValueError(f"a point needs two coordinates, got {point!r}")
        result.append((point[0], point[1]))
    return result


def min_cost_connect_points_kruskal(points: Sequence[Sequence[int]]) -> int:
    """Cost of connecting all points, by Kruskal's algorithm on a heap of edges."""
    pts = _as_points(points)
    n = len(pts)
    if n <= 1:
        return 0
    edges = [
        (_distance(pts[i], pts[j]), i, j)
        for i in range(n)
        for j in range(i + 1, n)
    ]
    heapq.heapify(edges)
    sets = DisjointSet(n)
    total = 0
    joined = 0
    while edges:
        dist, i, j = heapq.heappop(edges)
        if sets.union(i, j):
            total += dist
            joined += 1
            if joined == n - 1:
                break
    return total


def min_cost_connect_points_prim(points: Sequence[Sequence[int]]) -> int:
    """Cost of connecting all points, by Prim's algorithm with a priority queue."""
    pts = _as_points(points)
    n = len(pts)
    if n <= 1:
        return 0
    used = [False] * n
    best = [math.inf] * n
    best[0] = 0
    heap = [(0, 0)]
    total = 0
    for _ in range(n):
        while used[heap[0][1]]:
            heapq.heappop(heap)
        _, v = heapq.heappop(heap)
        used[v] = True
        total += best[v]
        for u in range(n):
            if used[u]:
                continue
            dist = _distance(pts[v], pts[u])
            if dist < best[u]:
                best[u] = dist
                heapq.heappush(heap, (dist, u))
    return int(total)


def min_cost_connect_points_dense(points: Sequence[Sequence[int]]) -> int:
    """Cost of connecting all points, by Prim's algorithm without a heap."""
    pts = _as_points(points)
    n = len(pts)
    if n <= 1:
        return 0
    best = [math.inf] * n
    in_tree = [False] * n
    current = 0
    total = 0
    for _ in range(n - 1):
        in_tree[current] = True
        nearest = None
        for j in range(n):
            if in_tree[j]:
                continue
            best[j] = min(best[j], _distance(pts[current], pts[j]))
            if nearest is None or best[j] < best[nearest]:
                nearest = j
        total += best[nearest]
        current = nearest
    return int(total)