"""Dijkstra's shortest paths and the minimum-effort grid path."""

from __future__ import annotations

import heapq
import math
from collections.abc import Iterable, Sequence


def dijkstra(
    graph: Sequence[Iterable[Sequence[float]]], source: int
) -> list[float]:
    """Shortest distances from ``source``; ``graph[u]`` lists ``(v, weight)`` pairs.

    Unreachable nodes get ``math.inf``.
    """
    adjacency = [[(v, w) for v, w in edges] for edges in graph]
    n = len(adjacency)
    if not 0 <= source < n:
        raise IndexError(f"source {source} out of range")
    for edges in adjacency:
        for v, w in edges:
            if not 0 <= v < n:
                raise ValueError(f"edge to unknown node {v}")
            if w < 0:
                raise ValueError("edge weights must not be negative")

    distances: list[float] = [math.inf] * n
    distances[source] = 0
    heap = [(0, source)]
    while heap:
        dist, node = heapq.heappop(heap)
        if dist > distances[node]:
            continue
        for neighbor, weight in adjacency[node]:
            candidate = dist + weight
            if candidate < distances[neighbor]:
                distances[neighbor] = candidate
                heapq.heappush(heap, (candidate, neighbor))
    return distances


def minimum_effort_path(heights: Sequence[Sequence[int]]) -> int:
    """Least possible largest step between neighbouring cells, top-left to bottom-right."""
    if not heights or not heights[0]:
        raise ValueError("the grid must not be empty")
    rows, cols = len(heights), len(heights[0])
    if any(len(row) != cols for row in heights):
        raise ValueError("all rows must have the same length")

    effort = [[math.inf] * cols for _ in range(rows)]
    effort[0][0] = 0
    heap = [(0, 0, 0)]
    while heap:
        current, i, j = heapq.heappop(heap)
        if current > effort[i][j]:
            continue
        if (i, j) == (rows - 1, cols - 1):
            return current
        for x, y in ((i - 1, j), (i, j + 1), (i + 1, j), (i, j - 1)):
            if 0 <= x < rows and 0 <= y < cols:
                step = max(current, abs(heights[x][y] - heights[i][j]))
                if step < effort[x][y]:
                    effort[x][y] = step
                    heapq.heappush(heap, (step, x, y))
    return int(effort[-1][-1])