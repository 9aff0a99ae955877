"""Topological ordering with Kahn's algorithm."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence


def _kahn(n: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Kahn's algorithm; the order is shorter than ``n`` when there is a cycle."""
    if n < 0:
        raise ValueError("number of nodes must not be negative")
    indegree = [0] * n
    adjacency: list[list[int]] = [[] for _ in range(n)]
    for before, after in edges:
        if not (0 <= before < n and 0 <= after < n):
            raise ValueError(f"edge ({before}, {after}) out of range")
        adjacency[before].append(after)
        indegree[after] += 1

    queue = deque(node for node in range(n) if indegree[node] == 0)
    order = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for neighbor in adjacency[node]:
            indegree[neighbor] -= 1
            if indegree[neighbor] == 0:
                queue.append(neighbor)
    return order


def can_finish(num_courses: int, prerequisites: Iterable[Sequence[int]]) -> bool:
    """Whether all courses can be taken; ``[a, b]`` means ``b`` comes before ``a``."""
    edges = [(pre, course) for course, pre in prerequisites]
    return len(_kahn(num_courses, edges)) == num_courses


def topological_order(n: int, edges: Iterable[Sequence[int]]) -> list[int]:
    """Nodes ``0 .. n - 1`` ordered so that every edge ``(u, v)`` has ``u`` first."""
    order = _kahn(n, [(u, v) for u, v in edges])
    if len(order) != n:
        raise ValueError("graph contains a cycle")
    return order