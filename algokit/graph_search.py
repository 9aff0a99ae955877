"""Breadth-first and depth-first traversal of adjacency-list graphs."""

from __future__ import annotations

from collections import deque
from collections.abc import Hashable, Iterable, Mapping, Sequence
from typing import Union

Graph = Union[Mapping[Hashable, Iterable[Hashable]], Sequence[Iterable[int]]]


def _neighbors(graph: Graph, node: Hashable) -> Iterable[Hashable]:
    if isinstance(graph, Mapping):
        return graph.get(node, ())
    return graph[node]  # type: ignore[index]


def bfs(graph: Graph, start: Hashable) -> list[Hashable]:
    """Nodes reachable from ``start`` in breadth-first order."""
    queue = deque([start])
    seen = {start}
    order = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for neighbor in _neighbors(graph, node):
            if neighbor not in seen:
                seen.add(neighbor)
                queue.append(neighbor)
    return order


def bfs_levels(graph: Graph, start: Hashable) -> list[list[Hashable]]:
    """Nodes reachable from ``start`` grouped by distance from it."""
    levels = []
    current = [start]
    seen = {start}
    while current:
        levels.append(current)
        following = []
        for node in current:
            for neighbor in _neighbors(graph, node):
                if neighbor not in seen:
                    seen.add(neighbor)
                    following.append(neighbor)
        current = following
    return levels


def dfs_iterative(graph: Graph, start: Hashable) -> list[Hashable]:
    """Nodes reachable from ``start``, in the order an explicit stack pops them."""
    stack = [start]
    seen = {start}
    order = []
    while stack:
        node = stack.pop()
        order.append(node)
        for neighbor in _neighbors(graph, node):
            if neighbor not in seen:
                seen.add(neighbor)
                stack.append(neighbor)
    return order


def dfs_recursive(graph: Graph, start: Hashable) -> list[Hashable]:
    """Nodes reachable from ``start`` in recursive depth-first preorder."""
    seen = {start}
    order: list[Hashable] = []

    def visit(node: Hashable) -> None:
        order.append(node)
        for neighbor in _neighbors(graph, node):
            if neighbor not in seen:
                seen.add(neighbor)
                visit(neighbor)

    visit(start)
    return order