"""Eulerian paths in directed graphs by Hierholzer's algorithm."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Hashable, Iterable, Sequence
from itertools import pairwise


def valid_arrangement(pairs: Iterable[Sequence[Hashable]]) -> list[tuple[Hashable, Hashable]]:
    """Order the pairs so that each one ends where the next one starts."""
    edges = [(a, b) for a, b in pairs]
    if not edges:
        raise ValueError("at least one pair is required")

    adjacency: defaultdict[Hashable, list[Hashable]] = defaultdict(list)
    balance: defaultdict[Hashable, int] = defaultdict(int)
    for a, b in edges:
        adjacency[a].append(b)
        balance[a] += 1
        balance[b] -= 1
    start = next((v for v, d in balance.items() if d == 1), edges[0][0])

    path = []
    stack = [start]
    while stack:
        node = stack[-1]
        if adjacency.get(node):
            stack.append(adjacency[node].pop())
        else:
            path.append(stack.pop())
    return list(pairwise(reversed(path)))


def find_itinerary(
    tickets: Iterable[Sequence[str]], start: str = "JFK"
) -> list[str]:
    """Use every ticket once from ``start``, preferring the smallest destination."""
    graph: defaultdict[str, list[str]] = defaultdict(list)
    for source, destination in tickets:
        graph[source].append(destination)
    for destinations in graph.values():
        destinations.sort(reverse=True)

    route = []
    stack = [start]
    while stack:
        current = stack[-1]
        if graph.get(current):
            stack.append(graph[current].pop())
        else:
            route.append(stack.pop())
    return route[::-1]