import math

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from algokit.shortest_path import dijkstra, minimum_effort_path


def test_dijkstra_small_graph():
    graph = [[(1, 4), (2, 1)], [(3, 1)], [(1, 2), (3, 5)], []]
    assert dijkstra(graph, 0) == [0, 3, 1, 4]


def test_dijkstra_unreachable_is_inf():
    graph = [[(1, 2)], [], []]
    result = dijkstra(graph, 0)
    assert result[2] == math.inf
    assert result[0] == 0


def test_dijkstra_negative_weight_raises():
    with pytest.raises(ValueError):
        dijkstra([[(1, -1)], []], 0)


def test_dijkstra_bad_source_raises():
    with pytest.raises(IndexError):
        dijkstra([[], []], 2)


def test_dijkstra_unknown_neighbor_raises():
    with pytest.raises(ValueError):
        dijkstra([[(5, 1)]], 0)


graphs = st.integers(1, 7).flatmap(
    lambda n: st.tuples(
        st.just(n),
        st.lists(
            st.tuples(st.integers(0, n - 1), st.integers(0, n - 1), st.integers(0, 20)),
            max_size=20,
        ),
    )
)


@settings(max_examples=80)
@given(graphs)
def test_dijkstra_distances_are_tight(data):
    n, edges = data
    graph = [[] for _ in range(n)]
    for u, v, w in edges:
        graph[u].append((v, w))
    dist = dijkstra(graph, 0)
    assert dist[0] == 0
    for u, v, w in edges:
        assert dist[v] <= dist[u] + w
    for v in range(1, n):
        if dist[v] != math.inf:
            assert any(b == v and dist[a] + w == dist[v] for a, b, w in edges)


def test_effort_examples():
    assert minimum_effort_path([[1, 2, 2], [3, 8, 2], [5, 3, 5]]) == 2
    assert minimum_effort_path([[1, 2, 3], [3, 8, 4], [5, 3, 5]]) == 1
    grid = [
        [1, 2, 1, 1, 1],
        [1, 2, 1, 2, 1],
        [1, 2, 1, 2, 1],
        [1, 2, 1, 2, 1],
        [1, 1, 1, 2, 1],
    ]
    assert minimum_effort_path(grid) == 0


def test_effort_single_cell():
    assert minimum_effort_path([[42]]) == 0


def test_effort_empty_grid_raises():
    with pytest.raises(ValueError):
        minimum_effort_path([])


def test_effort_ragged_grid_raises():
    with pytest.raises(ValueError):
        minimum_effort_path([[1, 2], [3]])


grids = st.integers(1, 5).flatmap(
    lambda cols: st.lists(
        st.lists(st.integers(0, 30), min_size=cols, max_size=cols),
        min_size=1,
        max_size=5,
    )
)


@settings(max_examples=80)
@given(grids)
def test_effort_bounded_by_border_path(grid):
    path = list(grid[0]) + [row[-1] for row in grid[1:]]
    border = max((abs(a - b) for a, b in zip(path, path[1:])), default=0)
    effort = minimum_effort_path(grid)
    assert 0 <= effort <= border


@settings(max_examples=40)
@given(st.integers(1, 5), st.integers(1, 5), st.integers(0, 100))
def test_effort_constant_grid(rows, cols, value):
    assert minimum_effort_path([[value] * cols for _ in range(rows)]) == 0