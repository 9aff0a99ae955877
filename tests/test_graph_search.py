import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.graph_search import bfs, bfs_levels, dfs_iterative, dfs_recursive

DIAMOND = [[1, 2], [3], [3], [4], []]


@st.composite
def graphs(draw):
    n = draw(st.integers(min_value=1, max_value=12))
    adjacency = [
        draw(st.lists(st.integers(min_value=0, max_value=n - 1), max_size=4))
        for _ in range(n)
    ]
    start = draw(st.integers(min_value=0, max_value=n - 1))
    return adjacency, start


def _reachable(graph, start):
    seen = {start}
    frontier = [start]
    while frontier:
        node = frontier.pop()
        for nb in graph[node]:
            if nb not in seen:
                seen.add(nb)
                frontier.append(nb)
    return seen


def test_bfs_order_on_diamond():
    assert bfs(DIAMOND, 0) == [0, 1, 2, 3, 4]


def test_bfs_levels_on_diamond():
    assert bfs_levels(DIAMOND, 0) == [[0], [1, 2], [3], [4]]


def test_mapping_graph_with_missing_nodes():
    graph = {"a": ["b", "c"], "b": ["d"]}
    assert set(bfs(graph, "a")) == {"a", "b", "c", "d"}
    assert set(dfs_iterative(graph, "a")) == set(dfs_recursive(graph, "a"))


@pytest.mark.parametrize("search", [bfs, dfs_iterative, dfs_recursive])
def test_unreachable_nodes_excluded(search):
    graph = [[1], [0], [3], [2]]
    assert sorted(search(graph, 0)) == [0, 1]


@given(graphs())
def test_all_searches_visit_reachable_set_once(case):
    graph, start = case
    expected = _reachable(graph, start)
    for search in (bfs, dfs_iterative, dfs_recursive):
        order = search(graph, start)
        assert order[0] == start
        assert len(order) == len(set(order))
        assert set(order) == expected


@given(graphs())
def test_levels_flatten_to_bfs_order(case):
    graph, start = case
    levels = bfs_levels(graph, start)
    assert [node for level in levels for node in level] == bfs(graph, start)
    assert levels[0] == [start]
    for previous, level in zip(levels, levels[1:]):
        for node in level:
            assert any(node in graph[p] for p in previous)


@given(graphs())
def test_recursive_dfs_parents_come_first(case):
    graph, start = case
    order = dfs_recursive(graph, start)
    for i, node in enumerate(order[1:], start=1):
        assert any(node in graph[p] for p in order[:i])