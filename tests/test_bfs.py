import pytest

from cpkit.bfs import bfs


def _undirected(n, edges):
    adj = [[] for _ in range(n)]
    for u, v in edges:
        adj[u].append(v)
        adj[v].append(u)
    return adj


@pytest.fixture
def graph():
    # two components: {0..5} and {6, 7}
    return _undirected(8, [(0, 1), (0, 2), (1, 3), (2, 3), (3, 4), (4, 5), (1, 5), (6, 7)])


def test_source_has_zero_distance_and_no_parent(graph):
    result = bfs(graph, 0)
    assert result.distance[0] == 0
    assert result.parent[0] is None
    assert result.order[0] == 0


def test_edge_relaxation_invariant(graph):
    result = bfs(graph, 0)
    for u, neighbours in enumerate(graph):
        if result.distance[u] is None:
            continue
        for v in neighbours:
            assert result.distance[v] <= result.distance[u] + 1


def test_parent_is_one_step_closer(graph):
    result = bfs(graph, 0)
    for v, p in enumerate(result.parent):
        if p is not None:
            assert result.distance[v] == result.distance[p] + 1
            assert v in graph[p]


def test_unreachable_vertices(graph):
    result = bfs(graph, 0)
    assert not result.reached(6)
    assert result.distance[7] is None
    assert set(result.order) == {0, 1, 2, 3, 4, 5}
    with pytest.raises(ValueError):
        result.path_to(7)


def test_path_to_is_shortest_and_valid(graph):
    result = bfs(graph, 0)
    for target in range(6):
        path = result.path_to(target)
        assert path[0] == 0
        assert path[-1] == target
        assert len(path) == result.distance[target] + 1
        for a, b in zip(path, path[1:]):
            assert b in graph[a]


def test_order_is_nondecreasing_in_distance(graph):
    result = bfs(graph, 3)
    distances = [result.distance[v] for v in result.order]
    assert distances == sorted(distances)


def test_directed_graph_respects_direction():
    adj = [[1], [2], []]
    forward = bfs(adj, 0)
    assert forward.path_to(2) == [0, 1, 2]
    backward = bfs(adj, 2)
    assert not backward.reached(0)


def test_source_out_of_range_raises():
    with pytest.raises(IndexError):
        bfs([[], []], 5)