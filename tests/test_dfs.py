import pytest

from cpkit.bfs import bfs
from cpkit.dfs import Color, reachable, timestamps

GRAPHS = [
    [[1], [2], [], [0]],
    [[1, 2], [3], [3], []],
    [[1], [0], [3], [2], []],
    [[0]],
    [],
    [[1, 2], [0, 3], [0], [1, 4], [3]],
]


@pytest.mark.parametrize("adj", [g for g in GRAPHS if g])
def test_reachable_matches_bfs(adj):
    for start in range(len(adj)):
        result = bfs(adj, start)
        expected = {v for v in range(len(adj)) if result.reached(v)}
        assert reachable(adj, start) == expected


@pytest.mark.parametrize("adj", [g for g in GRAPHS if g])
def test_reachable_is_closed_under_edges(adj):
    seen = reachable(adj, 0)
    assert 0 in seen
    for v in seen:
        assert set(adj[v]) <= seen


def test_reachable_out_of_range():
    with pytest.raises(IndexError):
        reachable([[1], []], 5)


def test_reachable_long_path_no_recursion_limit():
    n = 5000
    adj = [[i + 1] for i in range(n - 1)] + [[]]
    assert len(reachable(adj, 0)) == n


@pytest.mark.parametrize("adj", GRAPHS)
def test_timestamps_form_permutation(adj):
    times = timestamps(adj)
    n = len(adj)
    assert sorted(times.time_in + times.time_out) == list(range(2 * n))
    assert all(c is Color.BLACK for c in times.color)


@pytest.mark.parametrize("adj", GRAPHS)
def test_intervals_are_nested_or_disjoint(adj):
    times = timestamps(adj)
    n = len(adj)
    for a in range(n):
        assert times.time_in[a] < times.time_out[a]
        for b in range(n):
            if a == b:
                continue
            ia, oa = times.time_in[a], times.time_out[a]
            ib, ob = times.time_in[b], times.time_out[b]
            nested = (ia < ib and ob < oa) or (ib < ia and oa < ob)
            disjoint = oa < ib or ob < ia
            assert nested or disjoint


def test_path_descendants_and_ancestry():
    adj = [[1], [2], []]
    times = timestamps(adj)
    assert times.time_in[0] == 0
    assert times.descendants(0) == 2
    assert times.descendants(2) == 0
    assert times.is_ancestor(0, 2)
    assert not times.is_ancestor(2, 0)


def test_descendant_count_equals_reachable_in_tree():
    adj = [[1, 2], [3, 4], [5], [], [], []]
    times = timestamps(adj)
    for v in range(len(adj)):
        assert times.descendants(v) == len(reachable(adj, v)) - 1