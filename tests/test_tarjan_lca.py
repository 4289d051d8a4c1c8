import pytest

from contestlib.tarjan_lca import offline_lca


def _ancestors(parent, v):
    chain = [v]
    while parent[v] != -1:
        v = parent[v]
        chain.append(v)
    return chain


def test_path_rooted_at_zero():
    n = 6
    edges = [(i, i + 1) for i in range(n - 1)]
    queries = [(u, v) for u in range(n) for v in range(n)]
    answers = offline_lca(n, edges, queries)
    assert answers == [min(u, v) for u, v in queries]


def test_star_leaves_meet_at_centre():
    edges = [(0, i) for i in range(1, 5)]
    assert offline_lca(5, edges, [(1, 2), (3, 4), (4, 4)]) == [0, 0, 4]


def test_binary_tree_answers_are_deepest_common_ancestor():
    n = 31
    parent = [-1] + [(i - 1) // 2 for i in range(1, n)]
    edges = [(parent[i], i) for i in range(1, n)]
    queries = [(u, v) for u in range(0, n, 3) for v in range(1, n, 4)]
    answers = offline_lca(n, edges, queries)
    for (u, v), a in zip(queries, answers):
        au, av = _ancestors(parent, u), _ancestors(parent, v)
        common = [x for x in au if x in av]
        assert a == common[0]


def test_missing_query_gives_none():
    assert offline_lca(2, [(0, 1)], [(None, 1), (0, 1)]) == [None, 0]


def test_bad_query_raises():
    with pytest.raises(IndexError):
        offline_lca(2, [(0, 1)], [(0, 3)])