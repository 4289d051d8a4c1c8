import itertools
import random

import pytest

from contestlib.relabel_to_front import RelabelToFront


def _random_graph(seed, n=6, m=12):
    rng = random.Random(seed)
    edges = []
    while len(edges) < m:
        u, v = rng.randrange(n), rng.randrange(n)
        if u != v:
            edges.append((u, v, rng.randint(0, 9)))
    return edges


def _min_cut(n, edges, s, t):
    others = [v for v in range(n) if v not in (s, t)]
    best = None
    for r in range(len(others) + 1):
        for extra in itertools.combinations(others, r):
            side = {s, *extra}
            value = sum(c for u, v, c in edges if u in side and v not in side)
            best = value if best is None else min(best, value)
    return best


def _build(n, edges):
    net = RelabelToFront(n)
    for u, v, c in edges:
        net.add_edge(u, v, c)
    return net


@pytest.mark.parametrize("seed", range(8))
def test_max_flow_equals_min_cut(seed):
    edges = _random_graph(seed)
    net = _build(6, edges)
    assert net.max_flow(0, 5) == _min_cut(6, edges, 0, 5)


@pytest.mark.parametrize("seed", range(5))
def test_reported_flows_are_conserved(seed):
    edges = _random_graph(seed + 50)
    net = _build(6, edges)
    value = net.max_flow(0, 5)
    balance = [0] * 6
    for u, v, f in net.flows():
        assert f > 0
        balance[u] -= f
        balance[v] += f
    assert balance[5] == value
    assert all(balance[v] == 0 for v in range(1, 5))
    for e in net.edges[::2]:
        assert 0 <= e.flow <= e.cap


def test_repeated_runs_agree():
    edges = _random_graph(3)
    net = _build(6, edges)
    expected = _min_cut(6, edges, 0, 5)
    first = net.max_flow(0, 5)
    second = net.max_flow(0, 5)
    assert [first, second] == [expected, expected]


def test_errors():
    net = RelabelToFront(2)
    with pytest.raises(ValueError):
        net.max_flow(0, 0)
    with pytest.raises(IndexError):
        net.add_edge(0, 2, 1)
    with pytest.raises(ValueError):
        net.add_edge(0, 1, -3)