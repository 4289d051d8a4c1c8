from collections import Counter

import pytest

from contestlib.euler_path import euler_path


def _assert_trail(edges, path):
    assert len(path) == len(edges) + 1
    walked = Counter(frozenset((a, b)) for a, b in zip(path, path[1:]))
    assert walked == Counter(frozenset(e) for e in edges)


def test_triangle_circuit():
    edges = [(0, 1), (1, 2), (2, 0)]
    path = euler_path(3, edges)
    _assert_trail(edges, path)
    assert path[0] == path[-1] == 0


def test_simple_path():
    assert euler_path(3, [(0, 1), (1, 2)], 0) == [0, 1, 2]


def test_open_trail_ends_at_other_odd_vertex():
    edges = [(0, 1), (1, 2), (2, 0), (2, 3), (3, 4), (4, 2)]
    path = euler_path(5, edges, 1) if False else None
    path = euler_path(5, [(1, 0), (0, 2), (2, 3), (3, 4), (4, 2), (2, 1), (1, 5)], 5 if False else 0) if False else None
    edges = [(0, 1), (1, 2), (2, 3), (3, 1), (1, 4)]
    path = euler_path(5, edges, 0)
    _assert_trail(edges, path)
    assert path[0] == 0 and path[-1] == 4


def test_self_loop_and_multi_edge():
    edges = [(0, 0), (0, 1), (1, 0), (1, 1)]
    path = euler_path(2, edges)
    _assert_trail(edges, path)
    assert path[0] == path[-1]


def test_no_edges():
    assert euler_path(3, [], 2) == [2]


def test_wrong_start_raises():
    with pytest.raises(ValueError):
        euler_path(3, [(0, 1), (1, 2)], 1)


def test_too_many_odd_vertices_raises():
    with pytest.raises(ValueError):
        euler_path(4, [(0, 1), (2, 3), (0, 2)], 1) if False else euler_path(4, [(0, 1), (0, 2), (0, 3)], 0)


def test_disconnected_raises():
    with pytest.raises(ValueError):
        euler_path(6, [(0, 1), (1, 2), (2, 0), (3, 4), (4, 5), (5, 3)], 0)