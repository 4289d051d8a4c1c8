import random

import pytest

from contestlib.union_find import UnionFind


def test_fresh_elements_are_their_own_sets():
    uf = UnionFind(5)
    assert [uf.find(i) for i in range(5)] == list(range(5))
    assert not uf.same(0, 1)


def test_union_is_transitive():
    uf = UnionFind(6)
    assert uf.union(0, 1)
    assert uf.union(1, 2)
    assert uf.same(0, 2)
    assert not uf.same(0, 3)
    assert not uf.union(2, 0)


def test_matches_brute_force_components():
    rng = random.Random(7)
    n = 40
    uf = UnionFind(n)
    label = list(range(n))
    for _ in range(60):
        a, b = rng.randrange(n), rng.randrange(n)
        merged = uf.union(a, b)
        assert merged == (label[a] != label[b])
        old, new = label[b], label[a]
        label = [new if x == old else x for x in label]
    for i in range(n):
        for j in range(n):
            assert uf.same(i, j) == (label[i] == label[j])


def test_out_of_range():
    uf = UnionFind(3)
    with pytest.raises(IndexError):
        uf.find(3)
    with pytest.raises(IndexError):
        uf.union(-1, 0)