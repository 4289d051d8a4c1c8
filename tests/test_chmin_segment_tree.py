import random

import pytest

from contestlib.chmin_segment_tree import ChminSegmentTree


def test_matches_brute_force():
    rng = random.Random(21)
    n = 30
    values = [rng.randint(0, 100) for _ in range(n)]
    tree = ChminSegmentTree(values)
    model = list(values)
    for _ in range(500):
        left = rng.randrange(n)
        right = rng.randrange(left, n)
        op = rng.randrange(3)
        if op == 0:
            v = rng.randint(0, 100)
            tree.chmin(left, right, v)
            model[left:right + 1] = [min(x, v) for x in model[left:right + 1]]
        elif op == 1:
            assert tree.range_max(left, right) == max(model[left:right + 1])
        else:
            assert tree.range_sum(left, right) == sum(model[left:right + 1])


def test_sample_sequence():
    values = [1, 2, 3, 4, 5]
    tree = ChminSegmentTree(values)
    assert tree.range_max(0, 4) == max(values)
    assert tree.range_sum(0, 4) == sum(values)
    tree.chmin(2, 4, 3)
    expected = [1, 2, 3, 3, 3]
    assert tree.range_max(0, 4) == max(expected)
    assert tree.range_sum(0, 4) == sum(expected)
    assert [tree.range_sum(i, i) for i in range(5)] == expected


def test_chmin_with_larger_value_changes_nothing():
    values = [7, 3, 9]
    tree = ChminSegmentTree(values)
    tree.chmin(0, 2, 100)
    assert [tree.range_max(i, i) for i in range(3)] == values


def test_negative_values():
    values = [-5, -1, -8]
    tree = ChminSegmentTree(values)
    tree.chmin(0, 2, -6)
    assert [tree.range_sum(i, i) for i in range(3)] == [-6, -6, -8]
    assert tree.range_max(0, 2) == -6


def test_empty_values_rejected():
    with pytest.raises(ValueError):
        ChminSegmentTree([])


@pytest.mark.parametrize("left,right", [(-1, 1), (1, 3), (2, 1)])
def test_bad_range(left, right):
    tree = ChminSegmentTree([1, 2, 3])
    with pytest.raises(IndexError):
        tree.range_sum(left, right)