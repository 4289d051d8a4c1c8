import pytest

from contestlib.walsh import (
    DEFAULT_MOD,
    inverse_xor_transform,
    subset_convolution,
    subset_sums,
    xor_transform,
)


def test_xor_round_trip():
    values = [3, 1, 4, 1, 5, 9, 2, 6]
    assert inverse_xor_transform(xor_transform(values)) == values


def test_xor_round_trip_with_other_modulus():
    values = [10, 20, 30, 40]
    assert inverse_xor_transform(xor_transform(values, 97), 97) == [v % 97 for v in values]


def test_impulse_transforms_to_ones():
    assert xor_transform([1, 0, 0, 0]) == [1, 1, 1, 1]


def test_xor_convolution_through_transform():
    a = [1, 2, 3, 4, 5, 6, 7, 8]
    b = [8, 0, 1, 0, 2, 3, 0, 1]
    fa, fb = xor_transform(a), xor_transform(b)
    c = inverse_xor_transform([x * y for x, y in zip(fa, fb)])
    for k in range(len(a)):
        expected = sum(a[i] * b[i ^ k] for i in range(len(a))) % DEFAULT_MOD
        assert c[k] == expected


@pytest.mark.parametrize("size", [1, 2, 3, 4])
def test_subset_sums_of_ones_count_subsets(size):
    n = 1 << size
    result = subset_sums([1] * n)
    assert result == [2 ** bin(i).count("1") for i in range(n)]


def test_subset_sums_reduce_modulo():
    assert subset_sums([DEFAULT_MOD, DEFAULT_MOD + 1]) == [0, 1]


def test_subset_convolution_of_ones_counts_splits():
    n = 16
    result = subset_convolution([1] * n, [1] * n)
    assert result == [2 ** bin(k).count("1") for k in range(n)]


def test_subset_convolution_identity():
    a = [5, 3, 8, 1, 0, 2, 7, 9]
    unit = [1] + [0] * 7
    assert subset_convolution(a, unit) == a
    assert subset_convolution(unit, a) == a


def test_subset_convolution_is_commutative():
    a = [1, 4, 2, 8, 5, 7, 3, 6]
    b = [9, 1, 0, 3, 2, 2, 4, 1]
    assert subset_convolution(a, b) == subset_convolution(b, a)


def test_inverse_needs_odd_modulus():
    with pytest.raises(ValueError):
        inverse_xor_transform([1, 2], 10)


def test_lengths_must_match():
    with pytest.raises(ValueError):
        subset_convolution([1, 2], [1, 2, 3, 4])


@pytest.mark.parametrize("func", [xor_transform, subset_sums])
def test_length_must_be_power_of_two(func):
    with pytest.raises(ValueError):
        func([1, 2, 3])