import pytest

from contestlib.ntt import MOD, ntt


def test_round_trip_restores_input():
    values = [5, 0, 17, 3, 99, 12, 1, 7]
    assert ntt(ntt(values), inverse=True) == values


def test_round_trip_reduces_modulo():
    values = [MOD + 1, -1, 2 * MOD, 4]
    assert ntt(ntt(values), inverse=True) == [v % MOD for v in values]


def test_impulse_transforms_to_ones():
    assert ntt([1, 0, 0, 0, 0, 0, 0, 0]) == [1] * 8


def test_pointwise_product_is_cyclic_convolution():
    fa = ntt([1, 2, 0, 0])
    fb = ntt([3, 4, 0, 0])
    product = ntt([x * y for x, y in zip(fa, fb)], inverse=True)
    assert product == [3, 10, 8, 0]


def test_transform_is_linear():
    a = [1, 2, 3, 4]
    b = [10, 20, 30, 40]
    summed = ntt([x + y for x, y in zip(a, b)])
    separate = [(x + y) % MOD for x, y in zip(ntt(a), ntt(b))]
    assert summed == separate


def test_single_value():
    assert ntt([MOD + 7]) == [7]


@pytest.mark.parametrize("values", [[], [1, 2, 3], [0] * 12])
def test_length_must_be_power_of_two(values):
    with pytest.raises(ValueError):
        ntt(values)