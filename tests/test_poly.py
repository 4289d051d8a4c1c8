import pytest

from contestlib.ntt import MOD
from contestlib.poly import (
    poly_arcsin,
    poly_arctan,
    poly_cos,
    poly_derivative,
    poly_exp,
    poly_integral,
    poly_inv,
    poly_ln,
    poly_mul,
    poly_pow,
    poly_sin,
    poly_sqrt,
)

ZERO_START = [0, 1, 5, 7, 11, 2, 9, 4]
UNIT_START = [1, 3, 4, 1, 5, 9, 2, 6]
N = len(ZERO_START)


def _trunc(p, k):
    return ([v % MOD for v in p] + [0] * k)[:k]


def test_mul_small():
    assert poly_mul([1, 2], [3, 4]) == [3, 10, 8]


def test_mul_reduces_modulo():
    assert poly_mul([MOD - 1], [MOD - 1]) == [1]


def test_mul_empty():
    assert poly_mul([], [1, 2]) == []


def test_mul_commutes():
    assert poly_mul(ZERO_START, UNIT_START) == poly_mul(UNIT_START, ZERO_START)


def test_inverse_of_one_minus_x_is_geometric():
    assert poly_inv([1, MOD - 1], 6) == [1] * 6


def test_inverse_product_is_one():
    g = poly_inv(UNIT_START, N)
    assert _trunc(poly_mul(UNIT_START, g), N) == [1] + [0] * (N - 1)


def test_inverse_needs_invertible_constant():
    with pytest.raises(ValueError):
        poly_inv(ZERO_START, N)


def test_terms_must_be_positive():
    with pytest.raises(ValueError):
        poly_inv(UNIT_START, 0)


def test_integral_then_derivative_round_trip():
    integral = poly_integral(UNIT_START)
    assert len(integral) == len(UNIT_START) + 1
    assert integral[0] == 0
    assert poly_derivative(integral) == UNIT_START


def test_derivative_of_constant_is_empty():
    assert poly_derivative([MOD - 5]) == []


def test_exp_of_ln_round_trip():
    assert poly_exp(poly_ln(UNIT_START, N), N) == UNIT_START


def test_ln_of_exp_round_trip():
    assert poly_ln(poly_exp(ZERO_START, N), N) == ZERO_START


def test_exp_satisfies_differential_equation():
    e = poly_exp(ZERO_START, N)
    assert e[0] == 1
    expected = _trunc(poly_mul(poly_derivative(ZERO_START), e), N - 1)
    assert poly_derivative(e) == expected


def test_ln_requires_unit_constant():
    with pytest.raises(ValueError):
        poly_ln(ZERO_START, N)


def test_exp_requires_zero_constant():
    with pytest.raises(ValueError):
        poly_exp(UNIT_START, N)


def test_sqrt_squares_back():
    s = poly_sqrt(UNIT_START, N)
    assert _trunc(poly_mul(s, s), N) == UNIT_START


def test_sqrt_requires_unit_constant():
    with pytest.raises(ValueError):
        poly_sqrt([4, 1, 2], 3)


def test_pow_matches_repeated_product():
    cube = _trunc(poly_mul(poly_mul(UNIT_START, UNIT_START), UNIT_START), N)
    assert poly_pow(UNIT_START, 3) == cube


def test_sin_cos_pythagoras():
    s = poly_sin(ZERO_START, N)
    c = poly_cos(ZERO_START, N)
    total = [(x + y) % MOD for x, y in zip(_trunc(poly_mul(s, s), N), _trunc(poly_mul(c, c), N))]
    assert total == [1] + [0] * (N - 1)


def test_sin_derivative_is_cos_times_inner_derivative():
    s = poly_sin(ZERO_START, N)
    c = poly_cos(ZERO_START, N)
    assert poly_derivative(s) == _trunc(poly_mul(c, poly_derivative(ZERO_START)), N - 1)


def test_arctan_identity():
    g = poly_arctan(ZERO_START, N)
    sq = _trunc(poly_mul(ZERO_START, ZERO_START), N)
    sq[0] = (sq[0] + 1) % MOD
    lhs = _trunc(poly_mul(poly_derivative(g), sq), N - 1)
    assert lhs == _trunc(poly_derivative(ZERO_START), N - 1)
    assert g[0] == 0


def test_arcsin_identity():
    g = poly_arcsin(ZERO_START, N)
    dg = poly_derivative(g)
    one_minus = [-v % MOD for v in _trunc(poly_mul(ZERO_START, ZERO_START), N)]
    one_minus[0] = (one_minus[0] + 1) % MOD
    lhs = _trunc(poly_mul(poly_mul(dg, dg), one_minus), N - 1)
    df = poly_derivative(ZERO_START)
    assert lhs == _trunc(poly_mul(df, df), N - 1)


def test_arcsin_requires_zero_constant():
    with pytest.raises(ValueError):
        poly_arcsin(UNIT_START, N)