"""Formal power series arithmetic modulo 998244353.

Series are lists of coefficients from the constant term upwards.  Functions
that take ``n`` return the first ``n`` coefficients of the result.
"""

from __future__ import annotations

from typing import Sequence

from contestlib.ntt import MOD, ntt

IMAG = 86583718  # a square root of -1 modulo MOD
_INV2 = (MOD + 1) // 2


def _check_terms(n: int) -> None:
    if n < 1:
        raise ValueError("the number of terms must be positive")


def _fit(f: Sequence[int], n: int) -> list[int]:
    """Reduce ``f`` modulo MOD and truncate or zero-pad it to ``n`` terms."""
    out = [v % MOD for v in f[:n]]
    out.extend([0] * (n - len(out)))
    return out


def poly_mul(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Return the product of two polynomials (all ``len(a) + len(b) - 1`` terms)."""
    if not a or not b:
        return []
    deg = len(a) + len(b) - 1
    size = 1
    while size < deg:
        size <<= 1
    fa = ntt(list(a) + [0] * (size - len(a)))
    fb = ntt(list(b) + [0] * (size - len(b)))
    return ntt([x * y % MOD for x, y in zip(fa, fb)], inverse=True)[:deg]


def poly_inv(f: Sequence[int], n: int) -> list[int]:
    """Return ``g`` with ``f * g = 1`` modulo ``x**n``; ``f[0]`` must be non-zero."""
    _check_terms(n)
    f = _fit(f, n)
    if f[0] == 0:
        raise ValueError("the constant term must be invertible")
    g = [pow(f[0], MOD - 2, MOD)]
    m = 1
    while m < n:
        m <<= 1
        t = [-v % MOD for v in _fit(poly_mul(f[:m], g), m)]
        t[0] = (t[0] + 2) % MOD
        g = _fit(poly_mul(g, t), m)
    return g[:n]


def poly_derivative(f: Sequence[int]) -> list[int]:
    """Return the derivative; it has one term fewer than ``f``."""
    return [v * i % MOD for i, v in enumerate(f[1:], start=1)]


def poly_integral(f: Sequence[int]) -> list[int]:
    """Return the integral with constant term 0; it has one term more than ``f``."""
    return [0] + [v * pow(i, MOD - 2, MOD) % MOD for i, v in enumerate(f, start=1)]


def poly_ln(f: Sequence[int], n: int) -> list[int]:
    """Return ``ln f`` modulo ``x**n``; ``f[0]`` must be 1."""
    _check_terms(n)
    f = _fit(f, n)
    if f[0] != 1:
        raise ValueError("the constant term must be 1")
    return _fit(poly_integral(poly_mul(poly_derivative(f), poly_inv(f, n))), n)


def poly_exp(f: Sequence[int], n: int) -> list[int]:
    """Return ``exp f`` modulo ``x**n``; ``f[0]`` must be 0."""
    _check_terms(n)
    f = _fit(f, n)
    if f[0] != 0:
        raise ValueError("the constant term must be 0")
    g = [1]
    m = 1
    while m < n:
        m <<= 1
        ln_g = poly_ln(g, m)
        t = [(fv - lv) % MOD for fv, lv in zip(_fit(f, m), ln_g)]
        t[0] = (t[0] + 1) % MOD
        g = _fit(poly_mul(g, t), m)
    return g[:n]


def poly_sqrt(f: Sequence[int], n: int) -> list[int]:
    """Return the square root with constant term 1 modulo ``x**n``; ``f[0]`` must be 1."""
    _check_terms(n)
    f = _fit(f, n)
    if f[0] != 1:
        raise ValueError("the constant term must be 1")
    g = [1]
    m = 1
    while m < n:
        m <<= 1
        q = _fit(poly_mul(_fit(f, m), poly_inv(g, m)), m)
        g = [(a + b) * _INV2 % MOD for a, b in zip(q, _fit(g, m))]
    return g[:n]


def poly_pow(f: Sequence[int], k: int) -> list[int]:
    """Return ``f**k`` truncated to ``len(f)`` terms; ``f[0]`` must be 1."""
    n = len(f)
    _check_terms(n)
    ln_f = poly_ln(f, n)
    return poly_exp([v * k % MOD for v in ln_f], n)


def _exp_pair(f: Sequence[int], n: int) -> tuple[list[int], list[int]]:
    _check_terms(n)
    a = [v * IMAG % MOD for v in _fit(f, n)]
    b = poly_exp(a, n)
    return b, poly_inv(b, n)


def poly_cos(f: Sequence[int], n: int) -> list[int]:
    """Return ``cos f`` modulo ``x**n``; ``f[0]`` must be 0."""
    b, c = _exp_pair(f, n)
    return [(x + y) * _INV2 % MOD for x, y in zip(b, c)]


def poly_sin(f: Sequence[int], n: int) -> list[int]:
    """Return ``sin f`` modulo ``x**n``; ``f[0]`` must be 0."""
    b, c = _exp_pair(f, n)
    inv_2i = pow(2 * IMAG % MOD, MOD - 2, MOD)
    return [(x - y) * inv_2i % MOD for x, y in zip(b, c)]


def poly_arcsin(f: Sequence[int], n: int) -> list[int]:
    """Return ``arcsin f`` modulo ``x**n``; ``f[0]`` must be 0."""
    _check_terms(n)
    f = _fit(f, n)
    if f[0] != 0:
        raise ValueError("the constant term must be 0")
    b = [-v % MOD for v in _fit(poly_mul(f, f), n)]
    b[0] = (b[0] + 1) % MOD
    c = poly_inv(poly_sqrt(b, n), n)
    return _fit(poly_integral(poly_mul(poly_derivative(f), c)), n)


def poly_arctan(f: Sequence[int], n: int) -> list[int]:
    """Return the integral of ``f' / (1 + f**2)`` modulo ``x**n``."""
    _check_terms(n)
    f = _fit(f, n)
    b = _fit(poly_mul(f, f), n)
    b[0] = (b[0] + 1) % MOD
    c = poly_inv(b, n)
    return _fit(poly_integral(poly_mul(poly_derivative(f), c)), n)