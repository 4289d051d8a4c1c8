"""Number-theoretic transform modulo 998244353."""

from __future__ import annotations

from typing import Sequence

MOD = 998244353
ROOT = 3


def _bit_reverse(a: list[int]) -> None:
    n = len(a)
    j = 0
    for i in range(1, n):
        bit = n >> 1
        while j & bit:
            j ^= bit
            bit >>= 1
        j ^= bit
        if i < j:
            a[i], a[j] = a[j], a[i]


def ntt(values: Sequence[int], inverse: bool = False) -> list[int]:
    """Return the transform of ``values`` modulo ``MOD``.

    The length must be a power of two that divides ``MOD - 1``.
    """
    y = [v % MOD for v in values]
    n = len(y)
    if n == 0 or n & (n - 1):
        raise ValueError("length must be a positive power of two")
    if (MOD - 1) % n:
        raise ValueError(f"length {n} is too large for the modulus")
    _bit_reverse(y)
    h = 2
    while h <= n:
        wn = pow(ROOT, (MOD - 1) // h, MOD)
        if inverse:
            wn = pow(wn, MOD - 2, MOD)
        half = h >> 1
        for start in range(0, n, h):
            w = 1
            for k in range(start, start + half):
                u = y[k]
                t = w * y[k + half] % MOD
                y[k] = (u + t) % MOD
                y[k + half] = (u - t) % MOD
                w = w * wn % MOD
        h <<= 1
    if inverse:
        scale = pow(n, MOD - 2, MOD)
        y = [v * scale % MOD for v in y]
    return y