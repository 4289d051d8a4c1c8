"""Lagrange interpolation at consecutive points and coin-change counting."""

from __future__ import annotations

import math
from functools import reduce
from typing import Sequence

MOD = 1_000_000_007


def lagrange_interpolate(ys: Sequence[int], x: int, mod: int = MOD) -> int:
    """Return ``P(x) mod mod`` where ``P`` has degree below ``len(ys)`` and ``P(i) = ys[i-1]``.

    ``mod`` must be a prime larger than ``len(ys)``.
    """
    n = len(ys)
    if n == 0:
        raise ValueError("at least one value is needed")
    prefix = [1] * (n + 1)
    for i in range(1, n + 1):
        prefix[i] = prefix[i - 1] * ((x - i) % mod) % mod
    suffix = [1] * (n + 2)
    for i in range(n, 0, -1):
        suffix[i] = suffix[i + 1] * ((x - i) % mod) % mod
    factorial = [1] * n
    for i in range(1, n):
        factorial[i] = factorial[i - 1] * i % mod
    inv_factorial = [pow(f, mod - 2, mod) for f in factorial]
    result = 0
    for i, y in enumerate(ys, start=1):
        term = prefix[i - 1] * suffix[i + 1] % mod
        term = term * inv_factorial[n - i] % mod * inv_factorial[i - 1] % mod
        term = term * y % mod
        if (n - i) & 1:
            term = (mod - term) % mod
        result = (result + term) % mod
    return result


def count_representations(coins: Sequence[int], k: int) -> int:
    """Return, modulo ``MOD``, the number of ways to write ``k`` as an unordered sum of
    the coin values, each usable any number of times."""
    if not coins:
        raise ValueError("at least one coin value is needed")
    if any(c <= 0 for c in coins):
        raise ValueError("coin values must be positive")
    if k < 0:
        raise ValueError("k must not be negative")
    n = len(coins)
    period = reduce(math.lcm, coins)
    limit = n * period
    ways = [0] * (limit + 1)
    ways[0] = 1
    for c in coins:
        for i in range(c, limit + 1):
            ways[i] = (ways[i] + ways[i - c]) % MOD
    if k <= limit:
        return ways[k]
    ys = ways[k % period : limit : period]
    return lagrange_interpolate(ys, k // period + 1)