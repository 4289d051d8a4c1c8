"""Walsh-Hadamard (xor) transform, subset sums and subset convolution."""

from __future__ import annotations

from typing import Sequence

DEFAULT_MOD = 1_000_000_007


def _check_length(n: int) -> None:
    if n == 0 or n & (n - 1):
        raise ValueError("length must be a positive power of two")


def _butterflies(n: int):
    d = 1
    while d < n:
        for i in range(0, n, d << 1):
            for j in range(i, i + d):
                yield j, j + d
        d <<= 1


def xor_transform(values: Sequence[int], mod: int = DEFAULT_MOD) -> list[int]:
    """Return the Walsh-Hadamard transform of ``values`` modulo ``mod``."""
    a = [v % mod for v in values]
    _check_length(len(a))
    for lo, hi in _butterflies(len(a)):
        x, y = a[lo], a[hi]
        a[lo] = (x + y) % mod
        a[hi] = (x - y) % mod
    return a


def inverse_xor_transform(values: Sequence[int], mod: int = DEFAULT_MOD) -> list[int]:
    """Undo :func:`xor_transform`; ``mod`` must be odd so that 2 is invertible."""
    if mod % 2 == 0:
        raise ValueError("the modulus must be odd")
    half = (mod + 1) // 2
    a = [v % mod for v in values]
    _check_length(len(a))
    for lo, hi in _butterflies(len(a)):
        x, y = a[lo], a[hi]
        a[lo] = (x + y) * half % mod
        a[hi] = (x - y) * half % mod
    return a


def subset_sums(values: Sequence[int], mod: int = DEFAULT_MOD) -> list[int]:
    """Return ``s`` where ``s[i]`` is the sum of ``values[j]`` over subsets ``j`` of ``i``."""
    a = [v % mod for v in values]
    n = len(a)
    _check_length(n)
    for b in range(n.bit_length() - 1):
        bit = 1 << b
        for i in range(n):
            if i & bit:
                a[i] = (a[i] + a[i ^ bit]) % mod
    return a


def _subset_differences(values: list[int], mod: int) -> list[int]:
    a = values[:]
    for lo, hi in _butterflies(len(a)):
        a[hi] = (a[hi] - a[lo]) % mod
    return a


def subset_convolution(
    a: Sequence[int], b: Sequence[int], mod: int = DEFAULT_MOD
) -> list[int]:
    """Return ``c`` with ``c[k]`` the sum of ``a[i] * b[j]`` over disjoint ``i``, ``j``
    whose union is ``k``."""
    n = len(a)
    if len(b) != n:
        raise ValueError("both sequences must have the same length")
    _check_length(n)
    levels = n.bit_length()
    popcount = [bin(i).count("1") for i in range(n)]
    ranked_a = [[0] * n for _ in range(levels)]
    ranked_b = [[0] * n for _ in range(levels)]
    for i, (x, y) in enumerate(zip(a, b)):
        ranked_a[popcount[i]][i] = x % mod
        ranked_b[popcount[i]][i] = y % mod
    ranked_a = [subset_sums(row, mod) for row in ranked_a]
    ranked_b = [subset_sums(row, mod) for row in ranked_b]
    ranked_c = []
    for i in range(levels):
        row = [0] * n
        for j in range(i + 1):
            for k, (x, y) in enumerate(zip(ranked_a[j], ranked_b[i - j])):
                row[k] = (row[k] + x * y) % mod
        ranked_c.append(_subset_differences(row, mod))
    return [ranked_c[popcount[i]][i] for i in range(n)]