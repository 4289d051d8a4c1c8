"""Complex fast Fourier transform and floating-point polynomial multiplication."""

from __future__ import annotations

import cmath
import math
from typing import Sequence


def _bit_reverse(a: list) -> None:
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


def fft(values: Sequence[complex], inverse: bool = False) -> list[complex]:
    """Return the iterative Cooley-Tukey transform of ``values``.

    The forward transform uses the root ``exp(+2*pi*i/n)``; the inverse uses
    the conjugate root and divides by ``n``.  The length must be a power of two.
    """
    a = [complex(v) for v in values]
    n = len(a)
    if n == 0 or n & (n - 1):
        raise ValueError("length must be a positive power of two")
    _bit_reverse(a)
    pi = -math.pi if inverse else math.pi
    step = 1
    while step < n:
        alpha = pi / step
        for k in range(step):
            omega = cmath.exp(complex(0.0, alpha * k))
            for even in range(k, n, step << 1):
                odd = even + step
                t = omega * a[odd]
                a[odd] = a[even] - t
                a[even] += t
        step <<= 1
    if inverse:
        a = [v / n for v in a]
    return a


def multiply(a: Sequence[float], b: Sequence[float]) -> list[float]:
    """Return the coefficients of the product of two polynomials.

    Coefficients are listed from the constant term upwards.
    """
    if not a or not b:
        return []
    size = 2
    while size < len(a) + len(b):
        size <<= 1
    fa = fft(list(a) + [0.0] * (size - len(a)))
    fb = fft(list(b) + [0.0] * (size - len(b)))
    product = fft([x * y for x, y in zip(fa, fb)], inverse=True)
    return [v.real for v in product[: len(a) + len(b) - 1]]