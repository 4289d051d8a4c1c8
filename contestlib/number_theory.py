"""Modular arithmetic, primes, factorisation and related number-theory tools."""

from __future__ import annotations

import itertools
import math
from typing import Callable, Sequence

DEFAULT_MODULUS = 998244353


class ModInt:
    """Integer modulo ``mod``; ``**`` raises to a power and ``/`` multiplies by an inverse."""

    __slots__ = ("value", "mod")

    def __init__(self, value: int = 0, mod: int = DEFAULT_MODULUS) -> None:
        if mod < 1:
            raise ValueError("modulus must be positive")
        self.mod = mod
        self.value = value % mod

    def _coerce(self, other):
        if isinstance(other, ModInt):
            if other.mod != self.mod:
                raise ValueError("operands have different moduli")
            return other.value
        if isinstance(other, int):
            return other % self.mod
        return NotImplemented

    def __add__(self, other):
        o = self._coerce(other)
        if o is NotImplemented:
            return o
        return ModInt(self.value + o, self.mod)

    __radd__ = __add__

    def __sub__(self, other):
        o = self._coerce(other)
        if o is NotImplemented:
            return o
        return ModInt(self.value - o, self.mod)

    def __rsub__(self, other):
        o = self._coerce(other)
        if o is NotImplemented:
            return o
        return ModInt(o - self.value, self.mod)

    def __mul__(self, other):
        o = self._coerce(other)
        if o is NotImplemented:
            return o
        return ModInt(self.value * o, self.mod)

    __rmul__ = __mul__

    def _inverse_of(self, o: int) -> int:
        try:
            return pow(o, -1, self.mod)
        except ValueError:
            raise ZeroDivisionError(f"{o} has no inverse modulo {self.mod}") from None

    def __truediv__(self, other):
        o = self._coerce(other)
        if o is NotImplemented:
            return o
        return ModInt(self.value * self._inverse_of(o), self.mod)

    def __rtruediv__(self, other):
        o = self._coerce(other)
        if o is NotImplemented:
            return o
        return ModInt(o * self._inverse_of(self.value), self.mod)

    def __pow__(self, exponent: int):
        if exponent < 0:
            return ModInt(pow(self._inverse_of(self.value), -exponent, self.mod), self.mod)
        return ModInt(pow(self.value, exponent, self.mod), self.mod)

    def __neg__(self):
        return ModInt(-self.value, self.mod)

    def __eq__(self, other) -> bool:
        if isinstance(other, ModInt):
            return self.mod == other.mod and self.value == other.value
        if isinstance(other, int):
            return self.value == other % self.mod
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self.value, self.mod))

    def __int__(self) -> int:
        return self.value

    def __repr__(self) -> str:
        return f"ModInt({self.value}, mod={self.mod})"


def sieve(n: int) -> list[int]:
    """Return the primes up to ``n`` in increasing order (linear sieve)."""
    if n < 2:
        return []
    composite = bytearray(n + 1)
    primes: list[int] = []
    for i in range(2, n + 1):
        if not composite[i]:
            primes.append(i)
        for p in primes:
            if i * p > n:
                break
            composite[i * p] = 1
            if i % p == 0:
                break
    return primes


def extended_gcd(a: int, b: int) -> tuple[int, int, int]:
    """Return ``(d, x, y)`` with ``d = gcd(a, b)`` and ``a*x + b*y = d``."""
    if b == 0:
        return a, 1, 0
    d, y, x = extended_gcd(b, a % b)
    y -= x * (a // b)
    return d, x, y


def mod_inverse(a: int, n: int) -> int:
    """Return the inverse of ``a`` modulo ``n``; ValueError when none exists."""
    if n < 1:
        raise ValueError("modulus must be positive")
    d, x, _ = extended_gcd(a % n, n)
    if d != 1:
        raise ValueError(f"{a} has no inverse modulo {n}")
    return x % n


def inverse_table(n: int, mod: int = 1_000_000_007) -> list[int]:
    """Return inverses of ``0..n-1`` modulo the prime ``mod`` (entry 0 is set to 1)."""
    if n < 0:
        raise ValueError("table size must not be negative")
    if n > mod:
        raise ValueError("table size must not exceed the modulus")
    inv = [1, 1]
    for i in range(2, n):
        inv.append((mod - mod // i) * inv[mod % i] % mod)
    return inv[:n]


def euler_phi(n: int) -> int:
    """Return how many of ``1..n`` are coprime to ``n``."""
    if n < 1:
        raise ValueError("n must be positive")
    ans = n
    i = 2
    while i * i <= n:
        if n % i == 0:
            ans = ans // i * (i - 1)
            while n % i == 0:
                n //= i
        i += 1
    if n > 1:
        ans = ans // n * (n - 1)
    return ans


def phi_table(n: int) -> list[int]:
    """Return Euler's totient of ``0..n`` (entry 0 is 0)."""
    if n < 0:
        raise ValueError("n must not be negative")
    phi = [0] * (n + 1)
    if n >= 1:
        phi[1] = 1
    for i in range(2, n + 1):
        if phi[i]:
            continue
        for j in range(i, n + 1, i):
            if not phi[j]:
                phi[j] = j
            phi[j] = phi[j] // i * (i - 1)
    return phi


_WITNESSES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37)


def is_prime(n: int) -> bool:
    """Miller-Rabin test; exact for all ``n`` below 3.3e24."""
    if n < 2:
        return False
    for p in _WITNESSES:
        if n % p == 0:
            return n == p
    d, s = n - 1, 0
    while d % 2 == 0:
        d //= 2
        s += 1
    for a in _WITNESSES:
        x = pow(a, d, n)
        if x in (1, n - 1):
            continue
        for _ in range(s - 1):
            x = x * x % n
            if x == n - 1:
                break
        else:
            return False
    return True


def pollard_rho(n: int) -> int:
    """Return a non-trivial factor of the composite number ``n``."""
    if n < 4 or is_prime(n):
        raise ValueError(f"{n} is not a composite number")
    if n % 2 == 0:
        return 2
    for c in itertools.count():
        x = y = 2
        d = 1
        while d == 1:
            x = (x * x + c) % n
            y = (y * y + c) % n
            y = (y * y + c) % n
            d = math.gcd(abs(x - y), n)
        if d != n:
            return d
    raise AssertionError("unreachable")


def factorize(n: int) -> dict[int, int]:
    """Return the prime factorisation of ``n`` as ``{prime: exponent}``."""
    if n < 1:
        raise ValueError("n must be positive")
    factors: dict[int, int] = {}
    pending = [n] if n > 1 else []
    while pending:
        m = pending.pop()
        if is_prime(m):
            factors[m] = factors.get(m, 0) + 1
        else:
            f = pollard_rho(m)
            pending.extend((f, m // f))
    return dict(sorted(factors.items()))


def _simpson(f: Callable[[float], float], a: float, b: float) -> float:
    c = a + (b - a) / 2
    return (f(a) + 4 * f(c) + f(b)) * (b - a) / 6.0


def _adaptive(f: Callable[[float], float], a: float, b: float, eps: float, whole: float) -> float:
    c = a + (b - a) / 2.0
    left = _simpson(f, a, c)
    right = _simpson(f, c, b)
    if abs(left + right - whole) <= 15.0 * eps:
        return left + right + (left + right - whole) / 15.0
    return _adaptive(f, a, c, eps / 2, left) + _adaptive(f, c, b, eps / 2, right)


def adaptive_simpson(
    f: Callable[[float], float], a: float, b: float, eps: float = 1e-10
) -> float:
    """Integrate ``f`` over ``[a, b]`` with adaptive Simpson's rule."""
    if eps <= 0:
        raise ValueError("eps must be positive")
    return _adaptive(f, a, b, eps, _simpson(f, a, b))


def crt(remainders: Sequence[int], moduli: Sequence[int]) -> int:
    """Return ``x`` in ``[0, M)`` with ``x = r_i (mod m_i)`` for pairwise coprime moduli."""
    if len(remainders) != len(moduli):
        raise ValueError("one remainder is needed per modulus")
    total = math.prod(moduli)
    x = 0
    for r, m in zip(remainders, moduli):
        w = total // m
        _, _, y = extended_gcd(m, w)
        x = (x + y * w * r) % total
    return x % total


def discrete_log(a: int, b: int, n: int) -> int | None:
    """Return the smallest ``x`` found with ``a**x = b (mod n)`` (baby-step giant-step).

    Returns None when there is no solution; ``a`` must be coprime to ``n``.
    """
    if n < 1:
        raise ValueError("modulus must be positive")
    m = math.isqrt(n) + 1
    v = mod_inverse(pow(a, m, n), n)
    seen = {1 % n: 0}
    e = 1
    for i in range(1, m + 1):
        e = e * a % n
        seen.setdefault(e, i)
    b %= n
    for i in range(m):
        if b in seen:
            return i * m + seen[b]
        b = b * v % n
    return None


def josephus(n: int, q: int) -> int:
    """Return the 1-based position of the survivor when every ``q``-th of ``n`` is removed."""
    if n < 1:
        raise ValueError("n must be positive")
    if q < 2:
        raise ValueError("q must be at least 2")
    d = 1
    end = (q - 1) * n
    while d <= end:
        d = (d * q - 1) // (q - 1) + 1
    return q * n + 1 - d