"""Binary indexed (Fenwick) tree over 1-based positions."""

from __future__ import annotations


class FenwickTree:
    """Point updates and prefix sums over positions ``1..n``."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("size must not be negative")
        self.n = n
        self._tree = [0] * (n + 1)

    def __len__(self) -> int:
        return self.n

    def prefix_sum(self, b: int) -> int:
        """Return the sum of positions ``1..b``; zero when ``b`` is not positive."""
        if b > self.n:
            raise IndexError(f"position {b} is past the end ({self.n})")
        total = 0
        tree = self._tree
        while b > 0:
            total += tree[b]
            b -= b & -b
        return total

    def range_sum(self, a: int, b: int) -> int:
        """Return the sum of positions ``a..b`` inclusive."""
        if a < 1:
            raise IndexError("positions start at 1")
        if a > b + 1:
            raise ValueError("range start is after its end")
        return self.prefix_sum(b) - self.prefix_sum(a - 1)

    def add(self, k: int, v: int) -> None:
        """Add ``v`` to position ``k``."""
        if not 1 <= k <= self.n:
            raise IndexError(f"position {k} is outside 1..{self.n}")
        tree = self._tree
        while k <= self.n:
            tree[k] += v
            k += k & -k