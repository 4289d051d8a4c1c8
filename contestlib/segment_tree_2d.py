"""Two-dimensional segment tree: point add, rectangle sum."""

from __future__ import annotations


class SegmentTree2D:
    """Sums over an ``n`` by ``n`` grid indexed from 0."""

    def __init__(self, n: int) -> None:
        if n <= 0:
            raise ValueError("grid size must be positive")
        self.n = n
        self._sum = [[0] * (4 * n) for _ in range(4 * n)]

    def _check(self, *coords: int) -> None:
        for c in coords:
            if not 0 <= c < self.n:
                raise IndexError(f"coordinate {c} is outside 0..{self.n - 1}")

    def _path(self, target: int) -> list[int]:
        nodes = []
        o, lo, hi = 1, 0, self.n - 1
        while True:
            nodes.append(o)
            if lo == hi:
                return nodes
            mid = (lo + hi) // 2
            if target <= mid:
                o, hi = 2 * o, mid
            else:
                o, lo = 2 * o + 1, mid + 1

    def add(self, x: int, y: int, v: int) -> None:
        """Add ``v`` to cell ``(x, y)``."""
        self._check(x, y)
        y_path = self._path(y)
        for o1 in self._path(x):
            row = self._sum[o1]
            for o2 in y_path:
                row[o2] += v

    def _query_y(self, row: list[int], o: int, lo: int, hi: int, y1: int, y2: int) -> int:
        if y1 <= lo and hi <= y2:
            return row[o]
        mid = (lo + hi) // 2
        total = 0
        if y1 <= mid:
            total += self._query_y(row, 2 * o, lo, mid, y1, y2)
        if y2 > mid:
            total += self._query_y(row, 2 * o + 1, mid + 1, hi, y1, y2)
        return total

    def _query_x(self, o: int, lo: int, hi: int, x1: int, y1: int, x2: int, y2: int) -> int:
        if x1 <= lo and hi <= x2:
            return self._query_y(self._sum[o], 1, 0, self.n - 1, y1, y2)
        mid = (lo + hi) // 2
        total = 0
        if x1 <= mid:
            total += self._query_x(2 * o, lo, mid, x1, y1, x2, y2)
        if x2 > mid:
            total += self._query_x(2 * o + 1, mid + 1, hi, x1, y1, x2, y2)
        return total

    def query(self, x1: int, y1: int, x2: int, y2: int) -> int:
        """Return the sum over the rectangle ``[x1, x2] x [y1, y2]`` inclusive."""
        self._check(x1, y1, x2, y2)
        if x1 > x2 or y1 > y2:
            raise ValueError("rectangle corners are out of order")
        return self._query_x(1, 0, self.n - 1, x1, y1, x2, y2)