"""Two-phase simplex for ``maximize c.x subject to A x <= b, x >= 0``."""

from __future__ import annotations

import math
from typing import Sequence

EPS = 1e-9


class LPSolver:
    """Linear program in inequality form, solved on a dictionary tableau."""

    def __init__(
        self, a: Sequence[Sequence[float]], b: Sequence[float], c: Sequence[float]
    ) -> None:
        if len(a) != len(b):
            raise ValueError("A must have one row per entry of b")
        if any(len(row) != len(c) for row in a):
            raise ValueError("every row of A must have one entry per entry of c")
        self._a = [[float(v) for v in row] for row in a]
        self._b = [float(v) for v in b]
        self._c = [float(v) for v in c]
        self.m = len(b)
        self.n = len(c)

    def _reset(self) -> None:
        m, n = self.m, self.n
        d = [[0.0] * (n + 2) for _ in range(m + 2)]
        for i in range(m):
            d[i][:n] = self._a[i]
            d[i][n] = -1.0
            d[i][n + 1] = self._b[i]
        for j in range(n):
            d[m][j] = -self._c[j]
        d[m + 1][n] = 1.0
        self._d = d
        self._basis = [n + i for i in range(m)]
        self._nonbasis = list(range(n)) + [-1]

    def _pivot(self, r: int, s: int) -> None:
        d, m, n = self._d, self.m, self.n
        inv = 1.0 / d[r][s]
        row_r = d[r]
        for i in range(m + 2):
            if i == r:
                continue
            row = d[i]
            factor = row[s] * inv
            for j in range(n + 2):
                if j != s:
                    row[j] -= row_r[j] * factor
        for j in range(n + 2):
            if j != s:
                row_r[j] *= inv
        for i in range(m + 2):
            if i != r:
                d[i][s] *= -inv
        row_r[s] = inv
        self._basis[r], self._nonbasis[s] = self._nonbasis[s], self._basis[r]

    def _entering(self, row: list[float], phase: int) -> int:
        nonbasis = self._nonbasis
        s = -1
        for j in range(self.n + 1):
            if phase == 2 and nonbasis[j] == -1:
                continue
            if s == -1 or row[j] < row[s] or (row[j] == row[s] and nonbasis[j] < nonbasis[s]):
                s = j
        return s

    def _simplex(self, phase: int) -> bool:
        d, m, n = self._d, self.m, self.n
        x = m + 1 if phase == 1 else m
        basis = self._basis
        while True:
            s = self._entering(d[x], phase)
            if s == -1 or d[x][s] > -EPS:
                return True
            r = -1
            for i in range(m):
                if d[i][s] < EPS:
                    continue
                if r == -1:
                    r = i
                    continue
                ratio_i = d[i][n + 1] / d[i][s]
                ratio_r = d[r][n + 1] / d[r][s]
                if ratio_i < ratio_r or (ratio_i == ratio_r and basis[i] < basis[r]):
                    r = i
            if r == -1:
                return False
            self._pivot(r, s)

    def solve(self) -> tuple[float, list[float] | None]:
        """Return ``(value, x)`` at an optimum.

        An infeasible program gives ``(-inf, None)`` and an unbounded one
        ``(inf, None)``.
        """
        self._reset()
        d, m, n = self._d, self.m, self.n
        if m:
            r = min(range(m), key=lambda i: d[i][n + 1])
            if d[r][n + 1] < -EPS:
                self._pivot(r, n)
                if not self._simplex(1) or d[m + 1][n + 1] < -EPS:
                    return -math.inf, None
                for i in range(m):
                    if self._basis[i] == -1:
                        s = -1
                        for j in range(n + 1):
                            if (
                                s == -1
                                or d[i][j] < d[i][s]
                                or (d[i][j] == d[i][s] and self._nonbasis[j] < self._nonbasis[s])
                            ):
                                s = j
                        self._pivot(i, s)
        if not self._simplex(2):
            return math.inf, None
        x = [0.0] * n
        for i in range(m):
            if self._basis[i] < n:
                x[self._basis[i]] = d[i][n + 1]
        return d[m][n + 1], x