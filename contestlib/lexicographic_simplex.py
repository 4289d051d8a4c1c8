"""Two-phase full-tableau simplex for ``minimize c.x subject to A x <= b, x >= 0``.

Pivot rows are chosen by the lexicographic rule, which prevents cycling.
"""

from __future__ import annotations

import math
from typing import Sequence

EPS = 1e-10


def _norm(value: float) -> float:
    return 0.0 if abs(value) < EPS else value


class TableauSimplex:
    """Linear program converted to standard form with one slack per constraint."""

    def __init__(
        self, a: Sequence[Sequence[float]], b: Sequence[float], c: Sequence[float]
    ) -> None:
        m, n = len(b), len(c)
        if len(a) != m:
            raise ValueError("A must have one row per entry of b")
        if any(len(row) != n for row in a):
            raise ValueError("every row of A must have one entry per entry of c")
        self._variables = n
        self._a = [
            [float(v) for v in row] + [1.0 if k == i else 0.0 for k in range(m)]
            for i, row in enumerate(a)
        ]
        self._b = [float(v) for v in b]
        self._c = [float(v) for v in c] + [0.0] * m
        self._ta: list[list[float]] = []
        self._basis: list[int] = []
        self._m = m
        self._n = n + m

    def _pivot(self, r: int, s: int) -> None:
        ta = self._ta
        row_r = ta[r]
        inv = 1.0 / row_r[s]
        width = self._n + 1
        for j in range(width):
            row_r[j] *= inv
        for i in range(self._m + 1):
            if i == r:
                continue
            row = ta[i]
            co = row[s]
            for j in range(width):
                row[j] = _norm(row[j] - co * row_r[j])
        self._basis[r - 1] = s - 1

    def _phase2(self) -> bool:
        ta = self._ta
        self._m = len(ta) - 1
        self._n = len(ta[0]) - 1
        m, n = self._m, self._n
        while True:
            if n == 0:
                return True
            obj = ta[0]
            s = min(range(1, n + 1), key=lambda j: obj[j])
            if obj[s] > -EPS:
                return True
            r = -1
            for i in range(1, m + 1):
                if ta[i][s] <= EPS:
                    continue
                if r == -1:
                    r = i
                    continue
                for j in range(n + 1):
                    lhs = ta[i][j] / ta[i][s]
                    rhs = ta[r][j] / ta[r][s]
                    if lhs < rhs:
                        r = i
                        break
                    if lhs > rhs:
                        break
            if r == -1:
                return False
            self._pivot(r, s)

    def _phase1(self) -> bool:
        a = [row[:] for row in self._a]
        b = self._b[:]
        c = self._c
        m, n = len(b), len(c)
        for i in range(m):
            if b[i] < 0:
                b[i] = -b[i]
                a[i] = [-v for v in a[i]]
        ta = [[0.0] * (n + m + 1) for _ in range(m + 1)]
        for i in range(1, m + 1):
            ta[i][1:n + 1] = a[i - 1]
            ta[i][n + i] = 1.0
            ta[i][0] = b[i - 1]
            ta[0][0] -= b[i - 1]
        for j in range(1, n + 1):
            ta[0][j] -= sum(ta[i][j] for i in range(1, m + 1))
        self._ta = ta
        self._basis = [n + i for i in range(m)]
        self._m, self._n = m, n + m

        self._phase2()
        if -ta[0][0] > 0:
            return False

        original = len(c)
        while True:
            for i in range(1, self._m + 1):
                if self._basis[i - 1] >= original:
                    s = next((j for j in range(1, original + 1) if ta[i][j] != 0), -1)
                    if s == -1:
                        del ta[i]
                        del self._basis[i - 1]
                        self._m = len(ta) - 1
                    else:
                        self._pivot(i, s)
                    break
            else:
                break
        self._n = original
        for row in ta:
            del row[original + 1:]
        return True

    def solve(self) -> tuple[float, list[float] | None]:
        """Return ``(value, x)`` with ``x`` over the original variables.

        An infeasible program gives ``(inf, None)`` and an unbounded one
        ``(-inf, None)``.
        """
        if not self._phase1():
            return math.inf, None
        ta, c, basis = self._ta, self._c, self._basis
        n, m = self._n, self._m
        for j in range(1, n + 1):
            ta[0][j] += c[j - 1]
            for i in range(1, m + 1):
                ta[0][j] -= c[basis[i - 1]] * ta[i][j]
        for i in range(1, m + 1):
            ta[0][0] -= c[basis[i - 1]] * ta[i][0]
        if not self._phase2():
            return -math.inf, None
        x = [0.0] * self._n
        for i in range(self._m):
            x[basis[i]] = ta[i + 1][0]
        return -ta[0][0], x[:self._variables]