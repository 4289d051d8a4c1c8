"""Maximum-weight perfect assignment (Kuhn-Munkres, BFS form)."""

from __future__ import annotations

import math
from collections import deque


class Hungarian:
    """Assignment of ``n`` rows to ``m`` columns maximising total weight.

    Missing pairs weigh zero.  The smaller side is padded with zero-weight
    vertices, so every row of the square problem is assigned.
    """

    def __init__(self, n: int, m: int) -> None:
        if n <= 0 or m <= 0:
            raise ValueError("both sides must have at least one vertex")
        self.rows = n
        self.cols = m
        self.size = max(n, m)
        self._weight = [[0] * self.size for _ in range(self.size)]
        self.assignment: list[int] = []

    def add_edge(self, u: int, v: int, w: int) -> None:
        """Set the weight of pairing row ``u`` with column ``v``."""
        if not 0 <= u < self.rows:
            raise IndexError(f"row {u} is outside 0..{self.rows - 1}")
        if not 0 <= v < self.cols:
            raise IndexError(f"column {v} is outside 0..{self.cols - 1}")
        self._weight[u][v] = w

    def solve(self):
        """Return the maximum total weight; ``assignment`` then maps each row to its
        column, or -1 when it went to a padding column."""
        n, g = self.size, self._weight
        lx = [max(row) for row in g]
        ly = [0] * n
        match_x = [-1] * n
        match_y = [-1] * n
        pre = [0] * n
        slack: list[float] = [math.inf] * n
        vis_x = [False] * n
        vis_y = [False] * n
        queue: deque[int] = deque()

        def check(v: int) -> bool:
            vis_y[v] = True
            if match_y[v] != -1:
                queue.append(match_y[v])
                vis_x[match_y[v]] = True
                return False
            while v != -1:
                u = pre[v]
                match_y[v] = u
                nxt = match_x[u]
                match_x[u] = v
                v = nxt
            return True

        def bfs(i: int) -> None:
            queue.clear()
            queue.append(i)
            vis_x[i] = True
            while True:
                while queue:
                    u = queue.popleft()
                    for v in range(n):
                        if vis_y[v]:
                            continue
                        delta = lx[u] + ly[v] - g[u][v]
                        if slack[v] >= delta:
                            pre[v] = u
                            if delta:
                                slack[v] = delta
                            elif check(v):
                                return
                a = min(slack[j] for j in range(n) if not vis_y[j])
                for j in range(n):
                    if vis_x[j]:
                        lx[j] -= a
                    if vis_y[j]:
                        ly[j] += a
                    else:
                        slack[j] -= a
                for j in range(n):
                    if not vis_y[j] and slack[j] == 0 and check(j):
                        return

        for i in range(n):
            slack[:] = [math.inf] * n
            vis_x[:] = [False] * n
            vis_y[:] = [False] * n
            bfs(i)

        self.assignment = [
            match_x[i] if match_x[i] < self.cols else -1 for i in range(self.rows)
        ]
        return sum(g[i][match_x[i]] for i in range(n))