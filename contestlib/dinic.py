"""Maximum flow with Dinic's blocking-flow algorithm."""

from __future__ import annotations

import math
from collections import deque
from dataclasses import dataclass


@dataclass
class FlowEdge:
    """A directed edge of a flow network with its capacity and current flow."""

    source: int
    target: int
    cap: int
    flow: int = 0

    @property
    def residual(self) -> int:
        """Capacity still available on this edge."""
        return self.cap - self.flow


class Dinic:
    """Flow network on vertices ``0..n-1``.

    ``edges`` holds every edge followed by its reverse twin, so edge ``i`` and
    edge ``i ^ 1`` are partners.
    """

    def __init__(self, n: int) -> None:
        if n <= 0:
            raise ValueError("a flow network needs at least one vertex")
        self.n = n
        self.edges: list[FlowEdge] = []
        self._graph: list[list[int]] = [[] for _ in range(n)]
        self._level: list[int] = []
        self._cur: list[int] = []

    def _check(self, v: int) -> None:
        if not 0 <= v < self.n:
            raise IndexError(f"vertex {v} is outside 0..{self.n - 1}")

    def add_edge(self, u: int, v: int, cap: int) -> int:
        """Add an edge ``u -> v`` with capacity ``cap``; return its index in ``edges``."""
        self._check(u)
        self._check(v)
        if cap < 0:
            raise ValueError("capacity must not be negative")
        index = len(self.edges)
        self.edges.append(FlowEdge(u, v, cap))
        self.edges.append(FlowEdge(v, u, 0))
        self._graph[u].append(index)
        self._graph[v].append(index + 1)
        return index

    def _bfs(self, s: int, t: int) -> bool:
        level = [-1] * self.n
        level[s] = 0
        queue = deque([s])
        edges = self.edges
        while queue:
            u = queue.popleft()
            for i in self._graph[u]:
                e = edges[i]
                if level[e.target] == -1 and e.cap > e.flow:
                    level[e.target] = level[u] + 1
                    queue.append(e.target)
        self._level = level
        return level[t] != -1

    def _dfs(self, x: int, t: int, a: float) -> int:
        if x == t or a == 0:
            return int(a) if x == t and a != math.inf else (a if a == 0 else 0)
        edges, level, cur = self.edges, self._level, self._cur
        out = self._graph[x]
        flow = 0
        while cur[x] < len(out):
            i = out[cur[x]]
            e = edges[i]
            if level[x] + 1 == level[e.target]:
                f = self._dfs(e.target, t, min(a, e.cap - e.flow))
                if f > 0:
                    e.flow += f
                    edges[i ^ 1].flow -= f
                    flow += f
                    a -= f
                    if a == 0:
                        break
            cur[x] += 1
        return flow

    def max_flow(self, s: int, t: int) -> int:
        """Push as much flow as possible from ``s`` to ``t`` and return the amount added."""
        self._check(s)
        self._check(t)
        if s == t:
            raise ValueError("source and sink must differ")
        flow = 0
        while self._bfs(s, t):
            self._cur = [0] * self.n
            flow += self._dfs(s, t, math.inf)
        return flow

    def clear_flow(self) -> None:
        """Reset the flow on every edge to zero."""
        for e in self.edges:
            e.flow = 0