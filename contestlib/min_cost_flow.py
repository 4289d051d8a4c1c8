"""Minimum-cost maximum flow with shortest augmenting paths (SPFA)."""

from __future__ import annotations

import math
from collections import deque
from dataclasses import dataclass


@dataclass
class _CostEdge:
    source: int
    target: int
    cap: int
    cost: int
    flow: int = 0


class MinCostFlow:
    """Flow network with edge costs; edges ``i`` and ``i ^ 1`` are partners.

    ``paths`` records the vertex path of every augmentation made.
    """

    def __init__(self, n: int) -> None:
        if n <= 0:
            raise ValueError("a flow network needs at least one vertex")
        self.n = n
        self.edges: list[_CostEdge] = []
        self.paths: list[list[int]] = []
        self._graph: list[list[int]] = [[] for _ in range(n)]
        self._source: int | None = None
        self._sink: int | None = None

    def _check(self, v: int) -> None:
        if not 0 <= v < self.n:
            raise IndexError(f"vertex {v} is outside 0..{self.n - 1}")

    def add_edge(self, u: int, v: int, cap: int, cost: int) -> int:
        """Add an edge ``u -> v``; return its index in ``edges``."""
        self._check(u)
        self._check(v)
        if cap < 0:
            raise ValueError("capacity must not be negative")
        index = len(self.edges)
        self.edges.append(_CostEdge(u, v, cap, cost))
        self.edges.append(_CostEdge(v, u, 0, -cost))
        self._graph[u].append(index)
        self._graph[v].append(index + 1)
        return index

    def _augment(self, s: int, t: int) -> tuple[int, int] | None:
        n, edges = self.n, self.edges
        dist: list[float] = [math.inf] * n
        in_queue = [False] * n
        prev = [-1] * n
        amount: list[float] = [0] * n
        dist[s] = 0
        amount[s] = math.inf
        in_queue[s] = True
        queue = deque([s])
        while queue:
            u = queue.popleft()
            in_queue[u] = False
            for eid in self._graph[u]:
                e = edges[eid]
                if e.cap > e.flow and dist[e.target] > dist[u] + e.cost:
                    dist[e.target] = dist[u] + e.cost
                    prev[e.target] = eid
                    amount[e.target] = min(amount[u], e.cap - e.flow)
                    if not in_queue[e.target]:
                        in_queue[e.target] = True
                        queue.append(e.target)
        if dist[t] == math.inf:
            return None
        f = int(amount[t])
        path = [t]
        u = t
        while u != s:
            eid = prev[u]
            edges[eid].flow += f
            edges[eid ^ 1].flow -= f
            u = edges[eid].source
            path.append(u)
        path.reverse()
        self.paths.append(path)
        return f, int(dist[t]) * f

    def min_cost_flow(self, s: int, t: int) -> tuple[int, int]:
        """Send a maximum flow of minimum cost from ``s`` to ``t``; return ``(flow, cost)``."""
        self._check(s)
        self._check(t)
        if s == t:
            raise ValueError("source and sink must differ")
        self._source, self._sink = s, t
        flow = cost = 0
        while (step := self._augment(s, t)) is not None:
            flow += step[0]
            cost += step[1]
        return flow, cost

    def decompose(self) -> list[tuple[list[int], int]]:
        """Split the current flow into source-to-sink paths with their amounts.

        The flow on the edges is consumed in the process.
        """
        if self._source is None or self._sink is None:
            raise RuntimeError("min_cost_flow must be run before decompose")
        s, t, n, edges = self._source, self._sink, self.n, self.edges
        result: list[tuple[list[int], int]] = []
        while True:
            seen = [False] * n
            prev = [-1] * n
            amount: list[float] = [0] * n
            seen[s] = True
            amount[s] = math.inf
            queue = deque([s])
            while queue:
                u = queue.popleft()
                for eid in self._graph[u]:
                    e = edges[eid]
                    if e.flow > 0 and e.cap > 0 and not seen[e.target]:
                        seen[e.target] = True
                        prev[e.target] = eid
                        amount[e.target] = min(amount[u], e.flow)
                        queue.append(e.target)
            if not seen[t]:
                break
            f = int(amount[t])
            path = [t]
            u = t
            while u != s:
                eid = prev[u]
                edges[eid].flow -= f
                edges[eid ^ 1].flow += f
                u = edges[eid].source
                path.append(u)
            path.reverse()
            result.append((path, f))
        return result

    def clear_flow(self) -> None:
        """Reset every edge's flow and forget the recorded paths."""
        for e in self.edges:
            e.flow = 0
        self.paths.clear()