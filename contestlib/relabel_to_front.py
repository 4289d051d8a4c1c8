"""Maximum flow with the relabel-to-front push-relabel algorithm."""

from __future__ import annotations

from contestlib.dinic import FlowEdge


class RelabelToFront:
    """Flow network on vertices ``0..n-1``; edges ``i`` and ``i ^ 1`` are partners."""

    def __init__(self, n: int) -> None:
        if n <= 0:
            raise ValueError("a flow network needs at least one vertex")
        self.n = n
        self.edges: list[FlowEdge] = []
        self._graph: list[list[int]] = [[] for _ in range(n)]
        self._height = [0] * n
        self._excess = [0] * n

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

    def _push(self, eid: int) -> None:
        e = self.edges[eid]
        delta = min(self._excess[e.source], e.cap - e.flow)
        e.flow += delta
        self.edges[eid ^ 1].flow -= delta
        self._excess[e.source] -= delta
        self._excess[e.target] += delta

    def _relabel(self, u: int) -> None:
        h = self._height
        best = 2 * self.n + 10
        for eid in self._graph[u]:
            e = self.edges[eid]
            if e.cap - e.flow > 0:
                best = min(best, h[e.target] + 1)
        h[u] = best

    def _discharge(self, u: int) -> None:
        out = self._graph[u]
        h = self._height
        pt = 0
        while self._excess[u] > 0:
            if pt == len(out):
                self._relabel(u)
                pt = 0
            else:
                e = self.edges[out[pt]]
                if e.cap > e.flow and h[u] == h[e.target] + 1:
                    self._push(out[pt])
                else:
                    pt += 1

    def max_flow(self, s: int, t: int) -> int:
        """Compute a maximum flow from ``s`` to ``t`` from scratch and return its value."""
        self._check(s)
        self._check(t)
        if s == t:
            raise ValueError("source and sink must differ")
        n = self.n
        self._height = [0] * n
        self._excess = [0] * n
        for e in self.edges:
            e.flow = 0
        self._height[s] = n
        for eid in self._graph[s]:
            e = self.edges[eid]
            if e.cap == 0:
                continue
            e.flow = e.cap
            self.edges[eid ^ 1].flow -= e.cap
            self._excess[e.target] += e.cap
            self._excess[s] -= e.cap

        order = [v for v in range(n) if v not in (s, t)]
        i = 0
        while i < len(order):
            u = order[i]
            old = self._height[u]
            self._discharge(u)
            if self._height[u] > old:
                order.pop(i)
                order.insert(0, u)
                i = 0
            i += 1
        return self._excess[t]

    def flows(self) -> list[tuple[int, int, int]]:
        """Return ``(source, target, flow)`` for every added edge carrying flow."""
        return [(e.source, e.target, e.flow) for e in self.edges[::2] if e.flow > 0]