"""Centroid decomposition of a tree, with a nearest-marked-vertex structure."""

from __future__ import annotations

import math
from typing import Iterable, Iterator, Sequence


class CentroidTree:
    """Centroid decomposition of a tree on ``0..n-1`` plus distance queries.

    ``parent[v]`` is the parent of ``v`` in the centroid tree (-1 at ``root``).
    """

    def __init__(self, n: int, edges: Sequence[tuple[int, int]]) -> None:
        if n <= 0:
            raise ValueError("a tree needs at least one vertex")
        if len(edges) != n - 1:
            raise ValueError("a tree on n vertices has n - 1 edges")
        adj: list[list[int]] = [[] for _ in range(n)]
        for x, y in edges:
            if not (0 <= x < n and 0 <= y < n):
                raise IndexError(f"edge ({x}, {y}) has a vertex outside 0..{n - 1}")
            adj[x].append(y)
            adj[y].append(x)
        self.n = n
        self._adj = adj

        depth = [-1] * n
        up0 = [-1] * n
        depth[0] = 0
        order = [0]
        for u in order:
            for v in adj[u]:
                if depth[v] == -1:
                    depth[v] = depth[u] + 1
                    up0[v] = u
                    order.append(v)
        if len(order) != n:
            raise ValueError("the edges do not form a connected tree")
        self.depth = depth
        self._up = [up0]
        for _ in range(1, max(1, n.bit_length())):
            prev = self._up[-1]
            self._up.append([prev[p] if p != -1 else -1 for p in prev])

        self.parent = [-1] * n
        self.root = -1
        removed = [False] * n
        size = [0] * n
        tmp_parent = [-1] * n
        work = [(0, -1)]
        while work:
            start, centroid_parent = work.pop()
            component = []
            tmp_parent[start] = -1
            stack = [start]
            while stack:
                u = stack.pop()
                component.append(u)
                for v in reversed(adj[u]):
                    if not removed[v] and v != tmp_parent[u]:
                        tmp_parent[v] = u
                        stack.append(v)
            for u in component:
                size[u] = 1
            for u in reversed(component):
                if tmp_parent[u] != -1:
                    size[tmp_parent[u]] += size[u]
            total = len(component)
            centre = component[0]
            for u in component:
                biggest = max(
                    (size[v] for v in adj[u] if not removed[v] and v != tmp_parent[u]),
                    default=0,
                )
                if u != start:
                    biggest = max(biggest, total - size[u])
                if biggest <= total // 2:
                    centre = u
                    break
            removed[centre] = True
            self.parent[centre] = centroid_parent
            if centroid_parent == -1:
                self.root = centre
            for v in reversed(adj[centre]):
                if not removed[v]:
                    work.append((v, centre))

    def _check(self, v: int) -> None:
        if not 0 <= v < self.n:
            raise IndexError(f"vertex {v} is outside 0..{self.n - 1}")

    def _lca(self, x: int, y: int) -> int:
        depth, up = self.depth, self._up
        if depth[x] < depth[y]:
            x, y = y, x
        gap = depth[x] - depth[y]
        for j, row in enumerate(up):
            if gap >> j & 1:
                x = row[x]
        if x == y:
            return x
        for row in reversed(up):
            if row[x] != row[y]:
                x, y = row[x], row[y]
        return up[0][x]

    def distance(self, u: int, v: int) -> int:
        """Return the number of tree edges between ``u`` and ``v``."""
        self._check(u)
        self._check(v)
        r = self._lca(u, v)
        return self.depth[u] + self.depth[v] - 2 * self.depth[r]

    def ancestors(self, u: int) -> Iterator[int]:
        """Yield ``u`` and then its ancestors in the centroid tree up to the root."""
        self._check(u)
        while u != -1:
            yield u
            u = self.parent[u]


class NearestMarked:
    """Distance from any vertex to the nearest marked vertex of a tree."""

    def __init__(self, tree: CentroidTree, initial: int | Iterable[int] | None = 0) -> None:
        self.tree = tree
        self._best: list[float] = [math.inf] * tree.n
        self._marked = False
        if initial is None:
            return
        for v in [initial] if isinstance(initial, int) else initial:
            self.mark(v)

    def mark(self, v: int) -> None:
        """Mark vertex ``v``."""
        tree = self.tree
        for u in tree.ancestors(v):
            self._best[u] = min(self._best[u], tree.distance(u, v))
        self._marked = True

    def nearest(self, v: int) -> int:
        """Return the distance from ``v`` to the closest marked vertex."""
        if not self._marked:
            raise ValueError("no vertex has been marked")
        tree = self.tree
        return int(min(self._best[u] + tree.distance(u, v) for u in tree.ancestors(v)))