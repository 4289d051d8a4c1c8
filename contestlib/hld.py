"""Heavy-light decomposition of a rooted tree."""

from __future__ import annotations

from typing import Sequence


class HeavyLight:
    """Splits a tree into chains that follow the heaviest child.

    ``size[v]`` is the subtree size, ``parent[v]`` the parent (-1 at the root),
    ``chains`` lists each chain from top to bottom and ``position[v]`` is the
    pair ``(chain, index in chain)``.  Children are ordered by ``(size, vertex)``;
    the largest continues its parent's chain and the others start new chains in
    that order, numbered depth first.
    """

    def __init__(self, n: int, edges: Sequence[tuple[int, int]], root: int = 0) -> None:
        if not 0 <= root < n:
            raise IndexError(f"root {root} is outside 0..{n - 1}")
        if len(edges) != n - 1:
            raise ValueError("a tree on n vertices has n - 1 edges")
        adj: list[list[int]] = [[] for _ in range(n)]
        for x, y in edges:
            if not (0 <= x < n and 0 <= y < n):
                raise IndexError(f"edge ({x}, {y}) has a vertex outside 0..{n - 1}")
            adj[x].append(y)
            adj[y].append(x)

        parent = [-1] * n
        seen = [False] * n
        seen[root] = True
        order = [root]
        for u in order:
            for v in adj[u]:
                if not seen[v]:
                    seen[v] = True
                    parent[v] = u
                    order.append(v)
        if len(order) != n:
            raise ValueError("the edges do not form a connected tree")
        size = [1] * n
        for u in reversed(order[1:]):
            size[parent[u]] += size[u]

        chains: list[list[int]] = []
        position = [(0, 0)] * n
        stack: list[tuple[int, int | None]] = [(root, None)]
        while stack:
            u, chain = stack.pop()
            if chain is None:
                chains.append([])
                chain = len(chains) - 1
            chains[chain].append(u)
            position[u] = (chain, len(chains[chain]) - 1)
            kids = sorted((size[v], v) for v in adj[u] if v != parent[u])
            if kids:
                for _, v in reversed(kids[:-1]):
                    stack.append((v, None))
                stack.append((kids[-1][1], chain))

        self.root = root
        self.size = size
        self.parent = parent
        self.chains = chains
        self.position = position