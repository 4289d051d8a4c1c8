"""Maximum matching in a general graph (Edmonds' blossom algorithm)."""

from __future__ import annotations

from collections import deque
from typing import Iterable


def _augmenting_path(root: int, adj: list[list[int]], match: list[int]) -> tuple[list[int], int]:
    """Search for an augmenting path from ``root``.

    Returns the predecessor array and the free vertex the path ends at, or -1.
    """
    n = len(adj)
    belong = list(range(n))
    pt = [-1] * n
    tp = [False] * n
    used = [0] * n
    stamp = 0
    queue: deque[int] = deque([root])
    tp[root] = True

    def find(u: int) -> int:
        r = u
        while belong[r] != r:
            r = belong[r]
        while belong[u] != r:
            belong[u], u = r, belong[u]
        return r

    def lca(u: int, v: int) -> int:
        nonlocal stamp
        stamp += 1
        while True:
            u = find(u)
            used[u] = stamp
            if match[u] == -1:
                break
            u = pt[match[u]]
        while True:
            v = find(v)
            if used[v] == stamp:
                return v
            v = pt[match[v]]

    def contract(x: int, y: int, r: int) -> None:
        while find(y) != r:
            z = match[y]
            pt[y] = x
            if not tp[z]:
                tp[z] = True
                queue.append(z)
            belong[z] = r
            belong[y] = r
            x = z
            y = pt[z]

    while queue:
        u = queue.popleft()
        for v in adj[u]:
            if find(u) == find(v) or match[u] == v:
                continue
            if tp[v]:
                r = lca(u, v)
                contract(u, v, r)
                contract(v, u, r)
            elif pt[v] == -1:
                pt[v] = u
                if match[v] == -1:
                    return pt, v
                if not tp[match[v]]:
                    tp[match[v]] = True
                    queue.append(match[v])
    return pt, -1


def max_matching(n: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Return a maximum matching of the undirected graph on ``0..n-1``.

    Entry ``v`` is the vertex matched to ``v``, or -1 when ``v`` is free.
    """
    if n < 0:
        raise ValueError("vertex count must not be negative")
    adj: list[list[int]] = [[] for _ in range(n)]
    for x, y in edges:
        if not (0 <= x < n and 0 <= y < n):
            raise IndexError(f"edge ({x}, {y}) has a vertex outside 0..{n - 1}")
        adj[x].append(y)
        adj[y].append(x)
    match = [-1] * n
    for i in range(n):
        if match[i] != -1:
            continue
        pt, v = _augmenting_path(i, adj, match)
        while v != -1:
            pv = pt[v]
            ppv = match[pv]
            match[v] = pv
            match[pv] = v
            v = ppv
    return match