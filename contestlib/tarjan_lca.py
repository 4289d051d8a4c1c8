"""Offline lowest common ancestors (Tarjan)."""

from __future__ import annotations

from typing import Sequence


def offline_lca(
    n: int,
    edges: Sequence[tuple[int, int]],
    queries: Sequence[tuple[int | None, int | None]],
) -> list[int | None]:
    """Answer LCA queries on the tree rooted at vertex 0.

    A query holding None gets None as its answer.
    """
    if n <= 0:
        raise ValueError("a tree needs at least one vertex")
    adj: list[list[int]] = [[] for _ in range(n)]
    for x, y in edges:
        if not (0 <= x < n and 0 <= y < n):
            raise IndexError(f"edge ({x}, {y}) has a vertex outside 0..{n - 1}")
        adj[x].append(y)
        adj[y].append(x)

    pending: list[list[tuple[int, int]]] = [[] for _ in range(n)]
    for i, (u, v) in enumerate(queries):
        if u is None or v is None:
            continue
        if not (0 <= u < n and 0 <= v < n):
            raise IndexError(f"query ({u}, {v}) has a vertex outside 0..{n - 1}")
        pending[u].append((v, i))
        pending[v].append((u, i))

    fa = list(range(n))

    def find(x: int) -> int:
        r = x
        while fa[r] != r:
            r = fa[r]
        while fa[x] != r:
            fa[x], x = r, fa[x]
        return r

    answers: list[int | None] = [None] * len(queries)
    visited = [False] * n
    stack = [(0, -1, iter(adj[0]))]
    while stack:
        u, p, it = stack[-1]
        for v in it:
            if v != p:
                stack.append((v, u, iter(adj[v])))
                break
        else:
            stack.pop()
            visited[u] = True
            for v, i in pending[u]:
                if visited[v]:
                    answers[i] = find(v)
            if p != -1:
                fa[find(u)] = find(p)
    return answers