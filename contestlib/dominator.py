"""Dominator tree of a directed graph (Lengauer-Tarjan)."""

from __future__ import annotations

from typing import Iterable


def dominator_tree(n: int, edges: Iterable[tuple[int, int]], root: int) -> list[int]:
    """Return the immediate dominator of every vertex reachable from ``root``.

    The root and unreachable vertices get -1.
    """
    if not 0 <= root < n:
        raise IndexError(f"root {root} is outside 0..{n - 1}")
    adj: list[list[int]] = [[] for _ in range(n)]
    pred: list[list[int]] = [[] for _ in range(n)]
    for x, y in edges:
        if not (0 <= x < n and 0 <= y < n):
            raise IndexError(f"edge ({x}, {y}) has a vertex outside 0..{n - 1}")
        adj[x].append(y)
    for u in range(n):
        for v in adj[u]:
            pred[v].append(u)

    forest = list(range(n))
    label = list(range(n))
    parent = [-1] * n
    sdom = [-1] * n
    idom = [-1] * n
    ident = [-1] * n
    order: list[int] = []
    bucket: list[list[int]] = [[] for _ in range(n)]

    def visit(u: int, p: int) -> None:
        sdom[u] = u
        ident[u] = len(order)
        order.append(u)
        parent[u] = p

    visit(root, -1)
    nodes = [root]
    iters = [iter(adj[root])]
    while iters:
        for v in iters[-1]:
            if ident[v] == -1:
                visit(v, nodes[-1])
                nodes.append(v)
                iters.append(iter(adj[v]))
                break
        else:
            iters.pop()
            nodes.pop()

    def evaluate(u: int) -> int:
        path = []
        x = u
        while forest[x] != x:
            path.append(x)
            x = forest[x]
        for x in reversed(path):
            p = forest[x]
            if ident[sdom[label[p]]] < ident[sdom[label[x]]]:
                label[x] = label[p]
            forest[x] = forest[p]
        return label[u]

    for u in reversed(order[1:]):
        for v in pred[u]:
            if ident[v] != -1:
                e = evaluate(v)
                if ident[sdom[e]] < ident[sdom[u]]:
                    sdom[u] = sdom[e]
        bucket[sdom[u]].append(u)
        fa = parent[u]
        for v in bucket[fa]:
            pv = evaluate(v)
            idom[v] = fa if sdom[pv] == fa else pv
        bucket[fa].clear()
        forest[u] = fa

    for u in order[1:]:
        if idom[u] != sdom[u]:
            idom[u] = idom[idom[u]]
    return idom