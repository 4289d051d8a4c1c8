"""Euler trail of an undirected multigraph (Hierholzer)."""

from __future__ import annotations

from typing import Sequence


def euler_path(n: int, edges: Sequence[tuple[int, int]], start: int = 0) -> list[int]:
    """Return the vertices of a trail from ``start`` using every edge exactly once.

    Raises ValueError when no such trail exists.
    """
    if not 0 <= start < n:
        raise IndexError(f"start {start} is outside 0..{n - 1}")
    adj: list[list[tuple[int, int]]] = [[] for _ in range(n)]
    degree = [0] * n
    for eid, (u, v) in enumerate(edges):
        if not (0 <= u < n and 0 <= v < n):
            raise IndexError(f"edge ({u}, {v}) has a vertex outside 0..{n - 1}")
        adj[u].append((v, eid))
        adj[v].append((u, eid))
        degree[u] += 1
        degree[v] += 1
    odd = [v for v in range(n) if degree[v] % 2]
    if len(odd) not in (0, 2):
        raise ValueError("more than two vertices have odd degree")
    if odd and start not in odd:
        raise ValueError("a trail must start at a vertex of odd degree")

    used = [False] * len(edges)
    pos = [0] * n
    stack: list[tuple[int, tuple[int, int] | None]] = [(start, None)]
    trail: list[tuple[int, int]] = []
    while stack:
        u, taken = stack[-1]
        while pos[u] < len(adj[u]) and used[adj[u][pos[u]][1]]:
            pos[u] += 1
        if pos[u] < len(adj[u]):
            v, eid = adj[u][pos[u]]
            used[eid] = True
            pos[u] += 1
            stack.append((v, (u, v)))
        else:
            stack.pop()
            if taken is not None:
                trail.append(taken)
    if len(trail) != len(edges):
        raise ValueError("the edges are not connected to the start vertex")
    trail.reverse()
    return [start] + [v for _, v in trail]