"""Maximum cardinality bipartite matching (Hopcroft-Karp)."""

from __future__ import annotations

from collections import deque
from typing import Iterable


def max_bipartite_matching(
    n_left: int, n_right: int, edges: Iterable[tuple[int, int]]
) -> list[tuple[int, int]]:
    """Return the pairs ``(left, right)`` of a maximum matching, sorted by left vertex."""
    if n_left < 0 or n_right < 0:
        raise ValueError("side sizes must not be negative")
    total = n_left + n_right
    adj: list[list[int]] = [[] for _ in range(n_left)]
    for u, v in edges:
        if not (0 <= u < n_left and 0 <= v < n_right):
            raise IndexError(f"edge ({u}, {v}) is outside the graph")
        adj[u].append(n_left + v)

    inf = total + 1
    link = [-1] * total
    dis = [-1] * total
    visited = [False] * total
    dist = inf

    def bfs() -> bool:
        nonlocal dist
        dist = inf
        for i in range(total):
            dis[i] = -1
        queue: deque[int] = deque()
        for i in range(n_left):
            if link[i] == -1:
                queue.append(i)
                dis[i] = 0
        while queue:
            u = queue.popleft()
            if dis[u] > dist:
                break
            for v in adj[u]:
                if dis[v] == -1:
                    dis[v] = dis[u] + 1
                    if link[v] == -1:
                        dist = dis[v]
                    else:
                        dis[link[v]] = dis[v] + 1
                        queue.append(link[v])
        return dist != inf

    def augment(root: int) -> bool:
        stack = [(root, 0)]
        chosen: list[int] = []
        while stack:
            u, k = stack[-1]
            advanced = False
            while k < len(adj[u]):
                v = adj[u][k]
                k += 1
                if visited[v] or dis[v] != dis[u] + 1:
                    continue
                visited[v] = True
                if link[v] != -1 and dis[v] == dist:
                    continue
                stack[-1] = (u, k)
                chosen.append(v)
                if link[v] == -1:
                    for (x, _), y in zip(stack, chosen):
                        link[x] = y
                        link[y] = x
                    return True
                stack.append((link[v], 0))
                advanced = True
                break
            if not advanced:
                stack.pop()
                if chosen:
                    chosen.pop()
        return False

    while bfs():
        for i in range(total):
            visited[i] = False
        for i in range(n_left):
            if link[i] == -1:
                augment(i)
    return [(u, link[u] - n_left) for u in range(n_left) if link[u] != -1]