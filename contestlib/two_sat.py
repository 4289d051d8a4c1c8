"""2-satisfiability via strongly connected components."""

from __future__ import annotations

from collections import deque


class TwoSat:
    """Clauses over boolean variables ``0..variables-1``.

    Literal ``(x, 1)`` means "x is true" and ``(x, 0)`` means "x is false".
    """

    def __init__(self, variables: int) -> None:
        if variables < 0:
            raise ValueError("variable count must not be negative")
        self.variables = variables
        self._adj: list[list[int]] = [[] for _ in range(2 * variables)]

    def _term(self, x: int, j: int) -> int:
        if not 0 <= x < self.variables:
            raise IndexError(f"variable {x} is outside 0..{self.variables - 1}")
        if j not in (0, 1):
            raise ValueError("literal value must be 0 or 1")
        return 2 * x + j

    def add_clause(self, x: int, i: int, y: int, j: int) -> None:
        """Require that ``x == i`` or ``y == j``."""
        tx, ty = self._term(x, i), self._term(y, j)
        self._adj[tx ^ 1].append(ty)
        self._adj[ty ^ 1].append(tx)

    def _components(self) -> tuple[list[int], list[list[int]]]:
        adj = self._adj
        n = len(adj)
        index = [-1] * n
        low = [0] * n
        on_stack = [False] * n
        stack: list[int] = []
        comps: list[list[int]] = []
        counter = 0
        for s in range(n):
            if index[s] != -1:
                continue
            index[s] = low[s] = counter
            counter += 1
            stack.append(s)
            on_stack[s] = True
            work = [(s, 0)]
            while work:
                u, k = work[-1]
                if k < len(adj[u]):
                    work[-1] = (u, k + 1)
                    v = adj[u][k]
                    if index[v] == -1:
                        index[v] = low[v] = counter
                        counter += 1
                        stack.append(v)
                        on_stack[v] = True
                        work.append((v, 0))
                    elif on_stack[v]:
                        low[u] = min(low[u], low[v])
                    continue
                if low[u] == index[u]:
                    comp = []
                    while True:
                        w = stack.pop()
                        on_stack[w] = False
                        comp.append(w)
                        if w == u:
                            break
                    comps.append(comp)
                work.pop()
                if work and on_stack[u]:
                    p = work[-1][0]
                    low[p] = min(low[p], low[u])
        belong = [-1] * n
        for c, comp in enumerate(comps):
            for u in comp:
                belong[u] = c
        return belong, comps

    def solve(self) -> list[bool] | None:
        """Return a satisfying assignment, or None when there is none."""
        belong, comps = self._components()
        if any(belong[2 * x] == belong[2 * x + 1] for x in range(self.variables)):
            return None
        k = len(comps)
        indegree = [0] * k
        dag: list[list[int]] = [[] for _ in range(k)]
        for u, targets in enumerate(self._adj):
            cu = belong[u]
            for v in targets:
                cv = belong[v]
                if cu != cv:
                    indegree[cv] += 1
                    dag[cu].append(cv)
        queue = deque(c for c in range(k) if indegree[c] == 0)
        order = []
        while queue:
            c = queue.popleft()
            order.append(c)
            for d in dag[c]:
                indegree[d] -= 1
                if indegree[d] == 0:
                    queue.append(d)
        value = [-1] * k
        for c in order:
            if value[c] != -1:
                continue
            value[c] = 0
            value[belong[comps[c][0] ^ 1]] = 1
        return [value[belong[2 * x + 1]] == 1 for x in range(self.variables)]