"""Disjoint-set forest with path compression."""

from __future__ import annotations


class UnionFind:
    """Disjoint sets over ``0..n-1``."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("size must not be negative")
        self._parent = list(range(n))

    def __len__(self) -> int:
        return len(self._parent)

    def _check(self, i: int) -> None:
        if not 0 <= i < len(self._parent):
            raise IndexError(f"element {i} is outside 0..{len(self._parent) - 1}")

    def find(self, i: int) -> int:
        """Return the representative of the set holding ``i``."""
        self._check(i)
        parent = self._parent
        root = i
        while parent[root] != root:
            root = parent[root]
        while parent[i] != root:
            parent[i], i = root, parent[i]
        return root

    def same(self, i: int, j: int) -> bool:
        """Return whether ``i`` and ``j`` are in the same set."""
        return self.find(i) == self.find(j)

    def union(self, i: int, j: int) -> bool:
        """Merge the sets of ``i`` and ``j``; return False if already joined."""
        x, y = self.find(i), self.find(j)
        if x == y:
            return False
        self._parent[y] = x
        return True