"""Link-cut tree over a forest of ``n`` nodes."""

from __future__ import annotations


class LinkCutTree:
    """Dynamic forest supporting link, cut and connectivity queries."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("size must not be negative")
        self.n = n
        self._parent = [-1] * n
        self._children = [[-1, -1] for _ in range(n)]
        self._reversed = [False] * n

    def _check(self, x: int) -> None:
        if not 0 <= x < self.n:
            raise IndexError(f"node {x} is outside 0..{self.n - 1}")

    def _is_root(self, x: int) -> bool:
        p = self._parent[x]
        return p == -1 or x not in self._children[p]

    def _push(self, x: int) -> None:
        if self._reversed[x]:
            ch = self._children[x]
            ch[0], ch[1] = ch[1], ch[0]
            for c in ch:
                if c != -1:
                    self._reversed[c] = not self._reversed[c]
            self._reversed[x] = False

    def _rotate(self, x: int) -> None:
        parent, children = self._parent, self._children
        y = parent[x]
        z = parent[y]
        d = 1 if children[y][1] == x else 0
        if not self._is_root(y):
            children[z][1 if children[z][1] == y else 0] = x
        parent[x] = z
        w = children[x][d ^ 1]
        children[y][d] = w
        if w != -1:
            parent[w] = y
        children[x][d ^ 1] = y
        parent[y] = x

    def _splay(self, x: int) -> None:
        path = [x]
        node = x
        while not self._is_root(node):
            node = self._parent[node]
            path.append(node)
        for node in reversed(path):
            self._push(node)
        parent, children = self._parent, self._children
        while not self._is_root(x):
            y = parent[x]
            if not self._is_root(y):
                z = parent[y]
                same_side = (children[y][0] == x) == (children[z][0] == y)
                self._rotate(y if same_side else x)
            self._rotate(x)

    def _access(self, x: int) -> None:
        last = -1
        y = x
        while y != -1:
            self._splay(y)
            self._children[y][1] = last
            last = y
            y = self._parent[y]
        self._splay(x)

    def _make_root(self, x: int) -> None:
        self._access(x)
        self._reversed[x] = not self._reversed[x]

    def find_root(self, x: int) -> int:
        """Return the root of the tree holding ``x``."""
        self._check(x)
        self._access(x)
        self._push(x)
        while self._children[x][0] != -1:
            x = self._children[x][0]
            self._push(x)
        self._splay(x)
        return x

    def link(self, x: int, y: int) -> bool:
        """Join the trees of ``x`` and ``y`` by the edge ``x``-``y``.

        Nothing happens, and False is returned, when they are already connected.
        """
        self._check(x)
        self._check(y)
        self._make_root(x)
        if self.find_root(y) == x:
            return False
        self._parent[x] = y
        return True

    def cut(self, x: int, y: int) -> bool:
        """Remove the edge above ``y`` in the tree rerooted at ``x``.

        When ``x`` and ``y`` are adjacent this removes the edge between them.
        Returns False when ``y`` has no parent edge to remove.
        """
        self._check(x)
        self._check(y)
        self._make_root(x)
        self._access(y)
        self._push(y)
        left = self._children[y][0]
        if left == -1:
            return False
        self._parent[left] = -1
        self._children[y][0] = -1
        return True

    def connected(self, x: int, y: int) -> bool:
        """Return whether ``x`` and ``y`` lie in the same tree."""
        self._check(x)
        self._check(y)
        self._make_root(x)
        return self.find_root(y) == x