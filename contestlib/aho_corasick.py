"""Aho-Corasick automaton for matching many patterns at once."""

from __future__ import annotations

from collections import deque


class AhoCorasick:
    """Multi-pattern matcher over a contiguous alphabet starting at ``base``.

    A pattern is stored with a non-zero value; a value of zero means that
    no pattern ends at that node.
    """

    def __init__(self, sigma_size: int = 26, base: str = "a") -> None:
        if sigma_size <= 0:
            raise ValueError("alphabet size must be positive")
        self.sigma_size = sigma_size
        self.base = base
        self._children: list[list[int]] = [[-1] * sigma_size]
        self._values: list[int] = [0]
        self._fail: list[int] = [0]
        self._last: list[int] = [0]
        self._built = False

    def _index(self, ch: str) -> int:
        c = ord(ch) - ord(self.base)
        if not 0 <= c < self.sigma_size:
            raise ValueError(f"character {ch!r} is outside the alphabet")
        return c

    def insert(self, word: str, value: int) -> None:
        """Store ``word`` with ``value``."""
        node = 0
        for ch in word:
            c = self._index(ch)
            child = self._children[node][c]
            if child == -1:
                child = len(self._values)
                self._children.append([-1] * self.sigma_size)
                self._values.append(0)
                self._fail.append(0)
                self._last.append(0)
                self._children[node][c] = child
            node = child
        self._values[node] = value
        self._built = False

    def contains(self, word: str, value: int) -> bool:
        """Return whether ``word`` is a path in the trie whose end holds ``value``."""
        node = 0
        for ch in word:
            node = self._children[node][self._index(ch)]
            if node == -1:
                return False
        return self._values[node] == value

    def build_failure_links(self) -> None:
        """Compute failure and output links for every node."""
        children, fail, last, values = self._children, self._fail, self._last, self._values
        queue: deque[int] = deque()
        fail[0] = 0
        for u in children[0]:
            if u != -1:
                fail[u] = 0
                last[u] = 0
                queue.append(u)
        while queue:
            r = queue.popleft()
            for c, u in enumerate(children[r]):
                if u == -1:
                    continue
                queue.append(u)
                v = fail[r]
                while v and children[v][c] == -1:
                    v = fail[v]
                target = children[v][c]
                fail[u] = 0 if target == -1 else target
                last[u] = fail[u] if values[fail[u]] else last[fail[u]]
        self._built = True

    def find(self, text: str) -> list[tuple[int, int]]:
        """Return ``(end_index, value)`` for every pattern occurrence in ``text``.

        At each position the longest match comes first, followed by the
        shorter ones reached through output links.
        """
        if not self._built:
            self.build_failure_links()
        children, fail, last, values = self._children, self._fail, self._last, self._values
        matches: list[tuple[int, int]] = []
        state = 0
        for i, ch in enumerate(text):
            c = self._index(ch)
            while state and children[state][c] == -1:
                state = fail[state]
            state = children[state][c]
            if state == -1:
                state = 0
            node = state if values[state] else last[state]
            while node:
                matches.append((i, values[node]))
                node = last[node]
        return matches