"""Prefix tree over a contiguous alphabet."""

from __future__ import annotations


class Trie:
    """Trie mapping words to integer values; zero marks an unused node."""

    def __init__(self, sigma_size: int = 26, base: str = "a") -> None:
        if sigma_size <= 0:
            raise ValueError("alphabet size must be positive")
        self.sigma_size = sigma_size
        self.base = base
        self._children: list[list[int]] = [[-1] * sigma_size]
        self._values: list[int] = [0]

    def _index(self, ch: str) -> int:
        c = ord(ch) - ord(self.base)
        if not 0 <= c < self.sigma_size:
            raise ValueError(f"character {ch!r} is outside the alphabet")
        return c

    def __len__(self) -> int:
        return len(self._values)

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
                self._children[node][c] = child
            node = child
        self._values[node] = value

    def contains(self, word: str, value: int) -> bool:
        """Return whether ``word`` is a path whose end node holds ``value``."""
        node = 0
        for ch in word:
            node = self._children[node][self._index(ch)]
            if node == -1:
                return False
        return self._values[node] == value