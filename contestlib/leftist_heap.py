"""Mergeable min-heap based on a leftist tree."""

from __future__ import annotations

from typing import Any


class _Node:
    __slots__ = ("value", "left", "right", "dist")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.left: _Node | None = None
        self.right: _Node | None = None
        self.dist = 0


def _dist(node: _Node | None) -> int:
    return node.dist if node is not None else -1


def _merge(x: _Node | None, y: _Node | None) -> _Node | None:
    if x is None:
        return y
    if y is None:
        return x
    if x.value > y.value:
        x, y = y, x
    x.right = _merge(x.right, y)
    if _dist(x.left) < _dist(x.right):
        x.left, x.right = x.right, x.left
    x.dist = _dist(x.right) + 1
    return x


class LeftistHeap:
    """Min-heap supporting merging of two heaps in logarithmic time."""

    def __init__(self) -> None:
        self._root: _Node | None = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._root is not None

    def push(self, value: Any) -> None:
        """Add ``value`` to the heap."""
        self._root = _merge(self._root, _Node(value))
        self._size += 1

    def top(self) -> Any:
        """Return the smallest value."""
        if self._root is None:
            raise IndexError("top of an empty heap")
        return self._root.value

    def pop(self) -> Any:
        """Remove and return the smallest value."""
        root = self._root
        if root is None:
            raise IndexError("pop from an empty heap")
        self._root = _merge(root.left, root.right)
        self._size -= 1
        return root.value

    def merge(self, other: LeftistHeap) -> None:
        """Move every value of ``other`` into this heap, leaving ``other`` empty."""
        if other is self:
            raise ValueError("a heap cannot be merged with itself")
        self._root = _merge(self._root, other._root)
        self._size += other._size
        other._root = None
        other._size = 0