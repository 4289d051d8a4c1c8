"""Randomised balanced binary search tree with order statistics."""

from __future__ import annotations

import random
from typing import Iterator


class _Node:
    __slots__ = ("key", "priority", "children", "size")

    def __init__(self, key: int, priority: float) -> None:
        self.key = key
        self.priority = priority
        self.children: list[_Node | None] = [None, None]
        self.size = 1

    def maintain(self) -> None:
        self.size = 1 + sum(child.size for child in self.children if child is not None)


def _size(node: _Node | None) -> int:
    return node.size if node is not None else 0


def _rotate(t: _Node, d: int) -> _Node:
    k = t.children[d ^ 1]
    assert k is not None
    t.children[d ^ 1] = k.children[d]
    k.children[d] = t
    t.maintain()
    k.maintain()
    return k


def _insert(t: _Node | None, key: int, priority: float) -> _Node:
    if t is None:
        return _Node(key, priority)
    d = 0 if key < t.key else 1
    child = _insert(t.children[d], key, priority)
    t.children[d] = child
    if child.priority > t.priority:
        t = _rotate(t, d ^ 1)
    t.maintain()
    return t


def _delete(t: _Node | None, key: int) -> tuple[_Node | None, bool]:
    if t is None:
        return None, False
    if key == t.key:
        left, right = t.children
        if left is None:
            return right, True
        if right is None:
            return left, True
        k = 1 if left.priority > right.priority else 0
        t = _rotate(t, k)
        t.children[k], removed = _delete(t.children[k], key)
    else:
        d = 0 if key < t.key else 1
        t.children[d], removed = _delete(t.children[d], key)
    t.maintain()
    return t, removed


class Treap:
    """Multiset of keys with k-th smallest and rank queries."""

    def __init__(self, seed: int | None = None) -> None:
        self._rng = random.Random(seed)
        self._root: _Node | None = None

    def __len__(self) -> int:
        return _size(self._root)

    def __contains__(self, key: int) -> bool:
        t = self._root
        while t is not None:
            if key == t.key:
                return True
            t = t.children[0 if key < t.key else 1]
        return False

    def __iter__(self) -> Iterator[int]:
        stack: list[_Node] = []
        t = self._root
        while stack or t is not None:
            while t is not None:
                stack.append(t)
                t = t.children[0]
            t = stack.pop()
            yield t.key
            t = t.children[1]

    def insert(self, key: int) -> None:
        """Insert ``key``; equal keys are kept as separate copies."""
        self._root = _insert(self._root, key, self._rng.random())

    def delete(self, key: int) -> bool:
        """Remove one copy of ``key``; return whether one was present."""
        self._root, removed = _delete(self._root, key)
        return removed

    def kth(self, k: int) -> int:
        """Return the ``k``-th smallest key, counting from 1."""
        t = self._root
        if not 1 <= k <= _size(t):
            raise IndexError(f"rank {k} is outside 1..{_size(t)}")
        while t is not None:
            left = _size(t.children[0])
            if k <= left:
                t = t.children[0]
            elif k == left + 1:
                return t.key
            else:
                k -= left + 1
                t = t.children[1]
        raise AssertionError("size bookkeeping is inconsistent")

    def rank(self, key: int) -> int:
        """Return one plus the number of stored keys smaller than ``key``."""
        smaller = 0
        t = self._root
        while t is not None:
            if key <= t.key:
                t = t.children[0]
            else:
                smaller += _size(t.children[0]) + 1
                t = t.children[1]
        return smaller + 1