"""Suffix tree built online with Ukkonen's algorithm."""

from __future__ import annotations


class _Node:
    __slots__ = ("l", "r", "par", "link", "next")

    def __init__(self, l: int = 0, r: int = 0, par: int = -1) -> None:
        self.l = l
        self.r = r
        self.par = par
        self.link = -1
        self.next: dict[str, int] = {}

    def length(self) -> int:
        return self.r - self.l


class SuffixTree:
    """Suffix tree of ``text`` terminated by ``$``; node 0 is the root."""

    TERMINATOR = "$"

    def __init__(self, text: str) -> None:
        if self.TERMINATOR in text:
            raise ValueError("text must not contain the terminator '$'")
        self.text = text + self.TERMINATOR
        self._n = len(self.text)
        self._nodes = [_Node()]
        self._ptr = (0, 0)
        for pos in range(self._n):
            self._extend(pos)

    def _go(self, v: int, pos: int, l: int, r: int) -> tuple[int, int]:
        s, t = self.text, self._nodes
        while l < r:
            if pos == t[v].length():
                v = t[v].next.get(s[l], -1)
                pos = 0
                if v == -1:
                    return -1, 0
            else:
                if s[t[v].l + pos] != s[l]:
                    return -1, -1
                if r - l < t[v].length() - pos:
                    return v, pos + r - l
                l += t[v].length() - pos
                pos = t[v].length()
        return v, pos

    def _split(self, v: int, pos: int) -> int:
        s, t = self.text, self._nodes
        node = t[v]
        if pos == node.length():
            return v
        if pos == 0:
            return node.par
        new_id = len(t)
        middle = _Node(node.l, node.l + pos, node.par)
        t.append(middle)
        t[node.par].next[s[node.l]] = new_id
        middle.next[s[node.l + pos]] = v
        node.par = new_id
        node.l += pos
        return new_id

    def _get_link(self, v: int) -> int:
        t = self._nodes
        if t[v].link != -1:
            return t[v].link
        if t[v].par == -1:
            return 0
        to = self._get_link(t[v].par)
        start = t[v].l + (1 if t[v].par == 0 else 0)
        t[v].link = self._split(*self._go(to, t[to].length(), start, t[v].r))
        return t[v].link

    def _extend(self, pos: int) -> None:
        t = self._nodes
        while True:
            v, p = self._go(*self._ptr, pos, pos + 1)
            if v != -1:
                self._ptr = (v, p)
                return
            mid = self._split(*self._ptr)
            leaf = len(t)
            t.append(_Node(pos, self._n, mid))
            t[mid].next[self.text[pos]] = leaf
            link = self._get_link(mid)
            self._ptr = (link, t[link].length())
            if mid == 0:
                break

    def leaf_suffixes(self) -> list[str]:
        """Return the suffix (with terminator) spelled at each leaf, in depth-first
        order with children visited by ascending character."""
        t, s, n = self._nodes, self.text, self._n
        result = []
        stack = [(0, 0)]
        while stack:
            u, depth = stack.pop()
            children = t[u].next
            if not children:
                result.append(s[n - depth:])
                continue
            for ch in sorted(children, reverse=True):
                v = children[ch]
                stack.append((v, depth + t[v].length()))
        return result