"""Palindromic tree (eertree) of a string."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class PalindromeNode:
    """One distinct palindrome: its length, suffix link and raw end count."""

    length: int
    fail: int
    count: int = 0
    parent: int = -1
    char: str = ""
    next: dict[str, int] = field(default_factory=dict)


class PalindromeTree:
    """Eertree built over ``text``; node 0 is the odd root, node 1 the even root."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.nodes = [PalindromeNode(-1, 0), PalindromeNode(0, 0)]
        self._suffix = 1
        self._processed = 0
        for position in range(len(text)):
            self.extend(position)

    def _get_fail(self, node: int, position: int) -> int:
        s = self.text
        while True:
            j = position - 1 - self.nodes[node].length
            if j >= 0 and s[j] == s[position]:
                return node
            node = self.nodes[node].fail

    def extend(self, position: int) -> int:
        """Add the character at ``position``; positions must come in order.

        Returns the node of the longest palindrome ending there.
        """
        if position >= len(self.text):
            raise IndexError("position is past the end of the text")
        if position != self._processed:
            raise ValueError("positions must be added in order")
        c = self.text[position]
        p = self._get_fail(self._suffix, position)
        parent = self.nodes[p]
        if c not in parent.next:
            nq = self._get_fail(parent.fail, position)
            fail = self.nodes[nq].next.get(c, 1)
            q = len(self.nodes)
            self.nodes.append(PalindromeNode(parent.length + 2, fail, 0, p, c))
            parent.next[c] = q
        node = parent.next[c]
        self.nodes[node].count += 1
        self._suffix = node
        self._processed += 1
        return node

    def palindromes(self) -> dict[str, int]:
        """Map every distinct palindromic substring to its number of occurrences."""
        nodes = self.nodes
        counts = [node.count for node in nodes]
        for i in range(len(nodes) - 1, -1, -1):
            if nodes[i].fail != i:
                counts[nodes[i].fail] += counts[i]
        strings = ["", ""]
        for node in nodes[2:]:
            if nodes[node.parent].length == -1:
                strings.append(node.char)
            else:
                strings.append(node.char + strings[node.parent] + node.char)
        return {strings[i]: counts[i] for i in range(2, len(nodes))}