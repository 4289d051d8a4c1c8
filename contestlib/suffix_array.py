"""Suffix array with pattern lookup and LCP array."""

from __future__ import annotations

from bisect import bisect_left, bisect_right


class SuffixArray:
    """Suffix array of ``text``; ``array[i]`` is the start of the i-th smallest suffix."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.array = self._build(text)

    @staticmethod
    def _build(text: str) -> list[int]:
        n = len(text)
        order = list(range(n))
        rank = [ord(c) for c in text]
        k = 1
        while n:
            def key(i: int) -> tuple[int, int]:
                return rank[i], rank[i + k] if i + k < n else -1

            order.sort(key=key)
            new_rank = [0] * n
            for prev, cur in zip(order, order[1:]):
                new_rank[cur] = new_rank[prev] + (key(prev) != key(cur))
            rank = new_rank
            if rank[order[-1]] == n - 1 or k >= n:
                break
            k <<= 1
        return order

    def match_range(self, pattern: str) -> tuple[int, int] | None:
        """Return the half-open range of suffix-array positions whose suffixes start
        with ``pattern``, or None when it does not occur."""
        if not self.array:
            return None
        m = len(pattern)
        text = self.text

        def prefix(start: int) -> str:
            return text[start:start + m]

        lo = bisect_left(self.array, pattern, key=prefix)
        hi = bisect_right(self.array, pattern, key=prefix)
        return (lo, hi) if lo < hi else None

    def lcp_array(self) -> list[int]:
        """Return ``lcp`` where ``lcp[i]`` is the common prefix of suffixes
        ``array[i]`` and ``array[i-1]`` (``lcp[0]`` is 0)."""
        text, sa = self.text, self.array
        n = len(sa)
        if not n:
            return []
        phi = [0] * n
        phi[sa[0]] = -1
        for prev, cur in zip(sa, sa[1:]):
            phi[cur] = prev
        plcp = [0] * n
        length = 0
        for i in range(n):
            j = phi[i]
            if j == -1:
                length = 0
                continue
            while i + length < n and j + length < n and text[i + length] == text[j + length]:
                length += 1
            plcp[i] = length
            length = max(length - 1, 0)
        return [plcp[s] for s in sa]