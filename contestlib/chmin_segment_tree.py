"""Segment tree with range chmin, range max and range sum."""

from __future__ import annotations

import math
from typing import Sequence


class ChminSegmentTree:
    """Array supporting ``a[i] = min(a[i], v)`` on a range plus max and sum queries.

    Ranges are 0-based and inclusive.
    """

    def __init__(self, values: Sequence[int]) -> None:
        if not values:
            raise ValueError("values must not be empty")
        self.n = len(values)
        size = 4 * self.n
        self._max = [0] * size
        self._second: list[float] = [-math.inf] * size
        self._count = [0] * size
        self._sum = [0] * size
        self._build(1, 0, self.n - 1, list(values))

    def __len__(self) -> int:
        return self.n

    def _build(self, o: int, lo: int, hi: int, values: list[int]) -> None:
        if lo == hi:
            self._max[o] = values[lo]
            self._sum[o] = values[lo]
            self._count[o] = 1
            self._second[o] = -math.inf
            return
        mid = (lo + hi) // 2
        self._build(2 * o, lo, mid, values)
        self._build(2 * o + 1, mid + 1, hi, values)
        self._pull(o)

    def _pull(self, o: int) -> None:
        l, r = 2 * o, 2 * o + 1
        mx, se, cnt = self._max, self._second, self._count
        self._sum[o] = self._sum[l] + self._sum[r]
        if mx[l] == mx[r]:
            mx[o], se[o], cnt[o] = mx[l], max(se[l], se[r]), cnt[l] + cnt[r]
        elif mx[l] > mx[r]:
            mx[o], se[o], cnt[o] = mx[l], max(se[l], mx[r]), cnt[l]
        else:
            mx[o], se[o], cnt[o] = mx[r], max(mx[l], se[r]), cnt[r]

    def _apply(self, o: int, v: int) -> None:
        if self._max[o] > v:
            self._sum[o] -= (self._max[o] - v) * self._count[o]
            self._max[o] = v

    def _push(self, o: int) -> None:
        self._apply(2 * o, self._max[o])
        self._apply(2 * o + 1, self._max[o])

    def _check(self, left: int, right: int) -> None:
        if not 0 <= left <= right < self.n:
            raise IndexError(f"range [{left}, {right}] is outside 0..{self.n - 1}")

    def _update(self, o: int, lo: int, hi: int, left: int, right: int, v: int) -> None:
        if right < lo or hi < left or self._max[o] <= v:
            return
        if left <= lo and hi <= right and self._second[o] < v:
            self._apply(o, v)
            return
        self._push(o)
        mid = (lo + hi) // 2
        self._update(2 * o, lo, mid, left, right, v)
        self._update(2 * o + 1, mid + 1, hi, left, right, v)
        self._pull(o)

    def chmin(self, left: int, right: int, value: int) -> None:
        """Replace every element in ``[left, right]`` by its minimum with ``value``."""
        self._check(left, right)
        self._update(1, 0, self.n - 1, left, right, value)

    def _query(self, o: int, lo: int, hi: int, left: int, right: int, want_sum: bool) -> int:
        if left <= lo and hi <= right:
            return self._sum[o] if want_sum else self._max[o]
        self._push(o)
        mid = (lo + hi) // 2
        parts = []
        if left <= mid:
            parts.append(self._query(2 * o, lo, mid, left, right, want_sum))
        if right > mid:
            parts.append(self._query(2 * o + 1, mid + 1, hi, left, right, want_sum))
        return sum(parts) if want_sum else max(parts)

    def range_max(self, left: int, right: int) -> int:
        """Return the largest element in ``[left, right]``."""
        self._check(left, right)
        return self._query(1, 0, self.n - 1, left, right, False)

    def range_sum(self, left: int, right: int) -> int:
        """Return the sum of the elements in ``[left, right]``."""
        self._check(left, right)
        return self._query(1, 0, self.n - 1, left, right, True)