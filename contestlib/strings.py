"""Classic linear-time string algorithms."""

from __future__ import annotations


def kmp_failure(pattern: str) -> list[int]:
    """Return the KMP border table: entry ``i`` is the longest border of ``pattern[:i]``.

    Entry 0 is -1.
    """
    b = [0] * (len(pattern) + 1)
    b[0] = -1
    j = -1
    for i, ch in enumerate(pattern):
        while j >= 0 and ch != pattern[j]:
            j = b[j]
        j += 1
        b[i + 1] = j
    return b


def kmp_search(text: str, pattern: str) -> list[int]:
    """Return every index of ``text`` at which ``pattern`` starts."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    b = kmp_failure(pattern)
    m = len(pattern)
    found = []
    j = 0
    for i, ch in enumerate(text):
        while j >= 0 and ch != pattern[j]:
            j = b[j]
        j += 1
        if j == m:
            found.append(i + 1 - j)
            j = b[j]
    return found


def manacher(s: str) -> list[int]:
    """Return palindrome radii: ``s[i-r+1:i+r]`` is the longest odd palindrome at ``i``.

    Even palindromes are found by interleaving a separator, e.g. ``#a#b#a#``.
    """
    n = len(s)
    p = [0] * n
    mx = 0
    center = 0
    for i in range(n):
        p[i] = min(p[2 * center - i], mx - i) if mx > i else 1
        while i + p[i] < n and i >= p[i] and s[i + p[i]] == s[i - p[i]]:
            p[i] += 1
        if i + p[i] > mx:
            mx = i + p[i]
            center = i
    return p


def z_function(s: str) -> list[int]:
    """Return the Z-array of ``s``; entry 0 is 0."""
    n = len(s)
    z = [0] * n
    left = right = 0
    for i in range(1, n):
        if i <= right:
            z[i] = min(right - i + 1, z[i - left])
        while i + z[i] < n and s[z[i]] == s[i + z[i]]:
            z[i] += 1
        if i + z[i] - 1 > right:
            left, right = i, i + z[i] - 1
    return z


def duval(s: str) -> list[str]:
    """Return the Lyndon factorization of ``s`` (Duval's algorithm)."""
    n = len(s)
    i = 0
    factors = []
    while i < n:
        j, k = i + 1, i
        while j < n and s[k] <= s[j]:
            k = i if s[k] < s[j] else k + 1
            j += 1
        while i <= k:
            factors.append(s[i:i + j - k])
            i += j - k
    return factors