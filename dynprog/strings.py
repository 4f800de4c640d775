"""Dynamic programming over strings: decoding, edit distances, interleaving, word breaks."""

from __future__ import annotations

import re
from collections.abc import Iterable
from functools import cache

_INTEGER = re.compile(r"[+-]?[0-9]+")
_ALPHABET_COLUMNS = 27
_TABLE_WIDTH = 66


def _atoi(chunk: str) -> int:
    """Parse chunk as a signed decimal integer, giving 0 when it is not one."""
    return int(chunk) if _INTEGER.fullmatch(chunk) else 0


def num_decodings(s: str) -> int:
    """Return the number of ways to decode a digit string where 1..26 map to letters."""
    if not s:
        raise ValueError("s must not be empty")
    if s[0] == "0":
        return 0
    n = len(s)
    ways = [0] * (n + 1)
    ways[n] = 1
    if s[-1] != "0":
        ways[n - 1] = 1
    for i in range(n - 2, -1, -1):
        if s[i] == "0":
            continue
        ways[i] = sum(
            ways[i + width] for width in (1, 2) if 1 <= _atoi(s[i : i + width]) <= 26
        )
    return ways[0]


def min_distance(word1: str, word2: str) -> int:
    """Return the fewest single-character inserts, deletes or replacements turning word1 into word2."""
    m, n = len(word1), len(word2)
    below = [n - j for j in range(n + 1)]
    for i in range(m - 1, -1, -1):
        row = [0] * (n + 1)
        row[n] = m - i
        for j in range(n - 1, -1, -1):
            if word1[i] == word2[j]:
                row[j] = below[j + 1]
            else:
                row[j] = 1 + min(row[j + 1], below[j], below[j + 1])
        below = row
    return below[0]


def min_insert_delete(s1: str, s2: str) -> int:
    """Return the fewest single-character inserts or deletes turning s1 into s2."""
    m, n = len(s1), len(s2)
    below = [n - j for j in range(n + 1)]
    for i in range(m - 1, -1, -1):
        row = [0] * (n + 1)
        row[n] = m - i
        for j in range(n - 1, -1, -1):
            if s1[i] == s2[j]:
                row[j] = below[j + 1]
            else:
                row[j] = 1 + min(row[j + 1], below[j])
        below = row
    return below[0]


def is_interleave(s1: str, s2: str, s3: str) -> bool:
    """Return whether s3 is formed by interleaving s1 and s2, keeping their orders."""
    if len(s1) + len(s2) != len(s3):
        return False
    n, m = len(s1), len(s2)
    below: list[bool] = []
    for i in range(n, -1, -1):
        row = [False] * (m + 1)
        for j in range(m, -1, -1):
            if i == n and j == m:
                row[j] = True
            elif i < n and s1[i] == s3[i + j] and below[j]:
                row[j] = True
            elif j < m and s2[j] == s3[i + j] and row[j + 1]:
                row[j] = True
        below = row
    return below[0]


def is_interleave_recursive(s1: str, s2: str, s3: str) -> bool:
    """Return the same result as is_interleave, computed top-down."""
    if len(s1) + len(s2) != len(s3):
        return False
    n, m = len(s1), len(s2)

    @cache
    def can_make(i: int, j: int) -> bool:
        if i == n and j == m:
            return True
        if i < n and s1[i] == s3[i + j] and can_make(i + 1, j):
            return True
        return j < m and s2[j] == s3[i + j] and can_make(i, j + 1)

    return can_make(0, 0)


def longest_common_subsequence(text1: str, text2: str) -> int:
    """Return the length of the longest subsequence common to text1 and text2."""
    m = len(text2)
    below = [0] * (m + 1)
    for ch in reversed(text1):
        row = [0] * (m + 1)
        for j in range(m - 1, -1, -1):
            row[j] = 1 + below[j + 1] if ch == text2[j] else max(below[j], row[j + 1])
        below = row
    return below[0]


def longest_ideal_string(s: str, k: int) -> int:
    """Return the ideal-subsequence table value for s with adjacent-letter limit k.

    The table is filled from the second byte of s onwards; the first byte
    contributes nothing.  Letter gaps are taken as unsigned byte differences.
    """
    data = s.encode()
    if not data:
        raise ValueError("s must not be empty")
    row = [0] * _ALPHABET_COLUMNS
    for byte in data[1:]:
        column = (byte - ord("a")) % 256
        if column >= _TABLE_WIDTH:
            raise ValueError(f"character {chr(byte)!r} lies outside the supported range")
        with_char = 1 + (row[column] if column < _ALPHABET_COLUMNS else 0)
        row = [
            max(prev, with_char)
            if j == _ALPHABET_COLUMNS - 1 or (byte - ord("a") - j) % 256 <= k
            else prev
            for j, prev in enumerate(row)
        ]
    return row[-1]


def word_break(s: str, word_dict: Iterable[str]) -> bool:
    """Return whether s splits into a sequence of words from word_dict."""
    words = set(word_dict)
    n = len(s)

    @cache
    def can_break(idx: int) -> bool:
        if idx == n or s[idx:] in words:
            return True
        return any(s[idx:end] in words and can_break(end) for end in range(idx + 1, n + 1))

    return can_break(0)


def word_break_tabulated(s: str, word_dict: Iterable[str]) -> bool:
    """Return the same result as word_break, computed bottom-up; s must not be empty."""
    if not s:
        raise ValueError("s must not be empty")
    words = set(word_dict)
    n = len(s)
    breakable = [False] * (n + 1)
    breakable[n] = True
    for idx in range(n - 1, -1, -1):
        breakable[idx] = s[idx:] in words or any(
            s[idx:end] in words and breakable[end] for end in range(idx + 1, n + 1)
        )
    return breakable[0]