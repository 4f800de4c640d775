"""Palindromic subsequences and substrings."""

from __future__ import annotations

from functools import cache

from dynprog.strings import longest_common_subsequence


def longest_palindrome_subseq(s: str) -> int:
    """Return the length of the longest palindromic subsequence of s."""
    return longest_common_subsequence(s, s[::-1])


def longest_palindrome(s: str) -> str:
    """Return the longest palindromic substring of s, the leftmost one on ties."""
    n = len(s)
    if n <= 1:
        return s

    @cache
    def is_palindrome(i: int, j: int) -> bool:
        if i >= j:
            return True
        if s[i] != s[j]:
            return False
        return is_palindrome(i + 1, j - 1)

    best_start, best_len = 0, 0
    for i in range(n):
        for j in range(i, n):
            if j - i + 1 > best_len and is_palindrome(i, j):
                best_start, best_len = i, j - i + 1
    return s[best_start : best_start + best_len]


def longest_palindrome_tabulated(s: str) -> str:
    """Return the longest palindromic substring of s, the rightmost one on ties."""
    n = len(s)
    if n <= 1:
        return s
    best_start, best_len = 0, 0
    below = [False] * n
    for i in range(n - 1, -1, -1):
        row = [False] * n
        for j in range(i, n):
            row[j] = s[i] == s[j] and (j - i < 2 or below[j - 1])
            if row[j] and j - i + 1 > best_len:
                best_start, best_len = i, j - i + 1
        below = row
    return s[best_start : best_start + best_len]


def min_insertions(s: str) -> int:
    """Return the fewest characters to insert to make s a palindrome."""

    @cache
    def steps(i: int, j: int) -> int:
        if i > j:
            return 0
        if s[i] == s[j]:
            return steps(i + 1, j - 1)
        return 1 + min(steps(i + 1, j), steps(i, j - 1))

    return steps(0, len(s) - 1)


def min_insertions_tabulated(s: str) -> int:
    """Return the same result as min_insertions, computed bottom-up; s must not be empty."""
    n = len(s)
    if n == 0:
        raise ValueError("s must not be empty")
    below = [0] * n
    for i in range(n - 1, -1, -1):
        row = [0] * n
        for j in range(i + 1, n):
            if s[i] == s[j]:
                row[j] = below[j - 1]
            else:
                row[j] = 1 + min(below[j], row[j - 1])
        below = row
    return below[n - 1]


def count_substrings(s: str) -> int:
    """Return the number of palindromic substrings of s; strings shorter than two give 1."""
    n = len(s)
    if n <= 1:
        return 1
    count = 0
    below = [False] * n
    for i in range(n - 1, -1, -1):
        row = [False] * n
        for j in range(i, n):
            row[j] = s[i] == s[j] and (j - i < 2 or below[j - 1])
            count += row[j]
        below = row
    return count