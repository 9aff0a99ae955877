"""Longest common and longest palindromic subsequences."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def longest_common_subsequence(s1: Sequence[Any], s2: Sequence[Any]) -> int:
    """Length of the longest common subsequence, keeping only one previous row."""
    if len(s1) < len(s2):
        s1, s2 = s2, s1
    prev = [0] * (len(s2) + 1)
    for a in s1:
        cur = [0]
        for j, b in enumerate(s2):
            cur.append(prev[j] + 1 if a == b else max(prev[j + 1], cur[j]))
        prev = cur
    return prev[-1]


def longest_common_subsequence_table(s1: Sequence[Any], s2: Sequence[Any]) -> int:
    """Length of the longest common subsequence using the full table."""
    dp = [[0] * (len(s2) + 1) for _ in range(len(s1) + 1)]
    for i, a in enumerate(s1, start=1):
        for j, b in enumerate(s2, start=1):
            if a == b:
                dp[i][j] = dp[i - 1][j - 1] + 1
            else:
                dp[i][j] = max(dp[i - 1][j], dp[i][j - 1])
    return dp[-1][-1]


def longest_palindromic_subsequence(s: Sequence[Any]) -> int:
    """Length of the longest subsequence of ``s`` that reads the same reversed."""
    n = len(s)
    if n == 0:
        return 0
    below = [0] * n  # lengths for the suffix starting one position later
    for i in range(n - 1, -1, -1):
        row = [0] * n
        row[i] = 1
        for j in range(i + 1, n):
            if s[i] == s[j]:
                row[j] = below[j - 1] + 2
            else:
                row[j] = max(below[j], row[j - 1])
        below = row
    return below[n - 1]