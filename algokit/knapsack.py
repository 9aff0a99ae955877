"""0/1 knapsack and counting sums of distinct powers."""

from __future__ import annotations

from collections.abc import Sequence
from functools import lru_cache

MOD = 1_000_000_007


def _check_items(capacity: int, weights: Sequence[int], profits: Sequence[int]) -> None:
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    if len(weights) != len(profits):
        raise ValueError("weights and profits must have the same length")
    if any(w < 0 for w in weights):
        raise ValueError("weights must not be negative")


def knapsack_memo(capacity: int, weights: Sequence[int], profits: Sequence[int]) -> int:
    """Best total profit within ``capacity``, by memoised recursion."""
    _check_items(capacity, weights, profits)

    @lru_cache(maxsize=None)
    def best(index: int, room: int) -> int:
        if index < 0:
            return 0
        skip = best(index - 1, room)
        if weights[index] > room:
            return skip
        return max(profits[index] + best(index - 1, room - weights[index]), skip)

    return best(len(weights) - 1, capacity)


def knapsack(capacity: int, weights: Sequence[int], profits: Sequence[int]) -> int:
    """Best total profit within ``capacity``, using the full table."""
    _check_items(capacity, weights, profits)
    dp = [[0] * (capacity + 1) for _ in range(len(weights) + 1)]
    for i, (weight, profit) in enumerate(zip(weights, profits), start=1):
        for w in range(capacity + 1):
            dp[i][w] = dp[i - 1][w]
            if weight <= w:
                dp[i][w] = max(dp[i][w], profit + dp[i - 1][w - weight])
    return dp[-1][capacity]


def knapsack_compact(
    capacity: int, weights: Sequence[int], profits: Sequence[int]
) -> int:
    """Best total profit within ``capacity``, keeping a single row."""
    _check_items(capacity, weights, profits)
    dp = [0] * (capacity + 1)
    for weight, profit in zip(weights, profits):
        for w in range(capacity, weight - 1, -1):
            dp[w] = max(dp[w], profit + dp[w - weight])
    return dp[capacity]


def _check_power_args(n: int, x: int) -> None:
    if n < 0:
        raise ValueError("n must not be negative")
    if x < 1:
        raise ValueError("x must be at least 1")


def number_of_ways(n: int, x: int) -> int:
    """Ways to write ``n`` as a sum of distinct x-th powers, modulo 10**9 + 7."""
    _check_power_args(n, x)
    dp = [1] + [0] * n
    base = 1
    while (power := base**x) <= n:
        for i in range(n, power - 1, -1):
            dp[i] = (dp[i] + dp[i - power]) % MOD
        base += 1
    return dp[n]


def number_of_ways_memo(n: int, x: int) -> int:
    """Same count as :func:`number_of_ways`, by memoised recursion."""
    _check_power_args(n, x)

    @lru_cache(maxsize=None)
    def ways(rest: int, base: int) -> int:
        if rest == 0:
            return 1
        power = base**x
        if power > rest:
            return 0
        return (ways(rest - power, base + 1) + ways(rest, base + 1)) % MOD

    return ways(n, 1)