"""Counting and knapsack-style dynamic programming problems."""

from __future__ import annotations

from collections.abc import Sequence

MOD = 10**9 + 7


def num_trees(n: int) -> int:
    """Count the structurally distinct binary search trees holding 1..n."""
    if n < 0:
        raise ValueError("n must not be negative")
    dp = [0] * (n + 1)
    dp[0] = 1
    for i in range(1, n + 1):
        dp[i] = sum(dp[root - 1] * dp[i - root] for root in range(1, i + 1))
    return dp[n]


def most_points(questions: Sequence[Sequence[int]]) -> int:
    """Best total score when solving question i skips the next brainpower questions."""
    n = len(questions)
    dp = [0] * (n + 1)
    for i in reversed(range(n)):
        points, brainpower = questions[i][0], questions[i][1]
        following = min(i + brainpower + 1, n)
        dp[i] = max(dp[i + 1], dp[following] + points)
    return dp[0]


def count_good_strings(low: int, high: int, zero: int, one: int) -> int:
    """Count strings of length low..high built from blocks of size zero and one, modulo 1e9+7."""
    dp = [0] * (high + 1)
    dp[0] = 1
    total = 0
    for length in range(1, high + 1):
        if length >= zero:
            dp[length] = (dp[length] + dp[length - zero]) % MOD
        if length >= one:
            dp[length] = (dp[length] + dp[length - one]) % MOD
        if length >= low:
            total = (total + dp[length]) % MOD
    return total


def integer_break(n: int) -> int:
    """Largest product of at least two positive integers summing to n."""
    if n <= 3:
        return n - 1
    dp = [0] * (n + 1)
    dp[2] = 1
    for i in range(3, n + 1):
        dp[i] = max(max(j * (i - j), j * dp[i - j]) for j in range(1, i))
    return dp[n]