"""Fibonacci-style dynamic programming problems."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence


def _require_non_negative(n: int) -> None:
    if n < 0:
        raise ValueError("n must not be negative")


def climb_stairs(n: int) -> int:
    """Count the ways to climb n stairs taking one or two steps at a time."""
    _require_non_negative(n)
    before, current = 1, 1
    for _ in range(2, n + 1):
        before, current = current, before + current
    return current


def fib(n: int) -> int:
    """Return the n-th Fibonacci number, with fib(0) == 0 and fib(1) == 1."""
    _require_non_negative(n)
    if n < 2:
        return n
    before, current = 0, 1
    for _ in range(2, n + 1):
        before, current = current, before + current
    return current


def tribonacci(n: int) -> int:
    """Return the n-th Tribonacci number, starting 0, 1, 1."""
    _require_non_negative(n)
    if n < 2:
        return n
    if n == 2:
        return 1
    a, b, c = 0, 1, 1
    for _ in range(3, n + 1):
        a, b, c = b, c, a + b + c
    return c


def rob(nums: Sequence[int]) -> int:
    """Return the largest sum of values taken from no two adjacent houses."""
    if not nums:
        raise ValueError("nums must not be empty")
    if len(nums) == 1:
        return nums[0]
    before = nums[0]
    current = max(nums[0], nums[1])
    for value in nums[2:]:
        before, current = current, max(before + value, current)
    return current


def delete_and_earn(nums: Sequence[int]) -> int:
    """Return the most points earned when taking x forbids x - 1 and x + 1."""
    if not nums:
        return 0
    points: Counter[int] = Counter()
    for num in nums:
        points[num] += num
    values = sorted(points)
    before, current = 0, points[values[0]]
    for previous, value in zip(values, values[1:]):
        if value == previous + 1:
            best = max(current, before + points[value])
        else:
            best = current + points[value]
        before, current = current, best
    return current