"""Dynamic programming over strings and sequences."""

from __future__ import annotations

import math
from bisect import bisect_left, bisect_right
from collections.abc import Sequence


def longest_arith_seq_length(nums: Sequence[int]) -> int:
    """Length of the longest arithmetic subsequence, tracking each difference per end."""
    n = len(nums)
    if n <= 2:
        return n
    dp: list[dict[int, int]] = [{} for _ in range(n)]
    best = 2
    for i, current in enumerate(nums):
        ending_here = dp[i]
        for j in range(i):
            diff = current - nums[j]
            length = dp[j].get(diff, 1) + 1
            if length > ending_here.get(diff, 0):
                ending_here[diff] = length
            best = max(best, ending_here[diff])
    return best


def longest_arith_seq_length_by_difference(nums: Sequence[int]) -> int:
    """Same as longest_arith_seq_length, trying every difference in the value range."""
    if not nums:
        raise ValueError("nums must not be empty")
    low, high = min(nums), max(nums)
    spread = high - low
    best = 1
    for diff in range(-spread, spread + 1):
        lengths: dict[int, int] = {}
        for num in nums:
            before = lengths.get(num - diff)
            if before is not None:
                lengths[num] = max(lengths.get(num, 1), before + 1)
                best = max(best, lengths[num])
            lengths[num] = max(lengths.get(num, 1), 1)
    return best


def longest_subsequence(arr: Sequence[int], difference: int) -> int:
    """Length of the longest subsequence whose neighbours differ by exactly difference."""
    if not arr:
        raise ValueError("arr must not be empty")
    lengths: dict[int, int] = {}
    best = 1
    for value in arr:
        lengths[value] = lengths.get(value - difference, 0) + 1
        best = max(best, lengths[value])
    return best


def min_insertions(s: str) -> int:
    """Fewest characters to insert so that s reads the same both ways."""
    n = len(s)
    if n <= 1:
        return 0
    dp = [[0] * n for _ in range(n)]
    for length in range(2, n + 1):
        for i in range(n - length + 1):
            j = i + length - 1
            if s[i] == s[j]:
                dp[i][j] = dp[i + 1][j - 1] if i + 1 <= j - 1 else 0
            else:
                dp[i][j] = min(dp[i + 1][j], dp[i][j - 1]) + 1
    return dp[0][n - 1]


def min_insertions_compact(s: str) -> int:
    """Same as min_insertions, keeping a single row."""
    n = len(s)
    if n <= 1:
        return 0
    dp = [0] * n
    for i in range(n - 2, -1, -1):
        diagonal = 0
        for j in range(i + 1, n):
            above = dp[j]
            if s[i] == s[j]:
                dp[j] = diagonal
            else:
                dp[j] = min(dp[j], dp[j - 1]) + 1
            diagonal = above
    return dp[n - 1]


def longest_obstacle_course_at_each_position(obstacles: Sequence[int]) -> list[int]:
    """For each position, the longest non-decreasing course ending there."""
    tails: list[int] = []
    answer: list[int] = []
    for height in obstacles:
        index = bisect_right(tails, height)
        answer.append(index + 1)
        if index == len(tails):
            tails.append(height)
        else:
            tails[index] = height
    return answer


def length_of_lis(nums: Sequence[int]) -> int:
    """Length of the longest strictly increasing subsequence, quadratic DP."""
    n = len(nums)
    if n <= 1:
        return n
    dp = [1] * n
    for i in range(n):
        for j in range(i):
            if nums[i] > nums[j]:
                dp[i] = max(dp[i], dp[j] + 1)
    return max(dp)


def length_of_lis_greedy(nums: Sequence[int]) -> int:
    """Length of the longest strictly increasing subsequence by binary search."""
    tails: list[int] = []
    for num in nums:
        index = bisect_left(tails, num)
        if index == len(tails):
            tails.append(num)
        else:
            tails[index] = num
    return len(tails)


def find_longest_chain(pairs: Sequence[Sequence[int]]) -> int:
    """Longest chain of pairs where each pair starts after the previous one ends (DP)."""
    size = len(pairs)
    if size <= 1:
        return size
    ordered = sorted(pairs, key=lambda pair: (pair[0], pair[1]))
    dp = [1] * size
    for i, (start, _) in enumerate(ordered):
        for j in range(i):
            if start > ordered[j][1]:
                dp[i] = max(dp[i], dp[j] + 1)
    return max(dp)


def find_longest_chain_greedy(pairs: Sequence[Sequence[int]]) -> int:
    """Same as find_longest_chain, greedily taking the earliest-ending pair."""
    size = len(pairs)
    if size <= 1:
        return size
    end = -math.inf
    count = 0
    for start, finish in sorted(pairs, key=lambda pair: pair[1]):
        if start > end:
            count += 1
            end = finish
    return count


def num_decodings(s: str) -> int:
    """Count the ways to decode a digit string where 'A'..'Z' map to 1..26."""
    if not s:
        raise ValueError("s must not be empty")
    if s[0] == "0":
        return 0
    before, current = 1, 1
    for i in range(1, len(s)):
        ways = current if s[i] != "0" else 0
        if 10 <= int(s[i - 1:i + 1]) <= 26:
            ways += before
        before, current = current, ways
    return current


def mincost_tickets(days: Sequence[int], costs: Sequence[int]) -> int:
    """Cheapest cover of the travel days with 1-, 7- and 30-day passes."""
    if not days:
        raise ValueError("days must not be empty")
    day_cost, week_cost, month_cost = costs[0], costs[1], costs[2]
    last_day = days[-1]
    travel = set(days)
    dp = [0] * (last_day + 1)
    for day in range(1, last_day + 1):
        if day in travel:
            dp[day] = min(
                dp[day - 1] + day_cost,
                dp[max(0, day - 7)] + week_cost,
                dp[max(0, day - 30)] + month_cost,
            )
        else:
            dp[day] = dp[day - 1]
    return dp[last_day]


def longest_common_subsequence(text1: Sequence, text2: Sequence) -> int:
    """Length of the longest common subsequence, full table."""
    dp = [[0] * (len(text2) + 1) for _ in range(len(text1) + 1)]
    for i, a in enumerate(text1, start=1):
        for j, b in enumerate(text2, start=1):
            if a == b:
                dp[i][j] = dp[i - 1][j - 1] + 1
            else:
                dp[i][j] = max(dp[i - 1][j], dp[i][j - 1])
    return dp[-1][-1]


def longest_common_subsequence_compact(text1: Sequence, text2: Sequence) -> int:
    """Same as longest_common_subsequence, keeping a row the size of the shorter input."""
    if len(text2) > len(text1):
        text1, text2 = text2, text1
    dp = [0] * (len(text2) + 1)
    for a in text1:
        diagonal = 0
        for j, b in enumerate(text2, start=1):
            above = dp[j]
            if a == b:
                dp[j] = diagonal + 1
            else:
                dp[j] = max(dp[j], dp[j - 1])
            diagonal = above
    return dp[-1]


def longest_palindrome_subseq(s: str) -> int:
    """Length of the longest palindromic subsequence, interval DP."""
    size = len(s)
    if size == 0:
        return 0
    dp = [[0] * size for _ in range(size)]
    for i in range(size):
        dp[i][i] = 1
    for length in range(2, size + 1):
        for i in range(size - length + 1):
            j = i + length - 1
            if s[i] == s[j]:
                dp[i][j] = 2 if length == 2 else dp[i + 1][j - 1] + 2
            else:
                dp[i][j] = max(dp[i + 1][j], dp[i][j - 1])
    return dp[0][size - 1]


def longest_palindrome_subseq_compact(s: str) -> int:
    """Same as longest_palindrome_subseq, as the LCS of s and its reverse."""
    if not s:
        return 0
    return longest_common_subsequence_compact(s, s[::-1])


def max_uncrossed_lines(nums1: Sequence[int], nums2: Sequence[int]) -> int:
    """Most non-crossing lines joining equal values of two sequences."""
    if not nums1 or not nums2:
        return 0
    return longest_common_subsequence_compact(nums1, nums2)