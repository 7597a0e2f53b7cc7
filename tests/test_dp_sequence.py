import pytest

from algomap.dp_fibonacci import fib
from algomap.dp_sequence import (
    find_longest_chain,
    find_longest_chain_greedy,
    length_of_lis,
    length_of_lis_greedy,
    longest_arith_seq_length,
    longest_arith_seq_length_by_difference,
    longest_common_subsequence,
    longest_common_subsequence_compact,
    longest_obstacle_course_at_each_position,
    longest_palindrome_subseq,
    longest_palindrome_subseq_compact,
    longest_subsequence,
    max_uncrossed_lines,
    min_insertions,
    min_insertions_compact,
    mincost_tickets,
    num_decodings,
)

STRINGS = ["", "a", "ab", "aa", "mbadm", "leetcode", "bbbab", "racecar", "abcde"]
ARITH = [[9, 4, 7, 2, 10], [3, 6, 9, 12], [20, 1, 15, 3, 10, 5, 8], [5], [1, 1, 1, 1]]


def test_arith_sample():
    assert longest_arith_seq_length([9, 4, 7, 2, 10]) == 3
    assert longest_arith_seq_length_by_difference([9, 4, 7, 2, 10]) == 3


@pytest.mark.parametrize("nums", ARITH)
def test_arith_variants_agree(nums):
    assert longest_arith_seq_length(nums) == longest_arith_seq_length_by_difference(nums)


def test_arith_short_inputs():
    assert longest_arith_seq_length([]) == 0
    assert longest_arith_seq_length([4, 9]) == 2
    with pytest.raises(ValueError):
        longest_arith_seq_length_by_difference([])


def test_fixed_difference_samples():
    assert longest_subsequence([1, 2, 3, 4], 1) == 4
    assert longest_subsequence([1, 5, 7, 8, 5, 3, 4, 2, 1], -2) == 4
    with pytest.raises(ValueError):
        longest_subsequence([], 1)


def test_min_insertions_sample():
    assert min_insertions("mbadm") == 2
    assert min_insertions_compact("mbadm") == 2


@pytest.mark.parametrize("s", STRINGS)
def test_min_insertions_matches_palindrome_subsequence(s):
    expected = len(s) - longest_palindrome_subseq(s)
    assert min_insertions(s) == expected
    assert min_insertions_compact(s) == expected


def test_palindrome_subsequence_sample():
    assert longest_palindrome_subseq("bbbab") == 4


@pytest.mark.parametrize("s", STRINGS)
def test_palindrome_variants_agree(s):
    assert longest_palindrome_subseq(s) == longest_palindrome_subseq_compact(s)


def test_palindrome_of_palindrome_is_whole():
    assert longest_palindrome_subseq("racecar") == len("racecar")


def test_obstacle_course_invariants():
    increasing = [1, 2, 2, 3, 5]
    assert longest_obstacle_course_at_each_position(increasing) == list(range(1, 6))
    assert longest_obstacle_course_at_each_position([5, 4, 3]) == [1, 1, 1]
    assert longest_obstacle_course_at_each_position([]) == []


def test_lis_samples():
    assert length_of_lis([10, 9, 2, 5, 3, 7, 101, 18]) == 4
    assert length_of_lis_greedy([10, 9, 2, 5, 3, 7, 101, 18]) == 4
    assert length_of_lis([1, 3, 6, 7, 9, 4, 10, 5, 6]) == 6
    assert length_of_lis_greedy([1, 3, 6, 7, 9, 4, 10, 5, 6]) == 6


def test_lis_strictness_and_edges():
    nums = [7, 7, 7]
    assert length_of_lis(nums) == length_of_lis_greedy(nums) == 1
    assert length_of_lis([]) == length_of_lis_greedy([]) == 0
    decreasing = list(range(10, 0, -1))
    assert length_of_lis(decreasing) == length_of_lis_greedy(decreasing) == 1


def test_chain_sample_and_no_mutation():
    pairs = [[3, 4], [2, 3], [1, 2]]
    snapshot = [list(p) for p in pairs]
    assert find_longest_chain(pairs) == 2
    assert find_longest_chain_greedy(pairs) == 2
    assert pairs == snapshot


@pytest.mark.parametrize(
    "pairs",
    [[[1, 2], [7, 8], [4, 5]], [[-6, 9], [1, 6], [8, 10], [-1, 4], [-6, -2]], [[1, 5]], []],
)
def test_chain_variants_agree(pairs):
    assert find_longest_chain(pairs) == find_longest_chain_greedy(pairs)


def test_decodings_sample():
    assert num_decodings("226") == 3


def test_decodings_leading_zero():
    assert num_decodings("0") == 0
    assert num_decodings("06") == 0
    with pytest.raises(ValueError):
        num_decodings("")


@pytest.mark.parametrize("k", range(1, 10))
def test_decodings_of_ones_follow_fibonacci(k):
    assert num_decodings("1" * k) == fib(k + 1)


def test_tickets_sample():
    assert mincost_tickets([1, 4, 6, 7, 8, 20], [2, 7, 15]) == 11


def test_tickets_single_day_takes_cheapest_pass():
    costs = [9, 4, 6]
    assert mincost_tickets([5], costs) == min(costs)
    with pytest.raises(ValueError):
        mincost_tickets([], costs)


def test_lcs_sample():
    assert longest_common_subsequence("abcde", "ace") == 3
    assert longest_common_subsequence_compact("abcde", "ace") == 3


@pytest.mark.parametrize("a", STRINGS)
@pytest.mark.parametrize("b", ["", "ace", "eca", "mad"])
def test_lcs_variants_agree_and_symmetric(a, b):
    value = longest_common_subsequence(a, b)
    assert longest_common_subsequence_compact(a, b) == value
    assert longest_common_subsequence(b, a) == value
    assert value <= min(len(a), len(b))


@pytest.mark.parametrize("s", STRINGS)
def test_lcs_with_itself(s):
    assert longest_common_subsequence(s, s) == len(s)


@pytest.mark.parametrize(
    "nums1, nums2",
    [([1, 4, 2], [1, 2, 4]), ([2, 5, 1, 2, 5], [10, 5, 2, 1, 5, 2]), ([1], [2]), ([], [1, 2])],
)
def test_uncrossed_lines_equal_lcs(nums1, nums2):
    assert max_uncrossed_lines(nums1, nums2) == longest_common_subsequence(nums1, nums2)