import pytest

from algomap.dp_knapsack import (
    MOD,
    count_good_strings,
    integer_break,
    most_points,
    num_trees,
)


def test_num_trees_sample():
    assert num_trees(3) == 5


def test_num_trees_small():
    assert num_trees(0) == num_trees(1) == 1


@pytest.mark.parametrize("n", range(0, 15))
def test_num_trees_catalan_ratio(n):
    assert num_trees(n + 1) * (n + 2) == num_trees(n) * 2 * (2 * n + 1)


def test_num_trees_negative_rejected():
    with pytest.raises(ValueError):
        num_trees(-1)


def test_most_points_sample():
    questions = [[1, 1], [2, 2], [3, 3], [4, 4], [5, 5]]
    assert most_points(questions) == 7


def test_most_points_single_question():
    assert most_points([[9, 4]]) == 9


def test_most_points_no_brainpower_takes_everything():
    questions = [[3, 0], [1, 0], [4, 0], [1, 0]]
    assert most_points(questions) == sum(p for p, _ in questions)


def test_most_points_empty():
    assert most_points([]) == 0


def test_most_points_at_least_best_single_question():
    questions = [[3, 2], [4, 3], [4, 4], [2, 5]]
    assert most_points(questions) >= max(p for p, _ in questions)


def test_count_good_strings_sample():
    assert count_good_strings(2, 3, 1, 2) == 5


@pytest.mark.parametrize("length", range(1, 12))
def test_count_good_strings_binary(length):
    assert count_good_strings(length, length, 1, 1) == 2**length


def test_count_good_strings_stays_below_modulus():
    result = count_good_strings(1, 5000, 1, 1)
    assert 0 <= result < MOD


def test_count_good_strings_range_is_additive():
    whole = count_good_strings(1, 10, 2, 3)
    parts = count_good_strings(1, 5, 2, 3) + count_good_strings(6, 10, 2, 3)
    assert whole == parts % MOD


@pytest.mark.parametrize("n", [2, 3])
def test_integer_break_small(n):
    assert integer_break(n) == n - 1


@pytest.mark.parametrize("n", range(4, 41))
def test_integer_break_matches_powers_of_three(n):
    q, r = divmod(n, 3)
    if r == 0:
        expected = 3**q
    elif r == 1:
        expected = 3 ** (q - 1) * 4
    else:
        expected = 3**q * 2
    assert integer_break(n) == expected