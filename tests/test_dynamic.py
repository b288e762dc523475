import math

import pytest

from algokit.dynamic import (
    catalan,
    combination,
    combination_dp,
    fibonacci,
    fibonacci_dp,
    max_subarray_sum,
    rod_cut,
)


@pytest.mark.parametrize("n", range(0, 16))
def test_catalan_matches_binomial_formula(n):
    assert catalan(n) == math.comb(2 * n, n) // (n + 1)


def test_catalan_ten():
    assert catalan(10) == 16796


def test_max_subarray_source_example():
    assert max_subarray_sum([-2, 1, -3, 4, -1, 2, 1, -5, 4]) == 6


def test_max_subarray_all_negative_matches_empty():
    assert max_subarray_sum([-3, -1, -7]) == max_subarray_sum([])


def test_max_subarray_all_positive_is_total():
    values = [3, 1, 4, 1, 5]
    assert max_subarray_sum(values) == sum(values)


@pytest.mark.parametrize("m", range(0, 12))
def test_combinations_match_math_comb(m):
    for n in range(0, m + 3):
        assert combination(m, n) == math.comb(m, n)
        assert combination_dp(m, n) == math.comb(m, n)


@pytest.mark.parametrize("func", [combination, combination_dp])
def test_combination_rejects_negative(func):
    with pytest.raises(ValueError):
        func(3, -1)


def test_fibonacci_source_comment_value():
    assert fibonacci(10) == 55
    assert fibonacci_dp(10) == 55


@pytest.mark.parametrize("n", range(0, 21))
def test_fibonacci_versions_agree(n):
    assert fibonacci(n) == fibonacci_dp(n)


def test_fibonacci_recurrence():
    for n in range(0, 40):
        assert fibonacci_dp(n + 2) == fibonacci_dp(n + 1) + fibonacci_dp(n)


def test_rod_cut_source_example():
    assert rod_cut(4, [1, 5, 8, 9]) == 10


def test_rod_cut_at_least_whole_or_unit_pieces():
    prices = [2, 3, 7, 8, 9]
    for length in range(1, len(prices) + 1):
        best = rod_cut(length, prices)
        assert best >= prices[length - 1]
        assert best >= length * prices[0]
        assert best >= rod_cut(length - 1, prices)


def test_rod_cut_needs_prices_for_every_length():
    with pytest.raises(ValueError):
        rod_cut(5, [1, 5])