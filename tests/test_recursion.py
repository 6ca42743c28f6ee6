import math

import pytest

from algopractice.recursion import (
    count_down,
    count_up,
    factorial,
    factorial_recursive,
    first_digit,
    gcd,
    goldbach_pairs,
    knapsack_best,
    palindromes_from_digits,
    sum_first_odds,
)


@pytest.mark.parametrize("n", range(0, 11))
def test_factorial_matches_library(n):
    assert factorial(n) == math.factorial(n)


@pytest.mark.parametrize("n", range(0, 11))
def test_factorial_versions_agree(n):
    assert factorial_recursive(n) == factorial(n)


def test_factorial_below_two_is_one():
    assert factorial(-3) == factorial(0) == factorial(1) == 1


def test_factorial_recursive_rejects_negative():
    with pytest.raises(ValueError):
        factorial_recursive(-1)


def test_sum_first_odds_source_example():
    assert sum_first_odds(7) == 49


@pytest.mark.parametrize("n", range(1, 20))
def test_sum_first_odds_step_adds_next_odd(n):
    assert sum_first_odds(n) - sum_first_odds(n - 1) == 2 * n - 1


def test_sum_first_odds_zero():
    assert sum_first_odds(0) == 0


def test_gcd_source_example():
    assert gcd(5, 8) == 1


@pytest.mark.parametrize("a,b", [(9, 27), (12, 18), (8, 8), (100, 75), (17, 5), (1, 9)])
def test_gcd_matches_library(a, b):
    assert gcd(a, b) == math.gcd(a, b)


def test_gcd_is_symmetric():
    assert gcd(84, 36) == gcd(36, 84)


def test_gcd_rejects_non_positive():
    with pytest.raises(ValueError):
        gcd(0, 5)


def test_first_digit_source_example():
    assert first_digit(74393526) == 7


def test_first_digit_single_digit():
    assert first_digit(4) == 4


def test_first_digit_rejects_zero():
    with pytest.raises(ValueError):
        first_digit(0)


def test_palindromes_source_case():
    found = palindromes_from_digits(5, (1, 2, 3))
    assert len(found) == 3**3
    assert len(set(found)) == len(found)
    assert found[0] == (1, 1, 1, 1, 1)
    for item in found:
        assert item == tuple(reversed(item))
        assert set(item) <= {1, 2, 3}


def test_palindromes_even_length():
    found = palindromes_from_digits(4, (1, 2))
    assert len(found) == 2**2
    assert all(item == tuple(reversed(item)) and len(item) == 4 for item in found)


def test_palindromes_rejects_negative_length():
    with pytest.raises(ValueError):
        palindromes_from_digits(-1)


def test_knapsack_source_example():
    assert knapsack_best([1, 2, 4, 5, 6, 3, 5, 6, 51, 1], 53) == 53


def test_knapsack_everything_fits():
    items = [1, 2, 4, 5]
    assert knapsack_best(items, 100) == sum(items)


def test_knapsack_never_exceeds_capacity():
    items = [7, 11, 13]
    for capacity in range(0, 40):
        assert knapsack_best(items, capacity) <= capacity


def test_knapsack_zero_capacity():
    assert knapsack_best([3, 4], 0) == 0


def test_knapsack_rejects_negative_weight():
    with pytest.raises(ValueError):
        knapsack_best([1, -2], 5)


def test_goldbach_small():
    assert goldbach_pairs(10) == [(7, 3), (5, 5)]


def test_goldbach_pairs_are_primes_summing_to_n():
    pairs = goldbach_pairs(100)
    assert pairs
    for p, q in pairs:
        assert p + q == 100
        assert p >= q
        assert all(p % d for d in range(2, p)) and all(q % d for d in range(2, q))
        assert q >= 2


def test_count_up():
    assert count_up(5) == list(range(6))


def test_count_down_is_reverse_of_count_up():
    assert count_down(5) == list(reversed(count_up(5)))


def test_count_negative_is_empty():
    assert count_up(-1) == [] and count_down(-1) == []