"""Recursive exercises: factorials, odd sums, divisors, palindromes, knapsack and Goldbach."""

import math
from itertools import product

DEFAULT_DIGITS = (1, 2, 3)


def factorial(n):
    """Return n! by iteration; any n below 2 gives 1."""
    return math.prod(range(2, n + 1)) if n >= 2 else 1


def factorial_recursive(n):
    """Return n! by recursion for a non-negative n."""
    if n < 0:
        raise ValueError(f"factorial needs a non-negative integer, got {n}")
    if n == 0:
        return 1
    return n * factorial_recursive(n - 1)


def sum_first_odds(n):
    """Return the sum of the first ``n`` odd numbers; 0 when n is not positive."""
    return sum(range(1, 2 * n, 2)) if n > 0 else 0


def gcd(a, b):
    """Return the greatest common divisor of two positive integers.

    Uses the subtraction rules gcd(a, b) = gcd(a - b, b) for a > b,
    gcd(a, b - a) for a < b and a for a == b, applying runs of subtractions at once.
    """
    if a <= 0 or b <= 0:
        raise ValueError(f"gcd needs positive integers, got {a} and {b}")
    while a != b:
        if a > b:
            a -= b * ((a - 1) // b)
        else:
            b -= a * ((b - 1) // a)
    return a


def first_digit(n):
    """Return the leading digit of a positive integer."""
    if n <= 0:
        raise ValueError(f"first digit needs a positive integer, got {n}")
    if n < 10:
        return n
    return first_digit(n // 10)


def palindromes_from_digits(length, digits=DEFAULT_DIGITS):
    """Return every palindrome of ``length`` digits drawn from ``digits``, as tuples.

    The palindromes come in the order of their first half, each position
    taking the digits in the order given.
    """
    if length < 0:
        raise ValueError(f"length must be non-negative, got {length}")
    digits = tuple(digits)
    half = (length + 1) // 2
    mirrored = length // 2
    return [
        prefix + tuple(reversed(prefix[:mirrored]))
        for prefix in product(digits, repeat=half)
    ]


def knapsack_best(items, capacity):
    """Return the largest total weight of a subset of ``items`` that fits in ``capacity``.

    Each item is taken whole or not at all; the search is by backtracking.
    """
    weights = list(items)
    if any(weight < 0 for weight in weights):
        raise ValueError("item weights must be non-negative")
    if capacity < 0:
        raise ValueError(f"capacity must be non-negative, got {capacity}")
    best = 0

    def explore(start, total):
        nonlocal best
        for k in range(start, len(weights)):
            if best == capacity:
                return
            load = total + weights[k]
            if load <= capacity:
                best = max(best, load)
                explore(k + 1, load)

    explore(0, 0)
    return best


def _is_prime(n):
    if n < 2:
        return False
    return all(n % d for d in range(2, math.isqrt(n) + 1))


def goldbach_pairs(n):
    """Return the pairs of primes (p, q) with p + q == n and p >= q, largest p first."""
    return [(n - q, q) for q in range(n // 2 + 1) if _is_prime(q) and _is_prime(n - q)]


def count_up(n):
    """Return the integers from 0 up to ``n``."""
    return list(range(n + 1))


def count_down(n):
    """Return the integers from ``n`` down to 0."""
    return list(range(n, -1, -1))