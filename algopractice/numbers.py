"""Small exercises on the digits and values of integers."""

import math
from dataclasses import dataclass


def reverse_number(number):
    """Return the digits of a positive integer in reverse order; 0 for non-positive input."""
    result = 0
    while number > 0:
        number, digit = divmod(number, 10)
        result = result * 10 + digit
    return result


def reverse_four_digits(number):
    """Reverse the last four digits of ``number``, keeping its sign."""
    sign = -1 if number < 0 else 1
    number = abs(number)
    result = 0
    for _ in range(4):
        number, digit = divmod(number, 10)
        result = result * 10 + digit
    return sign * result


def binary_to_decimal(text):
    """Return the value of a binary numeral; any character other than '1' counts as 0."""
    return sum(1 << i for i, char in enumerate(reversed(text.strip())) if char == "1")


def is_palindrome(number):
    """Return True when ``number`` reads the same forwards and backwards."""
    return number == reverse_number(number)


def greater(a, b):
    """Return the larger of two numbers, the first one on a tie."""
    return a if a >= b else b


def in_interval(x, lower, upper):
    """Return True when ``x`` lies in the closed interval [lower, upper]."""
    return lower <= x <= upper


def digit_count(number):
    """Return how many digits a positive integer has; 0 for non-positive input."""
    count = 0
    while number > 0:
        number //= 10
        count += 1
    return count


@dataclass(frozen=True)
class ParitySummary:
    """Counts and sums of the odd and even numbers of a sequence."""

    odd_count: int = 0
    odd_sum: int = 0
    even_count: int = 0
    even_sum: int = 0

    @property
    def count(self):
        return self.odd_count + self.even_count

    @property
    def total(self):
        return self.odd_sum + self.even_sum

    @property
    def odd_percentage(self):
        return self.odd_count / self.count * 100 if self.count else math.nan

    @property
    def even_percentage(self):
        return self.even_count / self.count * 100 if self.count else math.nan


def parity_summary(numbers):
    """Summarise ``numbers`` up to, not including, the first zero."""
    odd_count = odd_sum = even_count = even_sum = 0
    for number in numbers:
        if number == 0:
            break
        if number % 2:
            odd_count += 1
            odd_sum += number
        else:
            even_count += 1
            even_sum += number
    return ParitySummary(odd_count, odd_sum, even_count, even_sum)


def _check_position(n):
    if n < 1:
        raise ValueError(f"position must be at least 1, got {n}")


def fibonacci_shifted(n):
    """Return the n-th Fibonacci term counting from 1, starting from the seeds -1 and 1."""
    _check_position(n)
    previous, current = -1, 1
    for _ in range(n):
        previous, current = current, previous + current
    return current


def fibonacci(n):
    """Return the n-th Fibonacci term counting from 1: 0, 1, 1, 2, ..."""
    _check_position(n)
    if n == 1:
        return 0
    previous, current = 0, 1
    for _ in range(2, n):
        previous, current = current, previous + current
    return current


def fibonacci_recursive(n):
    """Return F(n) with F(0) = 0 and F(1) = 1, computed recursively."""
    if n < 0:
        raise ValueError(f"index must be non-negative, got {n}")
    if n < 2:
        return n
    return fibonacci_recursive(n - 1) + fibonacci_recursive(n - 2)


def fibonacci_terms(n):
    """Return the first ``n`` Fibonacci terms."""
    return [fibonacci(i) for i in range(1, n + 1)]


def find_subpalindromes(number, digits=3):
    """Return the palindromic windows of ``digits`` digits in ``number``, rightmost first."""
    if digits < 1:
        raise ValueError(f"window must hold at least one digit, got {digits}")
    factor = 10**digits
    found = []
    while number >= factor // 10:
        window = number % factor
        if is_palindrome(window):
            found.append(window)
        number //= 10
    return found