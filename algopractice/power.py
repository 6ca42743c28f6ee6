"""Exponentiation by repeated multiplication, by squaring and modulo an integer."""


def _check_exponent(n):
    if n < 0:
        raise ValueError(f"exponent must be non-negative, got {n}")


def recursive_power(x, n):
    """Return x**n using n nested recursive multiplications."""
    _check_exponent(n)
    if n == 0:
        return 1
    return x * recursive_power(x, n - 1)


def iterative_power(x, n):
    """Return x**n using a loop of n multiplications."""
    _check_exponent(n)
    result = 1
    for _ in range(n):
        result *= x
    return result


def binary_exponentiation_recursive(x, n):
    """Return x**n by recursive squaring."""
    _check_exponent(n)
    if n == 0:
        return 1
    if n % 2 == 0:
        return binary_exponentiation_recursive(x * x, n // 2)
    return x * binary_exponentiation_recursive(x * x, (n - 1) // 2)


def binary_exponentiation_iterative(x, n):
    """Return x**n by iterative squaring."""
    _check_exponent(n)
    result = 1
    while n > 0:
        if n % 2 == 1:
            result *= x
            n -= 1
        else:
            x *= x
            n //= 2
    return result


def modular_exponentiation(x, n, m):
    """Return x**n modulo m by recursive squaring; an exponent of 0 gives 1."""
    _check_exponent(n)
    if n == 0:
        return 1
    if n % 2 == 0:
        return modular_exponentiation((x * x) % m, n // 2, m)
    return (x * modular_exponentiation((x * x) % m, (n - 1) // 2, m)) % m


def modular_exponentiation_iterative(x, n, m):
    """Return x**n modulo m by iterative squaring; an exponent of 0 gives 1."""
    _check_exponent(n)
    result = 1
    while n > 0:
        if n % 2 == 1:
            result = (result * x) % m
        x = (x * x) % m
        n //= 2
    return result


def float_power(n, x):
    """Return x**n as a float, for a non-negative integer exponent n."""
    _check_exponent(n)
    if n == 0:
        return 1.0
    if n % 2 == 0:
        return float_power(n // 2, float(x) * x)
    return float(x) * float_power(n - 1, x)