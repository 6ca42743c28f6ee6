"""Closed-form calculations: roots, areas, clock angles, times and fees."""

import cmath
import math

FIRST_HOUR_FEE = 100
EXTRA_HOUR_FEE = 80


def quadratic_roots(a, b, c):
    """Return both roots of a*x**2 + b*x + c; complex when the discriminant is negative."""
    if a == 0:
        raise ValueError("first coefficient must be non-zero")
    discriminant = b * b - 4 * a * c
    if discriminant < 0:
        root = cmath.sqrt(discriminant)
        return ((-b + root) / (2 * a), (-b - root) / (2 * a))
    root = math.sqrt(discriminant)
    return ((-b + root) / (2 * a), (-b - root) / (2 * a))


def triangle_area(base, height):
    """Return the area of a triangle from its base and height."""
    return base * height / 2


def hypotenuse(leg1, leg2):
    """Return the hypotenuse of a right triangle with the given legs."""
    return math.hypot(leg1, leg2)


def clock_angle(hour, minute):
    """Return the smaller angle in degrees between the hands of an analogue clock."""
    if not 1 <= hour <= 12:
        raise ValueError(f"hour must be between 1 and 12, got {hour}")
    if not 0 <= minute <= 59:
        raise ValueError(f"minute must be between 0 and 59, got {minute}")
    minute_angle = minute * 6
    hour_angle = hour * 30 + minute / 2
    difference = abs(hour_angle - minute_angle)
    return 360 - difference if difference > 180 else difference


def elapsed_seconds(hour, minute, second, period):
    """Return the seconds counted for a 12-hour time; "pm" adds twelve hours."""
    if not 1 <= hour <= 12:
        raise ValueError(f"hour must be between 1 and 12, got {hour}")
    if not 0 <= minute <= 59:
        raise ValueError(f"minute must be between 0 and 59, got {minute}")
    if not 0 <= second <= 59:
        raise ValueError(f"second must be between 0 and 59, got {second}")
    if period not in ("am", "pm"):
        raise ValueError(f"period must be 'am' or 'pm', got {period!r}")
    total = hour * 3600 + minute * 60 + second
    if period == "pm":
        total += 12 * 3600
    return total


def parking_fee(entry_hour, entry_minute, exit_hour, exit_minute):
    """Return the fee for a stay: the first hour or fraction, then each further hour or fraction."""
    stay = (exit_hour * 60 + exit_minute) - (entry_hour * 60 + entry_minute)
    if stay < 0:
        raise ValueError("exit time is before entry time")
    hours, fraction = divmod(stay, 60)
    if hours == 0 and fraction > 0:
        return FIRST_HOUR_FEE
    fee = FIRST_HOUR_FEE + (hours - 1) * EXTRA_HOUR_FEE
    if fraction > 0:
        fee += EXTRA_HOUR_FEE
    return fee