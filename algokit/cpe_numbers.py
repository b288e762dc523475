"""Number puzzles: Collatz cycles, calendars, digits, jumps and sorting rules."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import pairwise
from math import gcd

_MONTH_DAYS_2011 = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
_WEEKDAYS = (
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)


def cycle_length(n: int) -> int:
    """Return how many terms the 3n+1 sequence from ``n`` has, counting the final 1."""
    if n < 1:
        raise ValueError(f"cycle length needs a positive integer, got {n}")
    length = 1
    while n != 1:
        n = 3 * n + 1 if n % 2 else n // 2
        length += 1
    return length


def max_cycle_length(a: int, b: int) -> int:
    """Return the largest cycle length for the integers between ``a`` and ``b`` inclusive."""
    low, high = sorted((a, b))
    return max(cycle_length(i) for i in range(low, high + 1))


def derivative_at(x: int, coefficients: Sequence[int]) -> int:
    """Evaluate the derivative of a polynomial at ``x``.

    ``coefficients[i]`` is the coefficient of ``x**i``.
    """
    if not coefficients:
        raise ValueError("a polynomial needs at least one coefficient")
    return sum(
        coefficient * power * x ** (power - 1)
        for power, coefficient in enumerate(coefficients)
        if power > 0
    )


def weekday_2011(month: int, day: int) -> str:
    """Return the weekday name of the given date in 2011."""
    if not 1 <= month <= 12:
        raise ValueError(f"month must be between 1 and 12, got {month}")
    if not 1 <= day <= _MONTH_DAYS_2011[month - 1]:
        raise ValueError(f"day {day} does not exist in month {month}")
    day_of_year = sum(_MONTH_DAYS_2011[: month - 1]) + day
    return _WEEKDAYS[(day_of_year + 5) % 7]


def gcd_sum(n: int) -> int:
    """Return the sum of gcd(i, j) over all 1 <= i < j <= n."""
    return sum(gcd(i, j) for j in range(2, n + 1) for i in range(1, j))


def army_difference(a: int, b: int) -> int:
    """Return the size difference between two armies."""
    return abs(a - b)


def is_jolly(sequence: Sequence[int]) -> bool:
    """Return True if adjacent differences cover exactly 1..n-1."""
    limit = len(sequence) - 1
    seen: set[int] = set()
    for previous, current in pairwise(sequence):
        jump = abs(current - previous)
        if not 1 <= jump <= limit or jump in seen:
            return False
        seen.add(jump)
    return True


def odd_sum(a: int, b: int) -> int:
    """Return the sum of the odd integers from ``a`` to ``b`` inclusive."""
    start = a if a % 2 else a + 1
    return sum(range(start, b + 1, 2))


def carry_operations(a: int, b: int) -> int:
    """Count the carries produced when adding two non-negative integers digit by digit."""
    if a < 0 or b < 0:
        raise ValueError("carry counting needs non-negative integers")
    count = carry = 0
    while a > 0 or b > 0:
        a, digit_a = divmod(a, 10)
        b, digit_b = divmod(b, 10)
        carry = 1 if digit_a + digit_b + carry >= 10 else 0
        count += carry
    return count


def _truncated_remainder(value: int, m: int) -> int:
    """Remainder whose sign follows the dividend, never above zero for negatives."""
    remainder = abs(value) % abs(m)
    return -remainder if value < 0 else remainder


def sort_by_modulus(values: Iterable[int], m: int) -> list[int]:
    """Sort by remainder mod ``m``; on ties odd before even, odds descending, evens ascending."""
    if m == 0:
        raise ValueError("modulus must be non-zero")

    def key(value: int) -> tuple[int, int, int]:
        remainder = _truncated_remainder(value, m)
        if value % 2:
            return (remainder, 0, -value)
        return (remainder, 1, value)

    return sorted(values, key=key)


def digit_root(n: int) -> int:
    """Repeatedly sum the decimal digits of ``n`` until a single digit remains."""
    while n >= 10:
        n = sum(int(digit) for digit in str(n))
    return n


def vito_distance(addresses: Iterable[int]) -> int:
    """Return the smallest total distance from one house to every address."""
    ordered = sorted(addresses)
    if not ordered:
        raise ValueError("at least one address is needed")
    median = ordered[len(ordered) // 2]
    return sum(abs(median - address) for address in ordered)


def can_say_11(n: int) -> bool:
    """Return True when the digits in odd and even places (from the right) sum the same."""
    digits = [int(digit) for digit in str(n)[::-1]] if n > 0 else []
    return sum(digits[0::2]) == sum(digits[1::2])


def hartal_days(days: int, parameters: Iterable[int]) -> int:
    """Count working days lost to hartals over ``days`` days starting on a Sunday.

    Fridays and Saturdays are never counted.
    """
    intervals = list(parameters)
    if any(h <= 0 for h in intervals):
        raise ValueError("hartal parameters must be positive")
    return sum(
        1
        for day in range(1, days + 1)
        if day % 7 not in (0, 6) and any(day % h == 0 for h in intervals)
    )


def hotel_group_size(first: int, day: int) -> int:
    """Return the size of the group staying on ``day`` when the first group has ``first`` members."""
    size = first
    stayed = 0
    for _ in range(day):
        stayed += 1
        if stayed > size:
            stayed = 1
            size += 1
    return size


def win_probability(players: int, p: float, index: int) -> float:
    """Return the chance that player ``index`` (1-based) is the first to succeed."""
    if players < 1:
        raise ValueError("there must be at least one player")
    if not 0.0 <= p <= 1.0:
        raise ValueError(f"probability must lie in [0, 1], got {p}")
    if p < 0.00001:
        return 0.0
    miss = 1.0 - p
    return miss ** (index - 1) * p / (1.0 - miss**players)