"""Small dynamic-programming routines."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def catalan(n: int) -> int:
    """Return the n-th Catalan number (1 for n <= 1)."""
    if n <= 1:
        return 1
    table = [0] * (n + 1)
    table[0] = table[1] = 1
    for i in range(2, n + 1):
        table[i] = sum(table[j] * table[i - 1 - j] for j in range(i))
    return table[n]


def max_subarray_sum(nums: Iterable[int]) -> int:
    """Return the largest sum of a contiguous run; an empty run counts as 0."""
    best = current = 0
    for num in nums:
        current = max(num, current + num)
        best = max(best, current)
    return best


def _check_combination_args(m: int, n: int) -> None:
    if m < 0 or n < 0:
        raise ValueError("combination arguments must be non-negative")


def combination(m: int, n: int) -> int:
    """Return C(m, n) by Pascal's rule, recursively."""
    _check_combination_args(m, n)
    if m < n:
        return 0
    if n == 0:
        return 1
    return combination(m - 1, n) + combination(m - 1, n - 1)


def combination_dp(m: int, n: int) -> int:
    """Return C(m, n) by filling Pascal's triangle row by row."""
    _check_combination_args(m, n)
    previous: list[int] = []
    for i in range(m + 1):
        row = [0] * (n + 1)
        for j in range(n + 1):
            if j == 0:
                row[j] = 1
            elif i < j:
                break
            else:
                row[j] = previous[j] + previous[j - 1]
        previous = row
    return previous[n] if previous else (1 if n == 0 else 0)


def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number recursively (n itself for n <= 1)."""
    if n <= 1:
        return n
    return fibonacci(n - 1) + fibonacci(n - 2)


def fibonacci_dp(n: int) -> int:
    """Return the n-th Fibonacci number iteratively (n itself for n <= 1)."""
    if n <= 1:
        return n
    before, current = 0, 1
    for _ in range(2, n + 1):
        before, current = current, before + current
    return current


def rod_cut(length: int, prices: Sequence[int]) -> int:
    """Return the best value from cutting a rod; ``prices[i]`` is the price of length i+1."""
    if length > len(prices):
        raise ValueError("prices must cover every piece length up to the rod length")
    best = [0] * (length + 1)
    for i in range(1, length + 1):
        best[i] = max(prices[j - 1] + best[i - j] for j in range(1, i + 1))
    return best[length]