"""Small recursion exercises: sequences, sums, palindromes and subsequences."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from itertools import compress, product


def count_down(n: int) -> list[int]:
    """Return the numbers from ``n`` down to 1."""
    return list(range(n, 0, -1))


def repeat(text: str, n: int) -> list[str]:
    """Return ``text`` repeated ``n`` times as a list of lines."""
    return [text] * max(n, 0)


def factorial(n: int) -> int:
    """Return ``n!`` for a non-negative integer."""
    if n < 0:
        raise ValueError(f"factorial is undefined for negative n ({n})")
    result = 1
    for k in range(2, n + 1):
        result *= k
    return result


def sum_to_n(n: int) -> int:
    """Return ``1 + 2 + ... + n``."""
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    return sum(range(n + 1))


def fibonacci(n: int) -> int:
    """Return the ``n``-th Fibonacci number, with fibonacci(0) == 0."""
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    current, following = 0, 1
    for _ in range(n):
        current, following = following, current + following
    return current


def reverse(values: Sequence) -> list:
    """Return the elements of ``values`` in reverse order."""
    return list(values)[::-1]


def is_palindrome(text: str) -> bool:
    """Return True if ``text`` reads the same forwards and backwards."""
    return text == text[::-1]


def _iter_subsequences(values: Sequence) -> Iterator[list]:
    items = list(values)
    # True before False: every element is taken before it is skipped.
    for mask in product((True, False), repeat=len(items)):
        yield list(compress(items, mask))


def subsequences(values: Sequence) -> list[list]:
    """Return every subsequence, the "take" branch before the "skip" branch."""
    return list(_iter_subsequences(values))


def subsequences_with_sum(values: Sequence[int], k: int) -> list[list[int]]:
    """Return the subsequences whose elements add up to ``k``."""
    return [sub for sub in _iter_subsequences(values) if sum(sub) == k]


def count_subsequences_with_sum(values: Sequence[int], k: int) -> int:
    """Return how many subsequences add up to ``k``."""
    return sum(1 for sub in _iter_subsequences(values) if sum(sub) == k)