"""Array utilities: divisors of an integer and the union of sorted sequences."""

from __future__ import annotations

import heapq
import math
from collections.abc import Sequence


def divisors(num: int) -> list[int]:
    """Return the positive divisors of ``num`` in ascending order.

    Divisors are found in pairs ``(i, num // i)`` up to the integer square
    root. Zero has no divisors in this scheme, and negative numbers are
    rejected.
    """
    if num < 0:
        raise ValueError(f"num must be non-negative, got {num}")
    found: list[int] = []
    for i in range(1, math.isqrt(num) + 1):
        if num % i == 0:
            found.append(i)
            if i != num // i:
                found.append(num // i)
    return sorted(found)


def find_union(first: Sequence[int], second: Sequence[int]) -> list[int]:
    """Merge two sorted sequences into a sorted list without repeated values.

    If either sequence is empty, the other is returned unchanged (as a list),
    duplicates included.
    """
    if not first:
        return list(second)
    if not second:
        return list(first)
    union: list[int] = []
    for value in heapq.merge(first, second):
        if not union or union[-1] != value:
            union.append(value)
    return union