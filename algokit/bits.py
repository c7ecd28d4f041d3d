"""Bit tricks and digit games on integers."""

from __future__ import annotations

import operator
from collections.abc import Iterable
from functools import reduce

WORD_BITS = 32


def single_number(nums: Iterable[int]) -> int:
    """Return the value that appears once when every other value appears twice."""
    return reduce(operator.xor, nums, 0)


def count_bits(n: int) -> list[int]:
    """Return the number of set bits of every integer from 0 to ``n``."""
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    counts = [0] * (n + 1)
    for value in range(1, n + 1):
        counts[value] = counts[value >> 1] + (value & 1)
    return counts


def reverse_bits(n: int) -> int:
    """Reverse the bit order of a 32-bit unsigned integer."""
    if not 0 <= n < 1 << WORD_BITS:
        raise ValueError(f"expected a {WORD_BITS}-bit unsigned integer, got {n}")
    return int(format(n, f"0{WORD_BITS}b")[::-1], 2)


def digit_square_sum(n: int) -> int:
    """Return the sum of the squares of the decimal digits of ``n``."""
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    return sum(int(digit) ** 2 for digit in str(n))


def is_happy(n: int) -> bool:
    """Tell whether repeated digit-square sums starting at ``n`` reach 1."""
    if digit_square_sum(n) == 1:
        return True
    slow = fast = n
    while True:
        slow = digit_square_sum(slow)
        fast = digit_square_sum(digit_square_sum(fast))
        if slow == fast:
            break
    return slow == 1