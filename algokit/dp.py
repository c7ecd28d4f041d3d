"""Dynamic programming and greedy scans over sequences."""

from __future__ import annotations

import bisect
from collections.abc import Sequence
from functools import lru_cache


def fib(n: int) -> int:
    """Return the ``n``-th Fibonacci number, with fib(0) = 0 and fib(1) = 1."""
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    current, following = 0, 1
    for _ in range(n):
        current, following = following, current + following
    return current


def max_subarray(nums: Sequence[int]) -> int:
    """Return the largest sum of a non-empty contiguous run of ``nums``."""
    if not nums:
        raise ValueError("need at least one value")
    best = nums[0]
    running = 0
    for value in nums:
        if running < 0:
            running = 0
        running += value
        best = max(best, running)
    return best


def can_jump(nums: Sequence[int]) -> bool:
    """Tell whether the last index can be reached from the first.

    Each value is the longest jump allowed from its position.
    """
    if not nums:
        raise ValueError("need at least one position")
    goal = len(nums) - 1
    for position in reversed(range(goal)):
        if position + nums[position] >= goal:
            goal = position
    return goal == 0


def min_jumps(nums: Sequence[int]) -> int:
    """Return the fewest jumps from the first index to the last.

    Raises ValueError when the last index cannot be reached.
    """
    if not nums:
        raise ValueError("need at least one position")
    last = len(nums) - 1
    steps = 0
    level_end = 0
    furthest = 0
    for position in range(last):
        if level_end >= last:
            break
        if position > level_end:
            raise ValueError("the last position cannot be reached")
        furthest = max(furthest, position + nums[position])
        if position == level_end:
            steps += 1
            level_end = furthest
    if level_end < last:
        raise ValueError("the last position cannot be reached")
    return steps


def can_reach_zero(arr: Sequence[int], start: int) -> bool:
    """Tell whether a position holding 0 is reachable from ``start``.

    From position i one may move to i + arr[i] or i - arr[i].
    """
    seen: set[int] = set()
    pending = [start]
    while pending:
        position = pending.pop()
        if not 0 <= position < len(arr) or position in seen:
            continue
        seen.add(position)
        step = arr[position]
        if step == 0:
            return True
        pending.extend((position + step, position - step))
    return False


def matrix_chain_cost(dims: Sequence[int]) -> int:
    """Return the fewest scalar multiplications to multiply a chain of matrices.

    Matrix i has shape dims[i - 1] x dims[i].
    """
    count = len(dims) - 1

    @lru_cache(maxsize=None)
    def cost(first: int, last: int) -> int:
        if first >= last:
            return 0
        return min(
            cost(first, split) + cost(split + 1, last)
            + dims[first - 1] * dims[split] * dims[last]
            for split in range(first, last)
        )

    return cost(1, count) if count >= 1 else 0


def length_of_lis(nums: Sequence[int]) -> int:
    """Return the length of the longest strictly increasing subsequence."""
    tails: list[int] = []
    for value in nums:
        index = bisect.bisect_left(tails, value)
        if index == len(tails):
            tails.append(value)
        else:
            tails[index] = value
    return len(tails)