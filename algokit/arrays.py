"""Array algorithms: greedy choices, monotonic stacks, heaps and binary search."""

from __future__ import annotations

import heapq
import math
from collections import Counter, deque
from collections.abc import Hashable, Iterable, Sequence
from itertools import pairwise

CAKE_MODULUS = 1_000_000_007


def furthest_building(heights: Sequence[int], bricks: int, ladders: int) -> int:
    """Return the furthest building index reachable with the given bricks and ladders.

    Ladders go to the largest climbs seen so far and bricks pay for the rest.
    """
    ladder_climbs: list[int] = []
    for index, (here, there) in enumerate(pairwise(heights)):
        climb = there - here
        if climb <= 0:
            continue
        if len(ladder_climbs) < ladders:
            heapq.heappush(ladder_climbs, climb)
            continue
        if ladder_climbs and ladder_climbs[0] < climb:
            bricks -= heapq.heapreplace(ladder_climbs, climb)
        else:
            bricks -= climb
        if bricks < 0:
            return index
    return max(len(heights) - 1, 0)


def find_duplicate(nums: Sequence[int]) -> int:
    """Return the repeated value in ``nums``, whose n + 1 values lie in 1..n.

    Uses cycle detection over the index-to-value links without extra memory.
    """
    if len(nums) < 2:
        raise ValueError("need at least two values to hold a duplicate")
    limit = len(nums) - 1
    if any(not 1 <= value <= limit for value in nums):
        raise ValueError(f"every value must lie between 1 and {limit}")
    hare = tortoise = nums[0]
    while True:
        hare = nums[nums[hare]]
        tortoise = nums[tortoise]
        if hare == tortoise:
            break
    tortoise = nums[0]
    while hare != tortoise:
        hare = nums[hare]
        tortoise = nums[tortoise]
    return hare


def max_card_score(points: Sequence[int], k: int) -> int:
    """Return the best total of ``k`` cards taken from either end of the row."""
    if not 0 <= k <= len(points):
        raise ValueError(f"k must lie between 0 and {len(points)}, got {k}")
    n = len(points)
    score = sum(points[n - k:]) if k else 0
    best = score
    for taken in range(k):
        score += points[taken] - points[n - k + taken]
        best = max(best, score)
    return best


def daily_temperatures(temperatures: Sequence[int]) -> list[int]:
    """For each day, return how many days pass until a warmer one, or 0 if none."""
    waits = [0] * len(temperatures)
    pending: list[int] = []
    for day, temperature in enumerate(temperatures):
        while pending and temperature > temperatures[pending[-1]]:
            earlier = pending.pop()
            waits[earlier] = day - earlier
        pending.append(day)
    return waits


def least_interval(tasks: Iterable[Hashable], n: int) -> int:
    """Return the fewest time units to run all tasks when equal tasks need ``n`` units apart."""
    counts = Counter(tasks)
    if not counts:
        return 0
    if n == 0:
        return sum(counts.values())
    ready = [-count for count in counts.values()]
    heapq.heapify(ready)
    cooling: deque[tuple[int, int]] = deque()
    time = 0
    while ready or cooling:
        time += 1
        if cooling and cooling[0][1] <= time:
            heapq.heappush(ready, cooling.popleft()[0])
        if ready:
            remaining = heapq.heappop(ready) + 1
            if remaining < 0:
                cooling.append((remaining, time + n + 1))
    return time


def min_moves_to_equal(nums: Iterable[int]) -> int:
    """Return the fewest unit steps that make all values equal."""
    ordered = sorted(nums)
    if not ordered:
        return 0
    median = ordered[len(ordered) // 2]
    return sum(abs(value - median) for value in ordered)


def maximum_units(boxes: Iterable[Sequence[int]], truck_size: int) -> int:
    """Return the most units a truck of ``truck_size`` boxes can carry.

    Each entry of ``boxes`` is (number of boxes, units per box).
    """
    units = 0
    for count, per_box in sorted(boxes, key=lambda box: box[1], reverse=True):
        if truck_size <= 0:
            break
        loaded = min(count, truck_size)
        units += loaded * per_box
        truck_size -= loaded
    return units


def two_sum_sorted(numbers: Sequence[int], target: int) -> tuple[int, int]:
    """Return the 1-based positions of two values of a sorted sequence that sum to ``target``."""
    left, right = 0, len(numbers) - 1
    while left < right:
        total = numbers[left] + numbers[right]
        if total < target:
            left += 1
        elif total > target:
            right -= 1
        else:
            return left + 1, right + 1
    raise ValueError(f"no two values sum to {target}")


def insert_interval(
    intervals: Iterable[Sequence[int]], new_interval: Sequence[int]
) -> list[list[int]]:
    """Insert an interval into sorted disjoint intervals, merging any it touches."""
    start, end = new_interval
    result: list[list[int]] = []
    placed = False
    for low, high in intervals:
        if high < start:
            result.append([low, high])
        elif end < low:
            if not placed:
                result.append([start, end])
                placed = True
            result.append([low, high])
        else:
            start, end = min(start, low), max(end, high)
    if not placed:
        result.append([start, end])
    return result


def wiggle_max_length(nums: Sequence[int]) -> int:
    """Return the length of the longest subsequence whose differences alternate in sign."""
    if not nums:
        return 0
    length = 1
    previous = 0
    for before, after in pairwise(nums):
        difference = after - before
        if (difference > 0 >= previous) or (difference < 0 <= previous):
            length += 1
            previous = difference
    return length


def _largest_gap(size: int, cuts: Iterable[int]) -> int:
    return max(after - before for before, after in pairwise([0, *sorted(cuts), size]))


def max_cake_area(
    height: int,
    width: int,
    horizontal_cuts: Iterable[int],
    vertical_cuts: Iterable[int],
) -> int:
    """Return the largest piece's area after all cuts, modulo 10**9 + 7."""
    tallest = _largest_gap(height, horizontal_cuts)
    widest = _largest_gap(width, vertical_cuts)
    return tallest * widest % CAKE_MODULUS


def car_fleet(target: int, positions: Sequence[int], speeds: Sequence[int]) -> int:
    """Return how many fleets of cars arrive at ``target``.

    A car that catches up with a slower one ahead joins it and moves as one fleet.
    """
    cars = sorted(zip(positions, speeds, strict=True), reverse=True)
    fleets = 0
    slowest_ahead = -math.inf
    for position, speed in cars:
        arrival = (target - position) / speed
        if arrival > slowest_ahead:
            fleets += 1
            slowest_ahead = arrival
    return fleets


def _hours_needed(piles: Iterable[int], speed: int) -> int:
    return sum(-(-pile // speed) for pile in piles)


def min_eating_speed(piles: Sequence[int], hours: int) -> int:
    """Return the slowest whole eating speed that finishes every pile within ``hours``."""
    if not piles:
        raise ValueError("need at least one pile")
    if hours < len(piles):
        raise ValueError(f"{len(piles)} piles cannot be eaten in {hours} hours")
    low, high = 1, max(piles)
    best = high
    while low <= high:
        speed = (low + high) // 2
        if _hours_needed(piles, speed) <= hours:
            best = speed
            high = speed - 1
        else:
            low = speed + 1
    return best