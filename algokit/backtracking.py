"""Exhaustive search by backtracking: subsets, permutations, partitions, queens."""

from __future__ import annotations

import itertools
from collections.abc import Sequence

PHONE_LETTERS = {
    "2": "abc",
    "3": "def",
    "4": "ghi",
    "5": "jkl",
    "6": "mno",
    "7": "pqrs",
    "8": "tuv",
    "9": "wxyz",
}


def combination_sum(candidates: Sequence[int], target: int) -> list[list[int]]:
    """Return every multiset of candidates, each usable repeatedly, summing to ``target``."""
    if any(value <= 0 for value in candidates):
        raise ValueError("candidates must all be positive")
    result: list[list[int]] = []
    chosen: list[int] = []

    def search(index: int, remaining: int) -> None:
        if remaining == 0:
            result.append(chosen.copy())
            return
        if index == len(candidates) or remaining < 0:
            return
        search(index + 1, remaining)
        chosen.append(candidates[index])
        search(index, remaining - candidates[index])
        chosen.pop()

    search(0, target)
    return result


def subsets(nums: Sequence[int]) -> list[list[int]]:
    """Return every subset of ``nums``, taking elements in their given order."""
    result: list[list[int]] = []
    chosen: list[int] = []

    def search(index: int) -> None:
        if index >= len(nums):
            result.append(chosen.copy())
            return
        search(index + 1)
        chosen.append(nums[index])
        search(index + 1)
        chosen.pop()

    search(0)
    return result


def subsets_with_dup(nums: Sequence[int]) -> list[list[int]]:
    """Return every distinct subset of ``nums``, which may hold repeated values."""
    ordered = sorted(nums)
    result: list[list[int]] = []
    chosen: list[int] = []

    def search(index: int) -> None:
        if index >= len(ordered):
            result.append(chosen.copy())
            return
        chosen.append(ordered[index])
        search(index + 1)
        chosen.pop()
        while index + 1 < len(ordered) and ordered[index] == ordered[index + 1]:
            index += 1
        search(index + 1)

    search(0)
    return result


def permutations(nums: Sequence[int]) -> list[list[int]]:
    """Return every ordering of ``nums`` by position."""
    return [list(order) for order in itertools.permutations(nums)]


def _is_palindrome(text: str) -> bool:
    return text == text[::-1]


def palindrome_partitions(s: str) -> list[list[str]]:
    """Return every way to cut ``s`` into pieces that are all palindromes."""
    result: list[list[str]] = []
    pieces: list[str] = []

    def search(start: int) -> None:
        if start == len(s):
            result.append(pieces.copy())
            return
        for end in range(start + 1, len(s) + 1):
            piece = s[start:end]
            if _is_palindrome(piece):
                pieces.append(piece)
                search(end)
                pieces.pop()

    search(0)
    return result


def letter_combinations(digits: str) -> list[str]:
    """Return the letter strings a phone keypad spells for ``digits``.

    Digits without letters produce no combinations; empty input gives [].
    """
    if not digits:
        return []
    letters = (PHONE_LETTERS.get(digit, "") for digit in digits)
    return ["".join(combo) for combo in itertools.product(*letters)]


def solve_n_queens(n: int) -> list[list[str]]:
    """Return every placement of ``n`` non-attacking queens, one string per row."""
    result: list[list[str]] = []
    columns: set[int] = set()
    rising: set[int] = set()
    falling: set[int] = set()
    placement: list[int] = []

    def search(row: int) -> None:
        if row == n:
            result.append(["." * col + "Q" + "." * (n - col - 1) for col in placement])
            return
        for col in range(n):
            if col in columns or row + col in rising or row - col in falling:
                continue
            columns.add(col)
            rising.add(row + col)
            falling.add(row - col)
            placement.append(col)
            search(row + 1)
            placement.pop()
            columns.discard(col)
            rising.discard(row + col)
            falling.discard(row - col)

    search(0)
    return result