import math
from collections import Counter

import pytest

from algokit.backtracking import (
    PHONE_LETTERS,
    combination_sum,
    letter_combinations,
    palindrome_partitions,
    permutations,
    solve_n_queens,
    subsets,
    subsets_with_dup,
)


def _is_subsequence(part, whole):
    it = iter(whole)
    return all(any(x == y for y in it) for x in part)


def test_combination_sum_results_are_valid_and_unique():
    candidates = [2, 3, 6, 7]
    result = combination_sum(candidates, 7)
    assert all(sum(combo) == 7 for combo in result)
    assert all(set(combo) <= set(candidates) for combo in result)
    keys = [tuple(sorted(combo)) for combo in result]
    assert len(keys) == len(set(keys))
    assert sorted(keys) == [(2, 2, 3), (7,)]


def test_combination_sum_no_solution():
    assert combination_sum([4, 6], 5) == []


def test_combination_sum_zero_target_gives_empty_combo():
    assert combination_sum([3], 0) == [[]]


def test_combination_sum_rejects_non_positive():
    with pytest.raises(ValueError):
        combination_sum([0, 1], 3)


def test_subsets_count_and_uniqueness():
    nums = [1, 2, 3, 4]
    result = subsets(nums)
    assert len(result) == 2 ** len(nums)
    assert len({tuple(s) for s in result}) == len(result)
    assert all(_is_subsequence(s, nums) for s in result)
    assert result[0] == []
    assert result[-1] == nums


def test_subsets_with_dup_distinct():
    nums = [2, 1, 2]
    result = subsets_with_dup(nums)
    keys = [tuple(s) for s in result]
    assert len(keys) == len(set(keys))
    assert len(result) == 6
    whole = Counter(nums)
    assert all(not (Counter(s) - whole) for s in result)
    assert all(s == sorted(s) for s in result)


def test_subsets_with_dup_all_equal():
    result = subsets_with_dup([5, 5, 5])
    assert sorted(result, key=len) == [[], [5], [5, 5], [5, 5, 5]]


def test_permutations_are_all_orderings():
    nums = [1, 2, 3, 4]
    result = permutations(nums)
    assert len(result) == math.factorial(len(nums))
    assert len({tuple(p) for p in result}) == len(result)
    assert all(sorted(p) == nums for p in result)
    assert result[0] == nums


def test_permutations_single_and_empty():
    assert permutations([9]) == [[9]]
    assert permutations([]) == [[]]


def test_palindrome_partitions_valid():
    s = "aabbaa"
    result = palindrome_partitions(s)
    assert all("".join(parts) == s for parts in result)
    assert all(p == p[::-1] for parts in result for p in parts)
    assert [s] in result
    assert list(s) in result


def test_palindrome_partitions_example():
    assert sorted(palindrome_partitions("aab")) == [["a", "a", "b"], ["aa", "b"]]


def test_letter_combinations_order_and_count():
    result = letter_combinations("79")
    assert len(result) == len(PHONE_LETTERS["7"]) * len(PHONE_LETTERS["9"])
    assert result[0] == "pw"
    assert result[-1] == "sz"
    assert result == sorted(result)


def test_letter_combinations_empty_and_unmapped():
    assert letter_combinations("") == []
    assert letter_combinations("21") == []


def test_n_queens_solutions_are_valid():
    n = 6
    boards = solve_n_queens(n)
    assert boards
    for board in boards:
        assert len(board) == n
        cols = [row.index("Q") for row in board]
        assert all(row.count("Q") == 1 and len(row) == n for row in board)
        assert len(set(cols)) == n
        assert len({r + c for r, c in enumerate(cols)}) == n
        assert len({r - c for r, c in enumerate(cols)}) == n


def test_n_queens_counts():
    assert len(solve_n_queens(4)) == 2
    assert solve_n_queens(1) == [["Q"]]
    assert solve_n_queens(3) == []