import pytest

from algokit.dp import (
    can_jump,
    can_reach_zero,
    fib,
    length_of_lis,
    matrix_chain_cost,
    max_subarray,
    min_jumps,
)


def test_fib_base_cases():
    assert fib(0) == 0
    assert fib(1) == 1


@pytest.mark.parametrize("n", range(2, 30))
def test_fib_recurrence(n):
    assert fib(n) == fib(n - 1) + fib(n - 2)


def test_fib_known_value():
    assert fib(10) == 55


def test_fib_negative_raises():
    with pytest.raises(ValueError):
        fib(-1)


def test_max_subarray_single_value():
    assert max_subarray([5]) == 5


def test_max_subarray_all_negative_is_largest_value():
    nums = [-8, -3, -6, -2, -5, -4]
    assert max_subarray(nums) == max(nums)


def test_max_subarray_all_non_negative_is_total():
    nums = [1, 0, 4, 2, 7]
    assert max_subarray(nums) == sum(nums)


def test_max_subarray_is_some_slice_sum():
    nums = [-2, 1, -3, 4, -1, 2, 1, -5, 4]
    result = max_subarray(nums)
    slice_sums = {sum(nums[i:j]) for i in range(len(nums)) for j in range(i + 1, len(nums) + 1)}
    assert result in slice_sums
    assert result >= max(nums)
    assert result == max(slice_sums)


def test_max_subarray_empty_raises():
    with pytest.raises(ValueError):
        max_subarray([])


def test_can_jump_single_position():
    assert can_jump([0]) is True


def test_can_jump_positive_steps_always_reach():
    assert can_jump([1, 1, 1, 1, 1]) is True
    assert can_jump([2, 3, 1, 1, 4]) is True


def test_can_jump_blocked_by_zero():
    assert can_jump([0, 5, 5]) is False
    assert can_jump([3, 2, 1, 0, 4]) is False


def test_can_jump_empty_raises():
    with pytest.raises(ValueError):
        can_jump([])


def test_min_jumps_unit_steps():
    nums = [1] * 6
    assert min_jumps(nums) == len(nums) - 1


def test_min_jumps_single_position():
    assert min_jumps([0]) == 0


def test_min_jumps_one_big_jump():
    nums = [4, 1, 1, 1, 1]
    assert min_jumps(nums) == 1


def test_min_jumps_agrees_with_can_jump():
    nums = [2, 3, 1, 1, 4]
    assert can_jump(nums)
    assert 1 <= min_jumps(nums) <= len(nums) - 1


def test_min_jumps_unreachable_raises():
    with pytest.raises(ValueError):
        min_jumps([3, 2, 1, 0, 4])


def test_can_reach_zero_starting_on_zero():
    assert can_reach_zero([3, 0, 2], 1) is True


def test_can_reach_zero_without_zero():
    assert can_reach_zero([1, 2, 3, 1], 0) is False


def test_can_reach_zero_by_jumping():
    assert can_reach_zero([4, 2, 3, 0, 3, 1, 2], 5) is True


def test_can_reach_zero_start_out_of_range():
    assert can_reach_zero([0, 1], 7) is False


def test_matrix_chain_single_matrix_costs_nothing():
    assert matrix_chain_cost([10, 20]) == 0


def test_matrix_chain_two_matrices():
    assert matrix_chain_cost([10, 20, 30]) == 10 * 20 * 30


def test_matrix_chain_not_worse_than_left_to_right():
    dims = [40, 20, 30, 10, 30]
    left_to_right = dims[0] * dims[1] * dims[2] + dims[0] * dims[2] * dims[3] + dims[0] * dims[3] * dims[4]
    assert matrix_chain_cost(dims) <= left_to_right
    assert matrix_chain_cost(dims) == 26000


def test_lis_increasing():
    nums = [1, 2, 3, 4, 5, 6]
    assert length_of_lis(nums) == len(nums)


def test_lis_decreasing_and_repeated():
    assert length_of_lis([6, 5, 4, 3]) == 1
    assert length_of_lis([7, 7, 7, 7]) == 1


def test_lis_empty():
    assert length_of_lis([]) == 0


def test_lis_mixed():
    assert length_of_lis([10, 9, 2, 5, 3, 7, 101, 18]) == 4