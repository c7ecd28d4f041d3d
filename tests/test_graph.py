import pytest

from algokit.graph import CycleError, can_finish, course_order


def _respects(order, prerequisites):
    position = {course: index for index, course in enumerate(order)}
    return all(position[required] < position[course] for course, required in prerequisites)


def test_single_prerequisite_can_finish():
    assert can_finish(2, [[1, 0]]) is True


def test_two_course_cycle_cannot_finish():
    assert can_finish(2, [[1, 0], [0, 1]]) is False


def test_no_prerequisites_can_finish():
    assert can_finish(5, []) is True


def test_longer_cycle_cannot_finish():
    assert can_finish(4, [[1, 0], [2, 1], [3, 2], [1, 3]]) is False


def test_self_dependency_cannot_finish():
    assert can_finish(1, [[0, 0]]) is False


def test_diamond_can_finish():
    assert can_finish(4, [[1, 0], [2, 0], [3, 1], [3, 2]]) is True


def test_order_single_prerequisite():
    assert course_order(2, [[1, 0]]) == [0, 1]


@pytest.mark.parametrize(
    "num_courses, prerequisites",
    [
        (4, [[1, 0], [2, 0], [3, 1], [3, 2]]),
        (6, [[5, 4], [4, 3], [3, 2], [2, 1], [1, 0]]),
        (5, [[0, 4], [1, 4], [2, 3]]),
        (3, []),
    ],
)
def test_order_is_permutation_respecting_prerequisites(num_courses, prerequisites):
    order = course_order(num_courses, prerequisites)
    assert sorted(order) == list(range(num_courses))
    assert _respects(order, prerequisites)


def test_order_raises_on_cycle():
    with pytest.raises(CycleError):
        course_order(3, [[1, 0], [2, 1], [0, 2]])


def test_cycle_error_is_value_error():
    with pytest.raises(ValueError):
        course_order(2, [[0, 1], [1, 0]])


def test_out_of_range_course_rejected():
    with pytest.raises(ValueError):
        can_finish(2, [[2, 0]])


def test_negative_course_count_rejected():
    with pytest.raises(ValueError):
        course_order(-1, [])


def test_zero_courses_gives_empty_order():
    assert course_order(0, []) == []