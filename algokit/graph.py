"""Course scheduling over prerequisite graphs."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence


class CycleError(ValueError):
    """Raised when prerequisites form a cycle and no course order exists."""


def _graph(
    num_courses: int, prerequisites: Iterable[Sequence[int]]
) -> tuple[list[list[int]], list[int]]:
    if num_courses < 0:
        raise ValueError(f"number of courses must not be negative, got {num_courses}")
    unlocks: list[list[int]] = [[] for _ in range(num_courses)]
    waiting_on = [0] * num_courses
    for course, required in prerequisites:
        for value in (course, required):
            if not 0 <= value < num_courses:
                raise ValueError(
                    f"course {value} is outside the range 0..{num_courses - 1}"
                )
        unlocks[required].append(course)
        waiting_on[course] += 1
    return unlocks, waiting_on


def _topological(num_courses: int, prerequisites: Iterable[Sequence[int]]) -> list[int]:
    unlocks, waiting_on = _graph(num_courses, prerequisites)
    ready = deque(course for course, count in enumerate(waiting_on) if count == 0)
    order: list[int] = []
    while ready:
        course = ready.popleft()
        order.append(course)
        for following in unlocks[course]:
            waiting_on[following] -= 1
            if waiting_on[following] == 0:
                ready.append(following)
    return order


def can_finish(num_courses: int, prerequisites: Iterable[Sequence[int]]) -> bool:
    """Tell whether every course can be taken.

    Each prerequisite pair (a, b) means course b must be taken before course a.
    """
    return len(_topological(num_courses, prerequisites)) == num_courses


def course_order(num_courses: int, prerequisites: Iterable[Sequence[int]]) -> list[int]:
    """Return an order taking every course after all of its prerequisites.

    Raises CycleError when the prerequisites form a cycle.
    """
    order = _topological(num_courses, prerequisites)
    if len(order) != num_courses:
        raise CycleError("prerequisites form a cycle")
    return order