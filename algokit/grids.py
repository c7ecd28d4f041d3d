"""Algorithms on two-dimensional grids and square matrices."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence

EMPTY_ROOM = 2**31 - 1
WALL = -1
GATE = 0

EMPTY_CELL = 0
FRESH = 1
ROTTEN = 2

_STEPS = ((0, 1), (0, -1), (1, 0), (-1, 0))


def _neighbours(row: int, col: int, rows: int, cols: int):
    for d_row, d_col in _STEPS:
        r, c = row + d_row, col + d_col
        if 0 <= r < rows and 0 <= c < cols:
            yield r, c


def oranges_rotting(grid: Sequence[Sequence[int]]) -> int:
    """Return the minutes until no fresh orange is left, or -1 if some never rot.

    Each minute every rotten orange rots its fresh side neighbours. The input is not changed.
    """
    cells = [list(row) for row in grid]
    rows = len(cells)
    cols = len(cells[0]) if rows else 0
    fresh = sum(row.count(FRESH) for row in cells)
    frontier = [(r, c) for r in range(rows) for c in range(cols) if cells[r][c] == ROTTEN]
    minutes = 0
    while frontier and fresh:
        next_frontier = []
        for row, col in frontier:
            for r, c in _neighbours(row, col, rows, cols):
                if cells[r][c] == FRESH:
                    cells[r][c] = ROTTEN
                    fresh -= 1
                    next_frontier.append((r, c))
        frontier = next_frontier
        minutes += 1
    return minutes if fresh == 0 else -1


def walls_and_gates(rooms: list[list[int]]) -> None:
    """Fill each empty room in place with its step distance to the nearest gate.

    Empty rooms hold EMPTY_ROOM, walls WALL and gates GATE; unreachable rooms stay empty.
    """
    rows = len(rooms)
    cols = len(rooms[0]) if rows else 0
    pending = deque((r, c) for r in range(rows) for c in range(cols) if rooms[r][c] == GATE)
    while pending:
        row, col = pending.popleft()
        for r, c in _neighbours(row, col, rows, cols):
            if rooms[r][c] == EMPTY_ROOM:
                rooms[r][c] = rooms[row][col] + 1
                pending.append((r, c))


def set_zeroes(matrix: list[list[int]]) -> None:
    """Set, in place, every row and column that holds a zero entirely to zero."""
    zero_rows = {r for r, row in enumerate(matrix) if 0 in row}
    zero_cols = {c for row in matrix for c, value in enumerate(row) if value == 0}
    for r, row in enumerate(matrix):
        if r in zero_rows:
            row[:] = [0] * len(row)
        else:
            for c in zero_cols:
                row[c] = 0


def _rotated(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    return [list(column) for column in zip(*reversed(matrix))]


def find_rotation(mat: Sequence[Sequence[int]], target: Sequence[Sequence[int]]) -> bool:
    """Tell whether some quarter-turn rotation of ``mat`` equals ``target``."""
    goal = [list(row) for row in target]
    candidate = [list(row) for row in mat]
    for _ in range(4):
        if candidate == goal:
            return True
        candidate = _rotated(candidate)
    return False


def rotate(matrix: list[list[int]]) -> None:
    """Rotate a square matrix a quarter turn clockwise in place."""
    if any(len(row) != len(matrix) for row in matrix):
        raise ValueError("matrix must be square")
    matrix[:] = _rotated(matrix)


def search_matrix(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Tell whether ``target`` is in a matrix whose rows, read in order, are sorted."""
    if not matrix or not matrix[0]:
        return False
    cols = len(matrix[0])
    low, high = 0, len(matrix) * cols - 1
    while low <= high:
        middle = (low + high) // 2
        value = matrix[middle // cols][middle % cols]
        if value == target:
            return True
        if value < target:
            low = middle + 1
        else:
            high = middle - 1
    return False