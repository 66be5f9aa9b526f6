"""Constraint checker and depth-first backtracking solver for 9x9 Sudoku."""

from __future__ import annotations

import logging
from typing import Union

from contracts.errors import GridFormatError, UnsolvableError
from sudoku_grid import BOX, CELL_COUNT, DIGITS, EMPTY, SIZE, Cell, CellLike, Grid, box_origin

_LOGGER = logging.getLogger(__name__)


def is_safe(grid: Grid, row: int, col: int, value: CellLike) -> bool:
    """Return ``True`` when ``value`` is absent from the row, column and box of ``(row, col)``."""

    cell = Cell.coerce(value)
    if cell.is_empty:
        raise GridFormatError("is_safe expects a digit, not an empty cell")
    if cell in grid.row(row) or cell in grid.column(col):
        return False
    r0, c0 = box_origin(row, col)
    return cell not in grid.box(r0 // BOX, c0 // BOX)


def _solve_from(grid: Grid, index: int) -> bool:
    if index == CELL_COUNT:
        return True
    row, col = divmod(index, SIZE)
    if not grid[row, col].is_empty:
        return _solve_from(grid, index + 1)
    for digit in DIGITS:
        if is_safe(grid, row, col, digit):
            grid[row, col] = digit
            if _solve_from(grid, index + 1):
                return True
    grid[row, col] = EMPTY
    return False


def solve(grid: Grid) -> bool:
    """Fill ``grid`` in place with the first solution in row-major, ascending-digit order.

    Returns ``False`` when no completion exists; every tentative placement is
    undone in that case, so the grid is left as it was passed in.
    """

    solved = _solve_from(grid, 0)
    _LOGGER.debug("solve finished: solved=%s filled=%d", solved, grid.filled_count())
    return solved


def solve_puzzle(puzzle: Union[Grid, str]) -> Grid:
    """Solve a copy of ``puzzle`` and return it, raising when no solution exists."""

    grid = puzzle.copy() if isinstance(puzzle, Grid) else Grid.from_string(puzzle)
    if not solve(grid):
        raise UnsolvableError("Sudoku puzzle cannot be solved")
    return grid


__all__ = ["is_safe", "solve", "solve_puzzle"]
