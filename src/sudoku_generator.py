# sudoku_generator.py
# Build a random full solution from three shuffled diagonal boxes, then blank
# random cells until the requested number of clues is left.

from __future__ import annotations

import logging
import random
from typing import Optional

from contracts.errors import GenerationError, InvalidTargetError
from sudoku_grid import BOX, CELL_COUNT, DIGITS, EMPTY, SIZE, Grid
from sudoku_solver import solve

_LOGGER = logging.getLogger(__name__)

DEFAULT_TARGET_FILLED = 30


def _check_target(target_filled_count: object) -> int:
    if isinstance(target_filled_count, bool) or not isinstance(target_filled_count, int):
        raise InvalidTargetError(
            f"target filled count must be an int, got {type(target_filled_count).__name__}"
        )
    if not 0 <= target_filled_count <= CELL_COUNT:
        raise InvalidTargetError(
            f"target filled count must be between 0 and {CELL_COUNT}, got {target_filled_count}"
        )
    return target_filled_count


def seed_diagonal_boxes(grid: Grid, rng: random.Random) -> None:
    """Write an independent shuffle of 1..9 into each box on the main diagonal.

    The three diagonal boxes share no row, column or box, so no safety check
    is needed.
    """
    for shift in range(BOX):
        values = list(DIGITS)
        rng.shuffle(values)
        index = 0
        for i in range(BOX):
            for j in range(BOX):
                grid[i + shift * BOX, j + shift * BOX] = values[index]
                index += 1


def remove_cells(grid: Grid, count: int, rng: random.Random) -> None:
    """Blank ``count`` distinct filled cells picked uniformly at random."""
    if not 0 <= count <= grid.filled_count():
        raise InvalidTargetError(f"cannot remove {count} cells from a grid with {grid.filled_count()} filled")
    removed = 0
    while removed < count:
        r, c = rng.randrange(SIZE), rng.randrange(SIZE)
        if grid[r, c].is_empty:
            continue
        grid[r, c] = EMPTY
        removed += 1


def generate(
    target_filled_count: int = DEFAULT_TARGET_FILLED,
    *,
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> Grid:
    """Return a solvable puzzle with exactly ``target_filled_count`` clues.

    The puzzle is a subset of one verified solution, so it can always be
    solved, but it may have more than one solution.
    """
    target = _check_target(target_filled_count)
    if rng is None:
        rng = random.Random(seed)

    grid = Grid.empty()
    seed_diagonal_boxes(grid, rng)
    _LOGGER.debug("seeded diagonal boxes: %s", grid.to_string())

    if not solve(grid):
        raise GenerationError("seeded grid has no completion")

    remove_cells(grid, CELL_COUNT - target, rng)
    _LOGGER.debug("removed cells, %d now empty", grid.empty_count())
    _LOGGER.info("generated sudoku with %d clues (seed=%s)", target, seed)
    return grid


__all__ = ["DEFAULT_TARGET_FILLED", "generate", "remove_cells", "seed_diagonal_boxes"]


if __name__ == "__main__":
    from sudoku_grid import print_board

    print("Generated sudoku:")
    print_board(generate(DEFAULT_TARGET_FILLED))
