from __future__ import annotations

import random

import pytest

from contracts.errors import GenerationError, InvalidTargetError
from contracts.validator import is_solved
from sudoku_generator import DEFAULT_TARGET_FILLED, generate, remove_cells, seed_diagonal_boxes
from sudoku_grid import DIGITS, Grid
from sudoku_solver import solve


def _is_subset(puzzle: Grid, solution: Grid) -> bool:
    return all(
        puzzle[r, c].is_empty or puzzle[r, c] is solution[r, c] for r in range(9) for c in range(9)
    )


def test_seed_diagonal_boxes_fills_only_the_diagonal():
    grid = Grid.empty()
    seed_diagonal_boxes(grid, random.Random(7))
    assert grid.filled_count() == 27
    for br in range(3):
        for bc in range(3):
            box = grid.box(br, bc)
            if br == bc:
                assert sorted(cell.digit for cell in box) == list(range(1, 10))
            else:
                assert all(cell.is_empty for cell in box)


def test_full_target_returns_a_valid_solution():
    grid = generate(81, seed=1)
    assert grid.filled_count() == 81
    assert is_solved(grid)


@pytest.mark.parametrize("target", [17, 25, DEFAULT_TARGET_FILLED, 45, 80])
def test_generate_keeps_exact_clue_count_from_one_solution(target):
    seed = 1000 + target
    puzzle = generate(target, seed=seed)
    solution = generate(81, seed=seed)
    assert puzzle.filled_count() == target
    assert is_solved(solution)
    assert _is_subset(puzzle, solution)


# Plain backtracking can take tens of seconds on low clue counts (about 26s
# for seed 5, target 22), so low targets are covered by the subset check above.
@pytest.mark.parametrize("target", [40, 60])
def test_generated_puzzle_is_solvable(target):
    puzzle = generate(target, seed=target)
    assert solve(puzzle)
    assert is_solved(puzzle)


def test_zero_target_empties_the_grid():
    assert generate(0, seed=3).filled_count() == 0


def test_same_seed_reproduces_puzzle():
    assert generate(30, seed=42) == generate(30, seed=42)


def test_explicit_rng_is_used():
    a = generate(30, rng=random.Random(9))
    b = generate(30, rng=random.Random(9))
    assert a == b


@pytest.mark.parametrize("target", [-1, 82, 1000, 30.0, "30", True, None])
def test_invalid_targets_fail_fast(target):
    with pytest.raises(InvalidTargetError):
        generate(target)


def test_remove_cells_rejects_impossible_count():
    grid = Grid.empty()
    grid[0, 0] = DIGITS[0]
    with pytest.raises(InvalidTargetError):
        remove_cells(grid, 2, random.Random(0))


def test_unsolvable_seed_raises(monkeypatch):
    import sudoku_generator

    monkeypatch.setattr(sudoku_generator, "solve", lambda grid: False)
    with pytest.raises(GenerationError):
        generate(30, seed=0)
