"""Command line entry point: generate one puzzle and print it."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List

from contracts.errors import InvalidTargetError, ManagedValidationError, UnsolvableError
from contracts.validator import assert_valid
from project_config import get_section
from sudoku_generator import DEFAULT_TARGET_FILLED, generate
from sudoku_grid import Grid, format_board
from sudoku_solver import solve_puzzle

_LOGGER = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_DEFAULT_LOG_LEVEL = "WARNING"
_DEFAULT_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _resolve_log_level(level_override: str | None) -> str:
    level = level_override or get_section("logging.level", _DEFAULT_LOG_LEVEL)
    normalised = str(level).strip().upper()
    if normalised not in LOG_LEVELS:
        raise ValueError(f"unknown logging level {level!r}; expected one of {', '.join(LOG_LEVELS)}")
    return normalised


def _configure_logging(level: str) -> None:
    fmt = get_section("logging.format", _DEFAULT_LOG_FORMAT)
    logging.basicConfig(level=level, format=fmt, stream=sys.stderr)


def _self_check(grid: Grid) -> None:
    solved = solve_puzzle(grid)
    assert_valid(solved)
    _LOGGER.info("self-check passed")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate a 9x9 Sudoku puzzle and print it")
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the random source (default: unseeded)",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Override the configured logging level",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Solve the generated puzzle and validate the solution before exiting",
    )
    return parser


def main(argv: List[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    try:
        level = _resolve_log_level(args.log_level)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    _configure_logging(level)

    target = get_section("generator.target_filled", DEFAULT_TARGET_FILLED)
    _LOGGER.debug("target filled cells: %r", target)
    try:
        grid = generate(target, seed=args.seed)
    except InvalidTargetError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    print("Generated sudoku:")
    print(format_board(grid))

    if args.check:
        try:
            _self_check(grid)
        except (UnsolvableError, ManagedValidationError) as exc:
            print(f"error: self-check failed: {exc}", file=sys.stderr)
            return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
