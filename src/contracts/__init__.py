"""Error types and solution checks for Sudoku grids.

The checks live in :mod:`contracts.validator`; this package root only
re-exports the error types so :mod:`sudoku_grid` can import them.
"""

from __future__ import annotations

from .errors import (
    GenerationError,
    GridFormatError,
    InvalidTargetError,
    ManagedValidationError,
    SudokuError,
    UnsolvableError,
    ValidationIssue,
    ValidationReport,
)

__all__ = [
    "GenerationError",
    "GridFormatError",
    "InvalidTargetError",
    "ManagedValidationError",
    "SudokuError",
    "UnsolvableError",
    "ValidationIssue",
    "ValidationReport",
]
