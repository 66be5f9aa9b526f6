"""Shared error types for grids, the solver and the generator."""

from __future__ import annotations


from dataclasses import dataclass
from typing import List

SEVERITY_ERROR = "ERROR"


class SudokuError(Exception):
    """Base class for every error raised by this project."""


class GridFormatError(SudokuError, ValueError):
    """A cell value or puzzle string cannot be represented as a grid."""


class InvalidTargetError(SudokuError, ValueError):
    """The requested number of filled cells is outside ``[0, 81]``."""


class UnsolvableError(SudokuError):
    """Raised by :func:`sudoku_solver.solve_puzzle` when no completion exists."""


class GenerationError(SudokuError):
    """The generator failed to complete its seeded grid."""


@dataclass(frozen=True)
class ValidationIssue:
    """Single finding produced while checking a grid."""

    code: str
    msg: str
    path: str
    severity: str


@dataclass(frozen=True)
class ValidationReport:
    """Aggregate result of validating a grid."""

    ok: bool
    errors: List[ValidationIssue]

    @property
    def codes(self) -> List[str]:
        return [issue.code for issue in self.errors]


class ManagedValidationError(SudokuError):
    """Raised by :func:`contracts.validator.assert_valid`."""

    def __init__(self, message: str, report: ValidationReport) -> None:
        super().__init__(message)
        self.report = report


def make_error(code: str, msg: str, path: str) -> ValidationIssue:
    """Construct an error-level :class:`ValidationIssue`."""

    return ValidationIssue(code=code, msg=msg, path=path, severity=SEVERITY_ERROR)


__all__ = [
    "SEVERITY_ERROR",
    "GenerationError",
    "GridFormatError",
    "InvalidTargetError",
    "ManagedValidationError",
    "SudokuError",
    "UnsolvableError",
    "ValidationIssue",
    "ValidationReport",
    "make_error",
]
