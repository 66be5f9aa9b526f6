"""Read-only checks that a grid is a complete, valid Sudoku solution."""

from __future__ import annotations

from collections import Counter
from typing import Iterable, List, Sequence

from sudoku_grid import BOX, SIZE, Cell, Grid

from .errors import ManagedValidationError, ValidationIssue, ValidationReport, make_error


def _duplicates(cells: Iterable[Cell]) -> List[int]:
    counts = Counter(cell.digit for cell in cells if not cell.is_empty)
    return sorted(digit for digit, count in counts.items() if count > 1)


def _group_issues(code: str, label: str, path: str, cells: Sequence[Cell]) -> List[ValidationIssue]:
    dupes = _duplicates(cells)
    if not dupes:
        return []
    listed = ", ".join(str(d) for d in dupes)
    return [make_error(code, f"{label} repeats {listed}", path)]


def validate(grid: Grid) -> ValidationReport:
    """Collect every empty cell and every duplicated digit in ``grid``."""

    errors: List[ValidationIssue] = []

    for r in range(SIZE):
        for c in range(SIZE):
            if grid[r, c].is_empty:
                errors.append(make_error("cell.empty", f"cell ({r}, {c}) is empty", f"$.cells[{r}][{c}]"))

    for r in range(SIZE):
        errors.extend(_group_issues("row.duplicate", f"row {r}", f"$.rows[{r}]", grid.row(r)))
    for c in range(SIZE):
        errors.extend(_group_issues("column.duplicate", f"column {c}", f"$.columns[{c}]", grid.column(c)))
    for br in range(BOX):
        for bc in range(BOX):
            errors.extend(
                _group_issues("box.duplicate", f"box ({br}, {bc})", f"$.boxes[{br}][{bc}]", grid.box(br, bc))
            )

    return ValidationReport(ok=not errors, errors=errors)


def is_solved(grid: Grid) -> bool:
    """``True`` iff every row, column and box holds the nine digits exactly once."""

    return validate(grid).ok


def assert_valid(grid: Grid) -> None:
    report = validate(grid)
    if report.ok:
        return
    codes = ", ".join(issue.code for issue in report.errors[:5])
    if len(report.errors) > 5:
        codes += ", …"
    raise ManagedValidationError(f"Grid is not a valid solution: {codes}", report)


__all__ = ["assert_valid", "is_solved", "validate"]
