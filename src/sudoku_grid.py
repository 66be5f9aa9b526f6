"""Cell and grid model for the classic 9x9 Sudoku."""

from __future__ import annotations

from enum import Enum
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple, Union

from contracts.errors import GridFormatError

SIZE = 9
BOX = 3
CELL_COUNT = SIZE * SIZE
EMPTY_CHAR = "."
SEPARATOR = "-" * 45

_EMPTY_CHARS = {".", "0", "_", "-"}
_IGNORED_CHARS = {"|", "+"}


class Cell(Enum):
    """A single Sudoku cell: one of the digits 1-9, or ``EMPTY``.

    Members are singletons, so cells compare by identity and no other value
    can be stored in a grid.
    """

    EMPTY = 0
    ONE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9

    @property
    def is_empty(self) -> bool:
        return self is Cell.EMPTY

    @property
    def digit(self) -> Optional[int]:
        return None if self is Cell.EMPTY else self.value

    @classmethod
    def coerce(cls, value: "CellLike") -> "Cell":
        """Return the cell for ``value`` (a cell, an int 1-9, ``0``/``None`` for empty, or a character)."""

        if isinstance(value, Cell):
            return value
        if isinstance(value, bool):
            raise GridFormatError(f"unsupported cell value {value!r}")
        if value is None or (isinstance(value, int) and value == 0):
            return EMPTY
        if isinstance(value, str):
            if len(value) == 1 and value in _EMPTY_CHARS:
                return EMPTY
            if len(value) == 1 and value in "123456789":
                return DIGITS[int(value) - 1]
            raise GridFormatError(f"unsupported cell character {value!r}")
        if isinstance(value, int) and 1 <= value <= SIZE:
            return DIGITS[value - 1]
        raise GridFormatError(f"unsupported cell value {value!r}")

    def __str__(self) -> str:
        return EMPTY_CHAR if self.digit is None else str(self.digit)


CellLike = Union[Cell, int, str, None]

EMPTY = Cell.EMPTY
DIGITS: Tuple[Cell, ...] = tuple(Cell(d) for d in range(1, SIZE + 1))


def box_origin(row: int, col: int) -> Tuple[int, int]:
    """Top-left coordinate of the 3x3 box containing ``(row, col)``."""

    return BOX * (row // BOX), BOX * (col // BOX)


def _check_index(row: int, col: int) -> None:
    if not (0 <= row < SIZE and 0 <= col < SIZE):
        raise IndexError(f"cell ({row}, {col}) is outside the {SIZE}x{SIZE} grid")


class Grid:
    """Mutable 9x9 board of :class:`Cell` values."""

    def __init__(self) -> None:
        self._cells: List[List[Cell]] = [[EMPTY] * SIZE for _ in range(SIZE)]

    # ---------- Construction ----------

    @classmethod
    def empty(cls) -> "Grid":
        return cls()

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[CellLike]]) -> "Grid":
        if len(rows) != SIZE or any(len(row) != SIZE for row in rows):
            raise GridFormatError(f"grid must have {SIZE} rows of {SIZE} cells")
        grid = cls()
        for r, row in enumerate(rows):
            for c, value in enumerate(row):
                grid._cells[r][c] = Cell.coerce(value)
        return grid

    @classmethod
    def from_string(cls, text: Iterable[str]) -> "Grid":
        """Parse 81 row-major cells; whitespace and ``|``/``+`` separators are skipped."""

        cells: List[Cell] = []
        for ch in text:
            if ch.isspace() or ch in _IGNORED_CHARS:
                continue
            cells.append(Cell.coerce(ch))
        if len(cells) != CELL_COUNT:
            raise GridFormatError(f"Sudoku puzzle must yield {CELL_COUNT} cells, got {len(cells)}")
        grid = cls()
        for index, cell in enumerate(cells):
            grid._cells[index // SIZE][index % SIZE] = cell
        return grid

    def copy(self) -> "Grid":
        clone = Grid()
        clone._cells = [row[:] for row in self._cells]
        return clone

    # ---------- Cell access ----------

    def __getitem__(self, key: Tuple[int, int]) -> Cell:
        row, col = key
        _check_index(row, col)
        return self._cells[row][col]

    def __setitem__(self, key: Tuple[int, int], value: CellLike) -> None:
        row, col = key
        _check_index(row, col)
        self._cells[row][col] = Cell.coerce(value)

    def row(self, row: int) -> Tuple[Cell, ...]:
        return tuple(self._cells[row])

    def column(self, col: int) -> Tuple[Cell, ...]:
        return tuple([row[col] for row in self._cells])

    def box(self, box_row: int, box_col: int) -> Tuple[Cell, ...]:
        r0, c0 = BOX * box_row, BOX * box_col
        return tuple([cell for row in self._cells[r0 : r0 + BOX] for cell in row[c0 : c0 + BOX]])

    def rows(self) -> Iterator[Tuple[Cell, ...]]:
        for row in self._cells:
            yield tuple(row)

    # ---------- Summary ----------

    def filled_count(self) -> int:
        return sum(1 for row in self._cells for cell in row if not cell.is_empty)

    def empty_count(self) -> int:
        return CELL_COUNT - self.filled_count()

    def is_full(self) -> bool:
        return self.filled_count() == CELL_COUNT

    def to_string(self) -> str:
        return "".join(str(cell) for row in self._cells for cell in row)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self._cells == other._cells

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Grid({self.to_string()!r})"


def format_board(grid: Grid) -> str:
    """Separator, one Python-list line per row, separator."""

    lines = [SEPARATOR]
    for row in grid.rows():
        lines.append(repr([str(cell) for cell in row]))
    lines.append(SEPARATOR)
    return "\n".join(lines)


def print_board(grid: Grid) -> None:
    print(format_board(grid))


__all__ = [
    "BOX",
    "CELL_COUNT",
    "Cell",
    "CellLike",
    "DIGITS",
    "EMPTY",
    "Grid",
    "SIZE",
    "box_origin",
    "format_board",
    "print_board",
]
