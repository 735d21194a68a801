"""Grid: immutable rectangular cell container, plus cell text helpers."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from rxlookup.engine._errors import ExcelError

# Characters deleted from cell text when space removal is requested:
# ASCII space and the full-width (ideographic) space.
SPACE_CHARACTERS: tuple[str, ...] = (" ", "\u3000")

# Whole floats at or above this magnitude display in scientific form.
_SCIENTIFIC_THRESHOLD = 1e15


@dataclass(frozen=True)
class Grid:
    """A rectangular block of cell values, stored row-major.

    Rows and columns are 0-based.  Use :meth:`from_rows` to build one from
    nested sequences; it rejects ragged and empty input.
    """

    values: tuple[Any, ...]
    n_rows: int
    n_cols: int

    def __post_init__(self) -> None:
        if self.n_rows < 1 or self.n_cols < 1:
            raise ValueError(
                f"Grid must have at least one row and one column, got {self.n_rows}x{self.n_cols}"
            )
        if len(self.values) != self.n_rows * self.n_cols:
            raise ValueError(
                f"Grid of {self.n_rows}x{self.n_cols} needs {self.n_rows * self.n_cols} "
                f"values, got {len(self.values)}"
            )

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Any]]) -> Grid:
        """Build a grid from a sequence of equally long row sequences."""
        materialized = [_as_row(r, i) for i, r in enumerate(rows)]
        if not materialized:
            raise ValueError("Grid must have at least one row")
        width = len(materialized[0])
        for i, row in enumerate(materialized):
            if len(row) != width:
                raise ValueError(
                    f"Grid rows must all have {width} columns; row {i} has {len(row)}"
                )
        flat = tuple(v for row in materialized for v in row)
        return cls(values=flat, n_rows=len(materialized), n_cols=width)

    @classmethod
    def coerce(cls, obj: Any) -> Grid:
        """Return *obj* as a Grid, converting nested sequences."""
        if isinstance(obj, Grid):
            return obj
        if obj is None or isinstance(obj, (str, bytes)):
            raise ValueError(f"Cannot use {type(obj).__name__} as a grid")
        return cls.from_rows(obj)

    def get(self, row: int, col: int) -> Any:
        """Get the value at 0-based (row, col)."""
        if row < 0 or row >= self.n_rows or col < 0 or col >= self.n_cols:
            raise IndexError(f"Cell ({row}, {col}) outside {self.n_rows}x{self.n_cols} grid")
        return self.values[row * self.n_cols + col]

    def row(self, row: int) -> tuple[Any, ...]:
        """Extract a 0-based row."""
        if row < 0 or row >= self.n_rows:
            raise IndexError(f"Row {row} outside grid of {self.n_rows} rows")
        start = row * self.n_cols
        return self.values[start:start + self.n_cols]

    def column(self, col: int) -> tuple[Any, ...]:
        """Extract a 0-based column."""
        if col < 0 or col >= self.n_cols:
            raise IndexError(f"Column {col} outside grid of {self.n_cols} columns")
        return self.values[col::self.n_cols]

    def to_rows(self) -> list[list[Any]]:
        """Return the grid as a list of row lists."""
        return [list(self.row(r)) for r in range(self.n_rows)]

    @property
    def shape(self) -> tuple[int, int]:
        return (self.n_rows, self.n_cols)

    def __iter__(self) -> Iterator[tuple[Any, ...]]:
        return (self.row(r) for r in range(self.n_rows))

    def __len__(self) -> int:
        return self.n_rows


def _as_row(row: Any, index: int) -> tuple[Any, ...]:
    if isinstance(row, (str, bytes)) or not isinstance(row, Sequence):
        raise ValueError(f"Grid row {index} is not a sequence: {row!r}")
    return tuple(row)


def cell_text(value: Any) -> str:
    """Text of a cell value as used for matching.

    Blank cells are ``""``; whole-number floats drop the ``.0`` the way a
    spreadsheet displays them, switching to ``1E+16`` style from 1e15 up.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "True" if value else "False"
    if isinstance(value, float) and value.is_integer():
        if abs(value) < _SCIENTIFIC_THRESHOLD:
            return str(int(value))
        return format(Decimal(repr(value)).normalize(), "E")
    if isinstance(value, ExcelError):
        return value.token
    return str(value)


def strip_spaces(text: str) -> str:
    """Delete every ASCII and full-width space from *text*."""
    for ch in SPACE_CHARACTERS:
        text = text.replace(ch, "")
    return text
