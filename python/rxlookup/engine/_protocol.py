"""Data-source protocols and the column range dataclass."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from rxlookup.engine._grid import Grid


@dataclass(frozen=True)
class ColumnRange:
    """Inclusive, already-clamped span of columns copied for each matched row."""

    start: int
    end: int

    @property
    def width(self) -> int:
        return self.end - self.start + 1

    def columns(self) -> range:
        return range(self.start, self.end + 1)


@runtime_checkable
class GridSource(Protocol):
    """Supplies grids of cell values, e.g. from a worksheet range.

    The lookups never call a GridSource; they take the ``Grid`` it returns.
    This protocol is the shape the worksheet adapters implement, so a host
    can swap them for its own reader.
    """

    def read_grid(self, ref: str) -> Grid:
        """Return the cells addressed by *ref* as a snapshot Grid."""
        ...


@runtime_checkable
class TextSource(Protocol):
    """Supplies free text from a named object, e.g. a text box shape."""

    def get_text(self, name: str) -> str | None:
        """Return the text of *name*, or None when there is no such source."""
        ...
