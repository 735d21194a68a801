"""Adapters that hand the engine grids and text from host objects.

The engine never talks to a workbook or a shape directly; it takes a
:class:`~rxlookup.engine.Grid` snapshot or a :class:`TextSource`.  These
adapters cover the common hosts:

- :class:`WorksheetGridSource` / :class:`WorkbookGridSource` read A1 ranges
  from openpyxl-compatible worksheets (openpyxl itself, or wolfxl).
- :class:`MappingTextSource` / :class:`ShapeTextSource` look up named text.
"""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping
from typing import Any

from rxlookup._utils import parse_range_ref, split_sheet
from rxlookup.engine._grid import Grid

# ---------------------------------------------------------------------------
# openpyxl availability
# ---------------------------------------------------------------------------

_openpyxl_available: bool | None = None


def _check_openpyxl() -> bool:
    global _openpyxl_available
    if _openpyxl_available is None:
        try:
            import openpyxl  # noqa: F401

            _openpyxl_available = True
        except ImportError:
            _openpyxl_available = False
    return _openpyxl_available


# ---------------------------------------------------------------------------
# Grid sources
# ---------------------------------------------------------------------------


class WorksheetGridSource:
    """Reads A1 ranges from one worksheet.

    The worksheet only needs openpyxl's ``iter_rows(min_row, max_row,
    min_col, max_col, values_only=True)``.
    """

    def __init__(self, worksheet: Any) -> None:
        self._worksheet = worksheet

    def read_grid(self, ref: str) -> Grid:
        sheet, cells = split_sheet(ref)
        if sheet is not None and sheet != getattr(self._worksheet, "title", sheet):
            raise KeyError(f"Worksheet '{sheet}' is not this source's sheet")
        min_row, min_col, max_row, max_col = parse_range_ref(cells)
        rows = self._worksheet.iter_rows(
            min_row=min_row,
            max_row=max_row,
            min_col=min_col,
            max_col=max_col,
            values_only=True,
        )
        return Grid.from_rows([tuple(r) for r in rows])


class WorkbookGridSource:
    """Reads ``Sheet!A1:C4`` style ranges from any sheet of a workbook.

    Unqualified refs use *default_sheet*, or the workbook's active sheet.
    """

    def __init__(self, workbook: Any, default_sheet: str | None = None) -> None:
        self._workbook = workbook
        self._default_sheet = default_sheet

    @classmethod
    def from_path(cls, path: str | os.PathLike[str], default_sheet: str | None = None) -> WorkbookGridSource:
        """Open an ``.xlsx`` file with openpyxl, reading cached values."""
        if not _check_openpyxl():
            raise ImportError(
                "Reading .xlsx files requires openpyxl: pip install 'rxlookup[xlsx]'"
            )
        import openpyxl

        wb = openpyxl.load_workbook(str(path), data_only=True)
        return cls(wb, default_sheet=default_sheet)

    def _worksheet(self, sheet: str | None) -> Any:
        name = sheet or self._default_sheet
        if name is None:
            ws = self._workbook.active
            if ws is None:
                raise KeyError("Workbook has no active sheet")
            return ws
        if name not in self._workbook.sheetnames:
            raise KeyError(f"Worksheet '{name}' does not exist")
        return self._workbook[name]

    def read_grid(self, ref: str) -> Grid:
        sheet, cells = split_sheet(ref)
        return WorksheetGridSource(self._worksheet(sheet)).read_grid(cells)


# ---------------------------------------------------------------------------
# Text sources
# ---------------------------------------------------------------------------


class MappingTextSource:
    """Named text held in a mapping; names match case-insensitively."""

    def __init__(self, texts: Mapping[str, str]) -> None:
        self._texts = {name.casefold(): text for name, text in texts.items()}

    def get_text(self, name: str) -> str | None:
        return self._texts.get(name.casefold())


class ShapeTextSource:
    """Text of the first text-box shape whose name matches, ignoring case.

    Shapes are any objects with ``name`` and ``text`` attributes.  A shape
    with a ``shape_type`` attribute only counts when it equals
    *textbox_type*.
    """

    def __init__(self, shapes: Iterable[Any], textbox_type: Any = "textbox") -> None:
        self._shapes = list(shapes)
        self._textbox_type = textbox_type

    def get_text(self, name: str) -> str | None:
        wanted = name.casefold()
        for shape in self._shapes:
            shape_name = getattr(shape, "name", None)
            if not isinstance(shape_name, str) or shape_name.casefold() != wanted:
                continue
            shape_type = getattr(shape, "shape_type", self._textbox_type)
            if shape_type != self._textbox_type:
                continue
            return getattr(shape, "text", None)
        return None
