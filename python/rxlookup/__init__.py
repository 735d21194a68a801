"""rxlookup - regex and literal row lookups over spreadsheet-style grids.

Usage::

    from rxlookup import rx_multi_lookup, ex_lookup

    grid = [["id", "val"], ["A1", "x"], ["B2", "y"], ["A3", "z"]]
    rx_multi_lookup("^A", grid, 0, 0, 1)       # [["A1", "x"], ["A3", "z"]]
    ex_lookup("B2", grid, full_match=True)     # [["B2", "y"]]
    ex_lookup("Z9", grid)                      # [[#N/A]]

Failures never raise: every entry point returns a 1x1 grid holding an
:class:`ExcelError` (``count_matches`` returns the error itself).
"""

from rxlookup._sources import (
    MappingTextSource,
    ShapeTextSource,
    WorkbookGridSource,
    WorksheetGridSource,
)
from rxlookup.engine import (
    ColumnRange,
    ErrorKind,
    ExcelError,
    Grid,
    GridSource,
    MatchMode,
    TextSource,
    count_matches,
    ex_lookup,
    ex_multi_lookup,
    is_error,
    rx_lookup,
    rx_multi_lookup,
    search_lines,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "ColumnRange",
    "ErrorKind",
    "ExcelError",
    "Grid",
    "GridSource",
    "MappingTextSource",
    "MatchMode",
    "ShapeTextSource",
    "TextSource",
    "WorkbookGridSource",
    "WorksheetGridSource",
    "count_matches",
    "ex_lookup",
    "ex_multi_lookup",
    "is_error",
    "rx_lookup",
    "rx_multi_lookup",
    "search_lines",
]
