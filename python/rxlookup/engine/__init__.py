"""rxlookup.engine - host-independent pattern lookup over cell grids."""

from rxlookup.engine._errors import ErrorKind, ExcelError, is_error
from rxlookup.engine._grid import Grid, cell_text, strip_spaces
from rxlookup.engine._lookup import (
    ex_lookup,
    ex_multi_lookup,
    project,
    resolve_columns,
    rx_lookup,
    rx_multi_lookup,
)
from rxlookup.engine._matching import MatchMode, compile_matcher, scan
from rxlookup.engine._protocol import ColumnRange, GridSource, TextSource
from rxlookup.engine._text_search import count_matches, search_lines, split_lines

__all__ = [
    "ColumnRange",
    "ErrorKind",
    "ExcelError",
    "Grid",
    "GridSource",
    "MatchMode",
    "TextSource",
    "cell_text",
    "compile_matcher",
    "count_matches",
    "ex_lookup",
    "ex_multi_lookup",
    "is_error",
    "project",
    "resolve_columns",
    "rx_lookup",
    "rx_multi_lookup",
    "scan",
    "search_lines",
    "split_lines",
    "strip_spaces",
]
