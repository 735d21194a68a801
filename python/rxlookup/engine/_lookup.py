"""Grid lookups: RXLOOKUP, RXMULTILOOKUP, EXLOOKUP, EXMULTILOOKUP.

All four variants share one pipeline::

    validate pattern -> coerce grid -> check search column
    -> resolve column range -> compile matcher -> scan -> project

and differ only in the match mode handed to :func:`compile_matcher` and
whether :func:`scan` stops at the first hit.  Every failure comes back as a
1x1 grid holding an :class:`ExcelError`; nothing raises out of an entry point.

A pathological regex can make a scan slow.  There is no timeout; avoiding
such patterns is up to the caller.
"""

from __future__ import annotations

import logging
from typing import Any

from rxlookup.engine._errors import ExcelError, error_grid
from rxlookup.engine._grid import Grid, cell_text
from rxlookup.engine._matching import MatchMode, compile_matcher, scan
from rxlookup.engine._protocol import ColumnRange

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Argument coercion (hosts hand in loosely-typed cell values)
# ---------------------------------------------------------------------------


def coerce_index(value: Any, name: str) -> int:
    """Convert an index argument to int; ``None`` means the default 0."""
    if value is None:
        return 0
    if isinstance(value, bool):
        raise ValueError(f"{name} must be a number, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value)
    if isinstance(value, str):
        try:
            return int(float(value.strip()))
        except ValueError:
            raise ValueError(f"{name} must be a number, got {value!r}") from None
    raise ValueError(f"{name} must be a number, got {value!r}")


def coerce_flag(value: Any) -> bool:
    """Convert a TRUE/FALSE argument; ``None`` is False."""
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return bool(value)
    if isinstance(value, str):
        return value.strip().upper() not in ("", "FALSE", "0")
    return bool(value)


# ---------------------------------------------------------------------------
# Column range resolution and projection
# ---------------------------------------------------------------------------


def resolve_columns(
    grid: Grid,
    search_col: int,
    start_col: int = 0,
    end_col: int = 0,
) -> ColumnRange | ExcelError:
    """Validate the search column and resolve the output column span.

    ``start_col == end_col == 0`` selects every column, so an explicit
    request for column 0 alone cannot be expressed.
    """
    n_cols = grid.n_cols
    if search_col < 0 or search_col >= n_cols:
        return ExcelError.search_column(n_cols)

    if start_col == 0 and end_col == 0:
        end_col = n_cols - 1
    elif end_col < start_col:
        end_col = start_col

    # Clamp each end independently
    start_col = max(0, min(n_cols - 1, start_col))
    end_col = max(0, min(n_cols - 1, end_col))
    return ColumnRange(start=start_col, end=end_col)


def project(grid: Grid, rows: list[int], columns: ColumnRange) -> list[list[Any]]:
    """Copy *columns* of each matched row, in scan order.

    Always returns a 2D list, even for a single cell.
    """
    return [[grid.get(r, c) for c in columns.columns()] for r in rows]


# ---------------------------------------------------------------------------
# Shared pipeline
# ---------------------------------------------------------------------------


def _fail(func_name: str, err: ExcelError) -> list[list[Any]]:
    if err.is_misuse:
        logger.debug("%s: %s", func_name, err)
    return error_grid(err)


def _lookup(
    func_name: str,
    pattern: Any,
    grid: Any,
    search_col: Any,
    start_col: Any,
    end_col: Any,
    remove_spaces: Any,
    full_match: Any,
    *,
    regex: bool,
    stop_at_first: bool,
) -> list[list[Any]]:
    try:
        pattern_text = cell_text(pattern)
        if not pattern_text:
            return _fail(func_name, ExcelError.VALUE)

        table = Grid.coerce(grid)
        search_idx = coerce_index(search_col, "search_col")
        columns = resolve_columns(
            table,
            search_idx,
            coerce_index(start_col, "start_col"),
            coerce_index(end_col, "end_col"),
        )
        if isinstance(columns, ExcelError):
            return _fail(func_name, columns)

        mode = MatchMode.REGEX if regex else MatchMode.literal(coerce_flag(full_match))
        matcher = compile_matcher(pattern_text, mode)
        if isinstance(matcher, ExcelError):
            return _fail(func_name, matcher)

        rows = scan(
            table,
            search_idx,
            matcher,
            remove_spaces=coerce_flag(remove_spaces),
            stop_at_first=stop_at_first,
        )
        if isinstance(rows, ExcelError):
            return error_grid(rows)

        return project(table, rows, columns)
    except Exception as e:
        logger.warning("Error evaluating %s: %s", func_name, e, exc_info=True)
        return error_grid(ExcelError.internal(e))


# ---------------------------------------------------------------------------
# Entry points
# ---------------------------------------------------------------------------


def rx_multi_lookup(
    pattern: Any,
    grid: Any,
    search_col: Any = 0,
    start_col: Any = 0,
    end_col: Any = 0,
    remove_spaces: Any = False,
) -> list[list[Any]]:
    """RXMULTILOOKUP: every row whose search column matches a regex.

    Returns the ``start_col..end_col`` slice of each matching row, top to
    bottom.  ``remove_spaces`` deletes ASCII and full-width spaces from the
    cell text (never from the pattern) before matching.
    """
    return _lookup(
        "RXMULTILOOKUP", pattern, grid, search_col, start_col, end_col,
        remove_spaces, False, regex=True, stop_at_first=False,
    )


def rx_lookup(
    pattern: Any,
    grid: Any,
    search_col: Any = 0,
    start_col: Any = 0,
    end_col: Any = 0,
    remove_spaces: Any = False,
) -> list[list[Any]]:
    """RXLOOKUP: like :func:`rx_multi_lookup` but only the first matching row."""
    return _lookup(
        "RXLOOKUP", pattern, grid, search_col, start_col, end_col,
        remove_spaces, False, regex=True, stop_at_first=True,
    )


def ex_multi_lookup(
    pattern: Any,
    grid: Any,
    search_col: Any = 0,
    start_col: Any = 0,
    end_col: Any = 0,
    remove_spaces: Any = False,
    full_match: Any = False,
) -> list[list[Any]]:
    """EXMULTILOOKUP: every row whose search column contains the literal text.

    With ``full_match`` the cell text must equal the pattern exactly.
    """
    return _lookup(
        "EXMULTILOOKUP", pattern, grid, search_col, start_col, end_col,
        remove_spaces, full_match, regex=False, stop_at_first=False,
    )


def ex_lookup(
    pattern: Any,
    grid: Any,
    search_col: Any = 0,
    start_col: Any = 0,
    end_col: Any = 0,
    remove_spaces: Any = False,
    full_match: Any = False,
) -> list[list[Any]]:
    """EXLOOKUP: like :func:`ex_multi_lookup` but only the first matching row."""
    return _lookup(
        "EXLOOKUP", pattern, grid, search_col, start_col, end_col,
        remove_spaces, full_match, regex=False, stop_at_first=True,
    )
