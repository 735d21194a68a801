"""Pattern compilation and the row scanner shared by every lookup variant."""

from __future__ import annotations

import re
from enum import Enum
from typing import Callable

from rxlookup.engine._errors import ExcelError
from rxlookup.engine._grid import Grid, cell_text, strip_spaces

Matcher = Callable[[str], bool]


class MatchMode(Enum):
    """How a pattern is tested against cell text."""

    REGEX = "regex"  # unanchored search
    SUBSTRING = "substring"  # literal containment
    FULL_MATCH = "full_match"  # literal equality

    @classmethod
    def literal(cls, full_match: bool) -> MatchMode:
        return cls.FULL_MATCH if full_match else cls.SUBSTRING


def compile_matcher(pattern: str, mode: MatchMode) -> Matcher | ExcelError:
    """Turn *pattern* into a predicate over cell text.

    Returns ``ExcelError.VALUE`` for an empty pattern and an
    ``INVALID_PATTERN`` error when a regex does not compile.  Literal
    patterns are compared verbatim; space removal never touches them.
    """
    if not pattern:
        return ExcelError.VALUE

    if mode is MatchMode.REGEX:
        try:
            regex = re.compile(pattern)
        except re.error as e:
            return ExcelError.invalid_pattern(str(e))
        return lambda text, r=regex: r.search(text) is not None

    if mode is MatchMode.FULL_MATCH:
        return lambda text, p=pattern: text == p
    return lambda text, p=pattern: p in text


def scan(
    grid: Grid,
    search_col: int,
    matcher: Matcher,
    remove_spaces: bool = False,
    stop_at_first: bool = False,
) -> list[int] | ExcelError:
    """Return matching row indices in ascending order, or ``ExcelError.NA``.

    With *stop_at_first* the scan ends at the first hit, so the result has
    exactly one element.
    """
    matched: list[int] = []
    for row, value in enumerate(grid.column(search_col)):
        text = cell_text(value)
        if remove_spaces:
            text = strip_spaces(text)
        if matcher(text):
            matched.append(row)
            if stop_at_first:
                break
    if not matched:
        return ExcelError.NA
    return matched
