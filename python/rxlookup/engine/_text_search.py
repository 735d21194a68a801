"""Line search over named free text (TEXTBOX_SEARCH / TEXTBOX_COUNT)."""

from __future__ import annotations

import logging
import re
from typing import Any

from rxlookup.engine._errors import ExcelError, error_grid
from rxlookup.engine._grid import cell_text
from rxlookup.engine._lookup import coerce_flag
from rxlookup.engine._matching import Matcher, MatchMode, compile_matcher
from rxlookup.engine._protocol import TextSource

logger = logging.getLogger(__name__)

LINE_BREAKS = "\r\n"

_LINE_SPLIT_RE = re.compile(f"[{LINE_BREAKS}]+")


def split_lines(text: str) -> list[str]:
    """Split on CR and LF, dropping empty segments."""
    return [line for line in _LINE_SPLIT_RE.split(text) if line]


def matching_lines(text: str, matcher: Matcher) -> list[str]:
    """Lines of *text* accepted by *matcher*, in order."""
    return [line for line in split_lines(text) if matcher(line)]


def _prepare(
    func_name: str,
    source: TextSource,
    name: Any,
    pattern: Any,
    is_regex: Any,
) -> tuple[str, Matcher] | ExcelError:
    """Validate arguments, fetch the text and compile the pattern."""
    name_text = cell_text(name)
    pattern_text = cell_text(pattern)
    if not name_text:
        err = ExcelError.empty_name()
    elif not pattern_text:
        err = ExcelError.empty_pattern()
    else:
        text = source.get_text(name_text)
        if not text:
            err = ExcelError.source_not_found(name_text)
        else:
            mode = MatchMode.REGEX if coerce_flag(is_regex) else MatchMode.SUBSTRING
            matcher = compile_matcher(pattern_text, mode)
            if not isinstance(matcher, ExcelError):
                return text, matcher
            err = matcher
    logger.debug("%s: %s", func_name, err)
    return err


def search_lines(
    source: TextSource,
    name: Any,
    pattern: Any,
    is_regex: Any = False,
) -> list[list[Any]]:
    """TEXTBOX_SEARCH: lines of the named text that match *pattern*.

    Returns a single-column grid, one matching line per row, or a 1x1 error
    grid (``#N/A`` when nothing matches).
    """
    try:
        prepared = _prepare("TEXTBOX_SEARCH", source, name, pattern, is_regex)
        if isinstance(prepared, ExcelError):
            return error_grid(prepared)
        text, matcher = prepared
        lines = matching_lines(text, matcher)
        if not lines:
            return error_grid(ExcelError.NA)
        return [[line] for line in lines]
    except Exception as e:
        logger.warning("Error evaluating TEXTBOX_SEARCH: %s", e, exc_info=True)
        return error_grid(ExcelError.internal(e))


def count_matches(
    source: TextSource,
    name: Any,
    pattern: Any,
    is_regex: Any = False,
) -> int | ExcelError:
    """TEXTBOX_COUNT: number of lines of the named text that match *pattern*.

    Zero matches is a count of 0, not an error.
    """
    try:
        prepared = _prepare("TEXTBOX_COUNT", source, name, pattern, is_regex)
        if isinstance(prepared, ExcelError):
            return prepared
        text, matcher = prepared
        return len(matching_lines(text, matcher))
    except Exception as e:
        logger.warning("Error evaluating TEXTBOX_COUNT: %s", e, exc_info=True)
        return ExcelError.internal(e)
