"""A1 reference helpers for the worksheet adapters."""

from __future__ import annotations

import re

_A1_RE = re.compile(r"^\$?([A-Za-z]{1,3})\$?([1-9][0-9]*)$")
_COLUMN_RE = re.compile(r"^[A-Za-z]{1,3}$")


def column_index(letters: str) -> int:
    """Convert column letters (``A``, ``AA``) to a 1-based index."""
    if not _COLUMN_RE.match(letters):
        raise ValueError(f"Invalid column letters: {letters!r}")
    index = 0
    for ch in letters.upper():
        index = index * 26 + (ord(ch) - ord("A") + 1)
    return index


def a1_to_rowcol(ref: str) -> tuple[int, int]:
    """``"B3"`` -> ``(3, 2)``.  Dollar signs are ignored."""
    m = _A1_RE.match(ref.strip())
    if not m:
        raise ValueError(f"Invalid A1 reference: {ref!r}")
    return int(m.group(2)), column_index(m.group(1))


def split_sheet(ref: str) -> tuple[str | None, str]:
    """Split ``"'My Sheet'!A1:B2"`` into ``("My Sheet", "A1:B2")``."""
    if "!" not in ref:
        return None, ref.strip()
    sheet, cells = ref.rsplit("!", 1)
    sheet = sheet.strip()
    if len(sheet) >= 2 and sheet[0] == "'" and sheet[-1] == "'":
        sheet = sheet[1:-1].replace("''", "'")
    return sheet, cells.strip()


def parse_range_ref(ref: str) -> tuple[int, int, int, int]:
    """Parse ``"A1:C4"`` (or a single cell) into 1-based bounds.

    Returns ``(min_row, min_col, max_row, max_col)`` with the corners
    normalized, so ``"C4:A1"`` gives the same result as ``"A1:C4"``.
    """
    parts = ref.split(":")
    if len(parts) == 1:
        row, col = a1_to_rowcol(parts[0])
        return row, col, row, col
    if len(parts) != 2:
        raise ValueError(f"Invalid range: {ref!r}")
    r1, c1 = a1_to_rowcol(parts[0])
    r2, c2 = a1_to_rowcol(parts[1])
    return min(r1, r2), min(c1, c2), max(r1, r2), max(c1, c2)
