"""In-band error values returned by lookup entry points instead of raising."""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorKind(Enum):
    """Why a lookup produced an error value."""

    EMPTY_PATTERN = "empty_pattern"
    EMPTY_NAME = "empty_name"
    INVALID_SEARCH_COLUMN = "invalid_search_column"
    INVALID_PATTERN = "invalid_pattern"
    NO_MATCH = "no_match"
    SOURCE_NOT_FOUND = "source_not_found"
    INTERNAL = "internal"


# Kinds that mean the caller passed bad arguments (as opposed to a defect).
_MISUSE_KINDS = frozenset({
    ErrorKind.EMPTY_PATTERN,
    ErrorKind.EMPTY_NAME,
    ErrorKind.INVALID_SEARCH_COLUMN,
    ErrorKind.INVALID_PATTERN,
    ErrorKind.SOURCE_NOT_FOUND,
})


class ExcelError:
    """Spreadsheet error value placed in a result cell.

    Detail-less errors are cached singletons (``ExcelError.NA``,
    ``ExcelError.VALUE``).  Errors compare equal to their display token, so
    ``ExcelError.NA == "#N/A"`` and ``[[ExcelError.NA]] == [["#N/A"]]``.
    """

    __slots__ = ("code", "kind", "detail")
    _cache: dict[str, ExcelError] = {}

    NA: ExcelError
    VALUE: ExcelError

    def __init__(self, code: str, kind: ErrorKind, detail: str | None = None) -> None:
        self.code = code
        self.kind = kind
        self.detail = detail

    @classmethod
    def of(cls, code: str, kind: ErrorKind = ErrorKind.INTERNAL) -> ExcelError:
        canon = code.upper()
        if canon not in cls._cache:
            cls._cache[canon] = cls(canon, kind)
        return cls._cache[canon]

    # -- factories for errors that carry a message --------------------------

    @classmethod
    def search_column(cls, n_cols: int) -> ExcelError:
        return cls(
            "#ERROR",
            ErrorKind.INVALID_SEARCH_COLUMN,
            f"search column index out of range (0-{n_cols - 1})",
        )

    @classmethod
    def invalid_pattern(cls, message: str) -> ExcelError:
        return cls("#REGEX ERROR", ErrorKind.INVALID_PATTERN, message)

    @classmethod
    def internal(cls, exc: BaseException | str) -> ExcelError:
        return cls("#ERROR", ErrorKind.INTERNAL, str(exc))

    @classmethod
    def empty_name(cls) -> ExcelError:
        return cls("#ERROR", ErrorKind.EMPTY_NAME, "text source name not specified")

    @classmethod
    def empty_pattern(cls) -> ExcelError:
        """Empty-pattern error for the line search entry points.

        The grid lookups report an empty pattern as ``ExcelError.VALUE``.
        """
        return cls("#ERROR", ErrorKind.EMPTY_PATTERN, "search pattern not specified")

    @classmethod
    def source_not_found(cls, name: str) -> ExcelError:
        return cls(
            "#ERROR",
            ErrorKind.SOURCE_NOT_FOUND,
            f"text source '{name}' not found or has no text",
        )

    @property
    def is_misuse(self) -> bool:
        """True when the error was caused by the caller's arguments."""
        return self.kind in _MISUSE_KINDS

    @property
    def token(self) -> str:
        if self.detail is None:
            return self.code
        return f"{self.code}: {self.detail}"

    def __repr__(self) -> str:
        return self.token

    def __str__(self) -> str:
        return self.token

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ExcelError):
            return self.token == other.token
        if isinstance(other, str):
            if self.detail is None:
                return self.code == other.upper()
            return self.token == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.token)


# Singletons
ExcelError.NA = ExcelError.of("#N/A", ErrorKind.NO_MATCH)
ExcelError.VALUE = ExcelError.of("#VALUE!", ErrorKind.EMPTY_PATTERN)


def is_error(val: Any) -> bool:
    """Return True if *val* is an ExcelError instance."""
    return isinstance(val, ExcelError)


def error_grid(err: ExcelError) -> list[list[Any]]:
    """Wrap *err* in the 1x1 grid every grid entry point returns on failure."""
    return [[err]]
