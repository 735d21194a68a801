"""Tests for ExcelError values."""

from __future__ import annotations

from rxlookup.engine._errors import ErrorKind, ExcelError, error_grid, is_error


class TestExcelError:
    def test_singletons_cached(self) -> None:
        assert ExcelError.of("#n/a") is ExcelError.NA
        assert ExcelError.of("#VALUE!") is ExcelError.VALUE

    def test_equal_to_token(self) -> None:
        assert ExcelError.NA == "#N/A"
        assert ExcelError.NA == "#n/a"
        assert ExcelError.VALUE != "#N/A"

    def test_grid_equality_both_ways(self) -> None:
        assert [[ExcelError.NA]] == [["#N/A"]]
        assert [["#N/A"]] == [[ExcelError.NA]]

    def test_search_column_token(self) -> None:
        err = ExcelError.search_column(4)
        assert str(err) == "#ERROR: search column index out of range (0-3)"
        assert err.kind is ErrorKind.INVALID_SEARCH_COLUMN

    def test_invalid_pattern_carries_message(self) -> None:
        err = ExcelError.invalid_pattern("missing ), unterminated subpattern")
        assert err.token == "#REGEX ERROR: missing ), unterminated subpattern"
        assert err.detail == "missing ), unterminated subpattern"

    def test_internal_from_exception(self) -> None:
        err = ExcelError.internal(ValueError("boom"))
        assert err == "#ERROR: boom"
        assert err.kind is ErrorKind.INTERNAL

    def test_detail_errors_distinct(self) -> None:
        assert ExcelError.internal("a") != ExcelError.internal("b")
        assert ExcelError.internal("a") == ExcelError.internal("a")
        assert hash(ExcelError.internal("a")) == hash(ExcelError.internal("a"))

    def test_misuse_classification(self) -> None:
        assert ExcelError.VALUE.is_misuse
        assert ExcelError.search_column(2).is_misuse
        assert ExcelError.invalid_pattern("x").is_misuse
        assert ExcelError.empty_name().is_misuse
        assert ExcelError.source_not_found("Box").is_misuse
        assert not ExcelError.NA.is_misuse
        assert not ExcelError.internal("x").is_misuse

    def test_line_search_tokens(self) -> None:
        assert ExcelError.empty_name() == "#ERROR: text source name not specified"
        assert ExcelError.empty_pattern() == "#ERROR: search pattern not specified"
        assert ExcelError.source_not_found("Memo") == (
            "#ERROR: text source 'Memo' not found or has no text"
        )

    def test_compare_with_other_type(self) -> None:
        assert ExcelError.NA != 0
        assert ExcelError.NA != None  # noqa: E711

    def test_is_error(self) -> None:
        assert is_error(ExcelError.NA)
        assert not is_error("#N/A")
        assert not is_error(None)

    def test_error_grid(self) -> None:
        assert error_grid(ExcelError.NA) == [["#N/A"]]

