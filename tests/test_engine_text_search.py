"""Tests for TEXTBOX_SEARCH / TEXTBOX_COUNT line search."""

from __future__ import annotations

import pytest

from rxlookup._sources import MappingTextSource
from rxlookup.engine._errors import ErrorKind, ExcelError
from rxlookup.engine._matching import MatchMode, compile_matcher
from rxlookup.engine._text_search import (
    count_matches,
    matching_lines,
    search_lines,
    split_lines,
)

MEMO = "TODO: fix header\r\nnote: ok\n\nTODO: add totals\rdone"


@pytest.fixture
def source() -> MappingTextSource:
    return MappingTextSource({"Memo": MEMO, "Blank": ""})


class TestSplitLines:
    def test_cr_lf_and_crlf(self) -> None:
        assert split_lines("a\r\nb\nc\rd") == ["a", "b", "c", "d"]

    def test_empty_segments_dropped(self) -> None:
        assert split_lines("\n\na\r\n\r\nb\n") == ["a", "b"]

    def test_whitespace_lines_kept(self) -> None:
        assert split_lines("a\n \nb") == ["a", " ", "b"]

    def test_empty_text(self) -> None:
        assert split_lines("") == []


class TestMatchingLines:
    def test_regex(self) -> None:
        m = compile_matcher(r"^TODO", MatchMode.REGEX)
        assert matching_lines(MEMO, m) == ["TODO: fix header", "TODO: add totals"]

    def test_substring(self) -> None:
        m = compile_matcher("o", MatchMode.SUBSTRING)
        assert matching_lines(MEMO, m) == ["note: ok", "TODO: add totals", "done"]


class TestSearchLines:
    def test_literal(self, source: MappingTextSource) -> None:
        assert search_lines(source, "Memo", "TODO") == [
            ["TODO: fix header"],
            ["TODO: add totals"],
        ]

    def test_regex(self, source: MappingTextSource) -> None:
        assert search_lines(source, "Memo", r"^(note|done)", True) == [["note: ok"], ["done"]]

    def test_regex_flag_off_treats_pattern_literally(self, source: MappingTextSource) -> None:
        assert search_lines(source, "Memo", "^TODO", False) == [["#N/A"]]

    def test_name_case_insensitive(self, source: MappingTextSource) -> None:
        assert search_lines(source, "MEMO", "done") == [["done"]]

    def test_no_match(self, source: MappingTextSource) -> None:
        result = search_lines(source, "Memo", "absent")
        assert result == [["#N/A"]]
        assert result[0][0] is ExcelError.NA

    def test_empty_name(self, source: MappingTextSource) -> None:
        assert search_lines(source, "", "x") == [["#ERROR: text source name not specified"]]
        assert search_lines(source, None, "x")[0][0].kind is ErrorKind.EMPTY_NAME

    def test_empty_pattern(self, source: MappingTextSource) -> None:
        assert search_lines(source, "Memo", "") == [["#ERROR: search pattern not specified"]]

    def test_name_checked_before_pattern(self, source: MappingTextSource) -> None:
        assert search_lines(source, "", "")[0][0].kind is ErrorKind.EMPTY_NAME

    def test_numeric_pattern_uses_cell_text(self) -> None:
        src = MappingTextSource({"Qty": "qty 1\nqty 1.0\nqty 2"})
        assert search_lines(src, "Qty", 1.0) == [["qty 1"], ["qty 1.0"]]
        assert count_matches(src, "Qty", 2.0) == 1
        assert search_lines(src, "Qty", 1.5) == [["#N/A"]]

    def test_missing_source(self, source: MappingTextSource) -> None:
        assert search_lines(source, "Nope", "x") == [
            ["#ERROR: text source 'Nope' not found or has no text"]
        ]

    def test_source_without_text(self, source: MappingTextSource) -> None:
        err = search_lines(source, "Blank", "x")[0][0]
        assert err.kind is ErrorKind.SOURCE_NOT_FOUND

    def test_invalid_regex(self, source: MappingTextSource) -> None:
        err = search_lines(source, "Memo", "(", True)[0][0]
        assert err.kind is ErrorKind.INVALID_PATTERN

    def test_source_failure_is_internal(self) -> None:
        class Exploding:
            def get_text(self, name: str) -> str | None:
                raise RuntimeError("host unavailable")

        assert search_lines(Exploding(), "Memo", "x") == [["#ERROR: host unavailable"]]


class TestCountMatches:
    def test_literal(self, source: MappingTextSource) -> None:
        assert count_matches(source, "Memo", "TODO") == 2

    def test_regex(self, source: MappingTextSource) -> None:
        assert count_matches(source, "Memo", r"o\w", True) == 3

    def test_zero_is_not_an_error(self, source: MappingTextSource) -> None:
        assert count_matches(source, "Memo", "absent") == 0

    def test_errors_are_scalars(self, source: MappingTextSource) -> None:
        assert count_matches(source, "", "x") == "#ERROR: text source name not specified"
        assert count_matches(source, "Memo", None) == "#ERROR: search pattern not specified"
        assert count_matches(source, "Nope", "x") == (
            "#ERROR: text source 'Nope' not found or has no text"
        )
        err = count_matches(source, "Memo", "[", True)
        assert isinstance(err, ExcelError)
        assert err.kind is ErrorKind.INVALID_PATTERN

    def test_count_matches_search_length(self, source: MappingTextSource) -> None:
        for pattern, is_regex in [("o", False), ("^T", True), (":", False)]:
            assert count_matches(source, "Memo", pattern, is_regex) == len(
                search_lines(source, "Memo", pattern, is_regex)
            )
