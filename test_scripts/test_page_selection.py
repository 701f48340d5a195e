from __future__ import annotations

import pytest

from printjob.page_selection import (
    MAX_TOKEN_DIGITS,
    is_numeric_token,
    parse_page_segment,
    resolve_page_range,
)


@pytest.mark.parametrize("token", ["0", "12", "2.5", "1e3", "-3"])
def test_numeric_token_accepts_whole_numbers(token):
    assert is_numeric_token(token)


@pytest.mark.parametrize("token", ["", None, " 1", "1 ", "1a", "a", "1_0", "--", "\u0663", "\uff12"])
def test_numeric_token_rejects_partial_or_blank(token):
    assert not is_numeric_token(token)


@pytest.mark.parametrize(
    "segment,expected",
    [
        ("1-3", [1, 2, 3]),
        ("3-1", [3, 2, 1]),
        ("5", [5]),
        (" 4 ", [4]),
        (" 2 - 4 ", [2, 3, 4]),
        ("2--4", [2, 3, 4]),
        ("6-6", [6]),
    ],
)
def test_parse_segment(segment, expected):
    out = []
    assert parse_page_segment(segment, 10, out)
    assert out == expected


@pytest.mark.parametrize("segment", ["0", "0-3", "11", "2-11", "x", "3-", "-2", ""])
def test_parse_segment_rejects(segment):
    assert not parse_page_segment(segment, 10, [])


def test_parse_segment_appends_to_existing_output():
    out = [9]
    assert parse_page_segment("2-1", 5, out)
    assert out == [9, 2, 1]


def test_token_is_truncated_to_four_digits():
    assert MAX_TOKEN_DIGITS == 4
    out = []
    # "12345" keeps "1234"
    assert parse_page_segment("12345", 2000, out)
    assert out == [1234]


@pytest.mark.parametrize("expression", [None, ""])
@pytest.mark.parametrize("total", [1, 4, 9])
def test_empty_expression_selects_everything(expression, total):
    result = resolve_page_range(expression, total)
    assert result.pages == list(range(1, total + 1))
    assert result.display == f"1-{total}"


def test_segments_concatenate_in_order():
    result = resolve_page_range("2-5,1", 5)
    assert result.pages == [2, 3, 4, 5, 1]
    assert result.display == "2-5,1"


def test_duplicates_are_kept():
    assert resolve_page_range("1-2,2-1", 3).pages == [1, 2, 2, 1]


@pytest.mark.parametrize(
    "expression,expected",
    [("1-3,", [1, 2, 3]), ("1-2,,3", [1, 2, 3]), (",4", [4])],
)
def test_empty_segments_are_skipped(expression, expected):
    result = resolve_page_range(expression, 5)
    assert result.pages == expected
    assert result.display == expression


@pytest.mark.parametrize("expression", ["1-3,9", "0,1", "2,abc", "1-2, ,3", "4-6", "\u0663"])
def test_any_bad_segment_resets_whole_range(expression):
    result = resolve_page_range(expression, 5)
    assert result.pages == [1, 2, 3, 4, 5]
    assert result.display == "1-5"


def test_document_without_pages_resolves_empty():
    result = resolve_page_range("1-3", 0)
    assert result.pages == []
    assert len(result) == 0


def test_large_document_has_no_page_ceiling():
    result = resolve_page_range(None, 2500)
    assert len(result.pages) == 2500
    assert result.pages[-1] == 2500
