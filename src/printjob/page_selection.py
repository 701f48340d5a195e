"""Page-range parsing shared by job submission and plan previews."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import List, Optional

logger = logging.getLogger(__name__)

# Each side of a segment is held in a 4-digit token; extra characters are dropped.
MAX_TOKEN_DIGITS = 4
FULL_RANGE_TEMPLATE = "1-{total}"

_LEADING_INT = re.compile(r"[+-]?[0-9]+")


@dataclass(slots=True)
class PageRangeResult:
    """Applied range string and the pages it selects, in print order."""

    display: str
    pages: List[int] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.pages)


def full_range(total_pages: int) -> str:
    return FULL_RANGE_TEMPLATE.format(total=total_pages)


def is_numeric_token(token: str | None) -> bool:
    """
    True when the whole token parses as a decimal number.

    Empty tokens, tokens with leading whitespace and tokens with trailing
    characters are rejected, as are non-ASCII digits. Negative values pass;
    range checks reject them.
    """
    if not token or not token.isascii() or token[0].isspace():
        return False
    if token != token.rstrip() or "_" in token:
        return False
    try:
        float(token)
    except ValueError:
        return False
    return True


def _token_to_int(token: str) -> int:
    # Leading-integer conversion: "2.5" -> 2, "1e3" -> 1, "inf" -> 0.
    match = _LEADING_INT.match(token)
    return int(match.group(0)) if match else 0


def _split_segment(segment: str) -> tuple[str, str]:
    begin: List[str] = []
    end: List[str] = []
    dash_seen = False
    for char in segment:
        if char.isspace():
            continue
        if char == "-":
            dash_seen = True
            continue
        target = end if dash_seen else begin
        if len(target) < MAX_TOKEN_DIGITS:
            target.append(char)
    begin_token = "".join(begin)
    end_token = "".join(end) if dash_seen else "0"
    return begin_token, end_token


def parse_page_segment(segment: str, total_pages: int, out: List[int]) -> bool:
    """
    Append the pages of one comma-free segment ("3", "1-4", "9-6") to ``out``.

    Descending segments are emitted in descending order. Returns False when the
    segment is malformed or out of range; ``out`` may then hold partial output.
    """
    begin_token, end_token = _split_segment(segment)
    if not (is_numeric_token(begin_token) and is_numeric_token(end_token)):
        logger.error(
            "page range segment %r is not numeric: first=%r second=%r",
            segment,
            begin_token,
            end_token,
        )
        return False

    begin = _token_to_int(begin_token)
    end = _token_to_int(end_token)
    if end == 0:
        end = begin

    if begin <= 0 or end <= 0:
        logger.error(
            "page range segment %r must be greater than 0: first=%s second=%s",
            segment,
            begin,
            end,
        )
        return False
    if begin > total_pages or end > total_pages:
        logger.error(
            "page range segment %r exceeds %s pages: first=%s second=%s",
            segment,
            total_pages,
            begin,
            end,
        )
        return False

    if end >= begin:
        end = min(end, total_pages)
        out.extend(range(begin, end + 1))
    else:
        begin = min(begin, total_pages)
        out.extend(range(begin, end - 1, -1))
    return True


def _parse_expression(expression: str, total_pages: int) -> Optional[List[int]]:
    pages: List[int] = []
    # empty segments from doubled or trailing commas are skipped
    for segment in expression.split(","):
        if segment == "":
            continue
        if not parse_page_segment(segment, total_pages, pages):
            return None
    return pages


def resolve_page_range(expression: str | None, total_pages: int) -> PageRangeResult:
    """
    Resolve a page-range expression such as "1-3,7,10-8" against a document.

    Never fails: an absent, empty or malformed expression selects the whole
    document ("1-N"). A document without pages resolves to an empty list.
    """
    total_pages = max(0, int(total_pages))
    fallback = full_range(total_pages)
    display = expression if expression else fallback
    logger.debug("resolving page range %r for %s pages", display, total_pages)

    if total_pages == 0:
        return PageRangeResult(display=fallback, pages=[])

    pages = _parse_expression(display, total_pages)
    if pages is None:
        logger.warning("invalid page range %r, printing %s", display, fallback)
        display = fallback
        pages = _parse_expression(display, total_pages) or []
    return PageRangeResult(display=display, pages=pages)
