"""Page range parsing shared by the page-level PDF tools."""

from __future__ import annotations

from typing import List


def _parse_int(token: str) -> int | None:
    try:
        return int(token.strip())
    except ValueError:
        return None


def parse_ranges(expression: str | None, page_count: int) -> List[int]:
    """Parse a human page range expression into sorted zero-based indices.

    ``expression`` uses one-based page numbers separated by commas, where
    each segment is either a single page (``"5"``) or an inclusive range
    (``"7-9"``). Ranges are clamped to ``[1, page_count]``; single pages
    outside that interval and segments with malformed numbers are skipped.

    Malformed input never raises: an empty list means "no pages selected"
    and is left to the caller to report.

    Example::

        >>> parse_ranges("1-3, 5, 7-9", 10)
        [0, 1, 2, 4, 6, 7, 8]
    """

    if not expression or page_count <= 0:
        return []

    selected: set[int] = set()
    for segment in (part.strip() for part in expression.split(",")):
        if not segment:
            continue
        if "-" in segment:
            start_str, end_str = segment.split("-", 1)
            start = _parse_int(start_str)
            end = _parse_int(end_str)
            if start is None or end is None:
                continue
            for page_number in range(max(1, start), min(end, page_count) + 1):
                selected.add(page_number - 1)
        else:
            page_number = _parse_int(segment)
            if page_number is not None and 1 <= page_number <= page_count:
                selected.add(page_number - 1)

    return sorted(selected)


__all__ = ["parse_ranges"]
