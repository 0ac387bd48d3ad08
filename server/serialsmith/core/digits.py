"""
SerialSmith - Digit Scanning
Right-to-left scans for trailing numbers and number ranges

Scans walk the line once from the end, so long digit runs cost linear
time instead of regex backtracking.
"""

from typing import NamedTuple, Optional, Tuple


class RangeTail(NamedTuple):
    """A line split around its last "<start> to|- <end>" range."""

    prefix: str
    start: str
    end: str
    suffix: str


def digit_run_start(text: str, end: int) -> int:
    """Index where the run of decimal digits ending at `end` begins."""
    pos = end
    while pos > 0 and text[pos - 1].isdecimal():
        pos -= 1
    return pos


def _space_run_start(text: str, end: int) -> int:
    pos = end
    while pos > 0 and text[pos - 1].isspace():
        pos -= 1
    return pos


def split_trailing_number(text: str) -> Tuple[str, str]:
    """
    Split text into (head, trailing digits).

    "ABC100" -> ("ABC", "100"); "WACA" -> ("WACA", "").
    """
    start = digit_run_start(text, len(text))
    return text[:start], text[start:]


def split_range_tail(text: str) -> Optional[RangeTail]:
    """
    Find the range closing a line: <prefix><start><"to" | "-"><end><non-digit suffix>.

    Whitespace around the separator is optional and "to" is
    case-insensitive. The prefix may contain digits ("17P-07 to 09").

    Args:
        text: Line to scan

    Returns:
        RangeTail, or None when the last number is not the end of a range
    """
    end_stop = len(text)
    while end_stop > 0 and not text[end_stop - 1].isdecimal():
        end_stop -= 1
    end_start = digit_run_start(text, end_stop)
    if end_start == end_stop:
        return None

    pos = _space_run_start(text, end_start)
    if pos >= 2 and text[pos - 2:pos].lower() == "to":
        pos -= 2
    elif pos >= 1 and text[pos - 1] == "-":
        pos -= 1
    else:
        return None

    start_stop = _space_run_start(text, pos)
    start_start = digit_run_start(text, start_stop)
    if start_start == start_stop:
        return None

    return RangeTail(
        prefix=text[:start_start],
        start=text[start_start:start_stop],
        end=text[end_start:end_stop],
        suffix=text[end_stop:],
    )
