"""
SerialSmith - Numeric Range Expansion
Simple ranges ("17P-07 to 09") and semicolon multi-segment lists ("AB-01 to 03; 05; 08 to 09")
"""

import re
from typing import List, Optional

from .digits import split_range_tail, split_trailing_number
from .logging import get_logger, preview
from .models import NormalizePolicy
from .serials import find_keyword

logger = get_logger(__name__)

LEADING_TEXT_PATTERN = re.compile(r"^\D*")
FIRST_NUMBER_PATTERN = re.compile(r"\d+")

SEGMENT_JOINER_PATTERN = re.compile(r"\s*(?:to|-)\s*|\s+", re.IGNORECASE)
SEGMENT_RANGE_PATTERN = re.compile(r"^(\d+)-(\d+)$")
DIGITS_PATTERN = re.compile(r"^\d+$")


def zero_pad(value: int, width: int) -> str:
    """Format value with leading zeros up to width."""
    return str(value).zfill(width)


def expand_numbers(start_str: str, end_str: str, max_items: int) -> Optional[List[str]]:
    """
    Expand an inclusive numeric range, padded to the width of start_str.

    Args:
        start_str: Start number as typed (its width sets the padding)
        end_str: End number as typed
        max_items: Largest number of values to produce

    Returns:
        Padded numbers, or None for reversed, oversized or unparsable ranges
    """
    try:
        start = int(start_str)
        end = int(end_str)
    except ValueError:
        return None

    if end < start or end - start + 1 > max_items:
        return None

    width = len(start_str)
    return [zero_pad(i, width) for i in range(start, end + 1)]


def match_range(line: str, policy: NormalizePolicy) -> Optional[List[str]]:
    """
    Expand a line holding a single numeric range.

    "AB-05 to 08" -> AB-05, AB-06, AB-07, AB-08. The prefix is kept
    as typed (it may contain digits, e.g. "17P-"); a non-digit suffix is
    appended to every item.

    Args:
        line: Trimmed input line
        policy: Normalize policy

    Returns:
        Expanded lines, or None when the line is not a forward range
    """
    tail = split_range_tail(line)
    if tail is None:
        return None

    numbers = expand_numbers(tail.start, tail.end, policy.max_range_items)
    if not numbers:
        logger.debug(f"range {preview(tail.start)}..{preview(tail.end)} declined in {preview(line)}")
        return None

    return [f"{tail.prefix}{number}{tail.suffix}" for number in numbers]


def _shared_prefix(first_segment: str) -> str:
    """Prefix of the first segment: text before its trailing number or range."""
    tail = split_range_tail(first_segment)
    if tail is not None and not tail.suffix:
        return tail.prefix

    head, digits = split_trailing_number(first_segment)
    if digits:
        return head
    return LEADING_TEXT_PATTERN.match(first_segment).group(0)


def _expand_segment(
    segment: str,
    prefix: str,
    single_width: int,
    policy: NormalizePolicy,
) -> List[str]:
    """Expand one semicolon segment; an empty list means it yielded nothing."""
    body = segment[len(prefix):] if prefix and segment.startswith(prefix) else segment
    joined = SEGMENT_JOINER_PATTERN.sub("-", body.strip())

    range_match = SEGMENT_RANGE_PATTERN.match(joined)
    if range_match:
        numbers = expand_numbers(range_match.group(1), range_match.group(2), policy.max_range_items)
        return [f"{prefix}{number}" for number in numbers or []]

    if DIGITS_PATTERN.match(joined):
        try:
            value = int(joined)
        except ValueError:
            return []
        return [f"{prefix}{zero_pad(value, single_width)}"]

    return []


def match_multi_segment(line: str, policy: NormalizePolicy) -> Optional[List[str]]:
    """
    Expand a semicolon-delimited mix of ranges and single numbers.

    "AB-01 to 03; 05" -> AB-01, AB-02, AB-03, AB-05. Ranges pad to the
    width of their own start number; single numbers pad to the width of the
    first number on the line. Segments that yield nothing are kept verbatim
    as long as some other segment expanded, unless the line carries a
    serial keyword: then the line is left to the serial list matcher so
    every serial keeps its description.

    Args:
        line: Trimmed input line
        policy: Normalize policy

    Returns:
        Expanded lines, or None when no segment expanded
    """
    if ";" not in line:
        return None

    segments = [seg.strip() for seg in line.split(";") if seg.strip()]
    if not segments:
        return None

    prefix = _shared_prefix(segments[0])
    first_number = FIRST_NUMBER_PATTERN.search(line)
    single_width = len(first_number.group(0)) if first_number else 0

    results = []
    expanded_any = False
    skipped = []
    for segment in segments:
        items = _expand_segment(segment, prefix, single_width, policy)
        if items:
            expanded_any = True
            results.extend(items)
        else:
            skipped.append(segment)
            results.append(segment)

    if not expanded_any:
        return None

    if skipped and find_keyword(line, policy.keyword_occurrence) is not None:
        logger.debug(f"multi_segment declined keyword line {preview(line)}: {len(skipped)} segment(s) unexpanded")
        return None

    return results
