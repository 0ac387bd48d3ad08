"""
SerialSmith - Delimited Lists
Comma / ampersand lists without a serial keyword ("Desk 12, 13 & 14")
"""

import re
from typing import List, Optional

from .digits import split_trailing_number
from .models import NormalizePolicy
from .serials import find_keyword

LIST_SPLIT_PATTERN = re.compile(r"[,&]")
DIGITS_PATTERN = re.compile(r"^\d+$")


def match_delimited_list(line: str, policy: NormalizePolicy) -> Optional[List[str]]:
    """
    Split a comma/ampersand list into one line per item.

    Bare numbers after the first item borrow the first item's prefix;
    items with any non-digit text are kept as typed.

    Args:
        line: Trimmed input line
        policy: Normalize policy

    Returns:
        One line per item, or None for keyword lines and single items
    """
    if find_keyword(line, policy.keyword_occurrence) is not None:
        return None
    if "," not in line and "&" not in line:
        return None

    parts = [part.strip() for part in LIST_SPLIT_PATTERN.split(line) if part.strip()]
    if len(parts) < 2:
        return None

    # Prefix must end in a non-digit so "Desk 12" carries "Desk "
    prefix, digits = split_trailing_number(parts[0])
    if not prefix or not digits:
        return parts

    return [parts[0]] + [
        prefix + part if DIGITS_PATTERN.match(part) else part for part in parts[1:]
    ]
