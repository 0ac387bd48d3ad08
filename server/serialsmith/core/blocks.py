"""
SerialSmith - Block Splitting
Partition raw pasted text into blocks of unique lines
"""

import re
from typing import List

# One or more blank / whitespace-only lines
BLOCK_BOUNDARY_PATTERN = re.compile(r"\n[^\S\n]*(?:\n[^\S\n]*)+")


def unify_line_endings(text: str) -> str:
    """Convert \\r\\n and bare \\r to \\n."""
    return text.replace("\r\n", "\n").replace("\r", "\n")


def dedupe_lines(lines: List[str]) -> List[str]:
    """
    Drop repeated lines, keeping first occurrence order.

    Args:
        lines: Trimmed, non-blank lines

    Returns:
        Unique lines in original order
    """
    return list(dict.fromkeys(lines))


def split_blocks(raw_text: str) -> List[List[str]]:
    """
    Split raw text into blocks separated by blank lines.

    Each block holds its non-blank lines, trimmed and deduplicated.
    Blocks without any lines (leading or trailing blank runs) are dropped.

    Args:
        raw_text: Raw multi-line input

    Returns:
        Ordered list of blocks
    """
    text = unify_line_endings(raw_text)
    if not text.strip():
        return []

    blocks = []
    for part in BLOCK_BOUNDARY_PATTERN.split(text):
        lines = [line.strip() for line in part.split("\n") if line.strip()]
        if lines:
            blocks.append(dedupe_lines(lines))

    return blocks
