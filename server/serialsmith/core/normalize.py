"""
SerialSmith - Line Normalization
Turn pasted inventory text into one fully-qualified record per item

Each line goes through an ordered chain of matchers; the first one that
produces output wins, otherwise the trimmed line is kept verbatim. The
whole pipeline is pure and never raises for malformed input.
"""

from typing import Callable, List, Optional, Tuple

from .blocks import split_blocks
from .config import settings
from .delimited import match_delimited_list
from .logging import get_logger, preview
from .models import NormalizePolicy
from .ranges import match_multi_segment, match_range
from .serials import match_serial_list

logger = get_logger(__name__)

Matcher = Callable[[str, NormalizePolicy], Optional[List[str]]]

BLOCK_SEPARATOR = ""


def default_policy() -> NormalizePolicy:
    """Build the normalize policy from settings."""
    return NormalizePolicy(
        keyword_occurrence=settings.DEFAULT_KEYWORD_OCCURRENCE,
        bare_token_prefix=settings.DEFAULT_BARE_TOKEN_PREFIX,
        multi_segment_first=settings.DEFAULT_MULTI_SEGMENT_FIRST,
        max_range_items=settings.DEFAULT_MAX_RANGE_ITEMS,
    )


def matcher_chain(policy: NormalizePolicy) -> List[Tuple[str, Matcher]]:
    """
    Get matchers in the order they are tried.

    Default: multi-segment, range, serial list, delimited list.
    """
    ranges = [("multi_segment", match_multi_segment), ("range", match_range)]
    if not policy.multi_segment_first:
        ranges.reverse()
    return ranges + [
        ("serial_list", match_serial_list),
        ("delimited_list", match_delimited_list),
    ]


def normalize_line(line: str, policy: NormalizePolicy) -> List[str]:
    """
    Normalize a single line.

    Args:
        line: One inventory line
        policy: Normalize policy

    Returns:
        Expanded records, or the trimmed line itself when nothing matched
    """
    text = line.strip()
    if not text:
        return []

    for name, matcher in matcher_chain(policy):
        results = matcher(text, policy)
        if results:
            logger.debug(f"{name} matched {preview(text)} -> {len(results)} record(s)")
            return results

    logger.debug(f"no matcher for {preview(text)}, kept verbatim")
    return [text]


def normalize_block(lines: List[str], policy: NormalizePolicy) -> List[str]:
    """Normalize every line of a block, keeping line order."""
    records = []
    for line in lines:
        records.extend(normalize_line(line, policy))
    return records


def normalize(raw_text: str, policy: Optional[NormalizePolicy] = None) -> List[str]:
    """
    Normalize raw inventory text.

    Blocks are separated in the output by a single empty string; there is
    no separator after the last block. Empty or whitespace-only input
    yields an empty list.

    Args:
        raw_text: Raw multi-line text
        policy: Normalize policy (defaults from settings)

    Returns:
        Ordered records with block separators
    """
    effective_policy = policy or default_policy()
    blocks = split_blocks(raw_text)

    output: List[str] = []
    for index, block in enumerate(blocks):
        if index > 0:
            output.append(BLOCK_SEPARATOR)
        output.extend(normalize_block(block, effective_policy))

    logger.debug(f"Normalized {len(blocks)} block(s) into {len(output)} line(s)")
    return output


def to_records(lines: List[str]) -> List[str]:
    """Drop block separators, leaving one entry per item (e.g. spreadsheet cells)."""
    return [line for line in lines if line != BLOCK_SEPARATOR]


def to_display_text(lines: List[str]) -> str:
    """Join lines for display; separators become blank lines between blocks."""
    return "\n".join(lines)
