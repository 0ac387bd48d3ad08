"""
SerialSmith - Serial Number Lists
Keyword-introduced serial lists with prefix carry ("Server SN: ABC100, 101, 102")
"""

import re
from typing import List, Optional, Tuple

from .digits import split_trailing_number
from .models import NormalizePolicy, PrefixState, SerialToken


# S#s, S#, SN:, Ser. No., SN - as standalone markers, not inside words
KEYWORD_PATTERN = re.compile(
    r"(?<![A-Za-z])(?:S#s(?![A-Za-z0-9])|S#|SN:|Ser\.\s*No\.|SN(?![A-Za-z]))",
    re.IGNORECASE,
)

# Comma opening a trailing clause shared by every serial
TRAILING_DESCRIPTION_PATTERN = re.compile(r",\s*(?:(?:brand|model|type)\b|w/)", re.IGNORECASE)

TOKEN_SPLIT_PATTERN = re.compile(r"[,/&;]|\s+")
FULL_TOKEN_PATTERN = re.compile(r"[a-zA-Z-]")

# Longer bare numbers are whole serials, not abbreviations
MAX_PARTIAL_LENGTH = 6


def find_keyword(line: str, occurrence: str = "first") -> Optional[re.Match]:
    """
    Locate the serial keyword marker in a line.

    Args:
        line: Input line
        occurrence: "first" or "last" keyword occurrence

    Returns:
        Regex match of the keyword, or None
    """
    if occurrence == "last":
        last = None
        for last in KEYWORD_PATTERN.finditer(line):
            pass
        return last
    return KEYWORD_PATTERN.search(line)


def split_trailing_description(remainder: str) -> Tuple[str, str]:
    """Split text after the keyword into (serials_section, trailing_description)."""
    match = TRAILING_DESCRIPTION_PATTERN.search(remainder)
    if not match:
        return remainder, ""
    return remainder[: match.start()], remainder[match.start():].rstrip()


def tokenize_serials(serials_section: str) -> List[str]:
    """
    Split a serials section into tokens.

    Delimiters are comma, slash, ampersand, semicolon and whitespace.
    Ellipsis dots are stripped from the front of a token and tokens with
    no letters or digits are dropped.
    """
    tokens = []
    for part in TOKEN_SPLIT_PATTERN.split(serials_section):
        token = part.strip().lstrip(".")
        if token and any(ch.isalnum() for ch in token):
            tokens.append(token)
    return tokens


def classify_token(token: str, state: PrefixState) -> SerialToken:
    """
    Decide whether a token is a full serial or an abbreviation.

    Full: contains a letter or hyphen, is longer than six characters, or
    no prefix is carried yet. Otherwise the token is partial and inherits
    the carried prefix.
    """
    if FULL_TOKEN_PATTERN.search(token) or len(token) > MAX_PARTIAL_LENGTH or not state.prefix:
        return SerialToken(kind="full", raw=token, resolved=token)
    return SerialToken(kind="partial", raw=token, resolved=state.prefix + token)


def advance_prefix(state: PrefixState, token: SerialToken, policy: NormalizePolicy) -> PrefixState:
    """
    Compute the prefix carried past a classified token.

    A full token sets the prefix to the text before its trailing digit run.
    Without trailing digits the prefix becomes the token itself ("retain")
    or empty ("clear"). Partial tokens leave the state unchanged.
    """
    if token.kind == "partial":
        return state

    head, digits = split_trailing_number(token.resolved)
    if digits:
        return PrefixState(prefix=head)
    if policy.bare_token_prefix == "retain":
        return PrefixState(prefix=token.resolved)
    return PrefixState()


def resolve_serials(tokens: List[str], policy: NormalizePolicy) -> List[SerialToken]:
    """Classify tokens left to right, threading the carried prefix."""
    state = PrefixState()
    resolved = []
    for raw in tokens:
        token = classify_token(raw, state)
        resolved.append(token)
        state = advance_prefix(state, token, policy)
    return resolved


def match_serial_list(line: str, policy: NormalizePolicy) -> Optional[List[str]]:
    """
    Expand a keyword-introduced serial list into one line per serial.

    Each output line is "<description> <keyword> <serial><trailing description>".

    Args:
        line: Trimmed input line
        policy: Normalize policy

    Returns:
        One line per serial, or None without a keyword or serials
    """
    keyword_match = find_keyword(line, policy.keyword_occurrence)
    if keyword_match is None:
        return None

    description = line[: keyword_match.start()].strip()
    keyword = keyword_match.group(0)
    serials_section, trailing = split_trailing_description(line[keyword_match.end():])

    tokens = tokenize_serials(serials_section)
    if not tokens:
        return None

    return [
        f"{description} {keyword} {token.resolved}{trailing}".strip()
        for token in resolve_serials(tokens, policy)
    ]
