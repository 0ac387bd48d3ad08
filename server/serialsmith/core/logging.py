"""
SerialSmith - Logging Utilities
"""

import logging
import sys

from .config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Inventory lines can be up to SERIALSMITH_MAX_INPUT_CHARS long
PREVIEW_CHARS = 60


def preview(text: str, limit: int = PREVIEW_CHARS) -> str:
    """repr() of text, shortened to limit characters for log messages."""
    if len(text) <= limit:
        return repr(text)
    return f"{text[:limit]!r}...(+{len(text) - limit} chars)"


def get_logger(name: str) -> logging.Logger:
    """
    Get a stdout logger at SERIALSMITH_LOG_LEVEL.

    Matcher decisions are logged at DEBUG, request summaries at INFO.
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(settings.SERIALSMITH_LOG_LEVEL)

    return logger
