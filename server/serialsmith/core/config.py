"""
SerialSmith - Configuration
Environment variables and settings

Values are read once at import. A malformed value fails startup with a
ValueError naming the variable instead of surfacing later as a bad policy.
"""

import os
from pathlib import Path
from typing import List, Sequence

from dotenv import load_dotenv

TRUE_VALUES = ("true", "1", "yes", "on")
FALSE_VALUES = ("false", "0", "no", "off")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def _load_dotenv_files() -> None:
    """Load server/.env then server/.env.local; real env always wins."""
    server_dir = Path(__file__).resolve().parents[2]
    for name in (".env", ".env.local"):
        load_dotenv(server_dir / name, override=False)


_load_dotenv_files()


def _raw(key: str, default: str) -> str:
    return os.environ.get(key, default).strip()


def get_env_int(key: str, default: int, minimum: int = 1) -> int:
    """Read a positive integer setting."""
    raw = _raw(key, str(default))
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{key} must be an integer, got {raw!r}") from None
    if value < minimum:
        raise ValueError(f"{key} must be >= {minimum}, got {value}")
    return value


def get_env_bool(key: str, default: bool) -> bool:
    """Read an on/off setting (true/false, 1/0, yes/no, on/off)."""
    raw = _raw(key, str(default)).lower()
    if raw in TRUE_VALUES:
        return True
    if raw in FALSE_VALUES:
        return False
    raise ValueError(f"{key} must be one of {TRUE_VALUES + FALSE_VALUES}, got {raw!r}")


def get_env_choice(key: str, default: str, choices: Sequence[str]) -> str:
    """
    Read a setting restricted to a fixed set of values.

    Matching is case-insensitive; the value is returned as listed in choices.
    """
    raw = _raw(key, default)
    for choice in choices:
        if raw.lower() == choice.lower():
            return choice
    raise ValueError(f"{key} must be one of {tuple(choices)}, got {raw!r}")


def get_env_origins(key: str, default: str) -> List[str]:
    """Read comma-separated CORS origins, dropping trailing slashes."""
    return [origin.strip().rstrip("/") for origin in _raw(key, default).split(",") if origin.strip()]


class Settings:
    """Application settings from environment variables."""

    # General
    SERIALSMITH_ENV: str = _raw("SERIALSMITH_ENV", "dev").lower()
    SERIALSMITH_LOG_LEVEL: str = get_env_choice(
        "SERIALSMITH_LOG_LEVEL", "DEBUG" if SERIALSMITH_ENV == "dev" else "INFO", LOG_LEVELS
    )
    SERIALSMITH_CORS_ORIGINS: List[str] = get_env_origins(
        "SERIALSMITH_CORS_ORIGINS", "https://localhost:3000"
    )
    SERIALSMITH_MAX_INPUT_CHARS: int = get_env_int("SERIALSMITH_MAX_INPUT_CHARS", 200000)

    # Default normalize policy
    DEFAULT_KEYWORD_OCCURRENCE: str = get_env_choice(
        "DEFAULT_KEYWORD_OCCURRENCE", "first", ("first", "last")
    )
    DEFAULT_BARE_TOKEN_PREFIX: str = get_env_choice(
        "DEFAULT_BARE_TOKEN_PREFIX", "retain", ("retain", "clear")
    )
    DEFAULT_MULTI_SEGMENT_FIRST: bool = get_env_bool("DEFAULT_MULTI_SEGMENT_FIRST", True)
    DEFAULT_MAX_RANGE_ITEMS: int = get_env_int("DEFAULT_MAX_RANGE_ITEMS", 1000)


settings = Settings()
