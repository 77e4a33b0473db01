"""Configuration loading for strip-transcript.

Reads settings from environment variables (with .env support via
python-dotenv).  Every setting is optional; invalid values are rejected.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


class ConfigError(Exception):
    """Raised when configuration is invalid."""


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables.

    Attributes:
        log_level: Logging level (default ``"INFO"``).
        transcript_pattern: Glob used to find transcripts inside a
            directory (default ``"*.txt"``).
        strict_names: Treat name notices as failures in ``check`` runs.
    """

    log_level: str = "INFO"
    transcript_pattern: str = "*.txt"
    strict_names: bool = False


def _parse_bool(env_var: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigError(f"Invalid boolean for {env_var}: {raw!r}")


def load_settings() -> Settings:
    """Load and validate settings from environment variables.

    Calls :func:`dotenv.load_dotenv` so a ``.env`` file in the working
    directory is picked up automatically.

    Returns:
        A validated :class:`Settings` instance.

    Raises:
        ConfigError: If ``LOG_LEVEL`` is not a logging level name or
            ``STRICT_NAMES`` is not a recognised boolean.
    """
    load_dotenv()

    values: dict[str, str | bool] = {}

    log_level = os.environ.get("LOG_LEVEL", "").strip()
    if log_level:
        if not isinstance(logging.getLevelName(log_level.upper()), int):
            raise ConfigError(f"Invalid LOG_LEVEL: {log_level!r}")
        values["log_level"] = log_level.upper()

    pattern = os.environ.get("TRANSCRIPT_PATTERN", "").strip()
    if pattern:
        values["transcript_pattern"] = pattern

    strict = os.environ.get("STRICT_NAMES", "")
    if strict.strip():
        values["strict_names"] = _parse_bool("STRICT_NAMES", strict)

    return Settings(**values)
