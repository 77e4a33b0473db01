"""Console logging for the strip-transcript CLI.

Check reports and cast listings are written to stdout, so log records go
to stderr by default and can be silenced or redirected without touching
the report.  Records use ISO 8601 timestamps and pipe-separated fields.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"

# Marks the handler installed here so repeated setup calls reuse it.
_HANDLER_ATTR = "_strip_transcript_log_handler"


def resolve_level(level: str) -> int:
    """Translate a level name from ``LOG_LEVEL`` or ``-v`` into its number.

    Raises:
        ValueError: If *level* is not a recognised logging level string.
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {level!r}")
    return numeric_level


def setup_logging(level: str = "INFO", stream: TextIO | None = None) -> None:
    """Route parser and checker diagnostics to the terminal.

    At ``INFO`` a check run logs its totals; at ``WARNING`` only name
    notices from callers without a notice callback remain; ``DEBUG`` adds
    per-transcript segmentation details.

    The CLI calls this once per run, but tests and embedding code may call
    it again: the existing handler is then given the new level instead of
    a second handler being attached.

    Args:
        level: A standard logging level name.
        stream: Destination for log records (default *stderr*).

    Raises:
        ValueError: If *level* is not a recognised logging level string.
    """
    numeric_level = resolve_level(level)

    root = logging.getLogger()
    root.setLevel(numeric_level)

    for handler in root.handlers:
        if getattr(handler, _HANDLER_ATTR, False):
            handler.setLevel(numeric_level)
            return

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(numeric_level)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt=_DATE_FORMAT))

    setattr(handler, _HANDLER_ATTR, True)
    root.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a strip-transcript module, e.g. ``__name__``."""
    return logging.getLogger(name)
