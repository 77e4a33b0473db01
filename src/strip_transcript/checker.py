"""Batch checking of transcript files.

Parses many transcript files, keeping going after a failure, so an author
sees every problem in one run.  The entry point is :func:`check_paths`,
which returns one :class:`FileCheck` per file for the report formatter.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from strip_transcript.exceptions import TranscriptError
from strip_transcript.log import get_logger
from strip_transcript.models.transcript import NameNotice, Transcript
from strip_transcript.parser import parse_transcript_file

logger = get_logger(__name__)


@dataclass
class FileCheck:
    """Outcome of parsing a single transcript file.

    Attributes:
        path: The transcript file.
        transcript: The parsed transcript, or ``None`` on failure.
        notices: Name notices raised while parsing, in source order.
        error: The parse failure, or ``None`` on success.
    """

    path: Path
    transcript: Transcript | None = None
    notices: list[NameNotice] = field(default_factory=list)
    error: TranscriptError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def collect_transcript_paths(
    paths: Iterable[str | Path],
    pattern: str = "*.txt",
) -> list[Path]:
    """Expand *paths* into a list of transcript files.

    Files are kept as given.  Directories are expanded with *pattern*
    (non-recursive), sorted by name.

    Raises:
        FileNotFoundError: If a path does not exist.
    """
    files: list[Path] = []
    for raw in paths:
        path = Path(raw)
        if path.is_dir():
            files.extend(sorted(p for p in path.glob(pattern) if p.is_file()))
        elif path.exists():
            files.append(path)
        else:
            raise FileNotFoundError(f"Transcript path not found: {path}")
    return files


def check_file(path: Path) -> FileCheck:
    """Parse *path*, recording failures and notices instead of raising."""
    check = FileCheck(path=path)
    try:
        check.transcript = parse_transcript_file(path, on_notice=check.notices.append)
    except TranscriptError as exc:
        logger.debug("Failed to parse %s: %s", path, exc)
        check.error = exc
    return check


def check_paths(
    paths: Iterable[str | Path],
    pattern: str = "*.txt",
) -> list[FileCheck]:
    """Check every transcript file found under *paths*.

    Raises:
        FileNotFoundError: If one of *paths* does not exist.
    """
    checks = [check_file(path) for path in collect_transcript_paths(paths, pattern)]

    failed = sum(1 for check in checks if not check.ok)
    notices = sum(len(check.notices) for check in checks)
    logger.info(
        "Checked %d transcript(s): %d failed, %d notice(s)",
        len(checks),
        failed,
        notices,
    )
    return checks
