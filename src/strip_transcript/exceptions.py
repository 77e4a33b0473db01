"""Custom exceptions for the strip-transcript parser.

Every failure aborts the whole parse of one transcript.  All errors derive
from :class:`TranscriptError` so callers can report them uniformly.
"""

from __future__ import annotations


class TranscriptError(Exception):
    """Base class for transcript parse failures.

    Attributes:
        message: Human-readable description of the problem.
        line_number: 1-based line in the source text, when known.
        source: Label for the transcript origin (e.g. a file path), when
            known.  Filled in by :func:`~strip_transcript.parser.parse_transcript_file`.
    """

    def __init__(
        self,
        message: str,
        line_number: int | None = None,
        source: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.line_number = line_number
        self.source = source

    def __str__(self) -> str:
        location = self.source or ""
        if self.line_number is not None:
            location = f"{location}:{self.line_number}" if location else f"line {self.line_number}"
        return f"{location}: {self.message}" if location else self.message


class EmptyInputError(TranscriptError):
    """Raised when the source text has no non-blank content."""

    def __init__(self, source: str | None = None) -> None:
        super().__init__("Empty transcript", source=source)


class InvalidPanelCountError(TranscriptError):
    """Raised when a transcript has neither 3 nor 7 panels.

    Attributes:
        count: The number of panels actually found.
    """

    def __init__(self, count: int, source: str | None = None) -> None:
        super().__init__(
            f"Must contain exactly 3 or 7 panels, found {count}",
            source=source,
        )
        self.count = count


class DanglingSpeakerError(TranscriptError):
    """Raised when a speaker marker is not followed by a text line.

    Attributes:
        marker: The speaker marker line left without text.
    """

    def __init__(self, marker: str, line_number: int | None = None) -> None:
        super().__init__(f"Expected text line after `{marker}`", line_number=line_number)
        self.marker = marker


class InvalidSpeakerError(TranscriptError):
    """Raised for a marker line that is neither a name nor a known keyword.

    Attributes:
        marker: The offending marker line.
    """

    def __init__(self, marker: str, line_number: int | None = None) -> None:
        super().__init__(f"Not a valid speaker `{marker}`", line_number=line_number)
        self.marker = marker


class MissingSpeakerNameError(TranscriptError):
    """Raised when a ``Name:`` marker has nothing left once stripped.

    Covers markers such as ``:`` and ``~:``.

    Attributes:
        marker: The offending marker line.
    """

    def __init__(self, marker: str, line_number: int | None = None) -> None:
        super().__init__(f"Missing character name in `{marker}`", line_number=line_number)
        self.marker = marker
