"""Transcript data models for parsed comic strip transcripts.

These dataclasses represent the structured output of the transcript parser.
They are frozen stdlib dataclasses holding tuples, so a parsed transcript
cannot change once the parser returns it.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

from strip_transcript.exceptions import InvalidPanelCountError


class StripKind(enum.Enum):
    """Layout of a strip, valued by its panel count."""

    ORDINARY = 3
    SUNDAY = 7

    @property
    def panel_count(self) -> int:
        return self.value

    @classmethod
    def for_panel_count(cls, count: int) -> StripKind:
        """Return the kind with *count* panels.

        Raises:
            InvalidPanelCountError: If no kind has that many panels.
        """
        try:
            return cls(count)
        except ValueError:
            raise InvalidPanelCountError(count) from None


# ---------------------------------------------------------------------------
# Speakers
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Sound:
    """A non-verbal sound effect."""


@dataclass(frozen=True)
class Text:
    """Narration or caption text not attributed to a character."""


@dataclass(frozen=True)
class Character:
    """A line attributed to a named character.

    Attributes:
        name: Lowercase character name, without the uncommon marker.
        uncommon: Whether the transcript marked the character as rarely
            appearing.
    """

    name: str
    uncommon: bool = False

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Character name must not be empty")


Speaker = Sound | Text | Character


# ---------------------------------------------------------------------------
# Structure
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Line:
    """A single utterance inside a panel.

    Attributes:
        speaker: Who or what produced the text.
        text: Normalized utterance text.
    """

    speaker: Speaker
    text: str


@dataclass(frozen=True)
class Panel:
    """One drawn frame of a strip.  ``lines`` may be empty."""

    lines: tuple[Line, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "lines", tuple(self.lines))


@dataclass(frozen=True)
class Transcript:
    """Top-level return type from the transcript parser.

    Attributes:
        kind: Ordinary (3-panel) or Sunday (7-panel) strip.
        panels: Panels in reading order; always ``kind.panel_count`` long.
    """

    kind: StripKind
    panels: tuple[Panel, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "panels", tuple(self.panels))
        if len(self.panels) != self.kind.panel_count:
            raise InvalidPanelCountError(len(self.panels))

    @classmethod
    def from_panels(cls, panels: list[Panel] | tuple[Panel, ...]) -> Transcript:
        """Build a transcript, choosing the kind from the panel count.

        Raises:
            InvalidPanelCountError: If there are neither 3 nor 7 panels.
        """
        panels = tuple(panels)
        return cls(kind=StripKind.for_panel_count(len(panels)), panels=panels)

    @property
    def is_sunday(self) -> bool:
        return self.kind is StripKind.SUNDAY

    def names(self) -> list[tuple[str, bool]]:
        """Return ``(name, uncommon)`` for every character line.

        Order is panel-then-line.  Sound and text lines are skipped and
        duplicates are kept.
        """
        return [
            (line.speaker.name, line.speaker.uncommon)
            for panel in self.panels
            for line in panel.lines
            if isinstance(line.speaker, Character)
        ]


# ---------------------------------------------------------------------------
# Advisory notices
# ---------------------------------------------------------------------------


class NoticeKind(enum.Enum):
    """Category of a name notice, valued by its console marker."""

    UNEXPECTED_UNCOMMON = "!"
    MISSING_UNCOMMON = "?"


@dataclass(frozen=True)
class NameNotice:
    """A non-fatal hint about a character name's uncommon marker.

    Attributes:
        kind: Which mismatch was detected.
        name: The character name (lowercase, marker stripped).
        line_number: 1-based line of the marker in the source text.
        suggestion: A close common name when the name looks like a typo.
    """

    kind: NoticeKind
    name: str
    line_number: int | None = None
    suggestion: str | None = None

    def __str__(self) -> str:
        if self.kind is NoticeKind.UNEXPECTED_UNCOMMON:
            return f"! ~{self.name.upper()}"
        text = f"? {self.name.upper()}"
        if self.suggestion:
            text += f" (did you mean {self.suggestion.upper()}?)"
        return text
