"""Transcript parser for comic strip transcripts.

Parses text made of ``---``-separated panels, each a sequence of
(speaker marker, text) line pairs, into a
:class:`~strip_transcript.models.transcript.Transcript`::

    Garfildo:
    I hate Mondays~
    ---
    [sono]
    Thud
    ---
    ~Nermalo:
    Hi

Name notices (likely mistakes with the ``~`` uncommon marker) are advisory
and go to an optional callback instead of the error channel.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from rapidfuzz import fuzz, process

from strip_transcript.exceptions import (
    DanglingSpeakerError,
    EmptyInputError,
    InvalidSpeakerError,
    MissingSpeakerNameError,
    TranscriptError,
)
from strip_transcript.models.transcript import (
    Character,
    Line,
    NameNotice,
    NoticeKind,
    Panel,
    Sound,
    Speaker,
    Text,
    Transcript,
)

logger = logging.getLogger(__name__)

PANEL_SEPARATOR = "---"
SOUND_MARKER = "[sono]"
TEXT_MARKER = "[skribo]"
UNCOMMON_MARKER = "~"
MUSIC_NOTE = "♫"

# Characters recurring often enough that they never need the ``~`` marker.
_COMMON_NAMES: frozenset[str] = frozenset(
    {
        "garfildo",
        "jono",
        "lizo",
        "odio",
        "nermalo",
        "arlino",
        "hundo",
        "televidilo",
        "irma",
        "muso",
        "araneo",
        "pesilo",
        "patrino",
        "patro",
    }
)

# Minimum rapidfuzz ratio (0-100) for suggesting a common name.
_SUGGESTION_MIN_RATIO = 80

NoticeCallback = Callable[[NameNotice], None]

# A retained source line paired with its 1-based line number.
_SourceLine = tuple[int, str]


def is_common_name(name: str) -> bool:
    """Return ``True`` if *name* is one of the recurring characters."""
    return name.lower() in _COMMON_NAMES


def common_names() -> tuple[str, ...]:
    """Return the recurring character names, sorted."""
    return tuple(sorted(_COMMON_NAMES))


def normalize_text(text: str) -> str:
    """Replace every ``~`` with a music note to mark sung delivery."""
    return text.replace(UNCOMMON_MARKER, MUSIC_NOTE)


def suggest_common_name(name: str) -> str | None:
    """Return the common name closest to *name*, if it is close enough.

    Uses ``rapidfuzz.fuzz.ratio`` so small typos (``garfeldo``) still
    point at the intended character.
    """
    match = process.extractOne(
        name,
        common_names(),
        scorer=fuzz.ratio,
        score_cutoff=_SUGGESTION_MIN_RATIO,
    )
    return match[0] if match else None


def _log_notice(notice: NameNotice) -> None:
    logger.warning("Name notice at line %s: %s", notice.line_number, notice)


def classify_speaker(
    marker: str,
    line_number: int | None = None,
    on_notice: NoticeCallback | None = None,
) -> Speaker:
    """Classify one speaker marker line.

    Args:
        marker: The trimmed marker line, e.g. ``"[sono]"``, ``"Jono:"`` or
            ``"~Pooky:"``.
        line_number: 1-based source line, attached to errors and notices.
        on_notice: Receives any :class:`NameNotice`.  When ``None`` the
            notice is logged at WARNING level.

    Returns:
        A :class:`Sound`, :class:`Text` or :class:`Character` speaker.

    Raises:
        InvalidSpeakerError: If a marker without a trailing colon is not
            one of the sound or text keywords.
        MissingSpeakerNameError: If nothing remains of a ``Name:`` marker
            after removing the colon and the uncommon marker.
    """
    if not marker.endswith(":"):
        keyword = marker.lower()
        if keyword == SOUND_MARKER:
            return Sound()
        if keyword == TEXT_MARKER:
            return Text()
        raise InvalidSpeakerError(marker, line_number=line_number)

    name = marker[:-1].lower()
    uncommon = name.startswith(UNCOMMON_MARKER)
    if uncommon:
        name = name[len(UNCOMMON_MARKER):]

    if not name:
        raise MissingSpeakerNameError(marker, line_number=line_number)

    notice: NameNotice | None = None
    if uncommon and name in _COMMON_NAMES:
        notice = NameNotice(NoticeKind.UNEXPECTED_UNCOMMON, name, line_number)
    elif not uncommon and name not in _COMMON_NAMES:
        notice = NameNotice(
            NoticeKind.MISSING_UNCOMMON,
            name,
            line_number,
            suggestion=suggest_common_name(name),
        )

    if notice is not None:
        (on_notice or _log_notice)(notice)

    return Character(name=name, uncommon=uncommon)


def parse_panel(
    lines: list[_SourceLine],
    on_notice: NoticeCallback | None = None,
) -> Panel:
    """Parse one panel's retained lines as (marker, text) pairs.

    Raises:
        DanglingSpeakerError: If the last marker has no text line.
    """
    parsed: list[Line] = []

    for idx in range(0, len(lines), 2):
        line_number, marker = lines[idx]
        speaker = classify_speaker(marker, line_number, on_notice)

        if idx + 1 >= len(lines):
            raise DanglingSpeakerError(marker, line_number=line_number)

        parsed.append(Line(speaker=speaker, text=normalize_text(lines[idx + 1][1])))

    return Panel(lines=tuple(parsed))


def _segment(text: str) -> list[list[_SourceLine]]:
    """Split *text* into per-panel groups of trimmed, non-blank lines."""
    groups: list[list[_SourceLine]] = []
    current: list[_SourceLine] = []

    for line_idx, raw_line in enumerate(text.split("\n")):
        line = raw_line.strip()
        if not line:
            continue
        if line == PANEL_SEPARATOR:
            groups.append(current)
            current = []
        else:
            current.append((line_idx + 1, line))

    # The end of input closes the last panel.
    groups.append(current)
    return groups


def parse_transcript(
    text: str,
    on_notice: NoticeCallback | None = None,
) -> Transcript:
    """Parse a comic strip transcript string into structured data.

    Args:
        text: The raw transcript text.  Blank lines are ignored and a line
            holding only ``---`` separates panels.
        on_notice: Receives advisory :class:`NameNotice` values.  When
            ``None`` they are logged at WARNING level.

    Returns:
        A :class:`Transcript` with 3 (ordinary) or 7 (Sunday) panels.

    Raises:
        EmptyInputError: If *text* has no non-blank lines.
        DanglingSpeakerError: If a marker has no text line.
        InvalidSpeakerError: If a marker is not recognised.
        MissingSpeakerNameError: If a ``Name:`` marker has no name.
        InvalidPanelCountError: If there are neither 3 nor 7 panels.
    """
    if not text or not text.strip():
        raise EmptyInputError()

    groups = _segment(text)
    logger.debug("Segmented transcript into %d panel(s)", len(groups))

    panels = [parse_panel(group, on_notice) for group in groups]
    transcript = Transcript.from_panels(panels)

    logger.debug(
        "Parsed %s transcript with %d character line(s)",
        transcript.kind.name.lower(),
        len(transcript.names()),
    )
    return transcript


def parse_transcript_file(
    file_path: str | Path,
    on_notice: NoticeCallback | None = None,
) -> Transcript:
    """Parse a transcript file into structured data.

    Reads the file at *file_path* as UTF-8 text and delegates to
    :func:`parse_transcript`.  Any :class:`TranscriptError` raised gets
    its ``source`` set to the file path.

    Raises:
        FileNotFoundError: If *file_path* does not exist.
        TranscriptError: If the content does not parse.
    """
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"Transcript file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        return parse_transcript(text, on_notice=on_notice)
    except TranscriptError as exc:
        exc.source = str(path)
        raise
