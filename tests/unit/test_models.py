"""Tests for the transcript data models."""

from __future__ import annotations

import dataclasses

import pytest

from strip_transcript.exceptions import InvalidPanelCountError
from strip_transcript.models.transcript import (
    Character,
    Line,
    NameNotice,
    NoticeKind,
    Panel,
    Sound,
    StripKind,
    Text,
    Transcript,
)


def _panel(*lines: Line) -> Panel:
    return Panel(lines=tuple(lines))


class TestStripKind:
    """Strip kinds are keyed by panel count."""

    def test_panel_counts(self) -> None:
        assert StripKind.ORDINARY.panel_count == 3
        assert StripKind.SUNDAY.panel_count == 7

    def test_for_panel_count(self) -> None:
        assert StripKind.for_panel_count(3) is StripKind.ORDINARY
        assert StripKind.for_panel_count(7) is StripKind.SUNDAY

    @pytest.mark.parametrize("count", [0, 1, 2, 4, 6, 8])
    def test_for_panel_count_rejects_others(self, count: int) -> None:
        with pytest.raises(InvalidPanelCountError) as exc_info:
            StripKind.for_panel_count(count)

        assert exc_info.value.count == count


class TestTranscript:
    """A transcript always holds exactly 3 or 7 panels."""

    def test_from_panels_ordinary(self) -> None:
        transcript = Transcript.from_panels([Panel()] * 3)

        assert transcript.kind is StripKind.ORDINARY
        assert not transcript.is_sunday
        assert isinstance(transcript.panels, tuple)

    def test_from_panels_sunday(self) -> None:
        transcript = Transcript.from_panels([Panel()] * 7)

        assert transcript.kind is StripKind.SUNDAY
        assert transcript.is_sunday

    def test_mismatched_kind_rejected(self) -> None:
        """Constructing with a kind that disagrees with the count fails."""
        with pytest.raises(InvalidPanelCountError):
            Transcript(kind=StripKind.SUNDAY, panels=(Panel(),) * 3)

    def test_from_panels_rejects_bad_count(self) -> None:
        with pytest.raises(InvalidPanelCountError):
            Transcript.from_panels([Panel()] * 5)

    def test_transcript_is_frozen(self) -> None:
        transcript = Transcript.from_panels([Panel()] * 3)

        with pytest.raises(dataclasses.FrozenInstanceError):
            transcript.panels = ()  # type: ignore[misc]

    def test_direct_construction_copies_list(self) -> None:
        """A list passed to the constructor is stored as a tuple."""
        panels = [Panel()] * 3

        transcript = Transcript(kind=StripKind.ORDINARY, panels=panels)  # type: ignore[arg-type]
        panels.append(Panel())

        assert isinstance(transcript.panels, tuple)
        assert len(transcript.panels) == 3

    def test_panel_lines_stored_as_tuple(self) -> None:
        lines = [Line(Sound(), "Boom")]

        panel = Panel(lines=lines)  # type: ignore[arg-type]
        lines.clear()

        assert panel.lines == (Line(Sound(), "Boom"),)

    def test_names_skip_sound_and_text(self) -> None:
        """names() lists characters in panel-then-line order, keeping duplicates."""
        transcript = Transcript.from_panels(
            [
                _panel(
                    Line(Character("garfildo"), "Coffee."),
                    Line(Sound(), "Slurp"),
                ),
                _panel(Line(Text(), "Later")),
                _panel(
                    Line(Character("pooky", uncommon=True), "..."),
                    Line(Character("garfildo"), "Coffee again."),
                ),
            ]
        )

        assert transcript.names() == [
            ("garfildo", False),
            ("pooky", True),
            ("garfildo", False),
        ]

    def test_names_empty_transcript(self) -> None:
        assert Transcript.from_panels([Panel()] * 7).names() == []


class TestSpeakers:
    """Speaker variants compare by value."""

    def test_sound_and_text_are_distinct(self) -> None:
        assert Sound() == Sound()
        assert Sound() != Text()

    def test_character_defaults_to_common(self) -> None:
        assert Character("jono").uncommon is False

    def test_character_requires_name(self) -> None:
        with pytest.raises(ValueError, match="must not be empty"):
            Character("")


class TestNameNotice:
    """Notices render like the console markers."""

    def test_unexpected_uncommon_str(self) -> None:
        notice = NameNotice(NoticeKind.UNEXPECTED_UNCOMMON, "odio")

        assert str(notice) == "! ~ODIO"

    def test_missing_uncommon_str(self) -> None:
        notice = NameNotice(NoticeKind.MISSING_UNCOMMON, "pooky", line_number=9)

        assert str(notice) == "? POOKY"

    def test_missing_uncommon_with_suggestion(self) -> None:
        notice = NameNotice(NoticeKind.MISSING_UNCOMMON, "jonno", suggestion="jono")

        assert str(notice) == "? JONNO (did you mean JONO?)"

    def test_kind_values_are_markers(self) -> None:
        assert NoticeKind.UNEXPECTED_UNCOMMON.value == "!"
        assert NoticeKind.MISSING_UNCOMMON.value == "?"
