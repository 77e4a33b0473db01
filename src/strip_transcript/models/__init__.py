"""Data models for strip-transcript."""

from __future__ import annotations

from strip_transcript.models.transcript import (
    Character,
    Line,
    NameNotice,
    NoticeKind,
    Panel,
    Sound,
    Speaker,
    StripKind,
    Text,
    Transcript,
)

__all__ = [
    "Character",
    "Line",
    "NameNotice",
    "NoticeKind",
    "Panel",
    "Sound",
    "Speaker",
    "StripKind",
    "Text",
    "Transcript",
]
