"""strip-transcript: comic strip transcript parser.

Turns plain-text transcripts of comic strips into structured panels,
lines and speakers, and reports likely authoring mistakes.
"""

from __future__ import annotations

from strip_transcript.cast import Cast, build_cast
from strip_transcript.exceptions import (
    DanglingSpeakerError,
    EmptyInputError,
    InvalidPanelCountError,
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
    StripKind,
    Text,
    Transcript,
)
from strip_transcript.parser import (
    classify_speaker,
    is_common_name,
    normalize_text,
    parse_transcript,
    parse_transcript_file,
)

__version__ = "0.1.0"

__all__ = [
    "Cast",
    "Character",
    "DanglingSpeakerError",
    "EmptyInputError",
    "InvalidPanelCountError",
    "InvalidSpeakerError",
    "Line",
    "MissingSpeakerNameError",
    "NameNotice",
    "NoticeKind",
    "Panel",
    "Sound",
    "Speaker",
    "StripKind",
    "Text",
    "Transcript",
    "TranscriptError",
    "build_cast",
    "classify_speaker",
    "is_common_name",
    "normalize_text",
    "parse_transcript",
    "parse_transcript_file",
]
