"""Transcript texts shared across test modules."""

from __future__ import annotations

from pathlib import Path

FIXTURES = Path(__file__).resolve().parent / "fixtures"

ORDINARY_TEXT = (
    "Garfildo:\n"
    "I hate Mondays~\n"
    "---\n"
    "[sono]\n"
    "Thud\n"
    "---\n"
    "~Nermalo:\n"
    "Hi\n"
)


def join_panels(*panels: str) -> str:
    """Join panel bodies with separator lines."""
    return "\n---\n".join(panels)
