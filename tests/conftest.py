"""Shared fixtures for strip-transcript tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest

from tests.samples import ORDINARY_TEXT


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove all strip-transcript environment variables.

    Patches ``load_dotenv`` so a real ``.env`` file cannot re-inject values
    that the test explicitly removed.
    """
    monkeypatch.setattr("strip_transcript.config.load_dotenv", lambda *_a, **_kw: None)
    for key in ("LOG_LEVEL", "TRANSCRIPT_PATTERN", "STRICT_NAMES"):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture()
def transcript_dir(tmp_path: Path) -> Path:
    """A directory with one valid and one broken transcript plus a note."""
    (tmp_path / "0001.txt").write_text(ORDINARY_TEXT, encoding="utf-8")
    (tmp_path / "0002.txt").write_text("Garfildo:\nHi\n", encoding="utf-8")
    (tmp_path / "notes.md").write_text("not a transcript", encoding="utf-8")
    return tmp_path


@pytest.fixture(autouse=True)
def _reset_root_logger() -> Generator[None, None, None]:
    """Reset the root logger after each test to prevent handler leaks."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
