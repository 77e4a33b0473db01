"""Console report formatter for transcript checks and the cast index.

:func:`format_check_report` renders the outcome of
:func:`~strip_transcript.checker.check_paths`; :func:`format_cast` renders
a :class:`~strip_transcript.cast.Cast`.  The ``print_*`` wrappers write the
formatted text to stdout.
"""

from __future__ import annotations

import sys

from strip_transcript.cast import Cast
from strip_transcript.checker import FileCheck

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

_BANNER_WIDTH = 60
_SEPARATOR = "=" * _BANNER_WIDTH


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def format_check_report(checks: list[FileCheck]) -> str:
    """Render check results as a multi-line console report.

    Each file gets a status line followed by its notices (``! ~NAME`` for
    a common character marked uncommon, ``? NAME`` for an unknown name
    without the marker), then a summary of totals.
    """
    lines: list[str] = []

    _append_banner(lines, "TRANSCRIPT CHECK")
    for check in checks:
        _append_file(lines, check)
    _append_summary(lines, checks)
    lines.append(_SEPARATOR)

    return "\n".join(lines)


def format_cast(cast: Cast) -> str:
    """Render a cast index as two alphabetical name sections."""
    lines: list[str] = []

    _append_banner(lines, "CAST")
    _append_names(lines, "Common names", cast.common)
    _append_names(lines, "Uncommon names", cast.uncommon)
    lines.append("")
    lines.append(_SEPARATOR)

    return "\n".join(lines)


def print_check_report(checks: list[FileCheck]) -> None:
    sys.stdout.write(format_check_report(checks) + "\n")


def print_cast(cast: Cast) -> None:
    sys.stdout.write(format_cast(cast) + "\n")


# ---------------------------------------------------------------------------
# Internal formatters
# ---------------------------------------------------------------------------


def _append_banner(lines: list[str], title: str) -> None:
    lines.append(_SEPARATOR)
    lines.append(f"  {title}")
    lines.append(_SEPARATOR)


def _append_file(lines: list[str], check: FileCheck) -> None:
    """Append one file's status line and its notices."""
    if check.transcript is not None:
        kind = "sunday" if check.transcript.is_sunday else "ordinary"
        lines.append(f"  [OK]    {check.path} ({len(check.transcript.panels)} panels, {kind})")
    else:
        lines.append(f"  [ERROR] {check.path}")
        lines.append(f"    {_error_detail(check)}")

    for notice in check.notices:
        where = f"line {notice.line_number}: " if notice.line_number is not None else ""
        lines.append(f"    {where}{notice}")


def _error_detail(check: FileCheck) -> str:
    error = check.error
    if error is None:
        return ""
    if error.line_number is not None:
        return f"line {error.line_number}: {error.message}"
    return error.message


def _append_summary(lines: list[str], checks: list[FileCheck]) -> None:
    failed = sum(1 for check in checks if not check.ok)
    notices = sum(len(check.notices) for check in checks)

    lines.append("")
    lines.append("--- SUMMARY ---")
    lines.append(f"  Transcripts: {len(checks)}")
    lines.append(f"  Parsed: {len(checks) - failed}")
    lines.append(f"  Failed: {failed}")
    lines.append(f"  Notices: {notices}")


def _append_names(lines: list[str], title: str, names: tuple[str, ...]) -> None:
    lines.append("")
    lines.append(f"--- {title} ({len(names)}) ---")
    if not names:
        lines.append("  none")
        return
    for name in names:
        lines.append(f"  {name}")
