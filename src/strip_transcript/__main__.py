"""Entry point for ``python -m strip_transcript``.

Provides a CLI for checking comic strip transcripts.  Uses stdlib
:mod:`argparse` for argument parsing.

Subcommands:
    check -- Default. Parse transcripts and report errors and name notices.
    cast  -- Parse transcripts and list every speaking character.

Exit codes:
    0 -- Every transcript parsed (and, in strict mode, without notices).
    1 -- A transcript failed, a path was missing, or configuration is invalid.
    2 -- Argument parsing error (handled by argparse).
"""

from __future__ import annotations

import argparse
import sys

from strip_transcript.cast import build_cast
from strip_transcript.checker import check_paths
from strip_transcript.config import ConfigError, Settings, load_settings
from strip_transcript.log import setup_logging
from strip_transcript.report import print_cast, print_check_report


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "paths",
        nargs="+",
        help="Transcript files, or directories containing them.",
    )
    parser.add_argument(
        "--pattern",
        type=str,
        default=None,
        help=(
            "Glob for transcripts inside directories "
            "(defaults to TRANSCRIPT_PATTERN from config, else *.txt)."
        ),
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Enable debug-level logging.",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build and return the CLI argument parser with subcommands."""
    parser = argparse.ArgumentParser(
        prog="strip-transcript",
        description="Validate comic strip transcripts.",
    )

    subparsers = parser.add_subparsers(dest="command")

    # --- "check" subcommand (default) ---------------------------------
    check_parser = subparsers.add_parser(
        "check",
        help="Parse transcripts and report problems.",
    )
    _add_common_arguments(check_parser)
    check_parser.add_argument(
        "--strict",
        action="store_true",
        default=False,
        help="Fail when any name notice is reported.",
    )

    # --- "cast" subcommand --------------------------------------------
    cast_parser = subparsers.add_parser(
        "cast",
        help="List every character speaking in the transcripts.",
    )
    _add_common_arguments(cast_parser)

    return parser


def _resolve_command(
    parser: argparse.ArgumentParser,
    argv: list[str],
) -> argparse.Namespace:
    """Parse *argv*, routing to ``check`` when no subcommand is named.

    ``strip-transcript comics/`` therefore behaves like
    ``strip-transcript check comics/``.
    """
    known_subcommands = {"check", "cast"}
    if not argv:
        # Let the "check" subparser report the missing paths.
        argv = ["check"]
    elif argv[0] in {"-h", "--help"}:
        pass
    elif argv[0] not in known_subcommands:
        argv = ["check", *argv]

    return parser.parse_args(argv)


def _handle_check(args: argparse.Namespace, settings: Settings) -> int:
    """Execute the ``check`` subcommand.

    Returns:
        Exit code: ``0`` when all transcripts pass, ``1`` otherwise.
    """
    pattern = args.pattern or settings.transcript_pattern
    try:
        checks = check_paths(args.paths, pattern)
    except FileNotFoundError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print_check_report(checks)

    if any(not check.ok for check in checks):
        return 1
    if (args.strict or settings.strict_names) and any(check.notices for check in checks):
        return 1
    return 0


def _handle_cast(args: argparse.Namespace, settings: Settings) -> int:
    """Execute the ``cast`` subcommand.

    Returns:
        Exit code: ``0`` on success, ``1`` if any transcript failed.
    """
    pattern = args.pattern or settings.transcript_pattern
    try:
        checks = check_paths(args.paths, pattern)
    except FileNotFoundError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    failed = [check for check in checks if check.error is not None]
    for check in failed:
        print(f"Error: {check.error}", file=sys.stderr)

    print_cast(build_cast(check.transcript for check in checks if check.transcript is not None))
    return 1 if failed else 0


def main(argv: list[str] | None = None) -> int:
    """Run the strip-transcript CLI.

    Args:
        argv: Command-line arguments.  Defaults to ``sys.argv[1:]``
            when ``None`` (the normal case).

    Returns:
        Exit code: ``0`` on success, ``1`` on error.
    """
    parser = build_parser()
    args = _resolve_command(parser, argv if argv is not None else sys.argv[1:])

    try:
        settings = load_settings()
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    # --- Configure logging --------------------------------------------
    setup_logging("DEBUG" if args.verbose else settings.log_level)

    # --- Dispatch to subcommand handler -------------------------------
    if args.command == "cast":
        return _handle_cast(args, settings)

    return _handle_check(args, settings)


if __name__ == "__main__":
    raise SystemExit(main())
