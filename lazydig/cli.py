"""Command-line front door for lazydig.

Parses CLI options, configures logging, resolves the repository path and
dispatches into the interactive viewer runtime.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
import termios
from pathlib import Path

from .git_source import GitSourceError
from .logging_config import setup_logging
from .runtime import run_viewer
from .ui_theme import theme_names

logger = logging.getLogger(__name__)


def _nonnegative_int(value: str) -> int:
    """argparse type for non-negative integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError("value must be >= 0")
    return parsed


def _stdio_is_terminal() -> bool:
    try:
        return os.isatty(sys.stdin.fileno()) and os.isatty(sys.stdout.fileno())
    except (OSError, ValueError):
        # Replaced streams without a file descriptor.
        return False


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lazydig",
        description="Page through git commits and their diffs in the terminal.",
    )
    parser.add_argument(
        "-C",
        dest="repo",
        default=None,
        metavar="REPO",
        help="Repository to browse. Defaults to the current directory.",
    )
    order = parser.add_mutually_exclusive_group()
    order.add_argument(
        "--up",
        dest="dig_up",
        action="store_true",
        default=True,
        help="List the initial commit first (default).",
    )
    order.add_argument(
        "--down",
        dest="dig_up",
        action="store_false",
        help="List the newest commit first.",
    )
    parser.add_argument(
        "--side-width",
        type=_nonnegative_int,
        default=None,
        help="Commit list width in columns (default: remembered, else 40).",
    )
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Use reverse video instead of colors.")
    parser.add_argument("--log-level", default=None, help="Write logs at this level (e.g. DEBUG).")
    parser.add_argument("--log-file", type=Path, default=None, help="Log file path.")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Run the viewer for ``argv``; startup failures exit with a message."""
    args = build_parser().parse_args(argv)

    try:
        setup_logging(args.log_level, args.log_file)
    except (ValueError, OSError) as exc:
        raise SystemExit(f"lazydig: {exc}") from exc

    repo_dir = Path(args.repo) if args.repo is not None else Path.cwd()
    if not repo_dir.is_dir():
        raise SystemExit(f"lazydig: not a directory: {repo_dir}")
    if not _stdio_is_terminal():
        raise SystemExit("lazydig: standard input and output must be a terminal")

    try:
        run_viewer(
            repo_dir.absolute(),
            dig_up=args.dig_up,
            side_width=args.side_width,
            theme_name=args.theme,
            no_color=args.no_color,
        )
    except GitSourceError as exc:
        logger.error("startup failed: %s", exc)
        raise SystemExit(f"lazydig: {exc}") from exc
    except termios.error as exc:
        raise SystemExit(f"lazydig: cannot use terminal: {exc}") from exc


if __name__ == "__main__":
    main()
