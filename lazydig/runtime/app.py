"""Runtime composition layer for lazydig.

Loads commits, builds the session and screen areas, restores remembered
state, runs the event loop and persists the final position on exit.
"""

from __future__ import annotations

import logging
import sys
from functools import partial
from pathlib import Path

from ..commit_pane import CommitPane
from ..diff_pane import DiffPane
from ..geometry import Point
from ..git_source import commit_diff, load_commits
from ..input.keys import KeyContext
from ..screen import DEFAULT_SIDE_WIDTH, Screen
from ..state import Session
from ..status_line import StatusLine
from ..ui_theme import resolve_theme
from .config import load_repo_state, load_side_width, save_repo_state
from .events import InputProducer, new_event_queue
from .loop import run_main_loop
from .terminal import TerminalController

logger = logging.getLogger(__name__)


def build_screen(
    session: Session,
    theme_name: str | None,
    no_color: bool,
    size: Point,
    side_width: int,
) -> Screen:
    """Create every screen area for ``session`` and lay them out for ``size``."""
    theme = resolve_theme(theme_name, no_color=no_color)
    commits = CommitPane(session, theme)
    diff = DiffPane(commits, partial(commit_diff, session.repo_dir), theme)
    status = StatusLine(session, theme)
    return Screen(session, commits, diff, status, theme, size, side_width=side_width)


def resolve_side_width(requested: int | None, repo_dir: Path) -> int:
    """Pick the side width: explicit request, then per-repo, then global, then default."""
    if requested is not None:
        return max(0, requested)
    remembered = load_repo_state(repo_dir)
    if remembered is not None and remembered.side_width is not None:
        return remembered.side_width
    global_width = load_side_width()
    if global_width is not None:
        return global_width
    return DEFAULT_SIDE_WIDTH


def restore_selection(commits: CommitPane, repo_dir: Path) -> None:
    """Reselect the commit remembered for ``repo_dir`` when it still exists."""
    remembered = load_repo_state(repo_dir)
    if remembered is None:
        return
    if not commits.select_key(remembered.commit):
        logger.debug("remembered commit %s not selected", remembered.commit)


def run_viewer(
    repo_dir: Path,
    dig_up: bool = True,
    side_width: int | None = None,
    theme_name: str | None = None,
    no_color: bool = False,
) -> None:
    """Browse the history of ``repo_dir`` until the user quits.

    Raises ``GitSourceError`` when the commit list cannot be loaded and
    ``termios.error`` when standard input is not a terminal.
    """
    repo_dir = repo_dir.absolute()
    records = load_commits(repo_dir, dig_up=dig_up)
    logger.info("loaded %d commits from %s", len(records), repo_dir)

    stdin_fd = sys.stdin.fileno()
    stdout_fd = sys.stdout.fileno()
    terminal = TerminalController(stdin_fd, stdout_fd)
    size = terminal.size()

    session = Session(repo_dir=repo_dir, records=records)
    screen = build_screen(
        session,
        theme_name,
        no_color,
        size,
        resolve_side_width(side_width, repo_dir),
    )
    restore_selection(screen.commits, repo_dir)

    events = new_event_queue()
    producer = InputProducer(stdin_fd, events, terminal.size, size)
    try:
        run_main_loop(KeyContext(session, screen), terminal, events, producer)
    finally:
        save_repo_state(repo_dir, screen.commits.selected().key, screen.side_width_visible)
