"""Screen composition: area rectangles, panel visibility, and input routing.

Rectangles are always recomputed from the terminal size and the panel
settings; nothing is patched incrementally.
"""

from __future__ import annotations

from .commit_pane import CommitPane
from .diff_pane import DiffPane
from .geometry import Point, Rect
from .render import Canvas
from .state import PANE_COMMITS, PANE_DIFF, Session
from .status_line import StatusLine
from .ui_theme import UITheme

DEFAULT_SIDE_WIDTH = 40
GUTTER_WIDTH = 1
GUTTER_CHAR = "│"


class Screen:
    """Owns the commit list, diff pane and status line and lays them out."""

    def __init__(
        self,
        session: Session,
        commits: CommitPane,
        diff: DiffPane,
        status: StatusLine,
        theme: UITheme,
        size: Point,
        side_width: int = DEFAULT_SIDE_WIDTH,
        hidden_side_width: int = 0,
    ) -> None:
        self.session = session
        self.commits = commits
        self.diff = diff
        self.status = status
        self.theme = theme
        self.side_width_visible = max(0, side_width)
        self.side_width_hidden = max(0, hidden_side_width)
        self.side_hidden = False
        self.size = Point()
        self.side_rect = Rect()
        self.gutter_rect = Rect()
        self.main_rect = Rect()
        self.status_rect = Rect()
        self.resize(size)

    def resize(self, size: Point) -> None:
        """Recompute every area rectangle for a terminal of ``size``."""
        height = max(0, size.line)
        width = max(0, size.column)
        self.size = Point(height, width)
        body_height = max(0, height - 1)

        configured = self.side_width_hidden if self.side_hidden else self.side_width_visible
        side_width = min(configured, width)
        gutter = 0 if self.side_hidden else GUTTER_WIDTH
        main_column = side_width + gutter

        self.side_rect = Rect(Point(0, 0), Point(body_height, side_width))
        self.gutter_rect = Rect(Point(0, side_width), Point(body_height, min(gutter, width - side_width)))
        self.main_rect = Rect(Point(0, main_column), Point(body_height, max(0, width - main_column)))
        self.status_rect = Rect(Point(body_height, 0), Point(min(1, height), width))

        self.commits.set_bound(self.side_rect)
        self.diff.set_bound(self.main_rect)
        self.status.set_bound(self.status_rect)

    def show_side(self, visible: bool) -> None:
        self.side_hidden = not visible
        if self.side_hidden:
            self.session.active_pane = PANE_DIFF
        self.resize(self.size)

    def toggle_side(self) -> None:
        self.show_side(self.side_hidden)

    def expand_side(self, delta: int) -> None:
        """Grow or shrink the side panel width for the current visibility state."""
        if self.side_hidden:
            self.side_width_hidden = max(0, self.side_width_hidden + delta)
        else:
            self.side_width_visible = max(0, self.side_width_visible + delta)
        self.resize(self.size)

    def set_pane(self, pane: str) -> None:
        """Make ``pane`` active; the commit list cannot take focus while hidden."""
        if pane == PANE_COMMITS and self.side_hidden:
            pane = PANE_DIFF
        self.session.active_pane = pane

    def cycle_pane(self) -> None:
        if self.session.active_pane == PANE_COMMITS:
            self.set_pane(PANE_DIFF)
        else:
            self.set_pane(PANE_COMMITS)

    def focus_commits(self) -> None:
        self.set_pane(PANE_COMMITS)

    def handle_key(self, key: str) -> bool:
        """Route a navigation key to the active area."""
        if self.session.active_pane == PANE_DIFF:
            return self.diff.handle_key(key)
        return self.commits.handle_key(key)

    def new_canvas(self) -> Canvas:
        return Canvas(self.size.line, self.size.column, self.theme.default)

    def draw(self, canvas: Canvas) -> None:
        self.commits.draw(canvas, active=self.session.active_pane == PANE_COMMITS)
        origin = self.gutter_rect.origin
        if not self.gutter_rect.is_empty:
            for row in range(self.gutter_rect.height):
                canvas.set_cell(origin.line + row, origin.column, GUTTER_CHAR, self.theme.gutter)
        self.diff.draw(canvas)
        self.status.draw(canvas, self.commits.current_index)
