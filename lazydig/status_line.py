"""Bottom status row: key help in normal mode, the query in find mode."""

from __future__ import annotations

from .geometry import Rect
from .render import Canvas, display_width, draw_text, fill_row
from .state import MODE_FIND, Session
from .ui_theme import UITheme

NORMAL_HELP = (
    "q: quit, Tab: switch pane, Up/Down: move, f/b: page, d/u: half page, "
    "</>: side width, t: toggle side, Ctrl+F: find"
)
FIND_PREFIX = "find: "


def build_status_text(session: Session) -> str:
    """Return the left-aligned status text for the current mode."""
    if session.mode == MODE_FIND:
        text = FIND_PREFIX + session.find_query
        if session.find_message:
            text += f"  ({session.find_message})"
        return text
    return NORMAL_HELP


def build_position_text(current_index: int, total: int) -> str:
    return f" {current_index + 1}/{total} "


class StatusLine:
    def __init__(self, session: Session, theme: UITheme) -> None:
        self.session = session
        self.theme = theme
        self.bound = Rect()

    def set_bound(self, bound: Rect) -> None:
        self.bound = bound

    def draw(self, canvas: Canvas, current_index: int = 0) -> None:
        if self.bound.is_empty:
            return
        line = self.bound.origin.line
        column = self.bound.origin.column
        width = self.bound.width
        style = self.theme.status_alert if self.session.find_message else self.theme.status
        position = build_position_text(current_index, len(self.session.records))
        position_width = display_width(position)
        # The position counter is dropped before the status text is.
        text_width = width - position_width if position_width < width else width
        end = draw_text(canvas, line, column, build_status_text(self.session), 0, text_width, style)
        fill_row(canvas, line, column, end, width, style)
        if text_width < width:
            draw_text(canvas, line, column + text_width, position, 0, position_width, self.theme.status)
