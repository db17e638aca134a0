"""Commit list area: selection, minimal scrolling, and row rendering.

The selection index is clamped to the record list after every move and the
top row follows with the least scrolling that keeps the selection visible.
"""

from __future__ import annotations

from .geometry import Rect
from .input.key_registry import KeyBinding, KeyMap
from .records import Record
from .render import Canvas, draw_text, fill_row
from .state import Session
from .ui_theme import UITheme


class CommitPane:
    """Selectable list of commit titles."""

    def __init__(self, session: Session, theme: UITheme) -> None:
        self.session = session
        self.theme = theme
        self.bound = Rect()
        self.current_index = 0
        self.top_index = 0
        self._keys = KeyMap(
            (
                KeyBinding(("UP", "i"), lambda: self.move(-1)),
                KeyBinding(("DOWN", "k"), lambda: self.move(1)),
                KeyBinding(("PAGE_UP", "b"), lambda: self.move(-self.bound.height)),
                KeyBinding(("PAGE_DOWN", "f"), lambda: self.move(self.bound.height)),
                KeyBinding(("u",), lambda: self.move(-(self.bound.height // 2))),
                KeyBinding(("d",), lambda: self.move(self.bound.height // 2)),
                KeyBinding(("HOME", "g"), self.jump_first),
                KeyBinding(("END", "G"), self.jump_last),
            )
        )

    @property
    def records(self) -> list[Record]:
        return self.session.records

    def selected(self) -> Record:
        return self.records[self.current_index]

    def set_bound(self, bound: Rect) -> None:
        self.bound = bound
        self._scroll_to_selection()

    def _scroll_to_selection(self) -> None:
        rows = max(1, self.bound.height)
        if self.current_index < self.top_index:
            self.top_index = self.current_index
        elif self.current_index >= self.top_index + rows:
            self.top_index = self.current_index - rows + 1

    def select(self, index: int) -> bool:
        """Move the selection to ``index`` (clamped); return whether it changed."""
        previous = self.current_index
        self.current_index = max(0, min(index, len(self.records) - 1))
        self._scroll_to_selection()
        return self.current_index != previous

    def select_key(self, key: str) -> bool:
        for idx, record in enumerate(self.records):
            if record.key == key:
                return self.select(idx)
        return False

    def move(self, delta: int) -> bool:
        return self.select(self.current_index + delta)

    def jump_first(self) -> bool:
        return self.select(0)

    def jump_last(self) -> bool:
        return self.select(len(self.records) - 1)

    def handle_key(self, key: str) -> bool:
        """Apply a navigation key; return ``False`` when the key is not bound."""
        return self._keys.dispatch(key)

    def draw(self, canvas: Canvas, active: bool = True) -> None:
        if self.bound.is_empty:
            return
        self._scroll_to_selection()
        origin = self.bound.origin
        width = self.bound.width
        stop = min(len(self.records), self.top_index + self.bound.height)
        for idx in range(self.top_index, stop):
            row = origin.line + idx - self.top_index
            style = self.theme.default
            if idx == self.current_index:
                style = self.theme.commit_selected if active else self.theme.commit_selected_inactive
            end = draw_text(canvas, row, origin.column, self.records[idx].title, 0, width, style)
            if idx == self.current_index:
                fill_row(canvas, row, origin.column, end, width, style)
