"""Diff area: lazily fetched commit body shown through a scrolling window.

The body is refetched during draw only when the selected commit changed
since the last fetch. Fetch failures leave an empty body.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from .commit_pane import CommitPane
from .geometry import Rect
from .git_source import GitSourceError
from .input.key_registry import KeyBinding, KeyMap
from .render import Canvas, draw_text
from .text_window import TextWindow
from .ui_theme import UITheme

logger = logging.getLogger(__name__)

HORIZONTAL_STEP = 4
ADDED_MARKER = "+"
REMOVED_MARKER = "-"


class DiffPane:
    """Scrollable view of the selected commit's diff."""

    def __init__(
        self,
        commits: CommitPane,
        fetch_diff: Callable[[str], list[str]],
        theme: UITheme,
    ) -> None:
        self.commits = commits
        self._fetch_diff = fetch_diff
        self.theme = theme
        self.bound = Rect()
        self.window = TextWindow()
        self.text: list[str] = []
        self.fetched_key: str | None = None
        window = self.window
        self._keys = KeyMap(
            (
                KeyBinding(("PAGE_DOWN", " ", "f", ","), window.page_forward),
                KeyBinding(("PAGE_UP", "b", "m"), window.page_backward),
                KeyBinding(("d", "o"), window.half_page_forward),
                KeyBinding(("u",), window.half_page_backward),
                KeyBinding(("UP", "i"), lambda: window.move_up(1)),
                KeyBinding(("DOWN", "k"), lambda: window.move_down(1)),
                KeyBinding(("LEFT", "j"), lambda: window.move_left(HORIZONTAL_STEP)),
                KeyBinding(("RIGHT", "l"), lambda: window.move_right(HORIZONTAL_STEP)),
                KeyBinding(("HOME", "g"), window.scroll_to_top),
            )
        )

    def set_bound(self, bound: Rect) -> None:
        self.bound = bound
        self.window.set_viewport(bound.size)

    def handle_key(self, key: str) -> bool:
        """Apply a scroll key; return ``False`` when the key is not bound."""
        if key not in self._keys:
            return False
        self.sync()
        return self._keys.dispatch(key)

    def sync(self) -> None:
        """Refetch the body when the selected commit differs from the cached one."""
        key = self.commits.selected().key
        if key == self.fetched_key:
            return
        self.fetched_key = key
        try:
            self.text = self._fetch_diff(key)
        except (GitSourceError, OSError) as exc:
            logger.warning("could not load diff for %s: %s", key, exc)
            self.text = []
        self.window.reset(self.text)

    def line_style(self, line: str) -> str:
        if line.startswith(ADDED_MARKER):
            return self.theme.diff_added
        if line.startswith(REMOVED_MARKER):
            return self.theme.diff_removed
        return self.theme.default

    def draw(self, canvas: Canvas) -> None:
        self.sync()
        if self.bound.is_empty:
            return
        origin = self.bound.origin
        first, stop = self.window.visible_range()
        for row, line in enumerate(self.text[first:stop]):
            draw_text(
                canvas,
                origin.line + row,
                origin.column,
                line,
                self.window.column,
                self.bound.width,
                self.line_style(line),
            )
