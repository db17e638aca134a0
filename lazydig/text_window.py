"""Scrolling viewport over a line-oriented text body.

The window bound's origin is the scroll offset (first visible line, first
visible column) and its size is the viewport. Every move clamps instead of
raising, so repeated keys at a boundary are no-ops.
"""

from __future__ import annotations

from collections.abc import Sequence

from .geometry import Point, Rect
from .render.text import display_width


class TextWindow:
    """Viewport state for one text body."""

    def __init__(self, text: Sequence[str] = (), size: Point = Point()) -> None:
        self.bound = Rect(Point(), size)
        self.text: Sequence[str] = text
        self._max_column = self._widest_column(text)

    @staticmethod
    def _widest_column(text: Sequence[str]) -> int:
        widest = max((display_width(line) for line in text), default=0)
        return max(0, widest - 1)

    @property
    def line(self) -> int:
        return self.bound.origin.line

    @property
    def column(self) -> int:
        return self.bound.origin.column

    @property
    def height(self) -> int:
        return self.bound.size.line

    def reset(self, text: Sequence[str]) -> None:
        """Bind a new text body and scroll back to its top-left corner."""
        self.text = text
        self._max_column = self._widest_column(text)
        self.bound = Rect(Point(), self.bound.size)

    def set_viewport(self, size: Point) -> None:
        self.bound = Rect(self.bound.origin, Point(max(0, size.line), max(0, size.column)))

    def _set_origin(self, line: int, column: int) -> None:
        self.bound = Rect(Point(line, column), self.bound.size)

    def move_up(self, n: int) -> None:
        self._set_origin(max(0, self.line - n), self.column)

    def move_down(self, n: int) -> None:
        # Stops on the last line rather than the last full page.
        last = max(0, len(self.text) - 1)
        self._set_origin(min(last, self.line + n), self.column)

    def move_left(self, n: int) -> None:
        self._set_origin(self.line, max(0, self.column - n))

    def move_right(self, n: int) -> None:
        # Keeps at least one column of the widest line in view.
        self._set_origin(self.line, min(self._max_column, self.column + n))

    def page_forward(self) -> None:
        self.move_down(self.height)

    def page_backward(self) -> None:
        self.move_up(self.height)

    def half_page_forward(self) -> None:
        self.move_down(self.height // 2)

    def half_page_backward(self) -> None:
        self.move_up(self.height // 2)

    def scroll_to_top(self) -> None:
        self._set_origin(0, self.column)

    def visible_range(self) -> tuple[int, int]:
        """Return ``(first, stop)`` indices of the visible vertical slice."""
        first = self.line
        stop = min(len(self.text), first + self.height)
        return first, max(first, stop)
