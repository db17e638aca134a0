"""Tests for grid geometry and the scrolling text window.

Covers clamped vertical and horizontal moves, page steps, and the
move-down/move-up round trip.
"""

from __future__ import annotations

import unittest

from lazydig.geometry import Point, Rect
from lazydig.text_window import TextWindow


class GeometryTests(unittest.TestCase):
    def test_point_add_is_componentwise(self) -> None:
        self.assertEqual(Point(1, 2).add(Point(3, 4)), Point(4, 6))

    def test_rect_end_and_emptiness(self) -> None:
        rect = Rect(Point(2, 3), Point(4, 5))
        self.assertEqual(rect.end, Point(6, 8))
        self.assertFalse(rect.is_empty)
        self.assertTrue(Rect(Point(0, 0), Point(3, 0)).is_empty)
        self.assertTrue(Rect().is_empty)


class TextWindowTests(unittest.TestCase):
    def _window(self, lines: int = 10, height: int = 3) -> TextWindow:
        text = [f"line {idx}" for idx in range(lines)]
        return TextWindow(text, Point(height, 5))

    def test_move_down_stops_on_last_line(self) -> None:
        window = self._window()
        window.move_down(100)
        self.assertEqual(window.line, 9)

    def test_move_up_clamps_at_zero(self) -> None:
        window = self._window()
        window.move_down(2)
        window.move_up(100)
        self.assertEqual(window.line, 0)

    def test_move_down_then_up_round_trips_without_clamping(self) -> None:
        window = self._window()
        window.move_down(3)
        for n in range(0, 6):
            window.move_down(n)
            window.move_up(n)
            self.assertEqual(window.line, 3)

    def test_page_and_half_page_steps_use_viewport_height(self) -> None:
        window = self._window(lines=20, height=5)
        window.page_forward()
        self.assertEqual(window.line, 5)
        window.half_page_forward()
        self.assertEqual(window.line, 7)
        window.half_page_backward()
        self.assertEqual(window.line, 5)
        window.page_backward()
        self.assertEqual(window.line, 0)

    def test_horizontal_moves_clamp_to_widest_line(self) -> None:
        window = TextWindow(["ab", "abcdef"], Point(2, 3))
        window.move_right(100)
        self.assertEqual(window.column, 5)
        window.move_left(2)
        self.assertEqual(window.column, 3)
        window.move_left(100)
        self.assertEqual(window.column, 0)

    def test_reset_returns_to_origin_and_uses_new_text(self) -> None:
        window = self._window()
        window.move_down(6)
        window.move_right(3)
        window.reset(["only"])
        self.assertEqual((window.line, window.column), (0, 0))
        window.move_down(5)
        self.assertEqual(window.line, 0)

    def test_visible_range_is_clipped_to_text(self) -> None:
        window = self._window(lines=10, height=3)
        window.move_down(8)
        self.assertEqual(window.visible_range(), (8, 10))

    def test_empty_text_is_inert(self) -> None:
        window = TextWindow()
        window.page_forward()
        window.move_right(4)
        self.assertEqual((window.line, window.column), (0, 0))
        self.assertEqual(window.visible_range(), (0, 0))


if __name__ == "__main__":
    unittest.main()
