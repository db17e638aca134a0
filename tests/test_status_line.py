from __future__ import annotations

import unittest
from pathlib import Path

from lazydig.geometry import Point, Rect
from lazydig.records import Record
from lazydig.render import Canvas
from lazydig.state import Session
from lazydig.status_line import FIND_PREFIX, NORMAL_HELP, StatusLine, build_position_text, build_status_text
from lazydig.ui_theme import DEFAULT_THEME, PLAIN_THEME, resolve_theme


def make_session(count: int = 3) -> Session:
    return Session(Path("/repo"), [Record(f"k{idx}", "t") for idx in range(count)])


class StatusTextTests(unittest.TestCase):
    def test_normal_mode_shows_help(self) -> None:
        self.assertEqual(build_status_text(make_session()), NORMAL_HELP)

    def test_find_mode_shows_query_and_message(self) -> None:
        session = make_session()
        session.enter_find_mode()
        session.append_find_char("a")
        session.append_find_char("b")
        self.assertEqual(build_status_text(session), FIND_PREFIX + "ab")
        session.find_message = "no match"
        self.assertEqual(build_status_text(session), FIND_PREFIX + "ab  (no match)")

    def test_position_text_is_one_based(self) -> None:
        self.assertEqual(build_position_text(0, 5), " 1/5 ")


class StatusLineDrawTests(unittest.TestCase):
    def test_fills_row_and_right_aligns_position(self) -> None:
        session = make_session(3)
        session.enter_find_mode()
        status = StatusLine(session, DEFAULT_THEME)
        status.set_bound(Rect(Point(1, 0), Point(1, 20)))
        canvas = Canvas(2, 20)
        status.draw(canvas, current_index=1)

        self.assertEqual(canvas.row_text(1), "find: " + " " * 9 + " 2/3 ")
        self.assertEqual(canvas.cell(1, 10)[1], DEFAULT_THEME.status)

    def test_message_uses_alert_style(self) -> None:
        session = make_session()
        session.enter_find_mode()
        session.find_message = "no match"
        status = StatusLine(session, DEFAULT_THEME)
        status.set_bound(Rect(Point(0, 0), Point(1, 30)))
        canvas = Canvas(1, 30)
        status.draw(canvas)
        self.assertEqual(canvas.cell(0, 0)[1], DEFAULT_THEME.status_alert)

    def test_too_narrow_for_position_shows_text_only(self) -> None:
        session = make_session()
        status = StatusLine(session, DEFAULT_THEME)
        status.set_bound(Rect(Point(0, 0), Point(1, 4)))
        canvas = Canvas(1, 4)
        status.draw(canvas)
        self.assertEqual(canvas.row_text(0), NORMAL_HELP[:4])


class ThemeTests(unittest.TestCase):
    def test_no_color_selects_plain_theme(self) -> None:
        self.assertIs(resolve_theme("ocean", no_color=True), PLAIN_THEME)

    def test_unknown_theme_falls_back_to_default(self) -> None:
        with self.assertLogs("lazydig.ui_theme", level="WARNING"):
            self.assertIs(resolve_theme("nope"), DEFAULT_THEME)
        self.assertEqual(resolve_theme(" Ocean ").name, "ocean")


if __name__ == "__main__":
    unittest.main()
