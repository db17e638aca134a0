"""Tests for the diff area: lazy refetch on selection change and degradation."""

from __future__ import annotations

import unittest
from pathlib import Path
from unittest import mock

from lazydig.commit_pane import CommitPane
from lazydig.diff_pane import DiffPane
from lazydig.geometry import Point, Rect
from lazydig.git_source import GitSourceError
from lazydig.records import Record
from lazydig.render import Canvas
from lazydig.state import Session
from lazydig.ui_theme import DEFAULT_THEME


def make_diff_pane(fetch) -> tuple[CommitPane, DiffPane]:
    records = [Record("k0", "first"), Record("k1", "second")]
    commits = CommitPane(Session(Path("/repo"), records), DEFAULT_THEME)
    commits.set_bound(Rect(Point(0, 0), Point(3, 10)))
    diff = DiffPane(commits, fetch, DEFAULT_THEME)
    diff.set_bound(Rect(Point(0, 0), Point(3, 8)))
    return commits, diff


class DiffPaneFetchTests(unittest.TestCase):
    def test_fetches_once_per_selection_change(self) -> None:
        fetch = mock.Mock(side_effect=lambda key: [f"body {key}"])
        commits, diff = make_diff_pane(fetch)

        for _ in range(3):
            diff.draw(Canvas(3, 8))
        fetch.assert_called_once_with("k0")

        commits.move(1)
        diff.draw(Canvas(3, 8))
        diff.draw(Canvas(3, 8))
        self.assertEqual(fetch.call_args_list, [mock.call("k0"), mock.call("k1")])
        self.assertEqual(diff.text, ["body k1"])

    def test_selection_change_resets_scroll(self) -> None:
        commits, diff = make_diff_pane(lambda key: [f"{key} {idx}" for idx in range(20)])
        diff.handle_key("PAGE_DOWN")
        diff.handle_key("RIGHT")
        self.assertEqual((diff.window.line, diff.window.column), (3, 4))

        commits.move(1)
        diff.sync()
        self.assertEqual((diff.window.line, diff.window.column), (0, 0))

    def test_fetch_failure_degrades_to_empty_body(self) -> None:
        fetch = mock.Mock(side_effect=GitSourceError("bad object"))
        _commits, diff = make_diff_pane(fetch)
        canvas = Canvas(3, 8)

        with self.assertLogs("lazydig.diff_pane", level="WARNING"):
            diff.draw(canvas)

        self.assertEqual(diff.text, [])
        self.assertEqual(canvas.row_text(0), " " * 8)
        diff.draw(canvas)
        fetch.assert_called_once()


class DiffPaneDrawTests(unittest.TestCase):
    def test_lines_are_colored_by_first_character(self) -> None:
        _commits, diff = make_diff_pane(lambda key: ["+a", "-b", "c"])
        canvas = Canvas(3, 8)
        diff.draw(canvas)
        self.assertEqual(canvas.cell(0, 0)[1], DEFAULT_THEME.diff_added)
        self.assertEqual(canvas.cell(1, 0)[1], DEFAULT_THEME.diff_removed)
        self.assertEqual(canvas.cell(2, 0)[1], DEFAULT_THEME.default)

    def test_horizontal_scroll_offsets_every_line(self) -> None:
        _commits, diff = make_diff_pane(lambda key: ["0123456789"])
        diff.handle_key("l")
        canvas = Canvas(3, 8)
        diff.draw(canvas)
        self.assertEqual(canvas.row_text(0), "456789  ")

    def test_unbound_key_is_not_handled(self) -> None:
        _commits, diff = make_diff_pane(lambda key: ["x"])
        self.assertFalse(diff.handle_key("q"))
        self.assertTrue(diff.handle_key("g"))


if __name__ == "__main__":
    unittest.main()
