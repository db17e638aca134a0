"""Regression tests for raw-key decoding.

Covers ESC timing, CSI/SS3 navigation sequences, control-key token mapping
and multi-byte UTF-8 input.
"""

import os
import time
import unittest

from lazydig import input as input_mod


class ReadKeyRegressionTests(unittest.TestCase):
    def setUp(self) -> None:
        input_mod._PENDING_BYTES.clear()
        self.read_fd, self.write_fd = os.pipe()

    def tearDown(self) -> None:
        input_mod._PENDING_BYTES.clear()
        os.close(self.read_fd)
        os.close(self.write_fd)

    def _read(self, data: bytes) -> str:
        os.write(self.write_fd, data)
        return input_mod.read_key(self.read_fd, timeout_ms=20)

    def test_single_escape_returns_esc_without_second_keypress(self) -> None:
        started = time.monotonic()
        key = self._read(b"\x1b")
        elapsed = time.monotonic() - started

        self.assertEqual(key, "ESC")
        self.assertLess(elapsed, 0.2)

    def test_timeout_returns_empty_token(self) -> None:
        self.assertEqual(input_mod.read_key(self.read_fd, timeout_ms=10), "")

    def test_arrow_and_navigation_sequences(self) -> None:
        cases = {
            b"\x1b[A": "UP",
            b"\x1b[B": "DOWN",
            b"\x1b[C": "RIGHT",
            b"\x1b[D": "LEFT",
            b"\x1b[H": "HOME",
            b"\x1b[4~": "END",
            b"\x1b[5~": "PAGE_UP",
            b"\x1b[6~": "PAGE_DOWN",
            b"\x1bOA": "UP",
            b"\x1b[1;2C": "SHIFT_RIGHT",
            b"\x1b[1;2D": "SHIFT_LEFT",
        }
        for data, expected in cases.items():
            with self.subTest(data=data):
                self.assertEqual(self._read(data), expected)

    def test_control_keys(self) -> None:
        cases = {
            b"\x06": "CTRL_F",
            b"\x11": "CTRL_Q",
            b"\x0b": "CTRL_K",
            b"\t": "TAB",
            b"\r": "ENTER",
            b"\x7f": "BACKSPACE",
        }
        for data, expected in cases.items():
            with self.subTest(data=data):
                self.assertEqual(self._read(data), expected)

    def test_escape_does_not_swallow_following_printable_key(self) -> None:
        self.assertEqual(self._read(b"\x1ba"), "ESC")
        self.assertEqual(input_mod.read_key(self.read_fd, timeout_ms=20), "a")

    def test_multibyte_utf8_is_one_key(self) -> None:
        self.assertEqual(self._read("日".encode("utf-8")), "日")

    def test_unrecognised_sequences_are_not_escape(self) -> None:
        for data in (b"\x1b[2~", b"\x1b[3~", b"\x1b[15~", b"\x1b[1;5P", b"\x1bOP"):
            with self.subTest(data=data):
                self.assertEqual(self._read(data), input_mod.UNKNOWN_KEY)


class ReadKeyClosedInputTests(unittest.TestCase):
    def setUp(self) -> None:
        input_mod._PENDING_BYTES.clear()
        self.read_fd, write_fd = os.pipe()
        os.close(write_fd)

    def tearDown(self) -> None:
        os.close(self.read_fd)

    def test_end_of_input_raises_instead_of_timing_out(self) -> None:
        with self.assertRaises(EOFError):
            input_mod.read_key(self.read_fd, timeout_ms=10)
        with self.assertRaises(EOFError):
            input_mod.read_key(self.read_fd)


if __name__ == "__main__":
    unittest.main()
