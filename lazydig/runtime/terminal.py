"""Terminal control helpers for the TUI session.

Owns raw-mode lifecycle, alternate-screen switching, frame output, and size
queries.
"""

from __future__ import annotations

import contextlib
import os
import shutil
import termios
import tty

from ..geometry import Point

FALLBACK_SIZE = (80, 24)


class TerminalController:
    """Manage terminal mode transitions and write encoded frames."""

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        """Capture tty state and bind stdin/stdout file descriptors.

        Raises ``termios.error`` when ``stdin_fd`` is not a terminal.
        """
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self._saved_tty_state = termios.tcgetattr(stdin_fd)

    def enable_tui_mode(self) -> None:
        """Enter raw alternate-screen mode with the cursor hidden."""
        tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        os.write(self.stdout_fd, b"\x1b[?1049h\x1b[?25l\x1b[2J")

    def disable_tui_mode(self) -> None:
        """Restore normal terminal state."""
        # Reset attributes, show cursor, and restore the main screen buffer.
        os.write(self.stdout_fd, b"\x1b[0m\x1b[?25h\x1b[?1049l")
        termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)

    def size(self) -> Point:
        """Return the terminal size as ``Point(lines, columns)``."""
        try:
            term = os.get_terminal_size(self.stdout_fd)
        except OSError:
            term = shutil.get_terminal_size(FALLBACK_SIZE)
        return Point(term.lines, term.columns)

    def write_frame(self, frame: str) -> None:
        """Write a full encoded frame, retrying short writes."""
        data = memoryview(frame.encode("utf-8", errors="replace"))
        while data:
            written = os.write(self.stdout_fd, data)
            data = data[written:]

    @contextlib.contextmanager
    def raw_mode(self):
        """Context manager that brackets code with TUI enter/exit calls."""
        try:
            self.enable_tui_mode()
            yield
        finally:
            self.disable_tui_mode()
