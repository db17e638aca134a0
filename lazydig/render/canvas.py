"""Full-frame terminal cell grid.

Areas draw into a ``Canvas``; the runtime encodes it into one ANSI frame and
writes it to the terminal. There is no dirty tracking: every frame repaints
the whole grid.
"""

from __future__ import annotations

RESET = "\033[0m"
CONTINUATION = ""


class Canvas:
    """Rows of ``[char, style]`` cells sized to the terminal."""

    def __init__(self, height: int, width: int, style: str = "") -> None:
        self.height = max(0, height)
        self.width = max(0, width)
        self.style = style
        self._cells: list[list[list[str]]] = [
            [[" ", style] for _ in range(self.width)] for _ in range(self.height)
        ]

    def _inside(self, line: int, column: int) -> bool:
        return 0 <= line < self.height and 0 <= column < self.width

    def _release(self, line: int, column: int) -> None:
        """Blank the other half of a wide character that ``column`` belongs to."""
        row = self._cells[line]
        if row[column][0] == CONTINUATION and column > 0:
            row[column - 1][0] = " "
        if column + 1 < self.width and row[column + 1][0] == CONTINUATION:
            row[column + 1][0] = " "

    def set_cell(self, line: int, column: int, ch: str, style: str, width: int = 1) -> None:
        """Write one character; writes outside the grid are ignored."""
        if not self._inside(line, column):
            return
        if width > 1 and column + width > self.width:
            # A wide character cannot be split at the right edge.
            ch, width = " ", 1
        row = self._cells[line]
        self._release(line, column)
        row[column] = [ch, style]
        for extra in range(1, width):
            self._release(line, column + extra)
            row[column + extra] = [CONTINUATION, style]

    def append_to_cell(self, line: int, column: int, mark: str) -> None:
        """Attach a zero-width character to an already drawn cell."""
        if not self._inside(line, column):
            return
        cell = self._cells[line][column]
        if cell[0] != CONTINUATION:
            cell[0] += mark

    def cell(self, line: int, column: int) -> tuple[str, str]:
        ch, style = self._cells[line][column]
        return ch, style

    def row_text(self, line: int) -> str:
        """Return the plain characters of one row (tests and debugging)."""
        return "".join(ch for ch, _style in self._cells[line])

    def encode(self) -> str:
        """Encode the grid as one ANSI frame starting from the home position."""
        out: list[str] = ["\033[H"]
        for line, row in enumerate(self._cells):
            out.append(f"\033[{line + 1};1H")
            current: str | None = None
            for ch, style in row:
                if ch == CONTINUATION:
                    continue
                if style != current:
                    out.append(RESET)
                    out.append(style)
                    current = style
                out.append(ch)
            out.append(RESET)
        return "".join(out)
