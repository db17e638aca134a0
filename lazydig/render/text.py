"""Width-aware text placement into a cell grid.

Text is walked one code point at a time from the start of the line, because
display columns cannot be derived from string offsets once wide or combining
characters are present.
"""

from __future__ import annotations

import unicodedata
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .canvas import Canvas

CONTROL_PLACEHOLDER = "?"


def char_display_width(ch: str) -> int:
    """Return terminal column width for one character.

    Combining marks consume no columns and East Asian wide/fullwidth
    characters consume two.
    """
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def display_width(text: str) -> int:
    return sum(char_display_width(ch) for ch in text)


def _is_control(ch: str) -> bool:
    code = ord(ch)
    # C0 controls + DEL + C1 controls.
    return code < 32 or code == 127 or 0x80 <= code <= 0x9F


def draw_text(
    canvas: Canvas,
    line: int,
    column: int,
    text: str,
    offset: int,
    max_width: int,
    style: str,
) -> int:
    """Draw the visible part of ``text`` on row ``line`` starting at ``column``.

    ``offset`` is the horizontal scroll: the running column starts at
    ``-offset`` so characters left of the viewport are decoded but not drawn.
    Drawing stops as soon as the running column reaches ``max_width``.
    Returns the running column where drawing stopped.
    """
    col = -offset
    last_drawn: int | None = None
    for ch in text:
        if col >= max_width:
            break
        if _is_control(ch):
            ch = CONTROL_PLACEHOLDER
        width = char_display_width(ch)
        if width == 0:
            if last_drawn is not None:
                canvas.append_to_cell(line, column + last_drawn, ch)
            continue
        if col >= 0:
            if col + width > max_width:
                # Cut by the right edge.
                ch, width = " ", 1
            canvas.set_cell(line, column + col, ch, style, width=width)
            last_drawn = col
        col += width
    return col


def fill_row(canvas: Canvas, line: int, column: int, start: int, stop: int, style: str) -> None:
    """Paint blank cells on ``line`` for relative columns ``[start, stop)``."""
    for col in range(max(0, start), stop):
        canvas.set_cell(line, column + col, " ", style)
