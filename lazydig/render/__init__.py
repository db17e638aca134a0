"""Cell-grid rendering primitives used by every screen area."""

from .canvas import Canvas
from .text import char_display_width, display_width, draw_text, fill_row

__all__ = [
    "Canvas",
    "char_display_width",
    "display_width",
    "draw_text",
    "fill_row",
]
