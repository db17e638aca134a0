"""Grid coordinates shared by every screen area.

Lines grow downward and columns grow rightward. Rectangles are an origin plus
a size; containment is checked inline by callers.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """One terminal grid coordinate, or a ``(height, width)`` size."""

    line: int = 0
    column: int = 0

    def add(self, other: Point) -> Point:
        return Point(self.line + other.line, self.column + other.column)


@dataclass(frozen=True)
class Rect:
    """Rectangle anchored at ``origin`` spanning ``size`` lines and columns."""

    origin: Point = Point()
    size: Point = Point()

    @property
    def height(self) -> int:
        return self.size.line

    @property
    def width(self) -> int:
        return self.size.column

    @property
    def end(self) -> Point:
        """Exclusive bottom-right corner."""
        return self.origin.add(self.size)

    @property
    def is_empty(self) -> bool:
        return self.size.line <= 0 or self.size.column <= 0
