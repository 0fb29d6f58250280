"""Points and axis-aligned rectangles in the plane."""

from __future__ import annotations

import math
from dataclasses import dataclass


def _format_coord(value: float) -> str:
    return format(value, "g")


@dataclass(frozen=True)
class Point:
    """A point in the plane."""

    x: float
    y: float

    def __str__(self) -> str:
        return f"({_format_coord(self.x)},{_format_coord(self.y)})"


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its lower and upper corners."""

    low: Point
    high: Point

    @classmethod
    def from_coords(cls, x1: float, y1: float, x2: float, y2: float) -> Rect:
        """Build a rectangle from two opposite corners in any order."""
        return cls(
            Point(float(min(x1, x2)), float(min(y1, y2))),
            Point(float(max(x1, x2)), float(max(y1, y2))),
        )

    def area(self) -> float:
        return (self.high.x - self.low.x) * (self.high.y - self.low.y)

    def expanded(self, other: Rect) -> Rect:
        """Return the smallest rectangle covering both this one and ``other``."""
        return Rect(
            Point(min(self.low.x, other.low.x), min(self.low.y, other.low.y)),
            Point(max(self.high.x, other.high.x), max(self.high.y, other.high.y)),
        )

    def expansion_area(self, other: Rect) -> float:
        """Growth in area needed to cover ``other`` as well."""
        return self.expanded(other).area() - self.area()

    def intersects(self, other: Rect) -> bool:
        """True if the rectangles overlap or touch."""
        return not (
            other.low.x > self.high.x
            or other.high.x < self.low.x
            or other.low.y > self.high.y
            or other.high.y < self.low.y
        )

    def contains_point(self, point: Point) -> bool:
        return (
            self.low.x <= point.x <= self.high.x
            and self.low.y <= point.y <= self.high.y
        )

    def contains_rect(self, other: Rect) -> bool:
        return (
            other.low.x >= self.low.x
            and other.high.x <= self.high.x
            and other.low.y >= self.low.y
            and other.high.y <= self.high.y
        )

    def distance(self, point: Point) -> float:
        """Euclidean distance from ``point`` to the nearest point of the rectangle."""
        dx = max(self.low.x - point.x, 0.0, point.x - self.high.x)
        dy = max(self.low.y - point.y, 0.0, point.y - self.high.y)
        return math.hypot(dx, dy)

    def __str__(self) -> str:
        return f"{self.low}-{self.high}"