"""Points, sizes, centred rectangles and alignment of an origin."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

__all__ = [
    "Point",
    "Size",
    "Rectangle",
    "HorizontalAlignment",
    "VerticalAlignment",
    "origin_for_size_and_alignment",
]


@dataclass(frozen=True)
class Point:
    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True)
class Size:
    width: float = 0.0
    height: float = 0.0


@dataclass(frozen=True)
class Rectangle:
    """Rectangle whose origin is its centre."""

    origin: Point = Point()
    size: Size = Size()

    def left(self) -> float:
        return self.origin.x - self.size.width / 2.0

    def right(self) -> float:
        return self.origin.x + self.size.width / 2.0

    def top(self) -> float:
        return self.origin.y - self.size.height / 2.0

    def bottom(self) -> float:
        return self.origin.y + self.size.height / 2.0


class HorizontalAlignment(IntEnum):
    LEFT = 0
    CENTER = 1
    RIGHT = 2


class VerticalAlignment(IntEnum):
    TOP = 0
    MIDDLE = 1
    BOTTOM = 2


def origin_for_size_and_alignment(
    origin: Point,
    size: Size,
    horizontal_alignment: HorizontalAlignment,
    vertical_alignment: VerticalAlignment,
) -> Point:
    """Return the centre of a rectangle of ``size`` aligned on ``origin``.

    With a left alignment, ``origin.x`` becomes the left edge; with a right
    alignment, the right edge. Top and bottom work the same way vertically.
    Centred alignments leave the coordinate unchanged.
    """
    x, y = origin.x, origin.y
    if horizontal_alignment == HorizontalAlignment.LEFT:
        x += size.width / 2.0
    elif horizontal_alignment == HorizontalAlignment.RIGHT:
        x -= size.width / 2.0
    if vertical_alignment == VerticalAlignment.TOP:
        y += size.height / 2.0
    elif vertical_alignment == VerticalAlignment.BOTTOM:
        y -= size.height / 2.0
    return Point(x, y)