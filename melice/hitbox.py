"""Axis-aligned hitboxes and their collision tests."""

from __future__ import annotations

from enum import IntEnum
from typing import Callable, Union

from .geometry import Point, Rectangle, Size

__all__ = ["HitboxType", "Hitbox"]


class HitboxType(IntEnum):
    STATIC_HITBOX = 0
    SPRITE_HITBOX = 1
    SIMPLE_SPRITE_HITBOX = 2


FrameSource = Union[Rectangle, Callable[[], Rectangle]]


class Hitbox:
    """Hitbox whose frame is a fixed rectangle or is computed on demand.

    Frames are centred rectangles: their origin is their centre.
    """

    def __init__(self, frame: FrameSource) -> None:
        self._frame_source = frame

    def frame(self) -> Rectangle:
        source = self._frame_source
        return source if isinstance(source, Rectangle) else source()

    def collides_with_point(self, point: Point) -> bool:
        """Tell whether ``point`` is inside; left and top edges are inclusive."""
        frame = self.frame()
        return (
            frame.left() <= point.x < frame.right()
            and frame.top() <= point.y < frame.bottom()
        )

    def collides_with_rectangle(self, rectangle: Rectangle) -> bool:
        """Tell whether ``rectangle`` overlaps or touches the frame."""
        return _overlaps(self.frame(), rectangle)

    def collides_with_hitbox(self, other: Hitbox) -> bool:
        return _overlaps(self.frame(), other.frame())

    def top_half_rectangle(self) -> Rectangle:
        frame = self.frame()
        return Rectangle(
            Point(frame.origin.x, frame.origin.y - frame.size.height / 4),
            Size(frame.size.width, frame.size.height / 2),
        )

    def bottom_quarter_rectangle(self) -> Rectangle:
        frame = self.frame()
        return Rectangle(
            Point(frame.origin.x, frame.origin.y + frame.size.height * 3 / 4),
            Size(frame.size.width, frame.size.height / 4),
        )


def _overlaps(frame: Rectangle, other: Rectangle) -> bool:
    x = abs(frame.origin.x - other.origin.x) <= (frame.size.width + other.size.width) / 2
    y = abs(frame.origin.y - other.origin.y) <= (frame.size.height + other.size.height) / 2
    return x and y