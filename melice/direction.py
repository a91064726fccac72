"""Cardinal directions and sprite orientation for aimed animations."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum

__all__ = [
    "Axe",
    "BitmapFlip",
    "Direction",
    "DIRECTION_CIRCLE",
    "AnimationDirection",
    "AnimationDirectionFlip",
    "animation_direction_for_angle",
    "flip_for_angle",
]


class Axe(IntEnum):
    HORIZONTAL = 0
    VERTICAL = 1


class BitmapFlip(IntEnum):
    UNFLIPPED = 0
    FLIPPED_X = 1
    FLIPPED_Y = 2
    FLIPPED_XY = 3


class Direction(IntEnum):
    LEFT = 0
    RIGHT = 1
    UP = 2
    DOWN = 3

    def value(self) -> float:  # type: ignore[override]
        """Sign of movement along this direction's axe: -1 or 1."""
        return _VALUES[self]

    def angle(self) -> float:
        """Angle in radians pointing in this direction."""
        return _ANGLES[self]

    def reverse(self) -> Direction:
        return _REVERSES[self]

    def flip(self) -> BitmapFlip:
        return _FLIPS[self]

    def axe(self) -> Axe:
        return _AXES[self]

    def int_point(self) -> tuple[int, int]:
        """Unit step ``(x, y)`` in this direction."""
        return _INT_POINTS[self]

    def circle_index(self) -> int:
        """Position of this direction in :data:`DIRECTION_CIRCLE`."""
        return _CIRCLE_INDEX[self]

    def is_same_value(self, value: float) -> bool:
        """Tell whether ``value`` has the sign of this direction (zero matches)."""
        return _VALUES[self] * value >= 0.0


_VALUES = {Direction.LEFT: -1.0, Direction.RIGHT: 1.0, Direction.UP: -1.0, Direction.DOWN: 1.0}
_ANGLES = {
    Direction.LEFT: math.pi,
    Direction.RIGHT: 0.0,
    Direction.UP: math.pi * 1.5,
    Direction.DOWN: math.pi / 2.0,
}
_REVERSES = {
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
}
DIRECTION_CIRCLE = (Direction.UP, Direction.RIGHT, Direction.DOWN, Direction.LEFT)
_CIRCLE_INDEX = {Direction.LEFT: 3, Direction.RIGHT: 1, Direction.UP: 0, Direction.DOWN: 2}
_FLIPS = {
    Direction.LEFT: BitmapFlip.FLIPPED_X,
    Direction.RIGHT: BitmapFlip.UNFLIPPED,
    Direction.UP: BitmapFlip.FLIPPED_Y,
    Direction.DOWN: BitmapFlip.UNFLIPPED,
}
_AXES = {
    Direction.LEFT: Axe.HORIZONTAL,
    Direction.RIGHT: Axe.HORIZONTAL,
    Direction.UP: Axe.VERTICAL,
    Direction.DOWN: Axe.VERTICAL,
}
_INT_POINTS = {
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
}


class AnimationDirection(IntEnum):
    RIGHT = 0
    BOTTOM_RIGHT = 1
    BOTTOM = 2
    BOTTOM_LEFT = 3
    LEFT = 4
    TOP_LEFT = 5
    TOP = 6
    TOP_RIGHT = 7


@dataclass(frozen=True)
class AnimationDirectionFlip:
    """Animation direction to draw and how to flip its bitmap."""

    direction: AnimationDirection
    flip: BitmapFlip


def animation_direction_for_angle(radians: float) -> AnimationDirection:
    """Return the eighth of the circle an angle (y pointing down) falls in."""
    degrees = int(math.degrees(radians)) % 360
    if degrees == 90:
        return AnimationDirection.BOTTOM
    if 91 <= degrees <= 135:
        return AnimationDirection.BOTTOM_LEFT
    if 136 <= degrees <= 224:
        return AnimationDirection.LEFT
    if degrees == 270:
        return AnimationDirection.TOP
    if 316 <= degrees <= 359:
        return AnimationDirection.RIGHT
    return AnimationDirection(degrees // 45)


_A = AnimationDirection
_F = BitmapFlip
_FLIP_TABLE = {
    Direction.LEFT: {
        _A.RIGHT: (_A.RIGHT, _F.FLIPPED_Y),
        _A.BOTTOM_RIGHT: (_A.TOP_RIGHT, _F.FLIPPED_Y),
        _A.BOTTOM: (_A.TOP, _F.FLIPPED_Y),
        _A.BOTTOM_LEFT: (_A.BOTTOM_RIGHT, _F.FLIPPED_X),
        _A.LEFT: (_A.RIGHT, _F.FLIPPED_X),
        _A.TOP_LEFT: (_A.TOP_RIGHT, _F.FLIPPED_X),
        _A.TOP: (_A.TOP, _F.FLIPPED_X),
        _A.TOP_RIGHT: (_A.BOTTOM_RIGHT, _F.FLIPPED_Y),
    },
    Direction.RIGHT: {
        _A.RIGHT: (_A.RIGHT, _F.UNFLIPPED),
        _A.BOTTOM_RIGHT: (_A.BOTTOM_RIGHT, _F.UNFLIPPED),
        _A.BOTTOM: (_A.TOP, _F.FLIPPED_XY),
        _A.BOTTOM_LEFT: (_A.TOP_RIGHT, _F.FLIPPED_XY),
        _A.LEFT: (_A.RIGHT, _F.FLIPPED_XY),
        _A.TOP_LEFT: (_A.BOTTOM_RIGHT, _F.FLIPPED_XY),
        _A.TOP: (_A.TOP, _F.UNFLIPPED),
        _A.TOP_RIGHT: (_A.TOP_RIGHT, _F.UNFLIPPED),
    },
}


def flip_for_angle(angle: float, direction: Direction) -> AnimationDirectionFlip:
    """Pick the drawn animation direction and flip for aiming at ``angle``.

    Only left and right facing directions are supported; others raise
    ``ValueError``.
    """
    step = animation_direction_for_angle(angle)
    table = _FLIP_TABLE.get(Direction(direction))
    if table is None:
        raise ValueError(
            f"Unsupported direction for aiming: {Direction(direction).name}"
        )
    animation_direction, flip = table[step]
    return AnimationDirectionFlip(animation_direction, flip)