"""Game controller state read from button states."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntFlag

from .geometry import Point

__all__ = ["Buttons", "Controller"]


class Buttons(IntFlag):
    NONE = 0
    LEFT = 1
    RIGHT = 2
    UP = 4
    DOWN = 8
    B = 16
    A = 32


@dataclass(frozen=True)
class Controller:
    """Direction axe and A/B states for one frame."""

    axe: Point = Point()
    pressed_a: bool = False
    pressed_b: bool = False
    pressing_a: bool = False
    pressing_b: bool = False

    @classmethod
    def from_buttons(cls, current: Buttons | int, pressed: Buttons | int) -> Controller:
        """Build from held buttons and buttons pressed this frame.

        Left wins over right and up over down when both are held.
        """
        current = Buttons(current)
        pressed = Buttons(pressed)
        x = 0.0
        if current & Buttons.LEFT:
            x = -1.0
        elif current & Buttons.RIGHT:
            x = 1.0
        y = 0.0
        if current & Buttons.UP:
            y = -1.0
        elif current & Buttons.DOWN:
            y = 1.0
        return cls(
            axe=Point(x, y),
            pressed_a=bool(pressed & Buttons.A),
            pressed_b=bool(pressed & Buttons.B),
            pressing_a=bool(current & Buttons.A),
            pressing_b=bool(current & Buttons.B),
        )