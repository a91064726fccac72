"""Crank acceleration and the animated "use the crank" indicator."""

from __future__ import annotations

import math
from typing import Optional

__all__ = [
    "accelerated_change",
    "CrankIndicator",
    "TEXT_FRAME_COUNT",
    "CRANK_FRAME_COUNT",
    "FRAME_COUNT",
    "FRAME_DURATION",
]

LCD_COLUMNS = 400

CRANK_INDICATOR_Y = 210
BUBBLE_WIDTH = 88
BUBBLE_HEIGHT = 52
BUBBLE_X = LCD_COLUMNS - BUBBLE_WIDTH
BUBBLE_Y = CRANK_INDICATOR_Y - BUBBLE_HEIGHT // 2
TEXT_OFFSET = 76
TEXT_WIDTH = 56
TEXT_HEIGHT = 32
TEXT_FRAME_COUNT = 14
CRANK_FRAME_COUNT = 12
CRANK_FRAME_WIDTH = 52
CRANK_FRAME_HEIGHT = 38
FRAME_COUNT = CRANK_FRAME_COUNT * 3 + TEXT_FRAME_COUNT

#: Milliseconds each indicator frame stays on screen.
FRAME_DURATION = 50
_RESET_DELAY = 1000


def accelerated_change(change: float) -> float:
    """Amplify a crank change in degrees: fast turns count for more."""
    return change * (1.0 / (0.2 + math.pow(1.04, -abs(change) + 20.0)))


class CrankIndicator:
    """Frame timing of the crank indicator bubble.

    The text shows for the first frames, then the turning crank.
    """

    def __init__(self, clockwise: bool = True) -> None:
        self.clockwise = clockwise
        self.current_frame = 0
        self.last_time = 0

    def advance(self, current_time: int) -> Optional[int]:
        """Move to the frame for ``current_time`` in milliseconds.

        Returns the index of the crank image to draw, or None while the text
        shows. Starts over when more than a second passed since the last call.
        """
        last_time = self.last_time
        delta = current_time - last_time
        frame = self.current_frame

        if delta > _RESET_DELAY:
            frame = 0
            delta = 0
            last_time = current_time

        while delta >= FRAME_DURATION - 1:
            last_time += FRAME_DURATION
            delta -= FRAME_DURATION
            frame += 1
            if frame > FRAME_COUNT:
                frame = 0

        self.current_frame = frame
        self.last_time = last_time

        if frame < TEXT_FRAME_COUNT:
            return None
        step = (frame - TEXT_FRAME_COUNT) % CRANK_FRAME_COUNT
        return step if self.clockwise else CRANK_FRAME_COUNT - step