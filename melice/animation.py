"""Animation definitions, frames and playback state of sprite animations."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional, Sequence

from .geometry import Rectangle

__all__ = [
    "AnimationType",
    "AnimationFrame",
    "AnimationDefinition",
    "Animation",
    "HalfLoopingAnimation",
    "animation_type_for_frame_count_and_looping",
    "animation_type_for_frame_count_looping_and_loop_start",
]


class AnimationType(IntEnum):
    """Way an animation plays its frames."""

    NONE = 0
    SINGLE_FRAME = 1
    PLAY_ONCE = 2
    LOOPING = 3
    SYNCHRONIZED = 4
    HALF_LOOPING = 5


def animation_type_for_frame_count_and_looping(frame_count: int, looping: bool) -> AnimationType:
    """Pick the animation type for a number of frames and a looping flag."""
    if frame_count == 1:
        return AnimationType.SINGLE_FRAME
    if looping:
        return AnimationType.LOOPING
    if frame_count > 1:
        return AnimationType.PLAY_ONCE
    return AnimationType.NONE


def animation_type_for_frame_count_looping_and_loop_start(
    frame_count: int, looping: bool, loop_start: int
) -> AnimationType:
    """Like :func:`animation_type_for_frame_count_and_looping`, with half loops.

    A looping animation that restarts from a frame other than the first one
    is a half looping animation.
    """
    if frame_count == 1:
        return AnimationType.SINGLE_FRAME
    if looping and loop_start == 0:
        return AnimationType.LOOPING
    if looping:
        return AnimationType.HALF_LOOPING
    if frame_count > 1:
        return AnimationType.PLAY_ONCE
    return AnimationType.NONE


@dataclass(frozen=True)
class AnimationFrame:
    """One frame of a sprite animation."""

    atlas_index: int = 0
    hitbox: Rectangle = Rectangle()
    attack_hitbox: Rectangle = Rectangle()


@dataclass(frozen=True)
class AnimationDefinition:
    """Frames of an animation, their rate in frames per second and how they play."""

    frames: tuple[AnimationFrame, ...] = ()
    frequency: int = 0
    type: AnimationType = AnimationType.NONE
    loop_start: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "frames", tuple(self.frames))

    @classmethod
    def from_frames(
        cls,
        frames: Sequence[AnimationFrame],
        frequency: int,
        looping: bool,
        loop_start: int = 0,
    ) -> AnimationDefinition:
        """Build a definition whose type follows from its frames and looping."""
        frames = tuple(frames)
        return cls(
            frames=frames,
            frequency=frequency,
            type=animation_type_for_frame_count_looping_and_loop_start(
                len(frames), looping, loop_start
            ),
            loop_start=loop_start,
        )

    @property
    def frame_count(self) -> int:
        return len(self.frames)

    def duration(self) -> float:
        """Duration in seconds of one play of every frame."""
        return self.frame_count / self.frequency


class Animation:
    """Playback state of an animation; the base class does not move frames."""

    def __init__(self, definition: Optional[AnimationDefinition] = None, speed: float = 1.0) -> None:
        self.definition = definition
        self.frame_index = 0
        self.frame = AnimationFrame()
        self.speed = speed

    def _require_definition(self) -> AnimationDefinition:
        if self.definition is None:
            raise ValueError("animation has no definition")
        return self.definition

    def frames_per_second(self) -> float:
        return self.speed * self._require_definition().frequency

    def set_frame_index(self, index: int) -> None:
        """Move to frame ``index`` of the definition."""
        frame = self._require_definition().frames[index]
        self.frame_index = index
        self.frame = frame

    def is_last_frame(self) -> bool:
        return self.frame_index == self._require_definition().frame_count - 1

    def start(self) -> None:
        """Start playing; nothing to do for a still animation."""

    def update(self, time_since_last_update: float) -> None:
        """Advance by ``time_since_last_update`` seconds; still animations stay put."""

    def transition_to_animation(self, next_animation: Animation) -> Animation:
        """Return the animation to play next: ``next_animation`` itself."""
        return next_animation

    def animation_type(self) -> AnimationType:
        return AnimationType.NONE


class HalfLoopingAnimation(Animation):
    """Animation that plays every frame, then loops from the definition's loop start."""

    def __init__(
        self,
        definition: Optional[AnimationDefinition] = None,
        speed: float = 1.0,
        time: float = 0.0,
    ) -> None:
        super().__init__(definition, speed)
        self.time = time

    def start(self) -> None:
        self.time = 0.0

    def update(self, time_since_last_update: float) -> None:
        definition = self._require_definition()
        time = self.time + time_since_last_update
        frames_per_second = self.frames_per_second()
        elapsed_frames = int(time * frames_per_second)
        frame_index = self.frame_index + elapsed_frames
        if frame_index >= definition.frame_count:
            loop_frame_count = definition.frame_count - definition.loop_start
            frame_index = definition.loop_start + elapsed_frames % loop_frame_count
        self.set_frame_index(frame_index)
        self.time = time - elapsed_frames / frames_per_second

    def animation_type(self) -> AnimationType:
        return AnimationType.HALF_LOOPING