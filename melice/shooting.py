"""Shooting style definitions and the bullet patterns they fire."""

from __future__ import annotations

import math
import random
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import IntEnum, IntFlag
from typing import Any, Optional

from .geometry import Point

__all__ = [
    "ShotOrigin",
    "ShootingStyleInversion",
    "ShootingStyleDefinition",
    "CircularShootingStyleDefinition",
    "ShootingStyle",
    "BurstShootingStyle",
    "CircularShootingStyle",
]


class ShootingStyleInversion(IntFlag):
    NONE = 0
    X = 0b1
    Y = 0b10
    AIM = 0b100
    ANGLE = 0b1000
    AMOUNT = 0b10000


class ShotOrigin(IntEnum):
    CENTER = 0
    FRONT = 1
    BACK = 2


@dataclass(frozen=True)
class ShootingStyleDefinition:
    """How a sprite shoots: bullets, their speed, amount and timing."""

    origin: ShotOrigin = ShotOrigin.CENTER
    translation: Point = Point()
    damage: int = 0
    bullet_definition: Any = None
    bullet_animation_name: int = 0
    bullet_amount: int = 1
    bullet_amount_variation: int = 0
    bullet_speed: float = 0.0
    shoot_interval: float = 0.0
    inversions: ShootingStyleInversion = ShootingStyleInversion.NONE
    inversion_interval: int = 0
    space: float = 0.0


@dataclass(frozen=True)
class CircularShootingStyleDefinition(ShootingStyleDefinition):
    """Bullets fired around a circle.

    ``angle_increment`` of 0 spreads the bullets evenly over the full circle.
    """

    base_angle: float = 0.0
    base_angle_variation: float = 0.0
    angle_increment: float = 0.0


class ShootingStyle(ABC):
    """Running state of a shooting style."""

    def __init__(
        self,
        definition: ShootingStyleDefinition,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.definition = definition
        self.shoot_interval = self.rng.random() * definition.shoot_interval
        self.bullet_amount = definition.bullet_amount
        self.bullet_amount_variation = definition.bullet_amount_variation
        self.inversion_interval = definition.inversion_interval
        self.base_angle = 0.0

    @abstractmethod
    def bullet_speeds(self, angle: float) -> list[Point]:
        """Return the speed of each bullet fired when aiming at ``angle`` radians."""


class BurstShootingStyle(ShootingStyle):
    """Fires every bullet toward the aim, each spread by up to 0.05 radians."""

    def bullet_speeds(self, angle: float) -> list[Point]:
        speed = self.definition.bullet_speed
        speeds = []
        for _ in range(self.bullet_amount):
            bullet_angle = angle + self.rng.random() * 0.1 - 0.05
            speeds.append(Point(math.cos(bullet_angle) * speed, math.sin(bullet_angle) * speed))
        return speeds


class CircularShootingStyle(ShootingStyle):
    """Fires bullets around a circle whose starting angle turns after each shot."""

    definition: CircularShootingStyleDefinition

    def __init__(
        self,
        definition: CircularShootingStyleDefinition,
        rng: Optional[random.Random] = None,
    ) -> None:
        super().__init__(definition, rng)
        self.base_angle = definition.base_angle

    def bullet_speeds(self, angle: float) -> list[Point]:
        definition = self.definition
        speed = definition.bullet_speed
        base_angle = self.base_angle
        self.base_angle = base_angle + definition.base_angle_variation
        angle += base_angle

        amount = self.bullet_amount
        if amount <= 0:
            return []
        increment = definition.angle_increment or 2.0 * math.pi / amount

        speeds = []
        for _ in range(amount):
            speeds.append(Point(math.cos(angle) * speed, math.sin(angle) * speed))
            angle += increment
        return speeds