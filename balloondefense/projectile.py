"""Projectiles that home in on a balloon."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from balloondefense.balloon import Balloon

_HIT_DISTANCE_SQUARED = 0.1


@dataclass
class Projectile:
    """A shot chasing a balloon; it pops the balloon on contact."""

    x: float
    y: float
    target: Balloon | None
    speed: float
    active: bool = True
    target_x: float = field(init=False)
    target_y: float = field(init=False)

    def __post_init__(self) -> None:
        if self.target is not None:
            self.target_x, self.target_y = self.target.x, self.target.y
        else:
            self.target_x, self.target_y = self.x, self.y

    def update(self) -> None:
        """Advance one frame towards the target, popping it on contact."""
        if not self.active:
            return

        if self.target is not None:
            if not self.target.active:
                self.active = False
                return
            self.target_x = self.target.x
            self.target_y = self.target.y

        dx = self.target_x - self.x
        dy = self.target_y - self.y
        length = math.hypot(dx, dy)
        if length > 0:
            dx /= length
            dy /= length

        self.x += dx * self.speed
        self.y += dy * self.speed

        distance_squared = (self.x - self.target_x) ** 2 + (self.y - self.target_y) ** 2
        if distance_squared < _HIT_DISTANCE_SQUARED:
            self.active = False
            if self.target is not None:
                self.target.active = False