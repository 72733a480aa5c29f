"""Balloons that travel along a precomputed route."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass


@dataclass
class Balloon:
    """A balloon moving from point to point along a grid route."""

    x: float
    y: float
    path: Sequence[tuple[int, int]]
    speed: float
    path_index: int = 0
    active: bool = True

    def update(self) -> None:
        """Advance one frame towards the next route point."""
        last = len(self.path) - 1
        if not self.active or self.path_index >= last:
            self.active = False
            return

        target_x, target_y = self.path[self.path_index + 1]
        dx = target_x - self.x
        dy = target_y - self.y
        length = math.hypot(dx, dy)
        if length > 0:
            dx /= length
            dy /= length

        self.x += dx * self.speed
        self.y += dy * self.speed

        distance_squared = (self.x - target_x) ** 2 + (self.y - target_y) ** 2
        if distance_squared < self.speed * self.speed:
            self.path_index += 1
            if self.path_index >= last:
                self.active = False