"""Towers that shoot at nearby balloons."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from balloondefense.balloon import Balloon
from balloondefense.maze import CellType, Maze
from balloondefense.projectile import Projectile

PROJECTILE_SPEED = 0.2

_NEIGHBOURS: tuple[tuple[int, int], ...] = ((0, -1), (1, 0), (0, 1), (-1, 0))


@dataclass
class Tower:
    """A tower on a grid cell that fires at the nearest balloon in range."""

    x: int
    y: int
    range: int = 3
    reload_time: float = 1.0
    reload_counter: float = 0.0
    active: bool = True

    def update(self, balloons: Iterable[Balloon | None], frame_time: float) -> Projectile | None:
        """Reload by frame_time seconds and return a new shot if one is fired."""
        if not self.active:
            return None

        if self.reload_counter > 0:
            self.reload_counter -= frame_time
        if self.reload_counter > 0:
            return None

        target: Balloon | None = None
        best = float(self.range * self.range)
        for balloon in balloons:
            if balloon is None or not balloon.active:
                continue
            dx = self.x - balloon.x
            dy = self.y - balloon.y
            distance_squared = dx * dx + dy * dy
            if distance_squared <= best:
                best = distance_squared
                target = balloon

        if target is None:
            return None
        self.reload_counter = self.reload_time
        return Projectile(float(self.x), float(self.y), target, PROJECTILE_SPEED)


def can_place_tower(maze: Maze, x: int, y: int) -> bool:
    """Return whether (x, y) is a wall cell next to a path cell."""
    if not maze.is_valid(x, y):
        return False
    if maze.grid[y][x].type is not CellType.WALL:
        return False
    return any(
        maze.is_valid(x + dx, y + dy) and maze.grid[y + dy][x + dx].type is CellType.PATH
        for dx, dy in _NEIGHBOURS
    )