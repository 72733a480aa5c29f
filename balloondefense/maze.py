"""Maze grid and randomized depth-first maze generation."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum

# Directions in the order north, east, south, west.
_DIRECTIONS: tuple[tuple[int, int], ...] = ((0, -1), (1, 0), (0, 1), (-1, 0))

# For each border side (top, right, bottom, left): offset to the inner neighbour.
_INWARD: tuple[tuple[int, int], ...] = ((0, 1), (-1, 0), (0, -1), (1, 0))


class CellType(Enum):
    """Kind of a maze cell."""

    WALL = 0
    PATH = 1
    ENTRY = 2
    EXIT = 3


@dataclass
class Cell:
    """One square of the maze."""

    type: CellType = CellType.WALL
    visited: bool = False
    in_path: bool = False


class Maze:
    """A rectangular maze with entries and exits on its border."""

    def __init__(self, width: int, height: int, num_entries: int = 1, num_exits: int = 1) -> None:
        self.width = width
        self.height = height
        self.num_entries = num_entries
        self.num_exits = num_exits
        self.grid: list[list[Cell]] = [[Cell() for _ in range(width)] for _ in range(height)]
        self.entries: list[tuple[int, int]] = []
        self.exits: list[tuple[int, int]] = []

    def is_valid(self, x: int, y: int) -> bool:
        """Return whether (x, y) lies inside the grid."""
        return 0 <= x < self.width and 0 <= y < self.height

    def cell(self, x: int, y: int) -> Cell:
        """Return the cell at (x, y); raise IndexError outside the grid."""
        if not self.is_valid(x, y):
            raise IndexError(f"cell ({x}, {y}) is outside a {self.width}x{self.height} maze")
        return self.grid[y][x]

    def generate(self, rng: random.Random | None = None) -> None:
        """Carve a maze and place entries and exits on opposite borders."""
        if self.width < 3 or self.height < 3:
            raise ValueError("a maze needs at least 3 columns and 3 rows")
        rng = rng if rng is not None else random.Random()

        start_x = 1 + 2 * rng.randrange((self.width - 1) // 2)
        start_y = 1 + 2 * rng.randrange((self.height - 1) // 2)
        self._carve(rng, start_x, start_y)

        self.entries = []
        for _ in range(self.num_entries):
            side, x, y = self._pick_border(rng, None)
            self.grid[y][x].type = CellType.ENTRY
            self.entries.append((x, y))

            exit_side = (side + 2) % 4
            self.exits = []
            for _ in range(self.num_exits):
                _, ex, ey = self._pick_border(rng, exit_side)
                self.grid[ey][ex].type = CellType.EXIT
                self.exits.append((ex, ey))

    def _carve(self, rng: random.Random, x: int, y: int) -> None:
        def enter(cx: int, cy: int):
            cell = self.grid[cy][cx]
            cell.visited = True
            cell.type = CellType.PATH
            directions = list(_DIRECTIONS)
            rng.shuffle(directions)
            return cx, cy, iter(directions)

        stack = [enter(x, y)]
        while stack:
            cx, cy, directions = stack[-1]
            for dx, dy in directions:
                nx, ny = cx + 2 * dx, cy + 2 * dy
                if self.is_valid(nx, ny) and not self.grid[ny][nx].visited:
                    self.grid[cy + dy][cx + dx].type = CellType.PATH
                    stack.append(enter(nx, ny))
                    break
            else:
                stack.pop()

    def _pick_border(self, rng: random.Random, side: int | None) -> tuple[int, int, int]:
        """Pick a border cell whose inner neighbour is a path; return (side, x, y)."""
        while True:
            chosen = rng.randrange(4) if side is None else side
            if chosen == 0:
                x, y = 1 + 2 * rng.randrange((self.width - 1) // 2), 0
            elif chosen == 1:
                x, y = self.width - 1, 1 + 2 * rng.randrange((self.height - 1) // 2)
            elif chosen == 2:
                x, y = 1 + 2 * rng.randrange((self.width - 1) // 2), self.height - 1
            else:
                x, y = 0, 1 + 2 * rng.randrange((self.height - 1) // 2)
            dx, dy = _INWARD[chosen]
            ax, ay = x + dx, y + dy
            if self.is_valid(ax, ay) and self.grid[ay][ax].type is CellType.PATH:
                return chosen, x, y