"""A* shortest path search over a maze grid."""

from __future__ import annotations

from dataclasses import dataclass

from balloondefense.maze import CellType, Maze

# Up, right, down, left.
_NEIGHBOURS: tuple[tuple[int, int], ...] = ((0, -1), (1, 0), (0, 1), (-1, 0))


class NoPathError(Exception):
    """Raised when no route joins the start and the goal."""


@dataclass
class _Node:
    x: int
    y: int
    g: int
    h: int
    parent: _Node | None = None

    @property
    def f(self) -> int:
        return self.g + self.h


def manhattan_distance(x1: int, y1: int, x2: int, y2: int) -> int:
    """Return the Manhattan distance between two grid points."""
    return abs(x1 - x2) + abs(y1 - y2)


def a_star_search(maze: Maze, start: tuple[int, int], goal: tuple[int, int]) -> list[tuple[int, int]]:
    """Find a shortest route from start to goal avoiding walls.

    Cells of type PATH along the route get ``in_path`` set. Returns the
    route as a list of (x, y) points, start first.
    """
    gx, gy = goal
    sx, sy = start
    open_list = [_Node(sx, sy, 0, manhattan_distance(sx, sy, gx, gy))]
    open_index = {(sx, sy): open_list[0]}
    closed: set[tuple[int, int]] = set()

    while open_list:
        best = min(range(len(open_list)), key=lambda i: open_list[i].f)
        last = open_list.pop()
        if best < len(open_list):
            current, open_list[best] = open_list[best], last
        else:
            current = last
        del open_index[(current.x, current.y)]

        if (current.x, current.y) == goal:
            route = _unwind(current)
            for x, y in route:
                cell = maze.grid[y][x]
                if cell.type is CellType.PATH:
                    cell.in_path = True
            return route

        closed.add((current.x, current.y))

        for dx, dy in _NEIGHBOURS:
            nx, ny = current.x + dx, current.y + dy
            if not maze.is_valid(nx, ny):
                continue
            if maze.grid[ny][nx].type is CellType.WALL:
                continue
            if (nx, ny) in closed:
                continue
            new_g = current.g + 1
            existing = open_index.get((nx, ny))
            if existing is not None:
                if new_g < existing.g:
                    existing.g = new_g
                    existing.parent = current
            else:
                node = _Node(nx, ny, new_g, manhattan_distance(nx, ny, gx, gy), current)
                open_list.append(node)
                open_index[(nx, ny)] = node

    raise NoPathError(f"no path from {start} to {goal}")


def _unwind(node: _Node | None) -> list[tuple[int, int]]:
    route = []
    while node is not None:
        route.append((node.x, node.y))
        node = node.parent
    route.reverse()
    return route