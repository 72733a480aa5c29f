"""Game state, frame loop and drawing for the maze defense game."""

from __future__ import annotations

import argparse
import random

import pygame

from balloondefense.astar import a_star_search
from balloondefense.balloon import Balloon
from balloondefense.maze import CellType, Maze
from balloondefense.projectile import Projectile
from balloondefense.tower import Tower, can_place_tower

SCREEN_WIDTH = 800
SCREEN_HEIGHT = 600
CELL_SIZE = 40

MAX_BALLOONS = 100
MAX_TOWERS = 50
MAX_PROJECTILES = 200

SPAWN_INTERVAL = 15
BALLOON_SPEED = 0.07
TOWER_RANGE = 3
TOWER_RELOAD = 1.0
FPS = 60

_RAYWHITE = (245, 245, 245)
_DARKGRAY = (80, 80, 80)
_LIGHTGRAY = (200, 200, 200)
_WHITE = (255, 255, 255)
_GREEN = (0, 228, 48)
_RED = (230, 41, 55)
_BLACK = (0, 0, 0)
_BLUE = (0, 121, 241)
_SKYBLUE = (102, 191, 255)
_YELLOW = (253, 249, 0)

_CELL_COLOURS = {
    CellType.WALL: _DARKGRAY,
    CellType.ENTRY: _GREEN,
    CellType.EXIT: _RED,
}


class Game:
    """One round: a maze, its route and the balloons, towers and shots on it."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.maze = Maze(SCREEN_WIDTH // CELL_SIZE, SCREEN_HEIGHT // CELL_SIZE, 1, 1)
        self.maze.generate(rng)
        self.path = a_star_search(self.maze, self.maze.entries[0], self.maze.exits[0])
        self.balloons: list[Balloon] = []
        self.towers: list[Tower] = []
        self.projectiles: list[Projectile] = []
        self.frame_counter = 0

    def step(self, frame_time: float) -> None:
        """Advance the game by one frame lasting frame_time seconds."""
        self.frame_counter += 1
        if self.frame_counter >= SPAWN_INTERVAL and len(self.balloons) < MAX_BALLOONS:
            entry_x, entry_y = self.maze.entries[0]
            self.balloons.append(Balloon(float(entry_x), float(entry_y), self.path, BALLOON_SPEED))
            self.frame_counter = 0

        for balloon in self.balloons:
            if balloon.active:
                balloon.update()

        for tower in self.towers:
            if tower.active:
                shot = tower.update(self.balloons, frame_time)
                if shot is not None and len(self.projectiles) < MAX_PROJECTILES:
                    self.projectiles.append(shot)

        for shot in self.projectiles:
            if shot.active:
                shot.update()

        self.projectiles = [shot for shot in self.projectiles if shot.active]

    def click(self, px: float, py: float) -> bool:
        """Place a tower under screen point (px, py); return whether one was placed."""
        grid_x = int(px / CELL_SIZE)
        grid_y = int(py / CELL_SIZE)
        if not can_place_tower(self.maze, grid_x, grid_y) or len(self.towers) >= MAX_TOWERS:
            return False
        self.towers.append(Tower(grid_x, grid_y, TOWER_RANGE, TOWER_RELOAD))
        return True

    def draw(self, surface: pygame.Surface) -> None:
        """Render the whole scene onto surface."""
        surface.fill(_RAYWHITE)
        half = CELL_SIZE // 2

        for y, row in enumerate(self.maze.grid):
            for x, cell in enumerate(row):
                rect = pygame.Rect(x * CELL_SIZE, y * CELL_SIZE, CELL_SIZE, CELL_SIZE)
                if cell.type is CellType.PATH:
                    colour = _LIGHTGRAY if cell.in_path else _WHITE
                else:
                    colour = _CELL_COLOURS[cell.type]
                pygame.draw.rect(surface, colour, rect)
                pygame.draw.rect(surface, _BLACK, rect, 1)

        for balloon in self.balloons:
            if balloon.active:
                centre = (int(balloon.x * CELL_SIZE + half), int(balloon.y * CELL_SIZE + half))
                pygame.draw.circle(surface, _RED, centre, CELL_SIZE // 3)

        for tower in self.towers:
            if not tower.active:
                continue
            cx = tower.x * CELL_SIZE + half
            cy = tower.y * CELL_SIZE + half
            quarter = CELL_SIZE // 4
            pygame.draw.rect(surface, _BLUE, pygame.Rect(cx - quarter, cy - quarter, half, half))
            if tower.reload_counter > 0:
                pygame.draw.circle(surface, _SKYBLUE, (cx, cy), tower.range * CELL_SIZE, 1)

        for shot in self.projectiles:
            if shot.active:
                centre = (int(shot.x * CELL_SIZE + half), int(shot.y * CELL_SIZE + half))
                pygame.draw.circle(surface, _YELLOW, centre, CELL_SIZE // 6)


def main(argv: list[str] | None = None) -> int:
    """Open the game window and run until it is closed."""
    parser = argparse.ArgumentParser(description="Defend the maze against balloons.")
    parser.add_argument("--seed", type=int, default=None, help="seed for maze generation")
    args = parser.parse_args(argv)

    game = Game(random.Random(args.seed))

    pygame.init()
    try:
        screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption("Balloon Maze Defense")
        clock = pygame.time.Clock()
        frame_time = 0.0
        running = True
        while running:
            clicks = []
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    clicks.append(event.pos)
            if not running:
                break

            game.step(frame_time)
            for px, py in clicks:
                game.click(px, py)

            game.draw(screen)
            pygame.display.flip()
            frame_time = clock.tick(FPS) / 1000.0
    finally:
        pygame.quit()
    return 0