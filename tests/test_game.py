import random

import pygame

from balloondefense.game import (
    CELL_SIZE,
    MAX_BALLOONS,
    MAX_TOWERS,
    SPAWN_INTERVAL,
    Game,
)
from balloondefense.maze import CellType
from balloondefense.tower import Tower, can_place_tower


def make_game(seed=7):
    return Game(random.Random(seed))


def placeable_cell(game):
    for y in range(game.maze.height):
        for x in range(game.maze.width):
            if can_place_tower(game.maze, x, y):
                return x, y
    raise AssertionError("no placeable cell")


def test_route_joins_entry_and_exit():
    game = make_game()
    assert game.path[0] == game.maze.entries[0]
    assert game.path[-1] == game.maze.exits[0]
    assert game.balloons == []
    assert game.maze.width * CELL_SIZE == 800
    assert game.maze.height * CELL_SIZE == 600


def test_route_cells_marked():
    game = make_game()
    for x, y in game.path[1:-1]:
        assert game.maze.cell(x, y).type is CellType.PATH
        assert game.maze.cell(x, y).in_path


def test_balloon_spawns_every_interval():
    game = make_game()
    for _ in range(SPAWN_INTERVAL - 1):
        game.step(1 / 60)
    assert game.balloons == []
    game.step(1 / 60)
    assert len(game.balloons) == 1
    assert game.frame_counter == 0
    for _ in range(SPAWN_INTERVAL):
        game.step(1 / 60)
    assert len(game.balloons) == 2


def test_balloons_capped():
    game = make_game()
    for _ in range(SPAWN_INTERVAL * (MAX_BALLOONS + 5)):
        game.step(1 / 60)
    assert len(game.balloons) == MAX_BALLOONS


def test_balloon_starts_from_entry_and_moves():
    game = make_game()
    for _ in range(SPAWN_INTERVAL):
        game.step(1 / 60)
    balloon = game.balloons[0]
    entry_x, entry_y = game.maze.entries[0]
    moved = abs(balloon.x - entry_x) + abs(balloon.y - entry_y)
    assert 0 < moved <= balloon.speed + 1e-9


def test_click_places_tower():
    game = make_game()
    x, y = placeable_cell(game)
    assert game.click(x * CELL_SIZE + 5, y * CELL_SIZE + 5) is True
    assert [(t.x, t.y) for t in game.towers] == [(x, y)]


def test_click_on_route_refused():
    game = make_game()
    x, y = game.path[1]
    assert game.click(x * CELL_SIZE + 1, y * CELL_SIZE + 1) is False
    assert game.towers == []


def test_click_outside_refused():
    game = make_game()
    assert game.click(-5, -5) is False
    assert game.click(10_000, 10_000) is False
    assert game.towers == []


def test_towers_capped():
    game = make_game()
    x, y = placeable_cell(game)
    placed = [game.click(x * CELL_SIZE, y * CELL_SIZE) for _ in range(MAX_TOWERS + 10)]
    assert placed.count(True) == MAX_TOWERS
    assert len(game.towers) == MAX_TOWERS


def test_tower_shoots_and_pops_balloon():
    game = make_game()
    entry_x, entry_y = game.maze.entries[0]
    game.towers.append(Tower(entry_x, entry_y, 100, 10.0))
    for _ in range(SPAWN_INTERVAL):
        game.step(1 / 60)
    assert len(game.projectiles) == 1
    target = game.projectiles[0].target
    assert target is game.balloons[0]
    for _ in range(200):
        if not game.projectiles:
            break
        game.step(1 / 60)
    assert game.projectiles == []
    assert not target.active


def test_draw_paints_walls_and_entry():
    game = make_game()
    surface = pygame.Surface((800, 600))
    game.draw(surface)
    half = CELL_SIZE // 2
    assert tuple(surface.get_at((half, half)))[:3] == (80, 80, 80)
    entry_x, entry_y = game.maze.entries[0]
    entry_colour = surface.get_at((entry_x * CELL_SIZE + 3, entry_y * CELL_SIZE + 3))
    wall_colour = surface.get_at((half, half))
    assert entry_colour != wall_colour
    assert tuple(surface.get_at((0, 0)))[:3] == (0, 0, 0)


def test_same_seed_same_maze():
    first = make_game(3)
    second = make_game(3)
    assert first.path == second.path
    assert first.maze.entries == second.maze.entries