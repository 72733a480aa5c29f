# balloondefense

A small tower-defense game. A random maze is carved when the game starts. The
shortest route from its entrance (green) to its exit (red) is found with A* and
shaded light grey. Balloons spawn at the entrance and float along that route.
Place towers to shoot them down before they get through.

## Installing

```
pip install .
```

This also installs `pygame`.

## Playing

```
balloondefense
balloondefense --seed 42
```

`--seed` fixes the random maze, so the same seed always gives the same layout.

- A new balloon appears every 15 frames, up to 100 in total.
- Left-click a wall cell that touches the path to place a tower. Up to 50 towers
  can be placed.
- A tower fires at the nearest active balloon within 3 cells, then waits one
  second before it can fire again. While it reloads, its range is drawn as a
  circle.
- A projectile follows its target and pops it when it arrives. If the target is
  gone first, the projectile disappears. At most 200 projectiles are in flight.
- Close the window or press Escape to quit.

## What the game does not do

There is no score, no lives, no money for towers and no game-over screen.
A balloon that reaches the exit simply disappears, and once 100 balloons have
spawned no more come. The maze always has one entrance and one exit.

## Using the pieces

The game logic runs without a window, so it can be driven from code:

```python
import random

from balloondefense.maze import Maze
from balloondefense.astar import a_star_search
from balloondefense.tower import can_place_tower
from balloondefense.game import Game

maze = Maze(21, 15, 1, 1)
maze.generate(random.Random(42))
route = a_star_search(maze, maze.entries[0], maze.exits[0])  # list of (x, y)

game = Game(random.Random(42))
game.step(1 / 60)                # advance one frame of 1/60 s
placed = game.click(85, 125)     # True if a tower went onto that pixel's cell
```

- `Maze.generate` raises `ValueError` for a maze smaller than 3 by 3.
- `Maze.cell(x, y)` raises `IndexError` outside the grid.
- `a_star_search` raises `NoPathError` when the goal cannot be reached.
- `Game.draw(surface)` renders the scene onto any `pygame.Surface`.

## Running the tests

```
pip install ".[test]"
pytest
```