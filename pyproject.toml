[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "balloondefense"
version = "0.1.0"
description = "A small tower-defense game: balloons follow the A* route through a random maze while towers shoot them down."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "tower defense", "maze", "a-star", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Real Time Strategy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
balloondefense = "balloondefense.game:main"

[tool.hatch.build.targets.wheel]
packages = ["balloondefense"]

[tool.pytest.ini_options]
addopts = "-ra"
