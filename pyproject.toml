[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "codingame_bots"
version = "0.1.0"
description = "Solvers and game bots for puzzle and contest problems that talk over standard input and output"
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzles", "game-bots", "contest", "pathfinding", "simulation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cg-spreadsheet = "codingame_bots.spreadsheet:main"
cg-defibrillators = "codingame_bots.defibrillators:main"
cg-labyrinth = "codingame_bots.labyrinth:main"
cg-fall2022 = "codingame_bots.fall2022:main"
cg-spring2021 = "codingame_bots.spring2021:main"
cg-spring2022 = "codingame_bots.spring2022:main"
cg-spring2025 = "codingame_bots.spring2025:main"

[tool.hatch.build.targets.wheel]
packages = ["codingame_bots"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
