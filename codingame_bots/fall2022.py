"""A bot that moves and spawns robots to spread over a scrap field."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Iterable, Optional, Union


@dataclass
class Cell:
    """One tile of the field as reported each turn."""

    scrap_amount: int = 0
    owner: int = 0
    units: int = 0
    recycler: bool = False
    can_build: bool = False
    can_spawn: bool = False
    in_recycler_range: bool = False

    @classmethod
    def from_line(cls, line: str) -> "Cell":
        """Parse ``scrap owner units recycler canBuild canSpawn inRecyclerRange``."""
        values = [int(token) for token in line.split()]
        if len(values) < 7:
            raise ValueError(f"malformed cell line: {line!r}")
        scrap, owner, units, recycler, can_build, can_spawn, in_range = values[:7]
        return cls(scrap, owner, units, recycler == 1, can_build == 1, can_spawn == 1, in_range == 1)

    @property
    def is_mine(self) -> bool:
        return self.owner == 1


@dataclass(frozen=True)
class Wait:
    def __str__(self) -> str:
        return "WAIT"


@dataclass(frozen=True)
class Move:
    amount: int
    from_x: int
    from_y: int
    to_x: int
    to_y: int

    def __str__(self) -> str:
        return f"MOVE {self.amount} {self.from_x} {self.from_y} {self.to_x} {self.to_y}"


@dataclass(frozen=True)
class Build:
    x: int
    y: int

    def __str__(self) -> str:
        return f"BUILD {self.x} {self.y}"


@dataclass(frozen=True)
class Spawn:
    amount: int
    x: int
    y: int

    def __str__(self) -> str:
        return f"SPAWN {self.amount} {self.x} {self.y}"


Action = Union[Wait, Move, Build, Spawn]


@dataclass
class Grid:
    """The field, the players' matter and the split between my tiles and the rest."""

    width: int
    height: int
    my_matter: int = 10
    enemy_matter: int = 10
    cells: list[Cell] = field(default_factory=list)
    mine: list[int] = field(default_factory=list)
    others: list[tuple[int, int]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.cells:
            self.cells = [Cell() for _ in range(self.width * self.height)]

    def update(self, my_matter: int, enemy_matter: int, cells: Iterable[Cell]) -> None:
        """Store a new turn's state, in row-major order."""
        cells = list(cells)
        if len(cells) != self.width * self.height:
            raise ValueError(f"expected {self.width * self.height} cells, got {len(cells)}")
        self.my_matter = my_matter
        self.enemy_matter = enemy_matter
        self.cells = cells
        self.mine = [i for i, cell in enumerate(cells) if cell.is_mine]
        self.others = [self.xy(i) for i, cell in enumerate(cells) if not cell.is_mine]

    def neighbours(self, index: int) -> tuple[Optional[int], ...]:
        """Indices of the left, right, top and bottom neighbours, None at an edge."""
        x, y = self.xy(index)
        return (
            index - 1 if x > 0 else None,
            index + 1 if x < self.width - 1 else None,
            index - self.width if y > 0 else None,
            index + self.width if y < self.height - 1 else None,
        )

    def xy(self, index: int) -> tuple[int, int]:
        return index % self.width, index // self.width


def dist_squared(origin: tuple[int, int], target: tuple[int, int]) -> int:
    dx = target[0] - origin[0]
    dy = target[1] - origin[1]
    return dx * dx + dy * dy


def _total_distance(grid: Grid, xy: tuple[int, int]) -> int:
    return sum(dist_squared(xy, pos) for pos in grid.others)


def check_build(grid: Grid) -> Optional[Build]:
    """Build on the first tile of mine whose neighbours all hold no more scrap than it."""
    if grid.my_matter < 10:
        return None
    for i in grid.mine:
        cell = grid.cells[i]
        if not cell.can_build:
            continue
        if all(
            n is not None and grid.cells[n].scrap_amount <= cell.scrap_amount
            for n in grid.neighbours(i)
        ):
            return Build(*grid.xy(i))
    return None


def check_spawn(grid: Grid) -> Optional[Spawn]:
    """Spawn one robot on my tile closest to all tiles I do not own."""
    if grid.my_matter < 10:
        return None
    candidates = [grid.xy(i) for i in grid.mine if grid.cells[i].can_spawn]
    if not candidates:
        return None
    best = min(candidates, key=lambda xy: _total_distance(grid, xy))
    return Spawn(1, *best)


def check_move(grid: Grid, origin: tuple[int, int], amount: int) -> Optional[Move]:
    """Move robots towards the foreign tile closest to all other foreign tiles."""
    if grid.my_matter < 10 or not grid.others:
        return None
    best = min(grid.others, key=lambda xy: _total_distance(grid, xy))
    return Move(amount, origin[0], origin[1], best[0], best[1])


def plan_turn(grid: Grid) -> list[Action]:
    """Moves for every tile of mine with robots, then a spawn if affordable."""
    actions: list[Action] = []
    for i in grid.mine:
        units = grid.cells[i].units
        if units > 0:
            move = check_move(grid, grid.xy(i), units)
            if move is not None:
                actions.append(move)
    spawn = check_spawn(grid)
    if spawn is not None:
        actions.append(spawn)
    return actions


def format_actions(actions: list[Action]) -> str:
    """The output line for a turn: WAIT, or each action followed by a semicolon."""
    if not actions:
        return str(Wait())
    return "".join(f"{action};" for action in actions)


def main(argv=None) -> None:
    """Play the game over standard input and output."""
    readline = sys.stdin.readline
    width, height = (int(token) for token in readline().split()[:2])
    grid = Grid(width, height)
    while True:
        line = readline()
        if not line.strip():
            break
        my_matter, enemy_matter = (int(token) for token in line.split()[:2])
        cells = [Cell.from_line(readline()) for _ in range(width * height)]
        grid.update(my_matter, enemy_matter, cells)
        print(format_actions(plan_turn(grid)), flush=True)


if __name__ == "__main__":
    main()