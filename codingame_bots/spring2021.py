"""A bot for a forest-growing game played on a hexagonal board of 37 cells."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Iterable, Optional

FOREST_INITIAL_NUTRIENT = 20
BOARD_SIZE = 37
DIRECTIONS = 6

MIN_TREE3_N = 3
MAX_TREE0_N = 3
MAX_TREES = 12

_UNAFFORDABLE = 1_000_000
_GROW_BASE_COST = {0: 1, 1: 3, 2: 7}


@dataclass(frozen=True)
class Tree:
    """A tree standing on a cell, sized 0 (seed) to 3."""

    cell_index: int
    size: int
    is_mine: bool
    is_dormant: bool

    @classmethod
    def from_line(cls, line: str) -> "Tree":
        """Parse ``cellIndex size isMine isDormant``."""
        values = [int(token) for token in line.split()]
        if len(values) < 4:
            raise ValueError(f"malformed tree line: {line!r}")
        cell_index, size, mine, dormant = values[:4]
        return cls(cell_index, size, mine != 0, dormant != 0)


@dataclass
class Cell:
    """A board cell with its richness, neighbours and possibly a tree."""

    index: int
    richness: int
    neighbours: tuple[int, ...]
    tree: Optional[Tree] = None

    @classmethod
    def from_line(cls, line: str) -> "Cell":
        """Parse ``index richness n0 n1 n2 n3 n4 n5``; -1 marks a missing neighbour."""
        values = [int(token) for token in line.split()]
        if len(values) < 2 + DIRECTIONS:
            raise ValueError(f"malformed cell line: {line!r}")
        return cls(values[0], values[1], tuple(values[2 : 2 + DIRECTIONS]))

    @property
    def tree_size(self) -> int:
        return self.tree.size if self.tree is not None else -1

    def shadow_value(self) -> int:
        """Worth of shading this cell: -2 for my tree, 1 for the opponent's, 0 if empty."""
        if self.tree is None:
            return 0
        return -2 if self.tree.is_mine else 1


class Board:
    """All cells of the board, indexed by cell number."""

    def __init__(self, cells: Iterable[Cell]) -> None:
        self.cells = list(cells)

    def richness_points(self, index: int) -> int:
        """Bonus points a cell's richness gives."""
        return max(0, (self.cells[index].richness - 1) * 2)

    def tree_size(self, index: int) -> int:
        """Size of the tree on a cell, or -1 if there is none."""
        return self.cells[index].tree_size

    def place_tree(self, tree: Tree) -> None:
        self.cells[tree.cell_index].tree = tree

    def clear_trees(self) -> None:
        for cell in self.cells:
            cell.tree = None

    def cast_shadow(self, origin: int, direction: int, size: int) -> int:
        """Sum of shadow values over up to ``size`` cells in one direction from ``origin``."""
        total = 0
        current = origin
        for _ in range(size):
            current = self.cells[current].neighbours[direction]
            if current == -1:
                break
            total += self.cells[current].shadow_value()
        return total

    def total_shadow(self, origin: int, size: int) -> int:
        """Shadow sum in every direction from ``origin``."""
        return sum(self.cast_shadow(origin, direction, size) for direction in range(DIRECTIONS))


@dataclass(frozen=True)
class Player:
    """A player's sun points, score and whether they are waiting."""

    sun: int = 0
    score: int = 0
    waiting: bool = False

    @classmethod
    def from_line(cls, line: str) -> "Player":
        """Parse ``sun score [isWaiting]``."""
        values = [int(token) for token in line.split()]
        if len(values) < 2:
            raise ValueError(f"malformed player line: {line!r}")
        waiting = len(values) > 2 and values[2] != 0
        return cls(values[0], values[1], waiting)


@dataclass(frozen=True)
class Action:
    """A possible move as offered by the game, kept with its original text."""

    text: str
    command: str
    cell_index: int = -1
    target_index: int = -1

    @classmethod
    def parse(cls, line: str) -> "Action":
        """Parse ``COMMAND [cell [target]]``."""
        text = line.strip("\r\n")
        tokens = text.split()
        if not tokens:
            raise ValueError("empty action line")
        cell_index = int(tokens[1]) if len(tokens) > 1 else -1
        target_index = int(tokens[2]) if len(tokens) > 2 else -1
        return cls(text, tokens[0], cell_index, target_index)

    def __str__(self) -> str:
        return self.text


@dataclass
class Game:
    """The board plus the state of the current day."""

    board: Board
    day: int = 0
    nutrients: int = FOREST_INITIAL_NUTRIENT
    me: Player = field(default_factory=Player)
    opponent: Player = field(default_factory=Player)
    actions: list[Action] = field(default_factory=list)
    tree_counts: list[int] = field(default_factory=lambda: [0, 0, 0, 0])

    def start_turn(
        self,
        day: int,
        nutrients: int,
        me: Player,
        opponent: Player,
        trees: Iterable[Tree],
        actions: Iterable[Action],
    ) -> None:
        """Replace the previous day's state with a new one."""
        self.day = day
        self.nutrients = nutrients
        self.me = me
        self.opponent = opponent
        self.board.clear_trees()
        self.tree_counts = [0, 0, 0, 0]
        for tree in trees:
            if tree.is_mine and 0 <= tree.size < 4:
                self.tree_counts[tree.size] += 1
            self.board.place_tree(tree)
        self.actions = list(actions)

    def _gain(self, action: Action) -> int:
        base = -2 * self.me.sun
        counts = self.tree_counts
        if action.command == "COMPLETE" and (self.day > 20 or counts[3] > MIN_TREE3_N):
            return self.nutrients + self.board.richness_points(action.cell_index)
        if action.command == "GROW":
            size = self.board.tree_size(action.cell_index)
            if size in _GROW_BASE_COST:
                cost = _GROW_BASE_COST[size] + counts[size + 1]
            else:
                cost = _UNAFFORDABLE
            return self.board.richness_points(action.cell_index) - cost + size
        if action.command == "WAIT":
            return base + 1
        if (
            action.command == "SEED"
            and self.board.tree_size(action.cell_index) > 1
            and counts[0] < MAX_TREE0_N
            and sum(counts) < MAX_TREES
        ):
            if self.board.total_shadow(action.target_index, 3) >= 0:
                return self.board.richness_points(action.target_index) - counts[0]
        return base

    def choose_action(self) -> Action:
        """Pick the offered action with the highest gain; the first wins a tie."""
        if not self.actions:
            raise ValueError("no actions to choose from")
        best = self.actions[0]
        best_gain = -2 * self.me.sun
        for action in self.actions:
            gain = self._gain(action)
            if gain > best_gain:
                best, best_gain = action, gain
        return best


def main(argv=None) -> None:
    """Play the game over standard input and output."""
    readline = sys.stdin.readline
    count = int(readline())
    if count != BOARD_SIZE:
        raise ValueError(f"expected {BOARD_SIZE} cells, got {count}")
    game = Game(Board(Cell.from_line(readline()) for _ in range(count)))
    while True:
        line = readline()
        if not line.strip():
            break
        day = int(line)
        nutrients = int(readline())
        me = Player.from_line(readline())
        opponent = Player.from_line(readline())
        trees = [Tree.from_line(readline()) for _ in range(int(readline()))]
        actions = [Action.parse(readline()) for _ in range(int(readline()))]
        game.start_turn(day, nutrients, me, opponent, trees, actions)
        print(game.choose_action(), flush=True)


if __name__ == "__main__":
    main()