"""Count the final positions of a capture game on a 3x3 board, as a combined hash."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Optional

HASH_MOD = 1 << 30
_HASH_MASK = HASH_MOD - 1
MAX_CAPTURE = 6
BOARD_TILES = 9

# For every cell, the sets of at least two orthogonal neighbours that may be captured together.
_CAPTURE_SETS: tuple[tuple[tuple[int, ...], ...], ...] = (
    ((1, 3),),
    ((0, 2), (0, 4), (2, 4), (0, 2, 4)),
    ((1, 5),),
    ((0, 4), (0, 6), (4, 6), (0, 4, 6)),
    (
        (1, 3),
        (1, 5),
        (1, 7),
        (3, 5),
        (3, 7),
        (5, 7),
        (1, 3, 5),
        (1, 3, 7),
        (1, 5, 7),
        (3, 5, 7),
        (1, 3, 5, 7),
    ),
    ((2, 4), (2, 8), (4, 8), (2, 4, 8)),
    ((3, 7),),
    ((4, 6), (4, 8), (6, 8), (4, 6, 8)),
    ((5, 7),),
)


def _digits(tiles: tuple[int, ...]) -> int:
    value = 0
    for tile in tiles:
        value = value * 10 + tile
    return value


def hash_state(tiles, count) -> int:
    """The board read as a decimal number, times ``count``, modulo 2**30."""
    return (_digits(tuple(tiles)) * count) & _HASH_MASK


def _capture(
    tiles: tuple[int, ...], placement: int, neighbours: tuple[int, ...]
) -> Optional[tuple[int, ...]]:
    total = 0
    for n in neighbours:
        if tiles[n] == 0:
            return None
        total += tiles[n]
    if total > MAX_CAPTURE:
        return None
    new = list(tiles)
    new[placement] = total
    for n in neighbours:
        new[n] = 0
    return tuple(new)


def _successors(tiles: tuple[int, ...], placement: int) -> list[tuple[int, ...]]:
    results = []
    for neighbours in _CAPTURE_SETS[placement]:
        captured = _capture(tiles, placement, neighbours)
        if captured is not None:
            results.append(captured)
    if not results:
        new = list(tiles)
        new[placement] = 1
        results.append(tuple(new))
    return results


@dataclass(frozen=True)
class State:
    """A board position and the number of game paths that lead to it."""

    tiles: tuple[int, ...]
    count: int = field(default=1, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "tiles", tuple(self.tiles))
        if len(self.tiles) != BOARD_TILES:
            raise ValueError(f"a board has {BOARD_TILES} tiles, got {len(self.tiles)}")

    def __str__(self) -> str:
        return " | ".join(str(tile) for tile in self.tiles)

    def try_capture(self, placement: int, neighbours) -> Optional["State"]:
        """Place on ``placement`` capturing ``neighbours``, if all are occupied and sum to at most 6."""
        tiles = _capture(self.tiles, placement, tuple(neighbours))
        return None if tiles is None else State(tiles, self.count)

    def next_states(self, placement: int) -> list["State"]:
        """Every position reachable by placing a die on ``placement``."""
        return [State(tiles, self.count) for tiles in _successors(self.tiles, placement)]

    def solve(self, depth: int) -> int:
        """Sum of the hashes of all positions after ``depth`` turns or at game end, modulo 2**30."""
        current: dict[tuple[int, ...], int] = {self.tiles: self.count}
        total = 0
        for _ in range(depth):
            if not current:
                break
            following: dict[tuple[int, ...], int] = {}
            for tiles, count in current.items():
                empties = [i for i, tile in enumerate(tiles) if tile == 0]
                if not empties:
                    total += _digits(tiles) * count
                    continue
                for placement in empties:
                    for new in _successors(tiles, placement):
                        following[new] = following.get(new, 0) + count
            current = following
        for tiles, count in current.items():
            total += _digits(tiles) * count
        return total & _HASH_MASK


def main(argv=None) -> None:
    """Read the depth and a 3x3 board from standard input and print the result."""
    lines = sys.stdin.read().splitlines()
    depth = int(lines[0])
    tiles = [int(token) for line in lines[1:4] for token in line.split()]
    print(State(tuple(tiles)).solve(depth))


if __name__ == "__main__":
    main()