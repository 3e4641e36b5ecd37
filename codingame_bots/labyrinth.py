"""Guide Kirk through a fog-covered maze to the control room and back."""

from __future__ import annotations

import sys
from collections import deque
from dataclasses import dataclass, field
from typing import Iterable, Optional

WALKABLE = frozenset(".CT")
PATH_EMPTY = "PATH EMPTY"


@dataclass(frozen=True)
class Point:
    """A position in the maze; x is the column, y the row."""

    x: int
    y: int

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"

    def in_bounds(self, width: int, height: int) -> bool:
        """Whether the point lies inside a ``width`` x ``height`` area."""
        return 0 <= self.x < width and 0 <= self.y < height

    def neighbours(self) -> list["Point"]:
        """The four orthogonal neighbours: right, left, up, down."""
        return [
            Point(self.x + 1, self.y),
            Point(self.x - 1, self.y),
            Point(self.x, self.y - 1),
            Point(self.x, self.y + 1),
        ]

    def direction_to(self, other: "Point") -> str:
        """The move that leads from this point towards ``other``."""
        delta = other - self
        if delta.x < 0:
            return "LEFT"
        if delta.x > 0:
            return "RIGHT"
        if delta.y < 0:
            return "UP"
        return "DOWN"


_Entry = tuple  # (Point, parent entry or None)


def _unwind(entry: Optional[_Entry]) -> list[Point]:
    points = []
    while entry is not None:
        points.append(entry[0])
        entry = entry[1]
    points.reverse()
    return points


class Maze:
    """The currently known maze, with the positions of the target and control room."""

    def __init__(self, rows: int, cols: int) -> None:
        self.rows = rows
        self.cols = cols
        self.grid: list[str] = [""] * rows
        self.target: Optional[Point] = None
        self.control_room: Optional[Point] = None

    def update(self, lines: Iterable[str]) -> None:
        """Replace the grid with freshly observed rows."""
        self.grid = [line.strip() for line in lines][: self.rows]
        self.grid += [""] * (self.rows - len(self.grid))
        for y, row in enumerate(self.grid):
            column = row.find("T")
            if column >= 0 and self.target is None:
                self.target = Point(column, y)
            column = row.find("C")
            if column >= 0 and self.control_room is None:
                self.control_room = Point(column, y)

    def tile(self, point: Point) -> Optional[str]:
        """The character at ``point``, or None outside the maze."""
        if not point.in_bounds(self.cols, self.rows):
            return None
        row = self.grid[point.y]
        return row[point.x] if point.x < len(row) else None

    def is_path(self, point: Point) -> bool:
        """Whether ``point`` is a known open corridor."""
        return self.tile(point) == "."

    def shortest_path(self, start: Point, end: Point) -> list[Point]:
        """Shortest walk from ``start`` to ``end`` over known tiles, without ``start``.

        An empty list means no path is known.
        """
        visited: set[Point] = set()
        queue: deque[_Entry] = deque([(start, None)])
        while queue:
            entry = queue.popleft()
            current = entry[0]
            if current == end:
                return _unwind(entry)[1:]
            for neighbour in current.neighbours():
                if neighbour not in visited and self.tile(neighbour) in WALKABLE:
                    visited.add(neighbour)
                    queue.append((neighbour, entry))
        return []

    def path_to_fog(self, start: Point) -> list[Point]:
        """Shortest walk from ``start`` to a tile next to unexplored fog, without ``start``."""
        visited: set[Point] = set()
        queue: deque[_Entry] = deque([(start, None)])
        while queue:
            entry = queue.popleft()
            current = entry[0]
            for neighbour in current.neighbours():
                tile = self.tile(neighbour)
                if tile == "?":
                    return _unwind(entry)[1:]
                if (tile == "." and neighbour not in visited) or tile == "T":
                    visited.add(neighbour)
                    queue.append((neighbour, entry))
        return []

    def path_from_control_to_target(self) -> list[Point]:
        """Shortest walk from the control room back to the target."""
        if self.control_room is None or self.target is None:
            raise ValueError("control room and target must both be known")
        return self.shortest_path(self.control_room, self.target)


@dataclass
class Kirk:
    """Kirk's position, the alarm countdown and the path he is following."""

    timeout: int
    location: Point = Point(0, 0)
    in_control_room: bool = False
    path: deque = field(default_factory=deque)

    def _follow_path(self) -> str:
        if not self.path:
            return PATH_EMPTY
        return self.location.direction_to(self.path.popleft())

    def next_move(self, maze: Maze) -> str:
        """Decide Kirk's next move: UP, DOWN, LEFT or RIGHT."""
        self.in_control_room = self.in_control_room or maze.tile(self.location) == "C"
        if self.path:
            if self.in_control_room:
                self.timeout -= 1
        elif maze.control_room is None:
            self.path = deque(maze.path_to_fog(self.location))
        elif not self.in_control_room:
            self.path = deque(maze.shortest_path(self.location, maze.control_room))
            return_length = len(maze.path_from_control_to_target())
            if not self.path or return_length > self.timeout:
                self.path = deque(maze.path_to_fog(self.location))
        else:
            if maze.target is None:
                raise ValueError("target position is unknown")
            self.path = deque(maze.shortest_path(self.location, maze.target))
            self.timeout -= 1
        return self._follow_path()


def main(argv=None) -> None:
    """Play the labyrinth over standard input and output."""
    readline = sys.stdin.readline
    rows, cols, alarm = (int(token) for token in readline().split()[:3])
    maze = Maze(rows, cols)
    kirk = Kirk(alarm)
    while True:
        line = readline()
        if not line.strip():
            break
        kr, kc = (int(token) for token in line.split()[:2])
        kirk.location = Point(kc, kr)
        maze.update(readline() for _ in range(rows))
        print(kirk.next_move(maze), flush=True)


if __name__ == "__main__":
    main()