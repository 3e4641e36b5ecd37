import pytest

from codingame_bots.labyrinth import Kirk, Maze, Point


def make_maze(rows):
    maze = Maze(len(rows), len(rows[0]))
    maze.update(rows)
    return maze


def test_neighbour_directions_in_order():
    p = Point(4, 7)
    assert [p.direction_to(n) for n in p.neighbours()] == ["RIGHT", "LEFT", "UP", "DOWN"]


def test_neighbours_are_adjacent():
    p = Point(4, 7)
    for n in p.neighbours():
        assert abs(n.x - p.x) + abs(n.y - p.y) == 1


def test_in_bounds():
    assert Point(0, 0).in_bounds(3, 3)
    assert Point(2, 2).in_bounds(3, 3)
    assert not Point(3, 0).in_bounds(3, 3)
    assert not Point(0, -1).in_bounds(3, 3)


def test_update_finds_target_and_control():
    maze = make_maze(["#T#", "#C#"])
    assert maze.target == Point(1, 0)
    assert maze.control_room == Point(1, 1)
    maze.update(["T##", "##C"])
    assert maze.target == Point(1, 0)
    assert maze.control_room == Point(1, 1)


def test_tile_and_is_path():
    maze = make_maze(["#.", "?T"])
    assert maze.tile(Point(1, 0)) == "."
    assert maze.is_path(Point(1, 0))
    assert not maze.is_path(Point(0, 0))
    assert maze.tile(Point(5, 5)) is None


def test_shortest_path_open_grid_invariants():
    maze = make_maze(["T....", ".....", "....C"])
    start, end = maze.target, maze.control_room
    path = maze.shortest_path(start, end)
    assert path[-1] == end
    assert len(path) == abs(end.x - start.x) + abs(end.y - start.y)
    previous = start
    for point in path:
        assert abs(point.x - previous.x) + abs(point.y - previous.y) == 1
        previous = point


def test_shortest_path_blocked():
    maze = make_maze(["T#C"])
    assert maze.shortest_path(maze.target, maze.control_room) == []


def test_path_to_fog_ends_next_to_fog():
    maze = make_maze(["T...", "###?"])
    path = maze.path_to_fog(maze.target)
    assert path
    assert any(maze.tile(n) == "?" for n in path[-1].neighbours())


def test_path_from_control_requires_positions():
    maze = make_maze(["T.."])
    with pytest.raises(ValueError):
        maze.path_from_control_to_target()


def test_kirk_heads_to_control_room():
    maze = make_maze(["#####", "#T.C#", "#####"])
    kirk = Kirk(10, Point(1, 1))
    assert kirk.next_move(maze) == "RIGHT"
    assert list(kirk.path) == [maze.control_room]


def test_kirk_returns_to_target_from_control():
    maze = make_maze(["#####", "#T.C#", "#####"])
    kirk = Kirk(10, maze.control_room)
    assert kirk.next_move(maze) == "LEFT"
    assert kirk.in_control_room
    assert kirk.timeout == 9


def test_kirk_explores_fog_when_control_unknown():
    maze = make_maze(["#####", "#T.?#", "#####"])
    kirk = Kirk(10, Point(1, 1))
    assert kirk.next_move(maze) == "RIGHT"
    assert list(kirk.path) == []


def test_kirk_explores_when_return_too_long():
    rows = ["######", "#T.C.#", "##?###"]
    eager = Kirk(10, Point(1, 1))
    eager.next_move(make_maze(rows))
    assert list(eager.path) == [Point(3, 1)]
    cautious = Kirk(1, Point(1, 1))
    assert cautious.next_move(make_maze(rows)) == "RIGHT"
    assert list(cautious.path) == []