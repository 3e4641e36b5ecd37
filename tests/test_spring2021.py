import pytest

from codingame_bots.spring2021 import (
    Action,
    Board,
    Cell,
    Game,
    Player,
    Tree,
)


def line_board(n, richness=3):
    """Cells in a row: direction 0 goes to i + 1, direction 3 to i - 1."""
    cells = []
    for i in range(n):
        right = i + 1 if i + 1 < n else -1
        left = i - 1 if i > 0 else -1
        cells.append(Cell(i, richness, (right, -1, -1, left, -1, -1)))
    return Board(cells)


def test_cell_from_line():
    cell = Cell.from_line("5 2 1 -1 6 15 16 4\n")
    assert cell.index == 5
    assert cell.richness == 2
    assert cell.neighbours == (1, -1, 6, 15, 16, 4)
    assert cell.tree is None


def test_cell_from_short_line_raises():
    with pytest.raises(ValueError):
        Cell.from_line("1 2 3")


def test_tree_from_line():
    tree = Tree.from_line("12 3 1 0")
    assert tree == Tree(12, 3, True, False)


def test_player_from_line_with_and_without_waiting():
    assert Player.from_line("7 12") == Player(7, 12, False)
    assert Player.from_line("7 12 1") == Player(7, 12, True)


def test_action_parse():
    seed = Action.parse("SEED 3 7\n")
    assert (seed.command, seed.cell_index, seed.target_index) == ("SEED", 3, 7)
    assert str(seed) == "SEED 3 7"
    wait = Action.parse("WAIT")
    assert (wait.command, wait.cell_index, wait.target_index) == ("WAIT", -1, -1)
    grow = Action.parse("GROW 5")
    assert (grow.cell_index, grow.target_index) == (5, -1)


def test_richness_points_invariants():
    board = Board(
        [
            Cell(0, 0, (-1,) * 6),
            Cell(1, 1, (-1,) * 6),
            Cell(2, 2, (-1,) * 6),
            Cell(3, 3, (-1,) * 6),
        ]
    )
    assert board.richness_points(0) == 0
    assert board.richness_points(1) == 0
    assert board.richness_points(3) == 2 * board.richness_points(2)
    assert board.richness_points(2) > 0


def test_shadow_values():
    cell = Cell(0, 1, (-1,) * 6)
    assert cell.shadow_value() == 0
    cell.tree = Tree(0, 1, True, False)
    assert cell.shadow_value() == -2
    cell.tree = Tree(0, 1, False, False)
    assert cell.shadow_value() == 1


def test_tree_placement_and_clearing():
    board = line_board(3)
    assert board.tree_size(1) == -1
    board.place_tree(Tree(1, 2, True, False))
    assert board.tree_size(1) == 2
    board.clear_trees()
    assert board.tree_size(1) == -1


def test_cast_shadow_respects_size_and_edges():
    board = line_board(5)
    board.place_tree(Tree(1, 1, False, False))
    board.place_tree(Tree(2, 1, False, False))
    board.place_tree(Tree(3, 1, True, False))
    expected_all = sum(board.cells[i].shadow_value() for i in (1, 2, 3))
    assert board.cast_shadow(0, 0, 3) == expected_all
    assert board.cast_shadow(0, 0, 1) == board.cells[1].shadow_value()
    assert board.cast_shadow(0, 0, 0) == 0
    assert board.cast_shadow(4, 0, 3) == 0


def test_total_shadow_sums_directions():
    board = line_board(5)
    board.place_tree(Tree(0, 1, False, False))
    board.place_tree(Tree(4, 1, True, False))
    total = board.total_shadow(2, 3)
    assert total == board.cast_shadow(2, 0, 3) + board.cast_shadow(2, 3, 3)
    assert total == board.cells[0].shadow_value() + board.cells[4].shadow_value()


def make_game(board, day, trees, actions, sun=0):
    game = Game(board)
    game.start_turn(day, 20, Player(sun, 0), Player(0, 0), trees, [Action.parse(a) for a in actions])
    return game


def test_choose_only_wait():
    game = make_game(line_board(3), 0, [], ["WAIT"])
    assert game.choose_action().text == "WAIT"


def test_complete_late_in_game_beats_wait():
    trees = [Tree(1, 3, True, False)]
    game = make_game(line_board(3), 22, trees, ["WAIT", "COMPLETE 1"])
    assert game.choose_action().text == "COMPLETE 1"


def test_complete_early_with_few_trees_loses_to_wait():
    trees = [Tree(1, 3, True, False)]
    game = make_game(line_board(3), 5, trees, ["COMPLETE 1", "WAIT"])
    assert game.choose_action().text == "WAIT"


def test_seed_on_unshaded_rich_cell_is_chosen():
    trees = [Tree(0, 2, True, False)]
    game = make_game(line_board(8), 5, trees, ["WAIT", "SEED 0 7"])
    assert game.choose_action().text == "SEED 0 7"


def test_seed_next_to_own_tree_is_avoided():
    trees = [Tree(0, 2, True, False), Tree(6, 1, True, False)]
    game = make_game(line_board(8), 5, trees, ["WAIT", "SEED 0 7"])
    assert game.choose_action().text == "WAIT"


def test_start_turn_replaces_previous_trees_and_counts():
    board = line_board(4)
    game = make_game(board, 1, [Tree(1, 2, True, False), Tree(2, 0, False, False)], ["WAIT"])
    assert game.tree_counts == [0, 0, 1, 0]
    game.start_turn(2, 19, Player(), Player(), [Tree(3, 0, True, False)], [Action.parse("WAIT")])
    assert board.tree_size(1) == -1
    assert board.tree_size(3) == 0
    assert game.tree_counts == [1, 0, 0, 0]
    assert game.nutrients == 19


def test_choose_action_without_actions_raises():
    game = make_game(line_board(2), 0, [], [])
    with pytest.raises(ValueError):
        game.choose_action()