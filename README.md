# codingame_bots

A set of small solvers and game bots. Each one reads its problem from
standard input and writes its answers to standard output, one line per turn
or query, so it can be driven by a game referee or fed from a file.

## Installing

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Commands

| Command             | What it does                                                                  |
|---------------------|-------------------------------------------------------------------------------|
| `cg-spreadsheet`    | Evaluates a one-dimensional spreadsheet of `VALUE`/`ADD`/`SUB`/`MULT` cells    |
| `cg-defibrillators` | Prints the name of the defibrillator nearest to a given position              |
| `cg-labyrinth`      | Explores a fogged maze, reaches the control room and heads for the target     |
| `cg-fall2022`       | Bot that moves and spawns robots on the scrap grid                            |
| `cg-spring2021`     | Bot that grows, seeds and harvests trees on the hexagonal forest              |
| `cg-spring2022`     | Bot that sends two defending heroes and one attacker after monsters           |
| `cg-spring2025`     | Reads a depth and a 3×3 dice board, prints the hash sum of reachable boards   |

Example:

```
cg-spreadsheet < spreadsheet.txt
```

## Using the modules

The parsing and decision logic can be used without standard input:

- `codingame_bots.spreadsheet.evaluate` takes cells from `parse_cell` and
  returns their values, raising `ValueError` on circular references.
- `codingame_bots.defibrillators.nearest` returns the closest
  `Defibrillator` to a position given in radians.
- `codingame_bots.labyrinth.Maze.shortest_path` and `Maze.path_to_fog`
  return lists of `Point`s; `Kirk.next_move` returns the next direction.
- `codingame_bots.fall2022.plan_turn` returns the actions for a `Grid`.
- `codingame_bots.spring2021.Game.choose_action` picks one of the offered
  `Action`s.
- `codingame_bots.spring2022.Game.play_turn` returns the three hero commands.
- `codingame_bots.spring2025.State.solve` returns the hash sum for a starting
  board and depth.

## What is not included

There is no lake-size solver for land and water maps and no bomb-search
solver that jumps between building windows; the package has neither module
nor command for them.