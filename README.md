# mazegen

Generate random rectangular mazes and draw them as text in the terminal.

A maze starts as a grid of solid walls. An iterative depth-first
backtracking walk then carves it out. The walk moves two cells at a time and
opens the cell it jumps over, so the outer border always stays solid. The
starting cell holds the player (`@`). By default the grid is 37 rows by 51
columns and the walk starts at row 1, column 1.

## Installation

```
pip install .
```

## Command line

```
mazegen [--height N] [--width N] [--seed N] [--color | --no-color]
```

This prints a freshly generated maze to standard output.

| Option | Meaning |
|---|---|
| `--height` | Rows in the grid. The default is 37. |
| `--width` | Columns in the grid. The default is 51. |
| `--seed` | Integer seed. The same seed gives the same maze. |
| `--color` / `--no-color` | Turn ANSI colour on or off. Without either option, colour is used only when standard output is a terminal. |

A height or width below 3 is rejected with a usage error.

Each wall cell is drawn three characters wide as `###`. Each open cell is
drawn as its symbol with a space on either side.

`python -m mazegen.cli` runs the same command.

## Library use

```python
import random

from mazegen.maze import Coord, Maze
from mazegen.entities import Wall, Player

maze = Maze(37, 51)
maze.generate(Coord(1, 1), random.Random(42))

print(maze.render(False))              # plain text, no colour codes
assert isinstance(maze[1, 1], Player)  # cells are indexed as (y, x)
assert isinstance(maze[0, 0], Wall)    # the border stays solid

maze.reset()                           # back to a grid of solid walls
```

- `Maze(height, width)` builds a grid that is all walls. It raises
  `ValueError` if either size is below 3. Odd sizes give a maze that is closed
  on every side.
- `Maze.generate(start, rng)` carves the maze, starting from `start`, a
  `Coord(y, x)` or a plain `(y, x)` tuple. It uses the given `random.Random`,
  or a fresh unseeded one if none is given. A start outside the grid raises
  `ValueError`. Choose an odd start inside the border for a proper maze.
- `maze[y, x]` returns the entity in a cell. It raises `IndexError` outside
  the grid.
- `Maze.render(color)` returns the drawing as a string. Each row ends with a
  newline.
- `Maze.print(file, color)` writes the drawing to a text stream. The default
  stream is standard output. If `color` is `None`, colour is used only when
  the stream is a terminal.
- `mazegen.maze.shuffle(items, rng)` shuffles a mutable sequence in place with
  a Fisher-Yates pass. The generator uses it to pick a random direction order
  at each step.

When colour is on, each cell is written with the ANSI foreground colour of its
entity's `color_code`, and every row is followed by a switch back to white.

### Entities

Cells hold entity objects from `mazegen.entities`. Each one has a `symbol` and
a console `color_code` between 0 and 7:

| Entity    | Symbol | Colour code |
|-----------|--------|-------------|
| `Wall`    | `#`    | 7 (white)   |
| `Passage` | space  | 0 (black)   |
| `Player`  | `@`    | 1 (blue)    |
| `Enemy`   | `!`    | 4 (red)     |
| `Exit`    | `*`    | 6 (yellow)  |

`Player` also has `health` and `speed` fields, and `Enemy` has a `speed`
field. All of them default to 0.

### Stack

`mazegen.stack.Stack` is the last-in, first-out container the generator uses.
It has `push(value)`, `pop()`, which removes and returns the top value, and
`top()`. It supports `len()` and truth testing. Iteration runs from the bottom
to the top. `str()` joins the items' strings. Calling `pop()` or `top()` on an
empty stack raises `StackEmptyError`, a subclass of `IndexError`.

## What it does not do

This package generates and draws mazes and nothing more. It is not a game.
Nothing moves the player. The generator never places an `Enemy` or an `Exit`,
though those entity types exist. There is no maze solver, and mazes cannot be
saved or loaded.

## Running the tests

```
pip install .[test]
pytest
```