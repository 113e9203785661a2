"""Maze grid, randomized depth-first generation and text rendering."""

from __future__ import annotations

import random
import sys
from typing import IO, MutableSequence, NamedTuple, TypeVar

from .entities import Entity, Passage, Player, Wall
from .stack import Stack

T = TypeVar("T")

DEFAULT_HEIGHT = 37
DEFAULT_WIDTH = 51
WHITE = 7

# Console colour codes mapped to ANSI foreground colours.
_ANSI_FOREGROUND = {0: 30, 1: 34, 2: 32, 3: 36, 4: 31, 5: 35, 6: 33, 7: 37}


class Coord(NamedTuple):
    y: int
    x: int


_OFFSETS = (Coord(2, 0), Coord(0, 2), Coord(-2, 0), Coord(0, -2))


def shuffle(items: MutableSequence[T], rng: random.Random) -> None:
    """Shuffle a sequence in place (Fisher-Yates, from the last item down)."""
    for i in range(len(items) - 1, 0, -1):
        j = rng.randint(0, i)
        items[i], items[j] = items[j], items[i]


def _paint(code: int, text: str) -> str:
    return f"\x1b[{_ANSI_FOREGROUND[code]}m{text}"


class Maze:
    """A rectangular grid of entities, all walls until generated."""

    def __init__(self, height: int = DEFAULT_HEIGHT, width: int = DEFAULT_WIDTH) -> None:
        if height < 3 or width < 3:
            raise ValueError(f"maze must be at least 3x3, got {height}x{width}")
        self.height = height
        self.width = width
        self._grid: list[list[Entity]] = []
        self.reset()

    def reset(self) -> None:
        """Fill every cell with a wall."""
        self._grid = [[Wall() for _ in range(self.width)] for _ in range(self.height)]

    def _contains(self, coord: Coord) -> bool:
        return 0 <= coord.y < self.height and 0 <= coord.x < self.width

    def _is_interior(self, coord: Coord) -> bool:
        return 0 < coord.y < self.height - 1 and 0 < coord.x < self.width - 1

    def _set(self, coord: Coord, entity: Entity) -> None:
        self._grid[coord.y][coord.x] = entity

    def generate(self, start: tuple[int, int] = Coord(1, 1), rng: random.Random | None = None) -> None:
        """Carve passages by randomized depth-first search, placing the player at start."""
        start = Coord(*start)
        if not self._contains(start):
            raise ValueError(f"start {tuple(start)} lies outside the maze")
        rng = rng if rng is not None else random.Random()

        stack: Stack[Coord] = Stack([start])
        self._set(start, Player())
        offsets = list(_OFFSETS)

        while stack:
            current = stack.top()
            shuffle(offsets, rng)
            for dy, dx in offsets:
                target = Coord(current.y + dy, current.x + dx)
                if self._is_interior(target) and isinstance(self[target], Wall):
                    self._set(target, Passage())
                    between = Coord((current.y + target.y) // 2, (current.x + target.x) // 2)
                    self._set(between, Passage())
                    stack.push(target)
                    break
            else:
                stack.pop()

    def __getitem__(self, coord: tuple[int, int]) -> Entity:
        coord = Coord(*coord)
        if not self._contains(coord):
            raise IndexError(f"cell {tuple(coord)} lies outside the maze")
        return self._grid[coord.y][coord.x]

    def render(self, color: bool = False) -> str:
        """Draw the maze as text, three characters per cell and one line per row."""
        lines = []
        for row in self._grid:
            parts = []
            for cell in row:
                if isinstance(cell, Wall):
                    text = Wall.symbol * 3
                    parts.append(_paint(cell.color_code, text) if color else text)
                elif color:
                    parts.append(_paint(0, " ") + _paint(cell.color_code, cell.symbol) + _paint(0, " "))
                else:
                    parts.append(f" {cell.symbol} ")
            line = "".join(parts) + "\n"
            if color:
                line += _paint(WHITE, "")
            lines.append(line)
        return "".join(lines)

    def print(self, file: IO[str] | None = None, color: bool | None = None) -> None:
        """Write the maze to a stream; colour defaults to whether it is a terminal."""
        stream = file if file is not None else sys.stdout
        if color is None:
            isatty = getattr(stream, "isatty", None)
            color = bool(isatty and isatty())
        stream.write(self.render(color=color))