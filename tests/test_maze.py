import io
import random
from collections import deque

import pytest

from mazegen.entities import Wall
from mazegen.maze import DEFAULT_HEIGHT, DEFAULT_WIDTH, Coord, Maze, shuffle


def _generated(height=DEFAULT_HEIGHT, width=DEFAULT_WIDTH, seed=7):
    maze = Maze(height, width)
    maze.generate(rng=random.Random(seed))
    return maze


def _open_cells(maze):
    return {
        (y, x)
        for y in range(maze.height)
        for x in range(maze.width)
        if not isinstance(maze[y, x], Wall)
    }


def _cell_text(lines, y, x):
    return lines[y][3 * x : 3 * x + 3]


def test_shuffle_keeps_elements():
    items = list(range(10))
    shuffle(items, random.Random(3))
    assert sorted(items) == list(range(10))


def test_shuffle_is_deterministic_for_seed():
    first = list("abcdef")
    second = list("abcdef")
    shuffle(first, random.Random(11))
    shuffle(second, random.Random(11))
    assert first == second


def test_shuffle_of_single_item_is_unchanged():
    items = ["only"]
    shuffle(items, random.Random(0))
    assert items == ["only"]


def test_default_size_matches_source():
    maze = Maze()
    assert (maze.height, maze.width) == (37, 51)


def test_new_maze_is_all_walls():
    maze = Maze(5, 7)
    assert _open_cells(maze) == set()


def test_too_small_maze_rejected():
    with pytest.raises(ValueError):
        Maze(2, 7)


def test_getitem_out_of_range():
    maze = Maze(5, 5)
    with pytest.raises(IndexError):
        maze[5, 0]
    with pytest.raises(IndexError):
        maze[Coord(0, -1)]


def test_player_at_start():
    maze = _generated()
    lines = maze.render().splitlines()
    assert _cell_text(lines, 1, 1) == " @ "
    assert maze.render().count("@") == 1


def test_custom_start():
    maze = Maze(9, 9)
    maze.generate(start=(3, 5), rng=random.Random(1))
    lines = maze.render().splitlines()
    assert _cell_text(lines, 3, 5) == " @ "
    assert _cell_text(lines, 1, 1) == "   "


def test_start_outside_rejected():
    maze = Maze(5, 5)
    with pytest.raises(ValueError):
        maze.generate(start=(9, 9))


def test_border_stays_wall():
    maze = _generated()
    lines = maze.render().splitlines()
    assert lines[0] == "#" * (3 * maze.width)
    assert lines[-1] == "#" * (3 * maze.width)
    for line in lines:
        assert line[:3] == "###"
        assert line[-3:] == "###"


def test_every_room_is_carved_and_even_cells_are_walls():
    maze = _generated()
    lines = maze.render().splitlines()
    for y in range(maze.height):
        for x in range(maze.width):
            text = _cell_text(lines, y, x)
            if y % 2 == 1 and x % 2 == 1:
                assert text in ("   ", " @ ")
            elif y % 2 == 0 and x % 2 == 0:
                assert text == "###"


def test_maze_is_connected_and_perfect():
    maze = _generated(seed=42)
    open_cells = _open_cells(maze)
    seen = {(1, 1)}
    queue = deque([(1, 1)])
    while queue:
        y, x = queue.popleft()
        for ny, nx in ((y + 1, x), (y - 1, x), (y, x + 1), (y, x - 1)):
            if (ny, nx) in open_cells and (ny, nx) not in seen:
                seen.add((ny, nx))
                queue.append((ny, nx))
    assert seen == open_cells
    rooms = ((maze.height - 1) // 2) * ((maze.width - 1) // 2)
    assert len(open_cells) == 2 * rooms - 1


def test_same_seed_same_maze():
    first = _generated(seed=5).render()
    second = _generated(seed=5).render()
    assert first == second
    assert first.count("@") == 1


def test_reset_restores_walls():
    maze = _generated(9, 11)
    maze.reset()
    assert _open_cells(maze) == set()


def test_render_dimensions():
    maze = _generated(9, 13)
    lines = maze.render().splitlines()
    assert len(lines) == maze.height
    assert all(len(line) == 3 * maze.width for line in lines)


def test_render_of_walls_and_player():
    maze = _generated(5, 5)
    lines = maze.render().splitlines()
    assert lines[0] == "#" * 15
    assert lines[1][3:6] == " @ "


def test_render_color_uses_escapes_and_plain_does_not():
    maze = _generated(5, 5)
    assert "\x1b[" in maze.render(color=True)
    assert "\x1b[" not in maze.render(color=False)


def test_print_to_stream_without_color():
    maze = _generated(7, 7)
    buffer = io.StringIO()
    maze.print(file=buffer)
    assert buffer.getvalue() == maze.render()


def test_print_with_color_forced():
    maze = _generated(7, 7)
    buffer = io.StringIO()
    maze.print(file=buffer, color=True)
    assert buffer.getvalue() == maze.render(color=True)