"""Command line entry point: generate a maze and print it."""

from __future__ import annotations

import argparse
import random

from .maze import DEFAULT_HEIGHT, DEFAULT_WIDTH, Maze


def main(argv: list[str] | None = None) -> int:
    """Generate a random maze and write it to standard output."""
    parser = argparse.ArgumentParser(prog="mazegen", description="Generate and print a random maze.")
    parser.add_argument("--height", type=int, default=DEFAULT_HEIGHT, help="rows in the grid")
    parser.add_argument("--width", type=int, default=DEFAULT_WIDTH, help="columns in the grid")
    parser.add_argument("--seed", type=int, default=None, help="seed for a reproducible maze")
    parser.add_argument(
        "--color",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="colour the output (default: only on a terminal)",
    )
    args = parser.parse_args(argv)

    try:
        maze = Maze(args.height, args.width)
    except ValueError as error:
        parser.error(str(error))

    maze.generate(rng=random.Random(args.seed))
    maze.print(color=args.color)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())