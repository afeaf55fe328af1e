"""Command line entry point: print a generated maze."""

import argparse
import sys
from typing import Optional

from labyrinth.config import VALID_ALGORITHMS, get_settings
from labyrinth.core.maze import MazeGenerationError
from labyrinth.core.maze_generator import MazeGenerator
from labyrinth.logging_config import configure_logging
from labyrinth.schemas.maze import MazeDetail


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(
        prog="labyrinth",
        description="Generate a perfect maze and print it.",
    )
    parser.add_argument("--width", type=int, default=settings.default_width)
    parser.add_argument("--height", type=int, default=settings.default_height)
    parser.add_argument("--seed", type=int, default=settings.seed)
    parser.add_argument(
        "--algorithm",
        choices=sorted(VALID_ALGORITHMS),
        default=settings.algorithm,
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="print the maze as JSON instead of the text grid",
    )
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging()

    try:
        maze = MazeGenerator().generate(
            args.width,
            args.height,
            seed=args.seed,
            algorithm=args.algorithm,
        )
    except MazeGenerationError as e:
        parser.error(str(e))

    if args.json:
        print(MazeDetail.from_maze(maze).model_dump_json(indent=2))
    else:
        print(maze.to_text())
    return 0


if __name__ == "__main__":
    sys.exit(main())
