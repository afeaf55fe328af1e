"""Labyrinth - perfect maze generation."""

from labyrinth.core import (
    CellType,
    Direction,
    InvalidDimensionError,
    Maze,
    MazeGenerator,
    MazeWorld,
    Position,
    generate,
)

__version__ = "1.0.0"

__all__ = [
    "CellType",
    "Direction",
    "InvalidDimensionError",
    "Maze",
    "MazeGenerator",
    "MazeWorld",
    "Position",
    "generate",
    "__version__",
]
