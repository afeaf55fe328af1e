# Core module
from .maze import (
    CellType,
    Direction,
    Position,
    Maze,
    MazeGenerationError,
    InvalidDimensionError,
    InvalidPositionError,
    UnknownAlgorithmError,
    InternalInvariantViolation,
)
from .maze_generator import (
    ALGORITHMS,
    MazeAlgorithm,
    MazeGenerator,
    WilsonMazeAlgorithm,
    PercolationMazeAlgorithm,
    generate,
    get_algorithm,
    normalize_dimensions,
    resolve_endpoints,
)
from .maze_world import MazeWorld, BlockType

__all__ = [
    "CellType",
    "Direction",
    "Position",
    "Maze",
    "MazeGenerationError",
    "InvalidDimensionError",
    "InvalidPositionError",
    "UnknownAlgorithmError",
    "InternalInvariantViolation",
    "ALGORITHMS",
    "MazeAlgorithm",
    "MazeGenerator",
    "WilsonMazeAlgorithm",
    "PercolationMazeAlgorithm",
    "generate",
    "get_algorithm",
    "normalize_dimensions",
    "resolve_endpoints",
    "MazeWorld",
    "BlockType",
]
