"""
Labyrinth maze model.

A generated maze is a flat, row-major sequence of cells over an odd-sized
grid together with its start and goal cells. Mazes are immutable once
built; regenerating produces a new Maze.

Text Format (see Maze.to_text):
    S = Start position
    E = Goal (exit)
    X = Solid cell (wall)
    . = Empty cell (open path)
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional


class MazeGenerationError(Exception):
    """Base class for maze generation errors."""

    pass


class InvalidDimensionError(MazeGenerationError, ValueError):
    """Exception raised when requested maze dimensions are invalid."""

    pass


class InvalidPositionError(MazeGenerationError, ValueError):
    """Exception raised when a coordinate or cell index is invalid for a maze."""

    pass


class UnknownAlgorithmError(MazeGenerationError, ValueError):
    """Exception raised when an unknown generation algorithm is requested."""

    pass


class InternalInvariantViolation(MazeGenerationError, RuntimeError):
    """Exception raised when generation breaks one of its own invariants.

    This never happens for a correct generator; it signals a bug or an
    exhausted walk budget rather than a recoverable condition.
    """

    pass


class CellType(Enum):
    """Types of cells in the maze."""
    SOLID = "X"
    EMPTY = "."


class Direction(Enum):
    """Movement directions on the (x, z) plane."""
    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"

    @property
    def delta(self) -> tuple[int, int]:
        """Get (dx, dz) for this direction."""
        deltas = {
            Direction.NORTH: (0, -1),
            Direction.SOUTH: (0, 1),
            Direction.EAST: (1, 0),
            Direction.WEST: (-1, 0),
        }
        return deltas[self]


@dataclass(frozen=True)
class Position:
    """2D grid coordinate in the maze."""
    x: int
    z: int

    def step(self, direction: Direction, scale: int = 1) -> "Position":
        """Return the position `scale` cells away in `direction`."""
        dx, dz = direction.delta
        return Position(self.x + dx * scale, self.z + dz * scale)

    @property
    def is_intersection(self) -> bool:
        """Whether both coordinates are odd."""
        return self.x % 2 == 1 and self.z % 2 == 1


@dataclass(frozen=True)
class Maze:
    """
    A fully generated perfect maze.

    Cells are stored row-major: the cell at (x, z) lives at index
    ``z * width + x``. Every Empty cell is reachable from every other
    along exactly one path.

    Example usage:
        maze = generate(15, 15)
        maze.start            # Position(x=1, z=1)
        maze.goal             # Position(x=13, z=13)
        maze.get_cell(0, 0)   # CellType.SOLID
        print(maze.to_text())
    """

    width: int
    height: int
    cells: tuple[CellType, ...]
    start_index: int
    goal_index: int
    algorithm: str = "wilson"
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        if len(self.cells) != self.width * self.height:
            raise InternalInvariantViolation(
                f"Maze has {len(self.cells)} cells, expected "
                f"{self.width * self.height} for {self.width}x{self.height}"
            )

    def in_bounds(self, x: int, z: int) -> bool:
        """Check whether (x, z) lies inside the grid."""
        return 0 <= x < self.width and 0 <= z < self.height

    def linearize(self, x: int, z: int) -> int:
        """Convert a coordinate to its cell index."""
        if not self.in_bounds(x, z):
            raise InvalidPositionError(
                f"Position ({x}, {z}) is outside the {self.width}x{self.height} maze"
            )
        return z * self.width + x

    def delinearize(self, index: int) -> Position:
        """Convert a cell index back to its coordinate."""
        if not 0 <= index < len(self.cells):
            raise InvalidPositionError(
                f"Cell index {index} is outside the {self.width}x{self.height} maze"
            )
        return Position(index % self.width, index // self.width)

    @property
    def start(self) -> Position:
        """Start cell coordinate."""
        return self.delinearize(self.start_index)

    @property
    def goal(self) -> Position:
        """Goal cell coordinate."""
        return self.delinearize(self.goal_index)

    @property
    def intersection_count(self) -> int:
        """Number of cells with both coordinates odd."""
        return (self.width // 2) * (self.height // 2)

    def get_cell(self, x: int, z: int) -> CellType:
        """Get cell type at position. Out of bounds counts as solid."""
        if not self.in_bounds(x, z):
            return CellType.SOLID
        return self.cells[z * self.width + x]

    def is_open(self, x: int, z: int) -> bool:
        """Check whether (x, z) is an Empty cell."""
        return self.get_cell(x, z) == CellType.EMPTY

    def open_neighbors(self, position: Position) -> Iterator[Position]:
        """Yield the Empty cells orthogonally adjacent to `position`."""
        for direction in Direction:
            neighbor = position.step(direction)
            if self.is_open(neighbor.x, neighbor.z):
                yield neighbor

    def open_cells(self) -> Iterator[Position]:
        """Yield every Empty cell in index order."""
        for index, cell in enumerate(self.cells):
            if cell == CellType.EMPTY:
                yield self.delinearize(index)

    def to_text(self) -> str:
        """
        Render the maze in the text grid format.

        Returns:
            Multi-line string, one row per z coordinate.
        """
        lines = []
        for z in range(self.height):
            line = ""
            for x in range(self.width):
                index = z * self.width + x
                if index == self.start_index:
                    line += "S"
                elif index == self.goal_index:
                    line += "E"
                else:
                    line += self.cells[index].value
            lines.append(line)

        return "\n".join(lines)
