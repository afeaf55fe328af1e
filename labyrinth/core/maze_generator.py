"""
Labyrinth Maze Generator

Builds perfect mazes (exactly one path between any two open cells) over an
odd-sized grid. Cells with both coordinates odd are intersections; the
cells between them are walls that get carved into passages.

Algorithms:
    wilson      = loop-erased random walk (Wilson's algorithm)
    percolation = random edge percolation over a union-find forest
"""

import logging
import random
from abc import ABC, abstractmethod
from typing import Optional, Union

from labyrinth.config import Settings, get_settings
from labyrinth.core.maze import (
    CellType,
    Direction,
    InternalInvariantViolation,
    InvalidDimensionError,
    InvalidPositionError,
    Maze,
    Position,
    UnknownAlgorithmError,
)

logger = logging.getLogger(__name__)

PositionLike = Union[Position, tuple[int, int]]

DIRECTIONS = tuple(Direction)


def normalize_dimensions(
    width: int,
    height: int,
    max_cells: Optional[int] = None,
) -> tuple[int, int]:
    """
    Validate requested dimensions and round even values up to odd.

    Args:
        width: Requested width in cells.
        height: Requested height in cells.
        max_cells: Optional upper bound on the rounded cell count.

    Returns:
        Tuple of (width, height), both odd.

    Raises:
        InvalidDimensionError: If a dimension is not a positive integer
            or the grid would exceed max_cells.
    """
    for name, value in (("width", width), ("height", height)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidDimensionError(
                f"Maze {name} must be an integer, got {value!r}"
            )
        if value < 1:
            raise InvalidDimensionError(
                f"Maze {name} must be positive, got {value}"
            )

    width += 1 if width % 2 == 0 else 0
    height += 1 if height % 2 == 0 else 0

    if max_cells is not None and width * height > max_cells:
        raise InvalidDimensionError(
            f"Maze of {width}x{height} cells exceeds the limit of {max_cells} cells"
        )

    return width, height


def _to_position(value: PositionLike) -> Position:
    if isinstance(value, Position):
        return value
    x, z = value
    return Position(x, z)


def resolve_endpoints(
    width: int,
    height: int,
    start: Optional[PositionLike] = None,
    goal: Optional[PositionLike] = None,
) -> tuple[Position, Position]:
    """
    Work out start and goal cells for a grid of normalized dimensions.

    Defaults are (1, 1) and (width - 2, height - 2). A grid with a
    dimension of 1 has no intersections; it degenerates to a single
    open cell, so the goal collapses onto the start.

    Raises:
        InvalidPositionError: If an endpoint is out of bounds, is not an
            intersection, or differs from the start on a degenerate grid.
    """
    degenerate = width < 3 or height < 3

    start_pos = (
        Position(min(1, width - 1), min(1, height - 1))
        if start is None
        else _to_position(start)
    )
    if goal is None:
        goal_pos = start_pos if degenerate else Position(width - 2, height - 2)
    else:
        goal_pos = _to_position(goal)

    for name, pos in (("start", start_pos), ("goal", goal_pos)):
        if not (0 <= pos.x < width and 0 <= pos.z < height):
            raise InvalidPositionError(
                f"{name.capitalize()} position ({pos.x}, {pos.z}) is outside "
                f"the {width}x{height} maze"
            )
        if not degenerate and not pos.is_intersection:
            raise InvalidPositionError(
                f"{name.capitalize()} position ({pos.x}, {pos.z}) must have "
                f"odd coordinates"
            )

    if degenerate and goal_pos != start_pos:
        raise InvalidPositionError(
            f"A {width}x{height} maze has a single open cell; "
            f"goal must equal start ({start_pos.x}, {start_pos.z})"
        )

    return start_pos, goal_pos


class GridCanvas:
    """Mutable cell grid used while a single maze is being carved."""

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.cells: list[CellType] = [CellType.SOLID] * (width * height)

    def linearize(self, pos: Position) -> int:
        return pos.z * self.width + pos.x

    def in_bounds(self, pos: Position) -> bool:
        return 0 <= pos.x < self.width and 0 <= pos.z < self.height

    def is_solid(self, pos: Position) -> bool:
        return self.cells[self.linearize(pos)] == CellType.SOLID

    def carve(self, pos: Position) -> None:
        self.cells[self.linearize(pos)] = CellType.EMPTY

    def random_intersection(self, rng: random.Random) -> Position:
        """Pick an intersection uniformly at random."""
        x = rng.randrange(self.width // 2)
        z = rng.randrange(self.height // 2)
        return Position(2 * x + 1, 2 * z + 1)


class MazeAlgorithm(ABC):
    """
    Base class for maze generation algorithms.

    Each call to generate() allocates its own grid and random number
    generator, so one instance can serve any number of calls. Passing a
    seed makes every call with the same dimensions return the same maze.
    """

    name: str = ""

    def __init__(
        self,
        seed: Optional[int] = None,
        max_cells: Optional[int] = None,
        max_walk_steps: Optional[int] = None,
    ):
        self.seed = seed
        self.max_cells = max_cells
        self.max_walk_steps = max_walk_steps

    def _new_rng(self) -> random.Random:
        return random.Random(self.seed)

    def generate(
        self,
        width: int,
        height: int,
        start: Optional[PositionLike] = None,
        goal: Optional[PositionLike] = None,
    ) -> Maze:
        """
        Generate a perfect maze.

        Args:
            width: Requested width; even values are rounded up.
            height: Requested height; even values are rounded up.
            start: Optional start cell, defaults to (1, 1).
            goal: Optional goal cell, defaults to (width - 2, height - 2).

        Returns:
            A fully carved, immutable Maze.

        Raises:
            InvalidDimensionError: If the dimensions are invalid.
            InvalidPositionError: If start or goal is invalid.
            InternalInvariantViolation: If carving breaks an invariant.
        """
        width, height = normalize_dimensions(width, height, self.max_cells)
        start_pos, goal_pos = resolve_endpoints(width, height, start, goal)

        canvas = GridCanvas(width, height)
        canvas.carve(start_pos)
        self._carve(canvas, start_pos, self._new_rng())

        if canvas.is_solid(goal_pos):
            raise InternalInvariantViolation(
                f"Goal ({goal_pos.x}, {goal_pos.z}) was left solid by {self.name}"
            )

        logger.info(
            f"Generated {width}x{height} maze with {self.name} "
            f"(seed={self.seed})"
        )
        return Maze(
            width=width,
            height=height,
            cells=tuple(canvas.cells),
            start_index=canvas.linearize(start_pos),
            goal_index=canvas.linearize(goal_pos),
            algorithm=self.name,
            seed=self.seed,
        )

    @abstractmethod
    def _carve(self, canvas: GridCanvas, start: Position, rng: random.Random) -> None:
        """Carve passages into `canvas`, whose start cell is already open."""


class WilsonMazeAlgorithm(MazeAlgorithm):
    """
    Wilson's algorithm: grow a uniform spanning tree with loop-erased
    random walks.

    Each walk starts at an uncarved intersection and wanders two cells at
    a time, remembering only the last direction left from every cell it
    touches. Overwriting that direction on a revisit erases the loop, so
    replaying the remembered directions from the walk's origin gives a
    simple path into the carved set.
    """

    name = "wilson"

    def _carve(self, canvas: GridCanvas, start: Position, rng: random.Random) -> None:
        unvisited = (canvas.width // 2) * (canvas.height // 2) - 1

        while unvisited > 0:
            origin = self._random_unvisited_intersection(canvas, rng)
            path = self._random_walk(canvas, origin, rng)

            current = origin
            while canvas.is_solid(current):
                direction = path.get(canvas.linearize(current))
                if direction is None:
                    raise InternalInvariantViolation(
                        f"Walk replay reached ({current.x}, {current.z}) "
                        f"with no recorded direction"
                    )
                canvas.carve(current)
                canvas.carve(current.step(direction))
                current = current.step(direction, 2)
                unvisited -= 1

    def _random_unvisited_intersection(
        self, canvas: GridCanvas, rng: random.Random
    ) -> Position:
        while True:
            pos = canvas.random_intersection(rng)
            if canvas.is_solid(pos):
                return pos

    def _random_walk(
        self, canvas: GridCanvas, origin: Position, rng: random.Random
    ) -> dict[int, Direction]:
        """
        Walk from `origin` until the carved set is hit.

        Returns:
            Mapping of cell index to the last direction taken from it.
            The step into the carved set is always recorded.
        """
        path: dict[int, Direction] = {}
        current = origin
        draws = 0

        while True:
            draws += 1
            if self.max_walk_steps is not None and draws > self.max_walk_steps:
                raise InternalInvariantViolation(
                    f"Random walk from ({origin.x}, {origin.z}) exceeded "
                    f"{self.max_walk_steps} steps"
                )

            direction = rng.choice(DIRECTIONS)
            next_pos = current.step(direction, 2)

            # Off-grid: redraw from the same cell
            if not canvas.in_bounds(next_pos):
                continue

            path[canvas.linearize(current)] = direction
            current = next_pos

            if not canvas.is_solid(next_pos):
                logger.debug(
                    f"Walk from ({origin.x}, {origin.z}) joined the maze at "
                    f"({next_pos.x}, {next_pos.z}) after {draws} draws"
                )
                return path


class PercolationMazeAlgorithm(MazeAlgorithm):
    """
    Edge percolation: open the walls between neighbouring intersections
    in random order, skipping any wall whose two sides are already
    connected (randomized Kruskal over a union-find forest).
    """

    name = "percolation"

    def _carve(self, canvas: GridCanvas, start: Position, rng: random.Random) -> None:
        cols = canvas.width // 2
        rows = canvas.height // 2
        parent = list(range(cols * rows))

        def find(a: int) -> int:
            while parent[a] != a:
                parent[a] = parent[parent[a]]
                a = parent[a]
            return a

        edges: list[tuple[int, int, Direction]] = []
        for row in range(rows):
            for col in range(cols):
                node = row * cols + col
                if col + 1 < cols:
                    edges.append((node, node + 1, Direction.EAST))
                if row + 1 < rows:
                    edges.append((node, node + cols, Direction.SOUTH))

        rng.shuffle(edges)

        opened = 0
        for a, b, direction in edges:
            root_a, root_b = find(a), find(b)
            if root_a == root_b:
                continue
            parent[root_b] = root_a

            pos = Position(2 * (a % cols) + 1, 2 * (a // cols) + 1)
            canvas.carve(pos)
            canvas.carve(pos.step(direction))
            canvas.carve(pos.step(direction, 2))
            opened += 1

        logger.debug(f"Opened {opened} of {len(edges)} walls")


ALGORITHMS: dict[str, type[MazeAlgorithm]] = {
    WilsonMazeAlgorithm.name: WilsonMazeAlgorithm,
    PercolationMazeAlgorithm.name: PercolationMazeAlgorithm,
}


def get_algorithm(name: str, **kwargs) -> MazeAlgorithm:
    """
    Build a maze algorithm by name.

    Args:
        name: Algorithm name (wilson, percolation).
        **kwargs: Passed to the algorithm constructor.

    Raises:
        UnknownAlgorithmError: If no algorithm has that name.
    """
    algorithm_cls = ALGORITHMS.get(name.lower())
    if algorithm_cls is None:
        raise UnknownAlgorithmError(
            f"Unknown algorithm '{name}'. "
            f"Must be one of: {', '.join(sorted(ALGORITHMS))}"
        )
    return algorithm_cls(**kwargs)


class MazeGenerator:
    """
    Configured entry point for maze generation.

    Applies the configured default algorithm and resource limits.

    Example usage:
        generator = MazeGenerator()
        maze = generator.generate(15, 15)
        maze = generator.generate(21, 11, seed=7, algorithm="percolation")
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()

    def algorithm(
        self,
        name: Optional[str] = None,
        seed: Optional[int] = None,
    ) -> MazeAlgorithm:
        """Build the named (or configured) algorithm with configured limits."""
        return get_algorithm(
            name or self.settings.algorithm,
            seed=seed,
            max_cells=self.settings.max_cells,
            max_walk_steps=self.settings.max_walk_steps,
        )

    def generate(
        self,
        width: int,
        height: int,
        start: Optional[PositionLike] = None,
        goal: Optional[PositionLike] = None,
        seed: Optional[int] = None,
        algorithm: Optional[str] = None,
    ) -> Maze:
        """Generate a maze; see MazeAlgorithm.generate.

        The seed defaults to the configured seed.
        """
        if seed is None:
            seed = self.settings.seed
        return self.algorithm(algorithm, seed).generate(width, height, start, goal)


def generate(
    width: int,
    height: int,
    start: Optional[PositionLike] = None,
    goal: Optional[PositionLike] = None,
    seed: Optional[int] = None,
    algorithm: Optional[str] = None,
) -> Maze:
    """Generate a maze using the application settings."""
    return MazeGenerator().generate(width, height, start, goal, seed, algorithm)
