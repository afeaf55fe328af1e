"""Session controller owning the active maze and its world."""

import logging
import math
from typing import Optional

from pydantic import ValidationError

from labyrinth.config import Settings, get_settings
from labyrinth.core.maze import InvalidDimensionError, Maze, Position
from labyrinth.core.maze_generator import MazeGenerator
from labyrinth.core.maze_world import BLOCK_TYPE_VISITED, MazeWorld
from labyrinth.schemas.maze import GenerateRequest

logger = logging.getLogger(__name__)

GENERATE_COMMAND = "/generate"

INSTRUCTIONS = (
    'To generate a new maze, type "/generate <width> <height>" '
    "to generate a <width>x<height> maze."
)
CONGRATULATIONS = "Congratulations, you successfully solved the maze!"

SPAWN_HEIGHT = 3


class UnknownCommandError(ValueError):
    """Exception raised for chat input that is not a session command."""

    pass


class MazeSession:
    """
    Owns the active maze for a running world.

    Lifecycle: created with a maze of the configured default size, then
    replaced wholesale on every regenerate(). The previous maze and world
    are dropped, never mutated.

    Example usage:
        session = MazeSession()
        session.spawn_position()          # (1.5, 3, 1.5)
        session.handle_command("/generate 21 21")
        if session.track_player(19.4, 19.7):
            print(CONGRATULATIONS)
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self.generator = MazeGenerator(self.settings)

        self.maze: Maze
        self.world: MazeWorld
        self.goal_reached = False
        self.visited: set[Position] = set()

        self.regenerate(self.settings.default_width, self.settings.default_height)

    def regenerate(
        self,
        width: int,
        height: int,
        seed: Optional[int] = None,
        algorithm: Optional[str] = None,
    ) -> Maze:
        """
        Replace the active maze with a freshly generated one.

        If generation fails the previous maze stays active.

        Args:
            width: Requested maze width.
            height: Requested maze height.
            seed: Optional seed, defaults to the configured seed.
            algorithm: Optional algorithm name, defaults to the configured one.

        Returns:
            The new active maze.
        """
        maze = self.generator.generate(width, height, seed=seed, algorithm=algorithm)
        world = MazeWorld(maze)

        self.maze = maze
        self.world = world
        self.goal_reached = False
        self.visited = set()

        logger.info(f"Active maze replaced: {maze.width}x{maze.height} ({maze.algorithm})")
        return maze

    def handle_command(self, text: str) -> str:
        """
        Handle a chat command.

        Args:
            text: Raw command text, e.g. "/generate 15 15".

        Returns:
            Reply message for the player.

        Raises:
            UnknownCommandError: If the text is not a generate command.
            InvalidDimensionError: If the arguments are not valid dimensions.
        """
        parts = text.split()
        if not parts or parts[0] != GENERATE_COMMAND:
            raise UnknownCommandError(f"Unknown command: {text!r}")

        args = parts[1:]
        if len(args) != 2:
            logger.warning(f"Rejected command with {len(args)} arguments: {text!r}")
            raise InvalidDimensionError(
                f"Usage: {GENERATE_COMMAND} <width> <height>"
            )

        try:
            request = GenerateRequest(width=args[0], height=args[1])
        except ValidationError as e:
            logger.warning(f"Rejected command {text!r}: {e.error_count()} errors")
            raise InvalidDimensionError(
                f"Width and height must be positive integers, got {args[0]!r} and {args[1]!r}"
            ) from e

        maze = self.regenerate(request.width, request.height)
        return f"generated a {maze.width} by {maze.height} maze."

    def spawn_position(self) -> tuple[float, float, float]:
        """World coordinates of the centre of the start cell, above the floor."""
        start = self.maze.start
        return (start.x + 0.5, SPAWN_HEIGHT, start.z + 0.5)

    def track_player(self, x: float, z: float) -> bool:
        """
        Record a player position.

        Open cells other than start and goal are marked visited in the
        world. Entering the goal is reported once per maze.

        Args:
            x: Player world x coordinate.
            z: Player world z coordinate.

        Returns:
            True the first time the goal cell is entered, False otherwise.
        """
        cell = Position(math.floor(x), math.floor(z))
        if not self.maze.in_bounds(cell.x, cell.z):
            return False

        if cell == self.maze.goal:
            if self.goal_reached:
                return False
            self.goal_reached = True
            logger.info(f"Goal reached at ({cell.x}, {cell.z}) after {len(self.visited)} cells")
            return True

        if cell != self.maze.start and self.maze.is_open(cell.x, cell.z):
            self.world.add_block(cell.x, 0, cell.z, BLOCK_TYPE_VISITED)
            self.visited.add(cell)

        return False
