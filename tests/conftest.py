"""Pytest configuration and fixtures."""

from collections import deque

import pytest

from labyrinth.config import Settings
from labyrinth.core.maze import Maze, Position
from labyrinth.core.maze_generator import MazeGenerator


@pytest.fixture
def settings() -> Settings:
    """Settings with a fixed seed and small limits, isolated from the environment."""
    return Settings(
        _env_file=None,
        default_width=15,
        default_height=15,
        algorithm="wilson",
        seed=1234,
        max_cells=10_000,
        max_walk_steps=1_000_000,
    )


@pytest.fixture
def generator(settings) -> MazeGenerator:
    """Maze generator using the test settings."""
    return MazeGenerator(settings)


@pytest.fixture
def sample_maze(generator) -> Maze:
    """A seeded 15x15 Wilson maze."""
    return generator.generate(15, 15, seed=42)


@pytest.fixture
def tiny_maze_cells() -> str:
    """Hand-carved 5x5 perfect maze in text form."""
    return """XXXXX
XS..X
XXX.X
X..EX
XXXXX"""


def reachable_from(maze: Maze, start: Position) -> dict[Position, Position]:
    """BFS over open cells; returns each reached cell's parent."""
    parents = {start: start}
    queue = deque([start])

    while queue:
        pos = queue.popleft()
        for neighbor in maze.open_neighbors(pos):
            if neighbor not in parents:
                parents[neighbor] = pos
                queue.append(neighbor)

    return parents


def count_connections(maze: Maze) -> int:
    """Number of adjacent pairs of open cells."""
    connections = 0
    for pos in maze.open_cells():
        if maze.is_open(pos.x + 1, pos.z):
            connections += 1
        if maze.is_open(pos.x, pos.z + 1):
            connections += 1
    return connections
