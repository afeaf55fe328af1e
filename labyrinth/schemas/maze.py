"""Maze schemas for request/response validation."""

from typing import Optional

from pydantic import BaseModel, Field

from labyrinth.core.maze import Maze


class GenerateRequest(BaseModel):
    """Schema for a maze generation request."""

    width: int = Field(..., gt=0)
    height: int = Field(..., gt=0)
    seed: Optional[int] = None
    algorithm: Optional[str] = Field(None, pattern="^(wilson|percolation)$")


class MazePosition(BaseModel):
    """Schema for a position in the maze."""

    x: int
    z: int


class MazeDetail(BaseModel):
    """Schema for a generated maze with its text grid."""

    width: int = Field(..., gt=0)
    height: int = Field(..., gt=0)
    grid_data: str
    start: MazePosition
    goal: MazePosition
    algorithm: str
    seed: Optional[int] = None

    @classmethod
    def from_maze(cls, maze: Maze) -> "MazeDetail":
        """Build the response from a generated maze."""
        start = maze.start
        goal = maze.goal
        return cls(
            width=maze.width,
            height=maze.height,
            grid_data=maze.to_text(),
            start=MazePosition(x=start.x, z=start.z),
            goal=MazePosition(x=goal.x, z=goal.z),
            algorithm=maze.algorithm,
            seed=maze.seed,
        )
