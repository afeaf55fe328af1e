"""
Voxel block map for a generated maze.

Every cell gets a ground block at y = 0; solid cells get a two block high
wall on top of it. Start and goal cells are marked with their own block
types so the consuming world can detect them.
"""

from dataclasses import dataclass

from labyrinth.core.maze import CellType, Maze

BLOCK_TYPE_FLOOR = 1
BLOCK_TYPE_START = 2
BLOCK_TYPE_GOAL = 3
BLOCK_TYPE_WALL = 4
BLOCK_TYPE_VISITED = 5

WALL_HEIGHT = 2


@dataclass(frozen=True)
class BlockType:
    """A block type the world can place."""
    id: int
    name: str
    texture_uri: str

    def to_dict(self) -> dict:
        """Convert to the map file representation."""
        return {"id": self.id, "name": self.name, "textureUri": self.texture_uri}


DEFAULT_BLOCK_TYPES = (
    BlockType(BLOCK_TYPE_FLOOR, "bricks", "textures/bricks.png"),
    BlockType(BLOCK_TYPE_START, "start", "textures/red.png"),
    BlockType(BLOCK_TYPE_GOAL, "goal", "textures/green.png"),
    BlockType(BLOCK_TYPE_WALL, "leaves", "textures/leaves.png"),
    BlockType(BLOCK_TYPE_VISITED, "visited", "textures/blue.png"),
)


class MazeWorld:
    """
    Block layout for one maze.

    Example usage:
        world = MazeWorld(maze)
        world.get_block(0, 1, 0)   # BLOCK_TYPE_WALL
        world.to_map()             # {"blockTypes": [...], "blocks": {...}}
    """

    def __init__(self, maze: Maze):
        self.maze = maze
        self.block_types: list[BlockType] = list(DEFAULT_BLOCK_TYPES)
        self.blocks: dict[tuple[int, int, int], int] = {}

        for index, cell in enumerate(maze.cells):
            pos = maze.delinearize(index)
            if cell == CellType.SOLID:
                for y in range(1, WALL_HEIGHT + 1):
                    self.add_block(pos.x, y, pos.z, BLOCK_TYPE_WALL)

            block_id = BLOCK_TYPE_FLOOR
            if index == maze.start_index:
                block_id = BLOCK_TYPE_START
            elif index == maze.goal_index:
                block_id = BLOCK_TYPE_GOAL

            self.add_block(pos.x, 0, pos.z, block_id)

    def add_block(self, x: int, y: int, z: int, block_id: int) -> None:
        """Place (or replace) a block."""
        self.blocks[(x, y, z)] = block_id

    def get_block(self, x: int, y: int, z: int) -> int:
        """Get the block id at (x, y, z); 0 means air."""
        return self.blocks.get((x, y, z), 0)

    def to_map(self) -> dict:
        """Convert to a JSON-ready map with "x,y,z" block keys."""
        return {
            "blockTypes": [block_type.to_dict() for block_type in self.block_types],
            "blocks": {
                f"{x},{y},{z}": block_id
                for (x, y, z), block_id in self.blocks.items()
            },
        }
