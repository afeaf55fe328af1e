"""Tests for the voxel block map."""

from labyrinth.core.maze import CellType
from labyrinth.core.maze_world import (
    BLOCK_TYPE_FLOOR,
    BLOCK_TYPE_GOAL,
    BLOCK_TYPE_START,
    BLOCK_TYPE_VISITED,
    BLOCK_TYPE_WALL,
    MazeWorld,
)


class TestMazeWorld:
    """Tests for MazeWorld block placement."""

    def test_ground_plane_covers_every_cell(self, sample_maze):
        """Test that each cell has exactly one ground block."""
        world = MazeWorld(sample_maze)
        ground = [key for key in world.blocks if key[1] == 0]
        assert len(ground) == sample_maze.width * sample_maze.height

    def test_walls_are_two_blocks_high(self, sample_maze):
        """Test that solid cells get walls at y=1 and y=2 and open cells get none."""
        world = MazeWorld(sample_maze)
        for index, cell in enumerate(sample_maze.cells):
            pos = sample_maze.delinearize(index)
            if cell == CellType.SOLID:
                assert world.get_block(pos.x, 1, pos.z) == BLOCK_TYPE_WALL
                assert world.get_block(pos.x, 2, pos.z) == BLOCK_TYPE_WALL
            else:
                assert world.get_block(pos.x, 1, pos.z) == 0
            assert world.get_block(pos.x, 3, pos.z) == 0

    def test_block_count(self, sample_maze):
        """Test the total number of blocks."""
        world = MazeWorld(sample_maze)
        solid = sum(1 for cell in sample_maze.cells if cell == CellType.SOLID)
        assert len(world.blocks) == len(sample_maze.cells) + 2 * solid

    def test_start_and_goal_markers(self, sample_maze):
        """Test that start and goal are marked on the ground plane."""
        world = MazeWorld(sample_maze)
        start, goal = sample_maze.start, sample_maze.goal
        assert world.get_block(start.x, 0, start.z) == BLOCK_TYPE_START
        assert world.get_block(goal.x, 0, goal.z) == BLOCK_TYPE_GOAL
        assert world.get_block(0, 0, 0) == BLOCK_TYPE_FLOOR

    def test_single_cell_maze_marks_start(self, generator):
        """Test that start wins when start and goal coincide."""
        world = MazeWorld(generator.generate(1, 1))
        assert world.blocks == {(0, 0, 0): BLOCK_TYPE_START}

    def test_add_block_replaces(self, sample_maze):
        """Test that placing a block overwrites the previous one."""
        world = MazeWorld(sample_maze)
        world.add_block(2, 0, 1, BLOCK_TYPE_VISITED)
        assert world.get_block(2, 0, 1) == BLOCK_TYPE_VISITED

    def test_block_types(self, sample_maze):
        """Test the registered block types."""
        world = MazeWorld(sample_maze)
        names = {block_type.id: block_type.name for block_type in world.block_types}
        assert names == {
            BLOCK_TYPE_FLOOR: "bricks",
            BLOCK_TYPE_START: "start",
            BLOCK_TYPE_GOAL: "goal",
            BLOCK_TYPE_WALL: "leaves",
            BLOCK_TYPE_VISITED: "visited",
        }

    def test_to_map(self, sample_maze):
        """Test MazeWorld.to_map()."""
        world = MazeWorld(sample_maze)
        data = world.to_map()

        assert data["blockTypes"][0] == {
            "id": BLOCK_TYPE_FLOOR,
            "name": "bricks",
            "textureUri": "textures/bricks.png",
        }
        assert data["blocks"]["1,0,1"] == BLOCK_TYPE_START
        assert data["blocks"]["0,2,0"] == BLOCK_TYPE_WALL
        assert len(data["blocks"]) == len(world.blocks)
