"""
Unit tests for the row-oriented algorithms.

Binary Tree, Sidewinder and Eller's build the maze row by row; their
textures leave structural fingerprints that are checked here.
"""

import random

import pytest

from gridmaze.algorithms.binary_tree import carve_binary_tree, generate_binary_tree
from gridmaze.algorithms.ellers import generate_ellers
from gridmaze.algorithms.sidewinder import carve_sidewinder, generate_sidewinder
from gridmaze.analysis.connectivity import count_open_edges, verify_perfect_maze
from gridmaze.core.directions import Direction
from gridmaze.core.maze import create_maze


class TestBinaryTree:
    """Test the north/east carving rule."""

    def test_every_cell_but_corner_links_north_or_east(self, seed):
        maze = create_maze(6, 6)
        carve_binary_tree(maze, random.Random(seed))

        for position, cell in maze.cells():
            # North-east corner has nowhere to carve
            if position == (5, 0):
                continue
            north_open = position.y > 0 and not cell.has_wall(Direction.NORTH)
            east_open = position.x < 5 and not cell.has_wall(Direction.EAST)
            assert north_open or east_open

    def test_top_row_is_one_corridor(self, seed):
        maze = generate_binary_tree(8, 5, rng=seed)
        for x in range(7):
            assert not maze.get_cell(x, 0).has_wall(Direction.EAST)

    def test_right_column_is_one_corridor(self, seed):
        maze = generate_binary_tree(8, 5, rng=seed)
        for y in range(1, 5):
            assert not maze.get_cell(7, y).has_wall(Direction.NORTH)

    def test_four_by_four(self):
        maze = generate_binary_tree(4, 4, rng=0)
        verification = verify_perfect_maze(maze)

        assert verification["total_cells"] == 16
        assert verification["passage_count"] == 15
        assert verification["is_connected"]


class TestSidewinder:
    """Test run closing in Sidewinder."""

    def test_top_row_is_one_corridor(self, seed):
        maze = create_maze(9, 6)
        carve_sidewinder(maze, random.Random(seed))
        for x in range(8):
            assert not maze.get_cell(x, 0).has_wall(Direction.EAST)

    def test_each_run_has_one_north_passage(self, seed):
        """Every maximal east-west run below the top row opens north exactly once."""
        maze = generate_sidewinder(9, 6, rng=seed)

        for y in range(1, maze.height):
            run_norths = 0
            for x in range(maze.width):
                cell = maze.get_cell(x, y)
                if not cell.has_wall(Direction.NORTH):
                    run_norths += 1
                if cell.has_wall(Direction.EAST) or x == maze.width - 1:
                    assert run_norths == 1, f"row {y} run ending at {x}"
                    run_norths = 0

    def test_is_perfect(self, seed):
        maze = generate_sidewinder(10, 4, rng=seed)
        assert count_open_edges(maze) == 39


class TestEllers:
    """Test Eller's row-by-row set merging."""

    def test_is_perfect(self, seed):
        maze = generate_ellers(10, 6, rng=seed)
        assert verify_perfect_maze(maze)["is_perfect"]

    @pytest.mark.parametrize("width", [2, 3, 30])
    def test_wide_and_narrow(self, width):
        maze = generate_ellers(width, 4, rng=9)
        assert count_open_edges(maze) == width * 4 - 1
