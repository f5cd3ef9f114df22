"""
Unit tests for the random-walk algorithms.

Covers Wilson's loop-erased path, the step caps of Aldous-Broder, Wilson's
and Hunt-and-Kill, and the start-cell handling of the depth-first carvers.
"""

import random

import pytest

from gridmaze.algorithms.aldous_broder import generate_aldous_broder
from gridmaze.algorithms.hunt_and_kill import generate_hunt_and_kill
from gridmaze.algorithms.recursive_backtracker import carve_recursive_backtracker
from gridmaze.algorithms.wilsons import LoopErasedPath, generate_wilsons
from gridmaze.analysis.connectivity import reachable_cells, verify_perfect_maze
from gridmaze.core.directions import Position
from gridmaze.core.maze import create_maze
from gridmaze.utils.exceptions import MazeError, StepBudgetExceededError

A, B, C, D = Position(0, 0), Position(1, 0), Position(1, 1), Position(0, 1)


class TestLoopErasedPath:
    """Test loop erasure on scripted walks."""

    def test_walk_without_revisits(self):
        path = LoopErasedPath(A)
        path.append(B)
        path.append(C)

        assert path.positions == [A, B, C]
        assert path.head == C
        assert len(path) == 3

    def test_revisit_erases_loop(self):
        """A, B, C, B leaves A, B."""
        path = LoopErasedPath(A)
        for position in (B, C, B):
            path.append(position)

        assert path.positions == [A, B]
        assert C not in path

    def test_return_to_origin(self):
        path = LoopErasedPath(A)
        for position in (B, C, D, A):
            path.append(position)

        assert path.positions == [A]

    def test_walk_continues_after_erasure(self):
        path = LoopErasedPath(A)
        for position in (B, C, B, C, D):
            path.append(position)

        assert list(path) == [A, B, C, D]

    def test_truncate_keeps_prefix(self):
        path = LoopErasedPath(A)
        for position in (B, C, D):
            path.append(position)
        path.truncate(1)

        assert path.positions == [A, B]
        assert D not in path
        path.append(D)
        assert path.positions == [A, B, D]


class TestStepBudgets:
    """Test that unbounded loops fail loudly instead of hanging."""

    @pytest.mark.parametrize("generate", [generate_aldous_broder, generate_wilsons, generate_hunt_and_kill])
    def test_tiny_budget_raises(self, generate):
        with pytest.raises(StepBudgetExceededError) as exc_info:
            generate(10, 10, rng=1, max_steps=5)

        error = exc_info.value
        assert error.max_steps == 5
        assert error.steps_taken == 5
        assert error.error_code == "STEP_BUDGET_EXCEEDED"
        assert isinstance(error, MazeError)

    @pytest.mark.parametrize("generate", [generate_aldous_broder, generate_wilsons, generate_hunt_and_kill])
    def test_default_budget_suffices(self, generate):
        maze = generate(15, 15, rng=3)
        assert verify_perfect_maze(maze)["is_perfect"]

    def test_hunt_and_kill_needs_one_step_per_cell(self):
        """Each step claims a new cell, so cells - 1 steps always finish."""
        maze = generate_hunt_and_kill(6, 6, rng=8, max_steps=35)
        assert verify_perfect_maze(maze)["is_perfect"]


class TestRecursiveBacktracker:
    """Test the depth-first carver."""

    def test_custom_origin(self):
        maze = create_maze(6, 4)
        carve_recursive_backtracker(maze, random.Random(0), origin=Position(3, 2))
        assert len(reachable_cells(maze)) == 24

    def test_large_maze_does_not_recurse(self):
        """An explicit stack handles corridors longer than the recursion limit."""
        maze = create_maze(150, 150)
        carve_recursive_backtracker(maze, random.Random(5))
        assert verify_perfect_maze(maze)["is_perfect"]
