"""
Recursive Backtracker (randomized depth-first search).

Creates mazes with long, winding passages and few dead ends.

Algorithm:
1. Start at the maze start cell, mark as visited
2. While the stack is not empty:
   - Choose a random unvisited neighbor of the top cell
   - Carve the passage, mark the neighbor visited and push it
   - Pop when the top cell has no unvisited neighbors (backtrack)

The stack is explicit, so depth is bounded only by the cell count.
"""

from __future__ import annotations

import logging
import random

from gridmaze.algorithms.base import generate_perfect
from gridmaze.config.options import MazeAlgorithm
from gridmaze.core.directions import Position
from gridmaze.core.maze import Maze


def carve_recursive_backtracker(
    maze: Maze,
    rng: random.Random,
    logger: logging.Logger | None = None,
    origin: Position | None = None,
) -> None:
    origin = origin if origin is not None else maze.start
    visited = {origin}
    stack = [origin]

    while stack:
        current = stack[-1]
        unvisited = [(d, p) for d, p in maze.neighbors(current.x, current.y) if p not in visited]

        if unvisited:
            direction, neighbor = rng.choice(unvisited)
            maze.carve(current.x, current.y, direction)
            visited.add(neighbor)
            stack.append(neighbor)
        else:
            stack.pop()


def generate_recursive_backtracker(width, height, options=None, *, rng=None, logger=None) -> Maze:
    """Generate a perfect maze with the Recursive Backtracker algorithm."""
    return generate_perfect(
        MazeAlgorithm.RECURSIVE_BACKTRACKER,
        carve_recursive_backtracker,
        width,
        height,
        options,
        rng,
        logger,
    )
