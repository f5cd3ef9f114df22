"""
Binary Tree maze generation.

Every cell independently carves north or east (a coin flip when both
exist). The top row becomes one corridor running east and the right column
one corridor running north; the top-right corner carves nothing.

Characteristics:
- Fastest algorithm, no bookkeeping at all
- Strong diagonal bias toward the north-east corner
"""

from __future__ import annotations

import logging
import random

from gridmaze.algorithms.base import generate_perfect
from gridmaze.config.options import MazeAlgorithm
from gridmaze.core.directions import Direction
from gridmaze.core.maze import Maze

_CARVE_CHOICES = (Direction.NORTH, Direction.EAST)


def carve_binary_tree(maze: Maze, rng: random.Random, logger: logging.Logger | None = None) -> None:
    for y in range(maze.height):
        for x in range(maze.width):
            choices = [d for d in _CARVE_CHOICES if maze.neighbor(x, y, d) is not None]
            if choices:
                maze.carve(x, y, rng.choice(choices))


def generate_binary_tree(width, height, options=None, *, rng=None, logger=None) -> Maze:
    """Generate a perfect maze with the Binary Tree algorithm."""
    return generate_perfect(MazeAlgorithm.BINARY_TREE, carve_binary_tree, width, height, options, rng, logger)
