"""
Sidewinder maze generation.

Rows are processed left to right. Each cell joins the current run; the run
either extends east or closes with probability 0.5, and closing carves north
from one random member of the run. The top row never closes early, so it is
a single corridor, and the east edge always closes.
"""

from __future__ import annotations

import logging
import random

from gridmaze.algorithms.base import generate_perfect
from gridmaze.config.options import MazeAlgorithm
from gridmaze.core.directions import Direction
from gridmaze.core.maze import Maze

CLOSE_PROBABILITY = 0.5


def carve_sidewinder(maze: Maze, rng: random.Random, logger: logging.Logger | None = None) -> None:
    for y in range(maze.height):
        run: list[int] = []
        for x in range(maze.width):
            run.append(x)

            at_east_edge = x == maze.width - 1
            at_top_row = y == 0
            close_run = at_east_edge or (not at_top_row and rng.random() < CLOSE_PROBABILITY)

            if close_run:
                if not at_top_row:
                    maze.carve(rng.choice(run), y, Direction.NORTH)
                run = []
            else:
                maze.carve(x, y, Direction.EAST)


def generate_sidewinder(width, height, options=None, *, rng=None, logger=None) -> Maze:
    """Generate a perfect maze with the Sidewinder algorithm."""
    return generate_perfect(MazeAlgorithm.SIDEWINDER, carve_sidewinder, width, height, options, rng, logger)
