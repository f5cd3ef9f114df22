"""
Aldous-Broder maze generation.

A uniform random walk over the whole grid that carves a passage only the
first time it enters an unvisited cell. The result is a uniform spanning
tree, but the walk keeps revisiting finished territory, so it is capped at
``cells**2`` steps and fails loudly past that.
"""

from __future__ import annotations

import logging
import random

from gridmaze.algorithms.base import generate_perfect, resolve_logger, walk_step_budget
from gridmaze.config.options import MazeAlgorithm
from gridmaze.core.directions import Position
from gridmaze.core.maze import Maze
from gridmaze.utils.exceptions import StepBudgetExceededError

ALGORITHM_NAME = MazeAlgorithm.ALDOUS_BRODER.value


def carve_aldous_broder(
    maze: Maze,
    rng: random.Random,
    logger: logging.Logger | None = None,
    max_steps: int | None = None,
) -> None:
    logger = resolve_logger(logger)
    total_cells = maze.total_cells
    max_steps = max_steps if max_steps is not None else walk_step_budget(total_cells)

    current = Position(rng.randrange(maze.width), rng.randrange(maze.height))
    visited = {current}
    steps = 0

    while len(visited) < total_cells:
        if steps >= max_steps:
            raise StepBudgetExceededError(
                steps,
                max_steps,
                algorithm_name=ALGORITHM_NAME,
                visited_cells=len(visited),
                total_cells=total_cells,
            )
        steps += 1

        direction, neighbor = rng.choice(list(maze.neighbors(current.x, current.y)))
        if neighbor not in visited:
            maze.carve(current.x, current.y, direction)
            visited.add(neighbor)
        current = neighbor

    logger.debug(f"{ALGORITHM_NAME}: walk finished after {steps} steps")


def generate_aldous_broder(width, height, options=None, *, rng=None, logger=None, max_steps=None) -> Maze:
    """
    Generate a perfect maze with the Aldous-Broder algorithm.

    Raises:
        StepBudgetExceededError: If the walk exceeds ``max_steps``
    """
    return generate_perfect(
        MazeAlgorithm.ALDOUS_BRODER,
        carve_aldous_broder,
        width,
        height,
        options,
        rng,
        logger,
        max_steps=max_steps,
    )
