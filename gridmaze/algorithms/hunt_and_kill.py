"""
Hunt-and-Kill maze generation.

Alternates two phases:
- Kill: random walk from the current cell into unvisited neighbors,
  carving as it goes, until every neighbor is visited
- Hunt: scan row-major for the first unvisited cell adjacent to the
  visited region, connect it to a random visited neighbor, resume there

Each phase step claims exactly one new cell, so the loop is bounded by the
cell count; the step cap only guards against a broken invariant.
"""

from __future__ import annotations

import logging
import random

from gridmaze.algorithms.base import generate_perfect, resolve_logger
from gridmaze.config.options import MazeAlgorithm
from gridmaze.core.directions import Position
from gridmaze.core.maze import Maze
from gridmaze.utils.exceptions import StepBudgetExceededError, StructuralError

ALGORITHM_NAME = MazeAlgorithm.HUNT_AND_KILL.value


def _hunt(maze: Maze, visited: set[Position], rng: random.Random) -> Position | None:
    """Connect the first unvisited cell that touches the visited region."""
    for position in maze.positions():
        if position in visited:
            continue
        links = [(d, p) for d, p in maze.neighbors(position.x, position.y) if p in visited]
        if links:
            direction, _ = rng.choice(links)
            maze.carve(position.x, position.y, direction)
            visited.add(position)
            return position
    return None


def carve_hunt_and_kill(
    maze: Maze,
    rng: random.Random,
    logger: logging.Logger | None = None,
    max_steps: int | None = None,
) -> None:
    logger = resolve_logger(logger)
    total_cells = maze.total_cells
    max_steps = max_steps if max_steps is not None else 2 * total_cells

    current = maze.start
    visited = {current}
    steps = 0
    hunts = 0

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

        unvisited = [(d, p) for d, p in maze.neighbors(current.x, current.y) if p not in visited]
        if unvisited:
            direction, neighbor = rng.choice(unvisited)
            maze.carve(current.x, current.y, direction)
            visited.add(neighbor)
            current = neighbor
            continue

        target = _hunt(maze, visited, rng)
        if target is None:
            raise StructuralError(
                "Hunt found no unvisited cell next to the visited region",
                algorithm_name=ALGORITHM_NAME,
                diagnostic_data={"visited_cells": f"{len(visited)}/{total_cells}"},
            )
        hunts += 1
        current = target

    logger.debug(f"{ALGORITHM_NAME}: {steps} steps, {hunts} hunts")


def generate_hunt_and_kill(width, height, options=None, *, rng=None, logger=None, max_steps=None) -> Maze:
    """
    Generate a perfect maze with the Hunt-and-Kill algorithm.

    Raises:
        StepBudgetExceededError: If the walk/hunt loop exceeds ``max_steps``
    """
    return generate_perfect(
        MazeAlgorithm.HUNT_AND_KILL,
        carve_hunt_and_kill,
        width,
        height,
        options,
        rng,
        logger,
        max_steps=max_steps,
    )
