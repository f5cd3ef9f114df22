"""
Braided mazes: a perfect maze with some dead ends opened into loops.

A perfect base maze is generated first. Its dead ends are shuffled and
visited in turn until ``floor(count * braidness)`` walls are removed; each
one that is still a dead end gets one more wall removed toward a neighbor
that also has the wall, preferring the neighbor with the fewest openings.

- braidness = 0: the base maze unchanged
- braidness = 1: every initial dead end attempted once
"""

from __future__ import annotations

import logging
import random

from gridmaze.algorithms.base import finalize_maze, generate_base_maze, prepare, resolve_logger
from gridmaze.analysis.connectivity import require_connected
from gridmaze.analysis.distribution import cells_of_degree
from gridmaze.config.options import BraidedOptions, MazeAlgorithm
from gridmaze.core.maze import Maze
from gridmaze.utils.exceptions import StructuralError
from gridmaze.utils.logging import LoggedOperation, log_generation_summary
from gridmaze.utils.random_source import make_rng

ALGORITHM_NAME = MazeAlgorithm.BRAIDED.value


def braid(maze: Maze, braidness: float, rng: random.Random, logger: logging.Logger | None = None) -> int:
    """
    Open dead ends of ``maze`` in place.

    Returns:
        Number of walls removed
    """
    logger = resolve_logger(logger)
    dead_ends = cells_of_degree(maze, 1)
    rng.shuffle(dead_ends)
    target = int(len(dead_ends) * braidness)

    removed = 0
    for position in dead_ends:
        if removed >= target:
            break
        # Earlier removals may already have opened this cell
        if maze.degree(position.x, position.y) != 1:
            continue

        cell = maze.get_cell(position.x, position.y)
        candidates = [
            (direction, neighbor)
            for direction, neighbor in maze.neighbors(position.x, position.y)
            if cell.has_wall(direction) and maze.get_cell(*neighbor).has_wall(direction.opposite)
        ]
        if not candidates:
            continue

        rng.shuffle(candidates)
        candidates.sort(key=lambda candidate: maze.degree(*candidate[1]))
        direction, _ = candidates[0]
        maze.carve(position.x, position.y, direction)
        removed += 1

    logger.debug(f"{ALGORITHM_NAME}: removed {removed} of {len(dead_ends)} dead ends (target {target})")
    return removed


def generate_braided(width, height, options=None, *, rng=None, logger=None) -> Maze:
    """
    Generate a braided maze.

    Options:
        braidness: Fraction of dead ends to remove, in [0, 1] (default 0.5)
        base_algorithm: Perfect algorithm for the base maze
            (default "recursive-backtracker")

    Raises:
        StructuralError: If the base maze is invalid
        ConnectivityError: If the result is not fully connected
    """
    parsed: BraidedOptions = prepare(MazeAlgorithm.BRAIDED, width, height, options)
    rng = make_rng(rng)
    logger = resolve_logger(logger)

    maze = generate_base_maze(parsed.base_algorithm, width, height, rng, logger)
    if not maze.is_valid():
        raise StructuralError("Base maze failed validation", algorithm_name=ALGORITHM_NAME)

    with LoggedOperation(logger, f"{ALGORITHM_NAME} braiding") as operation:
        removed = braid(maze, parsed.braidness, rng, logger)

    finalize_maze(maze, ALGORITHM_NAME)
    require_connected(maze, ALGORITHM_NAME, stage="braiding")
    log_generation_summary(
        logger,
        ALGORITHM_NAME,
        width,
        height,
        operation.duration or 0.0,
        {"base": parsed.base_algorithm.value, "walls_removed": removed},
    )
    return maze
