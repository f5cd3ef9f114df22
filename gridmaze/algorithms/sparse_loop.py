"""
Sparse loop mazes: a perfect maze with a few shortcut loops.

Every internal wall still standing in the perfect base maze (counted once
via its east or south side) is a candidate. The candidates are shuffled and
``floor(candidates * loop_fraction)`` of them are removed. Removing a wall
from a spanning tree can only add a cycle, so connectivity is never at risk.
"""

from __future__ import annotations

import logging
import random

from gridmaze.algorithms.base import finalize_maze, generate_base_maze, prepare, resolve_logger
from gridmaze.analysis.connectivity import require_connected
from gridmaze.config.options import MazeAlgorithm, SparseLoopOptions
from gridmaze.core.maze import Maze
from gridmaze.utils.exceptions import StructuralError
from gridmaze.utils.logging import LoggedOperation, log_generation_summary
from gridmaze.utils.random_source import make_rng

ALGORITHM_NAME = MazeAlgorithm.SPARSE_LOOP.value


def add_loops(maze: Maze, loop_fraction: float, rng: random.Random, logger: logging.Logger | None = None) -> int:
    """
    Remove a fraction of the internal walls of ``maze`` in place.

    Returns:
        Number of walls removed
    """
    logger = resolve_logger(logger)
    candidates = [
        (position, direction)
        for position, direction in maze.internal_edges()
        if maze.get_cell(*position).has_wall(direction)
    ]
    rng.shuffle(candidates)
    count = int(len(candidates) * loop_fraction)

    for position, direction in candidates[:count]:
        maze.carve(position.x, position.y, direction)

    logger.debug(f"{ALGORITHM_NAME}: removed {count} of {len(candidates)} internal walls")
    return count


def generate_sparse_loop(width, height, options=None, *, rng=None, logger=None) -> Maze:
    """
    Generate a perfect maze and add sparse loops to it.

    Options:
        loop_fraction: Fraction of internal walls to remove, in [0, 1]
            (default 0.12)
        base_algorithm: Perfect algorithm for the base maze
            (default "recursive-backtracker")

    Raises:
        StructuralError: If the base maze is invalid
        ConnectivityError: If the result is not fully connected
    """
    parsed: SparseLoopOptions = prepare(MazeAlgorithm.SPARSE_LOOP, width, height, options)
    rng = make_rng(rng)
    logger = resolve_logger(logger)

    maze = generate_base_maze(parsed.base_algorithm, width, height, rng, logger)
    if not maze.is_valid():
        raise StructuralError("Base maze failed validation", algorithm_name=ALGORITHM_NAME)

    with LoggedOperation(logger, f"{ALGORITHM_NAME} loop insertion") as operation:
        added = add_loops(maze, parsed.loop_fraction, rng, logger)

    finalize_maze(maze, ALGORITHM_NAME)
    require_connected(maze, ALGORITHM_NAME, stage="loop insertion")
    log_generation_summary(
        logger,
        ALGORITHM_NAME,
        width,
        height,
        operation.duration or 0.0,
        {"base": parsed.base_algorithm.value, "loops_added": added},
    )
    return maze
