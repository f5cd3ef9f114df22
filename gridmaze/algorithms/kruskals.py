"""
Randomized Kruskal's algorithm.

Every internal edge is listed, shuffled and processed in order; an edge is
carved only when its two cells belong to different components of a
union-find forest. Processing stops once ``cells - 1`` edges are carved.
"""

from __future__ import annotations

import logging
import random

from gridmaze.algorithms.base import generate_perfect, resolve_logger
from gridmaze.config.options import MazeAlgorithm
from gridmaze.core.maze import Maze
from gridmaze.core.union_find import UnionFind
from gridmaze.utils.exceptions import StructuralError

ALGORITHM_NAME = MazeAlgorithm.KRUSKALS.value


def carve_kruskals(maze: Maze, rng: random.Random, logger: logging.Logger | None = None) -> None:
    logger = resolve_logger(logger)
    width = maze.width
    edges = list(maze.internal_edges())
    rng.shuffle(edges)

    forest = UnionFind(maze.total_cells)
    target = maze.total_cells - 1
    carved = 0

    for position, direction in edges:
        other = position.step(direction)
        if forest.union(position.y * width + position.x, other.y * width + other.x):
            maze.carve(position.x, position.y, direction)
            carved += 1
            if carved == target:
                break

    if carved != target:
        raise StructuralError(
            f"Carved {carved} edges, expected {target}",
            algorithm_name=ALGORITHM_NAME,
            diagnostic_data={"components": forest.components},
        )
    logger.debug(f"{ALGORITHM_NAME}: carved {carved} of {len(edges)} edges")


def generate_kruskals(width, height, options=None, *, rng=None, logger=None) -> Maze:
    """Generate a perfect maze with randomized Kruskal's algorithm."""
    return generate_perfect(MazeAlgorithm.KRUSKALS, carve_kruskals, width, height, options, rng, logger)
