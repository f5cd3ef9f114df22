"""
Randomized Prim's algorithm.

Keeps a frontier of walls leading out of the visited region. A random
frontier wall is removed from the list (swap with the last entry, then
pop); if its far cell is still unvisited the wall is carved and the new
cell's outward walls join the frontier. Produces many short branches and
dead ends.
"""

from __future__ import annotations

import logging
import random

from gridmaze.algorithms.base import generate_perfect
from gridmaze.config.options import MazeAlgorithm
from gridmaze.core.directions import Direction, Position
from gridmaze.core.maze import Maze


def _push_walls(maze: Maze, cell: Position, visited: set[Position], frontier: list[tuple[Position, Direction]]) -> None:
    for direction, neighbor in maze.neighbors(cell.x, cell.y):
        if neighbor not in visited:
            frontier.append((cell, direction))


def carve_prims(maze: Maze, rng: random.Random, logger: logging.Logger | None = None) -> None:
    origin = maze.start
    visited = {origin}
    frontier: list[tuple[Position, Direction]] = []
    _push_walls(maze, origin, visited, frontier)

    while frontier:
        index = rng.randrange(len(frontier))
        frontier[index], frontier[-1] = frontier[-1], frontier[index]
        position, direction = frontier.pop()

        target = position.step(direction)
        if target in visited:
            continue

        maze.carve(position.x, position.y, direction)
        visited.add(target)
        _push_walls(maze, target, visited, frontier)


def generate_prims(width, height, options=None, *, rng=None, logger=None) -> Maze:
    """Generate a perfect maze with randomized Prim's algorithm."""
    return generate_perfect(MazeAlgorithm.PRIMS, carve_prims, width, height, options, rng, logger)
