"""
Eller's algorithm for row-by-row maze generation.

Only the set membership of the current row is kept, so memory is O(width).

Algorithm:
1. Give every cell of the row without a set a fresh set id
2. Randomly join horizontally adjacent cells of different sets (merge
   sets); on the final row every such pair is joined
3. Randomly carve down from each cell, then force one downward passage
   for every set that got none
4. Carry set ids down through the vertical passages

Reference: Eller (1982), "An Efficient Method for Generating Mazes"
"""

from __future__ import annotations

import logging
import random

from gridmaze.algorithms.base import generate_perfect
from gridmaze.config.options import MazeAlgorithm
from gridmaze.core.directions import Direction
from gridmaze.core.maze import Maze

JOIN_PROBABILITY = 0.5
DROP_PROBABILITY = 0.5


def carve_ellers(maze: Maze, rng: random.Random, logger: logging.Logger | None = None) -> None:
    width = maze.width
    # 0 marks a cell without a set
    row_sets = [0] * width
    next_set_id = 1

    for y in range(maze.height):
        last_row = y == maze.height - 1

        for x in range(width):
            if row_sets[x] == 0:
                row_sets[x] = next_set_id
                next_set_id += 1

        # Step 1: horizontal joins
        for x in range(width - 1):
            join = last_row or rng.random() < JOIN_PROBABILITY
            if row_sets[x] != row_sets[x + 1] and join:
                maze.carve(x, y, Direction.EAST)
                old_set, new_set = row_sets[x + 1], row_sets[x]
                row_sets = [new_set if s == old_set else s for s in row_sets]

        if last_row:
            break

        # Step 2: vertical connections, at least one per set
        dropped = [False] * width
        for x in range(width):
            if rng.random() < DROP_PROBABILITY:
                maze.carve(x, y, Direction.SOUTH)
                dropped[x] = True

        members: dict[int, list[int]] = {}
        for x, set_id in enumerate(row_sets):
            members.setdefault(set_id, []).append(x)

        for columns in members.values():
            if not any(dropped[x] for x in columns):
                x = rng.choice(columns)
                maze.carve(x, y, Direction.SOUTH)
                dropped[x] = True

        # Step 3: carry set membership down
        row_sets = [row_sets[x] if dropped[x] else 0 for x in range(width)]


def generate_ellers(width, height, options=None, *, rng=None, logger=None) -> Maze:
    """Generate a perfect maze with Eller's algorithm."""
    return generate_perfect(MazeAlgorithm.ELLERS, carve_ellers, width, height, options, rng, logger)
