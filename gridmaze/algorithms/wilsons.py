"""
Wilson's algorithm using loop-erased random walks.

Produces unbiased mazes: every spanning tree of the grid is equally likely.

Algorithm:
1. Mark one random cell as part of the maze
2. Take the next unvisited cell (row-major) and random-walk from it until
   the walk hits the maze, erasing loops as they form
3. Carve the erased path into the maze and repeat until all cells are in

The walks get shorter as the maze grows, so Wilson's converges faster than
Aldous-Broder, but a single walk is still unbounded and shares one step cap.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Iterator

from gridmaze.algorithms.base import generate_perfect, resolve_logger, walk_step_budget
from gridmaze.config.options import MazeAlgorithm
from gridmaze.core.directions import DIRECTIONS, Direction, Position
from gridmaze.core.maze import Maze
from gridmaze.utils.exceptions import StepBudgetExceededError, StructuralError

ALGORITHM_NAME = MazeAlgorithm.WILSONS.value


class LoopErasedPath:
    """
    Ordered walk with loop erasure.

    Appending a position already on the path truncates the path right after
    that earlier occurrence, so the repeated position stays and the loop
    behind it disappears. A position to index map makes the check O(1).
    """

    def __init__(self, origin: Position):
        self._positions: list[Position] = [origin]
        self._index: dict[Position, int] = {origin: 0}

    def __len__(self) -> int:
        return len(self._positions)

    def __iter__(self) -> Iterator[Position]:
        return iter(self._positions)

    def __contains__(self, position: object) -> bool:
        return position in self._index

    @property
    def positions(self) -> list[Position]:
        return list(self._positions)

    @property
    def head(self) -> Position:
        return self._positions[-1]

    def append(self, position: Position) -> None:
        index = self._index.get(position)
        if index is not None:
            self.truncate(index)
            return
        self._index[position] = len(self._positions)
        self._positions.append(position)

    def truncate(self, index: int) -> None:
        """Keep positions ``0 .. index`` inclusive."""
        for position in self._positions[index + 1 :]:
            del self._index[position]
        del self._positions[index + 1 :]


def _direction_between(a: Position, b: Position) -> Direction:
    for direction in DIRECTIONS:
        if a.step(direction) == b:
            return direction
    raise StructuralError(f"Walk jumped from {tuple(a)} to non-adjacent {tuple(b)}", algorithm_name=ALGORITHM_NAME)


def carve_wilsons(
    maze: Maze,
    rng: random.Random,
    logger: logging.Logger | None = None,
    max_steps: int | None = None,
) -> None:
    logger = resolve_logger(logger)
    total_cells = maze.total_cells
    max_steps = max_steps if max_steps is not None else walk_step_budget(total_cells)

    visited = {Position(rng.randrange(maze.width), rng.randrange(maze.height))}
    order = list(maze.positions())
    cursor = 0
    steps = 0
    walks = 0

    while len(visited) < total_cells:
        while order[cursor] in visited:
            cursor += 1

        current = order[cursor]
        path = LoopErasedPath(current)
        while current not in visited:
            if steps >= max_steps:
                raise StepBudgetExceededError(
                    steps,
                    max_steps,
                    algorithm_name=ALGORITHM_NAME,
                    visited_cells=len(visited),
                    total_cells=total_cells,
                )
            steps += 1
            _, current = rng.choice(list(maze.neighbors(current.x, current.y)))
            path.append(current)

        walk = path.positions
        for a, b in zip(walk, walk[1:]):
            maze.carve(a.x, a.y, _direction_between(a, b))
            visited.add(a)
        walks += 1

    logger.debug(f"{ALGORITHM_NAME}: {walks} walks, {steps} steps")


def generate_wilsons(width, height, options=None, *, rng=None, logger=None, max_steps=None) -> Maze:
    """
    Generate a perfect maze with Wilson's algorithm.

    Raises:
        StepBudgetExceededError: If the walks exceed ``max_steps`` in total
    """
    return generate_perfect(
        MazeAlgorithm.WILSONS,
        carve_wilsons,
        width,
        height,
        options,
        rng,
        logger,
        max_steps=max_steps,
    )
