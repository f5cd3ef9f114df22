"""
Multi-layer mazes: several perfect mazes side by side, joined at the seams.

Algorithm:
1. Generate ``layers`` recursive-backtracker mazes of the per-layer size,
   each with its own entrance (west of its top-left cell) and exit (east of
   its bottom-right cell)
2. Copy them side by side into one ``layers * width`` wide grid
3. Make every seam symmetric: open both sides if either is open, else wall
   both. The per-layer entrance and exit land on the seams here, so every
   seam already carries a passage at its top and bottom rows
4. Punch ``portals`` extra openings at random seam rows, recorded as
   ``Portal`` entries for renderers
5. Seal the outer boundary and open the global entrance and exit
"""

from __future__ import annotations

import logging
import random

from gridmaze.algorithms.base import finalize_maze, prepare, resolve_logger
from gridmaze.algorithms.recursive_backtracker import carve_recursive_backtracker
from gridmaze.analysis.connectivity import require_connected
from gridmaze.config.options import MazeAlgorithm, MultiLayerOptions
from gridmaze.core.directions import Direction, Position
from gridmaze.core.maze import Maze, Portal, create_maze
from gridmaze.utils.logging import LoggedOperation, log_generation_summary
from gridmaze.utils.random_source import make_rng

ALGORITHM_NAME = MazeAlgorithm.MULTI_LAYER.value


def _generate_layer(width: int, height: int, rng: random.Random, logger: logging.Logger) -> Maze:
    layer = create_maze(width, height)
    carve_recursive_backtracker(layer, rng, logger)
    return finalize_maze(layer, ALGORITHM_NAME)


def _join_seams(maze: Maze, width: int, layers: int) -> None:
    for layer_index in range(layers - 1):
        left_x = (layer_index + 1) * width - 1
        for y in range(maze.height):
            left_open = not maze.get_cell(left_x, y).has_wall(Direction.EAST)
            right_open = not maze.get_cell(left_x + 1, y).has_wall(Direction.WEST)
            if left_open or right_open:
                maze.carve(left_x, y, Direction.EAST)
            else:
                maze.build_wall(left_x, y, Direction.EAST)


def _punch_portals(maze: Maze, width: int, layers: int, portals: int, rng: random.Random) -> list[Portal]:
    candidates = [
        Portal(
            source=Position((layer_index + 1) * width - 1, y),
            target=Position((layer_index + 1) * width, y),
            layer_pair=f"{layer_index}-{layer_index + 1}",
        )
        for layer_index in range(layers - 1)
        for y in range(maze.height)
    ]
    rng.shuffle(candidates)

    chosen = candidates[: min(portals, len(candidates))]
    for portal in chosen:
        maze.carve(portal.source.x, portal.source.y, Direction.EAST)
    return chosen


def generate_multi_layer(width, height, options=None, *, rng=None, logger=None) -> Maze:
    """
    Generate a multi-layer maze.

    Args:
        width: Columns per layer
        height: Rows
        options: ``layers`` in [2, 5] (default 2), ``portals`` in [1, 10] (default 4)

    Returns:
        Maze of ``layers * width`` by ``height`` cells with ``portals`` and
        layer metadata set

    Raises:
        ConnectivityError: If the flattened maze is not fully connected
    """
    parsed: MultiLayerOptions = prepare(MazeAlgorithm.MULTI_LAYER, width, height, options)
    rng = make_rng(rng)
    logger = resolve_logger(logger)

    with LoggedOperation(logger, f"{ALGORITHM_NAME} {parsed.layers} layers of {width}x{height}") as operation:
        layer_mazes = [_generate_layer(width, height, rng, logger) for _ in range(parsed.layers)]

        maze = create_maze(width * parsed.layers, height)
        for layer_index, layer in enumerate(layer_mazes):
            offset = layer_index * width
            for position, cell in layer.cells():
                maze.set_cell(offset + position.x, position.y, cell.copy())

        _join_seams(maze, width, parsed.layers)
        maze.portals = _punch_portals(maze, width, parsed.layers, parsed.portals, rng)

    maze.layers = parsed.layers
    maze.width_per_layer = width
    maze.height_per_layer = height

    finalize_maze(maze, ALGORITHM_NAME)
    require_connected(maze, ALGORITHM_NAME, stage="layer merge")
    log_generation_summary(
        logger,
        ALGORITHM_NAME,
        maze.width,
        height,
        operation.duration or 0.0,
        {"layers": parsed.layers, "portals": len(maze.portals)},
    )
    return maze
