"""
Single-path reduction: turn a connected maze into a perfect maze.

Only passages are removed, never opened. Open internal edges are shuffled
and each one is tentatively walled; the wall stays if its two cells are
still linked (the edge lay on a cycle), otherwise the edge is reopened.
Reduction stops once ``open_edges - (cells - 1)`` walls have been added.
Portals whose seam wall gets rebuilt are dropped from ``maze.portals``.

Since the maze is connected going in, a removed edge keeps the maze
connected exactly when its endpoints remain linked, so each test is a
local search that stops at the far endpoint instead of a full flood fill.
"""

from __future__ import annotations

import logging

from gridmaze.analysis.connectivity import are_linked, count_open_edges, require_connected
from gridmaze.core.directions import Direction
from gridmaze.core.maze import Maze
from gridmaze.utils.exceptions import StructuralError
from gridmaze.utils.logging import get_logger
from gridmaze.utils.random_source import RandomSource, make_rng

COMPONENT_NAME = "single-path"


def _prune_closed_portals(maze: Maze, logger: logging.Logger) -> None:
    """Drop portals whose seam wall was rebuilt during reduction."""
    if not maze.portals:
        return
    kept = [portal for portal in maze.portals if not maze.get_cell(*portal.source).has_wall(Direction.EAST)]
    if len(kept) < len(maze.portals):
        logger.debug(f"Dropped {len(maze.portals) - len(kept)} portals closed by reduction")
        maze.portals = kept


def ensure_single_path(maze: Maze, *, rng: RandomSource = None, logger: logging.Logger | None = None) -> int:
    """
    Remove passages from ``maze`` in place until it is a spanning tree.

    Args:
        maze: Connected maze to reduce
        rng: Random source or seed for the removal order
        logger: Diagnostic sink

    Returns:
        Number of edges removed; 0 if the maze was already perfect

    Raises:
        StructuralError: If the maze is not valid
        ConnectivityError: If the maze is not connected to begin with
    """
    logger = logger if logger is not None else get_logger(__name__)
    if not maze.is_valid():
        raise StructuralError("Cannot reduce an invalid maze", algorithm_name=COMPONENT_NAME)
    require_connected(maze, COMPONENT_NAME, stage="before reduction")

    edges = [
        (position, direction)
        for position, direction in maze.internal_edges()
        if not maze.get_cell(*position).has_wall(direction)
    ]
    target_edges = maze.total_cells - 1
    logger.debug(f"Open edges: {len(edges)}, target: {target_edges}")

    if len(edges) <= target_edges:
        return 0

    rng = make_rng(rng)
    rng.shuffle(edges)
    required = len(edges) - target_edges
    removed = 0

    for position, direction in edges:
        if removed >= required:
            break
        other = position.step(direction)
        maze.build_wall(position.x, position.y, direction)
        if are_linked(maze, position, other):
            removed += 1
        else:
            maze.carve(position.x, position.y, direction)

    _prune_closed_portals(maze, logger)

    if removed < required:
        logger.warning(
            f"Single-path reduction removed {removed}/{required} edges; "
            f"{count_open_edges(maze) - target_edges} loops remain"
        )
    else:
        logger.info(f"Single-path reduction removed {removed} edges")

    return removed
