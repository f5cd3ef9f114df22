"""
Shared scaffolding for the generation algorithms.

Every public ``generate_*`` function follows the same contract:

1. Validate options and dimensions before any allocation
2. Build a fully walled maze with start (0, 0) and finish (width-1, height-1)
3. Carve a spanning structure reaching every cell
4. Seal the boundary, then open one entrance side and one exit side
5. Check ``Maze.is_valid`` and raise ``StructuralError`` if it fails

The carving step is a plain function ``carve(maze, rng, logger)`` so that
composite algorithms (braided, sparse loop, multi-layer) can reuse the
perfect-maze carvers directly.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Callable, Mapping
from typing import Any

from gridmaze.config.options import AlgorithmOptions, MazeAlgorithm, parse_options
from gridmaze.core.maze import Maze, create_maze
from gridmaze.utils.exceptions import StructuralError, validate_dimensions
from gridmaze.utils.logging import LoggedOperation, get_logger, log_generation_summary
from gridmaze.utils.random_source import RandomSource, make_rng

CarveFunction = Callable[..., None]

# Largest accepted side length per algorithm (per layer for multi-layer)
MAX_SIZES: dict[MazeAlgorithm, int] = {
    MazeAlgorithm.BINARY_TREE: 500,
    MazeAlgorithm.SIDEWINDER: 500,
    MazeAlgorithm.RECURSIVE_BACKTRACKER: 400,
    MazeAlgorithm.HUNT_AND_KILL: 300,
    MazeAlgorithm.ALDOUS_BRODER: 200,
    MazeAlgorithm.ELLERS: 500,
    MazeAlgorithm.PRIMS: 300,
    MazeAlgorithm.KRUSKALS: 200,
    MazeAlgorithm.WILSONS: 200,
    MazeAlgorithm.BRAIDED: 400,
    MazeAlgorithm.SPARSE_LOOP: 400,
    MazeAlgorithm.MULTI_LAYER: 200,
}

# Lower bound on the random-walk step caps so small grids are not starved
MIN_WALK_STEPS = 10_000


def resolve_logger(logger: logging.Logger | None, name: str = "gridmaze.algorithms") -> logging.Logger:
    return logger if logger is not None else get_logger(name)


def walk_step_budget(total_cells: int) -> int:
    """Step cap for unbounded random walks: ``cells**2`` with a floor."""
    return max(total_cells * total_cells, MIN_WALK_STEPS)


def prepare(
    algorithm: MazeAlgorithm,
    width: Any,
    height: Any,
    options: Mapping[str, Any] | AlgorithmOptions | None = None,
) -> AlgorithmOptions:
    """Validate options and dimensions for ``algorithm``; nothing is allocated."""
    parsed = parse_options(algorithm, options)
    validate_dimensions(width, height, algorithm_name=algorithm.value, max_size=MAX_SIZES[algorithm])
    return parsed


def finalize_maze(maze: Maze, algorithm_name: str) -> Maze:
    """Seal the boundary, open entrance and exit, then validate."""
    maze.seal_boundary()
    maze.open_entrances()
    if not maze.is_valid():
        raise StructuralError(
            "Generated maze failed validation",
            algorithm_name=algorithm_name,
            diagnostic_data={"width": maze.width, "height": maze.height},
        )
    return maze


def generate_perfect(
    algorithm: MazeAlgorithm,
    carve: CarveFunction,
    width: int,
    height: int,
    options: Mapping[str, Any] | AlgorithmOptions | None = None,
    rng: RandomSource = None,
    logger: logging.Logger | None = None,
    **carve_kwargs: Any,
) -> Maze:
    """
    Run the generation contract around a perfect-maze ``carve`` function.

    Args:
        algorithm: Algorithm being run (for validation limits and messages)
        carve: Function ``carve(maze, rng, logger, **carve_kwargs)``
        width: Number of columns
        height: Number of rows
        options: Algorithm options; perfect algorithms accept none
        rng: Random source or seed
        logger: Diagnostic sink
        **carve_kwargs: Extra keyword arguments for ``carve`` (step caps)

    Returns:
        Finished maze with entrance and exit open
    """
    prepare(algorithm, width, height, options)
    rng = make_rng(rng)
    logger = resolve_logger(logger)

    maze = create_maze(width, height)
    with LoggedOperation(logger, f"{algorithm.value} carving {width}x{height}") as operation:
        carve(maze, rng, logger, **carve_kwargs)

    finalize_maze(maze, algorithm.value)
    log_generation_summary(logger, algorithm.value, width, height, operation.duration or 0.0)
    return maze


def generate_base_maze(
    algorithm: MazeAlgorithm,
    width: int,
    height: int,
    rng: random.Random,
    logger: logging.Logger,
) -> Maze:
    """Generate a finished perfect maze by algorithm name, for the post-processed algorithms."""
    # Imported here: the registry imports every algorithm module
    from gridmaze.algorithms.registry import get_algorithm

    return get_algorithm(algorithm)(width, height, rng=rng, logger=logger)
