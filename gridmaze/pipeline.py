"""
High-level generation pipeline.

``generate_maze`` runs one configured generation end to end:

    generate -> balance (optional) -> single-path (optional) -> validity gate

``generate_worksheet_set`` produces the easy / medium / hard worksheet
tiers in parallel, retrying each until its maze is solvable.

Example:
    >>> result = generate_maze(algorithm="braided", width=20, height=20, seed=7, single_path=True)
    >>> result.is_perfect
    True
"""

from __future__ import annotations

import logging
import random
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any

from gridmaze.algorithms.registry import get_algorithm
from gridmaze.analysis.connectivity import count_open_edges, is_solvable
from gridmaze.analysis.distribution import DegreeDistribution, analyze_distribution
from gridmaze.config.options import LOOP_ALGORITHMS, MazeAlgorithm
from gridmaze.config.pydantic_config import MazeConfig, build_config
from gridmaze.core.maze import Maze
from gridmaze.postprocessing.balance import BalanceReport, balance_distribution
from gridmaze.postprocessing.single_path import ensure_single_path
from gridmaze.utils.exceptions import (
    StructuralError,
    UnsolvableMazeError,
    validate_parameter_value,
)
from gridmaze.utils.logging import get_logger, log_generation_summary
from gridmaze.utils.random_source import RandomSource, derive_seed, make_rng

DEFAULT_MAX_ATTEMPTS = 10


@dataclass
class GenerationResult:
    """A finished maze together with what the pipeline did to it."""

    maze: Maze
    algorithm: MazeAlgorithm
    distribution: DegreeDistribution
    edges_removed: int = 0
    balance: BalanceReport | None = None
    duration: float = 0.0

    @property
    def open_edges(self) -> int:
        return count_open_edges(self.maze)

    @property
    def is_perfect(self) -> bool:
        return self.open_edges == self.maze.total_cells - 1


def generate_maze(
    config: MazeConfig | None = None,
    *,
    rng: RandomSource = None,
    logger: logging.Logger | None = None,
    **kwargs: Any,
) -> GenerationResult:
    """
    Generate and post-process one maze.

    Args:
        config: Complete configuration; alternatively pass its fields as
            keyword arguments
        rng: Random source overriding ``config.seed``
        logger: Diagnostic sink
        **kwargs: ``MazeConfig`` fields when ``config`` is None

    Returns:
        GenerationResult with the maze and its final degree distribution

    Raises:
        ConfigurationError: On invalid configuration
        StructuralError: If the final maze fails validation
        ConnectivityError: If a post-processing pass breaks connectivity
    """
    if config is None:
        config = build_config(**kwargs)
    elif kwargs:
        raise TypeError("Pass either a MazeConfig or keyword arguments, not both")

    logger = logger if logger is not None else get_logger(__name__)
    rng = make_rng(rng if rng is not None else config.seed)
    start_time = time.perf_counter()

    generate = get_algorithm(config.algorithm)
    maze = generate(config.width, config.height, config.options, rng=rng, logger=logger)

    report = None
    if config.balance is not None:
        report = balance_distribution(maze, config.balance, rng=rng, logger=logger)

    edges_removed = 0
    if config.single_path:
        if config.algorithm in LOOP_ALGORITHMS:
            edges_removed = ensure_single_path(maze, rng=rng, logger=logger)
        else:
            logger.debug(f"{config.algorithm.value} already produces a perfect maze; single-path skipped")

    if not maze.is_valid():
        raise StructuralError("Final maze failed validation", algorithm_name=config.algorithm.value)

    duration = time.perf_counter() - start_time
    log_generation_summary(
        logger,
        config.algorithm.value,
        maze.width,
        maze.height,
        duration,
        {"edges_removed": edges_removed, "balanced": report is not None},
    )

    return GenerationResult(
        maze=maze,
        algorithm=config.algorithm,
        distribution=analyze_distribution(maze),
        edges_removed=edges_removed,
        balance=report,
        duration=duration,
    )


@dataclass(frozen=True)
class WorksheetTier:
    """One difficulty tier of a printable worksheet set."""

    name: str
    algorithm: MazeAlgorithm
    width: int
    height: int


WORKSHEET_TIERS: tuple[WorksheetTier, ...] = (
    WorksheetTier("easy", MazeAlgorithm.SIDEWINDER, 15, 15),
    WorksheetTier("medium", MazeAlgorithm.RECURSIVE_BACKTRACKER, 30, 30),
    WorksheetTier("hard", MazeAlgorithm.RECURSIVE_BACKTRACKER, 50, 50),
)


def generate_solvable_maze(
    tier: WorksheetTier,
    rng: random.Random,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    logger: logging.Logger | None = None,
) -> Maze:
    """
    Generate a maze for ``tier``, retrying until start and finish are joined.

    Raises:
        UnsolvableMazeError: If no attempt produced a solvable maze
    """
    logger = logger if logger is not None else get_logger(__name__)
    generate = get_algorithm(tier.algorithm)

    for attempt in range(1, max_attempts + 1):
        maze = generate(tier.width, tier.height, rng=rng, logger=logger)
        if is_solvable(maze):
            return maze
        logger.warning(f"Tier '{tier.name}' attempt {attempt}/{max_attempts} produced an unsolvable maze")

    raise UnsolvableMazeError(max_attempts, algorithm_name=tier.algorithm.value)


def generate_worksheet_set(
    seed: int | None = None,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    *,
    tiers: tuple[WorksheetTier, ...] = WORKSHEET_TIERS,
    max_workers: int | None = None,
    logger: logging.Logger | None = None,
) -> dict[str, Maze]:
    """
    Generate one maze per worksheet tier in a thread pool.

    Each tier draws from its own generator seeded from ``seed``, so the set
    is reproducible regardless of thread scheduling.

    Returns:
        Mapping of tier name to maze, in tier order
    """
    validate_parameter_value(max_attempts, "max_attempts", expected_type=int, valid_range=(1, 1000))
    logger = logger if logger is not None else get_logger(__name__)

    parent = make_rng(seed)
    tier_seeds = [derive_seed(parent) for _ in tiers]

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = {
            tier.name: executor.submit(generate_solvable_maze, tier, random.Random(tier_seed), max_attempts, logger)
            for tier, tier_seed in zip(tiers, tier_seeds)
        }
        worksheet = {name: future.result() for name, future in futures.items()}

    logger.info(f"Generated worksheet set: {', '.join(worksheet)}")
    return worksheet
