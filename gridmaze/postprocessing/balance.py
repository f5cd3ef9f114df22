"""
Degree-distribution balancing.

Nudges the dead-end and three-way junction ratios of a maze toward target
values by opening walls only. Opening a wall can never disconnect anything,
so the open-edge count never decreases and connectivity can only improve.

Phase 1 opens one more side of random dead ends; phase 2 opens one more
side of random straight corridors. Each phase has a budget of
``floor(gap * cells)`` successful mutations and gives up after three times
as many attempts. The histogram is recomputed after every successful
mutation, since each one changes which cells qualify.
"""

from __future__ import annotations

import logging
import math
import random
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field

from gridmaze.analysis.connectivity import count_open_edges, require_connected
from gridmaze.analysis.distribution import DegreeDistribution, analyze_distribution, cells_of_degree
from gridmaze.config.pydantic_config import DistributionTarget
from gridmaze.core.directions import DIRECTIONS, Position
from gridmaze.core.maze import Maze
from gridmaze.utils.logging import get_logger
from gridmaze.utils.random_source import RandomSource, make_rng

COMPONENT_NAME = "balance"
ATTEMPTS_PER_MUTATION = 3


@dataclass
class BalanceReport:
    """Outcome of one balancing pass."""

    initial: DegreeDistribution
    final: DegreeDistribution
    target_dead_ends: float
    target_three_way: float
    dead_ends_opened: int = 0
    branches_added: int = 0
    attempts: dict[str, int] = field(default_factory=dict)
    edges_before: int = 0
    edges_after: int = 0

    @property
    def walls_removed(self) -> int:
        return self.dead_ends_opened + self.branches_added

    @property
    def reached_target(self) -> bool:
        return self.final.dead_ends <= self.target_dead_ends and self.final.three_way >= self.target_three_way


def _target_ratios(target: DistributionTarget | Mapping[str, float]) -> tuple[float, float]:
    if isinstance(target, DistributionTarget):
        return target.dead_ends, target.three_way
    return float(target["dead_ends"]), float(target["three_way"])


def _open_random_side(maze: Maze, position: Position, rng: random.Random) -> bool:
    """Open one walled side of ``position`` toward a neighbor that also has the wall."""
    cell = maze.get_cell(*position)
    directions = list(DIRECTIONS)
    rng.shuffle(directions)

    for direction in directions:
        if not cell.has_wall(direction):
            continue
        neighbor = maze.neighbor(position.x, position.y, direction)
        if neighbor is None or not maze.get_cell(*neighbor).has_wall(direction.opposite):
            continue
        maze.carve(position.x, position.y, direction)
        return True
    return False


def _run_phase(
    maze: Maze,
    degree: int,
    budget: int,
    done: Callable[[DegreeDistribution], bool],
    rng: random.Random,
) -> tuple[int, int, DegreeDistribution]:
    """Open sides of random cells of ``degree`` until ``done`` or the budget runs out."""
    distribution = analyze_distribution(maze)
    successes = 0
    attempts = 0
    max_attempts = budget * ATTEMPTS_PER_MUTATION

    while not done(distribution) and successes < budget and attempts < max_attempts:
        attempts += 1
        candidates = cells_of_degree(maze, degree)
        if not candidates:
            break
        if _open_random_side(maze, rng.choice(candidates), rng):
            successes += 1
            distribution = analyze_distribution(maze)

    return successes, attempts, distribution


def balance_distribution(
    maze: Maze,
    target: DistributionTarget | Mapping[str, float],
    *,
    rng: RandomSource = None,
    logger: logging.Logger | None = None,
) -> BalanceReport:
    """
    Move the degree histogram of ``maze`` toward ``target`` in place.

    Args:
        maze: Connected maze to adjust
        target: Target ratios with ``dead_ends`` and ``three_way``; plain
            mappings are used as given, without normalization
        rng: Random source or seed
        logger: Diagnostic sink

    Returns:
        BalanceReport with the distributions before and after

    Raises:
        ConnectivityError: If the maze is disconnected before or after balancing
    """
    logger = logger if logger is not None else get_logger(__name__)
    rng = make_rng(rng)
    target_dead, target_three = _target_ratios(target)

    require_connected(maze, COMPONENT_NAME, stage="before balancing")
    initial = analyze_distribution(maze)
    edges_before = count_open_edges(maze)
    total_cells = maze.total_cells
    logger.debug(f"Initial distribution: {initial.as_dict()}")

    # Phase 1: fewer dead ends
    dead_budget = max(0, math.floor((initial.dead_ends - target_dead) * total_cells))
    dead_opened, dead_attempts, current = _run_phase(
        maze, 1, dead_budget, lambda d: d.dead_ends <= target_dead, rng
    )
    logger.debug(f"Opened {dead_opened}/{dead_budget} dead ends in {dead_attempts} attempts")

    # Phase 2: more three-way junctions
    branch_budget = max(0, math.floor((target_three - current.three_way) * total_cells))
    branches, branch_attempts, final = _run_phase(
        maze, 2, branch_budget, lambda d: d.three_way >= target_three, rng
    )
    logger.debug(f"Added {branches}/{branch_budget} branches in {branch_attempts} attempts")

    require_connected(maze, COMPONENT_NAME, stage="after balancing")

    report = BalanceReport(
        initial=initial,
        final=final,
        target_dead_ends=target_dead,
        target_three_way=target_three,
        dead_ends_opened=dead_opened,
        branches_added=branches,
        attempts={"dead_ends": dead_attempts, "three_way": branch_attempts},
        edges_before=edges_before,
        edges_after=count_open_edges(maze),
    )

    if not report.reached_target:
        logger.warning(
            f"Balancing fell short of target: dead ends {final.dead_ends:.3f} (target {target_dead:.3f}), "
            f"three-way {final.three_way:.3f} (target {target_three:.3f})"
        )
    return report
