"""
Algorithm registry.

Maps every ``MazeAlgorithm`` to its generate function together with a short
description, the largest accepted side length and whether it leaves loops.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from gridmaze.algorithms.aldous_broder import generate_aldous_broder
from gridmaze.algorithms.base import MAX_SIZES
from gridmaze.algorithms.binary_tree import generate_binary_tree
from gridmaze.algorithms.braided import generate_braided
from gridmaze.algorithms.ellers import generate_ellers
from gridmaze.algorithms.hunt_and_kill import generate_hunt_and_kill
from gridmaze.algorithms.kruskals import generate_kruskals
from gridmaze.algorithms.multi_layer import generate_multi_layer
from gridmaze.algorithms.prims import generate_prims
from gridmaze.algorithms.recursive_backtracker import generate_recursive_backtracker
from gridmaze.algorithms.sidewinder import generate_sidewinder
from gridmaze.algorithms.sparse_loop import generate_sparse_loop
from gridmaze.algorithms.wilsons import generate_wilsons
from gridmaze.config.options import LOOP_ALGORITHMS, PERFECT_ALGORITHMS, MazeAlgorithm, resolve_algorithm
from gridmaze.core.maze import Maze

GenerateFunction = Callable[..., Maze]

ALGORITHMS: dict[MazeAlgorithm, GenerateFunction] = {
    MazeAlgorithm.BINARY_TREE: generate_binary_tree,
    MazeAlgorithm.SIDEWINDER: generate_sidewinder,
    MazeAlgorithm.RECURSIVE_BACKTRACKER: generate_recursive_backtracker,
    MazeAlgorithm.HUNT_AND_KILL: generate_hunt_and_kill,
    MazeAlgorithm.ALDOUS_BRODER: generate_aldous_broder,
    MazeAlgorithm.ELLERS: generate_ellers,
    MazeAlgorithm.PRIMS: generate_prims,
    MazeAlgorithm.KRUSKALS: generate_kruskals,
    MazeAlgorithm.WILSONS: generate_wilsons,
    MazeAlgorithm.BRAIDED: generate_braided,
    MazeAlgorithm.SPARSE_LOOP: generate_sparse_loop,
    MazeAlgorithm.MULTI_LAYER: generate_multi_layer,
}

DESCRIPTIONS: dict[MazeAlgorithm, str] = {
    MazeAlgorithm.BINARY_TREE: "Per-cell coin flip north or east; strong diagonal bias",
    MazeAlgorithm.SIDEWINDER: "Row runs closed by one upward passage; horizontal bias",
    MazeAlgorithm.RECURSIVE_BACKTRACKER: "Randomized depth-first search; long winding corridors",
    MazeAlgorithm.HUNT_AND_KILL: "Random walk plus row-major hunt; long runs and dead ends",
    MazeAlgorithm.ALDOUS_BRODER: "Uniform random walk; unbiased spanning tree",
    MazeAlgorithm.ELLERS: "Row by row with disjoint sets; O(width) memory",
    MazeAlgorithm.PRIMS: "Random frontier walls; many short branches",
    MazeAlgorithm.KRUSKALS: "Shuffled edges with union-find; many short dead ends",
    MazeAlgorithm.WILSONS: "Loop-erased random walks; unbiased spanning tree",
    MazeAlgorithm.BRAIDED: "Perfect maze with a fraction of dead ends opened into loops",
    MazeAlgorithm.SPARSE_LOOP: "Perfect maze with a few shortcut loops",
    MazeAlgorithm.MULTI_LAYER: "Several perfect mazes side by side joined by portals",
}


@dataclass(frozen=True)
class AlgorithmInfo:
    """Registry entry for one algorithm."""

    algorithm: MazeAlgorithm
    generate: GenerateFunction
    description: str
    max_size: int
    perfect: bool
    has_loops: bool


def get_algorithm(name: str | MazeAlgorithm) -> GenerateFunction:
    """
    Look up a generate function by name.

    Raises:
        ConfigurationError: If the name is not one of the twelve algorithms
    """
    return ALGORITHMS[resolve_algorithm(name)]


def algorithm_info(name: str | MazeAlgorithm) -> AlgorithmInfo:
    algorithm = resolve_algorithm(name)
    return AlgorithmInfo(
        algorithm=algorithm,
        generate=ALGORITHMS[algorithm],
        description=DESCRIPTIONS[algorithm],
        max_size=MAX_SIZES[algorithm],
        perfect=algorithm in PERFECT_ALGORITHMS,
        has_loops=algorithm in LOOP_ALGORITHMS,
    )


def list_algorithms() -> list[AlgorithmInfo]:
    return [algorithm_info(algorithm) for algorithm in MazeAlgorithm]
