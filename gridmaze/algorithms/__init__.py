"""
Maze generation algorithms.

Nine perfect-maze algorithms (spanning trees) plus three that leave loops:

Perfect:
- Binary Tree, Sidewinder: per-cell / per-row, strong directional bias
- Recursive Backtracker, Hunt-and-Kill: random walks with backtracking or hunting
- Aldous-Broder, Wilson's: uniform spanning trees from random walks
- Eller's, Prim's, Kruskal's: set-based and frontier-based constructions

With loops:
- Braided, Sparse Loop: post-processed perfect mazes
- Multi-layer: perfect layers joined at seams and portals

Examples
--------
>>> from gridmaze.algorithms import get_algorithm
>>> maze = get_algorithm("wilsons")(20, 20, rng=42)
"""

from .aldous_broder import generate_aldous_broder
from .binary_tree import generate_binary_tree
from .braided import generate_braided
from .ellers import generate_ellers
from .hunt_and_kill import generate_hunt_and_kill
from .kruskals import generate_kruskals
from .multi_layer import generate_multi_layer
from .prims import generate_prims
from .recursive_backtracker import generate_recursive_backtracker
from .registry import ALGORITHMS, AlgorithmInfo, algorithm_info, get_algorithm, list_algorithms
from .sidewinder import generate_sidewinder
from .sparse_loop import generate_sparse_loop
from .wilsons import LoopErasedPath, generate_wilsons

__all__ = [
    "ALGORITHMS",
    "AlgorithmInfo",
    "LoopErasedPath",
    "algorithm_info",
    "generate_aldous_broder",
    "generate_binary_tree",
    "generate_braided",
    "generate_ellers",
    "generate_hunt_and_kill",
    "generate_kruskals",
    "generate_multi_layer",
    "generate_prims",
    "generate_recursive_backtracker",
    "generate_sidewinder",
    "generate_sparse_loop",
    "generate_wilsons",
    "get_algorithm",
    "list_algorithms",
]
