from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("gridmaze")  # Matches the name in pyproject.toml
except PackageNotFoundError:
    # package is not installed
    __version__ = "0.0.0-dev"

from .algorithms import (  # noqa: E402
    ALGORITHMS,
    LoopErasedPath,
    generate_aldous_broder,
    generate_binary_tree,
    generate_braided,
    generate_ellers,
    generate_hunt_and_kill,
    generate_kruskals,
    generate_multi_layer,
    generate_prims,
    generate_recursive_backtracker,
    generate_sidewinder,
    generate_sparse_loop,
    generate_wilsons,
    get_algorithm,
    list_algorithms,
)
from .analysis import (  # noqa: E402
    DegreeDistribution,
    analyze_distribution,
    check_wall_symmetry,
    count_open_edges,
    is_connected,
    is_solvable,
    verify_perfect_maze,
)
from .config import (  # noqa: E402
    LOOP_ALGORITHMS,
    DistributionTarget,
    MazeAlgorithm,
    MazeConfig,
)
from .core import Cell, Direction, Maze, Portal, Position, UnionFind, create_maze  # noqa: E402
from .pipeline import GenerationResult, generate_maze, generate_worksheet_set  # noqa: E402
from .postprocessing import BalanceReport, balance_distribution, ensure_single_path  # noqa: E402
from .utils.exceptions import (  # noqa: E402
    ConfigurationError,
    ConnectivityError,
    MazeError,
    StepBudgetExceededError,
    StructuralError,
    UnsolvableMazeError,
)

__all__ = [
    "ALGORITHMS",
    "LOOP_ALGORITHMS",
    "BalanceReport",
    "Cell",
    "ConfigurationError",
    "ConnectivityError",
    "DegreeDistribution",
    "Direction",
    "DistributionTarget",
    "GenerationResult",
    "LoopErasedPath",
    "Maze",
    "MazeAlgorithm",
    "MazeConfig",
    "MazeError",
    "Portal",
    "Position",
    "StepBudgetExceededError",
    "StructuralError",
    "UnionFind",
    "UnsolvableMazeError",
    "analyze_distribution",
    "balance_distribution",
    "check_wall_symmetry",
    "count_open_edges",
    "create_maze",
    "ensure_single_path",
    "generate_aldous_broder",
    "generate_binary_tree",
    "generate_braided",
    "generate_ellers",
    "generate_hunt_and_kill",
    "generate_kruskals",
    "generate_maze",
    "generate_multi_layer",
    "generate_prims",
    "generate_recursive_backtracker",
    "generate_sidewinder",
    "generate_sparse_loop",
    "generate_wilsons",
    "generate_worksheet_set",
    "get_algorithm",
    "is_connected",
    "is_solvable",
    "list_algorithms",
    "verify_perfect_maze",
]
