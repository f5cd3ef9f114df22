"""Connectivity and degree-distribution analysis."""

from .connectivity import (
    are_linked,
    check_wall_symmetry,
    count_open_edges,
    is_connected,
    is_solvable,
    reachable_cells,
    require_connected,
    validate_boundary_walls,
    verify_perfect_maze,
)
from .distribution import DegreeDistribution, analyze_distribution, cells_of_degree, degree_grid

__all__ = [
    "DegreeDistribution",
    "analyze_distribution",
    "are_linked",
    "cells_of_degree",
    "check_wall_symmetry",
    "count_open_edges",
    "degree_grid",
    "is_connected",
    "is_solvable",
    "reachable_cells",
    "require_connected",
    "validate_boundary_walls",
    "verify_perfect_maze",
]
