"""
Degree distribution analysis.

The degree of a cell is its number of open sides, entrance and exit
openings included. Cells are classified as dead ends (1), straight
corridors (2), three-way junctions (3) and four-way crossings (4).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np

from gridmaze.core.directions import DIRECTIONS, Position

if TYPE_CHECKING:
    from numpy.typing import NDArray

    from gridmaze.core.maze import Maze

DEGREE_NAMES = {1: "dead_ends", 2: "straight", 3: "three_way", 4: "four_way"}


@dataclass(frozen=True)
class DegreeDistribution:
    """
    Ratios of cells per degree over the total cell count.

    Attributes:
        dead_ends: Fraction of cells with exactly one open side
        straight: Fraction with two open sides
        three_way: Fraction with three open sides
        four_way: Fraction with four open sides
        counts: Raw cell counts keyed like the ratio fields, plus ``isolated``
        total_cells: Number of cells in the maze
    """

    dead_ends: float
    straight: float
    three_way: float
    four_way: float
    counts: dict[str, int] = field(default_factory=dict)
    total_cells: int = 0

    def as_dict(self) -> dict[str, float]:
        return {
            "dead_ends": self.dead_ends,
            "straight": self.straight,
            "three_way": self.three_way,
            "four_way": self.four_way,
        }

    @property
    def junctions(self) -> float:
        """Three-way plus four-way ratio."""
        return self.three_way + self.four_way


def degree_grid(maze: Maze) -> NDArray[np.int64]:
    """Array of shape ``(height, width)`` holding each cell's open-side count."""
    degrees = np.zeros((maze.height, maze.width), dtype=np.int64)
    for position, cell in maze.cells():
        degrees[position.y, position.x] = sum(1 for d in DIRECTIONS if not cell.has_wall(d))
    return degrees


def cells_of_degree(maze: Maze, degree: int) -> list[Position]:
    """Positions whose degree equals ``degree``, row-major."""
    return [Position(int(x), int(y)) for y, x in np.argwhere(degree_grid(maze) == degree)]


def analyze_distribution(maze: Maze) -> DegreeDistribution:
    """
    Compute the degree histogram of ``maze``.

    Returns:
        DegreeDistribution whose four ratios sum to 1.0 whenever no cell is
        fully walled
    """
    histogram = np.bincount(degree_grid(maze).ravel(), minlength=5)
    total_cells = maze.total_cells

    counts = {name: int(histogram[degree]) for degree, name in DEGREE_NAMES.items()}
    counts["isolated"] = int(histogram[0])

    return DegreeDistribution(
        dead_ends=counts["dead_ends"] / total_cells,
        straight=counts["straight"] / total_cells,
        three_way=counts["three_way"] / total_cells,
        four_way=counts["four_way"] / total_cells,
        counts=counts,
        total_cells=total_cells,
    )
