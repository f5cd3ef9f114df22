"""
Raster and text renditions of a maze.

``to_numpy_array`` produces the wall/passage grid used for printing and
image export; ``to_ascii`` is a quick terminal view.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from gridmaze.core.directions import Direction
from gridmaze.core.maze import Maze

if TYPE_CHECKING:
    from numpy.typing import NDArray


def to_numpy_array(maze: Maze, wall_thickness: int = 1) -> NDArray[np.int32]:
    """
    Convert maze to numpy array representation.

    Each cell becomes a ``wall_thickness`` square of passage surrounded by
    wall bands of the same thickness shared with its neighbors. Entrance
    and exit openings show up as gaps in the outer band.

    Args:
        maze: Maze to convert
        wall_thickness: Thickness of walls and passages in pixels

    Returns:
        Array of shape ``(2 * height + 1, 2 * width + 1) * wall_thickness``
        where 1 = wall, 0 = passage
    """
    if wall_thickness < 1:
        raise ValueError(f"wall_thickness must be positive, got {wall_thickness}")

    t = wall_thickness
    raster = np.ones(((2 * maze.height + 1) * t, (2 * maze.width + 1) * t), dtype=np.int32)

    for position, cell in maze.cells():
        r_start = (2 * position.y + 1) * t
        c_start = (2 * position.x + 1) * t

        raster[r_start : r_start + t, c_start : c_start + t] = 0

        if not cell.has_wall(Direction.NORTH):
            raster[r_start - t : r_start, c_start : c_start + t] = 0
        if not cell.has_wall(Direction.SOUTH):
            raster[r_start + t : r_start + 2 * t, c_start : c_start + t] = 0
        if not cell.has_wall(Direction.WEST):
            raster[r_start : r_start + t, c_start - t : c_start] = 0
        if not cell.has_wall(Direction.EAST):
            raster[r_start : r_start + t, c_start + t : c_start + 2 * t] = 0

    return raster


def to_ascii(maze: Maze, wall: str = "#", passage: str = " ") -> str:
    """Render ``maze`` as text, one character per raster pixel."""
    raster = to_numpy_array(maze)
    return "\n".join("".join(wall if value else passage for value in row) for row in raster)
