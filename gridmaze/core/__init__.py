"""Grid maze data model."""

from .directions import DIRECTIONS, Direction, Position
from .maze import MAX_DIMENSION, MIN_DIMENSION, Cell, Maze, Portal, create_maze
from .union_find import UnionFind

__all__ = [
    "DIRECTIONS",
    "MAX_DIMENSION",
    "MIN_DIMENSION",
    "Cell",
    "Direction",
    "Maze",
    "Portal",
    "Position",
    "UnionFind",
    "create_maze",
]
