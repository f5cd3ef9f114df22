"""Serialization and export of finished mazes."""

from .json_io import dumps_maze, load_maze_json, loads_maze, save_maze_json
from .raster import to_ascii, to_numpy_array

__all__ = ["dumps_maze", "load_maze_json", "loads_maze", "save_maze_json", "to_ascii", "to_numpy_array"]
