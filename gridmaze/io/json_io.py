"""JSON serialization of mazes, built on ``Maze.to_dict`` / ``Maze.from_dict``."""

from __future__ import annotations

import json
from pathlib import Path

from gridmaze.core.maze import Maze
from gridmaze.utils.logging import get_logger

logger = get_logger(__name__)


def dumps_maze(maze: Maze, indent: int | None = 2) -> str:
    return json.dumps(maze.to_dict(), indent=indent)


def loads_maze(text: str) -> Maze:
    return Maze.from_dict(json.loads(text))


def save_maze_json(maze: Maze, path: str | Path, indent: int | None = 2) -> Path:
    """
    Write ``maze`` to ``path`` as JSON, creating parent directories.

    Returns:
        The path written
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dumps_maze(maze, indent=indent), encoding="utf-8")
    logger.info(f"Saved {maze.width}x{maze.height} maze to {path}")
    return path


def load_maze_json(path: str | Path) -> Maze:
    path = Path(path)
    maze = loads_maze(path.read_text(encoding="utf-8"))
    logger.debug(f"Loaded {maze.width}x{maze.height} maze from {path}")
    return maze
