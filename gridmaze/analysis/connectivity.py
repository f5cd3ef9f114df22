"""
Connectivity oracle for grid mazes.

Breadth-first traversal from ``start`` over open internal edges. Boundary
openings never lead anywhere and portals are realized as open seam walls,
so plain in-bounds adjacency is the whole graph. Every correctness claim
made by the post-processors reduces to ``is_connected``.
"""

from __future__ import annotations

from collections import deque

from gridmaze.core.directions import DIRECTIONS, FINISH_PREFERENCE, START_PREFERENCE, Direction, Position
from gridmaze.core.maze import Maze
from gridmaze.utils.exceptions import ConnectivityError


def reachable_cells(maze: Maze, origin: Position | tuple[int, int] | None = None) -> set[Position]:
    """
    Positions reachable from ``origin`` (default ``maze.start``).

    Args:
        maze: Maze to traverse
        origin: Starting position

    Returns:
        Set of reachable positions, origin included
    """
    origin = Position(*origin) if origin is not None else maze.start
    visited = {origin}
    queue = deque([origin])

    while queue:
        current = queue.popleft()
        for neighbor in maze.open_neighbors(current.x, current.y):
            if neighbor not in visited:
                visited.add(neighbor)
                queue.append(neighbor)

    return visited


def is_connected(maze: Maze) -> bool:
    """True iff every cell is reachable from ``start``."""
    return len(reachable_cells(maze)) == maze.total_cells


def are_linked(maze: Maze, a: Position, b: Position) -> bool:
    """True iff a path of open edges joins ``a`` and ``b``; stops as soon as ``b`` is found."""
    if a == b:
        return True
    visited = {a}
    queue = deque([a])

    while queue:
        current = queue.popleft()
        for neighbor in maze.open_neighbors(current.x, current.y):
            if neighbor == b:
                return True
            if neighbor not in visited:
                visited.add(neighbor)
                queue.append(neighbor)

    return False


def is_solvable(maze: Maze) -> bool:
    """True iff ``finish`` can be reached from ``start``."""
    return are_linked(maze, maze.start, maze.finish)


def count_open_edges(maze: Maze) -> int:
    """Number of open internal edges, each counted once via its E or S side."""
    return sum(1 for position, direction in maze.internal_edges() if not maze.get_cell(*position).has_wall(direction))


def verify_perfect_maze(maze: Maze) -> dict:
    """
    Verify that a maze is perfect (fully connected, no loops).

    A perfect maze must satisfy:
    1. Connectivity: All cells reachable from start
    2. Acyclicity: Exactly (n-1) passages for n cells

    Returns:
        Dictionary with verification results including:
        - is_perfect: Overall validity
        - is_connected: Connectivity check
        - is_no_loops: Acyclicity check
        - visited_cells: Number of reachable cells
        - total_cells: Total number of cells
        - passage_count: Number of passages
        - expected_passages: Expected passages for perfect maze
    """
    visited_cells = len(reachable_cells(maze))
    total_cells = maze.total_cells
    passage_count = count_open_edges(maze)
    expected_passages = total_cells - 1

    connected = visited_cells == total_cells
    no_loops = passage_count == expected_passages

    return {
        "is_perfect": connected and no_loops,
        "is_connected": connected,
        "is_no_loops": no_loops,
        "visited_cells": visited_cells,
        "total_cells": total_cells,
        "passage_count": passage_count,
        "expected_passages": expected_passages,
    }


def check_wall_symmetry(maze: Maze) -> list[tuple[Position, Direction]]:
    """Internal edges walled on one side only, as ``(position, E | S)``."""
    offending = []
    for position, direction in maze.internal_edges():
        other = position.step(direction)
        here = maze.get_cell(*position).has_wall(direction)
        there = maze.get_cell(*other).has_wall(direction.opposite)
        if here != there:
            offending.append((position, direction))
    return offending


def validate_boundary_walls(maze: Maze) -> bool:
    """
    Every outer boundary wall is present except the entrance and exit.

    The entrance is the side ``Maze.open_entrances`` opens at ``start``
    and the exit the side it opens at ``finish``.
    """
    allowed = set()
    start_side = maze.boundary_side(maze.start, START_PREFERENCE)
    if start_side is not None:
        allowed.add((maze.start, start_side))
    finish_side = maze.boundary_side(maze.finish, FINISH_PREFERENCE)
    if finish_side is not None:
        allowed.add((maze.finish, finish_side))

    for position, cell in maze.cells():
        for direction in DIRECTIONS:
            if maze.neighbor(position.x, position.y, direction) is not None:
                continue
            if not cell.has_wall(direction) and (position, direction) not in allowed:
                return False
    return True


def require_connected(maze: Maze, algorithm_name: str | None = None, stage: str | None = None) -> None:
    """
    Raise ``ConnectivityError`` unless every cell is reachable from start.

    Raises:
        ConnectivityError: If some cell cannot be reached
    """
    reached = len(reachable_cells(maze))
    if reached != maze.total_cells:
        raise ConnectivityError(reached, maze.total_cells, algorithm_name=algorithm_name, stage=stage)
