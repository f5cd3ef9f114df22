"""
Grid maze data model.

A maze is a ``width x height`` row-major grid of cells. Each cell carries a
wall flag for each of the four ordinal directions; a shared edge between two
neighbours is walled on both sides or open on both sides. All carving goes
through ``Maze.carve`` and ``Maze.build_wall`` which toggle both sides
together, so generation code never has to think about the neighbour.

A perfect maze is a spanning tree on the grid graph:
- Connectivity: every cell reachable from ``start``
- Acyclicity: exactly ``width * height - 1`` open internal edges

Author: gridmaze Team
Date: October 2026
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import Any

from gridmaze.core.directions import (
    DIRECTIONS,
    FINISH_PREFERENCE,
    START_PREFERENCE,
    Direction,
    Position,
)
from gridmaze.utils.exceptions import ConfigurationError, StructuralError, validate_dimensions

MIN_DIMENSION = 2
MAX_DIMENSION = 1000

_WALL_ATTRIBUTES = {
    Direction.NORTH: "north",
    Direction.EAST: "east",
    Direction.SOUTH: "south",
    Direction.WEST: "west",
}


@dataclass(eq=True)
class Cell:
    """
    A single maze cell.

    Attributes:
        north: Wall present on the north side
        east: Wall present on the east side
        south: Wall present on the south side
        west: Wall present on the west side
    """

    north: bool = True
    east: bool = True
    south: bool = True
    west: bool = True

    def has_wall(self, direction: Direction) -> bool:
        return getattr(self, _WALL_ATTRIBUTES[direction])

    def add_wall(self, direction: Direction) -> None:
        setattr(self, _WALL_ATTRIBUTES[direction], True)

    def remove_wall(self, direction: Direction) -> None:
        setattr(self, _WALL_ATTRIBUTES[direction], False)

    @property
    def walls(self) -> frozenset[Direction]:
        return frozenset(d for d in DIRECTIONS if self.has_wall(d))

    @property
    def wall_count(self) -> int:
        return sum(1 for d in DIRECTIONS if self.has_wall(d))

    def open_sides(self) -> list[Direction]:
        """Directions without a wall, in N, E, S, W order."""
        return [d for d in DIRECTIONS if not self.has_wall(d)]

    def copy(self) -> Cell:
        return Cell(self.north, self.east, self.south, self.west)

    def to_dict(self) -> dict[str, list[str]]:
        return {"walls": [d.value for d in DIRECTIONS if self.has_wall(d)]}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Cell:
        present = {Direction.from_letter(letter) for letter in data.get("walls", [])}
        return cls(*(d in present for d in DIRECTIONS))


@dataclass(frozen=True)
class Portal:
    """Directed connection between two seam cells of a multi-layer maze."""

    source: Position
    target: Position
    layer_pair: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"from": self.source.to_dict(), "to": self.target.to_dict()}
        if self.layer_pair is not None:
            data["layer_pair"] = self.layer_pair
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Portal:
        return cls(
            source=Position.from_dict(data["from"]),
            target=Position.from_dict(data["to"]),
            layer_pair=data.get("layer_pair"),
        )


class Maze:
    """
    Rectangular grid of cells with a start and a finish.

    The maze owns its cells exclusively. Generators build it fully walled,
    mutate it in place, and hand it to consumers which only read it through
    ``width``, ``height``, ``get_cell``, ``start``, ``finish``, ``portals``
    and the layer metadata.
    """

    def __init__(
        self,
        width: int,
        height: int,
        start: Position | tuple[int, int] | None = None,
        finish: Position | tuple[int, int] | None = None,
    ):
        validate_dimensions(width, height, max_size=MAX_DIMENSION, min_size=MIN_DIMENSION)

        self.width = width
        self.height = height
        self._cells: list[list[Cell]] = [[Cell() for _ in range(width)] for _ in range(height)]
        self.start = self._resolve_position(start, Position(0, 0), "start")
        self.finish = self._resolve_position(finish, Position(width - 1, height - 1), "finish")

        self.portals: list[Portal] = []
        self.layers: int | None = None
        self.width_per_layer: int | None = None
        self.height_per_layer: int | None = None

    def _resolve_position(self, value, default: Position, name: str) -> Position:
        if value is None:
            return default
        if isinstance(value, Mapping):
            position = Position.from_dict(value)
        else:
            position = Position(*value)
        if not self.in_bounds(position.x, position.y):
            raise ConfigurationError(
                parameter_name=name,
                provided_value=tuple(position),
                reason=f"outside the {self.width}x{self.height} grid",
            )
        return position

    def __repr__(self) -> str:
        return f"Maze(width={self.width}, height={self.height}, start={tuple(self.start)}, finish={tuple(self.finish)})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Maze):
            return NotImplemented
        return (
            self.width == other.width
            and self.height == other.height
            and self.start == other.start
            and self.finish == other.finish
            and self._cells == other._cells
            and self.portals == other.portals
            and self.layers == other.layers
            and self.width_per_layer == other.width_per_layer
            and self.height_per_layer == other.height_per_layer
        )

    __hash__ = None  # type: ignore[assignment]

    @property
    def total_cells(self) -> int:
        return self.width * self.height

    # Cell access

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get_cell(self, x: int, y: int) -> Cell | None:
        """
        Get cell at position.

        Returns:
            Cell if valid position, None otherwise
        """
        if self.in_bounds(x, y):
            return self._cells[y][x]
        return None

    def set_cell(self, x: int, y: int, cell: Cell) -> None:
        """Replace the cell at ``(x, y)``; out-of-bounds positions are ignored."""
        if not isinstance(cell, Cell):
            raise TypeError(f"Expected Cell, got {type(cell).__name__}")
        if self.in_bounds(x, y):
            self._cells[y][x] = cell

    def positions(self) -> Iterator[Position]:
        """All positions in row-major order."""
        for y in range(self.height):
            for x in range(self.width):
                yield Position(x, y)

    def cells(self) -> Iterator[tuple[Position, Cell]]:
        for y, row in enumerate(self._cells):
            for x, cell in enumerate(row):
                yield Position(x, y), cell

    def neighbor(self, x: int, y: int, direction: Direction) -> Position | None:
        nx, ny = x + direction.dx, y + direction.dy
        if self.in_bounds(nx, ny):
            return Position(nx, ny)
        return None

    def neighbors(self, x: int, y: int) -> Iterator[tuple[Direction, Position]]:
        """In-bounds neighbours as ``(direction, position)`` pairs."""
        for direction in DIRECTIONS:
            position = self.neighbor(x, y, direction)
            if position is not None:
                yield direction, position

    def open_neighbors(self, x: int, y: int) -> Iterator[Position]:
        """In-bounds neighbours reachable through an open side."""
        cell = self._cells[y][x]
        for direction, position in self.neighbors(x, y):
            if not cell.has_wall(direction):
                yield position

    def degree(self, x: int, y: int) -> int:
        """Number of open sides, boundary openings included."""
        return 4 - self._cells[y][x].wall_count

    def internal_edges(self) -> Iterator[tuple[Position, Direction]]:
        """Every internal edge once, as ``(position, EAST | SOUTH)``."""
        for y in range(self.height):
            for x in range(self.width):
                if x + 1 < self.width:
                    yield Position(x, y), Direction.EAST
                if y + 1 < self.height:
                    yield Position(x, y), Direction.SOUTH

    # Carving

    def _require_cell(self, x: int, y: int) -> Cell:
        cell = self.get_cell(x, y)
        if cell is None:
            raise StructuralError(
                f"No cell at ({x}, {y})",
                diagnostic_data={"width": self.width, "height": self.height},
            )
        return cell

    def carve(self, x: int, y: int, direction: Direction) -> None:
        """Open the wall on ``direction`` and the matching wall of the neighbour."""
        self._require_cell(x, y).remove_wall(direction)
        other = self.neighbor(x, y, direction)
        if other is not None:
            self._cells[other.y][other.x].remove_wall(direction.opposite)

    def build_wall(self, x: int, y: int, direction: Direction) -> None:
        """Close the wall on ``direction`` and the matching wall of the neighbour."""
        self._require_cell(x, y).add_wall(direction)
        other = self.neighbor(x, y, direction)
        if other is not None:
            self._cells[other.y][other.x].add_wall(direction.opposite)

    def fill_walls(self) -> None:
        for row in self._cells:
            for cell in row:
                for direction in DIRECTIONS:
                    cell.add_wall(direction)

    # Boundary

    def boundary_side(self, position: Position, preference: Iterable[Direction] = DIRECTIONS) -> Direction | None:
        """First direction in ``preference`` that leaves the grid from ``position``."""
        for direction in preference:
            if self.neighbor(position.x, position.y, direction) is None:
                return direction
        return None

    def seal_boundary(self) -> None:
        for x in range(self.width):
            self._cells[0][x].add_wall(Direction.NORTH)
            self._cells[self.height - 1][x].add_wall(Direction.SOUTH)
        for y in range(self.height):
            self._cells[y][0].add_wall(Direction.WEST)
            self._cells[y][self.width - 1].add_wall(Direction.EAST)

    def open_entrances(self) -> tuple[Direction | None, Direction | None]:
        """
        Open one boundary side at ``start`` and one at ``finish``.

        Start prefers W, N, S, E and finish prefers E, S, N, W, so the
        default corners get a west entrance and an east exit.

        Returns:
            The opened sides (None where the position is not on the boundary)
        """
        start_side = self.boundary_side(self.start, START_PREFERENCE)
        if start_side is not None:
            self._cells[self.start.y][self.start.x].remove_wall(start_side)

        finish_side = self.boundary_side(self.finish, FINISH_PREFERENCE)
        if finish_side is not None:
            self._cells[self.finish.y][self.finish.x].remove_wall(finish_side)

        return start_side, finish_side

    # Validation

    def is_valid(self) -> bool:
        """
        Cheap structural check, never raises.

        Dimensions are integers >= 2, the grid is fully populated with
        cells, start and finish are in bounds, and at least one cell has
        an open side.
        """
        for value in (self.width, self.height):
            if isinstance(value, bool) or not isinstance(value, int) or value < MIN_DIMENSION:
                return False

        if not isinstance(self._cells, list) or len(self._cells) != self.height:
            return False
        for row in self._cells:
            if not isinstance(row, list) or len(row) != self.width:
                return False
            if not all(isinstance(cell, Cell) for cell in row):
                return False

        for position in (self.start, self.finish):
            if not isinstance(position, tuple) or len(position) != 2:
                return False
            if not self.in_bounds(position[0], position[1]):
                return False

        return any(cell.wall_count < 4 for row in self._cells for cell in row)

    # Serialization

    def to_dict(self) -> dict[str, Any]:
        """Plain-data snapshot suitable for JSON."""
        data: dict[str, Any] = {
            "width": self.width,
            "height": self.height,
            "cells": [[cell.to_dict() for cell in row] for row in self._cells],
            "start": self.start.to_dict(),
            "finish": self.finish.to_dict(),
        }
        if self.portals:
            data["portals"] = [portal.to_dict() for portal in self.portals]
        if self.layers is not None:
            data["layers"] = self.layers
            data["width_per_layer"] = self.width_per_layer
            data["height_per_layer"] = self.height_per_layer
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Maze:
        """Rebuild a maze from ``to_dict`` output without re-running an algorithm."""
        maze = cls(data["width"], data["height"], start=data.get("start"), finish=data.get("finish"))

        rows = data["cells"]
        if len(rows) != maze.height or any(len(row) != maze.width for row in rows):
            raise ConfigurationError(
                parameter_name="cells",
                provided_value=f"{len(rows)} rows",
                reason=f"cell data does not match {maze.width}x{maze.height}",
            )
        maze._cells = [[Cell.from_dict(cell) for cell in row] for row in rows]

        maze.portals = [Portal.from_dict(p) for p in data.get("portals", [])]
        maze.layers = data.get("layers")
        maze.width_per_layer = data.get("width_per_layer")
        maze.height_per_layer = data.get("height_per_layer")
        return maze

    def copy(self) -> Maze:
        duplicate = Maze(self.width, self.height, start=self.start, finish=self.finish)
        duplicate._cells = [[cell.copy() for cell in row] for row in self._cells]
        duplicate.portals = list(self.portals)
        duplicate.layers = self.layers
        duplicate.width_per_layer = self.width_per_layer
        duplicate.height_per_layer = self.height_per_layer
        return duplicate


def create_maze(
    width: int,
    height: int,
    start: Position | tuple[int, int] | None = None,
    finish: Position | tuple[int, int] | None = None,
) -> Maze:
    """
    Create a fully walled maze.

    Args:
        width: Number of columns, integer in [2, 1000]
        height: Number of rows, integer in [2, 1000]
        start: Start position, defaults to (0, 0)
        finish: Finish position, defaults to (width - 1, height - 1)

    Raises:
        ConfigurationError: If a dimension or position is invalid
    """
    return Maze(width, height, start=start, finish=finish)
