"""
Grid directions and positions.

Coordinates are ``(x, y)`` with ``x`` growing east and ``y`` growing south,
so North is ``dy = -1``.
"""

from __future__ import annotations

from enum import Enum
from typing import NamedTuple


class Direction(Enum):
    """The four ordinal directions a cell wall can face."""

    NORTH = "N"
    EAST = "E"
    SOUTH = "S"
    WEST = "W"

    @property
    def dx(self) -> int:
        return _OFFSETS[self][0]

    @property
    def dy(self) -> int:
        return _OFFSETS[self][1]

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]

    @classmethod
    def from_letter(cls, letter: str) -> Direction:
        """Parse ``"N"``, ``"E"``, ``"S"`` or ``"W"`` (case-insensitive)."""
        return cls(letter.upper())


_OFFSETS = {
    Direction.NORTH: (0, -1),
    Direction.EAST: (1, 0),
    Direction.SOUTH: (0, 1),
    Direction.WEST: (-1, 0),
}

_OPPOSITES = {
    Direction.NORTH: Direction.SOUTH,
    Direction.EAST: Direction.WEST,
    Direction.SOUTH: Direction.NORTH,
    Direction.WEST: Direction.EAST,
}

# Canonical ordering used for serialization and deterministic iteration
DIRECTIONS: tuple[Direction, ...] = (Direction.NORTH, Direction.EAST, Direction.SOUTH, Direction.WEST)

# Boundary side preferences for the entrance and exit openings
START_PREFERENCE: tuple[Direction, ...] = (Direction.WEST, Direction.NORTH, Direction.SOUTH, Direction.EAST)
FINISH_PREFERENCE: tuple[Direction, ...] = (Direction.EAST, Direction.SOUTH, Direction.NORTH, Direction.WEST)


class Position(NamedTuple):
    """Immutable cell coordinate."""

    x: int
    y: int

    def step(self, direction: Direction) -> Position:
        return Position(self.x + direction.dx, self.y + direction.dy)

    def to_dict(self) -> dict[str, int]:
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data) -> Position:
        return cls(int(data["x"]), int(data["y"]))
