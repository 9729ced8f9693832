"""Shared constants, directions and compass types."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Generic, TypeVar

TILE_SIZE = 8
"""Size of each tile in pixels."""

WIDTH = 21
"""Visible area width in tiles."""

HEIGHT = 13
"""Visible area height in tiles."""

T = TypeVar("T")


class Direction(Enum):
    """A movement direction on the grid."""

    ZERO = auto()
    UP = auto()
    LEFT = auto()
    DOWN = auto()
    RIGHT = auto()

    def is_zero(self) -> bool:
        """Return True if this is the empty direction."""
        return self is Direction.ZERO


class CompassDir(Enum):
    """The eight directions of the compass."""

    NORTH = auto()
    EAST = auto()
    SOUTH = auto()
    WEST = auto()
    NORTH_EAST = auto()
    SOUTH_EAST = auto()
    SOUTH_WEST = auto()
    NORTH_WEST = auto()


@dataclass
class QuadCompass(Generic[T]):
    """A value for each of the four cardinal directions."""

    north: Any = False
    east: Any = False
    south: Any = False
    west: Any = False

    def to_oct(self) -> OctCompass:
        """Widen to an eight-way compass; diagonals take the default value."""
        return OctCompass(
            north=self.north,
            east=self.east,
            south=self.south,
            west=self.west,
        )

    def any(self) -> bool:
        """Return True if any direction is truthy."""
        return bool(self.north or self.east or self.south or self.west)


@dataclass
class OctCompass(Generic[T]):
    """A value for each of the eight compass directions."""

    north: Any = False
    east: Any = False
    south: Any = False
    west: Any = False

    north_east: Any = False
    south_east: Any = False
    south_west: Any = False
    north_west: Any = False

    def to_quad(self) -> QuadCompass:
        """Keep only the four cardinal directions."""
        return QuadCompass(
            north=self.north,
            east=self.east,
            south=self.south,
            west=self.west,
        )