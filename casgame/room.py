"""Room layouts and the loader for `.room` files."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from pathlib import Path
from typing import Optional, Union

from casgame.core import HEIGHT, WIDTH, CompassDir, OctCompass, QuadCompass


class TileKind(Enum):
    """The kinds of tile a room can hold."""

    WALL = auto()
    GROUND = auto()
    DOOR = auto()


@dataclass(frozen=True)
class TileType:
    """A room tile; doors carry the direction they lead to."""

    kind: TileKind
    door: Optional[CompassDir] = None

    def is_wall(self) -> bool:
        """Return True if the tile is a wall."""
        return self.kind is TileKind.WALL


WALL_TILE = TileType(TileKind.WALL)
GROUND_TILE = TileType(TileKind.GROUND)


def door_tile(direction: CompassDir) -> TileType:
    """A door tile leading in `direction`."""
    return TileType(TileKind.DOOR, direction)


class RoomLayoutError(Exception):
    """A room asset could not be read or parsed."""


_DOOR_CHARS = {"N": "north", "E": "east", "S": "south", "W": "west"}
_TILE_CHARS = {".": GROUND_TILE, "#": WALL_TILE}


@dataclass(frozen=True)
class RoomLayout:
    """Doors and tiles of a room, HEIGHT rows of WIDTH tiles."""

    doors: QuadCompass
    layout: tuple[tuple[TileType, ...], ...]

    def get_tile(self, x: int, y: int) -> TileType:
        """Tile at (x, y); positions outside the room are walls."""
        if 0 <= y < len(self.layout) and 0 <= x < len(self.layout[y]):
            return self.layout[y][x]
        return WALL_TILE

    def _wall_status(self, x: int, y: int, shortcut: bool, dx: int, dy: int) -> bool:
        if shortcut:
            return True
        return self.get_tile(x + dx, y + dy).kind in (TileKind.WALL, TileKind.DOOR)

    def get_neighbour_wall(self, x: int, y: int) -> OctCompass:
        """Which neighbours of (x, y) are walls or doors."""
        is_top = y == 0
        is_left = x == 0
        is_bottom = y == HEIGHT
        is_right = x == WIDTH
        status = self._wall_status
        return OctCompass(
            north=status(x, y, is_top, 0, -1),
            east=status(x, y, is_right, 1, 0),
            south=status(x, y, is_bottom, 0, 1),
            west=status(x, y, is_left, -1, 0),
            north_east=status(x, y, is_top and is_right, 1, -1),
            south_east=status(x, y, is_bottom and is_right, 1, 1),
            south_west=status(x, y, is_bottom and is_left, -1, 1),
            north_west=status(x, y, is_top and is_left, -1, -1),
        )


def _lines(text: str) -> list[str]:
    if not text:
        return []
    parts = text.split("\n")
    if parts[-1] == "":
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


def parse_room_layout(data: bytes, path: str = "") -> RoomLayout:
    """Parse the contents of a `.room` file.

    The first line lists the doors (N, E, S, W); the others are the room's
    interior, `.` for ground and `#` for wall. A wall border is added around it.
    """
    if not data.isascii():
        raise RoomLayoutError(f"Invalid character in room asset: {path}")

    lines = _lines(data.decode("ascii"))
    if not lines:
        raise RoomLayoutError(f"Room asset is empty: {path}")

    doors = QuadCompass()
    for char in lines[0]:
        if char not in _DOOR_CHARS:
            raise RoomLayoutError(f"Invalid door character in room asset: {char}")
        setattr(doors, _DOOR_CHARS[char], True)

    grid: list[list[TileType]] = [[WALL_TILE] * WIDTH]
    for line in lines[1:]:
        row = [WALL_TILE]
        for char in line:
            if char not in _TILE_CHARS:
                raise RoomLayoutError(f"Invalid tile character in room asset: {char}")
            row.append(_TILE_CHARS[char])
        row.append(WALL_TILE)
        grid.append(row)
    grid.append([WALL_TILE] * WIDTH)

    for row in grid:
        if len(row) != WIDTH:
            raise RoomLayoutError(
                f"Tile map have incorrect width, expected {WIDTH}, but recieved {len(row)}"
            )
    if len(grid) != HEIGHT:
        raise RoomLayoutError(
            f"Tile map have incorrect height, expected {HEIGHT}, but recieved {len(grid)}"
        )

    horz_mid = (WIDTH - 1) // 2
    vert_mid = (HEIGHT - 1) // 2
    if doors.north:
        grid[0][horz_mid] = door_tile(CompassDir.NORTH)
    if doors.east:
        grid[vert_mid][WIDTH - 1] = door_tile(CompassDir.EAST)
    if doors.south:
        grid[HEIGHT - 1][horz_mid] = door_tile(CompassDir.SOUTH)
    if doors.west:
        grid[vert_mid][0] = door_tile(CompassDir.WEST)

    return RoomLayout(doors=doors, layout=tuple(tuple(row) for row in grid))


def load_room_layout(path: Union[str, Path]) -> RoomLayout:
    """Read and parse a `.room` file."""
    try:
        data = Path(path).read_bytes()
    except OSError as exc:
        raise RoomLayoutError(f"Could not load room asset: {exc}") from exc
    return parse_room_layout(data, str(path))