"""Procedural map generation and the global room map."""

from __future__ import annotations

import random
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Optional, Union

from casgame.core import HEIGHT, WIDTH, CompassDir, QuadCompass
from casgame.grid import GridTransform, Vec3
from casgame.room import RoomLayout, RoomLayoutError, TileKind, load_room_layout
from casgame.texture import AtlasSprite, Texture
from casgame.wall import wall_piece

ROOM_EXTENSION = ".room"
"""File extension of room layout assets."""

GENERATOR_DEPTH = 10
"""Default number of rooms a generator may chain away from the start."""

TILE_Z = -10.0

_GROUND_TEXTURES = (Texture.BLANK,) * 7 + (Texture.SOIL, Texture.FLOWER, Texture.GRASS)

_DOOR_TEXTURES = {
    CompassDir.NORTH: Texture.DOOR_N,
    CompassDir.EAST: Texture.DOOR_E,
    CompassDir.SOUTH: Texture.DOOR_S,
    CompassDir.WEST: Texture.DOOR_W,
}

_WALL_QUARTERS = ((True, True), (True, False), (False, True), (False, False))


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def room_key(position: GridTransform) -> tuple[int, int]:
    """Room coordinates of a grid position at a room's top-left corner."""
    x, y = position.translation
    return _trunc_div(x, WIDTH), _trunc_div(y, HEIGHT)


@dataclass
class RoomList:
    """Room layouts available to the map generator."""

    layouts: list[RoomLayout] = field(default_factory=list)

    def pick_room(self, doors: QuadCompass, rng: random.Random) -> Optional[RoomLayout]:
        """Pick at random a layout whose doors are exactly `doors`."""
        matches = [layout for layout in self.layouts if layout.doors == doors]
        return rng.choice(matches) if matches else None


def load_room_list(folder: Union[str, Path]) -> RoomList:
    """Load every `.room` file in `folder`, in name order."""
    directory = Path(folder)
    try:
        paths = sorted(
            path
            for path in directory.iterdir()
            if path.suffix == ROOM_EXTENSION and path.is_file()
        )
    except OSError as exc:
        raise RoomLayoutError(f"Could not load room asset: {exc}") from exc
    return RoomList([load_room_layout(path) for path in paths])


@dataclass
class Map:
    """The generated rooms and the room the player is in."""

    curr_room_pos: tuple[int, int] = (0, 0)
    rooms: dict[tuple[int, int], RoomLayout] = field(default_factory=dict)

    def curr_room(self) -> Optional[RoomLayout]:
        """Layout of the current room, if it has been generated."""
        return self.rooms.get(self.curr_room_pos)


@dataclass
class PlacedSprite:
    """A sprite at a grid position, drawn at `offset` from the tile centre."""

    sprite: AtlasSprite
    position: GridTransform
    offset: Vec3 = (0.0, 0.0, TILE_Z)


class MapGenerator:
    """Grows a map outwards from a start room, one depth per step.

    Each generator opens random doors and leaves a child generator behind each
    one; once all generators are spent the placeholder rooms are filled with
    layouts from a room list.
    """

    def __init__(
        self,
        depth: int = GENERATOR_DEPTH,
        rng: Optional[random.Random] = None,
        origin: Optional[GridTransform] = None,
    ) -> None:
        self.rng = rng if rng is not None else random.Random()
        start = origin if origin is not None else GridTransform()
        self.generators: list[tuple[int, GridTransform]] = [(depth, start)]
        self.visited: dict[tuple[int, int], QuadCompass] = {}
        self.rooms: list[tuple[QuadCompass, GridTransform]] = []

    def is_done(self) -> bool:
        """Return True once no generator is left."""
        return not self.generators

    def _coin(self) -> bool:
        return self.rng.random() < 0.5

    def step(self) -> None:
        """Process every current generator and spawn the next depth."""
        spawned: list[tuple[int, GridTransform]] = []
        for depth, trans in self.generators:
            key = room_key(trans)
            if depth == 0 or key in self.visited:
                continue

            doors = QuadCompass(
                north=self._coin(),
                east=self._coin(),
                south=self._coin(),
                west=self._coin(),
            )
            if not doors.any():
                doors = QuadCompass(north=True, east=True, south=True, west=True)

            x, y = trans.translation
            exits = (
                (doors.north, (x, y - HEIGHT)),
                (doors.east, (x + WIDTH, y)),
                (doors.south, (x, y + HEIGHT)),
                (doors.west, (x - WIDTH, y)),
            )
            self.visited[key] = doors
            spawned.extend(
                (depth - 1, GridTransform.from_xy(cx, cy)) for is_open, (cx, cy) in exits if is_open
            )
            self.rooms.append((replace(doors), replace(trans)))
        self.generators = spawned

    def _linked(self, position: tuple[int, int], facing: str, own: bool) -> bool:
        neighbour = self.visited.get(position)
        return neighbour is not None and bool(getattr(neighbour, facing) or own)

    def fill_rooms(self, game_map: Map, room_list: RoomList) -> list[PlacedSprite]:
        """Replace placeholder rooms with layouts and return their sprites.

        Stops at the first room no layout fits; that room is dropped and the
        rest stay pending.
        """
        placed: list[PlacedSprite] = []
        while self.rooms:
            doors, trans = self.rooms.pop(0)
            cx, cy = room_key(trans)

            if self.visited:
                doors = QuadCompass(
                    north=self._linked((cx, cy - 1), "south", doors.north),
                    east=self._linked((cx + 1, cy), "west", doors.east),
                    south=self._linked((cx, cy + 1), "north", doors.south),
                    west=self._linked((cx - 1, cy), "east", doors.west),
                )
                self.visited[(cx, cy)] = doors

            layout = room_list.pick_room(doors, self.rng)
            if layout is None:
                break

            game_map.rooms[(cx, cy)] = layout
            placed.extend(self._room_sprites(layout, trans))
        return placed

    def _room_sprites(self, layout: RoomLayout, trans: GridTransform) -> list[PlacedSprite]:
        ox, oy = trans.translation
        fixed: list[PlacedSprite] = []
        ground: list[PlacedSprite] = []

        for y, row in enumerate(layout.layout):
            for x, tile in enumerate(row):
                position = GridTransform.from_xy(x + ox, y + oy)
                if tile.kind is TileKind.GROUND:
                    texture = self.rng.choice(_GROUND_TEXTURES)
                    ground.append(PlacedSprite(AtlasSprite(texture), position))
                elif tile.kind is TileKind.WALL:
                    neighbour = layout.get_neighbour_wall(x, y)
                    for top, left in _WALL_QUARTERS:
                        piece = wall_piece(top, left, neighbour)
                        fixed.append(PlacedSprite(piece.sprite, position, piece.offset))
                else:
                    texture = _DOOR_TEXTURES.get(tile.door)
                    if texture is None:
                        raise ValueError(f"door tile without a cardinal direction: {tile.door}")
                    fixed.append(PlacedSprite(AtlasSprite(texture), position))

        return fixed + ground