"""Quarter pieces that make up a wall tile."""

from __future__ import annotations

from dataclasses import dataclass

from casgame.core import OctCompass
from casgame.grid import Vec3
from casgame.texture import AtlasSprite, WallTexture


@dataclass
class WallPiece:
    """One quarter of a wall tile and its offset from the tile centre."""

    sprite: AtlasSprite
    offset: Vec3


def wall_piece(top: bool, left: bool, neighbour: OctCompass) -> WallPiece:
    """Choose the wall piece for one quarter given the neighbouring walls."""
    vert_wall = neighbour.north if top else neighbour.south
    horz_wall = neighbour.west if left else neighbour.east

    corner = {
        (True, True): neighbour.north_west,
        (True, False): neighbour.north_east,
        (False, True): neighbour.south_west,
        (False, False): neighbour.south_east,
    }[(bool(top), bool(left))]

    x = -2.0 if left else 2.0
    y = 2.5 if top else -1.5

    return WallPiece(
        sprite=AtlasSprite(
            texture=WallTexture(
                top=top,
                horz_wall=bool(horz_wall),
                vert_wall=bool(vert_wall),
                corner=bool(corner),
            ),
            flip_x=False,
            flip_y=left,
        ),
        offset=(x, y, -10.0),
    )