"""Sprite textures and the atlases that hold them."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Union


class Texture(IntEnum):
    """Tiles of the main atlas, valued by their atlas index."""

    PLAYER = 0
    BLANK = 1
    DWARF = 2
    SNAKE = 3
    GOBLIN = 4
    GROUND = 5
    BRICK = 6
    SOIL = 7
    GRASS = 8
    FLOWER = 9
    GRASS2 = 10
    FLOWER2 = 11
    DOOR_N = 12
    DOOR_E = 13
    DOOR_S = 14
    DOOR_W = 15


@dataclass(frozen=True)
class WallTexture:
    """A quarter wall piece from the wall atlas.

    `top` selects the upper half, `horz_wall` and `vert_wall` say whether the
    piece connects sideways or vertically, `corner` whether its diagonal is walled.
    """

    top: bool
    horz_wall: bool
    vert_wall: bool
    corner: bool


AnyTexture = Union[Texture, WallTexture]


def atlas_index(texture: AnyTexture) -> int:
    """Index of `texture` within its atlas."""
    if isinstance(texture, WallTexture):
        top_offset = 0 if texture.top else 5
        if texture.corner and texture.horz_wall and texture.vert_wall:
            return top_offset + 4
        horz_offset = 0 if texture.horz_wall else 2
        vert_offset = 0 if texture.vert_wall else 1
        return top_offset + horz_offset + vert_offset
    return int(texture)


@dataclass(frozen=True)
class TextureAtlas:
    """A layout together with the index of one region in it."""

    layout: Any
    index: int


@dataclass(frozen=True)
class Atlas:
    """An atlas image paired with its layout."""

    texture: Any
    layout: Any

    def get_sprite_data(self, texture: AnyTexture) -> tuple[Any, TextureAtlas]:
        """Return the atlas image and the region for `texture`."""
        return self.texture, TextureAtlas(layout=self.layout, index=atlas_index(texture))


class GlobalAtlasIndex(IntEnum):
    """Position of each atlas in the global atlas list."""

    MAIN = 0
    WALL = 1


@dataclass
class GlobalAtlas:
    """Every atlas the game draws from."""

    atlases: list[Atlas] = field(default_factory=list)

    def add_atlas(self, atlas: Atlas) -> None:
        """Append an atlas to the list."""
        self.atlases.append(atlas)

    def sprite_from_atlas(
        self, index: GlobalAtlasIndex, texture: AnyTexture
    ) -> tuple[Any, TextureAtlas]:
        """Look up `texture` in the atlas at `index`."""
        return self.atlases[int(index)].get_sprite_data(texture)


@dataclass
class AtlasSprite:
    """A sprite drawn from an atlas texture."""

    texture: AnyTexture
    flip_x: bool = False
    flip_y: bool = False