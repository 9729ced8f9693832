"""Atlas layouts, the global atlas setup and sprite resolution."""

from __future__ import annotations

import struct
from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Optional, Union

from casgame.core import TILE_SIZE
from casgame.texture import (
    Atlas,
    AtlasSprite,
    GlobalAtlas,
    GlobalAtlasIndex,
    TextureAtlas,
    WallTexture,
)

UVec2 = tuple[int, int]
Rect = tuple[UVec2, UVec2]

_PNG_SIZE_OFFSET = 16


@dataclass
class TextureAtlasLayout:
    """Size of an atlas image and the rectangles of its regions."""

    size: UVec2
    textures: list[Rect] = field(default_factory=list)

    @classmethod
    def from_grid(
        cls,
        tile_size: UVec2,
        columns: int,
        rows: int,
        padding: Optional[UVec2],
        offset: Optional[UVec2],
    ) -> TextureAtlasLayout:
        """Build a layout of `columns` x `rows` equally sized tiles."""
        tile_w, tile_h = tile_size
        pad_x, pad_y = padding or (0, 0)
        off_x, off_y = offset or (0, 0)

        textures: list[Rect] = []
        cur_pad_x = cur_pad_y = 0
        for y in range(rows):
            if y > 0:
                cur_pad_y = pad_y
            for x in range(columns):
                if x > 0:
                    cur_pad_x = pad_x
                min_x = (tile_w + cur_pad_x) * x + off_x
                min_y = (tile_h + cur_pad_y) * y + off_y
                textures.append(((min_x, min_y), (min_x + tile_w, min_y + tile_h)))

        size = (
            (tile_w + cur_pad_x) * columns - cur_pad_x,
            (tile_h + cur_pad_y) * rows - cur_pad_y,
        )
        return cls(size=size, textures=textures)

    def add_texture(self, rect: Rect) -> int:
        """Add a region given by two corners and return its index."""
        (ax, ay), (bx, by) = rect
        self.textures.append(((min(ax, bx), min(ay, by)), (max(ax, bx), max(ay, by))))
        return len(self.textures) - 1


def read_png_size(path: Union[str, Path]) -> UVec2:
    """Read the width and height from the header of a PNG file."""
    with open(path, "rb") as f:
        f.seek(_PNG_SIZE_OFFSET)
        data = f.read(8)
    if len(data) != 8:
        raise ValueError(f"file too short to be a PNG image: {path}")
    width, height = struct.unpack(">II", data)
    return width, height


def _wall_layout() -> TextureAtlasLayout:
    layout = TextureAtlasLayout(size=(12, 30))
    for i in range(5):
        cx, cy = i * 6 + 1, 1
        layout.add_texture(((cx, cy), (cx + 4, cy + 3)))
    for i in range(5):
        cx, cy = i * 6 + 1, 6
        layout.add_texture(((cx, cy), (cx + 4, cy + 5)))
    return layout


def create_global_atlas(assets_dir: Union[str, Path]) -> GlobalAtlas:
    """Build the global atlas from the textures under `assets_dir`."""
    textures = Path(assets_dir) / "textures"
    main_path = textures / "atlas.png"
    width, height = read_png_size(main_path)

    cell = TILE_SIZE + 2
    main_atlas = Atlas(
        texture=main_path,
        layout=TextureAtlasLayout.from_grid(
            (TILE_SIZE, TILE_SIZE),
            width // cell,
            height // cell,
            (2, 2),
            (1, 1),
        ),
    )
    wall_atlas = Atlas(texture=textures / "wall_atlas.png", layout=_wall_layout())

    global_atlas = GlobalAtlas()
    global_atlas.add_atlas(main_atlas)
    global_atlas.add_atlas(wall_atlas)
    return global_atlas


@dataclass
class Sprite:
    """A drawable image, optionally restricted to one atlas region."""

    image: Any = None
    texture_atlas: Optional[TextureAtlas] = None
    flip_x: bool = False
    flip_y: bool = False


def atlas_to_sprite(
    atlas: GlobalAtlas, pairs: Iterable[tuple[Sprite, AtlasSprite]]
) -> None:
    """Update each sprite from the atlas sprite paired with it."""
    for sprite, atlas_sprite in pairs:
        texture = atlas_sprite.texture
        if sprite.texture_atlas is not None:
            index = atlas.atlases[0].get_sprite_data(texture)[1].index if False else None
            from casgame.texture import atlas_index

            sprite.texture_atlas = replace(sprite.texture_atlas, index=atlas_index(texture))
        else:
            which = (
                GlobalAtlasIndex.WALL
                if isinstance(texture, WallTexture)
                else GlobalAtlasIndex.MAIN
            )
            sprite.image, sprite.texture_atlas = atlas.sprite_from_atlas(which, texture)

        sprite.flip_x = atlas_sprite.flip_y
        sprite.flip_y = atlas_sprite.flip_x