# casgame

casgame is a small top-down dungeon crawler. At start-up it generates a dungeon as a grid of
rooms. Each room is a 21 × 13 tile screen, and doors connect it to the rooms next to it. You walk
from room to room, and the camera re-centres on the room you are in.

## Installing

```
pip install .
```

To install the test tools as well:

```
pip install ".[test]"
```

## Playing

```
casgame
```

Options:

- `--assets DIR`: the asset directory. The default is `assets` in the current directory.
- `--seed N`: the random seed for map generation. Without it, each run gives a different map.

Move with `W`/`A`/`S`/`D` or the arrow keys. Each step is animated. A key press is ignored while
the previous step is still animating.

When you step onto a door tile, the current room changes to the neighbouring room and you jump
three tiles in the direction you moved. Walls block movement.

The game reads its textures and room layouts from the asset directory:

- `textures/atlas.png`: the main sprite sheet. It is a grid of 8-pixel tiles with 2 pixels of
  padding and a 1-pixel offset. The grid size comes from the width and height in the PNG header.
- `textures/wall_atlas.png`: the sheet of wall quarter pieces.
- `rooms/*.room`: the room layouts. They are loaded in file-name order.

## Room files

A `.room` file is plain ASCII:

- The first line lists the room's doors. It can use any of `N`, `E`, `S` and `W`, and may be
  empty.
- Each following line is one row of the room's interior. There must be 11 rows of 19 characters
  each:
  - `.` is ground.
  - `#` is wall.

The loader adds the outer wall itself. Each door goes in the middle of its side.

Loading fails with `casgame.room.RoomLayoutError` in these cases:

- a character is not ASCII;
- a door or tile character is not one of the above;
- a row or the room has the wrong size;
- the file is empty;
- the file cannot be read.

```
NS
...................
.........#.........
...
```

For each room it generates, the dungeon generator chooses a layout whose doors exactly match the
links to that room's neighbours. Provide layouts for the door combinations you want to appear. If
no layout fits a room, filling stops at that room.

## Using the library

You can use the parts below without opening the game window:

- `casgame.room`:
  - `parse_room_layout(data, path)` and `load_room_layout(path)` read room files and return a
    `RoomLayout`.
  - `RoomLayout.get_tile(x, y)` returns the tile at a position. Positions outside the room count
    as walls.
  - `RoomLayout.get_neighbour_wall(x, y)` gives the surrounding walls as an `OctCompass`.
- `casgame.map`:
  - `load_room_list(folder)` collects the `.room` files in a folder into a `RoomList`.
  - `MapGenerator(depth, rng, origin)` grows a dungeon one depth per `step()`.
  - `MapGenerator.fill_rooms(game_map, room_list)` places layouts into a `Map` and returns the
    `PlacedSprite`s to draw.
- `casgame.grid.GridTransform` holds grid positions. It provides `translate`, `shift`, `as_vec3`
  and `as_vec3_with_z` (world coordinates).
- `casgame.animation`:
  - `TransformAnimation` eases a position between two grid cells.
  - `ease(function, t)` applies an `EaseFunction` curve.
- `casgame.texture`, for textures and atlases:
  - `Texture` and `WallTexture` name the textures.
  - `atlas_index` maps a texture to its atlas index.
  - `Atlas`, `GlobalAtlas` and `AtlasSprite` hold the atlases and sprites.
- `casgame.atlas`:
  - `TextureAtlasLayout` describes the regions of an atlas image.
  - `read_png_size` reads the size from a PNG header.
  - `create_global_atlas(assets_dir)` builds the atlases.
  - `atlas_to_sprite` resolves sprites to atlas regions.
- `casgame.wall.wall_piece(top, left, neighbour)` chooses the quarter piece of a wall tile.
- `casgame.render.is_visible(camera, position)` tells whether a position is within the visible
  area around the camera.
- `casgame.game.Game` holds the playable state. It has `handle_key`, `update` and
  `update_camera`, and it works without a window.

## What it does not do

- There are no enemies, combat, items or goals. The dwarf, snake and goblin textures exist in
  `Texture` but nothing uses them.
- There is no sound, no saving or loading of a game, and no menu.
- The window draws every placed sprite each frame. It does not use `is_visible` for culling.

## Running the tests

```
pytest
```