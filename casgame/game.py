"""The playable game: player movement, camera and the main loop."""

from __future__ import annotations

import argparse
import random
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Optional, Sequence

from casgame.animation import TransformAnimation
from casgame.atlas import Sprite, atlas_to_sprite, create_global_atlas
from casgame.core import HEIGHT, TILE_SIZE, WIDTH, CompassDir, Direction
from casgame.grid import GridTransform, Vec3
from casgame.map import GENERATOR_DEPTH, Map, MapGenerator, PlacedSprite, RoomList, load_room_list
from casgame.room import TileKind
from casgame.texture import AtlasSprite, GlobalAtlas, Texture

TITLE = "CAS Game"
STEP_DURATION = 0.1
DOOR_DURATION = 0.2
DOOR_JUMP = 3
FIXED_DELTA = 1.0 / 64.0
WINDOW_SIZE = (1280, 720)
FRAME_RATE = 60

KEY_DIRECTIONS = {
    "w": Direction.UP,
    "up": Direction.UP,
    "s": Direction.DOWN,
    "down": Direction.DOWN,
    "a": Direction.LEFT,
    "left": Direction.LEFT,
    "d": Direction.RIGHT,
    "right": Direction.RIGHT,
}

_DOOR_ROOM_STEP = {
    CompassDir.NORTH: (0, -1),
    CompassDir.EAST: (1, 0),
    CompassDir.SOUTH: (0, 1),
    CompassDir.WEST: (-1, 0),
}


@dataclass
class Player:
    """The player's sprite, grid position and movement animation."""

    sprite: AtlasSprite = field(default_factory=lambda: AtlasSprite(Texture.PLAYER))
    transform: GridTransform = field(default_factory=lambda: GridTransform.from_xy(1, 1))
    animation: TransformAnimation = field(default_factory=TransformAnimation)


class Game:
    """Game state: the map being generated, the player and the camera."""

    def __init__(
        self,
        room_list: RoomList,
        rng: Optional[random.Random] = None,
        depth: int = GENERATOR_DEPTH,
    ) -> None:
        self.room_list = room_list
        self.rng = rng if rng is not None else random.Random()
        self.map = Map()
        self.player = Player()
        self.camera = GridTransform.from_xy(WIDTH // 2, HEIGHT // 2)
        self.generator = MapGenerator(depth=depth, rng=self.rng)
        self.sprites: list[PlacedSprite] = []
        self.player_position: Vec3 = self.player.transform.as_vec3_with_z(0.0)

    def handle_key(self, key: str) -> bool:
        """Handle a key press; return True if it was taken as a move."""
        direction = KEY_DIRECTIONS.get(key.lower(), Direction.ZERO)
        player = self.player
        if direction.is_zero() or not player.animation.is_idle():
            return False

        old = replace(player.transform)
        hx, hy = player.transform.translate(direction, 1).translation

        room = self.map.curr_room()
        if room is None:
            return True

        duration = STEP_DURATION
        tile = room.get_tile(hx % WIDTH, hy % HEIGHT)
        if tile.kind is TileKind.GROUND:
            player.transform.shift(direction, 1)
        elif tile.kind is TileKind.DOOR:
            dx, dy = _DOOR_ROOM_STEP[tile.door]
            rx, ry = self.map.curr_room_pos
            self.map.curr_room_pos = (rx + dx, ry + dy)
            player.transform.shift(direction, DOOR_JUMP)
            duration = DOOR_DURATION

        if direction is Direction.LEFT:
            player.sprite.flip_y = True
        elif direction is Direction.RIGHT:
            player.sprite.flip_y = False

        player.animation.start(old, duration)
        return True

    def update(self, delta: float) -> None:
        """Advance generation, the camera and the player animation by one frame."""
        if self.generator.is_done():
            self.sprites.extend(self.generator.fill_rooms(self.map, self.room_list))
        else:
            self.generator.step()
        self.update_camera()
        self.player_position = self.player.animation.advance(
            delta, self.player.transform, 0.0
        )

    def update_camera(self) -> None:
        """Centre the camera on the current room."""
        rx, ry = self.map.curr_room_pos
        self.camera.translation = (rx * WIDTH + WIDTH // 2, ry * HEIGHT + HEIGHT // 2)


class _Renderer:
    """Draws the game with pygame, world y pointing up."""

    def __init__(self, pygame: Any, screen: Any, atlas: GlobalAtlas) -> None:
        self.pygame = pygame
        self.screen = screen
        self.atlas = atlas
        self.scale = screen.get_height() / (TILE_SIZE * (HEIGHT + 2))
        self._images: dict[Any, Any] = {}
        self._surfaces: dict[tuple, Any] = {}

    def _image(self, path: Any) -> Any:
        if path not in self._images:
            self._images[path] = self.pygame.image.load(str(path)).convert_alpha()
        return self._images[path]

    def _surface(self, atlas_sprite: AtlasSprite) -> Any:
        sprite = Sprite()
        atlas_to_sprite(self.atlas, [(sprite, atlas_sprite)])
        region = sprite.texture_atlas
        key = (sprite.image, region.index, sprite.flip_x, sprite.flip_y)
        if key not in self._surfaces:
            (x0, y0), (x1, y1) = region.layout.textures[region.index]
            image = self._image(sprite.image)
            surface = image.subsurface(self.pygame.Rect(x0, y0, x1 - x0, y1 - y0))
            surface = self.pygame.transform.flip(surface, sprite.flip_x, sprite.flip_y)
            size = (round((x1 - x0) * self.scale), round((y1 - y0) * self.scale))
            self._surfaces[key] = self.pygame.transform.scale(surface, size)
        return self._surfaces[key]

    def _blit(self, atlas_sprite: AtlasSprite, world: Vec3, camera: Vec3) -> None:
        surface = self._surface(atlas_sprite)
        width, height = self.screen.get_size()
        sx = (world[0] - camera[0]) * self.scale + width / 2
        sy = (camera[1] - world[1]) * self.scale + height / 2
        self.screen.blit(surface, surface.get_rect(center=(round(sx), round(sy))))

    def draw(self, game: Game) -> None:
        self.screen.fill((0, 0, 0))
        camera = game.camera.as_vec3()
        for placed in game.sprites:
            bx, by, _ = placed.position.as_vec3()
            ox, oy, oz = placed.offset
            self._blit(placed.sprite, (bx + ox, by + oy, oz), camera)
        self._blit(game.player.sprite, game.player_position, camera)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the game window."""
    parser = argparse.ArgumentParser(prog="casgame", description="Explore a generated dungeon.")
    parser.add_argument("--assets", type=Path, default=Path("assets"), help="asset directory")
    parser.add_argument("--seed", type=int, default=None, help="random seed for the map")
    args = parser.parse_args(argv)

    import pygame

    room_list = load_room_list(args.assets / "rooms")
    global_atlas = create_global_atlas(args.assets)
    game = Game(room_list, rng=random.Random(args.seed))

    pygame.init()
    try:
        screen = pygame.display.set_mode(WINDOW_SIZE)
        pygame.display.set_caption(TITLE)
        renderer = _Renderer(pygame, screen, global_atlas)
        clock = pygame.time.Clock()
        running = True
        while running:
            pressed: list[str] = []
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    pressed.append(pygame.key.name(event.key))
            game.update(FIXED_DELTA)
            for key in pressed:
                if game.handle_key(key):
                    break
            renderer.draw(game)
            pygame.display.flip()
            clock.tick(FRAME_RATE)
    finally:
        pygame.quit()
    return 0