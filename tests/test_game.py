import itertools
import random

import pytest

from casgame.core import HEIGHT, WIDTH
from casgame.game import Game, Player
from casgame.map import RoomList
from casgame.room import parse_room_layout
from casgame.texture import Texture

INTERIOR = ("." * (WIDTH - 2) + "\n") * (HEIGHT - 2)
MID_X = (WIDTH - 1) // 2
MID_Y = (HEIGHT - 1) // 2


def layout(doors: str):
    return parse_room_layout((doors + "\n" + INTERIOR).encode("ascii"))


def full_room_list() -> RoomList:
    names = (
        "".join(c for c, on in zip("NESW", flags) if on)
        for flags in itertools.product((False, True), repeat=4)
    )
    return RoomList([layout(name) for name in names])


def game_with_room(doors: str = "NESW") -> Game:
    game = Game(full_room_list(), rng=random.Random(0), depth=0)
    game.map.rooms[(0, 0)] = layout(doors)
    return game


def finish_animation(game: Game) -> None:
    game.update(1.0)


def test_player_defaults():
    player = Player()
    assert player.transform.translation == (1, 1)
    assert player.sprite.texture is Texture.PLAYER
    assert player.animation.is_idle()


def test_initial_camera_centred():
    game = Game(RoomList([]), rng=random.Random(0))
    assert game.camera.translation == (WIDTH // 2, HEIGHT // 2)


def test_move_onto_ground():
    game = game_with_room()
    assert game.handle_key("d") is True
    assert game.player.transform.translation == (2, 1)
    assert game.player.animation.duration == pytest.approx(0.1)
    assert game.player.animation.old_transform.translation == (1, 1)


def test_busy_animation_ignores_keys():
    game = game_with_room()
    game.handle_key("d")
    assert game.handle_key("s") is False
    assert game.player.transform.translation == (2, 1)


def test_wall_blocks_but_animates():
    game = game_with_room()
    assert game.handle_key("w") is True
    assert game.player.transform.translation == (1, 1)
    assert game.player.animation.duration == pytest.approx(0.1)


def test_horizontal_moves_flip_sprite():
    game = game_with_room()
    game.handle_key("a")
    assert game.player.sprite.flip_y is True
    finish_animation(game)
    game.handle_key("right")
    assert game.player.sprite.flip_y is False


def test_unknown_key_is_ignored():
    game = game_with_room()
    assert game.handle_key("space") is False
    assert game.player.animation.is_idle()


def test_no_room_means_no_move():
    game = Game(full_room_list(), rng=random.Random(0), depth=0)
    assert game.handle_key("d") is True
    assert game.player.transform.translation == (1, 1)
    assert game.player.animation.is_idle()


def test_east_door_changes_room_and_camera():
    game = game_with_room()
    game.player.transform.translation = (WIDTH - 2, MID_Y)
    assert game.handle_key("d") is True
    assert game.map.curr_room_pos == (1, 0)
    assert game.player.transform.translation == (WIDTH - 2 + 3, MID_Y)
    assert game.player.animation.duration == pytest.approx(0.2)
    game.update_camera()
    assert game.camera.translation == (WIDTH + WIDTH // 2, HEIGHT // 2)


def test_north_door():
    game = game_with_room()
    game.player.transform.translation = (MID_X, 1)
    game.handle_key("up")
    assert game.map.curr_room_pos == (0, -1)
    assert game.player.transform.translation == (MID_X, 1 - 3)


def test_door_round_trip_and_wrapping():
    game = game_with_room()
    game.map.rooms[(1, 0)] = layout("NESW")
    start = (WIDTH - 2, MID_Y)
    game.player.transform.translation = start
    game.handle_key("d")
    finish_animation(game)
    game.handle_key("a")
    assert game.map.curr_room_pos == (0, 0)
    assert game.player.transform.translation == start


def test_move_inside_second_room_uses_local_tiles():
    game = game_with_room()
    game.map.rooms[(1, 0)] = layout("NESW")
    game.player.transform.translation = (WIDTH - 2, MID_Y)
    game.handle_key("d")
    entered = game.player.transform.translation
    finish_animation(game)
    game.handle_key("d")
    assert game.player.transform.translation == (entered[0] + 1, entered[1])


def test_update_animates_towards_target():
    game = game_with_room()
    start = game.player.transform.as_vec3_with_z(0.0)
    game.handle_key("d")
    end = game.player.transform.as_vec3_with_z(0.0)
    game.update(0.05)
    assert start[0] < game.player_position[0] < end[0]
    game.update(0.05)
    assert game.player.animation.is_idle()
    assert game.player_position == pytest.approx(end)


def test_update_camera_follows_room():
    game = game_with_room()
    game.map.curr_room_pos = (-1, 2)
    game.update_camera()
    assert game.camera.translation == (-WIDTH + WIDTH // 2, 2 * HEIGHT + HEIGHT // 2)


def test_update_generates_and_fills_map():
    game = Game(full_room_list(), rng=random.Random(3))
    for _ in range(40):
        game.update(1.0 / 64.0)
    room = game.map.curr_room()
    assert room is not None
    assert room.doors.any()
    assert game.generator.is_done()
    assert len(game.map.rooms) == len(game.generator.visited)
    assert len(game.sprites) >= WIDTH * HEIGHT