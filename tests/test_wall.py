import pytest

from casgame.core import OctCompass
from casgame.texture import WallTexture
from casgame.wall import wall_piece

ALL = OctCompass(*([True] * 8))


def test_top_left_all_walls():
    piece = wall_piece(True, True, ALL)
    assert piece.sprite.texture == WallTexture(
        top=True, horz_wall=True, vert_wall=True, corner=True
    )
    assert piece.sprite.flip_y is True
    assert piece.sprite.flip_x is False
    assert piece.offset == (-2.0, 2.5, -10.0)


def test_bottom_right_offset_and_flip():
    piece = wall_piece(False, False, OctCompass())
    assert piece.offset == (2.0, -1.5, -10.0)
    assert piece.sprite.flip_y is False
    assert piece.sprite.texture == WallTexture(
        top=False, horz_wall=False, vert_wall=False, corner=False
    )


@pytest.mark.parametrize(
    "top,left,vert,horz,corner",
    [
        (True, True, "north", "west", "north_west"),
        (True, False, "north", "east", "north_east"),
        (False, True, "south", "west", "south_west"),
        (False, False, "south", "east", "south_east"),
    ],
)
def test_each_quarter_reads_its_own_neighbours(top, left, vert, horz, corner):
    for name, field in (("vert_wall", vert), ("horz_wall", horz), ("corner", corner)):
        neighbour = OctCompass(**{field: True})
        texture = wall_piece(top, left, neighbour).sprite.texture
        assert getattr(texture, name) is True
        others = {"vert_wall", "horz_wall", "corner"} - {name}
        assert all(getattr(texture, other) is False for other in others)


def test_unrelated_neighbours_are_ignored():
    neighbour = OctCompass(south=True, east=True, south_east=True)
    texture = wall_piece(True, True, neighbour).sprite.texture
    assert not (texture.vert_wall or texture.horz_wall or texture.corner)