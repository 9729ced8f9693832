import pytest

from casgame.core import HEIGHT, WIDTH
from casgame.grid import GridTransform
from casgame.render import is_visible

CAMERA = GridTransform.from_xy(WIDTH // 2, HEIGHT // 2)


def at_offset(dx, dy):
    x, y = CAMERA.translation
    return GridTransform.from_xy(x + dx, y + dy)


def test_same_position_is_visible():
    assert is_visible(CAMERA, CAMERA) is True


@pytest.mark.parametrize("sign", [1, -1])
def test_horizontal_edge(sign):
    assert is_visible(CAMERA, at_offset(sign * (WIDTH // 2), 0)) is True
    assert is_visible(CAMERA, at_offset(sign * (WIDTH // 2 + 1), 0)) is False


@pytest.mark.parametrize("sign", [1, -1])
def test_vertical_edge(sign):
    assert is_visible(CAMERA, at_offset(0, sign * (HEIGHT // 2))) is True
    assert is_visible(CAMERA, at_offset(0, sign * (HEIGHT // 2 + 1))) is False


def test_visible_corner_of_room():
    assert is_visible(CAMERA, GridTransform.from_xy(0, 0)) is True
    assert is_visible(CAMERA, GridTransform.from_xy(WIDTH - 1, HEIGHT - 1)) is True
    assert is_visible(CAMERA, GridTransform.from_xy(WIDTH, HEIGHT - 1)) is False