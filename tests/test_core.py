import itertools

import pytest

from casgame.core import (
    Direction,
    OctCompass,
    QuadCompass,
)


@pytest.mark.parametrize(
    "direction, expected",
    [
        (Direction.ZERO, True),
        (Direction.UP, False),
        (Direction.LEFT, False),
        (Direction.DOWN, False),
        (Direction.RIGHT, False),
    ],
)
def test_direction_is_zero(direction, expected):
    assert direction.is_zero() is expected


def test_quad_to_oct_fills_diagonals_with_default():
    quad = QuadCompass(north=True, east=False, south=True, west=True)
    oct_ = quad.to_oct()
    assert (oct_.north, oct_.east, oct_.south, oct_.west) == (True, False, True, True)
    assert not any(
        [oct_.north_east, oct_.south_east, oct_.south_west, oct_.north_west]
    )


def test_oct_to_quad_drops_diagonals():
    oct_ = OctCompass(
        north=False,
        east=True,
        south=False,
        west=True,
        north_east=True,
        south_east=True,
        south_west=True,
        north_west=True,
    )
    assert oct_.to_quad() == QuadCompass(north=False, east=True, south=False, west=True)


def test_quad_round_trip_through_oct():
    quad = QuadCompass(north=True, east=True, south=False, west=False)
    assert quad.to_oct().to_quad() == quad


@pytest.mark.parametrize("flags", list(itertools.product([False, True], repeat=4)))
def test_every_quad_round_trips_and_reports_any(flags):
    north, east, south, west = flags
    quad = QuadCompass(north=north, east=east, south=south, west=west)
    assert quad.to_oct().to_quad() == quad
    assert quad.any() is (True in flags)


def test_default_compasses_are_all_false():
    assert QuadCompass() == QuadCompass(False, False, False, False)
    assert OctCompass().to_quad() == QuadCompass()


def test_quad_any():
    assert QuadCompass().any() is False
    assert QuadCompass(west=True).any() is True
    assert QuadCompass(north=True, south=True).any() is True


def test_compass_is_mutable():
    quad = QuadCompass()
    quad.east = True
    assert quad.any() is True
    assert quad == QuadCompass(east=True)