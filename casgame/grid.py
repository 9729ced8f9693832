"""Grid positions and their conversion to world coordinates."""

from __future__ import annotations

from dataclasses import dataclass, replace

from casgame.core import HEIGHT, TILE_SIZE, WIDTH, Direction

Vec3 = tuple[float, float, float]

_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.ZERO: (0, 0),
    Direction.UP: (0, -1),
    Direction.LEFT: (-1, 0),
    Direction.DOWN: (0, 1),
    Direction.RIGHT: (1, 0),
}


@dataclass
class GridTransform:
    """A position on the tile grid, y growing downwards."""

    translation: tuple[int, int] = (0, 0)
    rotation: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 1.0)

    @classmethod
    def from_xy(cls, x: int, y: int) -> GridTransform:
        """Create a transform at grid position (x, y)."""
        return cls(translation=(int(x), int(y)))

    def translate(self, direction: Direction, amount: int) -> GridTransform:
        """Return a copy moved `amount` tiles in `direction`."""
        dx, dy = _OFFSETS[direction]
        x, y = self.translation
        return replace(self, translation=(x + dx * amount, y + dy * amount))

    def shift(self, direction: Direction, amount: int) -> None:
        """Move this transform `amount` tiles in `direction` in place."""
        self.translation = self.translate(direction, amount).translation

    def as_vec3(self) -> Vec3:
        """World position of this tile, centred on the visible area, with z at 0."""
        half_width = (WIDTH - 1) / 2.0
        half_height = (HEIGHT - 1) / 2.0
        x, y = self.translation
        return (
            (x - half_width) * TILE_SIZE,
            (half_height - y) * TILE_SIZE,
            0.0,
        )

    def as_vec3_with_z(self, z: float) -> Vec3:
        """World position of this tile with the given z."""
        x, y, _ = self.as_vec3()
        return (x, y, float(z))