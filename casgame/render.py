"""Visibility culling around the camera."""

from __future__ import annotations

from casgame.core import HEIGHT, WIDTH
from casgame.grid import GridTransform


def is_visible(camera: GridTransform, position: GridTransform) -> bool:
    """Return True if `position` lies within the visible area around `camera`."""
    cx, cy = camera.translation
    px, py = position.translation
    return abs(px - cx) <= WIDTH // 2 and abs(py - cy) <= HEIGHT // 2