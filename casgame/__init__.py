"""Tile-based dungeon crawler: room files, map generation, grid movement and a pygame window."""

__version__ = "0.1.0"