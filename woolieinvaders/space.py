"""Conversions between world, pixel and screen space.

World space uses one unit per grid cell. Pixel space is the pixel-art
resolution, eight pixels to a world unit. Screen space is monitor pixels,
a whole number of monitor pixels to each pixel-art pixel.
"""

from __future__ import annotations

from .vectors import Vector2

CAMERA_POSITION = Vector2(-60.0, -20.0)

WINDOW_WIDTH = 1280
WINDOW_HEIGHT = 720

GAME_PIXEL_WIDTH = 320.0
GAME_PIXEL_HEIGHT = 180.0
PIXELS_PER_UNIT = 8.0

DEFAULT_PIXEL_ART_SCALE = 4.0


def world_to_pixel(world: Vector2) -> Vector2:
    """Convert a world position to pixel-art space."""
    return world * PIXELS_PER_UNIT


def pixel_to_world(pixel: Vector2) -> Vector2:
    """Convert a pixel-art position to world space."""
    return pixel / PIXELS_PER_UNIT


def screen_to_pixel(screen: Vector2, scale: float = DEFAULT_PIXEL_ART_SCALE) -> Vector2:
    """Convert a monitor position to pixel-art space at the given scale."""
    return screen / scale