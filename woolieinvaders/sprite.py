"""Images placed at a position in pixel-art space."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

import pygame

from .space import world_to_pixel
from .vectors import Vector2, Vector2Int

Texture = pygame.Surface


@dataclass
class FloatRect:
    """A rectangle with floating point position and size."""

    x: float = 0.0
    y: float = 0.0
    w: float = 0.0
    h: float = 0.0

    def contains(self, point: Vector2) -> bool:
        """True if the point lies inside the rectangle, edges included."""
        return self.x <= point.x <= self.x + self.w and self.y <= point.y <= self.y + self.h


def load_texture(path: Union[str, Path]) -> Texture:
    """Load an image file as a texture."""
    file_path = Path(path)
    if not file_path.is_file():
        raise FileNotFoundError(f"Failed to load texture from filename {path}")
    return pygame.image.load(str(file_path))


class Sprite:
    """An image drawn at a rectangle, optionally rotated clockwise."""

    def __init__(self, texture: Optional[Texture] = None) -> None:
        self.texture = texture
        size = self.texture_size()
        self.rect = FloatRect(0.0, 0.0, size.x, size.y)
        self._rotation = 0.0

    @property
    def rotation(self) -> float:
        """Rotation in degrees clockwise, always in [0, 360)."""
        return self._rotation

    @rotation.setter
    def rotation(self, degrees: float) -> None:
        self._rotation = float(degrees) % 360.0

    @property
    def size(self) -> Vector2:
        return Vector2(self.rect.w, self.rect.h)

    @size.setter
    def size(self, new_size: Union[Vector2, Vector2Int]) -> None:
        self.rect.w = float(new_size.x)
        self.rect.h = float(new_size.y)

    def render(self, surface: pygame.Surface, camera: Vector2 = Vector2()) -> None:
        """Draw the sprite onto the surface, offset by the camera position."""
        if self.texture is None:
            return
        width = max(0, round(self.rect.w))
        height = max(0, round(self.rect.h))
        if self.texture.get_size() == (width, height):
            image = self.texture
        else:
            image = pygame.transform.scale(self.texture, (width, height))
        left = self.rect.x - camera.x
        top = self.rect.y - camera.y
        if self._rotation == 0:
            surface.blit(image, (round(left), round(top)))
            return
        rotated = pygame.transform.rotate(image, -self._rotation)
        center = (round(left + self.rect.w / 2), round(top + self.rect.h / 2))
        surface.blit(rotated, rotated.get_rect(center=center))

    def set_world_position(self, world: Vector2) -> None:
        pixel = world_to_pixel(world)
        self.rect.x = pixel.x
        self.rect.y = pixel.y

    def set_screen_position(self, position: Union[Vector2, Vector2Int]) -> None:
        self.rect.x = float(position.x)
        self.rect.y = float(position.y)

    def set_texture(self, texture: Optional[Texture], resize: bool = True) -> None:
        """Swap the texture, optionally resizing the sprite to match it."""
        if self.texture is texture:
            return
        self.texture = texture
        if resize:
            self.size = self.texture_size()

    def texture_size(self) -> Vector2:
        """The size of the texture in pixels, or zero without a texture."""
        if self.texture is None:
            return Vector2(0.0, 0.0)
        width, height = self.texture.get_size()
        return Vector2(float(width), float(height))