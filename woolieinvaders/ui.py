"""Mouse-driven buttons and rows of icons for the HUD and menus."""

from __future__ import annotations

import logging
from typing import List, Optional, Protocol

import pygame

from .space import DEFAULT_PIXEL_ART_SCALE, screen_to_pixel
from .sprite import FloatRect, Sprite, Texture
from .vectors import Vector2

logger = logging.getLogger(__name__)


class Playable(Protocol):
    def play(self) -> object: ...


class UIButton:
    """A clickable button with a normal and a hover image.

    What clicking does is decided by the caller.
    """

    def __init__(
        self,
        rect: FloatRect,
        standard_texture: Texture,
        hover_texture: Texture,
        click_sound: Optional[Playable] = None,
    ) -> None:
        self.rect = rect
        self.standard_texture = standard_texture
        self.hover_texture = hover_texture
        self.click_sound = click_sound
        self.sprite = Sprite()
        self.sprite.rect = FloatRect(rect.x, rect.y, rect.w, rect.h)
        self.sprite.set_texture(standard_texture, resize=False)

    @property
    def hovered(self) -> bool:
        return self.sprite.texture is self.hover_texture

    def contains(
        self,
        screen_position: Vector2,
        scale: float = DEFAULT_PIXEL_ART_SCALE,
        click: bool = False,
    ) -> bool:
        """True if the screen position is over the button; plays the click sound if clicking."""
        inside = self.rect.contains(screen_to_pixel(screen_position, scale))
        if inside and click and self.click_sound is not None:
            self.click_sound.play()
        return inside

    def update(self, mouse_position: Vector2, scale: float = DEFAULT_PIXEL_ART_SCALE) -> None:
        """Show the hover image while the mouse is over the button."""
        texture = self.hover_texture if self.contains(mouse_position, scale) else self.standard_texture
        self.sprite.set_texture(texture, resize=False)

    def render(self, surface: pygame.Surface) -> None:
        self.sprite.render(surface)


class UIIconRow:
    """A horizontal row of identical icons showing a quantity."""

    def __init__(self, rect: FloatRect, icon: Texture) -> None:
        self.position = Vector2(rect.x, rect.y)
        self.icon_size = Vector2(rect.w, rect.h)
        self.icon = icon
        self._sprites: List[Sprite] = []
        self._icons_to_show = 0

    @property
    def icons_to_show(self) -> int:
        return self._icons_to_show

    @icons_to_show.setter
    def icons_to_show(self, count: int) -> None:
        if count < 0:
            raise ValueError(f"icon count must not be negative: {count}")
        self._icons_to_show = count
        while len(self._sprites) < count:
            self._add_sprite()

    def _add_sprite(self) -> None:
        sprite = Sprite(self.icon)
        sprite.size = self.icon_size
        sprite.set_screen_position(
            Vector2(self.position.x + self.icon_size.x * len(self._sprites), self.position.y)
        )
        self._sprites.append(sprite)

    @property
    def sprites(self) -> List[Sprite]:
        return list(self._sprites)

    def render(self, surface: pygame.Surface) -> None:
        if len(self._sprites) < self._icons_to_show:
            logger.warning("Not enough icons!")
            return
        for sprite in self._sprites[: self._icons_to_show]:
            sprite.render(surface)