"""Simple text drawing with a fixed character cell size."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, Tuple, Union

import pygame

from .space import GAME_PIXEL_HEIGHT, GAME_PIXEL_WIDTH
from .vectors import Vector2

Color = Tuple[int, int, int]

CHARACTER_SIZE = 8

BLACK: Color = (0, 0, 0)
WHITE: Color = (255, 255, 255)
YELLOW: Color = (255, 213, 65)

UNDERLAY_ALPHA = 127
_FONT_SIZE = 11


def _as_text(text: Union[str, int]) -> str:
    return text if isinstance(text, str) else str(int(text))


class TextRenderer:
    """Draws top-left aligned text, with an optional dark drop shadow."""

    def __init__(self) -> None:
        if not pygame.font.get_init():
            pygame.font.init()
        self.font = pygame.font.Font(None, _FONT_SIZE)
        self.color: Color = WHITE

    @contextmanager
    def colored(self, color: Color) -> Iterator[None]:
        """Draw with another colour inside the block, then restore white."""
        self.color = color
        try:
            yield
        finally:
            self.color = WHITE

    def text_width(self, text: Union[str, int]) -> int:
        """Width of the text in pixel-art pixels."""
        return CHARACTER_SIZE * len(_as_text(text))

    def draw_text(
        self,
        surface: pygame.Surface,
        text: Union[str, int],
        position: Vector2,
        underlay: bool = True,
    ) -> pygame.Rect:
        """Draw text with its top-left corner at position; return the drawn area."""
        content = _as_text(text)
        left, top = round(position.x), round(position.y)
        if underlay:
            shadow = self.font.render(content, False, BLACK)
            shadow.set_alpha(UNDERLAY_ALPHA)
            surface.blit(shadow, (left + 1, top + 1))
        rendered = self.font.render(content, False, self.color)
        return surface.blit(rendered, (left, top))

    def draw_centered(self, surface: pygame.Surface, text: Union[str, int]) -> Vector2:
        """Draw text centred on the game area; return the top-left used."""
        content = _as_text(text)
        position = Vector2(
            GAME_PIXEL_WIDTH / 2 - CHARACTER_SIZE * len(content) // 2,
            GAME_PIXEL_HEIGHT / 2 - CHARACTER_SIZE // 2,
        )
        self.draw_text(surface, content, position)
        return position