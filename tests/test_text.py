import pygame
import pytest

from woolieinvaders.space import GAME_PIXEL_HEIGHT, GAME_PIXEL_WIDTH
from woolieinvaders.text import CHARACTER_SIZE, WHITE, YELLOW, TextRenderer
from woolieinvaders.vectors import Vector2


@pytest.fixture
def renderer():
    return TextRenderer()


def _pixels(surface, rect):
    return {
        tuple(surface.get_at((x, y)))[:3]
        for x in range(rect.left, rect.right)
        for y in range(rect.top, rect.bottom)
    }


def test_text_width_uses_character_size(renderer):
    assert renderer.text_width("abc") == 3 * CHARACTER_SIZE
    assert renderer.text_width(1234) == 4 * CHARACTER_SIZE
    assert renderer.text_width("") == 0


def test_draw_text_places_at_position(renderer):
    surface = pygame.Surface((80, 40))
    rect = renderer.draw_text(surface, "WWW", Vector2(5.0, 6.0), underlay=False)
    assert rect.topleft == (5, 6)
    assert WHITE in _pixels(surface, rect)


def test_draw_integer(renderer):
    surface = pygame.Surface((80, 40))
    rect = renderer.draw_text(surface, 88, Vector2(0.0, 0.0))
    assert WHITE in _pixels(surface, rect)


def test_colored_block_restores_white(renderer):
    surface = pygame.Surface((80, 40))
    with renderer.colored(YELLOW):
        rect = renderer.draw_text(surface, "WWW", Vector2(2.0, 2.0), underlay=False)
        assert renderer.color == YELLOW
    assert renderer.color == WHITE
    assert YELLOW in _pixels(surface, rect)


def test_draw_centered_is_centred(renderer):
    surface = pygame.Surface((int(GAME_PIXEL_WIDTH), int(GAME_PIXEL_HEIGHT)))
    text = "Wave 3"
    position = renderer.draw_centered(surface, text)
    assert position.x + renderer.text_width(text) / 2 == GAME_PIXEL_WIDTH / 2
    assert position.y + CHARACTER_SIZE / 2 == GAME_PIXEL_HEIGHT / 2