import pygame
import pytest

from woolieinvaders.space import PIXELS_PER_UNIT
from woolieinvaders.sprite import FloatRect, Sprite, load_texture
from woolieinvaders.vectors import Vector2, Vector2Int

RED = (255, 0, 0, 255)
BLACK = (0, 0, 0, 255)


def _texture(width, height, colour=RED):
    surface = pygame.Surface((width, height))
    surface.fill(colour)
    return surface


def test_new_sprite_takes_texture_size():
    sprite = Sprite(_texture(16, 8))
    assert sprite.size == Vector2(16.0, 8.0)
    assert (sprite.rect.x, sprite.rect.y) == (0.0, 0.0)


def test_sprite_without_texture_has_zero_size():
    assert Sprite().texture_size() == Vector2(0.0, 0.0)


def test_world_position_scales_by_pixels_per_unit():
    sprite = Sprite()
    sprite.set_world_position(Vector2(1.0, 2.0))
    assert sprite.rect.x == 1.0 * PIXELS_PER_UNIT
    assert sprite.rect.y == 2.0 * PIXELS_PER_UNIT


def test_screen_position_is_used_directly():
    sprite = Sprite()
    sprite.set_screen_position(Vector2Int(3, 7))
    assert (sprite.rect.x, sprite.rect.y) == (3.0, 7.0)


@pytest.mark.parametrize("degrees, expected", [(450, 90.0), (-90, 270.0), (360, 0.0), (45, 45.0)])
def test_rotation_wraps_into_range(degrees, expected):
    sprite = Sprite()
    sprite.rotation = degrees
    assert sprite.rotation == pytest.approx(expected)


def test_set_texture_resizes_unless_asked_not_to():
    sprite = Sprite(_texture(4, 4))
    sprite.set_texture(_texture(10, 6), resize=False)
    assert sprite.size == Vector2(4.0, 4.0)
    sprite.set_texture(_texture(10, 6))
    assert sprite.size == Vector2(10.0, 6.0)


def test_render_offsets_by_camera():
    target = pygame.Surface((32, 32))
    target.fill(BLACK)
    sprite = Sprite(_texture(4, 4))
    sprite.set_screen_position(Vector2(2.0, 3.0))
    sprite.render(target, Vector2(-1.0, -1.0))
    assert tuple(target.get_at((3, 4))) == RED
    assert tuple(target.get_at((2, 3))) == BLACK


def test_render_scales_to_rect():
    target = pygame.Surface((32, 32))
    target.fill(BLACK)
    sprite = Sprite(_texture(2, 2))
    sprite.size = Vector2(8.0, 8.0)
    sprite.render(target)
    assert tuple(target.get_at((7, 7))) == RED
    assert tuple(target.get_at((8, 8))) == BLACK


def test_render_rotated_square_keeps_footprint():
    target = pygame.Surface((16, 16))
    target.fill(BLACK)
    sprite = Sprite(_texture(8, 8))
    sprite.rotation = 90
    sprite.render(target)
    assert tuple(target.get_at((1, 1))) == RED
    assert tuple(target.get_at((10, 10))) == BLACK


def test_render_without_texture_draws_nothing():
    target = pygame.Surface((4, 4))
    target.fill(BLACK)
    Sprite().render(target)
    assert tuple(target.get_at((0, 0))) == BLACK


def test_load_texture_round_trip(tmp_path):
    path = tmp_path / "image.bmp"
    pygame.image.save(_texture(5, 3), str(path))
    assert load_texture(path).get_size() == (5, 3)


def test_load_missing_texture_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_texture(tmp_path / "missing.png")


def test_float_rect_contains_edges():
    rect = FloatRect(1.0, 1.0, 2.0, 2.0)
    assert rect.contains(Vector2(1.0, 1.0))
    assert rect.contains(Vector2(3.0, 3.0))
    assert not rect.contains(Vector2(3.5, 2.0))