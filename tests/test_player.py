import pygame
import pytest

from woolieinvaders.enemy import Enemy
from woolieinvaders.entity import DirectionalTextures, FacingDirection
from woolieinvaders.level import LevelGrid
from woolieinvaders.player import Player
from woolieinvaders.vectors import Vector2, Vector2Int

RED = (255, 0, 0)


class _Sound:
    def __init__(self):
        self.plays = 0

    def play(self):
        self.plays += 1


def _surface(color):
    surface = pygame.Surface((8, 8))
    surface.fill(color)
    return surface


@pytest.fixture
def textures():
    return DirectionalTextures(
        north=_surface(RED),
        east=_surface((0, 255, 0)),
        south=_surface((0, 0, 255)),
        west=_surface((255, 255, 0)),
    )


@pytest.fixture
def level():
    return LevelGrid()


@pytest.fixture
def player(level, textures):
    return Player(level, Vector2Int(4, 4), textures, _surface((0, 255, 255)), _surface((9, 9, 9)), _Sound())


def key_down(key, repeat=False):
    return pygame.event.Event(pygame.KEYDOWN, key=key, repeat=repeat)


def key_up(key):
    return pygame.event.Event(pygame.KEYUP, key=key)


def test_starting_values(player):
    assert player.health == 3
    assert player.ammo == 6
    assert player.score == 0
    assert player.combo == 1
    assert player.is_alive
    assert not player.is_invincible


def test_movement_keys(player):
    player.handle_input(key_down(pygame.K_d))
    assert player.desired_direction() == Vector2Int(1, 0)
    player.handle_input(key_down(pygame.K_w))
    assert player.desired_direction() == Vector2Int(1, -1)
    player.handle_input(key_up(pygame.K_d))
    player.handle_input(key_up(pygame.K_w))
    assert player.desired_direction() == Vector2Int.ZERO


def test_opposite_keys_cancel(player):
    player.handle_input(key_down(pygame.K_a))
    player.handle_input(key_down(pygame.K_d))
    assert player.desired_direction() == Vector2Int.ZERO


def test_update_moves_and_faces(player, textures):
    player.handle_input(key_down(pygame.K_s))
    player.update(0.0)
    assert player.facing == FacingDirection.SOUTH
    assert player.target_cell == Vector2Int(4, 5)
    assert player.sprite.texture is textures.south


def test_throw_uses_ammo(player):
    player.handle_input(key_down(pygame.K_SPACE))
    player.update(0.0)
    assert player.ammo == 5
    assert len(player.projectiles) == 1
    assert player.projectiles[0].facing == player.facing


def test_repeated_key_is_ignored(player):
    player.handle_input(key_down(pygame.K_SPACE, repeat=True))
    player.update(0.0)
    assert player.ammo == player.max_ammo
    assert player.projectiles == []


def test_no_throw_without_ammo(player):
    player.ammo = 0
    player.handle_input(key_down(pygame.K_SPACE))
    player.update(0.0)
    assert player.projectiles == []


def test_ammo_regenerates(player):
    player.handle_input(key_down(pygame.K_SPACE))
    player.update(0.0)
    player.update(1.0)
    assert player.ammo == 5
    player.update(0.6)
    assert player.ammo == 6


def test_take_damage_and_invincibility(player):
    sound = player.damage_sound
    player.combo = 4
    player.take_damage()
    assert player.health == 2
    assert player.combo == 1
    assert player.is_invincible
    player.take_damage()
    assert player.health == 2
    assert sound.plays == 1
    player.update(3.1)
    assert not player.is_invincible


def test_dies_without_health(player):
    for _ in range(3):
        player.take_damage()
        player.invincibility_timer.set_one_shot(0)
    assert player.health == 0
    assert not player.is_alive


def test_add_health_is_capped(player):
    player.add_health(1)
    assert player.health == 4
    player.add_health(10)
    assert player.health == player.max_health


def test_record_kill_uses_combo(player):
    player.record_kill(10)
    player.record_kill(10)
    assert player.score == 10 + 2 * 10
    assert player.combo == 3


def test_combo_is_capped(player):
    for _ in range(20):
        player.record_kill(1)
    assert player.combo == player.max_combo
    assert player.is_max_combo


def test_projectile_kills_enemy(player, level, textures):
    enemy = Enemy(level, Vector2Int(5, 4), textures)
    player.facing = FacingDirection.EAST
    player.handle_input(key_down(pygame.K_SPACE))
    player.update(0.0)
    player.update_projectiles(0.1, [enemy, None])
    assert enemy.alive
    player.update_projectiles(0.1, [enemy, None])
    assert not enemy.alive
    assert player.score == enemy.points
    assert player.combo == 2


def test_projectiles_removed_after_wall(player):
    player.facing = FacingDirection.EAST
    player.handle_input(key_down(pygame.K_SPACE))
    player.update(0.0)
    for _ in range(300):
        player.update_projectiles(0.1, [])
    assert player.projectiles == []


def test_reset(player):
    player.handle_input(key_down(pygame.K_d))
    player.handle_input(key_down(pygame.K_SPACE))
    player.update(0.1)
    player.take_damage()
    player.record_kill(10)
    player.reset()
    assert player.current_cell == Vector2Int(4, 4)
    assert player.world_position == Vector2(4.0, 4.0)
    assert player.health == player.start_health
    assert player.ammo == player.max_ammo
    assert player.score == 0
    assert player.combo == 1
    assert not player.is_invincible
    assert player.projectiles == []
    assert player.desired_direction() == Vector2Int.ZERO


def test_render_draws_player(player):
    player.update(0.0)
    surface = pygame.Surface((320, 180))
    player.render(surface)
    # World (4, 4) is pixel (32, 32), shifted by the camera at (-60, -20).
    assert surface.get_at((92, 52))[:3] == RED