import pygame
import pytest

from woolieinvaders.entity import FacingDirection
from woolieinvaders.level import LevelGrid
from woolieinvaders.projectile import Projectile
from woolieinvaders.vectors import Vector2, Vector2Int


@pytest.fixture
def hand():
    return pygame.Surface((16, 16))


def make(hand, cell=Vector2Int(4, 4), facing=FacingDirection.EAST):
    return Projectile(LevelGrid(), cell, Vector2.from_int(cell), facing, hand)


def test_projectile_setup(hand):
    projectile = make(hand)
    assert projectile.sprite.size == Vector2(8.0, 8.0)
    assert projectile.movement_speed == 6
    assert projectile.desired_movement == Vector2Int(1, 0)
    assert projectile.has_hit_wall is False


def test_desired_movement_follows_facing(hand):
    assert make(hand, facing=FacingDirection.NORTH).desired_movement == Vector2Int(0, -1)
    assert make(hand, facing=FacingDirection.WEST).desired_movement == Vector2Int(-1, 0)


def test_first_update_starts_moving(hand):
    projectile = make(hand)
    projectile.update(0.01)
    assert projectile.movement_direction == Vector2Int(1, 0)
    assert projectile.target_cell == Vector2Int(5, 4)
    assert projectile.has_hit_wall is False


def test_projectile_advances(hand):
    projectile = make(hand)
    projectile.update(0.01)
    projectile.update(0.05)
    assert projectile.world_position.x > 4.0
    assert projectile.world_position.y == 4.0


def test_projectile_hits_wall(hand):
    # The cell west of (1, 4) is the solid outer wall.
    projectile = make(hand, cell=Vector2Int(1, 4), facing=FacingDirection.WEST)
    projectile.update(0.01)
    assert projectile.has_hit_wall is True
    assert projectile.current_cell == Vector2Int(1, 4)


def test_projectile_eventually_hits_wall(hand):
    projectile = make(hand)
    for _ in range(500):
        projectile.update(0.1)
        if projectile.has_hit_wall:
            break
    assert projectile.has_hit_wall is True
    assert not LevelGrid().is_tile_solid(projectile.current_cell)


def test_spin_rotates_in_quarter_turns(hand):
    projectile = make(hand)
    projectile.update(0.1)
    assert projectile.sprite.rotation == 90.0
    projectile.update(0.01)
    assert projectile.sprite.rotation == 90.0
    for _ in range(3):
        projectile.update(0.1)
    assert projectile.sprite.rotation == 0.0