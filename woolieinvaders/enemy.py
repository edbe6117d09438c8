"""Enemies that wander the level at random."""

from __future__ import annotations

from typing import Optional

from .entity import DirectionalTextures, GridEntity
from .level import LevelGrid
from .rng import make_generator
from .ui import Playable
from .vectors import Vector2Int

_DIRECTIONS = (
    Vector2Int(1, 0),
    Vector2Int(0, 1),
    Vector2Int(-1, 0),
    Vector2Int(0, -1),
)

ENEMY_SPEED = 2.0
POINTS_PER_KILL = 10


class Enemy(GridEntity):
    """An enemy that picks a random open direction at every grid cell."""

    def __init__(
        self,
        level: LevelGrid,
        grid_position: Vector2Int,
        textures: DirectionalTextures,
        hit_sound: Optional[Playable] = None,
    ) -> None:
        super().__init__(level, grid_position)
        self.movement_speed = ENEMY_SPEED
        self.textures = textures
        self.hit_sound = hit_sound
        self.alive = True
        self.points = POINTS_PER_KILL
        self.sprite.set_texture(textures.north)

    def desired_direction(self) -> Vector2Int:
        """A fresh random direction when on a cell, otherwise the current one."""
        if not self.is_moving_between_spaces():
            return self.random_unobstructed_direction()
        return self.desired_movement

    def random_unobstructed_direction(self) -> Vector2Int:
        """A random direction leading to a walkable cell, or zero if boxed in."""
        directions = list(_DIRECTIONS)
        make_generator().shuffle(directions)
        for direction in directions:
            if not self.level.is_tile_solid(self.current_cell + direction):
                return direction
        return Vector2Int.ZERO

    def kill(self) -> None:
        self.alive = False
        if self.hit_sound is not None:
            self.hit_sound.play()

    def update(self, dt: float) -> None:
        if not self.alive:
            return
        super().update(dt)
        self.sprite.set_texture(self.textures.for_direction(self.facing))