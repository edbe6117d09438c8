"""Thrown hands that fly in a straight line until they hit a wall."""

from __future__ import annotations

from .entity import FacingDirection, GridEntity
from .level import LevelGrid
from .sprite import Texture
from .timer import Timer
from .vectors import Vector2, Vector2Int

PROJECTILE_SPEED = 6.0
PROJECTILE_SIZE = Vector2(8.0, 8.0)
SPIN_INTERVAL = 0.08
SPIN_STEP_DEGREES = 90.0


class Projectile(GridEntity):
    """A projectile moving along the grid in the direction it was thrown."""

    def __init__(
        self,
        level: LevelGrid,
        grid_position: Vector2Int,
        world_position: Vector2,
        facing: FacingDirection,
        texture: Texture,
    ) -> None:
        super().__init__(level, grid_position)
        self.sprite.set_texture(texture)
        self.sprite.size = PROJECTILE_SIZE
        self.world_position = world_position
        self.facing = facing
        self.desired_movement = self.movement_from_facing()
        self.movement_speed = PROJECTILE_SPEED
        self.spin_timer = Timer(SPIN_INTERVAL)
        self.has_hit_wall = False

    def update(self, dt: float) -> None:
        if self.is_moving_between_spaces():
            self.continue_movement(dt)
            self.face_towards(self.movement_direction)
        else:
            if not self.attempt_movement(self.desired_movement):
                self.has_hit_wall = True
            self.face_towards(self.desired_movement)

        self.sprite.set_world_position(self.world_position)

        self.spin_timer.tick(dt)
        if self.spin_timer.lapsed:
            self.spin_timer.restart()
            self.sprite.rotation = self.sprite.rotation + SPIN_STEP_DEGREES