"""Entities that move from one grid cell to the next."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum, auto
from pathlib import Path
from typing import Union

import pygame

from .level import LevelGrid
from .space import CAMERA_POSITION
from .sprite import Sprite, Texture, load_texture
from .vectors import Vector2, Vector2Int


class FacingDirection(Enum):
    NORTH = auto()
    EAST = auto()
    SOUTH = auto()
    WEST = auto()


_FACING_MOVEMENT = {
    FacingDirection.NORTH: Vector2Int(0, -1),
    FacingDirection.EAST: Vector2Int(1, 0),
    FacingDirection.SOUTH: Vector2Int(0, 1),
    FacingDirection.WEST: Vector2Int(-1, 0),
}


@dataclass(frozen=True)
class DirectionalTextures:
    """One texture for each direction an entity can face."""

    north: Texture
    east: Texture
    south: Texture
    west: Texture

    @classmethod
    def load(cls, folder: Union[str, Path], prefix: str) -> DirectionalTextures:
        """Load <prefix>North.png, <prefix>East.png and so on from the folder."""
        base = Path(folder)
        return cls(
            north=load_texture(base / f"{prefix}North.png"),
            east=load_texture(base / f"{prefix}East.png"),
            south=load_texture(base / f"{prefix}South.png"),
            west=load_texture(base / f"{prefix}West.png"),
        )

    def for_direction(self, facing: FacingDirection) -> Texture:
        return {
            FacingDirection.NORTH: self.north,
            FacingDirection.EAST: self.east,
            FacingDirection.SOUTH: self.south,
            FacingDirection.WEST: self.west,
        }[facing]


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


class GridEntity:
    """An entity, such as the player or an enemy, whose movement is locked to the grid."""

    def __init__(self, level: LevelGrid, grid_position: Vector2Int) -> None:
        self.level = level
        self.current_cell = grid_position
        self.target_cell = grid_position
        self.movement_direction = Vector2Int.ZERO
        self.facing = FacingDirection.NORTH
        self.sprite = Sprite()
        self.desired_movement = Vector2Int.ZERO
        self.movement_speed = 4.0  # grid tiles per second
        self.world_position = Vector2.from_int(grid_position)

    def update(self, dt: float) -> None:
        self.desired_movement = self.desired_direction()
        if self.is_moving_between_spaces():
            self.continue_movement(dt)
            self.face_towards(self.movement_direction)
        else:
            self.attempt_movement(self.desired_movement)
            self.face_towards(self.desired_movement)
        self.sprite.set_world_position(self.world_position)

    def render(self, surface: pygame.Surface) -> None:
        self.sprite.render(surface, CAMERA_POSITION)

    def face_towards(self, direction: Vector2Int) -> None:
        """Face along the direction, preferring the horizontal; zero leaves facing as is."""
        if direction.x < 0:
            self.facing = FacingDirection.WEST
        elif direction.x > 0:
            self.facing = FacingDirection.EAST
        elif direction.y < 0:
            self.facing = FacingDirection.NORTH
        elif direction.y > 0:
            self.facing = FacingDirection.SOUTH

    def movement_from_facing(self) -> Vector2Int:
        return _FACING_MOVEMENT[self.facing]

    def desired_direction(self) -> Vector2Int:
        """The direction this entity wants to move in; none by default."""
        return Vector2Int.ZERO

    def attempt_movement(self, direction: Vector2Int) -> bool:
        """Start moving towards the neighbouring cell; False if blocked or no direction."""
        if direction == Vector2Int.ZERO:
            return False
        clean = Vector2Int(direction.x, 0) if direction.x != 0 and direction.y != 0 else direction
        if not self.is_direction_walkable(clean):
            return False
        self.target_cell = self.current_cell + clean
        self.movement_direction = clean
        return True

    def continue_movement(self, dt: float) -> None:
        """Carry on towards the target cell, snapping onto it on arrival."""
        direction = self.movement_direction
        if direction == Vector2Int.ZERO:
            return
        if direction.x != 0:
            new_x = self.world_position.x + direction.x * self.movement_speed * dt
            target = self.target_cell.x
            if (direction.x > 0 and new_x > target) or (direction.x < 0 and new_x < target):
                self.world_position = Vector2(float(target), self.world_position.y)
                self._arrive()
            else:
                self.world_position = Vector2(new_x, self.world_position.y)
        elif direction.y != 0:
            new_y = self.world_position.y + direction.y * self.movement_speed * dt
            target = self.target_cell.y
            if (direction.y > 0 and new_y > target) or (direction.y < 0 and new_y < target):
                self.world_position = Vector2(self.world_position.x, float(target))
                self._arrive()
            else:
                self.world_position = Vector2(self.world_position.x, new_y)

    def _arrive(self) -> None:
        self.movement_direction = Vector2Int.ZERO
        self.current_cell = self.target_cell

    def update_world_position(self, dt: float) -> None:
        if self.target_cell != self.current_cell:
            self.world_position = self.world_position + Vector2.from_int(self.desired_movement) * (
                self.movement_speed * dt
            )

    def is_direction_walkable(self, direction: Vector2Int) -> bool:
        return not self.level.is_tile_solid(self.current_cell + direction)

    def is_moving_between_spaces(self) -> bool:
        return self.movement_direction != Vector2Int.ZERO and self.target_cell != self.current_cell

    def active_tile(self) -> Vector2Int:
        """The tile this entity is mostly on, judged from its world position."""
        return Vector2Int(
            _round_half_away(self.world_position.x), _round_half_away(self.world_position.y)
        )

    def is_colliding_with(self, other: GridEntity) -> bool:
        return self.active_tile() == other.active_tile()

    def set_position(self, position: Vector2Int) -> None:
        """Place the entity on a cell and stop any movement."""
        self.current_cell = position
        self.target_cell = position
        self.world_position = Vector2.from_int(position)
        self.movement_direction = Vector2Int.ZERO