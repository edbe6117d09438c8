"""The player: keyboard-driven movement, throwing, health, ammo and score."""

from __future__ import annotations

from typing import Iterable, List, Optional

import pygame

from .enemy import Enemy
from .entity import DirectionalTextures, GridEntity
from .level import LevelGrid
from .projectile import Projectile
from .space import CAMERA_POSITION
from .sprite import Sprite, Texture
from .timer import Timer
from .ui import Playable
from .vectors import Vector2Int

MAX_HEALTH = 5
START_HEALTH = 3
MAX_AMMO = 6
AMMO_REGEN_SECONDS = 1.5
INVINCIBILITY_SECONDS = 3.0
MAX_COMBO = 10


class Player(GridEntity):
    """The player character."""

    def __init__(
        self,
        level: LevelGrid,
        grid_position: Vector2Int,
        textures: DirectionalTextures,
        shield_texture: Optional[Texture],
        hand_texture: Texture,
        damage_sound: Optional[Playable] = None,
    ) -> None:
        super().__init__(level, grid_position)
        self.textures = textures
        self.hand_texture = hand_texture
        self.damage_sound = damage_sound
        self.starting_position = grid_position
        self.invincibility_sprite = Sprite(shield_texture)

        self.max_health = MAX_HEALTH
        self.start_health = START_HEALTH
        self.health = self.start_health

        self.max_ammo = MAX_AMMO
        self.ammo = self.max_ammo
        self.ammo_regen_timer = Timer(AMMO_REGEN_SECONDS)
        self.projectiles: List[Projectile] = []

        self.invincibility_timer = Timer(INVINCIBILITY_SECONDS, 0.0, False)

        self.north_input = False
        self.east_input = False
        self.south_input = False
        self.west_input = False
        self.attack_triggered = False

        self.score = 0
        self.combo = 1
        self.max_combo = MAX_COMBO

        self.sprite.set_texture(textures.north)

    @property
    def is_alive(self) -> bool:
        return self.health > 0

    @property
    def is_invincible(self) -> bool:
        return not self.invincibility_timer.lapsed

    @property
    def is_max_combo(self) -> bool:
        return self.combo == self.max_combo

    def handle_input(self, event: pygame.event.Event) -> None:
        """Track movement keys being held and the throw key being pressed."""
        if event.type == pygame.KEYDOWN:
            if getattr(event, "repeat", False):
                return
            if event.key == pygame.K_SPACE:
                self.attack_triggered = True
            self._set_direction_key(event.key, True)
        elif event.type == pygame.KEYUP:
            self._set_direction_key(event.key, False)

    def _set_direction_key(self, key: int, held: bool) -> None:
        if key == pygame.K_w:
            self.north_input = held
        elif key == pygame.K_a:
            self.west_input = held
        elif key == pygame.K_s:
            self.south_input = held
        elif key == pygame.K_d:
            self.east_input = held

    def desired_direction(self) -> Vector2Int:
        x = int(self.east_input) - int(self.west_input)
        y = int(self.south_input) - int(self.north_input)
        return Vector2Int(x, y)

    def update(self, dt: float) -> None:
        super().update(dt)
        self.sprite.set_texture(self.textures.for_direction(self.facing))

        if self.attack_triggered:
            self.attack_triggered = False
            if self.ammo > 0:
                self.projectiles.append(self._create_projectile())
                self.ammo -= 1

        if self.ammo < self.max_ammo:
            self.ammo_regen_timer.tick(dt)
            if self.ammo_regen_timer.lapsed:
                self.ammo += 1
                self.ammo_regen_timer.restart()

        self.invincibility_timer.tick(dt)
        if self.is_invincible:
            self.invincibility_sprite.set_world_position(self.world_position)

    def _create_projectile(self) -> Projectile:
        return Projectile(
            self.level, self.current_cell, self.world_position, self.facing, self.hand_texture
        )

    def update_projectiles(self, dt: float, enemies: Iterable[Optional[Enemy]]) -> None:
        """Move projectiles, kill enemies they touch and drop those that hit a wall."""
        enemies = list(enemies)
        for projectile in self.projectiles:
            projectile.update(dt)
            for enemy in enemies:
                if enemy is not None and projectile.is_colliding_with(enemy):
                    self.record_kill(enemy.points)
                    enemy.kill()
        self.projectiles = [p for p in self.projectiles if not p.has_hit_wall]

    def add_health(self, amount: int) -> None:
        self.health = min(self.health + amount, self.max_health)

    def take_damage(self) -> None:
        """Lose a heart and the combo, unless still invincible from the last hit."""
        if self.is_invincible:
            return
        self.health -= 1
        self.invincibility_timer.restart()
        self.combo = 1
        if self.damage_sound is not None:
            self.damage_sound.play()
        self.invincibility_sprite.set_world_position(self.world_position)

    def record_kill(self, points: int) -> None:
        self.score += self.combo * points
        if self.combo < self.max_combo:
            self.combo += 1

    def render(self, surface: pygame.Surface) -> None:
        self.sprite.render(surface, CAMERA_POSITION)
        for projectile in self.projectiles:
            projectile.render(surface)
        if self.is_invincible:
            self.invincibility_sprite.render(surface, CAMERA_POSITION)

    def reset(self) -> None:
        """Return to the starting cell with fresh health, ammo and score."""
        self.set_position(self.starting_position)
        self.health = self.start_health
        self.ammo = self.max_ammo
        self.invincibility_timer.set_one_shot(0)
        self.score = 0
        self.combo = 1
        self.north_input = False
        self.east_input = False
        self.south_input = False
        self.west_input = False
        self.attack_triggered = False
        self.destroy_all_projectiles()

    def destroy_all_projectiles(self) -> None:
        self.projectiles.clear()