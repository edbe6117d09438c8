"""The in-game round: the player, waves of enemies, the round timer and the HUD."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Union

import pygame

from .enemy import Enemy
from .entity import DirectionalTextures
from .level import LevelGrid
from .player import Player
from .savedata import HighscoreStore
from .space import CAMERA_POSITION, GAME_PIXEL_HEIGHT
from .sprite import FloatRect, Sprite, load_texture
from .states import GameState
from .text import CHARACTER_SIZE, YELLOW, TextRenderer
from .timer import Timer
from .ui import UIIconRow
from .vectors import Vector2, Vector2Int

logger = logging.getLogger(__name__)

MAX_ENEMIES = 6
PLAYER_START_CELL = Vector2Int(4, 4)
ROUND_START_SECONDS = 30.0
SECONDS_ADDED_PER_WAVE = 15.0
WAVE_TEXT_SECONDS = 3.0
LOW_TIME_SECONDS = 10.0
MUSIC_FADE_MS = 3000

REASON_DIED = "You died!"
REASON_OUT_OF_TIME = "Out of time!"


def _load_sound(path: Path) -> Optional[pygame.mixer.Sound]:
    """Load a sound effect if audio is available, otherwise return None."""
    if not pygame.mixer.get_init() or not path.is_file():
        return None
    try:
        return pygame.mixer.Sound(str(path))
    except pygame.error as error:
        logger.warning("Could not load sound %s: %s", path, error)
        return None


class Game:
    """One round of play, from the first wave until the player dies or quits."""

    def __init__(
        self,
        asset_root: Union[str, Path] = ".",
        store: Optional[HighscoreStore] = None,
    ) -> None:
        root = Path(asset_root)
        images = root / "images"
        audio = root / "audio"
        self.asset_root = root
        self.store = store if store is not None else HighscoreStore()

        self.level = LevelGrid()
        self.player = Player(
            self.level,
            PLAYER_START_CELL,
            DirectionalTextures.load(images / "player", "player"),
            load_texture(images / "shield.png"),
            load_texture(images / "hand.png"),
            damage_sound=_load_sound(audio / "takeDamage.wav"),
        )
        self.enemy_textures = DirectionalTextures.load(images / "enemy", "enemy")
        self.hit_sound = _load_sound(audio / "hitMarker.wav")
        self.enemies: List[Optional[Enemy]] = [None] * MAX_ENEMIES

        self.shop_background = Sprite(load_texture(images / "world" / "shop.png"))
        self.hud_background = Sprite(load_texture(images / "hud" / "hudBackgroundLarge.png"))
        self.hud_background.set_screen_position(
            Vector2(0.0, GAME_PIXEL_HEIGHT - self.hud_background.texture_size().y)
        )

        self.round_timer = Timer(ROUND_START_SECONDS)
        self.wave_number = 0
        self.new_wave_text_timer = Timer(WAVE_TEXT_SECONDS)

        self.escape_pressed = False
        self.game_over_reason = ""
        self.game_over_score = 0

        self._music_path = audio / "downdown.mp3"
        self.game_over_sound = _load_sound(audio / "gameOver.wav")
        self.tick_sound = _load_sound(audio / "tick.wav")
        self.low_on_time = False
        self._tick_channel: Optional[pygame.mixer.Channel] = None

        self.hand_icons = UIIconRow(
            FloatRect(137.0, GAME_PIXEL_HEIGHT - 23, 8, 8), load_texture(images / "hud" / "hudIconHand.png")
        )
        self.heart_icons = UIIconRow(
            FloatRect(72.0, GAME_PIXEL_HEIGHT - 23, 8, 8), load_texture(images / "hud" / "hudIconHeart.png")
        )
        self.enemy_icons = UIIconRow(FloatRect(228.0, GAME_PIXEL_HEIGHT - 22, 8, 8), self.enemy_textures.south)

        self.text = TextRenderer()

    def start_game(self) -> None:
        """Start the music and load the saved highscore."""
        if pygame.mixer.get_init():
            pygame.mixer.music.set_volume(0.5)
            try:
                pygame.mixer.music.load(str(self._music_path))
                pygame.mixer.music.play(-1)
            except pygame.error as error:
                logger.warning("Music is null %s", error)
        self.store.read()

    def end_game(self) -> None:
        """Fade the music out and save the score if it beats the highscore."""
        if pygame.mixer.get_init():
            pygame.mixer.music.fadeout(MUSIC_FADE_MS)
        if self.game_over_score > self.store.highscore:
            self.store.write(self.game_over_score)

    def handle_input(self, event: pygame.event.Event) -> None:
        if event.type == pygame.KEYDOWN:
            if getattr(event, "repeat", False):
                return
            if event.key == pygame.K_ESCAPE:
                self.escape_pressed = True
        self.player.handle_input(event)

    def update(self, dt: float) -> GameState:
        """Advance the round by dt seconds and return the state to move to."""
        self.round_timer.tick(dt)

        if not self.low_on_time and self.round_timer.remaining <= LOW_TIME_SECONDS:
            self._tick_channel = self.tick_sound.play(-1) if self.tick_sound is not None else None
            self.low_on_time = True
        if self.low_on_time and self.round_timer.remaining > LOW_TIME_SECONDS:
            self._stop_ticking()

        self.player.update(dt)
        self.player.update_projectiles(dt, self.enemies)

        for enemy in self.enemies:
            if enemy is None:
                continue
            enemy.update(dt)
            if enemy.is_colliding_with(self.player):
                self.player.take_damage()
        self.enemies = [enemy if enemy is not None and enemy.alive else None for enemy in self.enemies]

        if not self.player.is_alive:
            return self._game_over(REASON_DIED)
        if self.round_timer.lapsed:
            return self._game_over(REASON_OUT_OF_TIME)

        if not self.are_enemies_alive():
            self.spawn_next_wave()
            self.round_timer.add_time(SECONDS_ADDED_PER_WAVE)
            if self.wave_number % 2 == 0:
                self.player.add_health(1)

        self.new_wave_text_timer.tick(dt)

        self.hand_icons.icons_to_show = max(0, self.player.ammo)
        self.heart_icons.icons_to_show = max(0, self.player.health)
        self.enemy_icons.icons_to_show = 1

        if self.escape_pressed:
            self.escape_pressed = False
            self.reset()
            return GameState.MAIN_MENU
        return GameState.INGAME

    def _game_over(self, reason: str) -> GameState:
        logger.info("GAME OVER! %s", reason)
        self.game_over_reason = reason
        if self.game_over_sound is not None:
            self.game_over_sound.play()
        self.reset()
        return GameState.DEATH_SCREEN

    def _stop_ticking(self) -> None:
        if self._tick_channel is not None:
            self._tick_channel.stop()
            self._tick_channel = None
        self.low_on_time = False

    def render(self, surface: pygame.Surface) -> None:
        self.shop_background.render(surface, CAMERA_POSITION)

        self.player.render(surface)
        for enemy in self.enemies:
            if enemy is not None:
                enemy.render(surface)

        if not self.new_wave_text_timer.lapsed:
            with self.text.colored(YELLOW):
                self.text.draw_centered(surface, f"Wave {self.wave_number}")

        self.hud_background.render(surface)

        bottom_row_y = GAME_PIXEL_HEIGHT - 10
        top_row_y = GAME_PIXEL_HEIGHT - 22

        self.hand_icons.render(surface)
        self.heart_icons.render(surface)
        self.enemy_icons.render(surface)
        self.text.draw_text(surface, "x", Vector2(236.0, top_row_y))
        self.text.draw_text(surface, self.enemies_alive_count(), Vector2(236.0 + CHARACTER_SIZE, top_row_y))

        self.text.draw_text(surface, int(self.round_timer.remaining), Vector2(121.0, bottom_row_y))
        self.text.draw_text(surface, self.player.score, Vector2(172.0, bottom_row_y))
        self.text.draw_text(surface, self.wave_number, Vector2(84.0, bottom_row_y))

        if self.player.is_max_combo:
            self.text.color = YELLOW
        self.text.draw_text(surface, "x", Vector2(236.0, bottom_row_y))
        self.text.draw_text(surface, self.player.combo, Vector2(236.0 + CHARACTER_SIZE, bottom_row_y))
        self.text.color = (255, 255, 255)

    def spawn_next_wave(self) -> None:
        """Start the next wave: one enemy more every two waves, at most six."""
        self.wave_number += 1
        enemies_to_spawn = min(MAX_ENEMIES, 1 + self.wave_number // 2)
        spawn_points = self.level.random_spawn_points(enemies_to_spawn)
        for slot, point in enumerate(spawn_points):
            if self.enemies[slot] is not None:
                logger.error("An enemy is still alive when a new wave is being spawned.")
                continue
            self.enemies[slot] = Enemy(self.level, point, self.enemy_textures, self.hit_sound)
        self.new_wave_text_timer.restart()

    def reset(self) -> None:
        """Record the final score and put everything back to the start of a round."""
        self.game_over_score = self.player.score
        self.escape_pressed = False
        self.round_timer.set_one_shot(ROUND_START_SECONDS)
        self.wave_number = 0
        self.player.reset()
        self.delete_all_enemies()
        if self.low_on_time:
            self._stop_ticking()

    def delete_all_enemies(self) -> None:
        self.enemies = [None] * MAX_ENEMIES

    def enemies_alive_count(self) -> int:
        return sum(1 for enemy in self.enemies if enemy is not None)

    def are_enemies_alive(self) -> bool:
        return self.enemies_alive_count() > 0