"""The main menu, help screen and death screen."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Optional, Union

import pygame

from .space import DEFAULT_PIXEL_ART_SCALE, GAME_PIXEL_HEIGHT, GAME_PIXEL_WIDTH
from .sprite import FloatRect, Sprite, load_texture
from .states import GameState
from .text import BLACK, CHARACTER_SIZE, TextRenderer
from .ui import UIButton
from .vectors import Vector2

if TYPE_CHECKING:
    from .game import Game

logger = logging.getLogger(__name__)

DEATH_BACKGROUND_SIZE = Vector2(128.0, 128.0)
HEADER_SIZE = Vector2(256.0, 32.0)
BUTTON_WIDTH = 60.0
BUTTON_HEIGHT = 20.0


def _load_sound(path: Path) -> Optional[pygame.mixer.Sound]:
    if not pygame.mixer.get_init() or not path.is_file():
        return None
    try:
        return pygame.mixer.Sound(str(path))
    except pygame.error as error:
        logger.warning("Could not load sound %s: %s", path, error)
        return None


class Menu:
    """All of the game's menu screens, driven by the mouse and the escape key."""

    def __init__(self, asset_root: Union[str, Path] = ".") -> None:
        root = Path(asset_root)
        menu_images = root / "images" / "menu"
        click_sound = _load_sound(root / "audio" / "buttonClick.wav")

        def button(top: float, name: str) -> UIButton:
            return UIButton(
                FloatRect(GAME_PIXEL_WIDTH / 2 - BUTTON_WIDTH / 2, top, BUTTON_WIDTH, BUTTON_HEIGHT),
                load_texture(menu_images / f"button{name}.png"),
                load_texture(menu_images / f"button{name}Hover.png"),
                click_sound,
            )

        self.header = Sprite(load_texture(menu_images / "header.png"))
        self.main_background = Sprite(load_texture(menu_images / "menuBGWide.png"))
        self.help_background = Sprite(load_texture(menu_images / "menuHelpBG.png"))
        self.death_background = Sprite(load_texture(menu_images / "gameOverScreen.png"))

        self.play_button = button(80.0, "Play")
        self.help_button = button(100.0, "Help")
        self.quit_button = button(120.0, "Quit")
        self.death_done_button = button(150.0, "Done")
        self.help_done_button = button(150.0, "Done")

        self.death_background.size = DEATH_BACKGROUND_SIZE
        self.death_background.set_screen_position(
            Vector2(
                GAME_PIXEL_WIDTH / 2 - DEATH_BACKGROUND_SIZE.x / 2,
                GAME_PIXEL_HEIGHT / 2 - DEATH_BACKGROUND_SIZE.y / 2,
            )
        )
        self.header.size = HEADER_SIZE
        self.header.set_screen_position(Vector2(GAME_PIXEL_WIDTH / 2 - HEADER_SIZE.x / 2, 16.0))

        full_screen = Vector2(GAME_PIXEL_WIDTH, GAME_PIXEL_HEIGHT)
        self.help_background.size = full_screen
        self.main_background.size = full_screen

        self.escape_pressed = False
        self.left_mouse_clicked = False
        self.mouse_position = Vector2()  # screen space
        self.scale = DEFAULT_PIXEL_ART_SCALE
        self.text = TextRenderer()

    def handle_input(self, event: pygame.event.Event) -> None:
        if event.type == pygame.MOUSEMOTION:
            x, y = event.pos
            self.mouse_position = Vector2(float(x), float(y))
        elif event.type == pygame.KEYDOWN:
            if getattr(event, "repeat", False):
                return
            if event.key == pygame.K_ESCAPE:
                self.escape_pressed = True
        elif event.type == pygame.MOUSEBUTTONDOWN:
            if event.button == pygame.BUTTON_LEFT:
                self.left_mouse_clicked = True

    def _clicked(self, button: UIButton) -> bool:
        return button.contains(self.mouse_position, self.scale, click=True)

    def update(self, state: GameState) -> GameState:
        """Apply the inputs since the last frame and return the next state."""
        next_state = state
        mouse, scale = self.mouse_position, self.scale

        if state is GameState.MAIN_MENU:
            self.play_button.update(mouse, scale)
            self.help_button.update(mouse, scale)
            self.quit_button.update(mouse, scale)
            if self.left_mouse_clicked:
                if self._clicked(self.play_button):
                    logger.info("Starting the game")
                    next_state = GameState.INGAME
                if self._clicked(self.help_button):
                    next_state = GameState.HELP_MENU
                if self._clicked(self.quit_button):
                    next_state = GameState.QUIT
        elif state is GameState.HELP_MENU:
            self.play_button.update(mouse, scale)
            self.help_done_button.update(mouse, scale)
            if self.left_mouse_clicked and self._clicked(self.help_done_button):
                next_state = GameState.MAIN_MENU
            if self.escape_pressed:
                next_state = GameState.MAIN_MENU
        elif state is GameState.DEATH_SCREEN:
            self.death_done_button.update(mouse, scale)
            if self.left_mouse_clicked and self._clicked(self.death_done_button):
                next_state = GameState.MAIN_MENU
            if self.escape_pressed:
                next_state = GameState.MAIN_MENU

        self.escape_pressed = False
        self.left_mouse_clicked = False
        return next_state

    def render(self, surface: pygame.Surface, state: GameState, game: Game, highscore: int) -> None:
        """Draw the screen for the given state."""
        if state is GameState.MAIN_MENU:
            self.main_background.render(surface)
            self.header.render(surface)
            self.play_button.render(surface)
            self.help_button.render(surface)
            self.quit_button.render(surface)
        elif state is GameState.HELP_MENU:
            self.help_background.render(surface)
            self.help_done_button.render(surface)
        elif state is GameState.DEATH_SCREEN:
            self.main_background.render(surface)
            self.death_background.render(surface)
            reason = game.game_over_reason
            with self.text.colored(BLACK):
                self.text.draw_text(
                    surface,
                    reason,
                    Vector2(GAME_PIXEL_WIDTH / 2 - CHARACTER_SIZE * len(reason) // 2, 66.0),
                    underlay=False,
                )
                self.text.draw_text(
                    surface, game.game_over_score, Vector2(GAME_PIXEL_WIDTH / 2 - 12, 84.0), underlay=False
                )
                self.text.draw_text(
                    surface, highscore, Vector2(GAME_PIXEL_WIDTH / 2 - 58, 116.0), underlay=False
                )
            self.death_done_button.render(surface)