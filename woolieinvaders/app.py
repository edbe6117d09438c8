"""The application shell: window, event routing, frame loop and FPS counter."""

from __future__ import annotations

import argparse
import logging
import time
from dataclasses import dataclass, field
from enum import Enum, auto
from pathlib import Path
from typing import Optional, Sequence, Union

import pygame

from .game import Game
from .menu import Menu
from .space import (
    DEFAULT_PIXEL_ART_SCALE,
    GAME_PIXEL_HEIGHT,
    GAME_PIXEL_WIDTH,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
)
from .states import GameState
from .text import TextRenderer
from .vectors import Vector2

logger = logging.getLogger(__name__)

WINDOW_TITLE = "WoolieInvaders"
BACKGROUND_COLOR = (52, 9, 12)
FPS_REFRESH_SECONDS = 0.1
FRAME_RATE_CAP = 60


class AppResult(Enum):
    """What the application should do after handling an event or a frame."""

    CONTINUE = auto()
    SUCCESS = auto()
    FAILURE = auto()


@dataclass
class FpsCounter:
    """Averages frame times and refreshes the shown rate a few times a second."""

    refresh_after: float = FPS_REFRESH_SECONDS
    smoothed_frame_time: float = 0.0
    _sum: float = field(default=0.0, repr=False)
    _frames: int = field(default=0, repr=False)

    @property
    def fps(self) -> int:
        """Frames per second, or zero before the first refresh."""
        if self.smoothed_frame_time <= 0.0:
            return 0
        return int(1 / self.smoothed_frame_time)

    def add_frame(self, dt: float) -> int:
        """Record one frame of dt seconds and return the current rate."""
        self._sum += dt
        self._frames += 1
        if self._sum >= self.refresh_after:
            self.smoothed_frame_time = self._sum / self._frames
            self._sum = 0.0
            self._frames = 0
        return self.fps


class App:
    """Owns the window, the menus and the game, and drives them frame by frame."""

    def __init__(self, asset_root: Union[str, Path] = ".") -> None:
        pygame.init()
        try:
            pygame.mixer.init()
        except pygame.error as error:
            logger.warning("Audio could not initialize: %s", error)

        pygame.display.set_caption(WINDOW_TITLE)
        self.window = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        self.canvas = pygame.Surface((int(GAME_PIXEL_WIDTH), int(GAME_PIXEL_HEIGHT)))

        self.fullscreen = False
        self.scale = DEFAULT_PIXEL_ART_SCALE
        self.state = GameState.MAIN_MENU

        self.menu = Menu(asset_root)
        self.game = Game(asset_root)
        self.menu.scale = self.scale

        self.fps = FpsCounter()
        self.text = TextRenderer()

    def toggle_fullscreen(self) -> None:
        """Switch between windowed and fullscreen, rescaling the pixel art to fit."""
        self.fullscreen = not self.fullscreen
        if self.fullscreen:
            self.window = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
        else:
            self.window = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        height = self.window.get_height()
        if height > 0:
            self.scale = height / GAME_PIXEL_HEIGHT
            self.menu.scale = self.scale

    def handle_event(self, event: pygame.event.Event) -> AppResult:
        """Route one input event; SUCCESS means the application should end."""
        if event.type == pygame.QUIT:
            return AppResult.SUCCESS
        if event.type == pygame.KEYDOWN and event.key == pygame.K_F11:
            self.toggle_fullscreen()

        if (
            self.state is GameState.MAIN_MENU
            and event.type == pygame.KEYDOWN
            and event.key == pygame.K_ESCAPE
        ):
            return AppResult.SUCCESS

        if self.state.is_menu():
            self.menu.handle_input(event)
        elif self.state is GameState.INGAME and event.type in (pygame.KEYDOWN, pygame.KEYUP):
            self.game.handle_input(event)
        return AppResult.CONTINUE

    def iterate(self, dt: float) -> AppResult:
        """Update and draw one frame of dt seconds."""
        self.fps.add_frame(dt)
        self.canvas.fill(BACKGROUND_COLOR)

        next_state = self.state
        if self.state.is_menu():
            next_state = self.menu.update(self.state)
            self.menu.render(self.canvas, self.state, self.game, self.game.store.highscore)
            if next_state is GameState.INGAME:
                self.game.start_game()
        elif self.state is GameState.INGAME:
            next_state = self.game.update(dt)
            self.game.render(self.canvas)
            if next_state is not GameState.INGAME:
                self.game.end_game()

        fps_text = str(self.fps.fps)
        self.text.draw_text(
            self.canvas, fps_text, Vector2(GAME_PIXEL_WIDTH - self.text.text_width(fps_text), 0.0)
        )
        self._present()

        self.state = next_state
        if next_state is GameState.QUIT:
            return AppResult.SUCCESS
        return AppResult.CONTINUE

    def _present(self) -> None:
        size = (round(GAME_PIXEL_WIDTH * self.scale), round(GAME_PIXEL_HEIGHT * self.scale))
        self.window.fill(BACKGROUND_COLOR)
        self.window.blit(pygame.transform.scale(self.canvas, size), (0, 0))
        pygame.display.flip()

    def run(self) -> AppResult:
        """Run the event and frame loop until the application ends."""
        clock = pygame.time.Clock()
        last = time.perf_counter()
        try:
            while True:
                for event in pygame.event.get():
                    result = self.handle_event(event)
                    if result is not AppResult.CONTINUE:
                        return result
                now = time.perf_counter()
                dt, last = now - last, now
                result = self.iterate(dt)
                if result is not AppResult.CONTINUE:
                    return result
                clock.tick(FRAME_RATE_CAP)
        finally:
            pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the game; returns the process exit status."""
    parser = argparse.ArgumentParser(prog="woolieinvaders", description="Play WoolieInvaders.")
    parser.add_argument(
        "--assets",
        default=".",
        help="folder holding the images and audio folders (default: current folder)",
    )
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(message)s")

    try:
        app = App(args.assets)
    except (pygame.error, FileNotFoundError) as error:
        logger.error("Couldn't start the game: %s", error)
        pygame.quit()
        return 1
    result = app.run()
    return 0 if result is AppResult.SUCCESS else 1