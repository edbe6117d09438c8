"""The top-level states the application can be in."""

from __future__ import annotations

from enum import Enum, auto


class GameState(Enum):
    MAIN_MENU = auto()
    HELP_MENU = auto()
    INGAME = auto()
    DEATH_SCREEN = auto()
    QUIT = auto()

    def is_menu(self) -> bool:
        """True for the states handled by the menu screens."""
        return self in (GameState.MAIN_MENU, GameState.HELP_MENU, GameState.DEATH_SCREEN)