import pytest

from woolieinvaders.states import GameState


@pytest.mark.parametrize(
    "state,expected",
    [
        (GameState.MAIN_MENU, True),
        (GameState.HELP_MENU, True),
        (GameState.DEATH_SCREEN, True),
        (GameState.INGAME, False),
        (GameState.QUIT, False),
    ],
)
def test_is_menu(state, expected):
    assert state.is_menu() is expected


def test_menu_states_partition_all_states():
    menu_states = set()
    other_states = set()
    for state in GameState:
        if GameState.is_menu(state):
            menu_states.add(state)
        else:
            other_states.add(state)
    assert menu_states == {GameState.MAIN_MENU, GameState.HELP_MENU, GameState.DEATH_SCREEN}
    assert other_states == {GameState.INGAME, GameState.QUIT}
    assert list(GameState)[0] is GameState.MAIN_MENU
    assert GameState.MAIN_MENU.is_menu() is True
    assert GameState.QUIT.is_menu() is False