import pytest

from breakoutxt.config import (
    MENU_HOVERED_BUTTON,
    MENU_HOVERED_PRESSED_BUTTON,
    MENU_NORMAL_BUTTON,
    MENU_PRESSED_BUTTON,
)
from breakoutxt.menu import (
    DEFAULT_VOLUME,
    Interaction,
    Menu,
    MenuOutcome,
    button_color,
)
from breakoutxt.states import MainMenuAction, MainMenuState


@pytest.mark.parametrize(
    "interaction, selected, expected",
    [
        (Interaction.PRESSED, False, MENU_PRESSED_BUTTON),
        (Interaction.PRESSED, True, MENU_PRESSED_BUTTON),
        (Interaction.NONE, True, MENU_PRESSED_BUTTON),
        (Interaction.HOVERED, True, MENU_HOVERED_PRESSED_BUTTON),
        (Interaction.HOVERED, False, MENU_HOVERED_BUTTON),
        (Interaction.NONE, False, MENU_NORMAL_BUTTON),
    ],
)
def test_button_color(interaction, selected, expected):
    assert button_color(interaction, selected) == expected


def test_menu_starts_disabled():
    menu = Menu()
    assert menu.state is MainMenuState.DISABLED
    assert menu.buttons() == []
    assert menu.volume == 7


def test_enable_shows_main_page():
    menu = Menu()
    menu.enable()
    assert menu.state is MainMenuState.MAIN_MENU
    buttons = menu.buttons()
    assert [b.action for b in buttons] == [
        MainMenuAction.PLAY,
        MainMenuAction.SETTINGS,
        MainMenuAction.QUIT,
    ]
    assert [b.label for b in buttons] == ["New Game", "Settings", "Quit"]


def test_play_starts_game_and_disables_menu():
    menu = Menu()
    menu.enable()
    assert menu.perform(MainMenuAction.PLAY) is MenuOutcome.START_GAME
    assert menu.state is MainMenuState.DISABLED


def test_quit_outcome():
    menu = Menu()
    menu.enable()
    assert menu.perform(MainMenuAction.QUIT) is MenuOutcome.QUIT


def test_settings_page_and_back():
    menu = Menu()
    menu.enable()
    assert menu.perform(MainMenuAction.SETTINGS) is MenuOutcome.STAY
    assert menu.state is MainMenuState.SETTINGS
    buttons = menu.buttons()
    assert [b.volume for b in buttons[:-1]] == list(range(10))
    assert buttons[-1].action is MainMenuAction.BACK
    assert [b.volume for b in buttons if b.selected] == [DEFAULT_VOLUME]

    assert menu.perform(MainMenuAction.BACK) is MenuOutcome.STAY
    assert menu.state is MainMenuState.MAIN_MENU


def test_select_volume_moves_selection():
    menu = Menu()
    menu.enable()
    menu.perform(MainMenuAction.SETTINGS)
    assert menu.select_volume(3) is True
    assert menu.volume == 3
    selected = [b for b in menu.buttons() if b.selected]
    assert [b.volume for b in selected] == [3]
    assert selected[0].color() == MENU_PRESSED_BUTTON
    assert menu.select_volume(3) is False


def test_select_volume_out_of_range():
    menu = Menu()
    menu.enable()
    menu.perform(MainMenuAction.SETTINGS)
    with pytest.raises(ValueError):
        menu.select_volume(10)
    assert menu.volume == DEFAULT_VOLUME


def test_select_volume_outside_settings():
    menu = Menu()
    menu.enable()
    with pytest.raises(ValueError):
        menu.select_volume(2)


def test_action_not_on_current_page():
    menu = Menu()
    menu.enable()
    menu.perform(MainMenuAction.SETTINGS)
    with pytest.raises(ValueError):
        menu.perform(MainMenuAction.PLAY)
    assert menu.state is MainMenuState.SETTINGS


def test_disabled_menu_rejects_actions():
    with pytest.raises(ValueError):
        Menu().perform(MainMenuAction.BACK)