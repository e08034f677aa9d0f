"""Main menu and settings pages: buttons, their colours and what pressing them does."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from .config import (
    MENU_HOVERED_BUTTON,
    MENU_HOVERED_PRESSED_BUTTON,
    MENU_NORMAL_BUTTON,
    MENU_PRESSED_BUTTON,
)
from .states import MainMenuAction, MainMenuState

TITLE = "Breakout XT"
TEXT_COLOR = (0.9, 0.9, 0.9)
PANEL_COLOR = (220 / 255, 20 / 255, 60 / 255)
DEFAULT_VOLUME = 7
VOLUME_LEVELS = range(10)

BUTTON_HEIGHT = 65.0
MAIN_BUTTON_WIDTH = 300.0
SETTINGS_BUTTON_WIDTH = 200.0
VOLUME_BUTTON_WIDTH = 30.0

PLAY_ICON = "Kenney/game_icons/forward.png"
SETTINGS_ICON = "Kenney/game_icons/gear.png"
EXIT_ICON = "Kenney/game_icons/exitLeft.png"


class Interaction(Enum):
    """How the pointer is interacting with a button."""

    PRESSED = auto()
    HOVERED = auto()
    NONE = auto()


class MenuOutcome(Enum):
    """What the application should do after a menu action."""

    STAY = auto()
    START_GAME = auto()
    QUIT = auto()


def button_color(interaction: Interaction, selected: bool) -> tuple[float, float, float]:
    """Background colour of a button given its interaction and selection."""
    if interaction is Interaction.PRESSED or (interaction is Interaction.NONE and selected):
        return MENU_PRESSED_BUTTON
    if interaction is Interaction.HOVERED:
        return MENU_HOVERED_PRESSED_BUTTON if selected else MENU_HOVERED_BUTTON
    return MENU_NORMAL_BUTTON


@dataclass(frozen=True)
class Button:
    """A menu button: either an action button or a volume setting."""

    label: str
    width: float
    height: float = BUTTON_HEIGHT
    action: Optional[MainMenuAction] = None
    volume: Optional[int] = None
    selected: bool = False
    icon: Optional[str] = None

    def color(self, interaction: Interaction = Interaction.NONE) -> tuple[float, float, float]:
        return button_color(interaction, self.selected)


_PAGE_ACTIONS = {
    MainMenuState.DISABLED: (),
    MainMenuState.MAIN_MENU: (
        MainMenuAction.PLAY,
        MainMenuAction.SETTINGS,
        MainMenuAction.QUIT,
    ),
    MainMenuState.SETTINGS: (MainMenuAction.BACK,),
}


@dataclass
class Menu:
    """The menu's current page and the chosen volume."""

    state: MainMenuState = MainMenuState.DISABLED
    volume: int = DEFAULT_VOLUME

    def enable(self) -> None:
        """Show the main page."""
        self.state = MainMenuState.MAIN_MENU

    def perform(self, action: MainMenuAction) -> MenuOutcome:
        """Carry out a button's action; the button must be on the current page."""
        if action not in _PAGE_ACTIONS[self.state]:
            raise ValueError(f"{action.name} is not available on the {self.state.name} page")
        if action is MainMenuAction.PLAY:
            self.state = MainMenuState.DISABLED
            return MenuOutcome.START_GAME
        if action is MainMenuAction.SETTINGS:
            self.state = MainMenuState.SETTINGS
        elif action is MainMenuAction.BACK:
            self.state = MainMenuState.MAIN_MENU
        elif action is MainMenuAction.QUIT:
            return MenuOutcome.QUIT
        return MenuOutcome.STAY

    def select_volume(self, value: int) -> bool:
        """Choose a volume on the settings page; returns whether it changed."""
        if self.state is not MainMenuState.SETTINGS:
            raise ValueError("volume can only be chosen on the settings page")
        if value not in VOLUME_LEVELS:
            raise ValueError(f"volume must be between 0 and {VOLUME_LEVELS[-1]}: {value}")
        if value == self.volume:
            return False
        self.volume = value
        return True

    def buttons(self) -> list[Button]:
        """The buttons of the current page, top to bottom, left to right."""
        if self.state is MainMenuState.MAIN_MENU:
            return [
                Button("New Game", MAIN_BUTTON_WIDTH, action=MainMenuAction.PLAY, icon=PLAY_ICON),
                Button(
                    "Settings",
                    MAIN_BUTTON_WIDTH,
                    action=MainMenuAction.SETTINGS,
                    icon=SETTINGS_ICON,
                ),
                Button("Quit", MAIN_BUTTON_WIDTH, action=MainMenuAction.QUIT, icon=EXIT_ICON),
            ]
        if self.state is MainMenuState.SETTINGS:
            volume_buttons = [
                Button("", VOLUME_BUTTON_WIDTH, volume=level, selected=level == self.volume)
                for level in VOLUME_LEVELS
            ]
            return volume_buttons + [
                Button("Back", SETTINGS_BUTTON_WIDTH, action=MainMenuAction.BACK)
            ]
        return []