"""Application states and menu actions."""

from enum import Enum, auto


class GameState(Enum):
    """Top-level state of the application; starts at the splash screen."""

    SPLASH_SCREEN = auto()
    MAIN_MENU = auto()
    GAME = auto()


class MainMenuState(Enum):
    """Which menu page is shown; disabled outside the main menu."""

    DISABLED = auto()
    MAIN_MENU = auto()
    SETTINGS = auto()


class MainMenuAction(Enum):
    """What a menu button does when pressed."""

    PLAY = auto()
    SETTINGS = auto()
    QUIT = auto()
    BACK = auto()