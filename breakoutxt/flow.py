"""Application flow: splash screen, menu and game, and the moves between them."""

from __future__ import annotations

from typing import Optional

from .game import Session, new_session
from .menu import Menu, MenuOutcome
from .splash import SplashTimer
from .states import GameState, MainMenuAction

WINDOW_TITLE = "Breakout XT"
WINDOW_CLEAR_COLOR = (0.13, 0.13, 0.13)
FIXED_TIMESTEP = 1.0 / 64.0


class Breakout:
    """The whole application state, driven by frame updates and button presses."""

    def __init__(self) -> None:
        self.state = GameState.SPLASH_SCREEN
        self.menu = Menu()
        self.splash: Optional[SplashTimer] = SplashTimer()
        self.session: Optional[Session] = None
        self.quit_requested = False
        self._accumulator = 0.0

    @property
    def volume(self) -> int:
        return self.menu.volume

    @property
    def score(self) -> int:
        """Score of the game in progress, or zero outside a game."""
        return self.session.score if self.session is not None else 0

    def update(self, dt: float, left: bool = False, right: bool = False) -> bool:
        """Advance by ``dt`` seconds with the given arrow keys held.

        Returns whether the collision sound should play this frame.
        """
        if dt < 0.0:
            raise ValueError(f"cannot advance by a negative time: {dt}")
        if self.state is GameState.SPLASH_SCREEN:
            if self.splash is not None and self.splash.tick(dt):
                self.splash = None
                self._enter_main_menu()
            return False
        if self.state is GameState.GAME:
            return self._run_fixed_steps(dt, left, right)
        return False

    def press(self, action: MainMenuAction) -> MenuOutcome:
        """Press a menu button; only possible while the menu is shown."""
        if self.state is not GameState.MAIN_MENU:
            raise ValueError(f"menu buttons cannot be pressed in state {self.state.name}")
        outcome = self.menu.perform(action)
        if outcome is MenuOutcome.START_GAME:
            self._start_game()
        elif outcome is MenuOutcome.QUIT:
            self.quit_requested = True
        return outcome

    def select_volume(self, value: int) -> bool:
        """Choose a volume on the settings page; returns whether it changed."""
        if self.state is not GameState.MAIN_MENU:
            raise ValueError(f"volume cannot be chosen in state {self.state.name}")
        return self.menu.select_volume(value)

    def _enter_main_menu(self) -> None:
        self.state = GameState.MAIN_MENU
        self.menu.enable()

    def _start_game(self) -> None:
        self.state = GameState.GAME
        self.session = new_session()
        self._accumulator = 0.0

    def _end_game(self) -> None:
        self.session = None
        self._accumulator = 0.0
        self._enter_main_menu()

    def _run_fixed_steps(self, dt: float, left: bool, right: bool) -> bool:
        self._accumulator += dt
        collided = False
        while self.session is not None and self._accumulator >= FIXED_TIMESTEP:
            self._accumulator -= FIXED_TIMESTEP
            self.session.step(FIXED_TIMESTEP, left, right)
            if self.session.drain_collision_events():
                collided = True
            if self.session.is_cleared():
                self._end_game()
        return collided