import pytest

from breakoutxt.entities import Brick
from breakoutxt.flow import FIXED_TIMESTEP, Breakout
from breakoutxt.game import new_session
from breakoutxt.geometry import Vec2
from breakoutxt.menu import MenuOutcome
from breakoutxt.splash import SPLASH_DURATION
from breakoutxt.states import GameState, MainMenuAction, MainMenuState


def _in_menu() -> Breakout:
    app = Breakout()
    app.update(SPLASH_DURATION)
    return app


def _in_game() -> Breakout:
    app = _in_menu()
    app.press(MainMenuAction.PLAY)
    return app


def test_starts_on_splash_screen():
    app = Breakout()
    assert app.state is GameState.SPLASH_SCREEN
    assert app.menu.state is MainMenuState.DISABLED


def test_splash_waits_for_timer():
    app = Breakout()
    app.update(SPLASH_DURATION / 2)
    assert app.state is GameState.SPLASH_SCREEN
    app.update(SPLASH_DURATION / 2)
    assert app.state is GameState.MAIN_MENU
    assert app.menu.state is MainMenuState.MAIN_MENU


def test_press_before_menu_raises():
    with pytest.raises(ValueError):
        Breakout().press(MainMenuAction.PLAY)


def test_negative_dt_raises():
    with pytest.raises(ValueError):
        Breakout().update(-0.1)


def test_play_starts_game():
    app = _in_menu()
    outcome = app.press(MainMenuAction.PLAY)
    assert outcome is MenuOutcome.START_GAME
    assert app.state is GameState.GAME
    assert app.menu.state is MainMenuState.DISABLED
    assert app.score == 0
    assert len(app.session.bricks) == len(new_session().bricks)


def test_quit_requests_exit():
    app = _in_menu()
    assert app.press(MainMenuAction.QUIT) is MenuOutcome.QUIT
    assert app.quit_requested is True


def test_settings_and_volume():
    app = _in_menu()
    app.press(MainMenuAction.SETTINGS)
    assert app.menu.state is MainMenuState.SETTINGS
    assert app.select_volume(3) is True
    assert app.volume == 3
    assert app.select_volume(3) is False
    app.press(MainMenuAction.BACK)
    assert app.menu.state is MainMenuState.MAIN_MENU


def test_volume_cannot_be_chosen_in_game():
    app = _in_game()
    with pytest.raises(ValueError):
        app.select_volume(2)


def test_short_update_does_not_step():
    app = _in_game()
    start = app.session.ball.position
    app.update(FIXED_TIMESTEP / 2)
    assert app.session.ball.position == start


def test_half_steps_accumulate_into_one_step():
    app = _in_game()
    reference = new_session()
    reference.step(FIXED_TIMESTEP)
    app.update(FIXED_TIMESTEP / 2)
    app.update(FIXED_TIMESTEP / 2)
    assert app.session.ball.position == reference.ball.position


def test_paddle_moves_left():
    app = _in_game()
    start_x = app.session.paddle.position.x
    app.update(FIXED_TIMESTEP * 4, left=True)
    assert app.session.paddle.position.x < start_x


def test_clearing_bricks_returns_to_menu():
    app = _in_game()
    app.session.bricks = []
    app.update(FIXED_TIMESTEP)
    assert app.state is GameState.MAIN_MENU
    assert app.menu.state is MainMenuState.MAIN_MENU
    assert app.session is None
    assert app.score == 0


def test_collision_plays_sound_and_breaks_brick():
    app = _in_game()
    ball = app.session.ball.position
    app.session.bricks = [Brick(position=ball, size=Vec2(100.0, 30.0))]
    assert app.update(FIXED_TIMESTEP) is True
    assert app.state is GameState.MAIN_MENU


def test_no_collision_no_sound():
    app = _in_game()
    assert app.update(FIXED_TIMESTEP) is False
    assert app.state is GameState.GAME