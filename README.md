# breakoutxt

breakoutxt is a small Breakout arcade game. It opens with a short splash
screen. The main menu then offers **New Game**, **Settings** and **Quit**. On
the settings page you can pick a volume level from 0 to 9. The default level
is 7.

During a game you move the paddle with the left and right arrow keys. The ball
breaks any brick it hits and bounces off the paddle, the bricks and the four
walls. Each broken brick adds one point to the score in the top-left corner.
When no bricks are left, the game goes back to the main menu.

## Installation

```
pip install .
```

This also installs `pygame`.

## Playing

```
breakoutxt
```

```
breakoutxt --assets path/to/assets
```

The `--assets` option names the directory that holds the images and sounds. It
defaults to `assets` in the current directory. The game looks for these files
in that directory:

- `Bevy/branding/icon.png`, the splash screen image
- `Kenney/game_icons/forward.png`, `Kenney/game_icons/gear.png` and
  `Kenney/game_icons/exitLeft.png`, the menu button icons
- `Kenney/impact_sounds/footstep_concrete_002.ogg`, the collision sound

If a file is missing or cannot be loaded, the game still runs without that
image or sound.

## Using the game logic

The game rules do not need a window, so you can drive them from your own code:

```python
from breakoutxt.flow import Breakout
from breakoutxt.states import GameState, MainMenuAction

game = Breakout()
game.update(1.5)                     # the splash screen runs out
assert game.state is GameState.MAIN_MENU
game.press(MainMenuAction.PLAY)      # start a new game
sound = game.update(1 / 60, False, True)  # one frame holding the right arrow
print(game.score)
```

`Breakout.update(dt, left, right)` advances the game in fixed steps of 1/64
second. It returns `True` when a collision happened, which is when the
collision sound should play. `Breakout.press(action)` and
`Breakout.select_volume(value)` only work while the menu is showing. Otherwise
they raise `ValueError`.

The package has these modules:

- `breakoutxt.geometry`: `Vec2`, `Aabb2d`, `BoundingCircle` and
  `ball_collision`, which reports which side of a box the ball struck.
- `breakoutxt.entities`: the ball, bricks, paddle and walls, plus
  `spawn_ball`, `spawn_bricks`, `spawn_paddle` and `spawn_walls`.
- `breakoutxt.game`: `Session` and `new_session` for one round of play. A
  session handles movement, collisions, score and a count of collisions.
- `breakoutxt.menu`: the `Menu` pages, their `Button`s and `button_color`.
- `breakoutxt.splash`: `SplashTimer`.
- `breakoutxt.flow`: `Breakout`, which moves between the splash screen, the
  menu and the game.
- `breakoutxt.app`: the pygame window and the `main` entry point.
- `breakoutxt.states` and `breakoutxt.config`: the shared states, actions and
  constants.

## Limitations

- The volume you choose is stored and shown on the settings page, but it does
  not change how loud the collision sound plays.
- You cannot lose. There are no lives, and the ball bounces off the bottom wall
  like any other wall.
- The package ships no images or sounds. You provide them through `--assets`.

## Running the tests

```
pip install .[test]
pytest
```