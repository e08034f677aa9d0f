"""Arena layout, sizes and colours shared across the game."""

BALL_DIAMETER = 30.0

BRICK_COLOR = (0.5, 0.5, 1.0)
BRICK_FIELD_PADDING = 20.0
BRICK_FIELD_PADDLE_PADDING = 270.0
BRICK_PADDING = 5.0
BRICK_WIDTH = 100.0
BRICK_HEIGHT = 30.0

MENU_HOVERED_BUTTON = (0.25, 0.25, 0.25)
MENU_HOVERED_PRESSED_BUTTON = (0.25, 0.65, 0.25)
MENU_NORMAL_BUTTON = (0.15, 0.15, 0.15)
MENU_PRESSED_BUTTON = (0.35, 0.75, 0.35)

PADDLE_Y_PADDING = 60.0

WALL_POSITION_BOTTOM = -300.0
WALL_POSITION_LEFT = -450.0
WALL_POSITION_RIGHT = 450.0
WALL_POSITION_TOP = 300.0
WALL_THICKNESS = 10.0