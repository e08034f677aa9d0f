"""Game bodies and the functions that place them in the arena."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum, auto
from typing import ClassVar

from .config import (
    BALL_DIAMETER,
    BRICK_COLOR,
    BRICK_FIELD_PADDING,
    BRICK_FIELD_PADDLE_PADDING,
    BRICK_HEIGHT,
    BRICK_PADDING,
    BRICK_WIDTH,
    PADDLE_Y_PADDING,
    WALL_POSITION_BOTTOM,
    WALL_POSITION_LEFT,
    WALL_POSITION_RIGHT,
    WALL_POSITION_TOP,
    WALL_THICKNESS,
)
from .geometry import Aabb2d, BoundingCircle, Vec2

BALL_COLOR = (1.0, 0.5, 0.5)
BALL_INITIAL_VELOCITY = Vec2(0.5, -0.5)
BALL_SPEED = 400.0
BALL_STARTING_POSITION = Vec2(0.0, -50.0)

PADDLE_COLOR = (0.3, 0.3, 0.7)
PADDLE_SIZE = Vec2(120.0, 20.0)
PADDLE_SPEED = 500.0
PADDLE_X_PADDING = 10.0

WALL_COLOR = (0.8, 0.8, 0.8)


@dataclass
class Body:
    """A rectangular object in the arena, centred on ``position``."""

    position: Vec2
    size: Vec2

    color: ClassVar[tuple[float, float, float]] = (1.0, 1.0, 1.0)

    def bounds(self) -> Aabb2d:
        """The axis-aligned box the body occupies."""
        return Aabb2d(self.position, self.size / 2.0)


@dataclass
class Ball(Body):
    """The moving ball."""

    velocity: Vec2

    color: ClassVar[tuple[float, float, float]] = BALL_COLOR

    def bounding_circle(self) -> BoundingCircle:
        return BoundingCircle(self.position, BALL_DIAMETER / 2.0)


@dataclass
class Brick(Body):
    """A destructible brick."""

    color: ClassVar[tuple[float, float, float]] = BRICK_COLOR


@dataclass
class Paddle(Body):
    """The player's paddle."""

    color: ClassVar[tuple[float, float, float]] = PADDLE_COLOR

    def move(self, direction: float, dt: float) -> None:
        """Move horizontally by ``direction * speed * dt``, staying inside the walls."""
        left_bound = (
            WALL_POSITION_LEFT + WALL_THICKNESS / 2.0 + PADDLE_SIZE.x / 2.0 + PADDLE_X_PADDING
        )
        right_bound = (
            WALL_POSITION_RIGHT - WALL_THICKNESS / 2.0 - PADDLE_SIZE.x / 2.0 - PADDLE_X_PADDING
        )
        new_x = self.position.x + direction * PADDLE_SPEED * dt
        self.position = Vec2(min(max(new_x, left_bound), right_bound), self.position.y)


class WallLocation(Enum):
    """Which side of the arena a wall closes."""

    LEFT = auto()
    RIGHT = auto()
    TOP = auto()
    BOTTOM = auto()

    def position(self) -> Vec2:
        return {
            WallLocation.LEFT: Vec2(WALL_POSITION_LEFT, 0.0),
            WallLocation.RIGHT: Vec2(WALL_POSITION_RIGHT, 0.0),
            WallLocation.BOTTOM: Vec2(0.0, WALL_POSITION_BOTTOM),
            WallLocation.TOP: Vec2(0.0, WALL_POSITION_TOP),
        }[self]

    def size(self) -> Vec2:
        arena_width = WALL_POSITION_RIGHT - WALL_POSITION_LEFT
        arena_height = WALL_POSITION_TOP - WALL_POSITION_BOTTOM
        if self in (WallLocation.LEFT, WallLocation.RIGHT):
            return Vec2(WALL_THICKNESS, arena_height + WALL_THICKNESS)
        return Vec2(arena_width + WALL_THICKNESS, WALL_THICKNESS)


@dataclass
class Wall(Body):
    """A fixed wall at one side of the arena."""

    location: WallLocation

    color: ClassVar[tuple[float, float, float]] = WALL_COLOR


def spawn_ball() -> Ball:
    """The ball at its starting point, heading down and to the right."""
    return Ball(
        position=BALL_STARTING_POSITION,
        size=Vec2(BALL_DIAMETER, BALL_DIAMETER),
        velocity=BALL_INITIAL_VELOCITY.normalize() * BALL_SPEED,
    )


def spawn_bricks() -> list[Brick]:
    """The grid of bricks, row by row from the bottom, left to right."""
    paddle_y = WALL_POSITION_BOTTOM + PADDLE_Y_PADDING
    total_width = (WALL_POSITION_RIGHT - WALL_POSITION_LEFT) - 2.0 * BRICK_FIELD_PADDING
    bottom_edge = paddle_y + BRICK_FIELD_PADDLE_PADDING
    total_height = WALL_POSITION_TOP - bottom_edge - BRICK_FIELD_PADDING
    n_columns = math.floor(total_width / (BRICK_WIDTH + BRICK_PADDING))
    n_rows = math.floor(total_height / (BRICK_HEIGHT + BRICK_PADDING))
    if n_columns < 1:
        raise ValueError("arena too narrow for a single brick column")
    n_vertical_gaps = n_columns - 1
    center = (WALL_POSITION_LEFT + WALL_POSITION_RIGHT) / 2.0
    left_edge = (
        center - (n_columns / 2.0 * BRICK_WIDTH) - n_vertical_gaps / 2.0 * BRICK_PADDING
    )
    offset_x = left_edge + BRICK_WIDTH / 2.0
    offset_y = bottom_edge + BRICK_HEIGHT / 2.0
    size = Vec2(BRICK_WIDTH, BRICK_HEIGHT)

    return [
        Brick(
            position=Vec2(
                offset_x + column * (BRICK_WIDTH + BRICK_PADDING),
                offset_y + row * (BRICK_HEIGHT + BRICK_PADDING),
            ),
            size=size,
        )
        for row in range(n_rows)
        for column in range(n_columns)
    ]


def spawn_paddle() -> Paddle:
    """The paddle centred above the bottom wall."""
    return Paddle(
        position=Vec2(0.0, WALL_POSITION_BOTTOM + PADDLE_Y_PADDING),
        size=PADDLE_SIZE,
    )


def spawn_walls() -> list[Wall]:
    """The four walls: left, right, top and bottom."""
    return [
        Wall(position=location.position(), size=location.size(), location=location)
        for location in (
            WallLocation.LEFT,
            WallLocation.RIGHT,
            WallLocation.TOP,
            WallLocation.BOTTOM,
        )
    ]