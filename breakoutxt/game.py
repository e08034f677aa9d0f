"""A single round of play: moving bodies, collisions, score and collision events."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from .entities import (
    Ball,
    Body,
    Brick,
    Paddle,
    Wall,
    spawn_ball,
    spawn_bricks,
    spawn_paddle,
    spawn_walls,
)
from .geometry import Collision, Vec2, ball_collision


@dataclass
class Session:
    """Everything that exists while a game is being played."""

    ball: Ball
    paddle: Paddle
    walls: list[Wall]
    bricks: list[Brick]
    score: int = 0
    _collision_events: int = field(default=0, init=False, repr=False)

    def _colliders(self) -> Iterator[Body]:
        yield from self.walls
        yield self.paddle
        yield from self.bricks

    def apply_velocity(self, dt: float) -> None:
        """Advance the ball along its velocity for ``dt`` seconds."""
        self.ball.position = self.ball.position + self.ball.velocity * dt

    def check_for_collisions(self) -> list[Collision]:
        """Bounce the ball off everything it touches and break any bricks hit.

        Returns the sides struck, one entry per collider touched.
        """
        circle = self.ball.bounding_circle()
        vx, vy = self.ball.velocity.x, self.ball.velocity.y
        broken: set[int] = set()
        sides: list[Collision] = []

        for collider in self._colliders():
            side = ball_collision(circle, collider.bounds())
            if side is None:
                continue

            sides.append(side)
            self._collision_events += 1

            if isinstance(collider, Brick):
                broken.add(id(collider))
                self.score += 1

            if side is Collision.LEFT and vx > 0.0 or side is Collision.RIGHT and vx < 0.0:
                vx = -vx
            if side is Collision.TOP and vy < 0.0 or side is Collision.BOTTOM and vy > 0.0:
                vy = -vy

        self.ball.velocity = Vec2(vx, vy)
        if broken:
            self.bricks = [brick for brick in self.bricks if id(brick) not in broken]
        return sides

    def update_paddle(self, left: bool, right: bool, dt: float) -> None:
        """Move the paddle according to which arrow keys are held."""
        direction = (1.0 if right else 0.0) - (1.0 if left else 0.0)
        self.paddle.move(direction, dt)

    def step(self, dt: float, left: bool = False, right: bool = False) -> None:
        """Run one fixed update: paddle input, ball movement, then collisions."""
        self.update_paddle(left, right, dt)
        self.apply_velocity(dt)
        self.check_for_collisions()

    def is_cleared(self) -> bool:
        """Whether every brick has been destroyed."""
        return not self.bricks

    def drain_collision_events(self) -> int:
        """Return how many collisions happened since the last call, and forget them."""
        count, self._collision_events = self._collision_events, 0
        return count


def new_session() -> Session:
    """A fresh game with all bodies in their starting places and a zero score."""
    return Session(
        ball=spawn_ball(),
        paddle=spawn_paddle(),
        walls=spawn_walls(),
        bricks=spawn_bricks(),
    )