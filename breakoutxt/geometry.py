"""Two-dimensional vectors, bounding volumes and ball collision detection."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional


@dataclass(frozen=True)
class Vec2:
    """An immutable 2D vector."""

    x: float
    y: float

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Vec2:
        return Vec2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> Vec2:
        return Vec2(self.x / divisor, self.y / divisor)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def length(self) -> float:
        """Euclidean length of the vector."""
        return math.hypot(self.x, self.y)

    def normalize(self) -> Vec2:
        """Return the unit vector in the same direction."""
        length = self.length()
        if length == 0.0 or not math.isfinite(length):
            raise ValueError(f"cannot normalize vector {self}")
        return self / length


class Collision(Enum):
    """Side of a box that the ball struck."""

    LEFT = auto()
    RIGHT = auto()
    TOP = auto()
    BOTTOM = auto()


@dataclass(frozen=True)
class Aabb2d:
    """Axis-aligned bounding box given by its centre and half extents."""

    center: Vec2
    half_size: Vec2

    @property
    def min(self) -> Vec2:
        return self.center - self.half_size

    @property
    def max(self) -> Vec2:
        return self.center + self.half_size

    def closest_point(self, point: Vec2) -> Vec2:
        """The point inside the box nearest to ``point``."""
        low, high = self.min, self.max
        return Vec2(
            min(max(point.x, low.x), high.x),
            min(max(point.y, low.y), high.y),
        )


@dataclass(frozen=True)
class BoundingCircle:
    """A circle given by its centre and radius."""

    center: Vec2
    radius: float

    def intersects(self, aabb: Aabb2d) -> bool:
        """Whether the circle touches or overlaps the box."""
        offset = self.center - aabb.closest_point(self.center)
        return offset.x * offset.x + offset.y * offset.y <= self.radius * self.radius


def ball_collision(ball: BoundingCircle, bounding_box: Aabb2d) -> Optional[Collision]:
    """Return the side of ``bounding_box`` the ball hits, or None if it misses."""
    if not ball.intersects(bounding_box):
        return None

    offset = ball.center - bounding_box.closest_point(ball.center)
    if abs(offset.x) > abs(offset.y):
        return Collision.LEFT if offset.x < 0.0 else Collision.RIGHT
    return Collision.TOP if offset.y > 0.0 else Collision.BOTTOM