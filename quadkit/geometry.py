"""Small 2D vector, rectangle and colour types shared by the simulations."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class Vec2:
    """An immutable two-dimensional vector."""

    x: float = 0.0
    y: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vec2:
        return Vec2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vec2:
        return Vec2(self.x / scalar, self.y / scalar)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def length(self) -> float:
        """Euclidean length of the vector."""
        return math.hypot(self.x, self.y)

    def normalize(self) -> Vec2:
        """Unit vector pointing the same way; a zero vector has no direction."""
        length = self.length()
        if length == 0.0:
            raise ValueError("cannot normalize a zero-length vector")
        return Vec2(self.x / length, self.y / length)


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    x: float
    y: float
    w: float
    h: float

    @property
    def left(self) -> float:
        return self.x

    @property
    def right(self) -> float:
        return self.x + self.w

    @property
    def top(self) -> float:
        return self.y

    @property
    def bottom(self) -> float:
        return self.y + self.h

    def overlaps(self, other: Rect) -> bool:
        """True when the rectangles intersect; touching edges count."""
        return (
            self.left <= other.right
            and self.right >= other.left
            and self.top <= other.bottom
            and self.bottom >= other.top
        )

    def contains(self, point: Vec2) -> bool:
        """True when the point lies inside; left and top edges are inclusive."""
        return (
            self.left <= point.x < self.right
            and self.top <= point.y < self.bottom
        )


@dataclass(frozen=True)
class Color:
    """An RGBA colour with float channels in the range 0..1."""

    r: float
    g: float
    b: float
    a: float = 1.0

    def to_tuple(self) -> tuple[float, float, float, float]:
        return (self.r, self.g, self.b, self.a)


def color_from_rgba(r: int, g: int, b: int, a: int) -> Color:
    """Build a colour from 8-bit channel values."""
    return Color(r / 255.0, g / 255.0, b / 255.0, a / 255.0)


def polar_to_cartesian(rho: float, theta: float) -> Vec2:
    """Convert polar coordinates (radius, angle in radians) to a vector."""
    return Vec2(rho * math.cos(theta), rho * math.sin(theta))


WHITE = Color(1.0, 1.0, 1.0, 1.0)
BLACK = Color(0.0, 0.0, 0.0, 1.0)
RED = Color(0.9, 0.16, 0.22, 1.0)
GREEN = Color(0.0, 0.89, 0.19, 1.0)
BLUE = Color(0.0, 0.47, 0.95, 1.0)