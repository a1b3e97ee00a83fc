"""Small 2D geometry primitives shared by the game objects."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class Vector2D:
    """An immutable 2D vector of floats."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector2D) -> Vector2D:
        return Vector2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2D) -> Vector2D:
        return Vector2D(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Vector2D:
        return Vector2D(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> Vector2D:
        return Vector2D(self.x / divisor, self.y / divisor)

    def __neg__(self) -> Vector2D:
        return Vector2D(-self.x, -self.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def length_squared(self) -> float:
        """Squared length; cheaper than :meth:`magnitude` for comparisons."""
        return self.x * self.x + self.y * self.y

    def magnitude(self) -> float:
        return math.hypot(self.x, self.y)

    def distance(self, other: Vector2D) -> float:
        return (self - other).magnitude()

    def normalize(self) -> Vector2D:
        """Unit vector in the same direction, or the zero vector for zero length."""
        mag = self.magnitude()
        if mag == 0:
            return Vector2D(0.0, 0.0)
        return Vector2D(self.x / mag, self.y / mag)

    def dot(self, other: Vector2D) -> float:
        return self.x * other.x + self.y * other.y


@dataclass(frozen=True)
class Rect:
    """An integer rectangle given by its top-left corner and size."""

    x: int
    y: int
    w: int
    h: int

    @property
    def right(self) -> int:
        return self.x + self.w

    @property
    def bottom(self) -> int:
        return self.y + self.h