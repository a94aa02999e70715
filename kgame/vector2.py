"""Two-dimensional vector with the usual arithmetic."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import ClassVar, Iterator


@dataclass(frozen=True)
class Vector2:
    """An immutable 2D vector of floats."""

    x: float = 0.0
    y: float = 0.0

    ZERO: ClassVar[Vector2]
    ONE: ClassVar[Vector2]
    RIGHT: ClassVar[Vector2]
    UP: ClassVar[Vector2]

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def length(self) -> float:
        """Euclidean length of the vector."""
        return math.sqrt(self.x * self.x + self.y * self.y)

    def normalize(self) -> Vector2:
        """Return a unit vector in the same direction.

        Raises ZeroDivisionError for the zero vector.
        """
        length = self.length()
        return Vector2(self.x / length, self.y / length)

    @staticmethod
    def lerp(begin: Vector2, end: Vector2, ratio: float) -> Vector2:
        """Interpolate linearly between two vectors, clamping ratio to [0, 1]."""
        ratio = min(1.0, max(0.0, ratio))
        return Vector2(
            begin.x + (end.x - begin.x) * ratio,
            begin.y + (end.y - begin.y) * ratio,
        )

    def __add__(self, other: object) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: object) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: object) -> Vector2:
        if isinstance(scalar, Real):
            return Vector2(scalar * self.x, scalar * self.y)
        return NotImplemented

    __rmul__ = __mul__


Vector2.ZERO = Vector2(0, 0)
Vector2.ONE = Vector2(1, 1)
Vector2.RIGHT = Vector2(1, 0)
Vector2.UP = Vector2(0, 1)