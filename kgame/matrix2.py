"""2x2 matrices acting on Vector2."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import ClassVar

from .vector2 import Vector2


@dataclass
class Matrix2:
    """A mutable 2x2 matrix; defaults to the identity."""

    m11: float = 1.0
    m12: float = 0.0
    m21: float = 0.0
    m22: float = 1.0

    ZERO: ClassVar[Matrix2]
    IDENTITY: ClassVar[Matrix2]

    def set(self, e11: float, e12: float, e21: float, e22: float) -> None:
        """Overwrite all four entries."""
        self.m11, self.m12 = e11, e12
        self.m21, self.m22 = e21, e22

    def set_rotation(self, angle: float) -> None:
        """Make this a counter-clockwise rotation by angle radians."""
        c = math.cos(angle)
        s = math.sin(angle)
        self.set(c, -s, s, c)

    def __mul__(self, other: object) -> Vector2:
        if isinstance(other, Vector2):
            return Vector2(
                self.m11 * other.x + self.m12 * other.y,
                self.m21 * other.x + self.m22 * other.y,
            )
        return NotImplemented

    def __rmul__(self, other: object) -> Vector2 | Matrix2:
        if isinstance(other, Vector2):
            return Vector2(
                other.x * self.m11 + other.y * self.m21,
                other.x * self.m12 + other.y * self.m22,
            )
        if isinstance(other, Real):
            return Matrix2(
                other * self.m11,
                other * self.m12,
                other * self.m21,
                other * self.m22,
            )
        return NotImplemented


Matrix2.ZERO = Matrix2(0.0, 0.0, 0.0, 0.0)
Matrix2.IDENTITY = Matrix2(1.0, 0.0, 0.0, 1.0)