"""3x3 homogeneous matrices for 2D transforms."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import ClassVar

from .vector2 import Vector2


@dataclass
class Matrix3:
    """A mutable 3x3 matrix; defaults to the identity."""

    m11: float = 1.0
    m12: float = 0.0
    m13: float = 0.0
    m21: float = 0.0
    m22: float = 1.0
    m23: float = 0.0
    m31: float = 0.0
    m32: float = 0.0
    m33: float = 1.0

    ZERO: ClassVar[Matrix3]
    IDENTITY: ClassVar[Matrix3]

    def set(
        self,
        e11: float, e12: float, e13: float,
        e21: float, e22: float, e23: float,
        e31: float, e32: float, e33: float,
    ) -> None:
        """Overwrite all nine entries."""
        self.m11, self.m12, self.m13 = e11, e12, e13
        self.m21, self.m22, self.m23 = e21, e22, e23
        self.m31, self.m32, self.m33 = e31, e32, e33

    def set_identity(self) -> None:
        """Reset to the identity matrix."""
        self.set(1.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0)

    def set_rotation(self, theta: float) -> None:
        """Make this a counter-clockwise rotation by theta radians."""
        self.set_identity()
        c = math.cos(theta)
        s = math.sin(theta)
        self.m11, self.m12 = c, -s
        self.m21, self.m22 = s, c

    def set_shear(self, shear_x_parallel_to_y: float, shear_y_parallel_to_x: float) -> None:
        """Make this a shear matrix."""
        self.set_identity()
        self.m12 = shear_y_parallel_to_x
        self.m21 = shear_x_parallel_to_y

    def set_scale(self, uniform_scale: float) -> None:
        """Scale all three diagonal entries uniformly."""
        self.set_identity()
        self.m11 = uniform_scale
        self.m22 = uniform_scale
        self.m33 = uniform_scale

    def set_translation(self, tx: float, ty: float) -> None:
        """Make this a translation by (tx, ty)."""
        self.set_identity()
        self.m13 = tx
        self.m23 = ty

    def basis(self, index: int) -> Vector2:
        """Return basis column 0 or 1; raise IndexError for any other index."""
        if index == 0:
            return Vector2(self.m11, self.m21)
        if index == 1:
            return Vector2(self.m12, self.m22)
        raise IndexError(f"basis index must be 0 or 1, got {index}")

    def __mul__(self, other: object) -> Vector2 | Matrix3:
        if isinstance(other, Vector2):
            x = self.m11 * other.x + self.m12 * other.y + self.m13
            y = self.m21 * other.x + self.m22 * other.y + self.m23
            z = self.m31 * other.x + self.m32 * other.y + self.m33
            return Vector2(x / z, y / z)
        if isinstance(other, Matrix3):
            a, b = self, other
            return Matrix3(
                a.m11 * b.m11 + a.m12 * b.m21 + a.m13 * b.m31,
                a.m11 * b.m12 + a.m12 * b.m22 + a.m13 * b.m32,
                a.m11 * b.m13 + a.m12 * b.m23 + a.m13 * b.m33,
                a.m21 * b.m11 + a.m22 * b.m21 + a.m23 * b.m31,
                a.m21 * b.m12 + a.m22 * b.m22 + a.m23 * b.m32,
                a.m21 * b.m13 + a.m22 * b.m23 + a.m23 * b.m33,
                a.m31 * b.m11 + a.m32 * b.m21 + a.m33 * b.m31,
                a.m31 * b.m12 + a.m32 * b.m22 + a.m33 * b.m32,
                a.m31 * b.m13 + a.m32 * b.m23 + a.m33 * b.m33,
            )
        return NotImplemented

    def __rmul__(self, other: object) -> Vector2 | Matrix3:
        if isinstance(other, Vector2):
            x = other.x * self.m11 + other.y * self.m21 + self.m31
            y = other.x * self.m12 + other.y * self.m22 + self.m32
            z = other.x * self.m13 + other.y * self.m23 + self.m33
            return Vector2(x / z, y / z)
        if isinstance(other, Real):
            return Matrix3(
                other * self.m11, other * self.m12, other * self.m13,
                other * self.m21, other * self.m22, other * self.m23,
                other * self.m31, other * self.m32, other * self.m33,
            )
        return NotImplemented


Matrix3.ZERO = Matrix3(0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0)
Matrix3.IDENTITY = Matrix3()