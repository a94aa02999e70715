"""Complex numbers with arithmetic against complex and real operands."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real


@dataclass(frozen=True)
class Complex:
    """An immutable complex number r + i*j."""

    r: float = 0.0
    i: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "r", float(self.r))
        object.__setattr__(self, "i", float(self.i))

    def length(self) -> float:
        """Modulus of the number."""
        return math.sqrt(self.r * self.r + self.i * self.i)

    def normalize(self) -> Complex:
        """Return the number scaled to unit modulus.

        Raises ZeroDivisionError for zero.
        """
        length = self.length()
        return Complex(self.r / length, self.i / length)

    def __str__(self) -> str:
        return f"{self.r:g} + {self.i:g}i"

    def __complex__(self) -> complex:
        return complex(self.r, self.i)

    @staticmethod
    def _coerce(value: object) -> Complex | None:
        if isinstance(value, Complex):
            return value
        if isinstance(value, Real):
            return Complex(float(value), 0.0)
        return None

    def __neg__(self) -> Complex:
        return Complex(-self.r, -self.i)

    def __add__(self, other: object) -> Complex:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Complex(self.r + rhs.r, self.i + rhs.i)

    def __radd__(self, other: object) -> Complex:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return Complex(lhs.r + self.r, lhs.i + self.i)

    def __sub__(self, other: object) -> Complex:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Complex(self.r - rhs.r, self.i - rhs.i)

    def __rsub__(self, other: object) -> Complex:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return Complex(lhs.r - self.r, lhs.i - self.i)

    def __mul__(self, other: object) -> Complex:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Complex(
            self.r * rhs.r - self.i * rhs.i,
            self.r * rhs.i + self.i * rhs.r,
        )

    def __rmul__(self, other: object) -> Complex:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs * self