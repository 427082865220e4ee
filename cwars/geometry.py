"""Two-dimensional vectors and floating-point rectangles."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Union

_Operand = Union["Vector", float, int]


@dataclass(frozen=True)
class Vector:
    """An immutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def _parts(self, other: _Operand) -> tuple[float, float]:
        if isinstance(other, Vector):
            return other.x, other.y
        if isinstance(other, Real):
            return float(other), float(other)
        raise TypeError(f"unsupported operand: {type(other).__name__}")

    def __add__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x - other.x, self.y - other.y)

    def __mul__(self, other: _Operand) -> Vector:
        """Multiply component-wise by a vector, or scale by a number."""
        if not isinstance(other, (Vector, Real)):
            return NotImplemented
        ox, oy = self._parts(other)
        return Vector(self.x * ox, self.y * oy)

    def __rmul__(self, other: float) -> Vector:
        if not isinstance(other, Real):
            return NotImplemented
        return self * other

    def __truediv__(self, other: _Operand) -> Vector:
        """Divide component-wise by a vector, or by a number."""
        if not isinstance(other, (Vector, Real)):
            return NotImplemented
        ox, oy = self._parts(other)
        return Vector(self.x / ox, self.y / oy)

    def magnitude(self) -> float:
        """Euclidean length of the vector."""
        return math.hypot(self.x, self.y)

    def normalize(self) -> Vector:
        """Unit vector in the same direction; the zero vector stays zero."""
        length = self.magnitude()
        if length == 0:
            return Vector(0.0, 0.0)
        return Vector(self.x / length, self.y / length)


@dataclass
class Rect:
    """An axis-aligned rectangle with floating-point position and size."""

    x: float = 0.0
    y: float = 0.0
    w: float = 0.0
    h: float = 0.0

    @property
    def position(self) -> Vector:
        return Vector(self.x, self.y)

    @property
    def size(self) -> Vector:
        return Vector(self.w, self.h)