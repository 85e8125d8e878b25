"""Three-component vectors used for positions, directions and normals."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Vec3:
    """An immutable 3D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, t: float) -> Vec3:
        if not isinstance(t, (int, float)):
            return NotImplemented
        return Vec3(self.x * t, self.y * t, self.z * t)

    def dot(self, other: Vec3) -> float:
        """Return the scalar product with ``other``."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def length(self) -> float:
        """Return the Euclidean length."""
        return math.sqrt(self.dot(self))

    def normalized(self) -> Vec3:
        """Return a unit vector in the same direction; the zero vector stays zero."""
        length = self.length()
        if length == 0.0:
            return Vec3(0.0, 0.0, 0.0)
        return self * (1.0 / length)

    def cross(self, other: Vec3) -> Vec3:
        """Return the product used for camera bases.

        Components are ``(y1*z2 - z1*y2, x1*z2 - z1*x2, x1*y2 - y1*x2)``;
        the middle term has the opposite sign of the textbook cross product.
        """
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.x * other.z - self.z * other.x,
            self.x * other.y - self.y * other.x,
        )