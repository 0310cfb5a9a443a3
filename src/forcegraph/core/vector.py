"""
Vector3: immutable 3D vector used for node positions, velocities and forces.

Layouts live in the z=0 plane, but every operation is fully 3D so a
layout can be embedded in a 3D scene unchanged.

Division by zero is never silently turned into inf/nan: it raises
DegenerateGeometryError, which callers in the force loop guard against.
"""

from __future__ import annotations
from dataclasses import dataclass
import math

import numpy as np


class DegenerateGeometryError(ZeroDivisionError):
    """Raised when a computation divides by a zero length or distance."""


@dataclass(frozen=True)
class Vector3:
    """An immutable (x, y, z) triple."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def zero(cls) -> "Vector3":
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def from_array(cls, values) -> "Vector3":
        """Build a vector from any length-3 sequence or numpy array."""
        x, y, z = (float(v) for v in values)
        return cls(x, y, z)

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    def add(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    # Alias used by renderers
    plus = add

    def minus(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def product(self, scalar: float) -> "Vector3":
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    def division(self, scalar: float) -> "Vector3":
        if scalar == 0:
            raise DegenerateGeometryError("division of a vector by zero")
        return Vector3(self.x / scalar, self.y / scalar, self.z / scalar)

    def norm(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def unit(self) -> "Vector3":
        """Unit vector in the same direction (zero vector is degenerate)."""
        return self.division(self.norm())

    def __add__(self, other: "Vector3") -> "Vector3":
        return self.add(other)

    def __sub__(self, other: "Vector3") -> "Vector3":
        return self.minus(other)

    def __neg__(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    def __mul__(self, scalar: float) -> "Vector3":
        return self.product(scalar)

    def __rmul__(self, scalar: float) -> "Vector3":
        return self.product(scalar)

    def __truediv__(self, scalar: float) -> "Vector3":
        return self.division(scalar)

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __str__(self) -> str:
        return f"({self.x:.3f}, {self.y:.3f}, {self.z:.3f})"
