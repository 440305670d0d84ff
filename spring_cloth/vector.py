"""
Immutable 3D vector value type used throughout the physics model.
"""

import math
from dataclasses import dataclass
from typing import Iterable, Iterator, Tuple


@dataclass(frozen=True)
class Vector3:
    """A 3-component floating point vector.

    Instances are immutable; every operation returns a new vector. The
    operator forms (``+``, ``-``, ``*``, ``/`` and unary ``-``) delegate to
    the named methods, and scalar multiplication works from either side.

    Attributes:
        x: X component.
        y: Y component (vertical axis).
        z: Z component.
    """

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def zero(cls) -> "Vector3":
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def from_iterable(cls, values: Iterable[float]) -> "Vector3":
        """Build a vector from any iterable of exactly three numbers."""
        x, y, z = (float(v) for v in values)
        return cls(x, y, z)

    def add(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def subtract(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    sub = subtract

    def negate(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    def scale(self, scalar: float) -> "Vector3":
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    def divide(self, scalar: float) -> "Vector3":
        """Divide every component by ``scalar``; the caller guarantees it is non-zero."""
        return Vector3(self.x / scalar, self.y / scalar, self.z / scalar)

    def dot(self, other: "Vector3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vector3") -> "Vector3":
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalize(self) -> "Vector3":
        """Return the unit vector in the same direction.

        A vector of length exactly zero normalizes to the zero vector, so
        coincident points yield no direction rather than NaN.
        """
        length = self.length()
        if length > 0.0:
            return self.divide(length)
        return Vector3.zero()

    def to_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: "Vector3") -> "Vector3":
        return self.add(other)

    def __sub__(self, other: "Vector3") -> "Vector3":
        return self.subtract(other)

    def __neg__(self) -> "Vector3":
        return self.negate()

    def __mul__(self, scalar: float) -> "Vector3":
        return self.scale(scalar)

    def __rmul__(self, scalar: float) -> "Vector3":  # scalar * vector
        return self.scale(scalar)

    def __truediv__(self, scalar: float) -> "Vector3":
        return self.divide(scalar)
