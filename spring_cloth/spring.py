"""
Spring constraint between two particles.
"""

from dataclasses import dataclass
from typing import Sequence, Tuple

from .errors import ConfigurationError
from .particle import Particle
from .vector import Vector3


@dataclass(frozen=True)
class SpringConstraint:
    """An elastic edge between two particles of the owning cloth.

    Uses Hooke's law along the edge: F = k * (L - L_rest) * direction,
    where direction points from particle ``index_a`` to ``index_b``.

    Attributes:
        index_a: Index of the first endpoint.
        index_b: Index of the second endpoint.
        rest_length: Length at which the spring exerts no force.
        stiffness: Spring constant.
    """

    index_a: int
    index_b: int
    rest_length: float
    stiffness: float

    def __post_init__(self):
        if self.index_a < 0 or self.index_b < 0:
            raise ConfigurationError(
                f"Spring indices must be non-negative, got ({self.index_a}, {self.index_b})"
            )
        if self.index_a == self.index_b:
            raise ConfigurationError(f"Spring endpoints must differ, got {self.index_a} twice")
        if not self.rest_length > 0.0:
            raise ConfigurationError(f"Rest length must be positive, got {self.rest_length}")
        if not self.stiffness >= 0.0:
            raise ConfigurationError(f"Stiffness must be non-negative, got {self.stiffness}")

    @property
    def pair(self) -> Tuple[int, int]:
        return (self.index_a, self.index_b)

    def force(self, particles: Sequence[Particle]) -> Vector3:
        """Force this spring exerts on ``index_a`` (``index_b`` gets the negation).

        Coincident endpoints have no direction, so the force is zero.
        """
        delta = particles[self.index_b].position.subtract(particles[self.index_a].position)
        magnitude = self.stiffness * (delta.length() - self.rest_length)
        return delta.normalize().scale(magnitude)

    def apply_force(self, particles: Sequence[Particle]):
        """Apply equal and opposite forces to both endpoints."""
        force = self.force(particles)
        particles[self.index_a].apply_force(force)
        particles[self.index_b].apply_force(force.negate())
