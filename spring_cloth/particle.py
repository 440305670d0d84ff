"""
Point mass with its own kinematic state.
"""

from .vector import Vector3


class Particle:
    """A simulated point mass.

    Forces are accumulated into ``acceleration`` until :meth:`integrate`
    consumes them. The mass itself is not stored per particle; it is shared
    by the whole cloth and passed in at integration time.

    A pinned particle is a fixed anchor: forces applied to it are discarded
    and integration never moves it.

    Attributes:
        position: Current position.
        velocity: Current velocity.
        acceleration: Accumulated force since the last integration.
        pinned: Whether the particle is fixed in place.
    """

    __slots__ = ("position", "velocity", "acceleration", "pinned")

    def __init__(self, position: Vector3, pinned: bool = False):
        self.position = position
        self.velocity = Vector3.zero()
        self.acceleration = Vector3.zero()
        self.pinned = bool(pinned)

    def apply_force(self, force: Vector3):
        """Accumulate ``force``; a no-op for pinned particles."""
        if not self.pinned:
            self.acceleration = self.acceleration.add(force)

    def integrate(self, dt: float, mass: float):
        """Advance one semi-implicit Euler step.

        Velocity is updated from the accumulated force first, then the
        updated velocity moves the position.

        Args:
            dt: Time step.
            mass: Shared particle mass (strictly positive).
        """
        if not self.pinned:
            self.velocity = self.velocity.add(self.acceleration.divide(mass).scale(dt))
            self.position = self.position.add(self.velocity.scale(dt))
        self.acceleration = Vector3.zero()

    def __repr__(self):
        return (
            f"Particle(position={self.position!r}, velocity={self.velocity!r}, "
            f"pinned={self.pinned})"
        )
