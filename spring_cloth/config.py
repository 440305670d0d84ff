"""
Configuration dataclass for cloth simulation parameters.
"""

from dataclasses import dataclass
from typing import Tuple

from .errors import ConfigurationError
from .geometry import PIN_POLICIES, validate_grid
from .vector import Vector3

DEFAULT_GRAVITY: Tuple[float, float, float] = (0.0, -9.81, 0.0)


def validate_step(dt: float, mass: float):
    """Raise ConfigurationError for step parameters the integrator cannot use."""
    if not dt > 0.0:
        raise ConfigurationError(f"Time step must be positive, got {dt}")
    if not mass > 0.0:
        raise ConfigurationError(f"Mass must be positive, got {mass}")


@dataclass
class SimConfig:
    """Configuration for the cloth simulation.

    Attributes:
        cols: Number of particles along x (grid width).
        rows: Number of particles along z (grid depth).
        spacing: Rest distance between adjacent particles.
        stiffness: Spring constant shared by every spring.
        mass: Mass of each particle.
        damping: Velocity damping coefficient. Higher = less bouncy.
        dt: Time step for simulation (seconds per step).
        steps: Total number of simulation steps for ``run``.
        gravity: Gravity force applied to every particle each step.
        wind: Wind velocity used by the aerodynamic model.
        wind_speed: Drag coefficient scaling the wind force.
        aerodynamics: Whether to apply aerodynamic drag at all.
        pin: Name of the pin policy, see ``geometry.PIN_POLICIES``.
        use_shear: Whether to generate diagonal springs.
        use_bend: Whether to generate two-hop bend springs.
    """

    cols: int = 10
    rows: int = 10
    spacing: float = 2.0
    stiffness: float = 300.0
    mass: float = 1.0
    damping: float = 0.3
    dt: float = 0.03
    steps: int = 300
    gravity: Tuple[float, float, float] = DEFAULT_GRAVITY
    wind: Tuple[float, float, float] = (0.0, 0.0, 0.0)
    wind_speed: float = 0.0
    aerodynamics: bool = False
    pin: str = "top-corners"
    use_shear: bool = True
    use_bend: bool = True

    def __post_init__(self):
        """Validate eagerly so a bad config fails before a simulation exists."""
        validate_grid(self.cols, self.rows, self.spacing, self.stiffness)
        validate_step(self.dt, self.mass)
        if self.steps < 0:
            raise ConfigurationError(f"Step count must be non-negative, got {self.steps}")
        if self.pin not in PIN_POLICIES:
            raise ConfigurationError(
                f"Unknown pin policy {self.pin!r}, expected one of {sorted(PIN_POLICIES)}"
            )
        if len(self.gravity) != 3 or len(self.wind) != 3:
            raise ConfigurationError("Gravity and wind must have three components")
        self.gravity = tuple(float(g) for g in self.gravity)
        self.wind = tuple(float(w) for w in self.wind)

    @property
    def num_particles(self) -> int:
        """Total number of particles in the cloth."""
        return self.cols * self.rows

    @property
    def gravity_vector(self) -> Vector3:
        return Vector3.from_iterable(self.gravity)

    @property
    def wind_vector(self) -> Vector3:
        return Vector3.from_iterable(self.wind)
