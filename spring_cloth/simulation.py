"""
Cloth simulation class for running forward simulations.
"""

import logging
from typing import Iterable, List, Optional, Tuple, Union

import numpy as np

from .aerodynamics import AerodynamicForceModel
from .config import DEFAULT_GRAVITY, SimConfig, validate_step
from .errors import ConfigurationError
from .geometry import SPRING_KINDS, Topology, create, pin_policy
from .particle import Particle
from .spring import SpringConstraint
from .vector import Vector3

logger = logging.getLogger(__name__)

VectorLike = Union[Vector3, Iterable[float]]


def _as_vector(value: Optional[VectorLike], default: Tuple[float, float, float]) -> Vector3:
    if value is None:
        return Vector3.from_iterable(default)
    if isinstance(value, Vector3):
        return value
    return Vector3.from_iterable(value)


def _read_only(array: np.ndarray) -> np.ndarray:
    array.flags.writeable = False
    return array


class ClothSimulation:
    """Mass-spring cloth advanced with semi-implicit Euler steps.

    The simulation owns its particles and springs. Callers read state through
    the ``positions``/``velocities`` arrays and the spring pair arrays, which
    are read-only copies; the only way to change state is :meth:`step` (or
    :meth:`reset`).

    Attributes:
        rows: Number of particle rows.
        cols: Number of particle columns.
        spacing: Rest distance between adjacent particles.
        aerodynamics: Optional wind drag model, None disables drag.
    """

    def __init__(
        self,
        topology: Topology,
        aerodynamics: Optional[AerodynamicForceModel] = None,
    ):
        """Take ownership of a topology.

        Args:
            topology: Particles and springs built by ``geometry.create``.
            aerodynamics: Wind drag model for the same grid, or None.

        Raises:
            ConfigurationError: If a spring or the aerodynamic model does not
                fit the particle array.
        """
        n = len(topology.particles)
        for kind in SPRING_KINDS:
            for spring in topology.springs(kind):
                if spring.index_a >= n or spring.index_b >= n:
                    raise ConfigurationError(
                        f"{kind} spring {spring.pair} is out of range for {n} particles"
                    )
        if aerodynamics is not None and aerodynamics.grid.size != n:
            raise ConfigurationError(
                f"Aerodynamic model covers {aerodynamics.grid.size} particles, cloth has {n}"
            )

        self.rows = topology.rows
        self.cols = topology.cols
        self.spacing = topology.spacing
        self.aerodynamics = aerodynamics
        self._structural = tuple(topology.structural)
        self._shear = tuple(topology.shear)
        self._bend = tuple(topology.bend)

        # Store initial state for reset
        self._initial_state = tuple(
            (p.position, p.velocity, p.pinned) for p in topology.particles
        )
        self._particles: List[Particle] = []
        self.reset()

    @classmethod
    def from_config(cls, config: SimConfig) -> "ClothSimulation":
        """Build the topology and optional drag model described by ``config``."""
        topology = create(
            config.cols,
            config.rows,
            config.spacing,
            config.stiffness,
            pin_predicate=pin_policy(config.pin, config.rows, config.cols),
            include_shear=config.use_shear,
            include_bend=config.use_bend,
        )
        aerodynamics = AerodynamicForceModel(topology.grid) if config.aerodynamics else None
        return cls(topology, aerodynamics=aerodynamics)

    def reset(self):
        """Reset simulation to initial state."""
        particles = []
        for position, velocity, pinned in self._initial_state:
            particle = Particle(position, pinned=pinned)
            particle.velocity = velocity
            particles.append(particle)
        self._particles = particles

    def step(
        self,
        dt: float,
        damping: float,
        mass: float,
        wind: Optional[VectorLike] = None,
        wind_speed: float = 0.0,
        gravity: Optional[VectorLike] = None,
    ):
        """Perform one simulation step.

        Forces are applied in a fixed order: structural, shear and bend
        springs, then per particle gravity, damping and wind drag. Every
        particle is integrated afterwards.

        Args:
            dt: Time step (positive).
            damping: Damping coefficient; the damping force is -damping * v.
            mass: Mass shared by all particles (positive).
            wind: Wind velocity. Defaults to still air.
            wind_speed: Drag coefficient. Only used with an aerodynamic model.
            gravity: Gravity force. Defaults to (0, -9.81, 0).

        Raises:
            ConfigurationError: If ``dt`` or ``mass`` is not positive. Nothing
                is modified in that case.
        """
        validate_step(dt, mass)
        gravity = _as_vector(gravity, DEFAULT_GRAVITY)
        wind = _as_vector(wind, (0.0, 0.0, 0.0))
        particles = self._particles

        # Spring forces
        for spring in self._structural:
            spring.apply_force(particles)
        for spring in self._shear:
            spring.apply_force(particles)
        for spring in self._bend:
            spring.apply_force(particles)

        # Body forces; drag normals use positions from before any particle moves
        snapshot = tuple(p.position for p in particles)
        for index, particle in enumerate(particles):
            particle.apply_force(gravity)
            particle.apply_force(particle.velocity.scale(-damping))
            if self.aerodynamics is not None:
                particle.apply_force(
                    self.aerodynamics.force(index, snapshot, particle.velocity, wind, wind_speed)
                )

        # Integrate
        for particle in particles:
            particle.integrate(dt, mass)

    def run(
        self,
        config: SimConfig,
        steps: Optional[int] = None,
        record: bool = True,
    ) -> Optional[np.ndarray]:
        """Run simulation for multiple steps with the parameters of ``config``.

        Args:
            config: Supplies dt, damping, mass, wind and gravity.
            steps: Number of steps to run. If None, uses config.steps.
            record: Whether to record trajectory.

        Returns:
            If record=True, returns trajectory array of shape (steps, num_particles, 3).
            Otherwise returns None.
        """
        if steps is None:
            steps = config.steps

        gravity = config.gravity_vector
        wind = config.wind_vector
        trajectory = [] if record else None

        for _ in range(steps):
            self.step(
                config.dt,
                config.damping,
                config.mass,
                wind=wind,
                wind_speed=config.wind_speed,
                gravity=gravity,
            )
            if record:
                trajectory.append(self.get_positions())

        logger.debug("Ran %d steps of dt=%g on %d particles", steps, config.dt, self.num_particles)
        if record:
            return np.array(trajectory).reshape(steps, self.num_particles, 3)
        return None

    # =========================================================================
    # READ ACCESSORS
    # =========================================================================

    @property
    def num_particles(self) -> int:
        return len(self._particles)

    def get_positions(self) -> np.ndarray:
        """Get current positions as a writable numpy copy."""
        return np.array([p.position.to_tuple() for p in self._particles], dtype=np.float64)

    @property
    def positions(self) -> np.ndarray:
        """Read-only (num_particles, 3) array of positions in row-major order."""
        return _read_only(self.get_positions())

    @property
    def velocities(self) -> np.ndarray:
        """Read-only (num_particles, 3) array of velocities."""
        return _read_only(
            np.array([p.velocity.to_tuple() for p in self._particles], dtype=np.float64)
        )

    @property
    def pinned_mask(self) -> np.ndarray:
        """Read-only boolean array, True for pinned particles."""
        return _read_only(np.array([p.pinned for p in self._particles], dtype=bool))

    def particle_position(self, row: int, col: int) -> Vector3:
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(f"({row}, {col}) is outside a {self.rows}x{self.cols} grid")
        return self._particles[row * self.cols + col].position

    def springs(self, kind: str) -> Tuple[SpringConstraint, ...]:
        if kind not in SPRING_KINDS:
            raise KeyError(f"Unknown spring kind {kind!r}, expected one of {SPRING_KINDS}")
        return getattr(self, f"_{kind}")

    def spring_pairs(self, kind: str) -> np.ndarray:
        """Read-only (num_springs, 2) array of endpoint indices for one spring class."""
        pairs = np.array([s.pair for s in self.springs(kind)], dtype=np.int64).reshape(-1, 2)
        return _read_only(pairs)

    @property
    def structural_pairs(self) -> np.ndarray:
        return self.spring_pairs("structural")

    @property
    def shear_pairs(self) -> np.ndarray:
        return self.spring_pairs("shear")

    @property
    def bend_pairs(self) -> np.ndarray:
        return self.spring_pairs("bend")

    def kinetic_energy(self, mass: float) -> float:
        """Total kinetic energy, 0.5 * m * sum(|v|^2)."""
        return 0.5 * mass * sum(p.velocity.dot(p.velocity) for p in self._particles)
