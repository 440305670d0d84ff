"""
Cloth topology creation.

These functions create the particle grid, the structural, shear and bend
spring sets, and the pin constraints for the cloth simulation. Particles are
stored row-major: the particle at ``(row, col)`` has index ``row * cols + col``.
"""

import logging
import math
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence, Tuple

import numpy as np

from .errors import ConfigurationError
from .particle import Particle
from .spring import SpringConstraint
from .vector import Vector3

logger = logging.getLogger(__name__)

PinPredicate = Callable[[int, int], bool]

# Offsets are only emitted toward higher flattened indices, so each
# unordered pair appears once per spring set.
STRUCTURAL_OFFSETS: Tuple[Tuple[int, int], ...] = ((0, 1), (1, 0))
SHEAR_OFFSETS: Tuple[Tuple[int, int], ...] = ((1, 1), (1, -1))
BEND_OFFSETS: Tuple[Tuple[int, int], ...] = ((0, 2), (2, 0))

SPRING_KINDS: Tuple[str, ...] = ("structural", "shear", "bend")


@dataclass(frozen=True)
class GridIndex:
    """Row-major addressing for a ``rows x cols`` particle grid.

    All neighbor lookups go through :meth:`neighbor`, which checks the row
    and column bounds independently.
    """

    rows: int
    cols: int

    @property
    def size(self) -> int:
        return self.rows * self.cols

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def index(self, row: int, col: int) -> int:
        if not self.contains(row, col):
            raise IndexError(f"({row}, {col}) is outside a {self.rows}x{self.cols} grid")
        return row * self.cols + col

    def coordinates(self, index: int) -> Tuple[int, int]:
        if not 0 <= index < self.size:
            raise IndexError(f"Particle index {index} is outside a grid of {self.size}")
        return divmod(index, self.cols)

    def neighbor(self, row: int, col: int, d_row: int, d_col: int) -> Optional[int]:
        """Index of the particle at ``(row + d_row, col + d_col)``, or None if out of bounds."""
        r, c = row + d_row, col + d_col
        if self.contains(r, c):
            return r * self.cols + c
        return None


@dataclass
class Topology:
    """Particles and springs of a freshly built cloth.

    Attributes:
        grid: Row-major addressing of the particles.
        spacing: Distance between adjacent particles at rest.
        particles: Particles in row-major order.
        structural: Springs between 4-connected neighbors.
        shear: Springs between diagonal neighbors.
        bend: Springs between particles two apart along either axis.
    """

    grid: GridIndex
    spacing: float
    particles: List[Particle]
    structural: Tuple[SpringConstraint, ...] = ()
    shear: Tuple[SpringConstraint, ...] = ()
    bend: Tuple[SpringConstraint, ...] = ()

    @property
    def rows(self) -> int:
        return self.grid.rows

    @property
    def cols(self) -> int:
        return self.grid.cols

    def springs(self, kind: str) -> Tuple[SpringConstraint, ...]:
        if kind not in SPRING_KINDS:
            raise KeyError(f"Unknown spring kind {kind!r}, expected one of {SPRING_KINDS}")
        return getattr(self, kind)


# =============================================================================
# PIN POLICIES
# =============================================================================

def pin_top_corners(rows: int, cols: int) -> PinPredicate:
    """Pin the first and last particle of row 0."""
    return lambda row, col: row == 0 and (col == 0 or col == cols - 1)


def pin_left_corners(rows: int, cols: int) -> PinPredicate:
    """Pin the first and last particle of column 0."""
    return lambda row, col: col == 0 and (row == 0 or row == rows - 1)


def pin_top_edge(rows: int, cols: int) -> PinPredicate:
    """Pin every particle of row 0."""
    return lambda row, col: row == 0


def pin_none(rows: int, cols: int) -> PinPredicate:
    return lambda row, col: False


PIN_POLICIES: Dict[str, Callable[[int, int], PinPredicate]] = {
    "top-corners": pin_top_corners,
    "left-corners": pin_left_corners,
    "top-edge": pin_top_edge,
    "none": pin_none,
}


def pin_policy(name: str, rows: int, cols: int) -> PinPredicate:
    """Look up a named pin policy and bind it to the grid size."""
    try:
        factory = PIN_POLICIES[name]
    except KeyError:
        raise ConfigurationError(
            f"Unknown pin policy {name!r}, expected one of {sorted(PIN_POLICIES)}"
        ) from None
    return factory(rows, cols)


# =============================================================================
# BUILDERS
# =============================================================================

def make_grid_positions(cols: int, rows: int, spacing: float) -> np.ndarray:
    """Create initial grid positions for cloth particles.

    The cloth starts flat in the horizontal x-z plane, with y as the
    vertical (gravity) axis.

    Returns:
        Array of shape (rows * cols, 3) containing 3D positions.
    """
    x = np.zeros((rows * cols, 3), dtype=np.float64)

    for row in range(rows):
        for col in range(cols):
            idx = row * cols + col
            x[idx, 0] = col * spacing
            x[idx, 2] = row * spacing

    return x


def make_pins(grid: GridIndex, pin_predicate: PinPredicate) -> np.ndarray:
    """Evaluate the pin predicate over every ``(row, col)`` of the grid.

    Returns:
        Boolean array of shape (rows * cols,), True for pinned particles.
    """
    pins = np.zeros(grid.size, dtype=bool)
    for row in range(grid.rows):
        for col in range(grid.cols):
            pins[row * grid.cols + col] = bool(pin_predicate(row, col))
    return pins


def make_springs(
    grid: GridIndex,
    offsets: Sequence[Tuple[int, int]],
    rest_length: float,
    stiffness: float,
) -> Tuple[SpringConstraint, ...]:
    """Connect every particle to its in-bounds neighbors at ``offsets``.

    Springs are enumerated cell by cell in row-major order, and within a
    cell in the order of ``offsets``.
    """
    springs = []
    for row in range(grid.rows):
        for col in range(grid.cols):
            index = row * grid.cols + col
            for d_row, d_col in offsets:
                other = grid.neighbor(row, col, d_row, d_col)
                if other is not None:
                    springs.append(SpringConstraint(index, other, rest_length, stiffness))
    return tuple(springs)


def validate_grid(cols: int, rows: int, spacing: float, stiffness: float):
    """Raise ConfigurationError for grid parameters that cannot form a cloth."""
    if cols < 1 or rows < 1:
        raise ConfigurationError(f"Grid needs at least one row and column, got {cols}x{rows}")
    if not spacing > 0.0:
        raise ConfigurationError(f"Spacing must be positive, got {spacing}")
    if not stiffness >= 0.0:
        raise ConfigurationError(f"Stiffness must be non-negative, got {stiffness}")


def create(
    cols: int,
    rows: int,
    spacing: float,
    stiffness: float,
    pin_predicate: Optional[PinPredicate] = None,
    include_shear: bool = True,
    include_bend: bool = True,
) -> Topology:
    """Build the particles and spring sets of a rectangular cloth.

    Args:
        cols: Number of particles along x.
        rows: Number of particles along z.
        spacing: Rest distance between adjacent particles.
        stiffness: Spring constant shared by all springs.
        pin_predicate: Called with ``(row, col)``; True pins that particle.
            Defaults to pinning the two corners of row 0.
        include_shear: Generate diagonal springs.
        include_bend: Generate two-hop springs.

    Returns:
        The new topology.

    Raises:
        ConfigurationError: If any parameter is out of range.
    """
    validate_grid(cols, rows, spacing, stiffness)
    if pin_predicate is None:
        pin_predicate = pin_top_corners(rows, cols)
    elif not callable(pin_predicate):
        raise ConfigurationError(f"Pin predicate must be callable, got {pin_predicate!r}")

    grid = GridIndex(rows=rows, cols=cols)
    positions = make_grid_positions(cols, rows, spacing)
    pins = make_pins(grid, pin_predicate)
    particles = [
        Particle(Vector3.from_iterable(pos), pinned=bool(pinned))
        for pos, pinned in zip(positions, pins)
    ]

    topology = Topology(
        grid=grid,
        spacing=spacing,
        particles=particles,
        structural=make_springs(grid, STRUCTURAL_OFFSETS, spacing, stiffness),
        shear=(
            make_springs(grid, SHEAR_OFFSETS, spacing * math.sqrt(2.0), stiffness)
            if include_shear
            else ()
        ),
        bend=(
            make_springs(grid, BEND_OFFSETS, spacing * 2.0, stiffness)
            if include_bend
            else ()
        ),
    )
    logger.debug(
        "Built %dx%d cloth: %d particles (%d pinned), %d structural, %d shear, %d bend springs",
        cols,
        rows,
        len(particles),
        int(pins.sum()),
        len(topology.structural),
        len(topology.shear),
        len(topology.bend),
    )
    return topology
