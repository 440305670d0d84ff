"""
Per-particle wind drag estimated from the local cloth surface.
"""

from typing import Sequence, Tuple

from .geometry import GridIndex
from .vector import Vector3

# Structural neighbors in cyclic order: +row, +col, -row, -col.
NEIGHBOR_RING: Tuple[Tuple[int, int], ...] = ((1, 0), (0, 1), (-1, 0), (0, -1))


class AerodynamicForceModel:
    """Wind drag on a rectangular cloth.

    The surface normal at a particle is estimated from its structural
    neighbors. Walking the ring +row, +col, -row, -col (and back to +row),
    every consecutive pair of present neighbors spans a triangle with the
    particle; the triangle normals are summed and divided by the number of
    neighbors present. Corner particles therefore average one triangle over
    two neighbors, edge particles two triangles over three, and interior
    particles four triangles over four.

    The normal is left unnormalized, so drag scales with the local patch
    area.
    """

    def __init__(self, grid: GridIndex):
        self.grid = grid
        self._rings = tuple(self._ring(index) for index in range(grid.size))

    def _ring(self, index: int) -> Tuple[Tuple[Tuple[int, int], ...], int]:
        row, col = self.grid.coordinates(index)
        ring = [self.grid.neighbor(row, col, d_row, d_col) for d_row, d_col in NEIGHBOR_RING]
        count = sum(1 for n in ring if n is not None)
        pairs = []
        for i in range(len(ring)):
            a, b = ring[i], ring[(i + 1) % len(ring)]
            if a is not None and b is not None:
                pairs.append((a, b))
        return tuple(pairs), count

    def neighbor_count(self, index: int) -> int:
        return self._rings[index][1]

    def vertex_normal(self, index: int, positions: Sequence[Vector3]) -> Vector3:
        """Estimate the surface normal at particle ``index``.

        Args:
            index: Particle index.
            positions: Positions of every particle of the cloth.
        """
        pairs, count = self._rings[index]
        if not pairs:
            return Vector3.zero()
        center = positions[index]
        total = Vector3.zero()
        for a, b in pairs:
            total = total.add(positions[a].subtract(center).cross(positions[b].subtract(center)))
        return total.divide(count)

    def force(
        self,
        index: int,
        positions: Sequence[Vector3],
        velocity: Vector3,
        wind: Vector3,
        wind_speed: float,
    ) -> Vector3:
        """Drag force on particle ``index``.

        F = wind_speed * dot(n, wind - velocity) * n
        """
        normal = self.vertex_normal(index, positions)
        return normal.scale(wind_speed * normal.dot(wind.subtract(velocity)))
