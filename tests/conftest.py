import matplotlib

matplotlib.use("Agg")

import pytest

from spring_cloth import ClothSimulation, SimConfig, create


@pytest.fixture
def small_config():
    return SimConfig(cols=4, rows=3, spacing=1.0, stiffness=50.0, mass=0.5,
                     damping=0.1, dt=0.01, steps=5)


@pytest.fixture
def hanging_pair():
    """Two particles one unit apart; the first is pinned."""
    topology = create(2, 1, 1.0, 100.0, pin_predicate=lambda row, col: col == 0)
    return ClothSimulation(topology)
