import matplotlib.pyplot as plt

from spring_cloth import ClothSimulation, animate_cloth, plot_cloth, plot_trajectories
from spring_cloth.visualization import plot_particle_over_time


def test_plot_cloth(small_config):
    sim = ClothSimulation.from_config(small_config)
    fig = plot_cloth(sim.positions, sim.structural_pairs, pinned=sim.pinned_mask)
    ax = fig.axes[0]
    assert len(ax.collections) == 2
    plt.close(fig)


def test_plot_trajectories(small_config):
    trajectory = ClothSimulation.from_config(small_config).run(small_config)
    fig = plot_trajectories(trajectory, particle_indices=[1, 5])
    assert len(fig.axes[0].lines) == 2
    plt.close(fig)
    fig = plot_particle_over_time(trajectory, 5)
    assert len(fig.axes) == 3
    plt.close(fig)


def test_animate_cloth_saves_gif(tmp_path, small_config):
    sim = ClothSimulation.from_config(small_config)
    trajectory = sim.run(small_config, steps=3)
    path = tmp_path / "cloth.gif"
    animate_cloth(trajectory, sim.structural_pairs, path=str(path))
    assert path.stat().st_size > 0
    plt.close("all")
