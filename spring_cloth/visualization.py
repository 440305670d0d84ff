"""
Visualization utilities for cloth simulation.

The simulation uses y as the vertical axis; plots map simulation
(x, y, z) to matplotlib (x, z, y) so the cloth hangs downward on screen.
"""

from typing import List, Optional

import numpy as np
import matplotlib.pyplot as plt
import matplotlib.animation as animation
from mpl_toolkits.mplot3d.art3d import Line3DCollection


def _to_plot_axes(points: np.ndarray) -> np.ndarray:
    """Reorder (..., 3) simulation coordinates to (x, z, y)."""
    return points[..., [0, 2, 1]]


def _segments(positions: np.ndarray, pairs: np.ndarray) -> np.ndarray:
    pts = _to_plot_axes(np.asarray(positions))
    pairs = np.asarray(pairs, dtype=np.int64).reshape(-1, 2)
    return np.stack([pts[pairs[:, 0]], pts[pairs[:, 1]]], axis=1)


def _set_limits(ax, trajectory: np.ndarray):
    pts = _to_plot_axes(trajectory.reshape(-1, 3))
    lo, hi = pts.min(axis=0) - 0.1, pts.max(axis=0) + 0.1
    ax.set_xlim(lo[0], hi[0])
    ax.set_ylim(lo[1], hi[1])
    ax.set_zlim(lo[2], hi[2])


def plot_cloth(
    positions: np.ndarray,
    pairs: np.ndarray,
    pinned: Optional[np.ndarray] = None,
    ax=None,
    figsize: tuple = (10, 8),
) -> plt.Figure:
    """Draw one frame of the cloth as spring segments and particle dots.

    Args:
        positions: Array of shape (num_particles, 3).
        pairs: Array of shape (num_springs, 2) of particle indices to connect.
        pinned: Optional boolean mask; pinned particles are drawn in red.
        ax: Existing 3D axes to draw into. A new figure is created if None.
        figsize: Figure size for a new figure.

    Returns:
        The matplotlib figure.
    """
    if ax is None:
        fig = plt.figure(figsize=figsize)
        ax = fig.add_subplot(111, projection="3d")
    else:
        fig = ax.figure

    positions = np.asarray(positions)
    ax.add_collection3d(Line3DCollection(_segments(positions, pairs), colors="k", linewidths=0.5))

    pts = _to_plot_axes(positions)
    colors = np.where(np.asarray(pinned, dtype=bool), "r", "b").tolist() if pinned is not None else "b"
    ax.scatter(pts[:, 0], pts[:, 1], pts[:, 2], s=8, c=colors)

    _set_limits(ax, positions[np.newaxis])
    ax.set_xlabel("X")
    ax.set_ylabel("Z")
    ax.set_zlabel("Height (Y)")
    return fig


def animate_cloth(
    trajectory: np.ndarray,
    pairs: np.ndarray,
    path: Optional[str] = None,
    interval: int = 50,
) -> animation.FuncAnimation:
    """Create an animation of the cloth over a recorded trajectory.

    Args:
        trajectory: Array of shape (frames, num_particles, 3).
        pairs: Spring endpoint pairs to draw each frame.
        path: If given, save the animation there (.gif uses pillow, other
            extensions use ffmpeg).
        interval: Delay between frames in milliseconds.

    Returns:
        The animation object.
    """
    fig = plt.figure(figsize=(10, 8))
    ax = fig.add_subplot(111, projection="3d")

    def animate(frame):
        ax.clear()
        plot_cloth(trajectory[frame], pairs, ax=ax)
        _set_limits(ax, trajectory)
        ax.set_title(f"Cloth Simulation - Frame {frame}/{len(trajectory)}")

    anim = animation.FuncAnimation(fig, animate, frames=len(trajectory),
                                   interval=interval, repeat=True)

    if path:
        writer = "pillow" if path.lower().endswith(".gif") else "ffmpeg"
        anim.save(path, writer=writer)

    return anim


def plot_trajectories(
    trajectory: np.ndarray,
    particle_indices: Optional[List[int]] = None,
    figsize: tuple = (12, 8),
) -> plt.Figure:
    """Plot 3D paths of selected particles.

    Args:
        trajectory: Array of shape (frames, num_particles, 3) containing positions.
        particle_indices: Indices of particles to plot. If None, plots a sample.
        figsize: Figure size.

    Returns:
        The matplotlib figure.
    """
    if particle_indices is None:
        # Sample some particles across the cloth
        num_particles = trajectory.shape[1]
        particle_indices = list(range(0, num_particles, max(1, num_particles // 10)))

    fig = plt.figure(figsize=figsize)
    ax = fig.add_subplot(111, projection="3d")

    paths = _to_plot_axes(trajectory)
    for idx in particle_indices:
        ax.plot(paths[:, idx, 0], paths[:, idx, 1], paths[:, idx, 2],
                label=f"Particle {idx}", alpha=0.7)

    ax.set_xlabel("X")
    ax.set_ylabel("Z")
    ax.set_zlabel("Height (Y)")
    ax.set_title("Particle Trajectories")
    ax.legend(loc="upper left", fontsize="small")

    return fig


def plot_particle_over_time(
    trajectory: np.ndarray,
    particle_index: int,
    figsize: tuple = (15, 4),
) -> plt.Figure:
    """Plot x, y and z position of a single particle over time."""
    fig, axes = plt.subplots(1, 3, figsize=figsize)

    frames = np.arange(len(trajectory))
    for axis, ax in enumerate(axes):
        label = "XYZ"[axis]
        ax.plot(frames, trajectory[:, particle_index, axis])
        ax.set_xlabel("Time (frame)")
        ax.set_ylabel(f"{label} Position")
        ax.set_title(f"Particle {particle_index} - {label} Position")
        ax.grid(True, alpha=0.3)

    plt.tight_layout()
    return fig
