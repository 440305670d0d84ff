"""
Export and import of recorded particle trajectories.
"""

import logging

import numpy as np

logger = logging.getLogger(__name__)


def save_trajectory(trajectory: np.ndarray, path: str):
    """Save a trajectory to a numpy file.

    Args:
        trajectory: Array of shape (frames, particles, 3).
        path: Path to save the file.
    """
    np.save(path, trajectory)
    logger.info(f"Saved trajectory to {path} with shape {trajectory.shape}")


def load_trajectory(path: str) -> np.ndarray:
    """Load a trajectory from a numpy file.

    Args:
        path: Path to the trajectory file.

    Returns:
        Trajectory array of shape (frames, particles, 3).

    Raises:
        ValueError: If the file does not hold a (frames, particles, 3) array.
    """
    trajectory = np.load(path)
    if trajectory.ndim != 3 or trajectory.shape[2] != 3:
        raise ValueError(
            f"Expected a (frames, particles, 3) trajectory in {path}, got {trajectory.shape}"
        )
    logger.info(f"Loaded trajectory from {path} with shape {trajectory.shape}")
    return trajectory
