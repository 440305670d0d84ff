"""
Cloth Simulation Package

A mass-spring cloth: a grid of point masses joined by structural, shear and
bend springs, advanced under gravity, damping and optional wind drag with
semi-implicit Euler integration.
"""

from .errors import ConfigurationError
from .vector import Vector3
from .particle import Particle
from .spring import SpringConstraint
from .geometry import GridIndex, Topology, create, pin_policy, PIN_POLICIES
from .aerodynamics import AerodynamicForceModel
from .config import SimConfig
from .simulation import ClothSimulation
from .trajectory import save_trajectory, load_trajectory
from .visualization import animate_cloth, plot_cloth, plot_trajectories

__all__ = [
    "ConfigurationError",
    "Vector3",
    "Particle",
    "SpringConstraint",
    "GridIndex",
    "Topology",
    "create",
    "pin_policy",
    "PIN_POLICIES",
    "AerodynamicForceModel",
    "SimConfig",
    "ClothSimulation",
    "save_trajectory",
    "load_trajectory",
    "animate_cloth",
    "plot_cloth",
    "plot_trajectories",
]
