"""
Exception types raised by the cloth simulation.
"""


class ConfigurationError(ValueError):
    """Raised for invalid construction or step parameters.

    Examples are a grid with no rows, a non-positive spacing, a negative
    stiffness, or a non-positive time step or mass. The error is always
    raised before any simulation state has been modified.
    """
