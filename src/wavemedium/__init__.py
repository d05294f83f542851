"""
Permittivity maps with padding and absorbing boundaries for FFT-based wave solvers.

Two sibling subpackages:
- core: options, grid, errors and the SampleMedium constructor
- operators: edge extrapolation and PML boundary layers
plus `diagnostics` for quantitative checks of a built medium.
"""

from .core import (
    MediumError,
    InvalidConfigurationError,
    DegenerateMediumError,
    UnsupportedDimensionalityError,
    InvalidTargetShapeError,
    PeriodicSizeMismatchError,
    UnknownBoundaryTypeError,
    MediumOptions,
    SimGrid,
    SampleMedium,
    build_sample_medium,
)
from .operators import extrapolate, add_absorbing_boundaries

__version__ = "0.1.0"

__all__ = [
    "MediumError",
    "InvalidConfigurationError",
    "DegenerateMediumError",
    "UnsupportedDimensionalityError",
    "InvalidTargetShapeError",
    "PeriodicSizeMismatchError",
    "UnknownBoundaryTypeError",
    "MediumOptions",
    "SimGrid",
    "SampleMedium",
    "build_sample_medium",
    "extrapolate",
    "add_absorbing_boundaries",
]
