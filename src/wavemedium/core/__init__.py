"""
Core: options, grid, errors and the SampleMedium constructor.
"""

from .errors import (
    MediumError,
    InvalidConfigurationError,
    DegenerateMediumError,
    UnsupportedDimensionalityError,
    InvalidTargetShapeError,
    PeriodicSizeMismatchError,
    UnknownBoundaryTypeError,
)
from .config import MediumOptions, default_ar_width
from .grid import SimGrid, efficient_size, compute_padded_shape, dist2_3d
from .medium import SampleMedium, build_sample_medium, normalize_dimensions

__all__ = [
    "MediumError",
    "InvalidConfigurationError",
    "DegenerateMediumError",
    "UnsupportedDimensionalityError",
    "InvalidTargetShapeError",
    "PeriodicSizeMismatchError",
    "UnknownBoundaryTypeError",
    "MediumOptions",
    "default_ar_width",
    "SimGrid",
    "efficient_size",
    "compute_padded_shape",
    "dist2_3d",
    "SampleMedium",
    "build_sample_medium",
    "normalize_dimensions",
]
