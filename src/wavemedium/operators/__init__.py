"""
Operators: padding by edge extrapolation + absorbing boundary layers.
"""

from .extrapolate import extrapolate, boundary_split
from .pml import (
    BoundaryProfile,
    PML_PROFILES,
    boundary_profile,
    boundary_distance,
    add_absorbing_boundaries,
)

__all__ = [
    "extrapolate",
    "boundary_split",
    "BoundaryProfile",
    "PML_PROFILES",
    "boundary_profile",
    "boundary_distance",
    "add_absorbing_boundaries",
]
