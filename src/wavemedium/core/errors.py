# core/errors.py
"""
Exceptions raised while building a sample medium.

All of them derive from ValueError, so callers that only guard against bad
input values keep working.
"""


class MediumError(ValueError):
    """Base class for every construction failure."""


class InvalidConfigurationError(MediumError):
    """Options are inconsistent with the refractive index array."""


class DegenerateMediumError(InvalidConfigurationError):
    """Mean permittivity is zero, so no wavenumber can be derived."""


class UnsupportedDimensionalityError(MediumError):
    """Array is not effectively 2-D or 3-D."""


class InvalidTargetShapeError(MediumError):
    """Padded shape is smaller than the array it should contain."""


class PeriodicSizeMismatchError(MediumError):
    """The grid padded an axis that was declared periodic."""


class UnknownBoundaryTypeError(MediumError):
    """Boundary tag looks like a PML but names no supported order."""
