# operators/pml.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

import numpy as np
from loguru import logger
from numpy.polynomial import polynomial as P

from wavemedium.core.config import MediumOptions
from wavemedium.core.errors import DegenerateMediumError, UnknownBoundaryTypeError
from wavemedium.core.grid import dist2_3d


# -----------------------------
# Boundary curves
# -----------------------------

@dataclass(frozen=True)
class BoundaryProfile:
    """
    Graded absorbing layer that is smooth up to derivative `order` at the
    interface with the region of interest.

    With x = c*r and P(x) = sum_j coefficients[j] * x**j, the permittivity
    added at depth r (pixels) is

        de_r(r) = c**(N+2) * r**N * (N+1 + (2i*k0 - c)*r) / (k0**2 * P(c*r))

    Its imaginary part rises from 0 at the interface towards ~boundary_strength.
    coefficients[j] = (N+1)! / j!, so coefficients[0] is (N+1)!.
    """
    order: int
    coefficients: Tuple[int, ...]

    def denominator(self, x):
        return P.polyval(x, self.coefficients)

    def profile(self, r: np.ndarray, c: complex, k0: complex) -> np.ndarray:
        n = self.order
        r = np.asarray(r, dtype=float)
        return (c ** (n + 2) * r**n * ((n + 1) + (2j * k0 - c) * r)) / (k0**2 * self.denominator(c * r))

    def leakage(self, c: complex, b_max: float) -> complex:
        """Expected fraction of the field that leaks through a boundary of b_max pixels."""
        x = c * b_max
        return np.exp(-x) * self.denominator(x) / self.coefficients[0]


PML_PROFILES = {
    "PML1": BoundaryProfile(1, (2, 2, 1)),
    "PML2": BoundaryProfile(2, (6, 6, 3, 1)),
    "PML3": BoundaryProfile(3, (24, 24, 12, 4, 1)),
    "PML4": BoundaryProfile(4, (120, 120, 60, 20, 5, 1)),
    "PML5": BoundaryProfile(5, (720, 720, 360, 120, 30, 6, 1)),
}


def boundary_profile(boundary_type: str) -> BoundaryProfile:
    try:
        return PML_PROFILES[boundary_type]
    except KeyError:
        raise UnknownBoundaryTypeError(
            f"unknown boundary type '{boundary_type}'. Use 'window' or one of: {', '.join(PML_PROFILES)}."
        ) from None


# -----------------------------
# Geometry
# -----------------------------

def _depth_1d(n: int, left: int, right: int) -> np.ndarray:
    """left, left-1, ..., 1, 0, ..., 0, 1, ..., right"""
    interior = n - left - right
    if interior < 0:
        raise ValueError(f"boundaries ({left}, {right}) do not fit in {n} pixels")
    return np.concatenate([
        np.arange(left, 0, -1),
        np.zeros(interior, dtype=int),
        np.arange(1, right + 1),
    ])


def boundary_distance(
    shape: Sequence[int],
    left: Sequence[int],
    right: Sequence[int],
) -> np.ndarray:
    """
    Distance (pixels) of every voxel of a 3D volume to the region of interest.

    Interior voxels get 0, the first boundary layer 1, and so on. Depths along
    different axes combine as a Euclidean distance in the corners.
    """
    if not len(shape) == len(left) == len(right) == 3:
        raise ValueError("boundary_distance requires 3D shape, left and right.")
    x, y, z = (_depth_1d(int(n), int(l), int(r)) for n, l, r in zip(shape, left, right))
    return np.sqrt(dist2_3d(x, y, z))


# -----------------------------
# Public API
# -----------------------------

def add_absorbing_boundaries(
    e_r: np.ndarray,
    left: Sequence[int],
    right: Sequence[int],
    options: MediumOptions,
) -> Tuple[np.ndarray, Optional[float]]:
    """
    Add a PML-like absorbing layer to a padded permittivity map.

    Only acts for boundary types "PML1" .. "PML5"; other types (e.g. the
    default "window") and maps without left boundaries are returned unchanged
    with leakage None.

    Parameters
    ----------
    e_r : ndarray (3D)
        Padded permittivity map.
    left, right : sequence of int
        Boundary width before and after the region of interest, per axis.
    options : MediumOptions
        Uses boundary_type, boundary_strength, wavelength and pixel_size.

    Returns
    -------
    e_r : ndarray
        e_r plus the boundary correction (complex).
    leakage : float or None
        Expected leakage through the widest right-hand boundary.
    """
    if not options.is_pml or all(int(l) == 0 for l in left):
        return e_r, None

    profile = boundary_profile(options.boundary_type)

    e_0 = np.mean(e_r)
    if e_0 == 0:
        raise DegenerateMediumError("mean permittivity is zero; cannot derive k0 for the boundary.")

    # k0 in 1/pixels, scaled by the mean refractive index
    k0 = np.sqrt(complex(e_0)) * 2.0 * np.pi / (options.wavelength / options.pixel_size)
    # imag(de_r) tends to 2c/k0 = boundary_strength deep inside the layer
    c = options.boundary_strength * k0**2 / (2.0 * k0)
    b_max = max(int(r) for r in right)

    r = boundary_distance(e_r.shape, left, right)
    e_r = e_r + profile.profile(r, c, k0)
    leakage = float(abs(profile.leakage(c, b_max)))

    logger.debug(
        f"{options.boundary_type}: k0={complex(k0):.4g}, c={complex(c):.4g}, b_max={b_max}, leakage={leakage:.3e}"
    )
    return e_r, leakage
