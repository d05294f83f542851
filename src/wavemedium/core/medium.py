# core/medium.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional, Sequence, Tuple, Union

import numpy as np
from loguru import logger

from .config import MediumOptions
from .errors import (
    InvalidConfigurationError,
    PeriodicSizeMismatchError,
    UnsupportedDimensionalityError,
)
from .grid import SimGrid
from wavemedium.operators.extrapolate import extrapolate
from wavemedium.operators.pml import add_absorbing_boundaries

GridFactory = Callable[[Sequence[int], float], Any]


def normalize_dimensions(array: np.ndarray) -> Tuple[np.ndarray, int]:
    """
    Return a 3D view of a 2D or 3D array, plus its true dimensionality.

    2D arrays get a leading axis of size 1. Arrays that are effectively 1D
    (a 2D array with a size-1 axis) are rejected.
    """
    array = np.asarray(array)
    if array.ndim == 2:
        if min(array.shape) < 2:
            raise UnsupportedDimensionalityError(
                f"1-D media are not supported; got shape {array.shape}, "
                "use a refractive index map of at least 2x2."
            )
        return array.reshape((1,) + array.shape), 2
    if array.ndim == 3:
        return array, 3
    raise UnsupportedDimensionalityError(
        f"refractive index must be 2D or 3D; got ndim={array.ndim}"
    )


def _check_per_axis(values: Tuple[int, ...], ndim: int, name: str) -> None:
    if len(values) != ndim:
        raise InvalidConfigurationError(
            f"{name} has {len(values)} entries, expected one per axis of the "
            f"refractive index ({ndim})."
        )


@dataclass(frozen=True, eq=False)
class SampleMedium:
    """
    Padded relative permittivity map for an FFT-based wave solver.

    e_r is refractive_index**2, extended to an FFT-efficient size by repeating
    edge pixels and, for PML boundary types, with an absorbing layer added.
    It is always 3D; for 2D media the first axis has size 1.

    Attributes
    ----------
    e_r : ndarray (3D, read-only)
    e_r_min, e_r_max : float
        Extremes of real(e_r) over the original (unpadded) map.
    e_r_center : float
        (e_r_min + e_r_max) / 2
    roi : tuple of slice
        e_r[roi] is the region of the original map.
    grid : SimGrid (or whatever the grid factory returned)
    leakage : float or None
        Expected leakage through the boundary; None without PML.
    dimensions : int
        2 or 3.
    """
    e_r: np.ndarray
    e_r_min: float
    e_r_max: float
    e_r_center: float
    roi: Tuple[slice, slice, slice]
    grid: Any
    leakage: Optional[float]
    dimensions: int
    boundary_widths: Tuple[int, int, int]
    ar_width: Tuple[int, int, int]
    boundary_left: Tuple[int, int, int]
    boundary_right: Tuple[int, int, int]
    options: MediumOptions

    @classmethod
    def build(
        cls,
        refractive_index: np.ndarray,
        options: Union[MediumOptions, Mapping[str, Any]],
        *,
        grid_factory: GridFactory = SimGrid.from_shape,
    ) -> "SampleMedium":
        """
        Build the medium from a (complex) refractive index map.

        Parameters
        ----------
        refractive_index : array_like, 2D or 3D
            May be complex and need not be square.
        options : MediumOptions or mapping
            A mapping is converted with MediumOptions.from_mapping.
        grid_factory : callable
            grid_factory(shape, pixel_size) returns a grid with attribute N,
            the padded shape. Defaults to SimGrid.from_shape.
        """
        if not isinstance(options, MediumOptions):
            options = MediumOptions.from_mapping(options)

        n = np.asarray(refractive_index)
        n = n.astype(np.result_type(n.dtype, np.float64), copy=False)

        widths = options.boundary_widths
        ar_width = options.resolved_ar_width()
        _check_per_axis(widths, n.ndim, "boundary_widths")
        _check_per_axis(ar_width, n.ndim, "ar_width")

        n, dimensions = normalize_dimensions(n)
        if dimensions == 2:
            widths = (0,) + widths
            ar_width = (0,) + ar_width

        e_r = n**2
        e_r_real = np.real(e_r)
        e_r_min = float(np.min(e_r_real))
        e_r_max = float(np.max(e_r_real))
        e_r_center = (e_r_min + e_r_max) / 2

        requested = tuple(s + w for s, w in zip(e_r.shape, widths))
        grid = grid_factory(requested, options.pixel_size)
        target = tuple(int(N) for N in grid.N)

        # periodic axes must not change size
        for axis, (w, s, N) in enumerate(zip(widths, e_r.shape, target)):
            if w == 0 and N != s:
                raise PeriodicSizeMismatchError(
                    f"axis {axis} is periodic (boundary width 0) but the grid resizes it "
                    f"from {s} to {N}; use an FFT-efficient size along periodic axes."
                )

        e_r, roi, left, right = extrapolate(e_r, target)
        e_r, leakage = add_absorbing_boundaries(e_r, left, right, options)
        e_r.flags.writeable = False

        logger.debug(
            f"SampleMedium: {dimensions}D, shape {n.shape} -> {e_r.shape}, "
            f"boundaries left={left} right={right}, type={options.boundary_type}, leakage={leakage}"
        )

        return cls(
            e_r=e_r,
            e_r_min=e_r_min,
            e_r_max=e_r_max,
            e_r_center=e_r_center,
            roi=roi,
            grid=grid,
            leakage=leakage,
            dimensions=dimensions,
            boundary_widths=widths,
            ar_width=ar_width,
            boundary_left=left,
            boundary_right=right,
            options=options,
        )

    @property
    def shape(self) -> Tuple[int, ...]:
        return self.e_r.shape

    @property
    def roi_shape(self) -> Tuple[int, ...]:
        return tuple(s.stop - s.start for s in self.roi)

    def restrict(self, field: np.ndarray) -> np.ndarray:
        """
        Cut the region of interest out of a field on the padded grid.

        For 2D media the synthetic first axis is dropped, so the result has
        the shape of the original refractive index map.
        """
        field = np.asarray(field)
        if field.shape != self.e_r.shape:
            raise ValueError(f"field has shape {field.shape}, expected {self.e_r.shape}")
        out = field[self.roi]
        return out[0] if self.dimensions == 2 else out

    @property
    def e_r_roi(self) -> np.ndarray:
        return self.restrict(self.e_r)


def build_sample_medium(
    refractive_index: np.ndarray,
    options: Union[MediumOptions, Mapping[str, Any]],
    **kwargs,
) -> SampleMedium:
    """Functional alias for SampleMedium.build."""
    return SampleMedium.build(refractive_index, options, **kwargs)
