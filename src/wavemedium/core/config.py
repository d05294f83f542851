# core/config.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Tuple

import numpy as np

from .errors import InvalidConfigurationError


def _as_widths(values, name: str) -> Tuple[int, ...]:
    arr = np.atleast_1d(np.asarray(values))
    if arr.ndim != 1:
        raise InvalidConfigurationError(f"{name} must be a flat sequence; got shape {arr.shape}")
    if arr.size and not np.all(np.equal(np.mod(arr, 1), 0)):
        raise InvalidConfigurationError(f"{name} must contain integers; got {arr.tolist()}")
    widths = tuple(int(w) for w in arr)
    if any(w < 0 for w in widths):
        raise InvalidConfigurationError(f"{name} must be >= 0; got {widths}")
    return widths


def default_ar_width(boundary_widths: Tuple[int, ...], fraction: float = 0.5) -> Tuple[int, ...]:
    """
    Anti-reflection layer width derived from the boundary widths.

    Rounds half away from zero, so a boundary of 3 pixels gets a layer of 2.
    """
    return tuple(int(np.floor(w * fraction + 0.5)) for w in boundary_widths)


@dataclass(frozen=True)
class MediumOptions:
    """
    Options for building a SampleMedium.

    Parameters
    ----------
    pixel_size : float
        Size of one grid pixel, in any length unit.
    wavelength : float
        Vacuum wavelength, in the same unit as pixel_size.
    boundary_widths : tuple of int
        Absorbing boundary width (pixels) per axis of the refractive index
        array. 0 means periodic along that axis.
    boundary_type : str
        "window" (default, no absorbing layer is stamped here) or
        "PML1" .. "PML5" (smoothness order of the graded absorbing layer).
    boundary_strength : float
        Target peak imaginary part of e_r in a PML boundary.
    ar_width : tuple of int, optional
        Width of the anti-reflection layer of window boundaries. When omitted,
        ar_fraction * boundary_widths is used.
    ar_fraction : float
        Factor used for the ar_width default.
    """
    pixel_size: float
    wavelength: float
    boundary_widths: Tuple[int, ...] = ()
    boundary_type: str = "window"
    boundary_strength: float = 0.0
    ar_width: Optional[Tuple[int, ...]] = None
    ar_fraction: float = field(default=0.5, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "boundary_widths", _as_widths(self.boundary_widths, "boundary_widths"))
        if self.ar_width is not None:
            object.__setattr__(self, "ar_width", _as_widths(self.ar_width, "ar_width"))

        if not float(self.pixel_size) > 0.0:
            raise InvalidConfigurationError(f"pixel_size must be > 0; got {self.pixel_size}")
        if not float(self.wavelength) > 0.0:
            raise InvalidConfigurationError(f"wavelength must be > 0; got {self.wavelength}")
        if float(self.boundary_strength) < 0.0:
            raise InvalidConfigurationError(
                f"boundary_strength must be >= 0; got {self.boundary_strength}"
            )
        if not isinstance(self.boundary_type, str):
            raise InvalidConfigurationError(
                f"boundary_type must be a string; got {type(self.boundary_type).__name__}"
            )
        if self.ar_fraction < 0.0:
            raise InvalidConfigurationError(f"ar_fraction must be >= 0; got {self.ar_fraction}")

    @property
    def is_pml(self) -> bool:
        return self.boundary_type[:3] == "PML"

    def resolved_ar_width(self) -> Tuple[int, ...]:
        if self.ar_width is not None:
            return self.ar_width
        return default_ar_width(self.boundary_widths, self.ar_fraction)

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any]) -> "MediumOptions":
        """
        Build options from a plain dict, accepting the legacy "lambda" key
        for the wavelength.
        """
        kwargs = dict(options)
        if "lambda" in kwargs:
            if "wavelength" in kwargs:
                raise InvalidConfigurationError("give either 'lambda' or 'wavelength', not both")
            kwargs["wavelength"] = kwargs.pop("lambda")
        unknown = set(kwargs) - set(cls.__dataclass_fields__)
        if unknown:
            raise InvalidConfigurationError(f"unknown option(s): {sorted(unknown)}")
        missing = {"pixel_size", "wavelength"} - set(kwargs)
        if missing:
            raise InvalidConfigurationError(f"missing option(s): {sorted(missing)}")
        return cls(**kwargs)
