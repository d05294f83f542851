# core/grid.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple

import numpy as np
from scipy import fft as sfft

from .errors import InvalidConfigurationError


def efficient_size(n: int) -> int:
    """Smallest size >= n for which an FFT is fast (5-smooth)."""
    n = int(n)
    if n < 1:
        raise InvalidConfigurationError(f"size must be >= 1; got {n}")
    # real=True restricts to radices 2, 3 and 5
    return int(sfft.next_fast_len(n, real=True))


def compute_padded_shape(
    shape: Sequence[int],
    pixel_size: float,
) -> Tuple[Tuple[int, ...], Tuple[int, ...]]:
    """
    Round a requested array shape up to FFT-efficient sizes.

    Parameters
    ----------
    shape : sequence of int
        Requested size per axis (array size plus boundary widths).
    pixel_size : float
        Grid spacing. Sizes do not depend on it; it is validated here so a
        bad value is reported before any array work.

    Returns
    -------
    target_shape : tuple of int
    padding : tuple of int
        target_shape - shape, per axis.
    """
    if not float(pixel_size) > 0.0:
        raise InvalidConfigurationError(f"pixel_size must be > 0; got {pixel_size}")
    requested = tuple(int(n) for n in shape)
    target = tuple(efficient_size(n) for n in requested)
    padding = tuple(t - n for t, n in zip(target, requested))
    return target, padding


def dist2_3d(x: np.ndarray, y: np.ndarray, z: np.ndarray) -> np.ndarray:
    """
    Squared distance field from three 1D coordinate vectors.

    x runs along axis 0, y along axis 1 and z along axis 2:
        d2[i, j, k] = x[i]**2 + y[j]**2 + z[k]**2
    """
    x = np.asarray(x).reshape(-1)
    y = np.asarray(y).reshape(-1)
    z = np.asarray(z).reshape(-1)
    return x[:, None, None] ** 2 + y[None, :, None] ** 2 + z[None, None, :] ** 2


@dataclass(frozen=True)
class SimGrid:
    """
    FFT grid for a padded 3D simulation volume.

    N is the (efficient) number of pixels per axis, padding the number of
    pixels added on top of the requested size.
    """
    N: Tuple[int, int, int]
    padding: Tuple[int, int, int]
    pixel_size: float

    def __post_init__(self) -> None:
        if len(self.N) != len(self.padding):
            raise ValueError("N and padding must have the same length.")
        if any(int(n) < 1 for n in self.N):
            raise ValueError(f"SimGrid requires N >= 1 on every axis; got {self.N}")
        if float(self.pixel_size) <= 0.0:
            raise ValueError("SimGrid requires pixel_size > 0.")

    @classmethod
    def from_shape(cls, shape: Sequence[int], pixel_size: float) -> "SimGrid":
        target, padding = compute_padded_shape(shape, pixel_size)
        return cls(N=target, padding=padding, pixel_size=float(pixel_size))

    @property
    def ndim(self) -> int:
        return len(self.N)

    @property
    def extent(self) -> Tuple[float, ...]:
        return tuple(n * self.pixel_size for n in self.N)

    def x_range(self, axis: int) -> np.ndarray:
        """Real-space coordinates along `axis`, with 0 at index N // 2."""
        n = self.N[axis]
        return (np.arange(n) - n // 2) * self.pixel_size

    def k_range(self, axis: int) -> np.ndarray:
        """Angular spatial frequencies along `axis`, in FFT order."""
        return 2.0 * np.pi * sfft.fftfreq(self.N[axis], d=self.pixel_size)

    def dist2(self) -> np.ndarray:
        """Squared distance to the grid center, for a 3D grid."""
        if self.ndim != 3:
            raise ValueError("dist2 requires a 3D grid.")
        return dist2_3d(self.x_range(0), self.x_range(1), self.x_range(2))
