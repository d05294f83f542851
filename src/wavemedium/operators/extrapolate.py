# operators/extrapolate.py
from __future__ import annotations

from typing import Sequence, Tuple

import numpy as np

from wavemedium.core.errors import InvalidTargetShapeError


def boundary_split(shape: Sequence[int], target_shape: Sequence[int]) -> Tuple[Tuple[int, ...], Tuple[int, ...]]:
    """
    Split the size difference of every axis over both sides.

    left = ceil(delta / 2), right = floor(delta / 2), so the extra pixel of an
    odd difference goes to the left.
    """
    if len(shape) != len(target_shape):
        raise InvalidTargetShapeError(
            f"target_shape {tuple(target_shape)} has a different rank than the array {tuple(shape)}"
        )
    delta = [int(t) - int(n) for n, t in zip(shape, target_shape)]
    if any(d < 0 for d in delta):
        raise InvalidTargetShapeError(
            f"target_shape {tuple(target_shape)} is smaller than the array {tuple(shape)}"
        )
    left = tuple(d - d // 2 for d in delta)
    right = tuple(d // 2 for d in delta)
    return left, right


def extrapolate(
    e_r: np.ndarray,
    target_shape: Sequence[int],
) -> Tuple[np.ndarray, Tuple[slice, ...], Tuple[int, ...], Tuple[int, ...]]:
    """
    Expand a permittivity map to `target_shape` by repeating its edge pixels.

    Parameters
    ----------
    e_r : ndarray
        Map to expand (any rank, normally 3).
    target_shape : sequence of int
        Final shape; must be >= e_r.shape on every axis.

    Returns
    -------
    e_r_full : ndarray of shape target_shape
    roi : tuple of slice
        e_r_full[roi] is the original map.
    left, right : tuple of int
        Number of added pixels before and after the original data, per axis.
    """
    e_r = np.asarray(e_r)
    target_shape = tuple(int(n) for n in target_shape)
    left, right = boundary_split(e_r.shape, target_shape)

    roi = tuple(slice(l, l + n) for l, n in zip(left, e_r.shape))

    # pad symmetrically with the wider (left) width, then drop the extra
    # trailing plane on axes with an odd difference
    e_r_full = np.pad(e_r, [(l, l) for l in left], mode="edge")
    e_r_full = e_r_full[tuple(slice(0, n) for n in target_shape)]
    return e_r_full, roi, left, right
