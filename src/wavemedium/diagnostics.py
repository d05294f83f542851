# diagnostics.py
from __future__ import annotations

from typing import Dict

import numpy as np

from wavemedium.core.medium import SampleMedium


def boundary_mask(sample: SampleMedium) -> np.ndarray:
    """True for voxels outside the region of interest."""
    mask = np.ones(sample.shape, dtype=bool)
    mask[sample.roi] = False
    return mask


def boundary_metrics(sample: SampleMedium, refractive_index: np.ndarray) -> Dict[str, float]:
    """
    Quick checks on a built medium.

    Parameters
    ----------
    sample : SampleMedium
    refractive_index : ndarray
        The map the sample was built from.

    Returns
    -------
    dict with:
        roi_max_error  : max |e_r[roi] - n**2| (0 unless something overwrote the interior)
        boundary_imag_max  : max imag(e_r) in the boundary
        boundary_imag_mean : mean imag(e_r) in the boundary
        boundary_fraction  : share of voxels outside the region of interest
        leakage            : expected leakage, nan without PML
    """
    n = np.asarray(refractive_index)
    roi = sample.e_r_roi
    if roi.shape != n.shape:
        raise ValueError(f"refractive_index has shape {n.shape}, expected {roi.shape}")

    mask = boundary_mask(sample)
    imag = np.imag(sample.e_r)[mask]

    return {
        "roi_max_error": float(np.max(np.abs(roi - n**2))),
        "boundary_imag_max": float(np.max(imag)) if imag.size else 0.0,
        "boundary_imag_mean": float(np.mean(imag)) if imag.size else 0.0,
        "boundary_fraction": float(np.mean(mask)),
        "leakage": float(sample.leakage) if sample.leakage is not None else np.nan,
    }
