"""Output-to-source coordinate mapping.

Mapping is separable, so each function works on one axis and returns the
source coordinates for every output index along it at once. Two conventions
are in use:

- nearest: ``floor(i * scale)``, no half-pixel offset
- bilinear/bicubic: pixel centres, ``(i + 0.5) * scale - 0.5``

Every integer index returned here is clamped to ``[0, src_dim - 1]``, so
edge pixels repeat when a kernel reaches past the border.
"""
from __future__ import annotations

from typing import Tuple

import numpy as np

from .kernels import CUBIC_OFFSETS

Array = np.ndarray


def clamp_indices(idx: Array, src_dim: int) -> Array:
    return np.clip(idx, 0, src_dim - 1).astype(np.int64)


def nearest_indices(n_out: int, scale: float, src_dim: int) -> Array:
    """Source index copied into each of ``n_out`` output positions."""
    src = np.floor(np.arange(n_out, dtype=np.float64) * scale)
    return clamp_indices(src.astype(np.int64), src_dim)


def center_coords(n_out: int, scale: float) -> Array:
    """Source-space sampling position of each output pixel centre.

    With ``scale == 1`` this is exactly ``i``, so identity resizes read each
    source pixel with a zero fraction.
    """
    return (np.arange(n_out, dtype=np.float64) + 0.5) * scale - 0.5


def split_coords(coords: Array) -> Tuple[Array, Array]:
    """Split coordinates into integer floor (unclamped) and fractional part."""
    base = np.floor(coords)
    return base.astype(np.int64), coords - base


def bilinear_taps(n_out: int, scale: float, src_dim: int) -> Tuple[Array, Array, Array]:
    """Return ``(i0, i1, frac)`` for a 2-tap linear filter along one axis.

    ``i1`` is derived from the unclamped floor before both are clamped, so a
    sample left of the first pixel centre reads the first pixel twice rather
    than blending in its neighbour.
    """
    base, frac = split_coords(center_coords(n_out, scale))
    i0 = clamp_indices(base, src_dim)
    i1 = clamp_indices(np.minimum(base + 1, src_dim - 1), src_dim)
    return i0, i1, frac


def bicubic_taps(n_out: int, scale: float, src_dim: int) -> Tuple[Array, Array]:
    """Return ``(indices, frac)`` for a 4-tap cubic filter along one axis.

    ``indices`` has shape ``(n_out, 4)``: the clamped source index for offsets
    -1, 0, 1, 2 around each sampling position.
    """
    base, frac = split_coords(center_coords(n_out, scale))
    indices = clamp_indices(base[:, None] + CUBIC_OFFSETS[None, :], src_dim)
    return indices, frac


__all__ = [
    "clamp_indices",
    "nearest_indices",
    "center_coords",
    "split_coords",
    "bilinear_taps",
    "bicubic_taps",
]
