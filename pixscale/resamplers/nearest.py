"""Nearest-neighbor resampling.

Each output pixel is a byte-for-byte copy of one source pixel; nothing is
blended. Source indices are looked up from per-axis tables computed once
per call, and whole rows are copied with NumPy fancy indexing.
"""
from __future__ import annotations

import numpy as np

from ..request import ScaleFactors
from .cancel import CancelCheck, raise_if_cancelled
from .mapping import nearest_indices

Array = np.ndarray


def resample_nearest(src: Array, dst: Array, scale: ScaleFactors, cancel: CancelCheck = None) -> None:
    """Fill ``dst`` from ``src`` by nearest-neighbor lookup.

    Parameters
    ----------
    src : np.ndarray
        Source raster (H, W, 4), dtype=uint8.
    dst : np.ndarray
        Zero-initialised output raster (H', W', 4), dtype=uint8; written in place.
    scale : ScaleFactors
        ``W / W'`` and ``H / H'``.
    cancel : callable | None
        Polled before each output row.
    """
    src_h, src_w, _ = src.shape
    dst_h, dst_w, _ = dst.shape

    # Coordinate tables: floor(i * scale), clamped
    xi = nearest_indices(dst_w, scale.scale_x, src_w)
    yi = nearest_indices(dst_h, scale.scale_y, src_h)

    for y in range(dst_h):
        raise_if_cancelled(cancel)
        dst[y] = src[yi[y], xi]
