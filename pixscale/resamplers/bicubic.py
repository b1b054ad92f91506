"""Bicubic resampling over a 4x4 neighbourhood.

Uses the separable cubic kernel from :mod:`.kernels`. Taps that fall
outside the source are clamped to the edge, so near borders the same source
pixel can be read several times. The accumulated value is divided by the
sum of the 16 weights applied (renormalised by actual sum), then rounded
half up and clamped, since the kernel's negative lobes can overshoot.
"""
from __future__ import annotations

import numpy as np

from ..request import ScaleFactors
from .cancel import CancelCheck, raise_if_cancelled
from .kernels import cubic_weights, to_channel_bytes
from .mapping import bicubic_taps

Array = np.ndarray


def resample_bicubic(src: Array, dst: Array, scale: ScaleFactors, cancel: CancelCheck = None) -> None:
    """Fill ``dst`` with bicubic interpolation of ``src``.

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

    xs, fx = bicubic_taps(dst_w, scale.scale_x, src_w)  # (W', 4)
    ys, fy = bicubic_taps(dst_h, scale.scale_y, src_h)  # (H', 4)
    wx = cubic_weights(fx)
    wy = cubic_weights(fy)

    for y in range(dst_h):
        raise_if_cancelled(cancel)
        acc = np.zeros((dst_w, src.shape[2]), dtype=np.float64)
        wsum = np.zeros(dst_w, dtype=np.float64)
        for j in range(4):
            row = src[ys[y, j]].astype(np.float64)
            for i in range(4):
                w = wy[y, j] * wx[:, i]
                acc += w[:, None] * row[xs[:, i]]
                wsum += w

        out = np.zeros_like(acc)
        np.divide(acc, wsum[:, None], out=out, where=wsum[:, None] != 0)
        dst[y] = to_channel_bytes(out)
