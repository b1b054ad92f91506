"""Bilinear resampling over the 2x2 neighbourhood of each pixel centre."""
from __future__ import annotations

import numpy as np

from ..request import ScaleFactors
from .cancel import CancelCheck, raise_if_cancelled
from .kernels import bilinear_weights, to_channel_bytes
from .mapping import bilinear_taps

Array = np.ndarray


def resample_bilinear(src: Array, dst: Array, scale: ScaleFactors, cancel: CancelCheck = None) -> None:
    """Fill ``dst`` with bilinear interpolation of ``src``.

    Every channel, alpha included, is interpolated independently as
    ``w00*p00 + w10*p10 + w01*p01 + w11*p11`` and rounded half up. The
    weights are a convex combination, so results never leave the range of
    the four samples.
    """
    src_h, src_w, _ = src.shape
    dst_h, dst_w, _ = dst.shape

    x0, x1, fx = bilinear_taps(dst_w, scale.scale_x, src_w)
    y0, y1, fy = bilinear_taps(dst_h, scale.scale_y, src_h)
    # Broadcast x fractions over the channel axis
    fx = fx[:, None]

    for y in range(dst_h):
        raise_if_cancelled(cancel)
        top = src[y0[y]].astype(np.float64)
        bottom = src[y1[y]].astype(np.float64)
        w00, w10, w01, w11 = bilinear_weights(fx, fy[y])
        acc = w00 * top[x0] + w10 * top[x1] + w01 * bottom[x0] + w11 * bottom[x1]
        dst[y] = to_channel_bytes(acc)
