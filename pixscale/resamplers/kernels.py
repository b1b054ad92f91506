"""Interpolation weight functions.

Pure functions of the fractional sampling position; they broadcast over
NumPy arrays so a whole output row can be weighted at once.

Cubic kernel
------------
For distance ``t`` and ``a = |t|``::

    a <= 1 :  1 - 2a^2 + a^3
    a <= 2 :  4 - 8a + 5a^2 - a^3
    else   :  0

The 2D weight of the sample at offset ``(i, j)`` is
``cubic_weight(i - frac_x) * cubic_weight(j - frac_y)`` for
``i, j in {-1, 0, 1, 2}``. Bicubic results are divided by the sum of the
weights actually applied (:data:`WeightNormalizationPolicy.RENORMALIZE_BY_ACTUAL_SUM`)
instead of relying on the kernel summing to one; this changes edge pixels
relative to an unnormalised filter and must be kept.
"""
from __future__ import annotations

from enum import Enum
from typing import Tuple, Union

import numpy as np

Array = np.ndarray
ArrayLike = Union[float, Array]

CUBIC_OFFSETS = np.array([-1, 0, 1, 2], dtype=np.int64)


class WeightNormalizationPolicy(Enum):
    """How accumulated bicubic samples are normalised."""

    RENORMALIZE_BY_ACTUAL_SUM = "renormalize_by_actual_sum"


BICUBIC_NORMALIZATION = WeightNormalizationPolicy.RENORMALIZE_BY_ACTUAL_SUM


def bilinear_weights(frac_x: ArrayLike, frac_y: ArrayLike) -> Tuple[ArrayLike, ArrayLike, ArrayLike, ArrayLike]:
    """Weights ``(w00, w10, w01, w11)`` of the 2x2 neighbourhood.

    ``w00`` applies to ``(x0, y0)``, ``w10`` to ``(x1, y0)``, ``w01`` to
    ``(x0, y1)`` and ``w11`` to ``(x1, y1)``. They sum to one.
    """
    w00 = (1.0 - frac_x) * (1.0 - frac_y)
    w10 = frac_x * (1.0 - frac_y)
    w01 = (1.0 - frac_x) * frac_y
    w11 = frac_x * frac_y
    return w00, w10, w01, w11


def cubic_weight(t: ArrayLike) -> ArrayLike:
    """Cubic convolution weight at distance ``t``; scalar in, scalar out."""
    a = np.abs(np.asarray(t, dtype=np.float64))
    a2 = a * a
    a3 = a2 * a
    w = np.where(
        a <= 1.0,
        1.0 - 2.0 * a2 + a3,
        np.where(a <= 2.0, 4.0 - 8.0 * a + 5.0 * a2 - a3, 0.0),
    )
    if w.ndim == 0:
        return float(w)
    return w


def cubic_weights(frac: ArrayLike) -> Array:
    """Per-axis weights for taps -1, 0, 1, 2; shape ``(..., 4)``."""
    frac = np.asarray(frac, dtype=np.float64)
    return np.asarray(cubic_weight(CUBIC_OFFSETS - frac[..., None]), dtype=np.float64)


def to_channel_bytes(values: Array) -> Array:
    """Round half up and clamp interpolated channels to ``uint8``."""
    return np.clip(np.floor(values + 0.5), 0, 255).astype(np.uint8)


__all__ = [
    "CUBIC_OFFSETS",
    "WeightNormalizationPolicy",
    "BICUBIC_NORMALIZATION",
    "bilinear_weights",
    "cubic_weight",
    "cubic_weights",
    "to_channel_bytes",
]
