"""Resampling methods and a unified entry point.

Exported API
------------
- resample(request, limits=None, cancel=None)
- resize(source, width, height, method="bilinear", limits=None, cancel=None)

Supported methods
-----------------
- "nearest"  : copy the source pixel at ``floor(i * scale)``
- "bilinear" : 2x2 weighted average around the mapped pixel centre
- "bicubic"  : 4x4 cubic convolution, renormalised by the weights used

Implementation notes
--------------------
All methods operate on NumPy ``uint8`` arrays of shape (H, W, 4) and fill a
freshly allocated output row by row. The functions are stateless; any number
of calls may run concurrently on separate threads.
"""
from __future__ import annotations

import logging
from typing import Callable, Dict, Optional, Union

import numpy as np

from ..buffer import PixelBuffer
from ..config import ResizeLimits
from ..request import Method, ResizeRequest, ScaleFactors
from ..validate import validate_request
from .bicubic import resample_bicubic
from .bilinear import resample_bilinear
from .cancel import CancelCheck
from .nearest import resample_nearest

logger = logging.getLogger(__name__)

Array = np.ndarray
Kernel = Callable[[Array, Array, ScaleFactors, CancelCheck], None]

_METHODS: Dict[Method, Kernel] = {
    Method.NEAREST: resample_nearest,
    Method.BILINEAR: resample_bilinear,
    Method.BICUBIC: resample_bicubic,
}


def resample(
    request: ResizeRequest,
    limits: Optional[ResizeLimits] = None,
    cancel: CancelCheck = None,
) -> PixelBuffer:
    """Resize ``request.source`` to the requested size.

    Parameters
    ----------
    request : ResizeRequest
        Source buffer, target size and method.
    limits : ResizeLimits | None
        Output size bounds; defaults to :data:`pixscale.config.DEFAULT_LIMITS`.
    cancel : callable | None
        Zero-argument callable polled between output rows; returning True
        aborts the call with :class:`~pixscale.errors.ResizeCancelled`.

    Returns
    -------
    PixelBuffer
        A new buffer of exactly ``target_width x target_height``.

    Raises
    ------
    InvalidDimensions, UnsupportedMethod, DimensionsTooLarge
        Before any output is allocated.
    ResizeCancelled
        If ``cancel`` fired; no partial output is returned.
    """
    if not isinstance(request.source, PixelBuffer):
        raise TypeError("request.source must be a PixelBuffer")
    method = validate_request(request, limits)

    src = request.source
    dst_w, dst_h = int(request.target_width), int(request.target_height)
    scale = ScaleFactors.between(src.width, src.height, dst_w, dst_h)
    logger.debug(
        "Resizing %dx%d -> %dx%d using %s (scale %.4f, %.4f)",
        src.width, src.height, dst_w, dst_h, method.value, scale.scale_x, scale.scale_y,
    )

    out = PixelBuffer.blank(dst_w, dst_h)
    _METHODS[method](src.pixels, out.pixels, scale, cancel)
    return out


def resize(
    source: PixelBuffer,
    width: int,
    height: int,
    method: Union[Method, str] = Method.BILINEAR,
    limits: Optional[ResizeLimits] = None,
    cancel: CancelCheck = None,
) -> PixelBuffer:
    """Shorthand for ``resample(ResizeRequest(source, width, height, method))``."""
    return resample(ResizeRequest(source, width, height, method), limits=limits, cancel=cancel)


__all__ = ["resample", "resize"]
