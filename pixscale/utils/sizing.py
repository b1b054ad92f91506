"""Target-size helpers: aspect-ratio lock, float scaling and output naming."""
from __future__ import annotations

import math
from typing import Optional, Tuple

from ..validate import validate_dimensions


def _round(value: float) -> int:
    # Half up, matching how interpolated channels are rounded
    return int(math.floor(value + 0.5))


def fit_dimensions(
    src_w: int,
    src_h: int,
    width: Optional[int] = None,
    height: Optional[int] = None,
) -> Tuple[int, int]:
    """Resolve a target size, keeping the aspect ratio when one side is missing.

    Parameters
    ----------
    src_w, src_h : int
        Source dimensions.
    width, height : int | None
        Requested sides. If both are given they are returned unchanged; if
        only one is given the other follows ``src_w / src_h``.

    Returns
    -------
    tuple[int, int]
        ``(width, height)``, each at least 1.
    """
    validate_dimensions(src_w, src_h, what="source")
    if width is not None and height is not None:
        return width, height

    aspect = src_w / src_h
    if width is not None:
        return width, max(1, _round(width / aspect))
    if height is not None:
        return max(1, _round(height * aspect)), height
    return src_w, src_h


def scale_dimensions(src_w: int, src_h: int, scale: float) -> Tuple[int, int]:
    """Dimensions of ``src_w x src_h`` scaled by a float ``scale`` (>0)."""
    if scale <= 0:
        raise ValueError("scale must be > 0")
    validate_dimensions(src_w, src_h, what="source")
    return max(1, _round(src_w * scale)), max(1, _round(src_h * scale))


def default_output_name(width: int, height: int) -> str:
    """File name used when the caller gives no output path."""
    return f"resized-{width}x{height}.png"
