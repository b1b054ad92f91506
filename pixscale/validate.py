"""Request validation.

All checks run before the resampler allocates its output, so a rejected
request has no side effects.
"""
from __future__ import annotations

import numbers
from typing import Optional, Union

from .config import DEFAULT_LIMITS, ResizeLimits
from .errors import DimensionsTooLarge, InvalidDimensions
from .request import Method, ResizeRequest


def _is_positive_int(value: object) -> bool:
    # bool is an Integral but never a valid size
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        return False
    return int(value) > 0


def validate_dimensions(width: object, height: object, what: str = "target") -> None:
    """Raise :class:`InvalidDimensions` unless both sides are positive integers."""
    if not _is_positive_int(width) or not _is_positive_int(height):
        raise InvalidDimensions(
            f"{what} width and height must be positive integers, got {width!r}x{height!r}"
        )


def validate_method(method: Union[Method, str]) -> Method:
    return Method.parse(method)


def validate_limits(width: int, height: int, limits: Optional[ResizeLimits] = None) -> None:
    """Reject outputs larger than ``limits.max_pixels``."""
    limits = DEFAULT_LIMITS if limits is None else limits
    if limits.max_pixels is None:
        return
    total = int(width) * int(height)
    if total > limits.max_pixels:
        raise DimensionsTooLarge(
            f"{width}x{height} = {total} pixels exceeds the limit of {limits.max_pixels}"
        )


def validate_request(request: ResizeRequest, limits: Optional[ResizeLimits] = None) -> Method:
    """Check a request in full and return its parsed method.

    Raises
    ------
    InvalidDimensions
        Target width or height is not a positive integer.
    UnsupportedMethod
        The method is not nearest, bilinear or bicubic.
    DimensionsTooLarge
        The target exceeds ``limits.max_pixels``.
    """
    validate_dimensions(request.target_width, request.target_height, what="target")
    method = validate_method(request.method)
    validate_limits(request.target_width, request.target_height, limits)
    return method


__all__ = [
    "validate_dimensions",
    "validate_method",
    "validate_limits",
    "validate_request",
]
