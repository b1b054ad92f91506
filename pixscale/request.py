"""Per-call request types: the method selector, the request and its scale factors."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Union

from .errors import UnsupportedMethod

if TYPE_CHECKING:  # pragma: no cover
    from .buffer import PixelBuffer


class Method(str, Enum):
    """Interpolation method used to compute each output pixel."""

    NEAREST = "nearest"
    BILINEAR = "bilinear"
    BICUBIC = "bicubic"

    @classmethod
    def parse(cls, value: Union["Method", str]) -> "Method":
        """Return the member named by ``value`` (case-insensitive).

        Raises
        ------
        UnsupportedMethod
            If ``value`` names no known method.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        known = ", ".join(m.value for m in cls)
        raise UnsupportedMethod(f"Unknown resampling method: {value!r} (expected one of {known})")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ResizeRequest:
    """One resize call: a source raster, the target size and the method.

    Not validated on construction; :func:`pixscale.validate.validate_request`
    checks it before any output is allocated.
    """

    source: "PixelBuffer"
    target_width: int
    target_height: int
    method: Union[Method, str] = Method.BILINEAR


@dataclass(frozen=True)
class ScaleFactors:
    """Source-to-target size ratio per axis."""

    scale_x: float
    scale_y: float

    @classmethod
    def between(cls, src_w: int, src_h: int, dst_w: int, dst_h: int) -> "ScaleFactors":
        return cls(scale_x=src_w / dst_w, scale_y=src_h / dst_h)


__all__ = ["Method", "ResizeRequest", "ScaleFactors"]
