"""Defaults and user-tunable settings for pixscale.

Everything here can be overridden via CLI flags or by passing explicit
values to the library functions.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


# Known resampling methods, in increasing order of cost
METHODS = ("nearest", "bilinear", "bicubic")
DEFAULT_METHOD = "bilinear"

# 64 Mpx of RGBA output is 256 MiB
DEFAULT_MAX_PIXELS = 64 * 1024 * 1024

OUTPUT_FORMAT = "PNG"


@dataclass(frozen=True)
class ResizeLimits:
    """Upper bounds applied to a resize request before allocating output.

    Attributes
    ----------
    max_pixels
        Largest allowed ``target_width * target_height``. ``None`` disables
        the check.
    """

    max_pixels: Optional[int] = DEFAULT_MAX_PIXELS

    @classmethod
    def unbounded(cls) -> "ResizeLimits":
        return cls(max_pixels=None)


DEFAULT_LIMITS = ResizeLimits()
