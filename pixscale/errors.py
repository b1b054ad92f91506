"""Exception types raised by pixscale.

Every error derives from :class:`ResizeError` and, where a built-in type
already describes the condition, from that type too, so callers catching
``ValueError`` or ``IndexError`` keep working.
"""
from __future__ import annotations


class ResizeError(Exception):
    """Base class for all pixscale errors."""


class InvalidDimensions(ResizeError, ValueError):
    """Width/height is zero, negative, non-integer, or disagrees with the data."""


class UnsupportedMethod(ResizeError, ValueError):
    """Resampling method is not one of the known methods."""


class DimensionsTooLarge(ResizeError, ValueError):
    """Requested output exceeds the configured pixel limit."""


class OutOfBounds(ResizeError, IndexError):
    """Pixel access outside the buffer.

    The resamplers clamp every coordinate before reading, so this surfacing
    from a resize call indicates a bug, not bad input.
    """


class DecodeFailure(ResizeError):
    """An encoded image could not be decoded into a raster."""


class EncodeFailure(ResizeError):
    """A raster could not be encoded or written."""


class ResizeCancelled(ResizeError):
    """A resize was cancelled before it finished."""


__all__ = [
    "ResizeError",
    "InvalidDimensions",
    "UnsupportedMethod",
    "DimensionsTooLarge",
    "OutOfBounds",
    "DecodeFailure",
    "EncodeFailure",
    "ResizeCancelled",
]
