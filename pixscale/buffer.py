"""RGBA raster container.

A :class:`PixelBuffer` owns a row-major ``(height, width, 4)`` NumPy
``uint8`` array with channels in R, G, B, A order. Source buffers are frozen
(read-only) once built; output buffers are allocated zero-filled and written
by a resampler.
"""
from __future__ import annotations

from typing import Optional, Sequence, Tuple, Union

import numpy as np

from .errors import InvalidDimensions, OutOfBounds
from .validate import validate_dimensions

Array = np.ndarray
RGBA = Tuple[int, int, int, int]
BufferData = Union[bytes, bytearray, memoryview, Array, Sequence[int]]

CHANNELS = 4


def _coerce_data(data: BufferData, width: int, height: int) -> Array:
    """Convert raw channel data into an owned ``(H, W, 4)`` uint8 array."""
    expected = width * height * CHANNELS
    if isinstance(data, (bytes, bytearray, memoryview)):
        arr = np.frombuffer(data, dtype=np.uint8)
    else:
        arr = np.asarray(data)

    if arr.size != expected:
        raise InvalidDimensions(
            f"data holds {arr.size} values, expected {expected} for a "
            f"{width}x{height} RGBA raster"
        )
    if arr.dtype != np.uint8:
        if not (np.issubdtype(arr.dtype, np.integer) or arr.dtype == np.bool_):
            raise ValueError("channel values must be integers in [0, 255]")
        if arr.size and (arr.min() < 0 or arr.max() > 255):
            raise ValueError("channel values must be integers in [0, 255]")

    return np.array(arr, dtype=np.uint8).reshape(height, width, CHANNELS)


class PixelBuffer:
    """A decoded RGBA image with bounds-checked pixel access.

    Parameters
    ----------
    width, height : int
        Raster dimensions, both >= 1.
    data : bytes | np.ndarray | sequence of int | None
        ``width * height * 4`` channel values in row-major RGBA order. An
        array of shape ``(height, width, 4)`` is accepted as-is. ``None``
        allocates a zero-filled raster.

    Raises
    ------
    InvalidDimensions
        If a dimension is not a positive integer or the data length does not
        match ``width * height * 4``.
    """

    channels = CHANNELS

    def __init__(self, width: int, height: int, data: Optional[BufferData] = None) -> None:
        validate_dimensions(width, height, what="buffer")
        self.width = int(width)
        self.height = int(height)
        if data is None:
            self._data = np.zeros((self.height, self.width, CHANNELS), dtype=np.uint8)
        else:
            self._data = _coerce_data(data, self.width, self.height)

    @classmethod
    def from_array(cls, arr: Array) -> "PixelBuffer":
        """Build a buffer from an ``(H, W, 4)`` array."""
        if not isinstance(arr, np.ndarray) or arr.ndim != 3 or arr.shape[2] != CHANNELS:
            raise InvalidDimensions("arr must be an RGBA array with shape (H, W, 4)")
        h, w, _ = arr.shape
        return cls(w, h, arr)

    @classmethod
    def blank(cls, width: int, height: int) -> "PixelBuffer":
        return cls(width, height)

    @property
    def pixels(self) -> Array:
        """The underlying ``(height, width, 4)`` array (no copy)."""
        return self._data

    @property
    def nbytes(self) -> int:
        return self.width * self.height * CHANNELS

    @property
    def frozen(self) -> bool:
        return not self._data.flags.writeable

    def freeze(self) -> "PixelBuffer":
        """Make the buffer read-only and return it."""
        self._data.flags.writeable = False
        return self

    def copy(self) -> "PixelBuffer":
        return PixelBuffer(self.width, self.height, self._data)

    def tobytes(self) -> bytes:
        return self._data.tobytes()

    def _check(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise OutOfBounds(
                f"pixel ({x}, {y}) outside {self.width}x{self.height} buffer"
            )

    def get(self, x: int, y: int) -> RGBA:
        self._check(x, y)
        r, g, b, a = self._data[y, x]
        return int(r), int(g), int(b), int(a)

    def set(self, x: int, y: int, rgba: Sequence[int]) -> None:
        self._check(x, y)
        if len(rgba) != CHANNELS:
            raise ValueError("rgba must have exactly 4 channel values")
        if any(v < 0 or v > 255 for v in rgba):
            raise ValueError("channel values must be in [0, 255]")
        self._data[y, x] = rgba

    def __len__(self) -> int:
        return self.nbytes

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PixelBuffer):
            return NotImplemented
        return (
            self.width == other.width
            and self.height == other.height
            and bool(np.array_equal(self._data, other._data))
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"PixelBuffer(width={self.width}, height={self.height})"


__all__ = ["PixelBuffer", "CHANNELS", "RGBA"]
