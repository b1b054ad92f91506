"""pixscale: resize RGBA rasters with nearest, bilinear or bicubic sampling."""
from __future__ import annotations

from .buffer import PixelBuffer
from .config import DEFAULT_LIMITS, DEFAULT_METHOD, METHODS, ResizeLimits
from .errors import (
    DecodeFailure,
    DimensionsTooLarge,
    EncodeFailure,
    InvalidDimensions,
    OutOfBounds,
    ResizeCancelled,
    ResizeError,
    UnsupportedMethod,
)
from .request import Method, ResizeRequest, ScaleFactors
from .resamplers import resample, resize
from .utils.loader import decode_image, encode_png, load_image, save_image
from .utils.sizing import fit_dimensions, scale_dimensions
from .utils.worker import ResizeWorker, resize_many

__version__ = "0.1.0"

__all__ = [
    "PixelBuffer",
    "Method",
    "ResizeRequest",
    "ScaleFactors",
    "ResizeLimits",
    "DEFAULT_LIMITS",
    "DEFAULT_METHOD",
    "METHODS",
    "resample",
    "resize",
    "load_image",
    "save_image",
    "decode_image",
    "encode_png",
    "fit_dimensions",
    "scale_dimensions",
    "ResizeWorker",
    "resize_many",
    "ResizeError",
    "InvalidDimensions",
    "UnsupportedMethod",
    "DimensionsTooLarge",
    "OutOfBounds",
    "DecodeFailure",
    "EncodeFailure",
    "ResizeCancelled",
]
