"""Utility functions for pixscale.

Modules:
- loader: Pillow <-> PixelBuffer decode/encode for files and bytes.
- sizing: Aspect-locked and scaled target dimensions, default output names.
- worker: Background and batched resizing on threads.
"""
from .loader import decode_image, encode_png, load_image, save_image, to_pil
from .sizing import default_output_name, fit_dimensions, scale_dimensions
from .worker import ResizeWorker, resize_many

__all__ = [
    "decode_image",
    "encode_png",
    "load_image",
    "save_image",
    "to_pil",
    "default_output_name",
    "fit_dimensions",
    "scale_dimensions",
    "ResizeWorker",
    "resize_many",
]
