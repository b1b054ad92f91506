"""Image loading and saving utilities using Pillow, with PixelBuffers.

All resampling happens on NumPy arrays. These helpers only convert between
encoded images (files or bytes) and RGBA :class:`PixelBuffer` objects, and
turn Pillow failures into :class:`DecodeFailure` / :class:`EncodeFailure`.
"""
from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import Optional, Union

import numpy as np
from PIL import Image, UnidentifiedImageError

from ..buffer import PixelBuffer
from ..config import OUTPUT_FORMAT
from ..errors import DecodeFailure, EncodeFailure

logger = logging.getLogger(__name__)


def _from_pil(im: Image.Image) -> PixelBuffer:
    arr = np.array(im.convert("RGBA"), dtype=np.uint8)
    return PixelBuffer.from_array(arr).freeze()


def to_pil(buffer: PixelBuffer) -> Image.Image:
    """Wrap a buffer's pixels in a Pillow RGBA image (copies the data)."""
    return Image.frombytes("RGBA", (buffer.width, buffer.height), buffer.tobytes())


def load_image(path: Union[str, Path]) -> PixelBuffer:
    """Load an image file into a frozen RGBA PixelBuffer.

    Parameters
    ----------
    path : str | Path
        Path to an image supported by Pillow.

    Returns
    -------
    PixelBuffer
        Read-only buffer; multi-frame images contribute their first frame.

    Raises
    ------
    FileNotFoundError
        If ``path`` does not exist.
    DecodeFailure
        If Pillow cannot read the file.
    """
    p = Path(path)
    if not p.is_file():
        raise FileNotFoundError(f"Image not found: {p}")
    try:
        with Image.open(p) as im:
            buf = _from_pil(im)
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as exc:
        raise DecodeFailure(f"Could not decode image {p}: {exc}") from exc
    logger.debug("Loaded %s (%dx%d)", p, buf.width, buf.height)
    return buf


def decode_image(data: bytes) -> PixelBuffer:
    """Decode an in-memory encoded image into a frozen RGBA PixelBuffer."""
    try:
        with Image.open(io.BytesIO(data)) as im:
            return _from_pil(im)
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as exc:
        raise DecodeFailure(f"Could not decode image data: {exc}") from exc


def save_image(buffer: PixelBuffer, path: Union[str, Path], format: Optional[str] = None) -> None:
    """Encode a PixelBuffer to an image file via Pillow.

    Parameters
    ----------
    buffer : PixelBuffer
        Raster to write.
    path : str | Path
        Output file path. The format is inferred from the extension unless
        ``format`` is given; paths without an extension are written as PNG.
    """
    if not isinstance(buffer, PixelBuffer):
        raise TypeError("buffer must be a PixelBuffer")

    p = Path(path)
    im = to_pil(buffer)
    if format is None and p.suffix.lower() in (".jpg", ".jpeg"):
        # JPEG has no alpha channel
        im = im.convert("RGB")
    try:
        if format is None and not p.suffix:
            im.save(p, format=OUTPUT_FORMAT)
        else:
            im.save(p, format=format)
    except (ValueError, OSError) as exc:
        raise EncodeFailure(f"Could not write image {p}: {exc}") from exc
    logger.debug("Saved %s (%dx%d)", p, buffer.width, buffer.height)


def encode_png(buffer: PixelBuffer) -> bytes:
    """Encode a PixelBuffer as PNG bytes."""
    out = io.BytesIO()
    try:
        to_pil(buffer).save(out, format=OUTPUT_FORMAT)
    except (ValueError, OSError) as exc:
        raise EncodeFailure(f"Could not encode PNG: {exc}") from exc
    return out.getvalue()
