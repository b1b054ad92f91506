"""Command-line entry point for pixscale.

This tool loads an image, resizes it with the selected interpolation method
and saves the result as PNG.

All processing occurs on NumPy arrays; Pillow is used only for loading and
saving.

Usage example:
    python -m pixscale.main -i input.jpg --width 800 --method bicubic
    python -m pixscale.main -i input.png -o small.png --scale 0.25 --method nearest
"""
from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional

from .config import DEFAULT_MAX_PIXELS, DEFAULT_METHOD, METHODS, ResizeLimits
from .errors import ResizeError
from .resamplers import resize
from .utils.loader import load_image, save_image
from .utils.sizing import default_output_name, fit_dimensions, scale_dimensions


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Parameters
    ----------
    argv : list[str] | None
        Optional list of arguments for testing. If None, uses sys.argv.

    Returns
    -------
    argparse.Namespace
        Parsed arguments.
    """
    parser = argparse.ArgumentParser(
        prog="pixscale",
        description=(
            "Resize images with nearest-neighbor, bilinear or bicubic interpolation. "
            "Giving only --width or only --height keeps the aspect ratio."
        ),
    )

    parser.add_argument("-i", "--input", required=True, help="Path to input image file")
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Path to output image file (default: resized-WxH.png next to the input)",
    )
    parser.add_argument("--width", type=int, default=None, help="Target width in pixels (>=1)")
    parser.add_argument("--height", type=int, default=None, help="Target height in pixels (>=1)")
    parser.add_argument(
        "--scale",
        type=float,
        default=None,
        help="Scale factor (>0) applied to both sides; exclusive with --width/--height.",
    )
    parser.add_argument(
        "--method",
        "-m",
        type=str,
        default=DEFAULT_METHOD,
        choices=list(METHODS),
        help="Interpolation method: nearest | bilinear | bicubic",
    )
    parser.add_argument(
        "--max-pixels",
        type=int,
        default=DEFAULT_MAX_PIXELS,
        help="Refuse outputs with more pixels than this (0 disables the limit).",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose output")

    return parser.parse_args(argv)


def validate_args(ns: argparse.Namespace) -> None:
    """Validate argument values and raise ValueError for invalid inputs.

    Parameters
    ----------
    ns : argparse.Namespace
        Parsed CLI arguments.
    """
    if ns.scale is not None and (ns.width is not None or ns.height is not None):
        raise ValueError("--scale cannot be combined with --width/--height")
    if ns.scale is None and ns.width is None and ns.height is None:
        raise ValueError("one of --width, --height or --scale is required")
    if ns.scale is not None and ns.scale <= 0:
        raise ValueError("--scale must be > 0")
    if ns.width is not None and ns.width < 1:
        raise ValueError("--width must be an integer >= 1")
    if ns.height is not None and ns.height < 1:
        raise ValueError("--height must be an integer >= 1")
    if ns.max_pixels < 0:
        raise ValueError("--max-pixels must be >= 0")
    if not Path(ns.input).exists():
        raise ValueError(f"Input file not found: {ns.input}")


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry function for the CLI.

    Parameters
    ----------
    argv : list[str] | None
        Optional list of arguments for testing.

    Returns
    -------
    int
        Exit status code (0 for success, non-zero for failure).
    """
    args = parse_args(argv)
    try:
        validate_args(args)
    except ValueError as e:
        print(f"Argument error: {e}")
        return 2

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    limits = ResizeLimits(max_pixels=args.max_pixels or None)

    try:
        # 1) Load (Pillow -> RGBA PixelBuffer)
        src = load_image(args.input)

        # 2) Resolve target size
        if args.scale is not None:
            width, height = scale_dimensions(src.width, src.height, args.scale)
        else:
            width, height = fit_dimensions(src.width, src.height, args.width, args.height)

        # 3) Resize
        out = resize(src, width, height, method=args.method, limits=limits)

        # 4) Save (PixelBuffer -> Pillow)
        out_path = Path(args.output) if args.output else Path(args.input).with_name(
            default_output_name(width, height)
        )
        save_image(out, out_path)
    except (ResizeError, OSError) as e:
        print(f"Error: {e}")
        return 1

    if args.verbose:
        print(f"Resized {src.width}x{src.height} -> {width}x{height} ({args.method}): {out_path}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
