"""Command-line entry point for FilterZoom.

This tool loads an image, resamples it to a new size with one of the
filter kernels (or nearest-neighbor), and saves the result.

All processing occurs on NumPy arrays; Pillow is used only for
loading and saving.

Usage example:
    filterzoom -i input.png -o output.png --width 640 --filter lanczos3
    python -m pixzoom.main -i input.png -o half.png --scale 0.5
"""
from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional

from .filters import DEFAULT_FILTER, available_filters
from .resample import NEAREST, resize_array
from .utils.loader import load_image, save_image

logger = logging.getLogger(__name__)


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
        prog="filterzoom",
        description=(
            "Resize images with a separable resampling filter. "
            "Give --width and/or --height, or --scale."
        ),
    )

    parser.add_argument("-i", "--input", required=True, help="Path to input image file")
    parser.add_argument("-o", "--output", required=True, help="Path to output image file")

    parser.add_argument(
        "--width",
        type=int,
        default=None,
        help="Target width in pixels. If only --height is given, keeps aspect ratio.",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=None,
        help="Target height in pixels. If only --width is given, keeps aspect ratio.",
    )
    parser.add_argument(
        "--scale",
        type=float,
        default=None,
        help="Scale factor (>0) applied to both axes. Exclusive with --width/--height.",
    )
    filters = available_filters() + [NEAREST]
    parser.add_argument(
        "--filter",
        type=str,
        default=DEFAULT_FILTER,
        choices=filters,
        help=f"Resampling kernel: {' | '.join(filters)}. Default: {DEFAULT_FILTER}.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log table sizes and pass geometry.",
    )

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
    if not Path(ns.input).exists():
        raise ValueError(f"Input file not found: {ns.input}")


def target_size(ns: argparse.Namespace, h: int, w: int) -> tuple[int, int]:
    """Work out (new_h, new_w) from the parsed sizes and the source shape."""
    if ns.scale is not None:
        return max(1, int(round(h * ns.scale))), max(1, int(round(w * ns.scale)))
    new_w, new_h = ns.width, ns.height
    if new_h is None:
        new_h = max(1, int(round(h * new_w / w)))
    if new_w is None:
        new_w = max(1, int(round(w * new_h / h)))
    return new_h, new_w


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
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        validate_args(args)
    except ValueError as e:
        print(f"Argument error: {e}")
        return 2

    # 1) Load (Pillow -> NumPy uint8, channels kept)
    try:
        img = load_image(args.input)
    except OSError as e:  # includes PIL.UnidentifiedImageError
        print(f"Argument error: cannot read image {args.input}: {e}")
        return 2
    h, w = img.shape[:2]

    # 2) Resample
    new_h, new_w = target_size(args, h, w)
    logger.info("%s: %dx%d -> %dx%d (%s)", args.input, w, h, new_w, new_h, args.filter)
    out = resize_array(img, new_h, new_w, filter=args.filter)

    # 3) Save (NumPy -> Pillow)
    save_image(out, args.output)
    print(f"Wrote image: {args.output}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
