"""Command line interface for grayraster.

Reads a PGM image, applies one transform and writes the result.
"""

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from grayraster.binary.connectivity import binary_background, binary_fill_holes
from grayraster.binary.predicates import is_binary, threshold
from grayraster.core.image import GrayImage
from grayraster.exceptions import PGMError
from grayraster.fileio.pgm import load_pgm, save_pgm
from grayraster.transforms.rotate import rotate_ccw90_inplace, rotate_cw90_inplace
from grayraster.transforms.translate import translate, translate_inplace
from grayraster.utils.config_loader import DEFAULT_CONFIG, load_config, merge_config
from grayraster.utils.logging_config import setup_logging

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="grayraster",
        description="Transform 8-bit grayscale PGM images",
    )
    parser.add_argument("--config", type=Path, help="YAML config file")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    info = subparsers.add_parser("info", help="Print image dimensions")
    info.add_argument("input", type=Path)

    def add_io(sub: argparse.ArgumentParser) -> None:
        sub.add_argument("input", type=Path, help="Input PGM file")
        sub.add_argument("output", type=Path, help="Output PGM file")

    trans = subparsers.add_parser("translate", help="Shift image content")
    add_io(trans)
    trans.add_argument("--dy", type=int, default=0)
    trans.add_argument("--dx", type=int, default=0)
    trans.add_argument(
        "--inplace",
        action="store_true",
        help="Use the constant-memory in-place algorithm",
    )

    rot = subparsers.add_parser("rotate", help="Rotate by 90 degrees")
    add_io(rot)
    rot.add_argument("--direction", choices=["cw", "ccw"], default="cw")

    thr = subparsers.add_parser("threshold", help="Binarize the image")
    add_io(thr)
    thr.add_argument(
        "--value", type=int, help="Threshold (default from config)"
    )

    add_io(subparsers.add_parser("fill-holes", help="Fill holes in a binary image"))
    add_io(subparsers.add_parser("background", help="Border-connected background mask"))

    return parser


def _apply(args: argparse.Namespace, image: GrayImage, config: dict) -> GrayImage:
    method = config.get("connectivity", {}).get("method", "worklist")

    if args.command == "translate":
        if args.inplace:
            translate_inplace(image, args.dy, args.dx)
            return image
        return translate(image, args.dy, args.dx)
    if args.command == "rotate":
        if args.direction == "cw":
            rotate_cw90_inplace(image)
        else:
            rotate_ccw90_inplace(image)
        return image
    if args.command == "threshold":
        value = args.value if args.value is not None else config.get("threshold", 128)
        return threshold(image, int(value))
    if args.command == "fill-holes":
        return binary_fill_holes(image, method=method)
    if args.command == "background":
        return binary_background(image, method=method)
    raise ValueError(f"Unknown command: {args.command}")


def main(argv: Optional[List[str]] = None) -> int:
    """Run the command line interface.

    Args:
        argv: Argument list (defaults to sys.argv[1:])

    Returns:
        Process exit code
    """
    args = _build_parser().parse_args(argv)

    try:
        overrides = load_config(args.config) if args.config is not None else {}
    except (FileNotFoundError, ValueError) as e:
        setup_logging()
        logger.error(f"Failed to load config: {e}")
        return 1
    config = merge_config(DEFAULT_CONFIG, overrides)

    log_config = config.get("logging", {})
    setup_logging(
        log_dir=log_config.get("log_dir"),
        log_level="DEBUG" if args.verbose else log_config.get("level", "INFO"),
    )

    try:
        image = load_pgm(args.input)
        if args.command == "info":
            print(
                f"{args.input}: {image.width}x{image.height}, "
                f"binary={is_binary(image)}"
            )
            return 0

        result = _apply(args, image, config)
        save_pgm(result, args.output)
    except (PGMError, ValueError) as e:
        logger.error(f"{args.command} failed: {e}")
        return 1

    logger.info(f"Wrote {result.height}x{result.width} image to {args.output}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
