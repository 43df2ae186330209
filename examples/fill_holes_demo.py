"""Example script for binary hole filling.

This script thresholds a grayscale PGM image, fills the holes of the
resulting binary image and writes both the filled image and the
border-connected background mask next to the input.
"""

import logging
import sys
from pathlib import Path

from grayraster import (
    PGMError,
    binary_background,
    binary_fill_holes,
    load_pgm,
    save_pgm,
    threshold,
)
from grayraster.utils.logging_config import setup_logging

# Setup logging
setup_logging(log_level=logging.INFO)
logger = logging.getLogger(__name__)


def main() -> None:
    """Main function for the hole filling demo."""
    if len(sys.argv) < 2:
        logger.error("Usage: fill_holes_demo.py IMAGE.pgm [THRESHOLD]")
        return

    input_path = Path(sys.argv[1])
    thr = int(sys.argv[2]) if len(sys.argv) > 2 else 128

    try:
        image = load_pgm(input_path)
    except PGMError as e:
        logger.error(f"Failed to load {input_path}: {e}")
        return

    logger.info(f"Loaded {image.width}x{image.height} image")

    binary = threshold(image, thr)
    filled = binary_fill_holes(binary)
    background = binary_background(binary)

    filled_path = input_path.with_name(f"{input_path.stem}_filled.pgm")
    background_path = input_path.with_name(f"{input_path.stem}_background.pgm")
    save_pgm(filled, filled_path)
    save_pgm(background, background_path)

    logger.info(f"Wrote {filled_path} and {background_path}")


if __name__ == "__main__":
    main()
