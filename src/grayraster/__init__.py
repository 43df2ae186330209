"""Pixel-exact transforms for 8-bit grayscale images.

- Translation (copying and constant-memory in place)
- 90 degree rotation
- Thresholding and binary checks
- Hole filling and background detection on binary images
- Binary PGM (P5) persistence
"""

from grayraster.binary.connectivity import (
    binary_background,
    binary_fill_holes,
    border_reachable,
)
from grayraster.binary.predicates import is_binary, threshold
from grayraster.core.boundary import sample
from grayraster.core.image import BLACK, WHITE, GrayImage
from grayraster.exceptions import NotBinaryImageError, PGMError
from grayraster.fileio.pgm import load_pgm, save_pgm
from grayraster.transforms.rotate import (
    rotate_ccw90,
    rotate_ccw90_inplace,
    rotate_cw90,
    rotate_cw90_inplace,
)
from grayraster.transforms.translate import translate, translate_inplace

__version__ = "0.1.0"

__all__ = [
    "BLACK",
    "WHITE",
    "GrayImage",
    "NotBinaryImageError",
    "PGMError",
    "sample",
    "translate",
    "translate_inplace",
    "rotate_cw90",
    "rotate_ccw90",
    "rotate_cw90_inplace",
    "rotate_ccw90_inplace",
    "is_binary",
    "threshold",
    "border_reachable",
    "binary_background",
    "binary_fill_holes",
    "load_pgm",
    "save_pgm",
]
