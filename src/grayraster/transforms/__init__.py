"""Geometric transforms: translation and 90 degree rotation."""

from grayraster.transforms.rotate import (
    rotate_ccw90,
    rotate_ccw90_inplace,
    rotate_cw90,
    rotate_cw90_inplace,
)
from grayraster.transforms.translate import Traversal, translate, translate_inplace

__all__ = [
    "Traversal",
    "translate",
    "translate_inplace",
    "rotate_cw90",
    "rotate_ccw90",
    "rotate_cw90_inplace",
    "rotate_ccw90_inplace",
]
