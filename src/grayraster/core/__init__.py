"""Pixel container and boundary handling."""

from grayraster.core.boundary import in_bounds, sample, shifted_span
from grayraster.core.image import BLACK, WHITE, GrayImage

__all__ = [
    "BLACK",
    "WHITE",
    "GrayImage",
    "in_bounds",
    "sample",
    "shifted_span",
]
