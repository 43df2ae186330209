"""Boundary handling for image transforms.

Pixels outside the image, i.e. with y < 0, x < 0, y >= height or
x >= width, are black. Transforms that may read a shifted coordinate go
through this module instead of indexing the image directly.
"""

from typing import Tuple

from grayraster.core.image import BLACK, GrayImage


def in_bounds(height: int, width: int, y: int, x: int) -> bool:
    """Check whether (y, x) lies inside a height x width image."""
    return 0 <= y < height and 0 <= x < width


def sample(image: GrayImage, y: int, x: int) -> int:
    """Read a pixel, treating everything outside the image as black.

    Args:
        image: Source image
        y: Row coordinate (may be out of range)
        x: Column coordinate (may be out of range)

    Returns:
        Stored pixel value, or 0 if (y, x) is outside the image
    """
    if not in_bounds(image.height, image.width, y, x):
        return BLACK
    return image[y, x]


def shifted_span(shift: int, extent: int) -> Tuple[slice, slice]:
    """Clip a 1-D shift to the part of the axis that stays inside.

    Destination index ``i`` reads source index ``i - shift``. Only indices
    whose source is inside ``[0, extent)`` are covered; the rest of the
    destination reads outside the image and is therefore black.

    Args:
        shift: Signed displacement along the axis
        extent: Axis length

    Returns:
        Tuple of (destination slice, source slice) of equal length. Both are
        empty when ``abs(shift) >= extent``.
    """
    if abs(shift) >= extent:
        return slice(0, 0), slice(0, 0)
    if shift >= 0:
        return slice(shift, extent), slice(0, extent - shift)
    return slice(0, extent + shift), slice(-shift, extent)
