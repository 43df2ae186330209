"""Rotation by 90 degrees around the image center.

A height x width image becomes width x height. The in-place variants permute
the flat buffer cycle by cycle, keeping only scalar temporaries, and then
reinterpret the buffer with the swapped dimensions.
"""

import logging
from typing import Callable

from grayraster.core.image import GrayImage

logger = logging.getLogger(__name__)


def _cw_source(height: int, width: int) -> Callable[[int], int]:
    # Result is width x height; result (r, c) comes from source (height-1-c, r).
    def source(index: int) -> int:
        r, c = divmod(index, height)
        return (height - 1 - c) * width + r

    return source


def _ccw_source(height: int, width: int) -> Callable[[int], int]:
    # Result (r, c) comes from source (c, width-1-r).
    def source(index: int) -> int:
        r, c = divmod(index, height)
        return c * width + (width - 1 - r)

    return source


def _permute_inplace(image: GrayImage, source: Callable[[int], int]) -> None:
    """Apply ``new[i] = old[source(i)]`` to the flat buffer.

    Each cycle of the permutation is rotated once, starting from its
    smallest index. Finding the leader walks the cycle, so the cost is
    quadratic in the worst case while memory stays constant.
    """
    buffer = image.flat_buffer()
    for start in range(image.size):
        index = source(start)
        while index > start:
            index = source(index)
        if index < start:
            continue

        saved = buffer[start]
        index = start
        while True:
            next_index = source(index)
            if next_index == start:
                buffer[index] = saved
                break
            buffer[index] = buffer[next_index]
            index = next_index


def rotate_cw90_inplace(image: GrayImage) -> None:
    """Rotate clockwise by 90 degrees using O(1) additional memory."""
    height, width = image.shape
    if not image.is_empty():
        logger.debug(f"Rotating {height}x{width} image clockwise in place")
        _permute_inplace(image, _cw_source(height, width))
    image.reshape_inplace(width, height)


def rotate_ccw90_inplace(image: GrayImage) -> None:
    """Rotate counter clockwise by 90 degrees using O(1) additional memory."""
    height, width = image.shape
    if not image.is_empty():
        logger.debug(f"Rotating {height}x{width} image counter clockwise in place")
        _permute_inplace(image, _ccw_source(height, width))
    image.reshape_inplace(width, height)


def rotate_cw90(image: GrayImage) -> GrayImage:
    """Return a clockwise-rotated copy."""
    result = image.copy()
    rotate_cw90_inplace(result)
    return result


def rotate_ccw90(image: GrayImage) -> GrayImage:
    """Return a counter clockwise-rotated copy."""
    result = image.copy()
    rotate_ccw90_inplace(result)
    return result
