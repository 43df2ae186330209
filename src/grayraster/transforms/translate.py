"""Image translation.

Each point (y, x) of the source image moves to (y + dy, x + dx) of the
result. The result has the same size as the source, and pixels whose source
lies outside the image are black.

Out-of-image reads follow the boundary model in grayraster.core.boundary.
The copying translation clips its slices with shifted_span(), which covers
exactly the destinations whose sample() source is inside the image and leaves
the rest black, the same result as calling sample() per pixel. The in-place
translation reads every source through sample().
"""

import enum
import logging

import numpy as np

from grayraster.core.boundary import sample, shifted_span
from grayraster.core.image import GrayImage

logger = logging.getLogger(__name__)


class Traversal(enum.Enum):
    """Order in which the flat buffer is walked during an in-place shift."""

    FORWARD = "forward"
    BACKWARD = "backward"


def _traversal_for_offset(offset: int) -> Traversal:
    # A negative flat offset moves content toward lower indices, so every
    # source sits after its destination and the buffer is walked upward.
    if offset < 0:
        return Traversal.FORWARD
    return Traversal.BACKWARD


def translate(image: GrayImage, dy: int, dx: int) -> GrayImage:
    """Translate an image, producing a new one.

    Args:
        image: Source image (not modified)
        dy: Vertical displacement, positive moves content down
        dx: Horizontal displacement, positive moves content right

    Returns:
        New image of the same size
    """
    if dy == 0 and dx == 0:
        return image.copy()

    height, width = image.shape
    result = np.zeros((height, width), dtype=np.uint8)

    if abs(dx) >= width or abs(dy) >= height:
        logger.debug(
            f"Shift ({dy}, {dx}) exceeds {height}x{width} image, result is black"
        )
        return GrayImage.from_array(result)

    dst_rows, src_rows = shifted_span(dy, height)
    dst_cols, src_cols = shifted_span(dx, width)
    result[dst_rows, dst_cols] = image.pixels[src_rows, src_cols]

    return GrayImage.from_array(result)


def translate_inplace(image: GrayImage, dy: int, dx: int) -> None:
    """Translate an image in place using O(1) additional memory.

    The buffer is treated as a flat row-major sequence. A destination at
    (y, x) reads its source at (y - dy, x - dx), which sits ``dy * width + dx``
    positions earlier in the flat buffer. Walking the buffer against the
    direction of that offset guarantees each source is read before it is
    overwritten. Sources outside the image, including those that would wrap
    into a neighboring row, produce black.

    Args:
        image: Image to modify
        dy: Vertical displacement, positive moves content down
        dx: Horizontal displacement, positive moves content right
    """
    height, width = image.shape
    offset = dy * width + dx
    if (dy == 0 and dx == 0) or image.is_empty():
        return

    traversal = _traversal_for_offset(offset)
    logger.debug(
        f"Translating {height}x{width} image in place by ({dy}, {dx}), "
        f"flat offset {offset}, {traversal.value} traversal"
    )

    buffer = image.flat_buffer()
    count = height * width
    if traversal is Traversal.FORWARD:
        indices = range(count)
    else:
        indices = range(count - 1, -1, -1)

    for dest in indices:
        dest_y, dest_x = divmod(dest, width)
        source_y = dest_y - dy
        source_x = dest_x - dx
        # The source sits at dest - offset and has not been overwritten yet
        buffer[dest] = sample(image, source_y, source_x)
