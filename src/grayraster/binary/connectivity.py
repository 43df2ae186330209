"""Connected components of black pixels in binary images.

Background is black (0), foreground is white (255). 4-connectivity is
assumed: a pixel's neighbors are the pixels directly above, below, left and
right of it. A black pixel is border-reachable when a path of black pixels
leads from it to the image border; black components that are not
border-reachable are holes.
"""

import logging
from collections import deque

import cv2
import numpy as np

from grayraster.binary.predicates import is_binary
from grayraster.core.image import BLACK, WHITE, GrayImage
from grayraster.exceptions import NotBinaryImageError

logger = logging.getLogger(__name__)

NEIGHBOR_OFFSETS = ((-1, 0), (1, 0), (0, -1), (0, 1))

# Value painted into the padded copy by cv2.floodFill; any value other than
# 0 and 255 works.
FLOOD_MARKER = 128

DEFAULT_METHOD = "worklist"


def _require_binary(image: GrayImage) -> None:
    if not is_binary(image):
        raise NotBinaryImageError(
            "Connectivity operations require a binary image (pixels 0 or 255)"
        )


def _reachable_worklist(pixels: np.ndarray) -> np.ndarray:
    """Flood black pixels from the border with an explicit queue."""
    height, width = pixels.shape
    black = pixels == BLACK
    visited = np.zeros((height, width), dtype=bool)
    queue: deque = deque()

    def seed(y: int, x: int) -> None:
        if black[y, x] and not visited[y, x]:
            visited[y, x] = True
            queue.append((y, x))

    for x in range(width):
        seed(0, x)
        seed(height - 1, x)
    for y in range(height):
        seed(y, 0)
        seed(y, width - 1)

    while queue:
        y, x = queue.popleft()
        for dy, dx in NEIGHBOR_OFFSETS:
            ny, nx = y + dy, x + dx
            if 0 <= ny < height and 0 <= nx < width:
                seed(ny, nx)

    return visited


def _reachable_opencv(pixels: np.ndarray) -> np.ndarray:
    """Flood black pixels from the border with cv2.floodFill.

    The image is framed with a one pixel black border so every
    border-reachable pixel connects to the frame corner.
    """
    height, width = pixels.shape
    padded = cv2.copyMakeBorder(
        pixels,
        1, 1, 1, 1,
        cv2.BORDER_CONSTANT,
        value=BLACK,
    )
    mask = np.zeros((height + 4, width + 4), dtype=np.uint8)
    cv2.floodFill(
        padded,
        mask,
        (0, 0),
        FLOOD_MARKER,
        loDiff=0,
        upDiff=0,
        flags=4,
    )
    return padded[1:-1, 1:-1] == FLOOD_MARKER


_METHODS = {
    "worklist": _reachable_worklist,
    "opencv": _reachable_opencv,
}


def border_reachable(image: GrayImage, method: str = DEFAULT_METHOD) -> np.ndarray:
    """Compute which black pixels connect to the border through black pixels.

    Args:
        image: Binary image
        method: "worklist" (queue-based flood fill) or "opencv" (cv2.floodFill)

    Returns:
        Boolean array of shape (height, width)

    Raises:
        NotBinaryImageError: If a non-empty image is not binary
        ValueError: If method is unknown
    """
    if method not in _METHODS:
        raise ValueError(
            f"Unknown connectivity method '{method}', "
            f"expected one of {sorted(_METHODS)}"
        )
    if image.is_empty():
        return np.zeros(image.shape, dtype=bool)
    _require_binary(image)

    reachable = _METHODS[method](image.pixels.copy())
    logger.debug(
        f"{int(np.count_nonzero(reachable))} of {image.size} pixels "
        f"reachable from border ({method})"
    )
    return reachable


def binary_background(image: GrayImage, method: str = DEFAULT_METHOD) -> GrayImage:
    """Mark the border-reachable black pixels.

    dst(y, x) = 255 iff src(y, x) = 0 and a 4-connected path of black
    pixels leads from (y, x) to the image border. All other pixels are 0.

    Args:
        image: Binary image (not modified)
        method: Flood fill implementation, see border_reachable()

    Returns:
        New binary image of the same size
    """
    reachable = border_reachable(image, method)
    return GrayImage.from_array(np.where(reachable, WHITE, BLACK).astype(np.uint8))


def binary_fill_holes(image: GrayImage, method: str = DEFAULT_METHOD) -> GrayImage:
    """Fill every hole with white.

    A hole is a connected component of black pixels that does not touch the
    image border. Everything else is copied unchanged.

    Args:
        image: Binary image (not modified)
        method: Flood fill implementation, see border_reachable()

    Returns:
        New binary image of the same size
    """
    reachable = border_reachable(image, method)
    filled = np.where(reachable, BLACK, WHITE).astype(np.uint8)
    holes = int(np.count_nonzero(image.pixels == BLACK)) - int(np.count_nonzero(reachable))
    logger.debug(f"Filled {holes} hole pixels")
    return GrayImage.from_array(filled)
