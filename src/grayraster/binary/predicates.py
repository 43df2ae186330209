"""Binary image classification.

A binary image has every pixel equal to either 0 or 255.
"""

import numpy as np

from grayraster.core.image import BLACK, WHITE, GrayImage


def is_binary(image: GrayImage) -> bool:
    """Check whether every pixel is black or white.

    The empty image is not considered binary.
    """
    if image.is_empty():
        return False
    pixels = image.pixels
    return bool(np.all((pixels == BLACK) | (pixels == WHITE)))


def threshold(image: GrayImage, thr: int) -> GrayImage:
    """Set pixels below ``thr`` to 0 and all others to 255.

    Args:
        image: Source image (not modified)
        thr: Threshold in [0, 255]; ``thr=0`` makes everything white and
            ``thr=255`` keeps only pixels equal to 255 white

    Returns:
        New binary image of the same size

    Raises:
        ValueError: If thr is outside [0, 255]
    """
    if not BLACK <= thr <= WHITE:
        raise ValueError(f"Threshold must be in [0, 255], got {thr}")

    result = np.where(image.pixels < thr, BLACK, WHITE).astype(np.uint8)
    return GrayImage.from_array(result)
