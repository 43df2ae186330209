"""Binary PGM (P5) reading and writing.

Only 8-bit files with a max value of 255 are supported. The header is the
magic ``P5`` followed by width, height and max value as whitespace-separated
ASCII integers, then exactly one whitespace byte, then width * height raw
samples in row-major order. Comments in the header are not supported.
"""

import logging
from pathlib import Path
from typing import BinaryIO, Union

import numpy as np

from grayraster.core.image import GrayImage
from grayraster.exceptions import PGMError

logger = logging.getLogger(__name__)

MAGIC = b"P5"
MAX_VALUE = 255
WHITESPACE = b" \t\n\r\v\f"
MAX_TOKEN_LENGTH = 32


def _fail(message: str) -> PGMError:
    logger.error(message)
    return PGMError(message)


def _read_token(stream: BinaryIO) -> bytes:
    """Read one whitespace-delimited header token.

    Leading whitespace is skipped. The single byte terminating the token is
    consumed, which for the max value token is the separator before the
    raster.
    """
    byte = stream.read(1)
    while byte and byte in WHITESPACE:
        byte = stream.read(1)

    token = b""
    while byte and byte not in WHITESPACE:
        token += byte
        if len(token) > MAX_TOKEN_LENGTH:
            raise _fail("Header token too long")
        byte = stream.read(1)
    return token


def _read_int(stream: BinaryIO, name: str) -> int:
    token = _read_token(stream)
    # Plain ASCII decimal digits only, no sign or underscores
    if not token.isdigit():
        raise _fail(f"Invalid {name}: {token!r}")
    return int(token)


def load_pgm(path: Union[str, Path]) -> GrayImage:
    """Load a binary PGM file.

    Args:
        path: Path to the PGM file

    Returns:
        New GrayImage with the file contents

    Raises:
        PGMError: If the file cannot be opened or is not a supported PGM
    """
    path = Path(path)
    try:
        stream = path.open("rb")
    except OSError as e:
        raise _fail(f"Failed to open file for reading: {path}") from e

    with stream:
        magic = _read_token(stream)
        if magic != MAGIC:
            raise _fail(f"Unrecognized magic: {magic!r}")

        width = _read_int(stream, "width")
        if width <= 0:
            raise _fail(f"Invalid width: {width}")

        height = _read_int(stream, "height")
        if height <= 0:
            raise _fail(f"Invalid height: {height}")

        max_value = _read_int(stream, "max value")
        if max_value != MAX_VALUE:
            raise _fail(
                f"Only max value of {MAX_VALUE} is supported, got {max_value}"
            )

        count = width * height
        try:
            raster = stream.read(count)
        except OSError as e:
            raise _fail(f"Error reading pixel data from {path}") from e
        if len(raster) != count:
            raise _fail(
                f"Error reading pixel data: expected {count} bytes, "
                f"got {len(raster)}"
            )

    pixels = np.frombuffer(raster, dtype=np.uint8).reshape(height, width)
    logger.debug(f"Loaded {height}x{width} image from {path}")
    return GrayImage.from_array(pixels)


def save_pgm(image: GrayImage, path: Union[str, Path]) -> None:
    """Save an image as a binary PGM file with max value 255.

    Args:
        image: Image to save
        path: Destination path

    Raises:
        PGMError: If the image is empty or the file cannot be written
    """
    path = Path(path)
    if image.is_empty():
        raise _fail("Cannot save an empty image")

    header = f"P5\n{image.width} {image.height}\n{MAX_VALUE}\n".encode("ascii")
    try:
        with path.open("wb") as f:
            f.write(header)
            f.write(image.pixels.tobytes())
    except OSError as e:
        raise _fail(f"Failed to write file: {path}") from e
    logger.debug(f"Saved {image.height}x{image.width} image to {path}")
