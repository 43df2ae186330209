"""Grayscale image container.

This module provides the pixel buffer shared by every transform. Pixels are
8-bit unsigned values: 0 is black, 255 is white and everything in between is
a shade of gray. Coordinates are (y, x) with (0, 0) in the upper left corner,
y growing downward and x growing to the right.
"""

from pathlib import Path
from typing import Optional, Tuple, Union

import numpy as np

BLACK = 0
WHITE = 255

BLACK_SYMBOL = "o"
WHITE_SYMBOL = "x"
OTHER_SYMBOL = "?"


def _check_dimensions(height: int, width: int) -> None:
    if height <= 0 or width <= 0:
        raise ValueError(
            f"Image dimensions must be positive, got {height}x{width}"
        )


def _check_value(value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise ValueError(f"Pixel value must be an integer, got {value!r}")
    if not BLACK <= value <= WHITE:
        raise ValueError(f"Pixel value must be in [0, 255], got {value}")


class GrayImage:
    """Row-major 8-bit grayscale image.

    ``GrayImage()`` creates the empty image, ``GrayImage(h, w)`` an all-black
    image and ``GrayImage(h, w, literal)`` a binary image from a flat string
    of ``'o'`` (black) and ``'x'`` (white) symbols.

    The pixels live in a C-contiguous numpy array of shape (height, width),
    so ``pixels.reshape(-1)`` is always a view over the flat buffer.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(
        self,
        height: Optional[int] = None,
        width: Optional[int] = None,
        literal: Optional[str] = None,
    ):
        if height is None and width is None:
            if literal is not None:
                raise ValueError("Literal requires explicit dimensions")
            self._data = np.zeros((0, 0), dtype=np.uint8)
            return

        if height is None or width is None:
            raise ValueError("Both height and width are required")

        _check_dimensions(height, width)
        self._data = np.zeros((height, width), dtype=np.uint8)

        if literal is not None:
            if len(literal) != height * width:
                raise ValueError(
                    f"Literal length {len(literal)} does not match "
                    f"{height}x{width} image"
                )
            symbols = np.frombuffer(literal.encode("ascii"), dtype=np.uint8)
            black = symbols == ord(BLACK_SYMBOL)
            white = symbols == ord(WHITE_SYMBOL)
            if not np.all(black | white):
                raise ValueError(
                    f"Literal may contain only '{BLACK_SYMBOL}' and "
                    f"'{WHITE_SYMBOL}' symbols"
                )
            self._data.reshape(-1)[white] = WHITE

    @classmethod
    def from_array(cls, array: np.ndarray) -> "GrayImage":
        """Create an image from a 2-D array of values in [0, 255].

        Args:
            array: 2-D integer array (copied, converted to uint8). A
                zero-size array gives an empty image keeping its shape

        Returns:
            New GrayImage owning a copy of the data

        Raises:
            ValueError: If the array is not 2-D, has a non-integer dtype or
                holds out-of-range values
        """
        array = np.asarray(array)
        if array.ndim != 2:
            raise ValueError(f"Expected a 2-D array, got shape {array.shape}")
        if not np.issubdtype(array.dtype, np.integer):
            raise ValueError(f"Expected an integer array, got dtype {array.dtype}")
        if array.size > 0 and (array.min() < BLACK or array.max() > WHITE):
            raise ValueError("Array values must be in [0, 255]")

        image = cls()
        image._data = np.ascontiguousarray(array, dtype=np.uint8).copy()
        return image

    @classmethod
    def load(cls, path: Union[str, Path]) -> "GrayImage":
        """Load an image from a binary PGM file."""
        from grayraster.fileio.pgm import load_pgm

        return load_pgm(path)

    def save(self, path: Union[str, Path]) -> None:
        """Save the image as a binary PGM file."""
        from grayraster.fileio.pgm import save_pgm

        save_pgm(self, path)

    @property
    def height(self) -> int:
        return self._data.shape[0]

    @property
    def width(self) -> int:
        return self._data.shape[1]

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.height, self.width)

    @property
    def size(self) -> int:
        return self._data.size

    @property
    def pixels(self) -> np.ndarray:
        """Read-only view of the pixel array."""
        view = self._data.view()
        view.flags.writeable = False
        return view

    def flat_buffer(self) -> np.ndarray:
        """Writable row-major view over all pixels (no copy)."""
        return self._data.reshape(-1)

    def reshape_inplace(self, height: int, width: int) -> None:
        """Reinterpret the flat buffer with new dimensions.

        Raises:
            ValueError: If height * width differs from the pixel count
        """
        if height * width != self.size:
            raise ValueError(
                f"Cannot view {self.size} pixels as {height}x{width}"
            )
        self._data = self._data.reshape(height, width)

    def is_empty(self) -> bool:
        return self.height == 0 or self.width == 0

    def _check_coordinates(self, y: int, x: int) -> None:
        if not (0 <= y < self.height and 0 <= x < self.width):
            raise IndexError(
                f"Pixel ({y}, {x}) outside {self.height}x{self.width} image"
            )

    def __getitem__(self, key: Tuple[int, int]) -> int:
        y, x = key
        self._check_coordinates(y, x)
        return int(self._data[y, x])

    def __setitem__(self, key: Tuple[int, int], value: int) -> None:
        y, x = key
        self._check_coordinates(y, x)
        _check_value(value)
        self._data[y, x] = value

    def resize(self, height: int, width: int) -> None:
        """Resize the image. Content is lost, all pixels become black."""
        _check_dimensions(height, width)
        self._data = np.zeros((height, width), dtype=np.uint8)

    def fill(self, value: int) -> None:
        _check_value(value)
        self._data.fill(value)

    def copy(self) -> "GrayImage":
        return GrayImage.from_array(self._data)

    def translate_inplace(self, dy: int, dx: int) -> None:
        """Move each point (y, x) to (y + dy, x + dx) without a second buffer."""
        from grayraster.transforms.translate import translate_inplace

        translate_inplace(self, dy, dx)

    def rotate_cw90(self) -> None:
        """Rotate clockwise by 90 degrees in place."""
        from grayraster.transforms.rotate import rotate_cw90_inplace

        rotate_cw90_inplace(self)

    def rotate_ccw90(self) -> None:
        """Rotate counter clockwise by 90 degrees in place."""
        from grayraster.transforms.rotate import rotate_ccw90_inplace

        rotate_ccw90_inplace(self)

    def to_text(self) -> str:
        """Render as rows of 'o' (0), 'x' (255) and '?' (gray).

        Useful for debugging binary image algorithms.
        """
        rows = []
        for row in self._data:
            rows.append(
                "".join(
                    WHITE_SYMBOL if p == WHITE
                    else BLACK_SYMBOL if p == BLACK
                    else OTHER_SYMBOL
                    for p in row
                )
            )
        return "\n".join(rows)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GrayImage):
            return NotImplemented
        return self.shape == other.shape and bool(
            np.array_equal(self._data, other._data)
        )

    def __repr__(self) -> str:
        return f"GrayImage(height={self.height}, width={self.width})"
