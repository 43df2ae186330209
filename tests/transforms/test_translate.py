"""Tests for image translation."""

import numpy as np
import pytest

from grayraster.core.boundary import sample
from grayraster.core.image import GrayImage
from grayraster.transforms.translate import (
    Traversal,
    _traversal_for_offset,
    translate,
    translate_inplace,
)

SHIFTS = range(-6, 7)


def _reference_translate(image: GrayImage, dy: int, dx: int) -> GrayImage:
    """Pixel-by-pixel translation through the boundary model."""
    result = GrayImage.from_array(np.zeros(image.shape, dtype=np.uint8))
    for y in range(image.height):
        for x in range(image.width):
            result[y, x] = sample(image, y - dy, x - dx)
    return result


@pytest.mark.parametrize(
    "dy,dx,expected",
    [
        (0, 1, "oxooxooxx"),
        (1, 0, "oooxoxxox"),
        (1, 1, "ooooxooxo"),
        (0, -1, "oxooxoxxo"),
        (-1, -1, "oxoxxoooo"),
        (0, 10, "ooooooooo"),
        (10, 0, "ooooooooo"),
    ],
)
def test_translate_3x3(sample_image, dy, dx, expected):
    """Test translation of the 3x3 sample against known results."""
    assert translate(sample_image, dy, dx) == GrayImage(3, 3, expected)


@pytest.mark.parametrize(
    "dy,dx,expected",
    [
        (0, -1, "oxooxoxxo"),
        (0, -2, "xooxooxoo"),
        (-2, 0, "xxxoooooo"),
        (-2, -2, "xoooooooo"),
        (1, 0, "oooxoxxox"),
        (1, 1, "ooooxooxo"),
    ],
)
def test_translate_inplace_3x3(sample_image, dy, dx, expected):
    """Test in-place translation of the 3x3 sample against known results."""
    sample_image.translate_inplace(dy, dx)
    assert sample_image == GrayImage(3, 3, expected)


def test_translate_does_not_modify_input(sample_image):
    """Test the copying translation leaves its input untouched."""
    translate(sample_image, 1, -1)
    assert sample_image == GrayImage(3, 3, "xoxxoxxxx")


def test_translate_zero_shift(gray_image):
    """Test a zero shift returns an equal, independent image."""
    result = translate(gray_image, 0, 0)

    assert result == gray_image
    result[0, 0] = 0
    assert gray_image[0, 0] != 0


@pytest.mark.parametrize("dy,dx", [(0, 5), (0, -5), (4, 0), (-4, 0), (4, 1), (-1, 9), (1, -5)])
def test_translate_beyond_extent_is_black(gray_image, dy, dx):
    """Test shifts at least as large as the image give an all-black result."""
    copied = translate(gray_image, dy, dx)
    assert copied.shape == gray_image.shape
    assert np.count_nonzero(copied.pixels) == 0

    gray_image.translate_inplace(dy, dx)
    assert np.count_nonzero(gray_image.pixels) == 0


def test_translate_matches_reference(gray_image):
    """Test the copying translation against the per-pixel boundary model."""
    for dy in SHIFTS:
        for dx in SHIFTS:
            assert translate(gray_image, dy, dx) == _reference_translate(
                gray_image, dy, dx
            ), f"shift ({dy}, {dx})"


def test_translate_inplace_matches_copy(gray_image):
    """Test in-place and copying translation agree for every shift."""
    for dy in SHIFTS:
        for dx in SHIFTS:
            expected = translate(gray_image, dy, dx)
            image = gray_image.copy()
            translate_inplace(image, dy, dx)
            assert image == expected, f"shift ({dy}, {dx})"


def test_translate_inplace_single_row_and_column():
    """Test degenerate one-row and one-column images."""
    row = GrayImage.from_array(np.array([[10, 20, 30, 40]]))
    translate_inplace(row, 0, 2)
    np.testing.assert_array_equal(row.pixels, [[0, 0, 10, 20]])

    column = GrayImage.from_array(np.array([[10], [20], [30]]))
    translate_inplace(column, -1, 0)
    np.testing.assert_array_equal(column.pixels, [[20], [30], [0]])


def test_translate_inplace_keeps_buffer(gray_image):
    """Test the in-place translation writes into the existing buffer."""
    buffer = gray_image.flat_buffer()
    translate_inplace(gray_image, 1, 2)

    assert np.shares_memory(buffer, gray_image.flat_buffer())


def test_translate_empty_image():
    """Test translating the empty image is a no-op."""
    image = GrayImage()
    assert translate(image, 1, 1) == GrayImage()
    translate_inplace(image, 1, 1)
    assert image.is_empty()


def test_traversal_direction():
    """Test the traversal order follows the sign of the flat offset."""
    assert _traversal_for_offset(-1) is Traversal.FORWARD
    assert _traversal_for_offset(1) is Traversal.BACKWARD


def test_translate_inplace_reads_through_boundary_model(gray_image, monkeypatch):
    """Test every destination pixel of the in-place shift is read via sample()."""
    import importlib

    translate_module = importlib.import_module("grayraster.transforms.translate")

    calls = []

    def counting_sample(image, y, x):
        calls.append((y, x))
        return sample(image, y, x)

    monkeypatch.setattr(translate_module, "sample", counting_sample)
    expected = translate(gray_image, 2, -3)
    translate_inplace(gray_image, 2, -3)

    assert gray_image == expected
    assert len(calls) == gray_image.size
    assert (-2, 3) in calls
