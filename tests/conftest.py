"""Pytest configuration and shared fixtures."""

import numpy as np
import pytest

from grayraster.core.image import GrayImage


@pytest.fixture
def sample_image():
    """Fixture providing the 3x3 binary image used throughout the suite.

    Rows: xox / xox / xxx
    """
    return GrayImage(3, 3, "xoxxoxxxx")


@pytest.fixture
def gray_image():
    """Fixture providing a non-binary 4x5 image with distinct pixel values."""
    values = np.arange(1, 21, dtype=np.uint8).reshape(4, 5) * 12
    return GrayImage.from_array(values)


@pytest.fixture
def ring_image():
    """Fixture providing a 5x5 white ring enclosing a single black hole."""
    return GrayImage(
        5,
        5,
        "ooooo"
        "oxxxo"
        "oxoxo"
        "oxxxo"
        "ooooo",
    )
