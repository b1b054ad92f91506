"""
Pytest configuration and fixtures for the pixscale test suite.

Shared rasters used across the unit and integration tests.
"""
import numpy as np
import pytest

from pixscale import PixelBuffer

RED = (255, 0, 0, 255)
GREEN = (0, 255, 0, 255)
BLUE = (0, 0, 255, 255)
YELLOW = (255, 255, 0, 255)


@pytest.fixture
def quad_source():
    """2x2 source: red, green / blue, yellow (row-major)."""
    data = bytes(RED + GREEN + BLUE + YELLOW)
    return PixelBuffer(2, 2, data).freeze()


@pytest.fixture
def single_pixel():
    """1x1 source with a distinctive translucent colour."""
    return PixelBuffer(1, 1, bytes((12, 34, 56, 78))).freeze()


@pytest.fixture
def ramp_source():
    """2x1 source going from black to white, fully opaque."""
    return PixelBuffer(2, 1, bytes((0, 0, 0, 255, 255, 255, 255, 255))).freeze()


@pytest.fixture(scope="session")
def random_pixels():
    """Reproducible 7x5 RGBA noise as an (H, W, 4) array."""
    rng = np.random.default_rng(42)
    return rng.integers(0, 256, size=(5, 7, 4), dtype=np.uint8)


@pytest.fixture
def random_source(random_pixels):
    return PixelBuffer.from_array(random_pixels).freeze()
