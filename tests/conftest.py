"""Shared fixtures for PosterLevels tests."""

from __future__ import annotations

import numpy as np
import pytest

from posterlevels.core.types import PixelBuffer


@pytest.fixture
def gray_ramp():
    """1 x 256 opaque ramp, pixel x has RGB (x, x, x)."""
    v = np.arange(256, dtype=np.uint8)
    arr = np.empty((1, 256, 4), dtype=np.uint8)
    arr[0, :, 0] = v
    arr[0, :, 1] = v
    arr[0, :, 2] = v
    arr[0, :, 3] = 255
    return PixelBuffer(arr)


@pytest.fixture
def random_image():
    """Random 24 x 32 RGBA image with varied alpha."""
    rng = np.random.default_rng(42)
    arr = rng.integers(0, 256, size=(24, 32, 4), dtype=np.uint8)
    return PixelBuffer(arr)


@pytest.fixture
def black_white_image():
    """2 x 2 image: black, white, red, half-transparent gray."""
    arr = np.array(
        [
            [[0, 0, 0, 255], [255, 255, 255, 255]],
            [[255, 0, 0, 255], [128, 128, 128, 100]],
        ],
        dtype=np.uint8,
    )
    return PixelBuffer(arr)


@pytest.fixture
def tmp_image_dir(tmp_path):
    """Temporary directory for test images."""
    d = tmp_path / "images"
    d.mkdir()
    return d


@pytest.fixture
def sample_image_path(tmp_image_dir, random_image):
    """Random RGBA image saved as PNG. Returns (path, buffer)."""
    from posterlevels.io.image import save_image

    path = tmp_image_dir / "source.png"
    save_image(random_image, path)
    return path, random_image
