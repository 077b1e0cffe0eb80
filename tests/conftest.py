"""
Shared fixtures for FilterGram tests.
"""

import numpy as np
import pytest


@pytest.fixture
def make_image():
    """Factory for RGBA float32 test images."""
    def _make(height=32, width=32, rgb=(0.5, 0.5, 0.5), alpha=1.0):
        image = np.empty((height, width, 4), dtype=np.float32)
        image[..., :3] = np.array(rgb, dtype=np.float32)
        image[..., 3] = alpha
        return image
    return _make


@pytest.fixture
def gray_image(make_image):
    """Opaque mid-gray 100x100 image."""
    return make_image(100, 100, (0.5, 0.5, 0.5))


@pytest.fixture
def gradient_image():
    """Colourful 48x64 image: red ramps across, green ramps down, blue fixed."""
    height, width = 48, 64
    image = np.empty((height, width, 4), dtype=np.float32)
    image[..., 0] = np.linspace(0.0, 1.0, width, dtype=np.float32)[np.newaxis, :]
    image[..., 1] = np.linspace(0.0, 1.0, height, dtype=np.float32)[:, np.newaxis]
    image[..., 2] = 0.3
    image[..., 3] = 1.0
    return image
