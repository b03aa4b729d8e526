"""
Pytest configuration and fixtures for the FilterZoom test suite.

Shared image fixtures and small helpers used across unit and
integration tests.
"""
import os
import sys

import numpy as np
import pytest


def pytest_configure(config):
    """Configure pytest with custom settings."""
    # Add the package root to Python path for testing
    package_root = os.path.dirname(os.path.dirname(__file__))
    if package_root not in sys.path:
        sys.path.insert(0, package_root)


def pytest_collection_modifyitems(config, items):
    """Mark tests by directory so -m unit / -m integration select them."""
    for item in items:
        path = str(item.fspath)
        if f"{os.sep}integration{os.sep}" in path:
            item.add_marker("integration")
        elif f"{os.sep}unit{os.sep}" in path:
            item.add_marker("unit")


@pytest.fixture(scope="session")
def rgb_noise():
    """Random 24x32 RGB image."""
    rng = np.random.default_rng(42)  # reproducible
    return rng.integers(0, 256, size=(24, 32, 3), dtype=np.uint8)


@pytest.fixture(scope="session")
def smooth_rgb():
    """Smooth 20x30 RGB image (gentle ramps), small second differences."""
    h, w = 20, 30
    y, x = np.mgrid[0:h, 0:w].astype(np.float64)
    img = np.stack(
        [
            40 + 4.0 * x,
            60 + 5.0 * y,
            128 + 30 * np.sin(x / 9.0) * np.cos(y / 7.0),
        ],
        axis=-1,
    )
    return np.clip(np.rint(img), 0, 255).astype(np.uint8)


class ImageFactory:
    """Helper class for building synthetic test images."""

    @staticmethod
    def constant(h, w, c, value):
        return np.full((h, w, c), value, dtype=np.uint8)

    @staticmethod
    def ramp_plus_constant(h, w, constant=77):
        """Channel 0 is a horizontal ramp, channel 1 is constant."""
        img = np.empty((h, w, 2), dtype=np.uint8)
        img[:, :, 0] = np.linspace(0, 255, w).astype(np.uint8)[None, :]
        img[:, :, 1] = constant
        return img

    @staticmethod
    def step_edge(h, w):
        """Left half 0, right half 255."""
        img = np.zeros((h, w, 1), dtype=np.uint8)
        img[:, w // 2 :, 0] = 255
        return img


@pytest.fixture
def image_factory():
    """Provide access to synthetic image builders."""
    return ImageFactory()
