"""
Pytest configuration and fixtures for PyCoherent test suite.

This file contains shared fixtures, test configuration, and helper modules
used across the test suite.
"""
import os
import sys
import pytest
import numpy as np


def pytest_configure(config):
    """Configure pytest with custom settings."""
    # Add the package root to Python path for testing
    package_root = os.path.dirname(os.path.dirname(__file__))
    if package_root not in sys.path:
        sys.path.insert(0, package_root)

    config.addinivalue_line("markers", "unit: fast tests of a single component")
    config.addinivalue_line("markers", "integration: tests combining several components")
    config.addinivalue_line("markers", "importtest: import smoke tests")
    config.addinivalue_line("markers", "slow: tests that sample many points")


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers."""
    for item in items:
        # Mark import tests for easy selection
        if "import" in item.name.lower() or "test_imports.py" in str(item.fspath):
            item.add_marker("importtest")


def make_constant_module(value):
    """Generator module returning ``value`` everywhere."""
    from pycoherent.module import Module

    class ConstantModule(Module):
        def get_value(self, x, y):
            return value

    return ConstantModule()


def make_coordinate_module(axis="x"):
    """Generator module returning its x (or y) input coordinate."""
    from pycoherent.module import Module

    class CoordinateModule(Module):
        def get_value(self, x, y):
            return x if axis == "x" else y

    return CoordinateModule()


@pytest.fixture
def constant_module():
    """Factory for constant-valued modules."""
    return make_constant_module


@pytest.fixture
def coordinate_module():
    """Factory for modules echoing one input coordinate."""
    return make_coordinate_module


@pytest.fixture
def sample_points():
    """Reproducible coordinates spread over positive and negative values."""
    rng = np.random.default_rng(42)
    x = rng.uniform(-50.0, 50.0, 200)
    y = rng.uniform(-50.0, 50.0, 200)
    return x, y


@pytest.fixture
def small_builder():
    """Builder rendering a 4-octave Perlin module into an 8x6 map over [0, 2] x [0, 1.5]."""
    import pycoherent as pc

    builder = pc.raster.NoiseMapBuilderPlane(
        pc.module.Perlin(octave_count=4, seed=11), pc.raster.NoiseMap()
    )
    builder.set_dest_size(8, 6)
    builder.set_bounds(0.0, 2.0, 0.0, 1.5)
    return builder
