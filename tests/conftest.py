"""
Pytest configuration and shared fixtures for the eikonal_fmm test suite.

This module provides common fixtures, test configuration, and utilities
used across the entire test suite.
"""

from __future__ import annotations

import pytest

import numpy as np

from eikonal_fmm import FastMarching, FastMarchingConfig

# =============================================================================
# Test Configuration
# =============================================================================


def pytest_configure(config):
    """Configure pytest with custom markers and settings."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "integration: Integration tests (slower, cross-component)")
    config.addinivalue_line("markers", "mathematical: Mathematical property validation tests")
    config.addinivalue_line("markers", "slow: Slow tests (may take >10 seconds)")


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers based on test paths."""
    for item in items:
        test_path = str(item.fspath)

        if "/unit/" in test_path:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in test_path:
            item.add_marker(pytest.mark.integration)

        if "large" in item.name or "slow" in item.name:
            item.add_marker(pytest.mark.slow)


# =============================================================================
# Grid Fixtures
# =============================================================================


@pytest.fixture
def uniform_grid_5x5():
    """5x5 grid with unit cost."""
    return np.ones((5, 5))


@pytest.fixture
def uniform_grid_3d():
    """7x7x7 grid with unit cost."""
    return np.ones((7, 7, 7))


@pytest.fixture
def random_cost_grid():
    """Strictly positive random cost field for reproducible tests."""
    rng = np.random.default_rng(42)
    return rng.uniform(0.5, 2.0, size=(12, 10))


@pytest.fixture
def open_config():
    """Configuration that lets the front reach the grid border."""
    return FastMarchingConfig(margin=0)


@pytest.fixture
def center_engine(uniform_grid_5x5, open_config):
    """Engine on the 5x5 unit grid seeded at its center, not yet run."""
    engine = FastMarching(uniform_grid_5x5, config=open_config)
    engine.initialize_alive_points([(2, 2)])
    return engine

