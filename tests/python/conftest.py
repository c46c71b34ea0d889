"""
Pytest configuration and shared fixtures for jam tests.
"""

import math
import sys
from pathlib import Path

import numpy as np
import pytest

# Add src to path for imports
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root / "src"))

from jam import get_config
from jam.matrix import JamMatrix


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture(autouse=True)
def reset_config():
    """Restore default configuration after every test."""
    yield
    get_config().reset()


@pytest.fixture
def rng():
    """Seeded random generator shared by the numeric tests."""
    return np.random.default_rng(19410711)


@pytest.fixture
def random_matrix(rng):
    """Factory for dense matrices with standard normal entries."""
    def make(nrow, ncol):
        return JamMatrix.wrap(rng.standard_normal((nrow, ncol)))
    return make


@pytest.fixture
def stat_values():
    """Data with NaN and infinite entries mixed in.

    Finite values: 0, 1, 2, -4, 8 (sum 7, mean 1.4).
    """
    return [0.0, 1.0, 2.0, math.nan, -4.0, math.inf, 8.0]


@pytest.fixture
def square_array():
    """A small non-symmetric 3x3 array."""
    return np.array([
        [1.0, 2.0, 3.0],
        [4.0, 5.0, 6.0],
        [7.0, 8.0, 10.0],
    ])


@pytest.fixture
def symmetric_array():
    """A symmetric positive definite 3x3 array."""
    return np.array([
        [4.0, 1.0, 0.5],
        [1.0, 3.0, 0.2],
        [0.5, 0.2, 2.0],
    ])
