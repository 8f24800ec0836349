"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def skewed_sample(rng):
    """Right-skewed sample (exponential), n=200."""
    return rng.exponential(scale=2.0, size=200)


@pytest.fixture
def positive_weights(rng):
    """Positive weights matching skewed_sample."""
    return rng.uniform(0.5, 2.0, size=200)
