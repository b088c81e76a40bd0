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
def square_full_rank(rng):
    """Well-conditioned 5x5 matrix."""
    return rng.standard_normal((5, 5)) + 5.0 * np.eye(5)


@pytest.fixture
def rank_deficient(rng):
    """6x4 matrix of rank 2 (columns 3, 4 are combinations of 1, 2)."""
    x1 = rng.standard_normal(6)
    x2 = rng.standard_normal(6)
    return np.column_stack([x1, x2, x1 + x2, 2.0 * x1 - x2])
