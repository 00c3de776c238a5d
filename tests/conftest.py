"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pykde import Matrix, Vector


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def spd_3x3():
    """Textbook SPD matrix whose Cholesky factor is integer-valued."""
    return Matrix([[4, 12, -16], [12, 37, -43], [-16, -43, 98]])


@pytest.fixture
def spd_3x3_factor():
    """Lower Cholesky factor of spd_3x3."""
    return np.array([[2.0, 0.0, 0.0], [6.0, 1.0, 0.0], [-8.0, 5.0, 3.0]])


@pytest.fixture
def ones_3():
    return Vector([1.0, 1.0, 1.0])


@pytest.fixture
def random_spd(rng):
    """Well-conditioned random SPD matrix (5x5) as a numpy array."""
    n = 5
    B = rng.standard_normal((n, n))
    return B @ B.T + n * np.eye(n)


@pytest.fixture
def not_pd():
    """Symmetric matrix with a negative pivot after elimination."""
    return Matrix([[1.0, 2.0], [2.0, 1.0]])
