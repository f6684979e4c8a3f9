"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pylinalg import Matrix, Vector


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def square():
    """2x2 matrix [[1, 2], [3, 4]]."""
    return Matrix([[1, 2], [3, 4]])


@pytest.fixture
def wide():
    """2x3 matrix (height 2, width 3) with distinct cells."""
    return Matrix([[1, 2, 3], [4, 5, 6]])


@pytest.fixture
def random_matrix(rng):
    """Factory for random matrices of a given width and height."""
    def make(width, height):
        return Matrix(rng.standard_normal((height, width)))
    return make


@pytest.fixture
def random_vector(rng):
    """Factory for random vectors of a given size."""
    def make(size):
        return Vector(rng.standard_normal(size))
    return make
