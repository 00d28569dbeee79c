# tests/conftest.py

import numpy as np
import pytest


@pytest.fixture
def unit_square():
    """Unit square on the xz-plane, wound so its interior lies on the
    non-negative side of every edge perp product."""
    return np.array([
        0.0, 0.0, 0.0,
        0.0, 0.0, 1.0,
        1.0, 0.0, 1.0,
        1.0, 0.0, 0.0,
    ])


@pytest.fixture
def unit_square_ccw():
    return np.array([
        0.0, 0.0, 0.0,
        1.0, 0.0, 0.0,
        1.0, 0.0, 1.0,
        0.0, 0.0, 1.0,
    ])


@pytest.fixture
def right_triangle():
    return (
        np.array([0.0, 0.0, 0.0]),
        np.array([2.0, 0.0, 0.0]),
        np.array([0.0, 0.0, 2.0]),
    )
