"""Shared test fixtures for planemath tests."""
import numpy as np
import pytest
from planemath.types import Rect


@pytest.fixture
def rng():
    """Seeded generator so property samples are reproducible."""
    return np.random.default_rng(20240611)


@pytest.fixture(scope="session")
def square():
    """10x10 rect at the origin."""
    return Rect(0, 0, 10, 10)
