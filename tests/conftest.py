"""
Pytest configuration and fixtures.
"""

import numpy as np
import pytest


@pytest.fixture
def outlier_points() -> np.ndarray:
    """Five points along X with an outlier at x=100."""
    return np.array([
        [0.0, 0.0, 0.0],
        [1.0, 0.0, 0.0],
        [2.0, 0.0, 0.0],
        [3.0, 0.0, 0.0],
        [100.0, 0.0, 0.0],
    ])


@pytest.fixture
def outlier_text() -> str:
    """Same points as ``outlier_points`` in file form."""
    return "0 0 0\n1 0 0\n2 0 0\n3 0 0\n100 0 0\n"


@pytest.fixture
def outlier_file(tmp_path, outlier_text):
    """Point file on disk holding ``outlier_text``."""
    path = tmp_path / "points.txt"
    path.write_text(outlier_text)
    return path


@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded random generator for reproducible property checks."""
    return np.random.default_rng(1234)
