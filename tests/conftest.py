import numpy as np
import pytest


@pytest.fixture
def simple_dataset():
    """Five points whose least squares line is y = 0.7x + 0.9."""
    x = np.array([1.0, 2.0, 3.0, 4.0, 5.0])
    y = np.array([2.0, 2.0, 3.0, 3.0, 5.0])
    return x, y


@pytest.fixture
def noisy_dataset():
    """Noisy observations of y = -1.5x + 4."""
    rng = np.random.default_rng(seed=1)
    x = rng.uniform(-3, 3, size=50)
    y = -1.5 * x + 4 + rng.normal(scale=0.2, size=50)
    return x, y
