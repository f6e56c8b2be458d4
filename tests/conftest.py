"""
Shared fixtures and marker registration for the neuralclf test suite.
"""

import numpy as np
import pytest
import torch
import torch.nn as nn


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast, isolated tests")
    config.addinivalue_line("markers", "integration: end-to-end fit/predict tests")


@pytest.fixture
def linear_net():
    """Two-feature, two-class linear network."""
    torch.manual_seed(0)
    return nn.Linear(2, 2)


@pytest.fixture
def blobs():
    """200 samples, 2 features, 2 balanced and well separated classes."""
    rng = np.random.default_rng(0)
    x0 = rng.normal(loc=(-3.0, -3.0), scale=0.5, size=(100, 2))
    x1 = rng.normal(loc=(3.0, 3.0), scale=0.5, size=(100, 2))
    x = np.vstack([x0, x1])
    y = np.array([0] * 100 + [1] * 100)
    return x, y
