"""
Shared fixtures for ANOVA tests.
"""

import numpy as np
import pytest


@pytest.fixture
def oneway_balanced():
    """3-group balanced design (n=10 each), clear group differences."""
    rng = np.random.default_rng(42)
    return {
        'A': rng.normal(10.0, 2.0, 10),
        'B': rng.normal(15.0, 2.0, 10),
        'C': rng.normal(20.0, 2.0, 10),
    }


@pytest.fixture
def oneway_unbalanced():
    """4 groups of unequal size, small differences."""
    rng = np.random.default_rng(123)
    return {
        'w': rng.normal(50.0, 8.0, 6),
        'x': rng.normal(52.0, 8.0, 11),
        'y': rng.normal(49.0, 8.0, 8),
        'z': rng.normal(51.0, 8.0, 15),
    }
