"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from whoqolstats.scoring import NEGATIVE_ITEMS, QUESTION_IDS


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def best_responses():
    """Best possible answers: 5 everywhere, 1 on negatively worded items."""
    return {qid: (1 if qid in NEGATIVE_ITEMS else 5) for qid in QUESTION_IDS}


@pytest.fixture
def random_responses(rng):
    """Factory of random, possibly incomplete, questionnaires."""
    def make(missing_prob=0.1):
        responses = {}
        for qid in QUESTION_IDS:
            if rng.random() >= missing_prob:
                responses[qid] = int(rng.integers(1, 6))
        return responses
    return make
