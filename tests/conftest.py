"""Shared fixtures: seeded generators and scripted [0, 1) sources."""

import itertools

import numpy as np
import pytest


class ScriptedRng:
    """Returns preset uniform floats in order, cycling when exhausted."""

    def __init__(self, values):
        self.values = list(values)
        self._it = itertools.cycle(self.values)
        self.calls = 0

    def random_sample(self):
        self.calls += 1
        return next(self._it)


@pytest.fixture
def rng():
    return np.random.RandomState(1234)


@pytest.fixture
def scripted_rng():
    return ScriptedRng
