"""
Random number helpers.

All randomness comes from a uniform [0, 1) source with a numpy
``RandomState`` interface. The ``numpy.random`` module itself exposes the
same ``random_sample`` function and serves as the default, global source.
"""

import numpy as np


def make_rng(seed=None):
    """Return a ``RandomState`` seeded with `seed` (OS entropy when None)."""
    return np.random.RandomState(seed)


def resolve_rng(rng=None):
    """Fall back to the global numpy generator when no source is given."""
    return np.random if rng is None else rng


def uniform_int(n, rng=None):
    """
    Draw an integer uniformly from [1, n].

    Parameters
    ----------
    n : int
        Upper bound (inclusive). Must be >= 1.
    rng : object with ``random_sample()``, optional
        Source of uniform floats in [0, 1). Defaults to ``numpy.random``.

    Returns
    -------
    int in [1, n]
    """
    rng = resolve_rng(rng)
    return int(rng.random_sample() * n) + 1
