"""
Common interface for guessing strategies.

A strategy produces the next guess given the winning number of the previous
round. The base class only keeps read-only configuration; each variant owns
whatever state its update rule needs.
"""

from guesslab.config import require_positive_int
from guesslab.rng import resolve_rng, uniform_int


class GuessStrategy:
    """
    Base class for guessing strategies.

    Parameters
    ----------
    max_winning_number : int
        Guesses and winning numbers are drawn from [1, max_winning_number].
    rng : object with ``random_sample()``, optional
        Uniform [0, 1) source. Defaults to ``numpy.random``.
    """

    name = "Strategy"

    def __init__(self, max_winning_number, rng=None):
        self.max_winning_number = require_positive_int(
            max_winning_number, "max_winning_number"
        )
        self.rng = resolve_rng(rng)

    def produce_guess(self, previous_outcome=None):
        """Return the next guess in [1, max_winning_number]."""
        raise NotImplementedError

    def _random_guess(self):
        return uniform_int(self.max_winning_number, self.rng)

    def __repr__(self):
        return f"{type(self).__name__}(max_winning_number={self.max_winning_number})"
