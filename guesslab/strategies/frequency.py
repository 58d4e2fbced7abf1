"""
Frequency-based guessing strategies.

Both strategies tally the winning numbers they have been shown and guess
from the tally: the hot number (most seen) or the cold number (least seen).
Ties are broken uniformly at random over the tied numbers in ascending
order, so a seeded generator always reproduces the same pick.
"""

from collections import Counter

from guesslab.rng import uniform_int
from guesslab.strategies.base import GuessStrategy


def _pick_tied(frequencies, target, rng):
    """
    Pick uniformly among the numbers whose count equals `target`.

    A single candidate is returned without drawing from `rng`.
    """
    tied = sorted(num for num, count in frequencies.items() if count == target)
    assert tied, "tie-break candidate set is empty"
    if len(tied) == 1:
        return tied[0]
    return tied[uniform_int(len(tied), rng) - 1]


class MostUsedNumberStrategy(GuessStrategy):
    """Guess the winning number seen most often so far."""

    name = "Most Used Number"

    def __init__(self, max_winning_number, rng=None):
        super().__init__(max_winning_number, rng)
        self.frequencies = Counter()

    def produce_guess(self, previous_outcome=None):
        # Falsy outcomes (None and 0) are not counted
        if not previous_outcome and not self.frequencies:
            return self._random_guess()
        if previous_outcome:
            self.frequencies[previous_outcome] += 1
        return _pick_tied(self.frequencies, max(self.frequencies.values()), self.rng)


class LeastUsedNumberStrategy(GuessStrategy):
    """Guess the number seen least often, starting from a zeroed table over 1..N."""

    name = "Least Used Number"

    def __init__(self, max_winning_number, rng=None):
        super().__init__(max_winning_number, rng)
        self.frequencies = Counter({n: 0 for n in range(1, self.max_winning_number + 1)})

    def produce_guess(self, previous_outcome=None):
        if previous_outcome:
            self.frequencies[previous_outcome] += 1
        return _pick_tied(self.frequencies, min(self.frequencies.values()), self.rng)
