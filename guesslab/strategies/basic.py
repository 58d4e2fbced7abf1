"""
Stateless and single-value guessing strategies.

- RandomStrategy: fresh uniform guess every round
- PreviousNumberStrategy: repeats the last winning number
- StaticNumberStrategy: sticks with one number picked at construction
- IncrementDecrementStrategy: walks 1..N and wraps around
"""

from guesslab.strategies.base import GuessStrategy


class RandomStrategy(GuessStrategy):
    """Uniform random guess each round, ignoring history."""

    name = "Random"

    def produce_guess(self, previous_outcome=None):
        return self._random_guess()


class PreviousNumberStrategy(GuessStrategy):
    """Guess whatever won the previous round."""

    name = "Previous Number"

    def produce_guess(self, previous_outcome=None):
        # 0 counts as "no previous outcome", kept for output compatibility
        if not previous_outcome:
            return self._random_guess()
        return previous_outcome


class StaticNumberStrategy(GuessStrategy):
    """Always guess the same number, drawn once at construction."""

    name = "Static Number"

    def __init__(self, max_winning_number, rng=None):
        super().__init__(max_winning_number, rng)
        self.static_number = self._random_guess()

    def produce_guess(self, previous_outcome=None):
        return self.static_number


class IncrementDecrementStrategy(GuessStrategy):
    """
    Step through 1..N one number per round, wrapping from N back to 1.

    The starting point is random; the first guess is the number after it.
    """

    name = "Increment/Decrement"

    def __init__(self, max_winning_number, rng=None):
        super().__init__(max_winning_number, rng)
        self.current_guess = self._random_guess()

    def produce_guess(self, previous_outcome=None):
        self.current_guess = (self.current_guess % self.max_winning_number) + 1
        return self.current_guess
