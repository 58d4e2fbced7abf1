"""
Monte Carlo Simulation Engine

A trial hands one strategy a stream of rounds: the strategy guesses, a new
winning number is drawn uniformly from [1, N], and the trial ends when the
guess matches it. The engine repeats trials with a fresh strategy each time
and summarizes the resulting guess counts.

Because the winning number is redrawn after the guess, every round succeeds
with probability 1/N and a trial always terminates with probability 1, but
there is no hard cap on its length.
"""

import numpy as np

from guesslab.config import DEFAULT_NUM_SIMULATIONS, require_positive_int
from guesslab.rng import make_rng, resolve_rng, uniform_int
from guesslab.statistics import summarize_guess_counts

# Progress is printed every this many trials when verbose
PROGRESS_INTERVAL = 25_000


def run_trial(strategy, max_winning_number, rng=None):
    """
    Play rounds until the strategy's guess matches the freshly drawn number.

    Parameters
    ----------
    strategy : GuessStrategy
        Receives the previous round's winning number (None in round 1).
    max_winning_number : int
        Winning numbers are drawn from [1, max_winning_number].
    rng : object with ``random_sample()``, optional
        Source for the winning-number draws.

    Returns
    -------
    int >= 1, the number of guesses taken
    """
    rng = resolve_rng(rng)
    num_guesses = 0
    winning_number = None

    while True:
        current_guess = strategy.produce_guess(winning_number)
        num_guesses += 1
        winning_number = uniform_int(max_winning_number, rng)
        if current_guess == winning_number:
            return num_guesses


def collect_guess_counts(strategy_factory, max_winning_number,
                         num_simulations=DEFAULT_NUM_SIMULATIONS,
                         rng=None, verbose=False):
    """
    Run `num_simulations` independent trials and return their guess counts.

    Each trial builds its own strategy with
    ``strategy_factory(max_winning_number, rng=rng)`` so no state carries
    over between trials.

    Returns
    -------
    np.ndarray of int64, read-only, one guess count per trial in run order
    """
    max_winning_number = require_positive_int(max_winning_number, "max_winning_number")
    num_simulations = require_positive_int(num_simulations, "num_simulations")
    rng = resolve_rng(rng)

    guess_counts = np.empty(num_simulations, dtype=np.int64)
    for i in range(num_simulations):
        if verbose and i and i % PROGRESS_INTERVAL == 0:
            print(f"    [Simulation] progress: {i / num_simulations * 100:.0f}% "
                  f"({i:,}/{num_simulations:,})")
        strategy = strategy_factory(max_winning_number, rng=rng)
        guess_counts[i] = run_trial(strategy, max_winning_number, rng)

    if verbose:
        print(f"    [Simulation] progress: 100% ({num_simulations:,}/{num_simulations:,})")

    guess_counts.flags.writeable = False
    return guess_counts


def run_simulations(strategy_factory, max_winning_number,
                    num_simulations=DEFAULT_NUM_SIMULATIONS,
                    seed=None, rng=None, verbose=False):
    """
    Simulate a strategy many times and summarize how many guesses it needs.

    Parameters
    ----------
    strategy_factory : callable
        ``strategy_factory(max_winning_number, rng=rng)`` returns a new
        strategy. Strategy classes can be passed directly.
    max_winning_number : int
        Size of the guess space, >= 1.
    num_simulations : int
        Number of trials, >= 1.
    seed : int, optional
        Seeds a private ``RandomState``. Cannot be combined with `rng`.
    rng : object with ``random_sample()``, optional
        Shared source for strategies and winning-number draws.
    verbose : bool
        Print trial progress.

    Returns
    -------
    dict with 'average_guesses', 'min_guesses', 'max_guesses',
    'standard_deviation' and 'quartiles' ({'q1', 'q2', 'q3'})

    Raises
    ------
    InvalidConfigurationError
        Before any trial runs, if either size is not an integer >= 1.
    ValueError
        If both `seed` and `rng` are given.
    """
    max_winning_number = require_positive_int(max_winning_number, "max_winning_number")
    num_simulations = require_positive_int(num_simulations, "num_simulations")
    if seed is not None and rng is not None:
        raise ValueError("pass either seed or rng, not both")
    if rng is None:
        rng = make_rng(seed) if seed is not None else resolve_rng()

    guess_counts = collect_guess_counts(
        strategy_factory, max_winning_number, num_simulations,
        rng=rng, verbose=verbose,
    )
    return summarize_guess_counts(guess_counts)
