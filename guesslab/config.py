"""
Simulation defaults and configuration checks.

Frequently adjusted numbers live here so the engine, the comparison
script and the dashboard agree on them.
"""

import numbers

# Engine default batch size per strategy
DEFAULT_NUM_SIMULATIONS = 1000

# Example comparison run: winning numbers 1-10, 100k trials per strategy
DEFAULT_MAX_WINNING_NUMBER = 10
COMPARISON_SIMULATIONS = 100_000

# Below this many trials per strategy the comparison warns
MIN_RELIABLE_SIMULATIONS = 30


class InvalidConfigurationError(ValueError):
    """Raised when a simulation is configured with an empty guess space or batch."""


def require_positive_int(value, name):
    """
    Return `value` as an int if it is an integer >= 1.

    Raises
    ------
    InvalidConfigurationError
        If `value` is not an integer (bools included) or is below 1.
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidConfigurationError(
            f"{name} must be an integer, got {value!r}"
        )
    if value < 1:
        raise InvalidConfigurationError(f"{name} must be >= 1, got {value}")
    return int(value)


# Dashboard limits: a trial takes about N guesses and the frequency
# strategies scan N numbers per guess, so work grows with N * N per trial
DASHBOARD_MAX_WINNING_NUMBER = 100
DASHBOARD_WORK_BUDGET = 50_000_000


def capped_simulations(max_winning_number, num_simulations, budget=DASHBOARD_WORK_BUDGET):
    """
    Limit `num_simulations` so that N * N * trials stays within `budget`.

    Always allows at least one trial.
    """
    max_winning_number = require_positive_int(max_winning_number, "max_winning_number")
    num_simulations = require_positive_int(num_simulations, "num_simulations")
    per_trial = max_winning_number * max_winning_number
    return min(num_simulations, max(1, budget // per_trial))
