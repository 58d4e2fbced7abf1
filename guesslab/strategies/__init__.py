"""
Guessing Strategies

Available strategies:
- Random: uniform random guess every round
- Previous Number: repeat the previous winning number
- Static Number: one fixed number for the whole trial
- Increment/Decrement: cycle through 1..N
- Most Used Number: the hot number among past winners
- Least Used Number: the cold number among past winners

Every strategy class is also a factory: calling it with
``(max_winning_number, rng=...)`` yields a fresh instance.
"""

from guesslab.strategies.base import GuessStrategy
from guesslab.strategies.basic import (
    RandomStrategy,
    PreviousNumberStrategy,
    StaticNumberStrategy,
    IncrementDecrementStrategy,
)
from guesslab.strategies.frequency import (
    MostUsedNumberStrategy,
    LeastUsedNumberStrategy,
)

STRATEGIES = [
    (cls.name, cls)
    for cls in (
        RandomStrategy,
        PreviousNumberStrategy,
        StaticNumberStrategy,
        IncrementDecrementStrategy,
        MostUsedNumberStrategy,
        LeastUsedNumberStrategy,
    )
]


def get_strategy(name):
    """Look up a strategy class by display name (case-insensitive)."""
    for strategy_name, cls in STRATEGIES:
        if strategy_name.lower() == name.strip().lower():
            return cls
    valid = ", ".join(n for n, _ in STRATEGIES)
    raise KeyError(f"Unknown strategy {name!r}. Valid names: {valid}")


__all__ = [
    "GuessStrategy",
    "RandomStrategy",
    "PreviousNumberStrategy",
    "StaticNumberStrategy",
    "IncrementDecrementStrategy",
    "MostUsedNumberStrategy",
    "LeastUsedNumberStrategy",
    "STRATEGIES",
    "get_strategy",
]
