"""
GuessLab - Winning Number Strategy Simulator

Pits guessing strategies against a winning number that is redrawn after
every guess and measures how many guesses each strategy needs to hit it.

Modules:
- rng: uniform integer helper on top of numpy's [0, 1) generator
- strategies: the six guessing policies and their registry
- simulation: trial loop and Monte Carlo simulation engine
- statistics: descriptive statistics over guess-count samples
- comparator: runs every strategy and ranks them by average guesses
"""

__version__ = "1.0.0"
