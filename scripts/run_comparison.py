#!/usr/bin/env python3
"""
Standalone strategy comparison script.

Simulates every guessing strategy against a winning number that is redrawn
after each guess, prints the per-strategy statistics and names the strategy
that needed the fewest guesses on average.

Usage:
    python scripts/run_comparison.py
    python scripts/run_comparison.py --max-number 20 --simulations 5000 --seed 7
    python scripts/run_comparison.py --strategies "Random" "Least Used Number"
"""
import argparse
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from guesslab.comparator import (
    compare_strategies,
    compare_to_baseline,
    print_report,
    summary_frame,
    BASELINE_STRATEGY,
)
from guesslab.config import (
    COMPARISON_SIMULATIONS,
    DEFAULT_MAX_WINNING_NUMBER,
    InvalidConfigurationError,
)
from guesslab.strategies import STRATEGIES, get_strategy


def build_parser():
    parser = argparse.ArgumentParser(
        description="Compare number guessing strategies by Monte Carlo simulation."
    )
    parser.add_argument("--max-number", type=int, default=DEFAULT_MAX_WINNING_NUMBER,
                        help="winning numbers are drawn from 1..N (default: %(default)s)")
    parser.add_argument("--simulations", type=int, default=COMPARISON_SIMULATIONS,
                        help="trials per strategy (default: %(default)s)")
    parser.add_argument("--seed", type=int, default=None,
                        help="seed for a reproducible comparison")
    parser.add_argument("--strategies", nargs="+", metavar="NAME",
                        help="strategy names to run (default: all)")
    parser.add_argument("--quiet", action="store_true",
                        help="suppress progress output")
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.strategies:
        try:
            strategies = [(get_strategy(n).name, get_strategy(n)) for n in args.strategies]
        except KeyError as e:
            parser.error(str(e.args[0]))
    else:
        strategies = STRATEGIES

    try:
        records = compare_strategies(
            strategies,
            max_winning_number=args.max_number,
            num_simulations=args.simulations,
            seed=args.seed,
            verbose=not args.quiet,
        )
    except InvalidConfigurationError as e:
        parser.error(str(e))

    significance = None
    if any(r["name"] == BASELINE_STRATEGY for r in records):
        significance = compare_to_baseline(records, args.simulations)

    print(f"\n{'='*60}")
    print_report(records, max_winning_number=args.max_number, significance=significance)

    print(f"\n{'='*60}")
    print("RANKING")
    print(f"{'='*60}")
    print(summary_frame(records, args.max_number).to_string(index=False, float_format="%.3f"))
    print(f"{'='*60}")
    return records


if __name__ == "__main__":
    main()
