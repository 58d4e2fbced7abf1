"""
Strategy Comparison

Runs the simulation engine once per strategy, ranks strategies by average
guesses and reports the winner. Each strategy's result is a record
``{"name": str, "stats": dict}`` where ``stats`` is the engine's summary.

Since the winning number is redrawn after every guess, no strategy can see
the number it is trying to hit: each round succeeds with probability 1/N and
the expected guess count is N for all of them. The report shows how far each
strategy lands from that, and a Welch t-test against the random baseline
tells whether the gap is more than noise.
"""

import math
import warnings

import numpy as np
import pandas as pd
from scipy import stats

from guesslab.config import (
    COMPARISON_SIMULATIONS,
    InvalidConfigurationError,
    DEFAULT_MAX_WINNING_NUMBER,
    MIN_RELIABLE_SIMULATIONS,
    require_positive_int,
)
from guesslab.rng import make_rng
from guesslab.simulation import collect_guess_counts
from guesslab.statistics import summarize_guess_counts
from guesslab.strategies import STRATEGIES

BASELINE_STRATEGY = "Random"


def expected_guesses(max_winning_number):
    """Expected guesses to win when each round matches with probability 1/N."""
    return float(require_positive_int(max_winning_number, "max_winning_number"))


def _duplicate_names(names):
    seen = set()
    duplicates = []
    for name in names:
        if name in seen and name not in duplicates:
            duplicates.append(name)
        seen.add(name)
    return duplicates


def compare_strategies(strategies=None,
                       max_winning_number=DEFAULT_MAX_WINNING_NUMBER,
                       num_simulations=COMPARISON_SIMULATIONS,
                       seed=None, verbose=True, return_samples=False):
    """
    Simulate every strategy and collect one record per strategy.

    Parameters
    ----------
    strategies : list of (name, factory), optional
        Defaults to all registered strategies. Names must be unique.
    max_winning_number : int
        Size of the guess space.
    num_simulations : int
        Trials per strategy.
    seed : int, optional
        Seeds one generator shared by the whole comparison.
    verbose : bool
        Print progress.
    return_samples : bool
        Also return the guess-count sample behind each record.

    Returns
    -------
    list of {'name': str, 'stats': dict} in input order, or
    (records, {name: np.ndarray}) when `return_samples` is set

    Raises
    ------
    InvalidConfigurationError
        On an invalid size or a strategy name listed twice.
    """
    strategies = STRATEGIES if strategies is None else strategies
    max_winning_number = require_positive_int(max_winning_number, "max_winning_number")
    num_simulations = require_positive_int(num_simulations, "num_simulations")
    duplicates = _duplicate_names(name for name, _ in strategies)
    if duplicates:
        raise InvalidConfigurationError(
            f"strategy names must be unique, repeated: {', '.join(duplicates)}"
        )

    if num_simulations < MIN_RELIABLE_SIMULATIONS:
        warnings.warn(
            f"Only {num_simulations} simulations per strategy. Results may be unreliable."
        )

    rng = make_rng(seed)

    if verbose:
        print(f"\n{'='*60}")
        print("STRATEGY COMPARISON")
        print(f"{'='*60}")
        print(f"  Winning numbers: 1-{max_winning_number}")
        print(f"  Simulations per strategy: {num_simulations:,}")
        print(f"  Strategies: {len(strategies)}")
        if seed is not None:
            print(f"  Seed: {seed}")

    records = []
    samples = {}
    for name, factory in strategies:
        if verbose:
            print(f"  [Compare] Simulating {name}...")
        guess_counts = collect_guess_counts(
            factory, max_winning_number, num_simulations,
            rng=rng, verbose=verbose,
        )
        samples[name] = guess_counts
        records.append({"name": name, "stats": summarize_guess_counts(guess_counts)})

    if return_samples:
        return records, samples
    return records


def select_winner(records):
    """Return the record with the lowest average guesses (earliest wins ties)."""
    if not records:
        raise ValueError("no strategy results to choose from")
    winner = None
    for record in records:
        if winner is None or record["stats"]["average_guesses"] < winner["stats"]["average_guesses"]:
            winner = record
    return winner


def _sample_std(population_std, n):
    """Convert a population standard deviation to the n-1 estimate."""
    if n < 2:
        return 0.0
    return population_std * math.sqrt(n / (n - 1))


def compare_to_baseline(records, num_simulations, baseline=BASELINE_STRATEGY):
    """
    Welch t-test of every strategy's mean guesses against the baseline.

    Works from the recorded means and standard deviations, so the raw
    samples are not needed.

    Returns
    -------
    dict of {name: {'mean_diff', 't_statistic', 'p_value', 'significant_at_005'}}
    for every strategy except the baseline

    Raises
    ------
    KeyError
        If no record carries the baseline name.
    ValueError
        If two records carry the same name.
    """
    num_simulations = require_positive_int(num_simulations, "num_simulations")
    duplicates = _duplicate_names(r["name"] for r in records)
    if duplicates:
        raise ValueError(f"records share strategy names: {', '.join(duplicates)}")
    by_name = {r["name"]: r["stats"] for r in records}
    if baseline not in by_name:
        raise KeyError(f"baseline strategy {baseline!r} not among results")
    base = by_name[baseline]
    base_std = _sample_std(base["standard_deviation"], num_simulations)

    results = {}
    for name, s in by_name.items():
        if name == baseline:
            continue
        mean_diff = s["average_guesses"] - base["average_guesses"]
        std = _sample_std(s["standard_deviation"], num_simulations)
        if num_simulations < 2 or (std == 0 and base_std == 0):
            # No spread to test against
            t_stat = 0.0 if mean_diff == 0 else math.copysign(math.inf, mean_diff)
            p_value = 1.0 if mean_diff == 0 else 0.0
        else:
            t_stat, p_value = stats.ttest_ind_from_stats(
                s["average_guesses"], std, num_simulations,
                base["average_guesses"], base_std, num_simulations,
                equal_var=False,
            )
        results[name] = {
            "mean_diff": round(float(mean_diff), 4),
            "t_statistic": round(float(t_stat), 4),
            "p_value": round(float(p_value), 6),
            "significant_at_005": bool(p_value < 0.05),
        }
    return results


def summary_frame(records, max_winning_number=None):
    """
    Tabulate comparison records, best strategy first.

    If `max_winning_number` is given, a column with the percentage deviation
    from the expected guess count is added.
    """
    rows = []
    for record in records:
        s = record["stats"]
        rows.append({
            "strategy": record["name"],
            "average_guesses": s["average_guesses"],
            "min_guesses": s["min_guesses"],
            "max_guesses": s["max_guesses"],
            "standard_deviation": s["standard_deviation"],
            "q1": s["quartiles"]["q1"],
            "q2": s["quartiles"]["q2"],
            "q3": s["quartiles"]["q3"],
        })
    frame = pd.DataFrame(rows, columns=[
        "strategy", "average_guesses", "min_guesses", "max_guesses",
        "standard_deviation", "q1", "q2", "q3",
    ])
    if max_winning_number is not None:
        expected = expected_guesses(max_winning_number)
        frame["vs_expected_pct"] = (frame["average_guesses"] - expected) / expected * 100
    frame = frame.sort_values("average_guesses", kind="stable").reset_index(drop=True)
    frame.insert(0, "rank", np.arange(1, len(frame) + 1))
    return frame


def print_report(records, max_winning_number=None, significance=None):
    """Print per-strategy statistics followed by the winning strategy."""
    for record in records:
        s = record["stats"]
        q = s["quartiles"]
        print(f"--- {record['name']} Strategy ---")
        print(f"Average Guesses: {s['average_guesses']:.2f}")
        print(f"Min Guesses: {s['min_guesses']}")
        print(f"Max Guesses: {s['max_guesses']}")
        print(f"Standard Deviation: {s['standard_deviation']:.2f}")
        print(f"Quartiles: Q1={q['q1']:g}, Q2={q['q2']:g}, Q3={q['q3']:g}")
        if max_winning_number is not None:
            expected = expected_guesses(max_winning_number)
            deviation = (s["average_guesses"] - expected) / expected * 100
            print(f"Expected Guesses: {expected:g} ({deviation:+.1f}% vs expected)")
        print("\n")

    winner = select_winner(records)
    print("--- Winning Strategy ---")
    print(f"Strategy: {winner['name']}")

    if significance:
        print(f"\nSIGNIFICANCE vs {BASELINE_STRATEGY.upper()} BASELINE:")
        for name, sig in significance.items():
            mark = "✓" if sig["significant_at_005"] else "✗"
            print(f"  {mark} {name}: diff {sig['mean_diff']:+.4f}, "
                  f"t={sig['t_statistic']}, p={sig['p_value']}")
