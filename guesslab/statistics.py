"""
Descriptive statistics over guess-count samples.

Quartiles use the median-of-halves method: Q2 is the median of the whole
sorted sample, Q1 the median of the lower half (which includes the middle
element when n is odd) and Q3 the median of the upper half (which does not).
"""

import math

import numpy as np


def _median_of_range(sorted_data, start, end):
    """Median of ``sorted_data[start:end + 1]``."""
    # Median over the inclusive range. Averaging sorted[mid - 1] and sorted[mid]
    # whenever start + end is even would break q1 <= q2, so parity follows the
    # element count instead.
    middle = (start + end) // 2
    if (start + end) % 2 == 1:
        # even number of elements
        return (sorted_data[middle] + sorted_data[middle + 1]) / 2
    return float(sorted_data[middle])


def calculate_quartiles(data):
    """
    Compute Q1, Q2 and Q3 of `data`.

    Parameters
    ----------
    data : sequence of numbers
        Need not be sorted; a sorted copy is used.

    Returns
    -------
    dict with keys 'q1', 'q2', 'q3' (floats)
    """
    sorted_data = np.sort(np.asarray(data))
    n = len(sorted_data)
    if n == 0:
        raise ValueError("cannot compute quartiles of an empty sample")

    q2 = _median_of_range(sorted_data, 0, n - 1)
    q1 = _median_of_range(sorted_data, 0, (n - 1) // 2)
    # with a single element the upper half collapses onto it
    q3 = _median_of_range(sorted_data, min(math.ceil(n / 2), n - 1), n - 1)

    return {"q1": float(q1), "q2": float(q2), "q3": float(q3)}


def summarize_guess_counts(sample):
    """
    Build the statistics summary of a guess-count sample.

    Parameters
    ----------
    sample : sequence of positive ints
        One guess count per trial.

    Returns
    -------
    dict with:
        'average_guesses': arithmetic mean
        'min_guesses', 'max_guesses': sample extremes
        'standard_deviation': population standard deviation (divides by n)
        'quartiles': dict with 'q1', 'q2', 'q3'
    """
    values = np.sort(np.asarray(sample, dtype=np.int64))
    if values.size == 0:
        raise ValueError("cannot summarize an empty guess-count sample")

    return {
        "average_guesses": float(np.mean(values)),
        "min_guesses": int(values[0]),
        "max_guesses": int(values[-1]),
        "standard_deviation": float(np.std(values)),
        "quartiles": calculate_quartiles(values),
    }
