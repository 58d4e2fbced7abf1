"""Descriptive statistics and median-of-halves quartiles."""

import math

import numpy as np
import pytest

from guesslab.statistics import calculate_quartiles, summarize_guess_counts


def test_quartiles_even_sample():
    assert calculate_quartiles(list(range(1, 11))) == {"q1": 3.0, "q2": 5.5, "q3": 8.0}


def test_quartiles_odd_sample():
    # lower half [0, 4] keeps the median, upper half [5, 8] does not
    assert calculate_quartiles(list(range(1, 10))) == {"q1": 3.0, "q2": 5.0, "q3": 7.5}


def test_quartiles_small_samples():
    assert calculate_quartiles([4]) == {"q1": 4.0, "q2": 4.0, "q3": 4.0}
    assert calculate_quartiles([1, 5]) == {"q1": 1.0, "q2": 3.0, "q3": 5.0}
    assert calculate_quartiles([2, 4, 9]) == {"q1": 3.0, "q2": 4.0, "q3": 9.0}


def test_quartiles_sort_a_copy():
    data = [10, 1, 9, 2, 8, 3, 7, 4, 6, 5]
    assert calculate_quartiles(data) == {"q1": 3.0, "q2": 5.5, "q3": 8.0}
    assert data[0] == 10


def test_quartiles_empty_sample():
    with pytest.raises(ValueError):
        calculate_quartiles([])


def test_summary_of_fixed_sample():
    stats = summarize_guess_counts(range(1, 11))
    assert stats["average_guesses"] == 5.5
    assert stats["min_guesses"] == 1
    assert stats["max_guesses"] == 10
    # population std: sqrt(82.5 / 10)
    assert stats["standard_deviation"] == pytest.approx(math.sqrt(8.25))
    assert stats["quartiles"] == {"q1": 3.0, "q2": 5.5, "q3": 8.0}


def test_summary_of_constant_sample():
    stats = summarize_guess_counts([1] * 25)
    assert stats == {
        "average_guesses": 1.0,
        "min_guesses": 1,
        "max_guesses": 1,
        "standard_deviation": 0.0,
        "quartiles": {"q1": 1.0, "q2": 1.0, "q3": 1.0},
    }


def test_summary_returns_plain_python_types():
    stats = summarize_guess_counts(np.array([3, 1, 2], dtype=np.int64))
    assert type(stats["min_guesses"]) is int
    assert type(stats["max_guesses"]) is int
    assert type(stats["average_guesses"]) is float
    assert all(type(v) is float for v in stats["quartiles"].values())


@pytest.mark.parametrize("seed", range(20))
def test_summary_ordering_invariants(seed):
    rng = np.random.RandomState(seed)
    sample = rng.geometric(0.1, size=rng.randint(1, 60))
    stats = summarize_guess_counts(sample)
    q = stats["quartiles"]
    assert stats["min_guesses"] <= q["q1"] <= q["q2"] <= q["q3"] <= stats["max_guesses"]
    assert stats["min_guesses"] <= stats["average_guesses"] <= stats["max_guesses"]


def test_summary_empty_sample():
    with pytest.raises(ValueError):
        summarize_guess_counts([])


def test_two_element_ranges_average_their_own_pair():
    # [0, 3] holds four elements: average indices 1 and 2, not 0 and 1
    assert calculate_quartiles([1, 2, 10, 20])["q2"] == 6.0
    # n=2: quartiles stay ordered
    q = calculate_quartiles([1, 5])
    assert q["q1"] <= q["q2"] <= q["q3"]
