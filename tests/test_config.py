"""Configuration checks and dashboard limits."""

import pytest

from guesslab.config import (
    DASHBOARD_MAX_WINNING_NUMBER,
    DASHBOARD_WORK_BUDGET,
    InvalidConfigurationError,
    capped_simulations,
    require_positive_int,
)


def test_small_guess_space_is_not_capped():
    assert capped_simulations(10, 100_000) == 100_000


def test_large_guess_space_is_capped():
    n = DASHBOARD_MAX_WINNING_NUMBER
    capped = capped_simulations(n, 100_000)
    assert capped < 100_000
    assert capped * n * n <= DASHBOARD_WORK_BUDGET


def test_cap_allows_at_least_one_trial():
    assert capped_simulations(1000, 100, budget=10) == 1


def test_cap_validates_inputs():
    with pytest.raises(InvalidConfigurationError):
        capped_simulations(0, 100)


@pytest.mark.parametrize("value", [1, 7, 10**6])
def test_require_positive_int_accepts(value):
    assert require_positive_int(value, "n") == value
