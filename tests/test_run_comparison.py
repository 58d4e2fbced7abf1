"""Command-line entry point."""

import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "scripts"))

from run_comparison import main


def test_runs_selected_strategies(capsys):
    records = main(["--max-number", "3", "--simulations", "100", "--seed", "4",
                    "--strategies", "random", "static number", "--quiet"])
    assert [r["name"] for r in records] == ["Random", "Static Number"]
    out = capsys.readouterr().out
    assert "--- Winning Strategy ---" in out
    assert "SIGNIFICANCE vs RANDOM BASELINE:" in out
    assert "RANKING" in out


def test_unknown_strategy_is_usage_error(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--strategies", "Martingale"])
    assert exc.value.code == 2
    assert "Unknown strategy" in capsys.readouterr().err


def test_invalid_max_number_is_usage_error(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--max-number", "0", "--simulations", "100", "--quiet"])
    assert exc.value.code == 2
    assert "max_winning_number must be >= 1" in capsys.readouterr().err


def test_repeated_strategy_is_usage_error(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--strategies", "random", "Random", "--simulations", "100", "--quiet"])
    assert exc.value.code == 2
    assert "strategy names must be unique" in capsys.readouterr().err
