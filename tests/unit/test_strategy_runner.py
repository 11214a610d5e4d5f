"""Tests for the strategy console runner"""

import pytest

from patternkit.application.services import StrategyRunner
from patternkit.application.services.strategy_runner import read_numbers
from patternkit.shared.exceptions import CommandError


def test_read_numbers_across_lines():
    assert read_numbers(["3 1", "4", "1 5"], 5) == [3, 1, 4, 1, 5]


def test_read_numbers_leaves_later_lines_unread():
    assert read_numbers(["3 1 4 1 5", "not read"], 5) == [3, 1, 4, 1, 5]


@pytest.mark.parametrize("line", ["3 1 4 1 5 9", "3 1 4 1 5 junk"])
def test_read_numbers_rejects_extra_tokens(line):
    with pytest.raises(CommandError, match="got extra input"):
        read_numbers([line], 5)


def test_read_numbers_rejects_non_integer():
    with pytest.raises(CommandError, match="Expected an integer, got 'x'"):
        read_numbers(["1 x"], 5)


def test_read_numbers_rejects_short_input():
    with pytest.raises(CommandError, match="Expected 5 integers, got 2"):
        read_numbers(["1 2"], 5)


def test_run_prints_result_per_default_key(router, console):
    runner = StrategyRunner(router, console=console)

    exit_code = runner.run(["3 1 4 1 5"])

    assert exit_code == 0
    assert console.file.getvalue().split() == ["5", "5"]


def test_run_with_custom_keys(router, console):
    runner = StrategyRunner(router, console=console)

    exit_code = runner.run(["2 8 6"], count=3, keys=["LINEAR"])

    assert exit_code == 0
    assert console.file.getvalue().split() == ["8"]


def test_run_reports_unknown_key_and_continues(router, console):
    runner = StrategyRunner(router, console=console)

    exit_code = runner.run(["1 2 3 4 5"], keys=["bogus", "heapify"])

    output = console.file.getvalue()
    assert exit_code == 1
    assert "Unrecognized routing key: 'bogus'" in output
    assert output.strip().endswith("5")


def test_run_reports_bad_input(router, console):
    runner = StrategyRunner(router, console=console)

    assert runner.run(["1 2"]) == 1
    assert "Expected 5 integers, got 2" in console.file.getvalue()
