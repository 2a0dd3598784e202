from __future__ import annotations

import pytest

from harvestrx.core import InputValueError
from harvestrx.model import RoundedInterval
from harvestrx.parsing.repeat import validate_repeat_interval


@pytest.mark.parametrize("interval,timestep", [(10, 10), (30, 10), (5, 1), (20, 5)])
def test_multiples_are_kept(interval, timestep):
    rounded: list[RoundedInterval] = []
    assert validate_repeat_interval(interval, 4, timestep, rounded) == interval
    assert rounded == []


@pytest.mark.parametrize(
    "interval,timestep,expected",
    [(7, 10, 10), (25, 10, 30), (1, 3, 3), (11, 5, 15)],
)
def test_non_multiples_round_up_and_are_recorded(interval, timestep, expected):
    rounded: list[RoundedInterval] = []
    result = validate_repeat_interval(interval, 9, timestep, rounded)
    assert result == expected
    assert result % timestep == 0
    assert result > interval
    assert rounded == [RoundedInterval(interval, expected, 9)]


@pytest.mark.parametrize("interval", [0, -5])
def test_interval_must_be_positive(interval):
    with pytest.raises(InputValueError) as excinfo:
        validate_repeat_interval(interval, 12, 10, [])
    assert excinfo.value.line_number == 12
    assert excinfo.value.message == "Interval for repeat harvest must be > 0"
