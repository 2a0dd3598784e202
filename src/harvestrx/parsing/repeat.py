"""Repeat-harvest interval validation."""

from __future__ import annotations

from harvestrx.core.errors import InputValueError
from harvestrx.model.prescriptions import RoundedInterval


def validate_repeat_interval(
    interval: int,
    line_number: int,
    harvest_timestep: int,
    rounded_intervals: list[RoundedInterval],
) -> int:
    """Return ``interval`` as a multiple of ``harvest_timestep``.

    Intervals that are not a multiple are rounded up to the next one and a
    :class:`RoundedInterval` audit record is appended to ``rounded_intervals``.
    """
    if interval <= 0:
        raise InputValueError(
            "Interval for repeat harvest must be > 0",
            line_number=line_number,
            value=str(interval),
        )
    if harvest_timestep <= 0:
        raise ValueError("harvest_timestep must be > 0")
    if interval % harvest_timestep == 0:
        return interval
    rounded = ((interval // harvest_timestep) + 1) * harvest_timestep
    rounded_intervals.append(RoundedInterval(interval, rounded, line_number))
    return rounded


__all__ = ["validate_repeat_interval"]
