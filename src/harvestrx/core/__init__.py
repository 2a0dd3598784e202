"""Core utilities shared across harvestrx modules."""

from .errors import HarvestInputError, InputFormatError, InputValueError
from .ages import AgeRange, parse_age, parse_age_or_range

__all__ = [
    "AgeRange",
    "parse_age",
    "parse_age_or_range",
    "HarvestInputError",
    "InputFormatError",
    "InputValueError",
]
