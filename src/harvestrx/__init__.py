"""Harvest prescription parameter parsing for landscape harvest simulations."""

from harvestrx.core import HarvestInputError, InputFormatError, InputValueError
from harvestrx.parsing import InputParametersParser, ParseResult, load_parameters

__all__ = [
    "HarvestInputError",
    "InputFormatError",
    "InputValueError",
    "InputParametersParser",
    "ParseResult",
    "load_parameters",
]
