"""Single-pass parsing and validation of harvest parameter files."""

from .parser import InputParametersParser, ParseResult, load_parameters
from .session import ParseSession

__all__ = ["InputParametersParser", "ParseResult", "ParseSession", "load_parameters"]
