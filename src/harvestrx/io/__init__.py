"""Input reading: line reader and typed value conversions."""

from .reader import COMMENT_MARKER, InputLine, LineCursor, LineReader
from .values import (
    parse_byte,
    parse_float,
    parse_int,
    parse_percentage,
    parse_ushort,
    parse_word,
)

__all__ = [
    "COMMENT_MARKER",
    "InputLine",
    "LineCursor",
    "LineReader",
    "parse_byte",
    "parse_float",
    "parse_int",
    "parse_percentage",
    "parse_ushort",
    "parse_word",
]
