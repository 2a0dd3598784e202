"""Typed scalar conversions for words read from harvest input lines."""

from __future__ import annotations

import math
import re

from harvestrx.core.errors import InputFormatError

USHORT_MAX = 65_535
BYTE_MAX = 255

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_NUMBER_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def parse_word(word: str) -> str:
    return word


def parse_int(word: str) -> int:
    """Parse a signed decimal integer."""
    if not _INTEGER_RE.fullmatch(word):
        raise InputFormatError(f"{word} is not a valid integer", value=word)
    return int(word)


def _parse_bounded(word: str, upper: int) -> int:
    value = parse_int(word)
    if value < 0 or value > upper:
        raise InputFormatError(f"{word} is outside the range 0 to {upper:,}", value=word)
    return value


def parse_ushort(word: str) -> int:
    """Parse an unsigned 16-bit integer (0..65,535)."""
    return _parse_bounded(word, USHORT_MAX)


def parse_byte(word: str) -> int:
    """Parse an unsigned 8-bit integer (0..255)."""
    return _parse_bounded(word, BYTE_MAX)


def parse_float(word: str) -> float:
    """Parse a finite decimal number."""
    if not _NUMBER_RE.fullmatch(word):
        raise InputFormatError(f"{word} is not a valid number", value=word)
    value = float(word)
    if not math.isfinite(value):
        raise InputFormatError(f"{word} is not a valid number", value=word)
    return value


def parse_percentage(word: str) -> float:
    """Parse ``N%`` and return it as a fraction (``50%`` -> ``0.5``)."""
    if not word.endswith("%"):
        raise InputFormatError(f"{word} is not a percentage; missing \"%\" at the end", value=word)
    number = word[:-1]
    if not _NUMBER_RE.fullmatch(number):
        raise InputFormatError(f"{word} is not a valid percentage", value=word)
    value = float(number)
    if not math.isfinite(value):
        raise InputFormatError(f"{word} is not a valid percentage", value=word)
    return value / 100.0


__all__ = [
    "USHORT_MAX",
    "BYTE_MAX",
    "parse_word",
    "parse_int",
    "parse_ushort",
    "parse_byte",
    "parse_float",
    "parse_percentage",
]
