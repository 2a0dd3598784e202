"""Cohort ages and age ranges (``N`` or ``A-B``)."""

from __future__ import annotations

from dataclasses import dataclass

from harvestrx.core.errors import InputFormatError
from harvestrx.io.values import USHORT_MAX, parse_int


@dataclass(frozen=True, slots=True)
class AgeRange:
    """Closed interval of cohort ages; ``start == end`` denotes a single age."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 1:
            raise ValueError("AgeRange.start must be >= 1")
        if self.end < self.start:
            raise ValueError("AgeRange.end must be >= start")
        if self.end > USHORT_MAX:
            raise ValueError(f"AgeRange.end must be <= {USHORT_MAX}")

    @property
    def is_single_age(self) -> bool:
        return self.start == self.end

    def contains(self, age: int) -> bool:
        return self.start <= age <= self.end

    def overlaps(self, other: AgeRange) -> bool:
        return self.start <= other.end and other.start <= self.end

    def __str__(self) -> str:
        if self.is_single_age:
            return str(self.start)
        return f"{self.start}-{self.end}"


def parse_age(text: str) -> int:
    """Parse an unsigned 16-bit cohort age (zero is allowed here)."""
    try:
        age = parse_int(text)
    except InputFormatError:
        raise InputFormatError(f"{text} is not a valid integer", value=text) from None
    if age > USHORT_MAX:
        raise InputFormatError(f"{text} is too large for an age; max = 65,535", value=text)
    if age < 0:
        raise InputFormatError(f"{text} is not a valid age; ages must be >= 0", value=text)
    return age


def parse_age_or_range(word: str) -> AgeRange:
    """Parse a cohort age (``N``) or an age range (``A-B``)."""
    start_text, delimiter, end_text = word.partition("-")
    if not delimiter:
        age = parse_age(word)
        if age == 0:
            raise InputFormatError("Cohort age must be > 0", value=word)
        return AgeRange(age, age)

    if "-" in end_text:
        raise InputFormatError("Valid format for age range: #-#", value=word)
    if not start_text:
        if not end_text:
            raise InputFormatError("The range has no start and end ages", value=word)
        raise InputFormatError("The range has no start age", value=word)
    start = parse_age(start_text)
    if start == 0:
        raise InputFormatError("The start age in the range must be > 0", value=word)
    if not end_text:
        raise InputFormatError("The range has no end age", value=word)
    end = parse_age(end_text)
    if start > end:
        raise InputFormatError("The start age in the range must be <= the end age", value=word)
    return AgeRange(start, end)


__all__ = ["AgeRange", "parse_age", "parse_age_or_range"]
