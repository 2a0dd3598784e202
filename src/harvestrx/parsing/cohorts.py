"""Cohort selector parser (``CohortsRemoved`` and the species table)."""

from __future__ import annotations

from collections.abc import Collection

from harvestrx.core.ages import AgeRange, parse_age_or_range
from harvestrx.core.errors import HarvestInputError, InputFormatError, InputValueError
from harvestrx.io.reader import LineCursor
from harvestrx.io.values import parse_ushort, parse_word
from harvestrx.model.cohorts import (
    ClearCut,
    CohortKeyword,
    CohortRule,
    CohortSelector,
    EveryNthCohort,
    KeywordCohorts,
    PlantOnly,
    SpeciesCohortSelector,
    SpecificAges,
)
from harvestrx.parsing import names
from harvestrx.parsing.session import ParseSession

COHORT_SELECTIONS = ("ClearCut", "PlantOnly", "SpeciesList")
EVERY_NTH_PREFIX = "1/"


def validate_age_or_range(
    entry: AgeRange, word: str, ages: list[int], ranges: list[AgeRange], line_number: int
) -> None:
    """Check ``entry`` against the ages and ranges already read for one species.

    On success the entry is appended to ``ages`` (single age written without a
    ``-``) or ``ranges``.
    """

    def fail(message: str) -> InputValueError:
        return InputValueError(message, line_number=line_number, value=word)

    if "-" in word:
        for age in ages:
            if entry.contains(age):
                raise fail(f"The range {word} contains the age {age}")
        for previous in ranges:
            if entry.overlaps(previous):
                raise fail(f"The range {word} overlaps the range {previous.start}-{previous.end}")
        ranges.append(entry)
        return

    age = entry.start
    if age in ages:
        raise fail(f"The age {word} appears more than once")
    for previous in ranges:
        if previous.contains(age):
            raise fail(f"The age {word} lies within the range {previous.start}-{previous.end}")
    ages.append(age)


def _parse_every_nth(word: str) -> EveryNthCohort:
    n = parse_ushort(word[len(EVERY_NTH_PREFIX) :])
    if n == 0:
        raise InputFormatError('For "1/N", N must be > 0', value=word)
    return EveryNthCohort(n)


def _read_keyword(word: str) -> CohortRule | None:
    if word.startswith(EVERY_NTH_PREFIX):
        return _parse_every_nth(word)
    try:
        return KeywordCohorts(CohortKeyword(word))
    except ValueError:
        return None


def _read_cohort_rule(cursor: LineCursor) -> CohortRule:
    start = cursor.index
    word = cursor.read_word()
    if word == "":
        raise InputFormatError(
            "No cohort keyword, age or age range after the species name",
            line_number=cursor.line_number,
        )
    try:
        keyword = _read_keyword(word)
    except InputFormatError as exc:
        raise exc.at_line(cursor.line_number)
    if keyword is not None:
        cursor.expect_end(f'the keyword "{word}"')
        return keyword

    cursor.index = start
    ages: list[int] = []
    ranges: list[AgeRange] = []
    while (word := cursor.read_word()) != "":
        try:
            entry = parse_age_or_range(word)
        except HarvestInputError as exc:
            raise exc.at_line(cursor.line_number)
        validate_age_or_range(entry, word, ages, ranges, cursor.line_number)
    return SpecificAges(tuple(ages), tuple(ranges))


def read_species_and_cohorts(
    session: ParseSession, follow: Collection[str]
) -> SpeciesCohortSelector:
    """Read ``species keyword|ages...`` rows until a keyword in ``follow``."""
    rules: dict[str, CohortRule] = {}
    line_numbers: dict[str, int] = {}
    while not session.at_table_end(follow):
        cursor = session.reader.cursor()
        species = cursor.read(parse_word, "Species")
        session.require_species(species)
        if species in line_numbers:
            raise session.error(
                f"The species {species} was previously used on line {line_numbers[species]}",
                value=species,
            )
        line_numbers[species] = session.line_number
        rules[species] = _read_cohort_rule(cursor)
        session.reader.advance()

    if not rules:
        raise session.error("Expected a line starting with a species name")
    return SpeciesCohortSelector(rules)


def read_cohort_selector(session: ParseSession, for_single_repeat: bool = False) -> CohortSelector:
    """Read ``CohortsRemoved`` (and its species table for ``SpeciesList``).

    Inside a ``SingleRepeat`` block the species table ends at a narrower set
    of keywords, since another repeat cannot follow.
    """
    line_number = session.line_number
    selection = session.read_var(names.COHORTS_REMOVED, parse_word)
    match selection:
        case "ClearCut":
            return ClearCut()
        case "PlantOnly":
            return PlantOnly()
        case "SpeciesList":
            follow = (
                names.SINGLE_REPEAT_COHORT_FOLLOW if for_single_repeat else names.COHORT_FOLLOW
            )
            return read_species_and_cohorts(session, follow)
    raise session.error(
        f"{selection} is not a valid cohort selection",
        value=selection,
        choices=COHORT_SELECTIONS,
        line_number=line_number,
    )


__all__ = [
    "COHORT_SELECTIONS",
    "read_cohort_selector",
    "read_species_and_cohorts",
    "validate_age_or_range",
]
