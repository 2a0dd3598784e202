"""Forest type table parser (inclusion rules folded into the ranking method)."""

from __future__ import annotations

from harvestrx.core.ages import parse_age_or_range
from harvestrx.core.errors import InputFormatError
from harvestrx.io.values import parse_float, parse_percentage, parse_word
from harvestrx.model.ranking import (
    HIGHEST,
    InclusionMode,
    InclusionRequirement,
    InclusionRule,
    PercentOfCells,
    RankingMethod,
)
from harvestrx.parsing import names
from harvestrx.parsing.session import ParseSession


def parse_percent_of_cells(word: str) -> PercentOfCells:
    """``highest``, ``N%`` or a bare ``N`` (percent); returns a fraction."""
    if word == HIGHEST:
        return HIGHEST
    value = parse_percentage(word) if word.endswith("%") else parse_float(word) / 100.0
    if not 0.0 <= value <= 1.0:
        raise InputFormatError(
            f"{word} is not a valid percent of cells; expected 0-100 or \"{HIGHEST}\"",
            value=word,
        )
    return value


def _parse_mode(session: ParseSession, word: str) -> InclusionMode:
    try:
        return InclusionMode(word)
    except ValueError:
        raise session.error(
            f"{word} is not a valid inclusion rule",
            value=word,
            choices=[mode.value for mode in InclusionMode],
        ) from None


def read_forest_type_table(session: ParseSession, method: RankingMethod) -> RankingMethod:
    """Read an optional ``ForestTypeTable`` and return ``method`` extended by it.

    Returns ``method`` unchanged when the current line is not the table marker.
    """
    if session.current_name != names.FOREST_TYPE_TABLE:
        return method
    table_line = session.line_number
    session.read_name(names.FOREST_TYPE_TABLE)

    rules: list[InclusionRule] = []
    while not session.at_table_end(names.FOREST_TYPE_FOLLOW):
        cursor = session.reader.cursor()
        mode = _parse_mode(session, cursor.read(parse_word, "Inclusion Rule"))
        age_range = cursor.read(parse_age_or_range, "Age Range")
        percent = cursor.read(parse_percent_of_cells, "Percent Of Cells")

        species: list[str] = []
        while True:
            name = cursor.read_word()
            if name == "":
                break
            session.require_species(name)
            if name in species:
                raise session.error(f"The species {name} appears more than once", value=name)
            species.append(name)
        if not species:
            raise session.error("Expected one or more species names after the percent of cells")

        rules.append(InclusionRule(mode, age_range, percent, frozenset(species)))
        session.reader.advance()

    if not rules:
        raise session.error(
            "Expected a line starting with an inclusion rule", line_number=table_line
        )
    requirement = InclusionRequirement(tuple(rules))
    if 0 < requirement.optional_rule_count < 2:
        raise session.error(
            "If there are optional statements in the ForestTypeTable, there must be more than one",
            value=names.FOREST_TYPE_TABLE,
            line_number=table_line,
        )
    return method.with_requirement(requirement)


__all__ = ["parse_percent_of_cells", "read_forest_type_table"]
