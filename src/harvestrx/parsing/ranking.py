"""Stand ranking method parser (``StandRanking`` and its requirement clauses)."""

from __future__ import annotations

from harvestrx.io.values import parse_byte, parse_int, parse_ushort, parse_word
from harvestrx.model.ranking import (
    MAX_RANK,
    AdjacencyType,
    EconomicRank,
    EconomicRankParameters,
    FireHazardParameters,
    FireHazardRank,
    MaxCohortAgeRank,
    MaximumAge,
    MinimumAge,
    MinTimeSinceLastHarvest,
    RandomRank,
    RankingMethod,
    RegulateAgesRank,
    SpatialArrangement,
    StandAdjacency,
)
from harvestrx.parsing import names
from harvestrx.parsing.session import ParseSession

RANKING_METHODS = ("Economic", "MaxCohortAge", "Random", "RegulateAges", "FireHazard")


def _check_rank(session: ParseSession, rank: int, word: str) -> None:
    if rank > MAX_RANK:
        raise session.error(f"Rank must be between 0 and {MAX_RANK}", value=word)


def read_economic_rank_table(session: ParseSession) -> dict[str, EconomicRankParameters]:
    """Read ``species rank minimumAge`` rows up to the next ranking follow keyword."""
    table: dict[str, EconomicRankParameters] = {}
    line_numbers: dict[str, int] = {}
    while not session.at_table_end(names.RANKING_FOLLOW):
        cursor = session.reader.cursor()
        species = cursor.read(parse_word, "Species")
        session.require_species(species)
        if species in line_numbers:
            raise session.error(
                f"The species {species} was previously used on line {line_numbers[species]}",
                value=species,
            )
        line_numbers[species] = session.line_number

        rank = cursor.read(parse_byte, "Economic Rank")
        _check_rank(session, rank, str(rank))
        minimum_age = cursor.read(parse_ushort, "Minimum Age")
        cursor.expect_end("the Minimum Age column")

        table[species] = EconomicRankParameters(rank=rank, minimum_age=minimum_age)
        session.reader.advance()

    if not table:
        raise session.error("Expected a line starting with a species name")
    return table


def read_fire_hazard_table(session: ParseSession) -> dict[int, FireHazardParameters]:
    """Read ``fuelTypeIndex rank`` rows up to the next ranking follow keyword."""
    table: dict[int, FireHazardParameters] = {}
    line_numbers: dict[int, int] = {}
    while not session.at_table_end(names.RANKING_FOLLOW):
        cursor = session.reader.cursor()
        index = cursor.read(parse_int, "Fuel Type Index")
        if index in line_numbers:
            raise session.error(
                f"The fuel type {index} was previously used on line {line_numbers[index]}",
                value=str(index),
            )
        line_numbers[index] = session.line_number

        rank = cursor.read(parse_byte, "Fuel Type Rank")
        _check_rank(session, rank, str(rank))
        cursor.expect_end("the Fuel Type Rank column")

        table[index] = FireHazardParameters(rank=rank)
        session.reader.advance()

    if not table:
        raise session.error("Expected a line starting with a fuel type index")
    return table


def _read_base_method(session: ParseSession) -> RankingMethod:
    line_number = session.line_number
    method = session.read_var(names.STAND_RANKING, parse_word)
    match method:
        case "Economic":
            return EconomicRank(read_economic_rank_table(session))
        case "MaxCohortAge":
            return MaxCohortAgeRank()
        case "Random":
            return RandomRank()
        case "RegulateAges":
            return RegulateAgesRank()
        case "FireHazard":
            return FireHazardRank(read_fire_hazard_table(session))
    raise session.error(
        f"{method} is not a valid stand ranking",
        value=method,
        choices=RANKING_METHODS,
        line_number=line_number,
    )


def _read_adjacency_type(session: ParseSession) -> AdjacencyType:
    line_number = session.line_number
    word = session.read_var(names.ADJACENCY_TYPE, parse_word)
    try:
        return AdjacencyType(word)
    except ValueError:
        raise session.error(
            f"{word} is not a valid adjacency type",
            value=word,
            choices=[member.value for member in AdjacencyType],
            line_number=line_number,
        ) from None


def read_ranking_method(session: ParseSession) -> RankingMethod:
    """Read the ranking method and its optional requirement clauses.

    Clauses are optional and appear at most once, in this order:
    ``MinimumAge``, ``MaximumAge``, ``StandAdjacency`` (with ``AdjacencyType``
    and optional ``AdjacencyNeighborSetAside``), ``SpatialArrangement`` and
    ``MinimumTimeSinceLastHarvest``.
    """
    method = _read_base_method(session)

    min_age = session.read_optional_var(names.MINIMUM_AGE, parse_ushort)
    if min_age is not None:
        method = method.with_requirement(MinimumAge(min_age))

    line_number = session.line_number
    max_age = session.read_optional_var(names.MAXIMUM_AGE, parse_ushort)
    if max_age is not None:
        if min_age is not None and max_age < min_age:
            raise session.error(
                f"{max_age} is < minimum age ({min_age})",
                value=str(max_age),
                line_number=line_number,
            )
        method = method.with_requirement(MaximumAge(max_age))

    distance = session.read_optional_var(names.STAND_ADJACENCY, parse_ushort)
    if distance is not None:
        adjacency_type = _read_adjacency_type(session)
        set_aside = session.read_optional_var(names.ADJACENCY_NEIGHBOR_SET_ASIDE, parse_ushort)
        method = method.with_requirement(
            StandAdjacency(distance, adjacency_type, set_aside if set_aside is not None else 0)
        )

    neighbor_age = session.read_optional_var(names.SPATIAL_ARRANGEMENT, parse_ushort)
    if neighbor_age is not None:
        method = method.with_requirement(SpatialArrangement(neighbor_age))

    min_time = session.read_optional_var(names.MINIMUM_TIME_SINCE_LAST_HARVEST, parse_ushort)
    if min_time is not None:
        method = method.with_requirement(MinTimeSinceLastHarvest(min_time))

    return method


__all__ = [
    "RANKING_METHODS",
    "read_economic_rank_table",
    "read_fire_hazard_table",
    "read_ranking_method",
]
