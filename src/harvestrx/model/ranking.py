"""Stand ranking methods and the requirements layered on top of them."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from enum import Enum
from types import MappingProxyType
from typing import Literal, TypeAlias

from harvestrx.core.ages import AgeRange

HIGHEST: Literal["highest"] = "highest"
MAX_RANK = 100


class AdjacencyType(str, Enum):
    STAND_AGE = "StandAge"
    MINIMUM_TIME_SINCE_LAST_HARVEST = "MinimumTimeSinceLastHarvest"


class InclusionMode(str, Enum):
    OPTIONAL = "Optional"
    REQUIRED = "Required"
    FORBIDDEN = "Forbidden"


@dataclass(frozen=True, slots=True)
class MinimumAge:
    """Stands younger than ``age`` are not ranked."""

    age: int


@dataclass(frozen=True, slots=True)
class MaximumAge:
    """Stands older than ``age`` are not ranked."""

    age: int


@dataclass(frozen=True, slots=True)
class StandAdjacency:
    """Neighbouring stands must satisfy ``adjacency_type`` within ``distance``.

    Attributes
    ----------
    distance:
        Adjacency threshold (years of stand age or time since last harvest).
    adjacency_type:
        Which neighbour property is compared against ``distance``.
    neighbor_set_aside:
        Years for which neighbours of a harvested stand are set aside.
    """

    distance: int
    adjacency_type: AdjacencyType
    neighbor_set_aside: int = 0


@dataclass(frozen=True, slots=True)
class SpatialArrangement:
    """Neighbouring stands must be at least ``minimum_age`` old."""

    minimum_age: int


@dataclass(frozen=True, slots=True)
class MinTimeSinceLastHarvest:
    """The stand itself must not have been harvested in the last ``years``."""

    years: int


PercentOfCells: TypeAlias = float | Literal["highest"]


@dataclass(frozen=True, slots=True)
class InclusionRule:
    """One row of a forest type table."""

    mode: InclusionMode
    age_range: AgeRange
    percent_of_cells: PercentOfCells
    species: frozenset[str]


@dataclass(frozen=True, slots=True)
class InclusionRequirement:
    """Forest type table folded into a ranking requirement (rules in row order)."""

    rules: tuple[InclusionRule, ...]

    @property
    def optional_rule_count(self) -> int:
        return sum(1 for rule in self.rules if rule.mode is InclusionMode.OPTIONAL)


Requirement: TypeAlias = (
    MinimumAge
    | MaximumAge
    | StandAdjacency
    | SpatialArrangement
    | MinTimeSinceLastHarvest
    | InclusionRequirement
)


@dataclass(frozen=True, slots=True)
class EconomicRankParameters:
    rank: int
    minimum_age: int


@dataclass(frozen=True, slots=True)
class FireHazardParameters:
    rank: int


def _freeze(mapping: Mapping) -> Mapping:
    return MappingProxyType(dict(mapping))


@dataclass(frozen=True)
class EconomicRank:
    """Rank stands by the economic value of their species cohorts."""

    table: Mapping[str, EconomicRankParameters]
    requirements: tuple[Requirement, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "table", _freeze(self.table))

    def with_requirement(self, requirement: Requirement) -> "EconomicRank":
        return replace(self, requirements=self.requirements + (requirement,))


@dataclass(frozen=True)
class FireHazardRank:
    """Rank stands by the fire hazard of their fuel types."""

    table: Mapping[int, FireHazardParameters]
    requirements: tuple[Requirement, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "table", _freeze(self.table))

    def with_requirement(self, requirement: Requirement) -> "FireHazardRank":
        return replace(self, requirements=self.requirements + (requirement,))


@dataclass(frozen=True)
class MaxCohortAgeRank:
    """Rank stands by their oldest cohort."""

    requirements: tuple[Requirement, ...] = field(default=())

    def with_requirement(self, requirement: Requirement) -> "MaxCohortAgeRank":
        return replace(self, requirements=self.requirements + (requirement,))


@dataclass(frozen=True)
class RandomRank:
    """Rank stands in random order."""

    requirements: tuple[Requirement, ...] = field(default=())

    def with_requirement(self, requirement: Requirement) -> "RandomRank":
        return replace(self, requirements=self.requirements + (requirement,))


@dataclass(frozen=True)
class RegulateAgesRank:
    """Rank stands to even out the age-class distribution."""

    requirements: tuple[Requirement, ...] = field(default=())

    def with_requirement(self, requirement: Requirement) -> "RegulateAgesRank":
        return replace(self, requirements=self.requirements + (requirement,))


RankingMethod: TypeAlias = (
    EconomicRank | MaxCohortAgeRank | RandomRank | RegulateAgesRank | FireHazardRank
)


def ranking_method_name(method: RankingMethod) -> str:
    """Return the input keyword that selects ``method``."""
    match method:
        case EconomicRank():
            return "Economic"
        case MaxCohortAgeRank():
            return "MaxCohortAge"
        case RandomRank():
            return "Random"
        case RegulateAgesRank():
            return "RegulateAges"
        case FireHazardRank():
            return "FireHazard"
    raise TypeError(f"Unknown ranking method {method!r}")


__all__ = [
    "HIGHEST",
    "MAX_RANK",
    "AdjacencyType",
    "InclusionMode",
    "MinimumAge",
    "MaximumAge",
    "StandAdjacency",
    "SpatialArrangement",
    "MinTimeSinceLastHarvest",
    "PercentOfCells",
    "InclusionRule",
    "InclusionRequirement",
    "Requirement",
    "EconomicRankParameters",
    "FireHazardParameters",
    "EconomicRank",
    "FireHazardRank",
    "MaxCohortAgeRank",
    "RandomRank",
    "RegulateAgesRank",
    "RankingMethod",
    "ranking_method_name",
]
