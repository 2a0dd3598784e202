"""Cohort selectors: which cohorts are removed from a harvested site."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import TypeAlias

from harvestrx.core.ages import AgeRange


class CohortKeyword(str, Enum):
    ALL = "All"
    YOUNGEST = "Youngest"
    ALL_EXCEPT_YOUNGEST = "AllExceptYoungest"
    OLDEST = "Oldest"
    ALL_EXCEPT_OLDEST = "AllExceptOldest"


@dataclass(frozen=True, slots=True)
class KeywordCohorts:
    """Whole-row keyword selection for one species."""

    keyword: CohortKeyword


@dataclass(frozen=True, slots=True)
class EveryNthCohort:
    """Remove every ``n``-th cohort of the species (``1/N``)."""

    n: int

    def __post_init__(self) -> None:
        if self.n <= 0:
            raise ValueError("EveryNthCohort.n must be > 0")


@dataclass(frozen=True, slots=True)
class SpecificAges:
    """Explicit ages and age ranges; none of them overlap."""

    ages: tuple[int, ...]
    ranges: tuple[AgeRange, ...]

    def selects(self, age: int) -> bool:
        return age in self.ages or any(r.contains(age) for r in self.ranges)


CohortRule: TypeAlias = KeywordCohorts | EveryNthCohort | SpecificAges


@dataclass(frozen=True, slots=True)
class ClearCut:
    """Remove every cohort of every species."""


@dataclass(frozen=True, slots=True)
class PlantOnly:
    """Remove nothing; the prescription only plants."""


@dataclass(frozen=True)
class SpeciesCohortSelector:
    """Per-species removal rules, in table order."""

    rules: Mapping[str, CohortRule]

    def __post_init__(self) -> None:
        object.__setattr__(self, "rules", MappingProxyType(dict(self.rules)))

    def rule_for(self, species: str) -> CohortRule | None:
        return self.rules.get(species)


CohortSelector: TypeAlias = ClearCut | PlantOnly | SpeciesCohortSelector


def describe_cohort_rule(rule: CohortRule) -> str:
    match rule:
        case KeywordCohorts(keyword=keyword):
            return keyword.value
        case EveryNthCohort(n=n):
            return f"1/{n}"
        case SpecificAges(ages=ages, ranges=ranges):
            return " ".join([str(a) for a in ages] + [str(r) for r in ranges])
    raise TypeError(f"Unknown cohort rule {rule!r}")


def describe_cohort_selector(selector: CohortSelector) -> str:
    match selector:
        case ClearCut():
            return "ClearCut"
        case PlantOnly():
            return "PlantOnly"
        case SpeciesCohortSelector(rules=rules):
            return "; ".join(f"{name} {describe_cohort_rule(rule)}" for name, rule in rules.items())
    raise TypeError(f"Unknown cohort selector {selector!r}")


__all__ = [
    "CohortKeyword",
    "KeywordCohorts",
    "EveryNthCohort",
    "SpecificAges",
    "CohortRule",
    "ClearCut",
    "PlantOnly",
    "SpeciesCohortSelector",
    "CohortSelector",
    "describe_cohort_rule",
    "describe_cohort_selector",
]
