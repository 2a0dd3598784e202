"""Immutable harvest plan produced by the parameter parser."""

from .cohorts import (
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
from .management import AppliedPrescription, ManagementArea, ManagementAreaDataset
from .parameters import InputParameters
from .prescriptions import (
    AnyPrescription,
    MultipleRepeatPrescription,
    Prescription,
    RoundedInterval,
    SingleRepeatPrescription,
    SpeciesToPlant,
)
from .ranking import (
    HIGHEST,
    AdjacencyType,
    EconomicRank,
    EconomicRankParameters,
    FireHazardParameters,
    FireHazardRank,
    InclusionMode,
    InclusionRequirement,
    InclusionRule,
    MaxCohortAgeRank,
    MaximumAge,
    MinimumAge,
    MinTimeSinceLastHarvest,
    RandomRank,
    RankingMethod,
    RegulateAgesRank,
    Requirement,
    SpatialArrangement,
    StandAdjacency,
)
from .selection import (
    CompleteStand,
    CompleteStandSpreading,
    PartialStandSpreading,
    PatchCutting,
    SiteSelector,
)

__all__ = [
    "ClearCut",
    "CohortKeyword",
    "CohortRule",
    "CohortSelector",
    "EveryNthCohort",
    "KeywordCohorts",
    "PlantOnly",
    "SpeciesCohortSelector",
    "SpecificAges",
    "AppliedPrescription",
    "ManagementArea",
    "ManagementAreaDataset",
    "InputParameters",
    "AnyPrescription",
    "MultipleRepeatPrescription",
    "Prescription",
    "RoundedInterval",
    "SingleRepeatPrescription",
    "SpeciesToPlant",
    "HIGHEST",
    "AdjacencyType",
    "EconomicRank",
    "EconomicRankParameters",
    "FireHazardParameters",
    "FireHazardRank",
    "InclusionMode",
    "InclusionRequirement",
    "InclusionRule",
    "MaxCohortAgeRank",
    "MaximumAge",
    "MinimumAge",
    "MinTimeSinceLastHarvest",
    "RandomRank",
    "RankingMethod",
    "RegulateAgesRank",
    "Requirement",
    "SpatialArrangement",
    "StandAdjacency",
    "CompleteStand",
    "CompleteStandSpreading",
    "PartialStandSpreading",
    "PatchCutting",
    "SiteSelector",
]
