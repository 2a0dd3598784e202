"""Prescriptions: named, composed harvest plans."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TypeAlias

from harvestrx.model.cohorts import CohortSelector
from harvestrx.model.ranking import RankingMethod
from harvestrx.model.selection import CompleteStand, SiteSelector


@dataclass(frozen=True, slots=True)
class SpeciesToPlant:
    """Species planted after a harvest, in input order without duplicates."""

    species: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.species:
            raise ValueError("SpeciesToPlant requires at least one species")
        if len(set(self.species)) != len(self.species):
            raise ValueError("SpeciesToPlant species must be unique")


@dataclass(frozen=True, kw_only=True)
class Prescription:
    """A one-time harvest plan.

    Attributes
    ----------
    name:
        Unique prescription name (referenced by harvest implementations).
    ranking_method:
        How candidate stands are ordered, including ranking requirements.
    site_selector:
        Which sites inside a selected stand are harvested.
    cohort_selector:
        Which cohorts are removed from harvested sites.
    species_to_plant:
        Optional species planted afterwards.
    min_time_since_damage:
        Stands damaged more recently than this (years) are skipped.
    prevent_establishment:
        When set, no regeneration establishes on harvested sites.
    """

    name: str
    ranking_method: RankingMethod
    site_selector: SiteSelector
    cohort_selector: CohortSelector
    species_to_plant: SpeciesToPlant | None = None
    min_time_since_damage: int = 0
    prevent_establishment: bool = False

    def __post_init__(self) -> None:
        if self.min_time_since_damage < 0:
            raise ValueError("min_time_since_damage must be >= 0")


@dataclass(frozen=True, kw_only=True)
class SingleRepeatPrescription(Prescription):
    """Harvest once, then apply a second, whole-stand harvest after ``interval`` years."""

    interval: int
    additional_cohort_selector: CohortSelector
    additional_species_to_plant: SpeciesToPlant | None = None
    additional_site_selector: SiteSelector = field(default_factory=CompleteStand)

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.interval <= 0:
            raise ValueError("interval must be > 0")


@dataclass(frozen=True, kw_only=True)
class MultipleRepeatPrescription(Prescription):
    """Repeat the same harvest every ``interval`` years on the whole stand."""

    interval: int
    additional_site_selector: SiteSelector = field(default_factory=CompleteStand)

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.interval <= 0:
            raise ValueError("interval must be > 0")


AnyPrescription: TypeAlias = Prescription | SingleRepeatPrescription | MultipleRepeatPrescription


def repeat_kind(prescription: AnyPrescription) -> str:
    """Return ``"single"``, ``"multiple"`` or ``"none"``."""
    match prescription:
        case SingleRepeatPrescription():
            return "single"
        case MultipleRepeatPrescription():
            return "multiple"
        case Prescription():
            return "none"
    raise TypeError(f"Unknown prescription {prescription!r}")


@dataclass(frozen=True, slots=True)
class RoundedInterval:
    """A repeat interval that was rounded up to a multiple of the harvest timestep."""

    requested: int
    rounded_up_to: int
    line_number: int


__all__ = [
    "SpeciesToPlant",
    "Prescription",
    "SingleRepeatPrescription",
    "MultipleRepeatPrescription",
    "AnyPrescription",
    "RoundedInterval",
    "repeat_kind",
]
