"""Pydantic models describing the scenario a harvest file is parsed against."""

from __future__ import annotations

from pydantic import BaseModel, ValidationInfo, field_validator

from harvestrx.scenario.registry import ScenarioClock, SpeciesDataset


class Scenario(BaseModel):
    """Scenario metadata needed to validate harvest parameters.

    Attributes
    ----------
    name:
        Human-readable scenario name.
    extension:
        Expected ``LandisData`` value of the harvest parameter file.
    start_year / end_year:
        Inclusive bounds for harvest implementation windows.
    species:
        Species names known to the landscape; harvest tables may only use these.
    """

    name: str
    extension: str = "Base Harvest"
    start_year: int = 0
    end_year: int
    species: list[str]

    @field_validator("start_year")
    @classmethod
    def _start_non_negative(cls, value: int) -> int:
        if value < 0:
            raise ValueError("start_year must be >= 0")
        return value

    @field_validator("end_year")
    @classmethod
    def _end_not_before_start(cls, value: int, info: ValidationInfo) -> int:
        start = info.data.get("start_year", 0)
        if value < start:
            raise ValueError("end_year must be >= start_year")
        return value

    @field_validator("species")
    @classmethod
    def _species_unique(cls, value: list[str]) -> list[str]:
        cleaned = [name.strip() for name in value]
        if not cleaned:
            raise ValueError("Scenario.species must list at least one species")
        if any(not name for name in cleaned):
            raise ValueError("Scenario.species entries must be non-empty")
        if len(set(cleaned)) != len(cleaned):
            raise ValueError("Scenario.species entries must be unique")
        return cleaned

    def species_dataset(self) -> SpeciesDataset:
        return SpeciesDataset(self.species)

    def clock(self) -> ScenarioClock:
        return ScenarioClock(start_year=self.start_year, end_year=self.end_year)
