"""Root of the parsed parameter tree."""

from __future__ import annotations

from dataclasses import dataclass, field

from harvestrx.model.management import ManagementAreaDataset
from harvestrx.model.prescriptions import AnyPrescription


@dataclass(frozen=True)
class InputParameters:
    """Everything read from one harvest parameter file."""

    timestep: int
    prescriptions: tuple[AnyPrescription, ...]
    management_areas: ManagementAreaDataset = field(default_factory=ManagementAreaDataset)
    management_area_map: str | None = None
    stand_map: str | None = None
    prescription_maps: str | None = None
    event_log: str | None = None
    summary_log: str | None = None

    def prescription(self, name: str) -> AnyPrescription | None:
        for prescription in self.prescriptions:
            if prescription.name == name:
                return prescription
        return None


__all__ = ["InputParameters"]
