"""Management areas and the prescriptions applied to them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from harvestrx.model.prescriptions import AnyPrescription


@dataclass(frozen=True, slots=True)
class AppliedPrescription:
    """A prescription bound to a management area for ``[begin_year, end_year]``."""

    prescription: AnyPrescription
    percentage_to_harvest: float
    begin_year: int
    end_year: int

    def overlaps(self, begin_year: int, end_year: int) -> bool:
        return self.begin_year <= end_year and begin_year <= self.end_year


@dataclass(frozen=True, slots=True)
class ManagementArea:
    """Administrative grouping of stands identified by its map code."""

    map_code: int
    applied: tuple[AppliedPrescription, ...] = ()

    def is_applied(self, name: str, begin_year: int, end_year: int) -> bool:
        """Whether ``name`` is already applied during any part of the window."""
        return any(
            entry.prescription.name == name and entry.overlaps(begin_year, end_year)
            for entry in self.applied
        )

    def apply(self, entry: AppliedPrescription) -> "ManagementArea":
        return ManagementArea(self.map_code, self.applied + (entry,))


class ManagementAreaDataset:
    """Management areas keyed by map code, in order of first appearance."""

    def __init__(self, areas: Iterable[ManagementArea] = ()) -> None:
        self._areas: dict[int, ManagementArea] = {}
        for area in areas:
            if area.map_code in self._areas:
                raise ValueError(f"Duplicate management area map code {area.map_code}")
            self._areas[area.map_code] = area

    def find(self, map_code: int) -> ManagementArea | None:
        return self._areas.get(map_code)

    def __contains__(self, map_code: object) -> bool:
        return map_code in self._areas

    def __iter__(self) -> Iterator[ManagementArea]:
        return iter(self._areas.values())

    def __len__(self) -> int:
        return len(self._areas)

    def __repr__(self) -> str:
        return f"ManagementAreaDataset({list(self._areas.values())!r})"


__all__ = ["AppliedPrescription", "ManagementArea", "ManagementAreaDataset"]
