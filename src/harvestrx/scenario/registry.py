"""Species registry and scenario clock consulted while parsing."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


class SpeciesDataset:
    """Read-only lookup of species by name (names are case-sensitive)."""

    def __init__(self, names: Iterable[str]) -> None:
        self._names: dict[str, None] = {}
        for name in names:
            if name in self._names:
                raise ValueError(f"Species {name} is listed more than once")
            self._names[name] = None

    def __contains__(self, name: object) -> bool:
        return name in self._names

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __len__(self) -> int:
        return len(self._names)

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(self._names)


@dataclass(frozen=True, slots=True)
class ScenarioClock:
    """Simulation years available to harvest implementations."""

    start_year: int = 0
    end_year: int = 100

    def __post_init__(self) -> None:
        if self.end_year < self.start_year:
            raise ValueError("ScenarioClock.end_year must be >= start_year")


__all__ = ["SpeciesDataset", "ScenarioClock"]
