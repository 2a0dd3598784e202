"""Site selectors: which sites inside a selected stand are harvested."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias


@dataclass(frozen=True, slots=True)
class CompleteStand:
    """Harvest every site in the stand."""


@dataclass(frozen=True, slots=True)
class CompleteStandSpreading:
    """Harvest whole stands, spreading into neighbours until the target size is met."""

    min_target_size: float
    max_target_size: float

    def __post_init__(self) -> None:
        _check_target_sizes(self.min_target_size, self.max_target_size)


@dataclass(frozen=True, slots=True)
class PartialStandSpreading:
    """Spread site by site across stands until the target size is met."""

    min_target_size: float
    max_target_size: float

    def __post_init__(self) -> None:
        _check_target_sizes(self.min_target_size, self.max_target_size)


@dataclass(frozen=True, slots=True)
class PatchCutting:
    """Cut patches of ``patch_size`` until ``percentage`` of the stand is harvested."""

    percentage: float
    patch_size: float

    def __post_init__(self) -> None:
        if not 0.0 < self.percentage <= 1.0:
            raise ValueError("PatchCutting.percentage must be in (0, 1]")
        if self.patch_size <= 0:
            raise ValueError("PatchCutting.patch_size must be > 0")


def _check_target_sizes(min_size: float, max_size: float) -> None:
    if min_size <= 0:
        raise ValueError("min_target_size must be > 0")
    if max_size < min_size:
        raise ValueError("max_target_size must be >= min_target_size")


SiteSelector: TypeAlias = (
    CompleteStand | CompleteStandSpreading | PartialStandSpreading | PatchCutting
)


def describe_site_selector(selector: SiteSelector) -> str:
    """Render ``selector`` the way it is written in the input file."""
    match selector:
        case CompleteStand():
            return "Complete"
        case CompleteStandSpreading(min_target_size=lo, max_target_size=hi):
            return f"CompleteStandSpread {lo:g} {hi:g}"
        case PartialStandSpreading(min_target_size=lo, max_target_size=hi):
            return f"PartialStandSpread {lo:g} {hi:g}"
        case PatchCutting(percentage=pct, patch_size=size):
            return f"PatchCutting {pct * 100:g}% {size:g}"
    raise TypeError(f"Unknown site selector {selector!r}")


__all__ = [
    "CompleteStand",
    "CompleteStandSpreading",
    "PartialStandSpreading",
    "PatchCutting",
    "SiteSelector",
    "describe_site_selector",
]
