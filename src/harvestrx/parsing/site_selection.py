"""Site selection parser (``SiteSelection <method> [arguments]``)."""

from __future__ import annotations

from harvestrx.io.reader import LineCursor
from harvestrx.io.values import parse_float, parse_percentage, parse_word
from harvestrx.model.selection import (
    CompleteStand,
    CompleteStandSpreading,
    PartialStandSpreading,
    PatchCutting,
    SiteSelector,
)
from harvestrx.parsing import names
from harvestrx.parsing.session import ParseSession

COMPLETE = "Complete"
COMPLETE_STAND_SPREAD = "CompleteStandSpread"
PARTIAL_STAND_SPREAD = "PartialStandSpread"
PATCH_CUTTING = "PatchCutting"
SITE_SELECTION_METHODS = (COMPLETE, COMPLETE_STAND_SPREAD, PARTIAL_STAND_SPREAD, PATCH_CUTTING)


def _read_target_sizes(session: ParseSession, cursor: LineCursor) -> tuple[float, float]:
    min_size = cursor.read(parse_float, "the minimum target harvest size")
    max_size = cursor.read(parse_float, "the maximum target harvest size")
    if min_size <= 0:
        raise session.error(
            f"The minimum target harvest size ({min_size:g}) must be > 0", value=str(min_size)
        )
    if max_size < min_size:
        raise session.error(
            f"The maximum target harvest size ({max_size:g}) must be >= "
            f"the minimum size ({min_size:g})",
            value=str(max_size),
        )
    return min_size, max_size


def _read_patch_cutting(session: ParseSession, cursor: LineCursor) -> PatchCutting:
    percentage = cursor.read(parse_percentage, "the site percentage for patch cutting")
    if not 0.0 < percentage <= 1.0:
        raise session.error(
            "The site percentage for patch cutting must be > 0% and <= 100%",
            value=f"{percentage * 100:g}%",
        )
    size = cursor.read(parse_float, "the target patch size")
    if size <= 0:
        raise session.error(f"The target patch size ({size:g}) must be > 0", value=str(size))
    return PatchCutting(percentage, size)


def read_site_selector(session: ParseSession) -> SiteSelector:
    """Read the mandatory ``SiteSelection`` line."""

    def read(cursor: LineCursor) -> SiteSelector:
        method = cursor.read(parse_word, names.SITE_SELECTION)
        match method:
            case "Complete":
                return CompleteStand()
            case "CompleteStandSpread":
                return CompleteStandSpreading(*_read_target_sizes(session, cursor))
            case "PartialStandSpread":
                return PartialStandSpreading(*_read_target_sizes(session, cursor))
            case "PatchCutting":
                return _read_patch_cutting(session, cursor)
        raise session.error(
            f"{method} is not a valid site selection method",
            value=method,
            choices=SITE_SELECTION_METHODS,
        )

    return session.read_var_with(names.SITE_SELECTION, read)


__all__ = ["SITE_SELECTION_METHODS", "read_site_selector"]
