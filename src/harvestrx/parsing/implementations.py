"""Harvest implementation table: which management areas apply which prescriptions."""

from __future__ import annotations

from collections.abc import Sequence

from harvestrx.io.values import parse_int, parse_percentage, parse_ushort, parse_word
from harvestrx.model.management import AppliedPrescription, ManagementArea, ManagementAreaDataset
from harvestrx.model.prescriptions import AnyPrescription
from harvestrx.parsing import names
from harvestrx.parsing.session import ParseSession


def _find_prescription(
    prescriptions: Sequence[AnyPrescription], name: str
) -> AnyPrescription | None:
    for prescription in prescriptions:
        if prescription.name == name:
            return prescription
    return None


def read_harvest_implementations(
    session: ParseSession, prescriptions: Sequence[AnyPrescription]
) -> ManagementAreaDataset:
    """Read the ``HarvestImplementations`` section.

    Each row is ``mapCode prescription percent% [beginYear [endYear]]``.
    Missing years default to the scenario clock's start and end years.
    """
    session.read_name(names.HARVEST_IMPLEMENTATIONS)
    clock = session.clock
    areas: dict[int, ManagementArea] = {}

    while not session.at_table_end(names.IMPLEMENTATIONS_FOLLOW):
        cursor = session.reader.cursor()

        map_code = cursor.read(parse_ushort, "Mgmt Area")
        area = areas.get(map_code)
        if area is None:
            area = ManagementArea(map_code)

        name = cursor.read(parse_word, "Prescription")
        prescription = _find_prescription(prescriptions, name)
        if prescription is None:
            raise session.error(f"{name} is an unknown prescription name", value=name)

        percentage = cursor.read(parse_percentage, "Area To Harvest")
        if percentage <= 0.0 or percentage > 1.0:
            raise session.error(
                "Percentage must be between 0% and 100%", value=f"{percentage * 100:g}%"
            )

        begin_year = clock.start_year
        end_year = clock.end_year
        cursor.skip_whitespace()
        if not cursor.at_end:
            begin_year = cursor.read(parse_int, "Begin Time")
            if begin_year < clock.start_year:
                raise session.error(
                    f"Year {begin_year} is before the scenario start year ({clock.start_year})",
                    value=str(begin_year),
                )
            if begin_year > clock.end_year:
                raise session.error(
                    f"Year {begin_year} is after the scenario end year ({clock.end_year})",
                    value=str(begin_year),
                )
            cursor.skip_whitespace()
            if not cursor.at_end:
                end_year = cursor.read(parse_int, "End Time")
                if end_year < begin_year:
                    raise session.error(
                        f"Year {end_year} is before the Begin Time ({begin_year})",
                        value=str(end_year),
                    )
                if end_year > clock.end_year:
                    raise session.error(
                        f"Year {end_year} is after the scenario end year ({clock.end_year})",
                        value=str(end_year),
                    )
                cursor.expect_end("the End Time column")

        if area.is_applied(name, begin_year, end_year):
            raise session.error(
                f"Prescription {name} has already been applied to management area "
                f"{map_code} with begin time = {begin_year} and end time = {end_year}",
                value=name,
            )
        areas[map_code] = area.apply(
            AppliedPrescription(prescription, percentage, begin_year, end_year)
        )
        session.reader.advance()

    return ManagementAreaDataset(areas.values())


__all__ = ["read_harvest_implementations"]
