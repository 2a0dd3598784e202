"""Prescription assembler: one ``Prescription`` block per iteration."""

from __future__ import annotations

from harvestrx.io.values import parse_int, parse_word
from harvestrx.model.prescriptions import (
    AnyPrescription,
    MultipleRepeatPrescription,
    Prescription,
    SingleRepeatPrescription,
)
from harvestrx.model.selection import CompleteStand
from harvestrx.parsing import names
from harvestrx.parsing.cohorts import read_cohort_selector
from harvestrx.parsing.forest_type import read_forest_type_table
from harvestrx.parsing.planting import read_species_to_plant
from harvestrx.parsing.ranking import read_ranking_method
from harvestrx.parsing.repeat import validate_repeat_interval
from harvestrx.parsing.session import ParseSession
from harvestrx.parsing.site_selection import read_site_selector


def _read_min_time_since_damage(session: ParseSession) -> int:
    line_number = session.line_number
    value = session.read_optional_var(names.MIN_TIME_SINCE_DAMAGE, parse_int)
    if value is None:
        return 0
    if value < 0:
        raise session.error(
            f"{names.MIN_TIME_SINCE_DAMAGE} must be >= 0", value=str(value), line_number=line_number
        )
    return value


def _read_repeat_interval(session: ParseSession, name: str, harvest_timestep: int) -> int:
    line_number = session.line_number
    interval = session.read_var(name, parse_int)
    return validate_repeat_interval(
        interval, line_number, harvest_timestep, session.rounded_intervals
    )


def read_prescription(session: ParseSession, name: str, harvest_timestep: int) -> AnyPrescription:
    """Read the body of one prescription block (after its ``Prescription`` line)."""
    ranking_method = read_ranking_method(session)
    ranking_method = read_forest_type_table(session, ranking_method)
    site_selector = read_site_selector(session)
    min_time_since_damage = _read_min_time_since_damage(session)
    prevent_establishment = session.read_optional_name(names.PREVENT_ESTABLISHMENT)
    cohort_selector = read_cohort_selector(session, for_single_repeat=False)
    species_to_plant = read_species_to_plant(session)

    common = dict(
        name=name,
        ranking_method=ranking_method,
        site_selector=site_selector,
        cohort_selector=cohort_selector,
        species_to_plant=species_to_plant,
        min_time_since_damage=min_time_since_damage,
        prevent_establishment=prevent_establishment,
    )

    if session.current_name == names.SINGLE_REPEAT:
        interval = _read_repeat_interval(session, names.SINGLE_REPEAT, harvest_timestep)
        additional_cohort_selector = read_cohort_selector(session, for_single_repeat=True)
        additional_species_to_plant = read_species_to_plant(session)
        return SingleRepeatPrescription(
            **common,
            interval=interval,
            additional_cohort_selector=additional_cohort_selector,
            additional_species_to_plant=additional_species_to_plant,
            additional_site_selector=CompleteStand(),
        )
    if session.current_name == names.MULTIPLE_REPEAT:
        interval = _read_repeat_interval(session, names.MULTIPLE_REPEAT, harvest_timestep)
        return MultipleRepeatPrescription(
            **common, interval=interval, additional_site_selector=CompleteStand()
        )
    return Prescription(**common)


def read_prescriptions(session: ParseSession, harvest_timestep: int) -> list[AnyPrescription]:
    """Read zero or more prescription blocks; names must be unique."""
    prescriptions: list[AnyPrescription] = []
    line_numbers: dict[str, int] = {}
    while session.current_name == names.PRESCRIPTION:
        line_number = session.line_number
        name = session.read_var(names.PRESCRIPTION, parse_word)
        if name in line_numbers:
            raise session.error(
                f"The name {name} was previously used on line {line_numbers[name]}",
                value=name,
                line_number=line_number,
            )
        line_numbers[name] = line_number
        prescriptions.append(read_prescription(session, name, harvest_timestep))
    return prescriptions


__all__ = ["read_prescription", "read_prescriptions"]
