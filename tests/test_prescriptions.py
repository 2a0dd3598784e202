from __future__ import annotations

import pytest

from harvestrx.core import InputFormatError, InputValueError
from harvestrx.model import (
    ClearCut,
    CompleteStand,
    MultipleRepeatPrescription,
    PatchCutting,
    Prescription,
    RandomRank,
    SingleRepeatPrescription,
    SpeciesCohortSelector,
    SpeciesToPlant,
)
from harvestrx.model.prescriptions import repeat_kind
from harvestrx.parsing.prescriptions import read_prescriptions


def test_plain_prescription_with_optional_lines(session_for):
    session = session_for(
        """
        Prescription  Thin
        StandRanking  Random
        SiteSelection PatchCutting 20% 2
        MinTimeSinceDamage 15
        PreventEstablishment
        CohortsRemoved ClearCut
        Plant pinubank poputrem
        HarvestImplementations
        """
    )
    (prescription,) = read_prescriptions(session, 10)
    assert type(prescription) is Prescription
    assert prescription.name == "Thin"
    assert prescription.ranking_method == RandomRank()
    assert prescription.site_selector == PatchCutting(0.2, 2.0)
    assert prescription.min_time_since_damage == 15
    assert prescription.prevent_establishment is True
    assert prescription.cohort_selector == ClearCut()
    assert prescription.species_to_plant == SpeciesToPlant(("pinubank", "poputrem"))
    assert repeat_kind(prescription) == "none"
    assert session.current_name == "HarvestImplementations"


def test_defaults_for_optional_lines(session_for):
    session = session_for(
        """
        Prescription P1
        StandRanking Random
        SiteSelection Complete
        CohortsRemoved ClearCut
        """
    )
    (prescription,) = read_prescriptions(session, 10)
    assert prescription.min_time_since_damage == 0
    assert prescription.prevent_establishment is False
    assert prescription.species_to_plant is None


def test_single_repeat_with_additional_cohorts_and_plant(session_for):
    session = session_for(
        """
        Prescription Shelterwood
        StandRanking MaxCohortAge
        SiteSelection Complete
        CohortsRemoved SpeciesList
        abiebals AllExceptOldest
        SingleRepeat 20
        CohortsRemoved SpeciesList
        abiebals All
        Plant acersacc
        Prescription Second
        StandRanking Random
        SiteSelection Complete
        CohortsRemoved ClearCut
        """
    )
    shelterwood, second = read_prescriptions(session, 10)
    assert isinstance(shelterwood, SingleRepeatPrescription)
    assert repeat_kind(shelterwood) == "single"
    assert shelterwood.interval == 20
    assert shelterwood.additional_site_selector == CompleteStand()
    assert isinstance(shelterwood.additional_cohort_selector, SpeciesCohortSelector)
    assert shelterwood.species_to_plant is None
    assert shelterwood.additional_species_to_plant == SpeciesToPlant(("acersacc",))
    assert second.name == "Second"
    assert session.rounded_intervals == []


def test_multiple_repeat_rounds_interval(session_for):
    session = session_for(
        """
        Prescription Selection
        StandRanking Random
        SiteSelection PatchCutting 10% 1
        CohortsRemoved ClearCut
        MultipleRepeat 15
        """
    )
    (prescription,) = read_prescriptions(session, 10)
    assert isinstance(prescription, MultipleRepeatPrescription)
    assert prescription.interval == 20
    assert prescription.site_selector == PatchCutting(0.1, 1.0)
    assert prescription.additional_site_selector == CompleteStand()
    assert [(r.requested, r.rounded_up_to, r.line_number) for r in session.rounded_intervals] == [
        (15, 20, 5)
    ]


def test_duplicate_prescription_name_cites_first_line(session_for):
    session = session_for(
        """
        Prescription P1
        StandRanking Random
        SiteSelection Complete
        CohortsRemoved ClearCut
        Prescription P1
        StandRanking Random
        SiteSelection Complete
        CohortsRemoved ClearCut
        """
    )
    with pytest.raises(InputValueError) as excinfo:
        read_prescriptions(session, 10)
    assert excinfo.value.line_number == 5
    assert excinfo.value.message == "The name P1 was previously used on line 1"


def test_negative_min_time_since_damage(session_for):
    session = session_for(
        """
        Prescription P1
        StandRanking Random
        SiteSelection Complete
        MinTimeSinceDamage -1
        CohortsRemoved ClearCut
        """
    )
    with pytest.raises(InputValueError) as excinfo:
        read_prescriptions(session, 10)
    assert excinfo.value.line_number == 4


def test_prevent_establishment_takes_no_value(session_for):
    session = session_for(
        """
        Prescription P1
        StandRanking Random
        SiteSelection Complete
        PreventEstablishment yes
        CohortsRemoved ClearCut
        """
    )
    with pytest.raises(InputValueError, match="Extra data after"):
        read_prescriptions(session, 10)


def test_plant_rejects_duplicates_and_unknown_species(session_for):
    template = """
        Prescription P1
        StandRanking Random
        SiteSelection Complete
        CohortsRemoved PlantOnly
        Plant {species}
        """
    with pytest.raises(InputValueError, match="pinubank appears more than once") as excinfo:
        read_prescriptions(session_for(template.format(species="pinubank pinubank")), 10)
    assert excinfo.value.line_number == 5
    with pytest.raises(InputValueError, match="tsugcana is not a species name"):
        read_prescriptions(session_for(template.format(species="tsugcana")), 10)


def test_plant_requires_species(session_for):
    session = session_for(
        """
        Prescription P1
        StandRanking Random
        SiteSelection Complete
        CohortsRemoved PlantOnly
        Plant
        """
    )
    with pytest.raises(InputFormatError, match="Missing value for Plant"):
        read_prescriptions(session, 10)


def test_repeat_interval_must_be_positive(session_for):
    session = session_for(
        """
        Prescription P1
        StandRanking Random
        SiteSelection Complete
        CohortsRemoved ClearCut
        SingleRepeat 0
        CohortsRemoved ClearCut
        """
    )
    with pytest.raises(InputValueError, match="must be > 0") as excinfo:
        read_prescriptions(session, 10)
    assert excinfo.value.line_number == 5


def test_prescription_model_validates_interval():
    with pytest.raises(ValueError):
        MultipleRepeatPrescription(
            name="X",
            ranking_method=RandomRank(),
            site_selector=CompleteStand(),
            cohort_selector=ClearCut(),
            interval=0,
        )
