from __future__ import annotations

import pytest

from harvestrx import InputParametersParser, load_parameters
from harvestrx.core import InputFormatError, InputValueError
from harvestrx.io import LineReader
from harvestrx.model import (
    ClearCut,
    CompleteStand,
    InclusionRequirement,
    Prescription,
    RandomRank,
    RoundedInterval,
    SingleRepeatPrescription,
)
from harvestrx.scenario import Scenario, ScenarioClock

P1 = """
Prescription P1
StandRanking Random
SiteSelection Complete
CohortsRemoved ClearCut
"""


def _line_of(text: str, prefix: str) -> int:
    for number, line in enumerate(text.splitlines(), start=1):
        if line.strip().startswith(prefix):
            return number
    raise AssertionError(prefix)


def test_minimal_file_spans_the_scenario(parser, harvest_text):
    result = parser.parse(harvest_text(P1, "1  P1  50%"))
    parameters = result.parameters
    assert parameters.timestep == 10
    (prescription,) = parameters.prescriptions
    assert type(prescription) is Prescription
    assert prescription.ranking_method == RandomRank()
    assert prescription.site_selector == CompleteStand()
    assert prescription.cohort_selector == ClearCut()
    (area,) = parameters.management_areas
    assert area.map_code == 1
    (entry,) = area.applied
    assert entry.prescription is prescription
    assert entry.percentage_to_harvest == pytest.approx(0.50)
    assert (entry.begin_year, entry.end_year) == (0, 100)
    assert result.rounded_intervals == ()
    assert parameters.management_area_map == "./mgmt-areas.gis"
    assert parameters.stand_map == "./stands.gis"
    assert parameters.prescription_maps == "harvest/prescripts-{timestep}.gis"
    assert parameters.event_log == "harvest-event-log.csv"
    assert parameters.summary_log == "harvest-summary-log.csv"
    assert parameters.prescription("P1") is prescription
    assert parameters.prescription("P2") is None


def test_single_repeat_interval_is_rounded_up(parser, harvest_text):
    text = harvest_text(
        P1
        + """
        SingleRepeat 7
        CohortsRemoved ClearCut
        """,
        "1  P1  50%",
    )
    result = parser.parse(text)
    (prescription,) = result.parameters.prescriptions
    assert isinstance(prescription, SingleRepeatPrescription)
    assert prescription.interval == 10
    assert result.rounded_intervals == (RoundedInterval(7, 10, _line_of(text, "SingleRepeat")),)
    assert parser.rounded_repeat_intervals == result.rounded_intervals


def test_single_optional_forest_type_row_fails(parser, harvest_text):
    text = harvest_text(
        """
        Prescription P1
        StandRanking Random
        ForestTypeTable
        Optional  1-100  highest  abiebals
        SiteSelection Complete
        CohortsRemoved ClearCut
        """,
        "1  P1  50%",
    )
    with pytest.raises(InputValueError) as excinfo:
        parser.parse(text)
    assert excinfo.value.line_number == _line_of(text, "ForestTypeTable")


def test_forest_type_table_follows_other_requirements(parser, harvest_text):
    result = parser.parse(
        harvest_text(
            """
            Prescription P1
            StandRanking Economic
            abiebals 60 40
            MinimumAge 30
            ForestTypeTable
            Required  1-100  highest  abiebals
            SiteSelection Complete
            CohortsRemoved ClearCut
            """,
            "1  P1  50%",
        )
    )
    (prescription,) = result.parameters.prescriptions
    requirements = prescription.ranking_method.requirements
    assert len(requirements) == 2
    assert isinstance(requirements[-1], InclusionRequirement)


def test_parser_is_reusable(parser, harvest_text):
    rounded = harvest_text(P1 + "\nMultipleRepeat 15\n", "1  P1  50%")
    plain = harvest_text(P1, "1  P1  50%")
    assert len(parser.parse(rounded).rounded_intervals) == 1
    assert parser.parse(plain).rounded_intervals == ()
    assert parser.rounded_repeat_intervals == ()


def test_optional_header_lines_may_be_omitted(parser):
    text = "Timestep 5\n" + P1 + "HarvestImplementations\n2 P1 100% 10 20\n"
    parameters = parser.parse(LineReader.from_text(text)).parameters
    assert parameters.timestep == 5
    assert parameters.management_area_map is None
    assert parameters.event_log is None
    assert [area.map_code for area in parameters.management_areas] == [2]


def test_landis_data_must_match_extension(species):
    parser = InputParametersParser("Biomass Harvest", species)
    with pytest.raises(InputValueError) as excinfo:
        parser.parse('LandisData "Base Harvest"\nTimestep 10\nHarvestImplementations\n')
    assert excinfo.value.line_number == 1
    assert "Biomass Harvest" in excinfo.value.message


@pytest.mark.parametrize("value", ["0", "-10"])
def test_timestep_must_be_positive(parser, value):
    with pytest.raises(InputValueError, match="Timestep must be > 0"):
        parser.parse(f"Timestep {value}\nHarvestImplementations\n")


def test_timestep_is_required(parser):
    with pytest.raises(InputFormatError, match='Expected "Timestep" but found "Prescription"'):
        parser.parse(P1)


def test_missing_implementations_section(parser):
    with pytest.raises(InputFormatError, match='Expected "HarvestImplementations" but reached the end'):
        parser.parse("Timestep 10\n" + P1)


def test_trailing_data_is_rejected(parser, harvest_text):
    text = harvest_text(P1, "1  P1  50%") + "Timestep 10\n"
    with pytest.raises(InputValueError, match="Found unexpected data after") as excinfo:
        parser.parse(text)
    assert excinfo.value.line_number == len(text.splitlines())


def test_errors_render_with_line_numbers(parser, harvest_text):
    text = harvest_text(P1, "1  P2  50%")
    with pytest.raises(InputValueError) as excinfo:
        parser.parse(text)
    assert str(excinfo.value) == f"line {_line_of(text, '1  P2')}: P2 is an unknown prescription name"


def test_load_parameters_uses_scenario(tmp_path, harvest_text):
    path = tmp_path / "harvest.txt"
    path.write_text(harvest_text(P1, "1  P1  50%"), encoding="utf-8")
    scenario = Scenario(name="demo", start_year=10, end_year=60, species=["abiebals"])
    result = load_parameters(path, scenario)
    (area,) = result.parameters.management_areas
    (entry,) = area.applied
    assert (entry.begin_year, entry.end_year) == (10, 60)


def test_for_scenario_copies_context():
    scenario = Scenario(name="demo", extension="Base Harvest", end_year=50, species=["a", "b"])
    parser = InputParametersParser.for_scenario(scenario)
    assert parser.clock == ScenarioClock(0, 50)
    assert "b" in parser.species
