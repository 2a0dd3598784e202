from __future__ import annotations

import textwrap

import pytest

from harvestrx.parsing import InputParametersParser, ParseSession
from harvestrx.scenario import ScenarioClock, SpeciesDataset

SPECIES = ("abiebals", "acerrubr", "acersacc", "pinubank", "poputrem", "querrubr")


@pytest.fixture
def species() -> SpeciesDataset:
    return SpeciesDataset(SPECIES)


@pytest.fixture
def clock() -> ScenarioClock:
    return ScenarioClock(start_year=0, end_year=100)


@pytest.fixture
def session_for(species, clock):
    """Build a ParseSession over dedented text."""

    def _build(text: str) -> ParseSession:
        return ParseSession.from_text(textwrap.dedent(text).strip("\n"), species, clock)

    return _build


@pytest.fixture
def parser(species, clock) -> InputParametersParser:
    return InputParametersParser("Base Harvest", species, clock)


@pytest.fixture
def harvest_text():
    """Wrap prescription and implementation snippets in a complete input file."""

    def _build(prescriptions: str, implementations: str = "", timestep: int = 10) -> str:
        header = textwrap.dedent(
            f"""\
            LandisData  "Base Harvest"
            Timestep    {timestep}
            ManagementAreas  ./mgmt-areas.gis
            Stands           ./stands.gis
            """
        )
        footer = textwrap.dedent(
            """\
            PrescriptionMaps  harvest/prescripts-{timestep}.gis
            EventLog          harvest-event-log.csv
            SummaryLog        harvest-summary-log.csv
            """
        )
        return (
            header
            + textwrap.dedent(prescriptions).strip("\n")
            + "\n\nHarvestImplementations\n"
            + textwrap.dedent(implementations).strip("\n")
            + "\n\n"
            + footer
        )

    return _build
