"""Top-level harvest parameter parser."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from harvestrx.io.reader import LineReader
from harvestrx.io.values import parse_int, parse_word
from harvestrx.model.parameters import InputParameters
from harvestrx.model.prescriptions import RoundedInterval
from harvestrx.parsing import names
from harvestrx.parsing.implementations import read_harvest_implementations
from harvestrx.parsing.prescriptions import read_prescriptions
from harvestrx.parsing.session import ParseSession
from harvestrx.scenario.contract.models import Scenario
from harvestrx.scenario.registry import ScenarioClock, SpeciesDataset


@dataclass(frozen=True)
class ParseResult:
    """Parsed parameters plus the repeat intervals that had to be rounded up."""

    parameters: InputParameters
    rounded_intervals: tuple[RoundedInterval, ...] = ()


class InputParametersParser:
    """Reads harvest parameters from text input.

    Parameters
    ----------
    extension_name:
        Expected value of an optional leading ``LandisData`` line.
    species:
        Registry that every species name in the input is looked up in.
    clock:
        Scenario start/end years bounding harvest implementation windows.

    Notes
    -----
    Each :meth:`parse` call works on its own :class:`ParseSession`, so one
    instance can be reused for many files. Do not call :meth:`parse` on the
    same instance from several threads at once: :attr:`rounded_repeat_intervals`
    reflects whichever call finished last.
    """

    def __init__(
        self,
        extension_name: str,
        species: SpeciesDataset,
        clock: ScenarioClock | None = None,
    ) -> None:
        self.extension_name = extension_name
        self.species = species
        self.clock = clock or ScenarioClock()
        self._rounded_intervals: tuple[RoundedInterval, ...] = ()

    @classmethod
    def for_scenario(cls, scenario: Scenario) -> "InputParametersParser":
        return cls(scenario.extension, scenario.species_dataset(), scenario.clock())

    @property
    def rounded_repeat_intervals(self) -> tuple[RoundedInterval, ...]:
        """Repeat intervals rounded up during the most recent :meth:`parse` call."""
        return self._rounded_intervals

    def parse(self, source: LineReader | str) -> ParseResult:
        """Parse ``source`` (a reader or the full input text)."""
        self._rounded_intervals = ()
        reader = source if isinstance(source, LineReader) else LineReader.from_text(source)
        session = ParseSession(reader, self.species, self.clock)
        parameters = self._read_parameters(session)
        self._rounded_intervals = tuple(session.rounded_intervals)
        return ParseResult(parameters, self._rounded_intervals)

    def _read_landis_data(self, session: ParseSession) -> None:
        line_number = session.line_number
        value = session.read_optional_var(names.LANDIS_DATA, parse_word)
        if value is not None and value != self.extension_name:
            raise session.error(
                f'Expected "{self.extension_name}" for {names.LANDIS_DATA} but found "{value}"',
                value=value,
                line_number=line_number,
            )

    def _read_parameters(self, session: ParseSession) -> InputParameters:
        self._read_landis_data(session)

        line_number = session.line_number
        timestep = session.read_var(names.TIMESTEP, parse_int)
        if timestep <= 0:
            raise session.error(
                f"{names.TIMESTEP} must be > 0", value=str(timestep), line_number=line_number
            )
        management_area_map = session.read_optional_var(names.MANAGEMENT_AREAS, parse_word)
        stand_map = session.read_optional_var(names.STANDS, parse_word)

        prescriptions = read_prescriptions(session, timestep)
        management_areas = read_harvest_implementations(session, prescriptions)

        prescription_maps = session.read_optional_var(names.PRESCRIPTION_MAPS, parse_word)
        event_log = session.read_optional_var(names.EVENT_LOG, parse_word)
        summary_log = session.read_optional_var(names.SUMMARY_LOG, parse_word)
        session.check_no_data_after("the harvest implementations and output file parameters")

        return InputParameters(
            timestep=timestep,
            prescriptions=tuple(prescriptions),
            management_areas=management_areas,
            management_area_map=management_area_map,
            stand_map=stand_map,
            prescription_maps=prescription_maps,
            event_log=event_log,
            summary_log=summary_log,
        )


def load_parameters(path: str | Path, scenario: Scenario) -> ParseResult:
    """Parse the harvest parameter file at ``path`` against ``scenario``."""
    parser = InputParametersParser.for_scenario(scenario)
    return parser.parse(LineReader.from_path(path))


__all__ = ["InputParametersParser", "ParseResult", "load_parameters"]
