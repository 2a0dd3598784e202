"""Per-parse state and directive-level reading helpers."""

from __future__ import annotations

from collections.abc import Callable, Collection
from dataclasses import dataclass, field
from typing import TypeVar

from harvestrx.core.errors import InputFormatError, InputValueError
from harvestrx.io.reader import LineCursor, LineReader
from harvestrx.model.prescriptions import RoundedInterval
from harvestrx.scenario.registry import ScenarioClock, SpeciesDataset

T = TypeVar("T")


@dataclass(slots=True)
class ParseSession:
    """Everything one parse invocation reads from or accumulates into.

    A fresh session is created for every call to
    :meth:`harvestrx.parsing.InputParametersParser.parse`; nothing here
    outlives the call except what the parser copies into its result.
    """

    reader: LineReader
    species: SpeciesDataset
    clock: ScenarioClock
    rounded_intervals: list[RoundedInterval] = field(default_factory=list)

    @classmethod
    def from_text(
        cls, text: str, species: SpeciesDataset, clock: ScenarioClock | None = None
    ) -> "ParseSession":
        return cls(LineReader.from_text(text), species, clock or ScenarioClock())

    @property
    def line_number(self) -> int:
        return self.reader.line_number

    @property
    def current_name(self) -> str:
        return self.reader.current_name

    def at_table_end(self, follow: Collection[str]) -> bool:
        """True at end of input or when the current line starts a follow keyword."""
        return self.reader.at_end or self.reader.current_name in follow

    def error(
        self,
        message: str,
        *,
        value: str | None = None,
        choices: Collection[str] = (),
        line_number: int | None = None,
    ) -> InputValueError:
        """Build a value error pointing at ``line_number`` (default: the current line)."""
        return InputValueError(
            message,
            line_number=line_number if line_number is not None else self.line_number,
            value=value,
            choices=tuple(choices),
        )

    def expect_name(self, name: str) -> LineCursor:
        """Require the current line to start with ``name``; return a cursor after it."""
        if self.reader.at_end:
            raise InputFormatError(
                f'Expected "{name}" but reached the end of input', line_number=self.line_number
            )
        cursor = self.reader.cursor()
        found = cursor.read_word()
        if found != name:
            raise InputFormatError(
                f'Expected "{name}" but found "{found}"',
                line_number=self.line_number,
                value=found,
            )
        return cursor

    def read_name(self, name: str) -> None:
        cursor = self.expect_name(name)
        cursor.expect_end(f'the name "{name}"')
        self.reader.advance()

    def read_optional_name(self, name: str) -> bool:
        if self.current_name != name:
            return False
        self.read_name(name)
        return True

    def read_var(self, name: str, parse: Callable[[str], T]) -> T:
        """Read ``<name> <value>`` where the value is a single word."""
        return self.read_var_with(name, lambda cursor: cursor.read(parse, name))

    def read_optional_var(self, name: str, parse: Callable[[str], T]) -> T | None:
        if self.current_name != name:
            return None
        return self.read_var(name, parse)

    def read_var_with(self, name: str, read: Callable[[LineCursor], T]) -> T:
        """Read ``<name> ...`` with a custom reader for the rest of the line."""
        cursor = self.expect_name(name)
        value = read(cursor)
        cursor.expect_end(f"the {name} parameter")
        self.reader.advance()
        return value

    def check_no_data_after(self, context: str) -> None:
        if not self.reader.at_end:
            raise InputValueError(
                f"Found unexpected data after {context}: {self.reader.current_line}",
                line_number=self.line_number,
                value=self.reader.current_line,
            )

    def require_species(self, name: str, line_number: int | None = None) -> str:
        if name not in self.species:
            raise InputValueError(
                f"{name} is not a species name",
                line_number=line_number or self.line_number,
                value=name,
            )
        return name


__all__ = ["ParseSession"]
