"""Line-oriented reader for harvest parameter text.

Comments start with ``>>`` and run to the end of the line. Blank lines (after
comment stripping) are dropped, but every retained line keeps its 1-based
position in the original text so errors can point at it.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import TypeVar

from harvestrx.core.errors import HarvestInputError, InputFormatError, InputValueError

COMMENT_MARKER = ">>"

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class InputLine:
    """A trimmed, comment-free input line and where it came from."""

    number: int
    text: str


def _clean(raw: str) -> str:
    return raw.partition(COMMENT_MARKER)[0].strip()


def _split_lines(text: str) -> list[str]:
    """Split on line feeds only; other Unicode line breaks stay inside their line."""
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


class LineReader:
    """Sequential access to the meaningful lines of a harvest input file."""

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines: list[InputLine] = []
        last = 0
        for number, raw in enumerate(lines, start=1):
            last = number
            text = _clean(raw.rstrip("\r\n"))
            if text:
                self._lines.append(InputLine(number, text))
        self._last_line_number = last
        self._index = 0

    @classmethod
    def from_text(cls, text: str) -> "LineReader":
        return cls(_split_lines(text))

    @classmethod
    def from_path(cls, path: str | Path) -> "LineReader":
        data = Path(path).read_bytes()
        try:
            text = data.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise InputFormatError(
                f"Byte 0x{data[exc.start]:02x} at offset {exc.start} is not valid UTF-8 text",
                line_number=data.count(b"\n", 0, exc.start) + 1,
            ) from None
        return cls(_split_lines(text))

    @property
    def at_end(self) -> bool:
        return self._index >= len(self._lines)

    @property
    def current(self) -> InputLine | None:
        if self.at_end:
            return None
        return self._lines[self._index]

    @property
    def line_number(self) -> int:
        """Line number of the current line (the last line once input is exhausted)."""
        line = self.current
        return line.number if line is not None else self._last_line_number

    @property
    def current_line(self) -> str:
        line = self.current
        return line.text if line is not None else ""

    @property
    def current_name(self) -> str:
        """First word of the current line, ``""`` at end of input."""
        if self.at_end:
            return ""
        return LineCursor(self.current_line, self.line_number).read_word()

    def cursor(self) -> "LineCursor":
        return LineCursor(self.current_line, self.line_number)

    def advance(self) -> None:
        if not self.at_end:
            self._index += 1


class LineCursor:
    """Word-by-word cursor over a single input line."""

    def __init__(self, text: str, line_number: int, index: int = 0) -> None:
        self.text = text
        self.line_number = line_number
        self.index = index

    @property
    def at_end(self) -> bool:
        return self.index >= len(self.text)

    def skip_whitespace(self) -> None:
        while not self.at_end and self.text[self.index].isspace():
            self.index += 1

    def rest(self) -> str:
        return self.text[self.index :].strip()

    def read_word(self) -> str:
        """Read the next word; a double-quoted string counts as one word."""
        self.skip_whitespace()
        if self.at_end:
            return ""
        if self.text[self.index] == '"':
            closing = self.text.find('"', self.index + 1)
            if closing == -1:
                raise InputFormatError(
                    "Missing closing quote", line_number=self.line_number, value=self.rest()
                )
            word = self.text[self.index + 1 : closing]
            self.index = closing + 1
            return word
        start = self.index
        while not self.at_end and not self.text[self.index].isspace():
            self.index += 1
        return self.text[start : self.index]

    def read(self, parse: Callable[[str], T], label: str) -> T:
        """Read the next word and convert it with ``parse``."""
        word = self.read_word()
        if word == "":
            raise InputFormatError(f"Missing value for {label}", line_number=self.line_number)
        try:
            return parse(word)
        except HarvestInputError as exc:
            raise exc.at_line(self.line_number)

    def expect_end(self, context: str) -> None:
        """Fail if anything besides whitespace remains after ``context``."""
        self.skip_whitespace()
        if not self.at_end:
            raise InputValueError(
                f"Extra data after {context}: {self.rest()}",
                line_number=self.line_number,
                value=self.rest(),
            )


__all__ = ["COMMENT_MARKER", "InputLine", "LineReader", "LineCursor"]
