"""Common harvest-input exceptions."""

from __future__ import annotations

from collections.abc import Sequence


class HarvestInputError(ValueError):
    """Raised when harvest input text cannot be turned into parameters.

    Attributes
    ----------
    message:
        Human-readable description of the problem.
    line_number:
        1-based line in the input text, or ``None`` until the reader stamps it.
    value:
        The offending word, when there is one.
    choices:
        Valid alternatives for keyword errors (empty otherwise).
    """

    def __init__(
        self,
        message: str,
        *,
        line_number: int | None = None,
        value: str | None = None,
        choices: Sequence[str] = (),
    ) -> None:
        super().__init__(message)
        self.message = message
        self.line_number = line_number
        self.value = value
        self.choices = tuple(choices)

    def at_line(self, line_number: int) -> "HarvestInputError":
        """Attach ``line_number`` unless a more specific line is already known."""
        if self.line_number is None:
            self.line_number = line_number
        return self

    def __str__(self) -> str:
        text = self.message
        if self.line_number is not None:
            text = f"line {self.line_number}: {text}"
        if self.choices:
            listing = "\n".join(f"  {choice}" for choice in self.choices)
            text = f"{text}\nValid values:\n{listing}"
        return text


class InputFormatError(HarvestInputError):
    """A word could not be converted to the expected scalar type."""


class InputValueError(HarvestInputError):
    """A well-formed value violates a harvest-domain constraint."""


__all__ = ["HarvestInputError", "InputFormatError", "InputValueError"]
