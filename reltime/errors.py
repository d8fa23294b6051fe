"""Errors raised while reading duration literals.

Every error derives from ``ParseError``, itself a ``ValueError``, so callers
can catch the whole family or a single kind.
"""

from typing_extensions import override


class ParseError(ValueError):
    """A duration literal could not be read.

    Attributes:
        text: The literal exactly as the caller supplied it
    """

    reason: str = "invalid duration"

    def __init__(self, text: str, reason: str | None = None):
        self.text: str = text
        if reason is not None:
            self.reason = reason
        super().__init__(text, self.reason)

    @override
    def __str__(self) -> str:
        return f"{self.reason}: {self.text!r}"


class EmptyInputError(ParseError):
    reason = "empty duration"


class NoDigitsError(ParseError):
    reason = "no digits in duration part"


class MissingUnitError(ParseError):
    reason = "missing unit in duration"


class UnknownUnitError(ParseError):
    """The unit token is not one of ``reltime.parse.UNITS``.

    Attributes:
        unit: The offending token
    """

    def __init__(self, text: str, unit: str):
        self.unit: str = unit
        super().__init__(text, f"unknown unit {unit!r} in duration")


class DurationOverflowError(ParseError):
    reason = "duration out of range"
