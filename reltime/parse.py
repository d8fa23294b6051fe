"""Read compact duration literals such as ``"1h30m"``, ``"0.5h"`` or ``"-1d"``.

Grammar::

    duration := sign? ("0" | part+)
    part     := digits? ("." digits?)? unit
    sign     := "-" | "+"

Each part needs at least one digit on either side of the point. Whole units
are accumulated as exact integers; fractions are scaled in floating point,
which keeps large whole values exact while staying accurate to the
nanosecond for fractions of the largest unit. The fraction alone is
rounded to the nearest nanosecond, ties to even, so ``"0.5ns"`` and
``"1.5ns"`` both drop their half.
"""

import logging
from datetime import timedelta

from reltime.errors import (
    DurationOverflowError,
    EmptyInputError,
    MissingUnitError,
    NoDigitsError,
    ParseError,
    UnknownUnitError,
)
from reltime.util import (
    DAY,
    HOUR,
    INT64_MAX,
    MICROSECOND,
    MILLISECOND,
    MINUTE,
    NANOSECOND,
    SECOND,
    WEEK,
)

logger = logging.getLogger(__name__)

UNITS: dict[str, int] = {
    "ns": NANOSECOND,
    "us": MICROSECOND,
    "µs": MICROSECOND,  # micro sign
    "μs": MICROSECOND,  # greek small letter mu
    "ms": MILLISECOND,
    "s": SECOND,
    "m": MINUTE,
    "h": HOUR,
    "d": DAY,
    "w": WEEK,
}


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


class _Scanner:
    """Single forward pass over a duration literal.

    ``pos`` indexes the first unconsumed character; nothing is ever re-read.
    """

    def __init__(self, text: str):
        self.text: str = text
        self.pos: int = 0

    @property
    def rest(self) -> str:
        return self.text[self.pos :]

    @property
    def done(self) -> bool:
        return self.pos >= len(self.text)

    def peek(self) -> str:
        return "" if self.done else self.text[self.pos]

    def sign(self) -> bool:
        """Consume an optional sign and return True if it was ``-``."""
        char = self.peek()
        if char in ("-", "+"):
            self.pos += 1
            return char == "-"
        return False

    def integer(self) -> tuple[int, bool]:
        """Consume ``[0-9]*`` and return (value, consumed_any)."""
        start = self.pos
        value = 0
        while _is_digit(self.peek()):
            value = value * 10 + ord(self.text[self.pos]) - ord("0")
            if value > INT64_MAX:
                raise DurationOverflowError(self.text)
            self.pos += 1
        return value, self.pos != start

    def fraction(self) -> tuple[int, float, bool]:
        """Consume ``[0-9]*`` after a point and return (numerator, scale, consumed_any).

        Digits that no longer fit are skipped without error; only precision is lost.
        """
        start = self.pos
        numerator = 0
        scale = 1.0
        overflow = False
        while _is_digit(self.peek()):
            if not overflow:
                candidate = numerator * 10 + ord(self.text[self.pos]) - ord("0")
                if candidate > INT64_MAX:
                    overflow = True
                else:
                    numerator = candidate
                    scale *= 10
            self.pos += 1
        return numerator, scale, self.pos != start

    def unit(self) -> int:
        """Consume the unit token and return its size in nanoseconds."""
        start = self.pos
        while not self.done:
            char = self.text[self.pos]
            if char == "." or _is_digit(char):
                break
            self.pos += 1
        token = self.text[start : self.pos]
        if not token:
            raise MissingUnitError(self.text)
        try:
            return UNITS[token]
        except KeyError:
            raise UnknownUnitError(self.text, token) from None

    def part(self) -> int:
        """Consume one ``digits? ("." digits?)? unit`` part and return its nanoseconds."""
        whole, has_whole = self.integer()

        numerator, scale, has_fraction = 0, 1.0, False
        if self.peek() == ".":
            self.pos += 1
            numerator, scale, has_fraction = self.fraction()

        if not (has_whole or has_fraction):
            raise NoDigitsError(self.text)

        unit = self.unit()

        if whole > INT64_MAX // unit:
            raise DurationOverflowError(self.text)
        value = whole * unit

        if numerator > 0:
            value += round(float(numerator) * (float(unit) / scale))
            if value > INT64_MAX:
                raise DurationOverflowError(self.text)
        return value


def parse_duration(text: str) -> int:
    """Parse a duration literal and return its signed length in nanoseconds.

    Args:
        text: Literal such as ``"300ms"``, ``"-1.5h"`` or ``"2h45m"``.
            Units: ns, us (also µs/μs), ms, s, m, h, d, w.

    Returns:
        Signed nanosecond count, within the signed 64-bit range

    Raises:
        EmptyInputError: If ``text`` is empty or only a sign
        NoDigitsError: If a part has no digits (e.g. ``".s"``)
        MissingUnitError: If digits are not followed by a unit
        UnknownUnitError: If the unit token is not recognized
        DurationOverflowError: If the total leaves the signed 64-bit range

    Example:
        >>> parse_duration("1h30m")
        5400000000000
        >>> parse_duration("-0.5s")
        -500000000
    """
    try:
        return _parse(text)
    except ParseError as e:
        logger.debug("Rejected duration literal %r: %s", text, e.reason)
        raise


def _parse(text: str) -> int:
    if text == "":
        raise EmptyInputError(text)

    scanner = _Scanner(text)
    negative = scanner.sign()

    # "0" needs no unit, whatever the sign
    if scanner.rest == "0":
        return 0
    if scanner.done:
        raise EmptyInputError(text, "no duration after sign")

    total = 0
    while not scanner.done:
        total += scanner.part()
        if total > INT64_MAX:
            raise DurationOverflowError(text)

    return -total if negative else total


def parse_timedelta(text: str) -> timedelta:
    """Parse a duration literal into a ``timedelta``.

    Precision below one microsecond is truncated toward zero.

    Example:
        >>> parse_timedelta("1d2h")
        datetime.timedelta(days=1, seconds=7200)
    """
    nanos = parse_duration(text)
    micros = abs(nanos) // MICROSECOND
    return timedelta(microseconds=-micros if nanos < 0 else micros)
