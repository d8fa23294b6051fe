"""Render durations and the distance between two moments as short phrases.

The phrase is built from the coarsest non-zero units down, e.g.
``"4 minutes 2 seconds"`` or ``"1 day, 1 hour"``.
"""

from datetime import datetime, timedelta, timezone, tzinfo
from typing import Any, TypeAlias

from dateutil.parser import isoparse

from reltime.magnitude import MAGNITUDES, find_bucket
from reltime.util import DEFAULT_PARTS, DEFAULT_SEPARATOR, MICROSECOND, SECOND

Timestamp: TypeAlias = datetime | int | str


def format_duration(
    diff: int | timedelta,
    max_parts: int = DEFAULT_PARTS,
    separator: str = DEFAULT_SEPARATOR,
) -> str:
    """Return a phrase such as ``"4 minutes 2 seconds"`` for a duration.

    Walks from the coarsest magnitude that fits ``diff`` toward seconds,
    emitting up to ``max_parts`` non-zero parts. Units that come out as zero
    are skipped without using up a part. Months are 30 days and years are
    12 such months.

    Args:
        diff: Nanoseconds (int) or a ``timedelta``. The sign is ignored.
        max_parts: Maximum number of parts to emit. Non-positive yields ``""``.
        separator: String placed between parts

    Returns:
        ``"now"`` for anything shorter than one second, otherwise the parts
        joined coarsest first.

    Example:
        >>> from reltime.util import DAY, HOUR, MINUTE, SECOND
        >>> format_duration(4 * MINUTE + 2 * SECOND)
        '4 minutes 2 seconds'
        >>> format_duration(DAY + HOUR + MINUTE + SECOND, 4, ", ")
        '1 day, 1 hour, 1 minute, 1 second'
    """
    remaining = abs(_coerce_duration(diff))
    if remaining < SECOND:
        return "now"

    parts: list[str] = []
    index = find_bucket(remaining)
    while len(parts) < max_parts and index >= 0:
        mag = MAGNITUDES[index]
        value = mag.value(remaining)
        if value > 0:
            parts.append(mag.label(value))
            remaining -= value * mag.divisor
        index -= 1

    return separator.join(parts)


def duration_string(diff: int | timedelta) -> str:
    """Format ``diff`` with two parts separated by a space."""
    return format_duration(diff, DEFAULT_PARTS, DEFAULT_SEPARATOR)


def relative_time(
    t1: Timestamp,
    t2: Timestamp,
    max_parts: int = DEFAULT_PARTS,
    separator: str = DEFAULT_SEPARATOR,
) -> str:
    """Describe how far apart two moments are, regardless of their order.

    Accepts timezone-aware or naive datetimes, integer Unix timestamps
    (seconds) and ISO-8601 strings. Integers and strings without an offset
    are treated as UTC.

    Raises:
        TypeError: If a timestamp has an unsupported type, or one side is
            timezone-aware and the other naive
    """
    start = _coerce_timestamp(t1, "t1")
    end = _coerce_timestamp(t2, "t2")
    if (start.tzinfo is None) != (end.tzinfo is None):
        raise TypeError(
            f"Cannot compare a timezone-aware timestamp with a naive one.\n"
            f"Got: t1={start!r}, t2={end!r}\n"
            f"Hint: Give both sides a tzinfo, e.g. tzinfo=timezone.utc"
        )
    delta = start - end if start > end else end - start
    return format_duration(delta, max_parts, separator)


def rel_time(t1: Timestamp, t2: Timestamp) -> str:
    return relative_time(t1, t2, DEFAULT_PARTS, DEFAULT_SEPARATOR)


def time_since(t: Timestamp) -> str:
    """Describe how long ago (or ahead) ``t`` is, using the clock at call time."""
    moment = _coerce_timestamp(t, "t")
    return relative_time(_now(moment.tzinfo), moment)


def _now(tz: tzinfo | None) -> datetime:
    return datetime.now(tz)


def _coerce_duration(diff: Any) -> int:
    """Convert a duration argument to integer nanoseconds.

    Accepts:
    - int: Nanoseconds, passed through as-is
    - timedelta: Converted exactly (microsecond resolution)

    Raises:
        TypeError: If diff is an unsupported type
    """
    if isinstance(diff, int):
        return diff
    if isinstance(diff, timedelta):
        seconds = diff.days * 86400 + diff.seconds
        return seconds * SECOND + diff.microseconds * MICROSECOND
    raise TypeError(
        f"Duration must be int (nanoseconds) or timedelta.\n"
        f"Got {type(diff).__name__!r}: {diff!r}\n"
        f"Examples:\n"
        f"  format_duration(90 * SECOND)\n"
        f"  format_duration(timedelta(minutes=90))\n"
        f"  format_duration(parse_duration('1h30m'))"
    )


def _coerce_timestamp(value: Any, name: str) -> datetime:
    """Convert a timestamp argument to a datetime.

    Accepts:
    - datetime: Passed through as-is (aware or naive)
    - int: Unix timestamp in seconds, mapped to UTC
    - str: ISO-8601, parsed with dateutil; no offset means UTC

    Raises:
        TypeError: If value is an unsupported type
        ValueError: If a string is not valid ISO-8601
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, int):
        return datetime.fromtimestamp(value, tz=timezone.utc)
    if isinstance(value, str):
        parsed = isoparse(value)
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        return parsed
    raise TypeError(
        f"Timestamp {name} must be datetime, int, or str.\n"
        f"Got {type(value).__name__!r}: {value!r}\n"
        f"Examples:\n"
        f"  rel_time(datetime(2025,1,1,tzinfo=timezone.utc), now)  # datetime\n"
        f"  rel_time(1735689600, 1735693200)  # int (Unix seconds)\n"
        f"  rel_time('2025-01-01T00:00:00Z', '2025-01-01T01:00:00Z')  # ISO-8601"
    )
