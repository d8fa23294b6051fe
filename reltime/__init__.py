from importlib.resources import files

from .errors import (
    DurationOverflowError,
    EmptyInputError,
    MissingUnitError,
    NoDigitsError,
    ParseError,
    UnknownUnitError,
)
from .format import (
    duration_string,
    format_duration,
    rel_time,
    relative_time,
    time_since,
)
from .magnitude import MAGNITUDES, Magnitude
from .parse import UNITS, parse_duration, parse_timedelta
from .util import (
    DAY,
    HOUR,
    MICROSECOND,
    MILLISECOND,
    MINUTE,
    MONTH,
    NANOSECOND,
    SECOND,
    WEEK,
    YEAR,
)

# Load documentation files for programmatic access by agents and code-aware tools
_docs_path = files(__package__) / "docs"
docs = {
    "readme": (_docs_path / "README.md").read_text(encoding="utf-8"),
    "api": (_docs_path / "API.md").read_text(encoding="utf-8"),
}

__all__ = [
    "format_duration",
    "duration_string",
    "relative_time",
    "rel_time",
    "time_since",
    "parse_duration",
    "parse_timedelta",
    "Magnitude",
    "MAGNITUDES",
    "UNITS",
    "ParseError",
    "EmptyInputError",
    "NoDigitsError",
    "MissingUnitError",
    "UnknownUnitError",
    "DurationOverflowError",
    "NANOSECOND",
    "MICROSECOND",
    "MILLISECOND",
    "SECOND",
    "MINUTE",
    "HOUR",
    "DAY",
    "WEEK",
    "MONTH",
    "YEAR",
    "docs",
]
