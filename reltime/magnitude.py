import bisect
from dataclasses import dataclass

from reltime.util import DAY, HOUR, INT64_MAX, MINUTE, MONTH, SECOND, WEEK, YEAR


@dataclass(frozen=True, kw_only=True)
class Magnitude:
    threshold: int
    name: str
    divisor: int
    modulus: int | None = None

    def __post_init__(self) -> None:
        if self.divisor <= 0:
            raise ValueError(
                f"Magnitude divisor must be positive, got {self.divisor} "
                f"for unit {self.name!r}"
            )
        if self.modulus is not None and self.modulus <= 0:
            raise ValueError(
                f"Magnitude modulus must be positive or None, got {self.modulus} "
                f"for unit {self.name!r}"
            )

    def __str__(self) -> str:
        """Human-friendly string showing the unit and its bounds."""
        modulus = "" if self.modulus is None else f" % {self.modulus}"
        return f"Magnitude({self.name}: < {self.threshold}ns, / {self.divisor}{modulus})"

    def value(self, diff: int) -> int:
        """Return how many whole units of this magnitude ``diff`` shows."""
        count = diff // self.divisor
        if self.modulus is not None:
            count %= self.modulus
        return count

    def label(self, value: int) -> str:
        """Render ``value`` with this unit, pluralized unless it is one."""
        if value in (1, -1):
            return f"{value} {self.name}"
        return f"{value} {self.name}s"


# Ascending by threshold; the last entry catches everything else.
MAGNITUDES: tuple[Magnitude, ...] = (
    Magnitude(threshold=MINUTE, name="second", divisor=SECOND, modulus=60),
    Magnitude(threshold=HOUR, name="minute", divisor=MINUTE, modulus=60),
    Magnitude(threshold=DAY, name="hour", divisor=HOUR, modulus=24),
    Magnitude(threshold=WEEK, name="day", divisor=DAY, modulus=7),
    Magnitude(threshold=MONTH, name="week", divisor=WEEK, modulus=7),
    Magnitude(threshold=YEAR, name="month", divisor=MONTH, modulus=12),
    Magnitude(threshold=INT64_MAX, name="year", divisor=YEAR),
)

_THRESHOLDS = [mag.threshold for mag in MAGNITUDES]


def find_bucket(diff: int) -> int:
    """Return the index of the coarsest magnitude worth showing for ``diff``.

    That is the first entry whose threshold strictly exceeds ``diff``,
    clamped to the last entry for durations beyond every threshold.
    """
    index = bisect.bisect_right(_THRESHOLDS, diff)
    return min(index, len(MAGNITUDES) - 1)
