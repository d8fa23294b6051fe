"""Utility constants for reltime.

Time unit constants represent durations in nanoseconds.
These are used throughout the API for consistent time representation.
"""

# Time unit constants (all values in nanoseconds)
NANOSECOND = 1
MICROSECOND = 1_000
MILLISECOND = 1_000_000
SECOND = 1_000_000_000
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE
DAY = 24 * HOUR
WEEK = 7 * DAY
# Approximations, not calendar math
MONTH = 30 * DAY
YEAR = 12 * MONTH

# Durations are bounded by the signed 64-bit range
INT64_MAX = (1 << 63) - 1

# Defaults for the short-form formatters
DEFAULT_PARTS = 2
DEFAULT_SEPARATOR = " "
