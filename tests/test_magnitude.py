"""Tests for the magnitude table used by the formatter."""

from dataclasses import FrozenInstanceError

import pytest

from reltime import MAGNITUDES, Magnitude
from reltime.magnitude import find_bucket
from reltime.util import DAY, HOUR, INT64_MAX, MINUTE, MONTH, SECOND, WEEK, YEAR


def test_unit_constants():
    """Test that calendar-free units build on each other."""
    assert MINUTE == 60 * SECOND
    assert DAY == 24 * HOUR
    assert WEEK == 7 * DAY
    assert MONTH == 30 * DAY
    assert YEAR == 12 * MONTH


def test_table_is_ordered_by_threshold():
    thresholds = [mag.threshold for mag in MAGNITUDES]
    assert thresholds == sorted(thresholds)
    assert thresholds[-1] == INT64_MAX


def test_table_units_from_seconds_to_years():
    names = [mag.name for mag in MAGNITUDES]
    assert names == ["second", "minute", "hour", "day", "week", "month", "year"]


def test_only_last_entry_is_unbounded():
    """Test that every magnitude but years wraps around."""
    assert all(mag.modulus is not None for mag in MAGNITUDES[:-1])
    assert MAGNITUDES[-1].modulus is None
    assert MAGNITUDES[-1].divisor == YEAR


def test_magnitude_is_immutable():
    with pytest.raises(FrozenInstanceError):
        MAGNITUDES[0].name = "sec"  # type: ignore[misc]


def test_magnitude_rejects_non_positive_divisor():
    with pytest.raises(ValueError, match="divisor must be positive"):
        Magnitude(threshold=MINUTE, name="second", divisor=0, modulus=60)


def test_magnitude_rejects_non_positive_modulus():
    with pytest.raises(ValueError, match="modulus must be positive"):
        Magnitude(threshold=MINUTE, name="second", divisor=SECOND, modulus=0)


def test_value_applies_divisor_then_modulus():
    minutes = MAGNITUDES[1]
    assert minutes.value(2 * HOUR + 5 * MINUTE + 30 * SECOND) == 5


def test_value_without_modulus_keeps_counting():
    years = MAGNITUDES[-1]
    assert years.value(30 * YEAR + MONTH) == 30


@pytest.mark.parametrize(
    ("value", "expected"),
    [(1, "1 hour"), (-1, "-1 hour"), (0, "0 hours"), (2, "2 hours")],
)
def test_label_pluralizes_unless_one(value, expected):
    assert MAGNITUDES[2].label(value) == expected


def test_str_shows_unit_and_bounds():
    text = str(MAGNITUDES[0])
    assert "second" in text
    assert "% 60" in text
    assert "%" not in str(MAGNITUDES[-1])


@pytest.mark.parametrize(
    ("diff", "expected"),
    [
        (0, 0),
        (MINUTE - 1, 0),
        (MINUTE, 1),
        (HOUR, 2),
        (DAY + HOUR, 3),
        (WEEK, 4),
        (MONTH, 5),
        (YEAR, 6),
        (INT64_MAX, 6),
        (10**30, 6),
    ],
)
def test_find_bucket(diff, expected):
    """Test that the first threshold above diff wins, clamped to years."""
    assert find_bucket(diff) == expected
