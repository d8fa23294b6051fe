"""Tests for the package surface."""

import reltime


def test_all_names_resolve():
    for name in reltime.__all__:
        assert hasattr(reltime, name), name


def test_docs_are_bundled():
    assert reltime.docs["readme"].startswith("# reltime")
    assert "parse_duration" in reltime.docs["api"]


def test_units_cover_every_spelling_of_micro():
    micro = reltime.MICROSECOND
    assert {k for k, v in reltime.UNITS.items() if v == micro} == {"us", "µs", "μs"}
