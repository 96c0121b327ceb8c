# tests/test_time_scales.py

import random

import pytest

from precessol.reference import time_scales as ts


def test_known_epochs():
    assert ts.julian_year_to_jde(2000.0) == ts.J2000
    assert ts.julian_year_to_jde(2050.0) == ts.J2050
    assert ts.besselian_year_to_jde(1900.0) == ts.B1900
    assert ts.besselian_year_to_jde(1950.0) == pytest.approx(ts.B1950, abs=1e-4)


def test_besselian_to_julian_year():
    # B1950.0 falls a little before J1950.0
    assert ts.besselian_to_julian_year(1950.0) == pytest.approx(1949.99979, abs=1e-5)


def test_epoch_roundtrip():
    random.seed(42)
    for _ in range(1000):
        y = random.uniform(-4000.0, 8000.0)
        assert ts.jde_to_julian_year(ts.julian_year_to_jde(y)) == pytest.approx(y, abs=1e-9)
        assert ts.jde_to_besselian_year(ts.besselian_year_to_jde(y)) == pytest.approx(y, abs=1e-9)


@pytest.mark.parametrize(
    "y, m, d, gregorian, jd",
    [
        (1957, 10, 4.81, True, 2436116.31),     # Meeus Example 7.a
        (333, 1, 27.5, False, 1842713.0),       # Meeus Example 7.b
        (2000, 1, 1.5, True, 2451545.0),
        (1962, 6, 21.0, True, 2437836.5),
        (-214, 6, 30.0, False, 1643074.5),      # Meeus Example 21.c
    ],
)
def test_calendar_to_jd(y, m, d, gregorian, jd):
    conv = ts.calendar_gregorian_to_jd if gregorian else ts.calendar_julian_to_jd
    assert conv(y, m, d) == pytest.approx(jd, abs=1e-9)
    yy, mm, dd = ts.jd_to_calendar(jd, gregorian=gregorian)
    assert (yy, mm) == (y, m)
    assert dd == pytest.approx(d, abs=1e-6)


def test_jd_calendar_roundtrip():
    random.seed(7)
    for _ in range(2000):
        jd = random.uniform(2000000.0, 4000000.0)
        y, m, d = ts.jd_to_calendar(jd)
        assert ts.calendar_gregorian_to_jd(y, m, d) == pytest.approx(jd, abs=1e-6)

