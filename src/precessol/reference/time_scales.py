from __future__ import annotations

import math
from typing import Tuple


# ============================================================
# Epoch constants (JDE)
# ============================================================

J2000 = 2451545.0      # Julian epoch 2000.0
J2050 = 2469807.5      # Julian epoch 2050.0
B1900 = 2415020.3135   # Besselian epoch 1900.0
B1950 = 2433282.4235   # Besselian epoch 1950.0

JULIAN_YEAR = 365.25
BESSELIAN_YEAR = 365.242198781  # tropical year at B1900


# ============================================================
# Besselian / Julian years <-> JDE
# ============================================================

def besselian_year_to_jde(by: float) -> float:
    """Besselian year (e.g. 1950.0) -> Julian Ephemeris Day."""
    return B1900 + BESSELIAN_YEAR * (by - 1900.0)


def jde_to_besselian_year(jde: float) -> float:
    """Julian Ephemeris Day -> Besselian year."""
    return 1900.0 + (jde - B1900) / BESSELIAN_YEAR


def julian_year_to_jde(jy: float) -> float:
    """Julian year (e.g. 2050.0) -> Julian Ephemeris Day."""
    return J2000 + JULIAN_YEAR * (jy - 2000.0)


def jde_to_julian_year(jde: float) -> float:
    """Julian Ephemeris Day -> Julian year."""
    return 2000.0 + (jde - J2000) / JULIAN_YEAR


def besselian_to_julian_year(by: float) -> float:
    """Re-express a Besselian epoch as the Julian year of the same instant."""
    return jde_to_julian_year(besselian_year_to_jde(by))


# ============================================================
# Calendar date <-> JD  (Meeus ch. 7, valid for negative years)
# ============================================================

def _calendar_to_jd(y: int, m: int, d: float, gregorian: bool) -> float:
    if m <= 2:
        y -= 1
        m += 12
    b = 0
    if gregorian:
        a = math.floor(y / 100)
        b = 2 - a + math.floor(a / 4)
    return (
        math.floor(365.25 * (y + 4716))
        + math.floor(30.6001 * (m + 1))
        + d + b - 1524.5
    )


def calendar_gregorian_to_jd(y: int, m: int, d: float) -> float:
    """
    Proleptic Gregorian calendar date -> JD.
    The day may carry a fraction, e.g. 13.19 is 13th at 04:33:36.
    Years are astronomical (year 0 = 1 BC).
    """
    return _calendar_to_jd(y, m, d, gregorian=True)


def calendar_julian_to_jd(y: int, m: int, d: float) -> float:
    """Julian calendar date -> JD (astronomical year numbering)."""
    return _calendar_to_jd(y, m, d, gregorian=False)


def jd_to_calendar(jd: float, gregorian: bool = True) -> Tuple[int, int, float]:
    """
    JD -> (year, month, fractional day) in the proleptic Gregorian calendar,
    or the Julian calendar with gregorian=False.
    """
    z = math.floor(jd + 0.5)
    f = jd + 0.5 - z
    if gregorian:
        alpha = math.floor((z - 1867216.25) / 36524.25)
        a = z + 1 + alpha - math.floor(alpha / 4)
    else:
        a = z
    b = a + 1524
    c = math.floor((b - 122.1) / 365.25)
    d = math.floor(365.25 * c)
    e = math.floor((b - d) / 30.6001)
    day = b - d - math.floor(30.6001 * e) + f
    month = e - 1 if e < 14 else e - 13
    year = c - 4716 if month > 2 else c - 4715
    return int(year), int(month), day
