# reference/solar.py

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Tuple

from . import astro_args as aa
from .nutation import nutation_in_longitude

if TYPE_CHECKING:
    from ..ephemeris import EarthEphemeris


# (25.10) constant of aberration for the Sun, at 1 AU
ABERRATION_ARCSEC = -20.4898


@dataclass(frozen=True)
class SolarCoordinates:
    """Geocentric geometric solar coordinates (radians, AU)."""
    lon: float
    lat: float
    range: float


def fk5_correction(lon: float, lat: float, jde: float) -> Tuple[float, float]:
    """
    (25.9) Convert VSOP87 dynamical-frame longitude/latitude to FK5 (radians).
    Returns the corrected (lon, lat).
    """
    T = aa.T_centuries(jde)
    lp = aa.horner(T, lon, math.radians(-1.397), math.radians(-0.00031))
    dlat = aa.arcsec_to_rad(0.03916) * (math.cos(lp) - math.sin(lp))
    return lon + aa.arcsec_to_rad(-0.09033), lat + dlat


def true_solar(earth: "EarthEphemeris", jde: float) -> SolarCoordinates:
    """
    Geometric solar coordinates from the Earth's heliocentric position:
    the Sun is seen from the Earth in the opposite direction.
    """
    e = earth.position(jde)
    lon = e.lon + math.pi
    lat = -e.lat
    if earth.vsop87_frame:
        lon, lat = fk5_correction(lon, lat, jde)
    return SolarCoordinates(lon=aa.wrap_rad(lon), lat=lat, range=e.range)


def aberration(range_au: float) -> float:
    """Solar aberration in longitude (radians) at the given Earth-Sun distance."""
    return aa.arcsec_to_rad(ABERRATION_ARCSEC) / range_au


def apparent_solar_longitude(earth: "EarthEphemeris", jde: float) -> float:
    """
    Apparent geocentric solar longitude (radians, [0, 2pi)) referred to the
    true equinox of date: geometric longitude + nutation + aberration.
    """
    s = true_solar(earth, jde)
    return aa.wrap_rad(s.lon + nutation_in_longitude(jde) + aberration(s.range))
