from __future__ import annotations

from typing import Literal, Optional, Union

from .core.errors import DomainError
from .core.settings import FinderSettings
from .core.types import Ecliptic, Elements, Equatorial, Season, SeasonEvent
from .engines import precess as _precess
from .engines.solstice import HighPrecisionFinder, LowPrecisionFinder
from .ephemeris import EarthEphemeris
from .ephemeris.vsop87_earth import VSOP87Earth
from .reference import time_scales as ts

EpochSystem = Literal["julian", "besselian", "jde"]

DEFAULT_EARTH = VSOP87Earth()

def to_julian_epoch(value: float, system: EpochSystem = "julian") -> float:
    """Express an epoch given as a Julian year, Besselian year or JDE as a Julian year."""
    if system == "julian":
        return float(value)
    if system == "besselian":
        return ts.besselian_to_julian_year(value)
    if system == "jde":
        return ts.jde_to_julian_year(value)
    raise DomainError(f"unknown epoch system {system!r}")

def precess_equatorial(
    eq: Equatorial,
    epoch_from: float,
    epoch_to: float,
    *,
    mra: float = 0.0,
    mdec: float = 0.0,
    system: EpochSystem = "julian",
) -> Equatorial:
    return _precess.position(
        eq, to_julian_epoch(epoch_from, system), to_julian_epoch(epoch_to, system), mra, mdec
    )

def precess_ecliptic(
    ecl: Ecliptic,
    epoch_from: float,
    epoch_to: float,
    *,
    mlon: float = 0.0,
    mlat: float = 0.0,
    system: EpochSystem = "julian",
) -> Ecliptic:
    return _precess.ecliptic_position(
        ecl, to_julian_epoch(epoch_from, system), to_julian_epoch(epoch_to, system), mlon, mlat
    )

def reduce_orbit_elements(
    el: Elements,
    epoch_from: float,
    epoch_to: float,
    *,
    system: EpochSystem = "julian",
) -> Elements:
    return _precess.reduce_elements(
        el, to_julian_epoch(epoch_from, system), to_julian_epoch(epoch_to, system)
    )

def find_season(
    season: Union[Season, str],
    year: int,
    *,
    method: Literal["low", "high"] = "low",
    earth: Optional[EarthEphemeris] = None,
    settings: Optional[FinderSettings] = None,
) -> SeasonEvent:
    """
    Instant of an equinox or solstice.

    method="low" uses the closed form; method="high" refines it against
    `earth` (default: the bundled VSOP87 series).
    """
    if isinstance(season, str):
        try:
            season = Season[season.upper()]
        except KeyError:
            raise DomainError(f"unknown season {season!r}") from None
    if method == "low":
        return LowPrecisionFinder(settings).find(season, year)
    if method == "high":
        return HighPrecisionFinder(earth or DEFAULT_EARTH, settings).find(season, year)
    raise DomainError(f"unknown method {method!r}")
