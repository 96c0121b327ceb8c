"""
precessol.engines.solstice
--------------------------
Instants of the equinoxes and solstices (Meeus, Astronomical Algorithms, ch. 27).

Two strategies find the same event:
  LowPrecisionFinder   closed-form mean instant plus periodic terms
                       (within about a minute for years -1000..3000)
  HighPrecisionFinder  iterative refinement of the above against an Earth
                       ephemeris, to the ephemeris' own accuracy

Results are Julian Ephemeris Days (TT).
"""
from __future__ import annotations

import logging
import math
from typing import Optional

from ..core.errors import ConvergenceError, DomainError
from ..core.settings import DEFAULT_SETTINGS, FinderSettings
from ..core.types import Season, SeasonEvent
from ..ephemeris import EarthEphemeris
from ..reference import astro_args as aa
from ..reference.solar import apparent_solar_longitude

_log = logging.getLogger(__name__)

VALID_YEARS = (-1000, 3000)

# Table 27.A, years -1000..1000, Y = year/1000
MEAN_COEFFS_0 = {
    Season.MARCH: (1721139.29189, 365242.13740, 0.06134, 0.00111, -0.00071),
    Season.JUNE: (1721233.25401, 365241.72562, -0.05323, 0.00907, -0.00025),
    Season.SEPTEMBER: (1721325.70455, 365242.49558, -0.11677, -0.00297, 0.00074),
    Season.DECEMBER: (1721414.39987, 365242.88257, -0.00769, -0.00933, -0.00006),
}

# Table 27.B, years 1000..3000, Y = (year - 2000)/1000
MEAN_COEFFS_2000 = {
    Season.MARCH: (2451623.80984, 365242.37404, 0.05169, -0.00411, -0.00057),
    Season.JUNE: (2451716.56767, 365241.62603, 0.00325, 0.00888, -0.00030),
    Season.SEPTEMBER: (2451810.21715, 365242.01767, -0.11575, 0.00337, 0.00078),
    Season.DECEMBER: (2451900.05952, 365242.74049, -0.06223, -0.00823, 0.00032),
}

# Table 27.C periodic terms: A, B (deg), C (deg per century)
PERIODIC_TERMS = (
    (485, 324.96, 1934.136),
    (203, 337.23, 32964.467),
    (199, 342.08, 20.186),
    (182, 27.85, 445267.112),
    (156, 73.14, 45036.886),
    (136, 171.52, 22518.443),
    (77, 222.54, 65928.934),
    (74, 296.72, 3034.906),
    (70, 243.58, 9037.513),
    (58, 119.81, 33718.147),
    (52, 297.17, 150.678),
    (50, 21.02, 2281.226),
    (45, 247.54, 29929.562),
    (44, 325.15, 31555.956),
    (29, 60.93, 4443.417),
    (18, 155.12, 67555.328),
    (17, 288.79, 4562.452),
    (16, 198.04, 62894.029),
    (14, 199.76, 31436.921),
    (12, 95.39, 14577.848),
    (12, 287.11, 31931.756),
    (12, 320.81, 34777.259),
    (9, 227.73, 1222.114),
    (8, 15.45, 16859.074),
)


def _check_year(year: int, settings: FinderSettings) -> None:
    lo, hi = VALID_YEARS
    if lo <= year <= hi:
        return
    if settings.strict_range:
        raise DomainError(f"year {year} outside the validated range {lo}..{hi}")
    _log.warning("year %d outside the validated range %d..%d; result is extrapolated", year, lo, hi)


def mean_instant(season: Season, year: int) -> float:
    """JDE0: the mean instant from Table 27.A (year < 1000) or 27.B."""
    if year < 1000:
        return aa.horner(year * 0.001, *MEAN_COEFFS_0[season])
    return aa.horner((year - 2000) * 0.001, *MEAN_COEFFS_2000[season])


def low_precision(season: Season, year: int, settings: FinderSettings = DEFAULT_SETTINGS) -> float:
    """
    Closed-form instant of the event (JDE).

    JDE = JDE0 + 0.00001 * S / dlambda, with S the sum of Table 27.C and
    dlambda = 1 + 0.0334 cos W + 0.0007 cos 2W.
    """
    _check_year(year, settings)
    jde0 = mean_instant(season, year)
    T = aa.T_centuries(jde0)
    W = math.radians(35999.373 * T - 2.47)
    dl = 1.0 + 0.0334 * math.cos(W) + 0.0007 * math.cos(2.0 * W)
    S = 0.0
    for a, b, c in reversed(PERIODIC_TERMS):
        S += a * math.cos(math.radians(b + c * T))
    return jde0 + 0.00001 * S / dl


def refine(
    season: Season,
    year: int,
    jde: float,
    earth: EarthEphemeris,
    settings: FinderSettings = DEFAULT_SETTINGS,
) -> SeasonEvent:
    """
    Newton-like refinement (27.1): jde += k * sin(target - lambda_apparent).

    Raises ConvergenceError (with the best estimate attached) when the
    iteration cap is reached. Ephemeris errors propagate unchanged.
    """
    target = season.target_lon
    err = math.inf
    for i in range(1, settings.max_iterations + 1):
        lam = apparent_solar_longitude(earth, jde)
        err = aa.wrap_pi(target - lam)
        _log.debug("%s %d iteration %d: jde=%.6f error=%.3e rad", season.name, year, i, jde, err)
        if abs(err) < settings.tolerance:
            return SeasonEvent(season, year, jde, converged=True, iterations=i, method="high")
        jde += settings.days_per_radian * math.sin(err)

    event = SeasonEvent(
        season, year, jde, converged=False, iterations=settings.max_iterations, method="high"
    )
    _log.warning(
        "%s %d did not converge in %d iterations (last error %.3e rad)",
        season.name, year, settings.max_iterations, err,
    )
    raise ConvergenceError(
        f"{season.name.lower()} {year}: no convergence after {settings.max_iterations} iterations",
        event,
    )


def high_precision(
    season: Season,
    year: int,
    earth: EarthEphemeris,
    settings: FinderSettings = DEFAULT_SETTINGS,
) -> float:
    """Instant of the event (JDE) refined against the Earth ephemeris."""
    return refine(season, year, low_precision(season, year, settings), earth, settings).jde


# ------------------------------------------------------------
# Strategies
# ------------------------------------------------------------

class LowPrecisionFinder:
    """Closed-form equinox/solstice estimates."""

    def __init__(self, settings: Optional[FinderSettings] = None):
        self.settings = settings or DEFAULT_SETTINGS

    def find(self, season: Season, year: int) -> SeasonEvent:
        return SeasonEvent(season, year, low_precision(season, year, self.settings))


class HighPrecisionFinder:
    """Equinox/solstice instants refined against an injected Earth ephemeris."""

    def __init__(self, earth: EarthEphemeris, settings: Optional[FinderSettings] = None):
        self.earth = earth
        self.settings = settings or DEFAULT_SETTINGS

    def find(self, season: Season, year: int) -> SeasonEvent:
        jde = low_precision(season, year, self.settings)
        return refine(season, year, jde, self.earth, self.settings)


# ------------------------------------------------------------
# Named events
# ------------------------------------------------------------

def march(year: int) -> float:
    """March equinox (JDE), low precision."""
    return low_precision(Season.MARCH, year)

def june(year: int) -> float:
    """June solstice (JDE), low precision."""
    return low_precision(Season.JUNE, year)

def september(year: int) -> float:
    """September equinox (JDE), low precision."""
    return low_precision(Season.SEPTEMBER, year)

def december(year: int) -> float:
    """December solstice (JDE), low precision."""
    return low_precision(Season.DECEMBER, year)

def march2(year: int, earth: EarthEphemeris) -> float:
    """March equinox (JDE) refined against the Earth ephemeris."""
    return high_precision(Season.MARCH, year, earth)

def june2(year: int, earth: EarthEphemeris) -> float:
    return high_precision(Season.JUNE, year, earth)

def september2(year: int, earth: EarthEphemeris) -> float:
    return high_precision(Season.SEPTEMBER, year, earth)

def december2(year: int, earth: EarthEphemeris) -> float:
    return high_precision(Season.DECEMBER, year, earth)
