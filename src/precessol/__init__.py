"""precessol public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

from .api import (
    to_julian_epoch,
    precess_equatorial,
    precess_ecliptic,
    reduce_orbit_elements,
    find_season,
)
from .core.errors import (
    PrecessolError,
    DomainError,
    ConvergenceError,
    DependencyError,
    EphemerisUnavailableError,
)
from .core.settings import FinderSettings
from .core.types import Ecliptic, Elements, Equatorial, Season, SeasonEvent
from .engines.precess import (
    Precessor,
    EclipticPrecessor,
    approx_annual_precession,
    approx_position,
    position,
    ecliptic_position,
)
from .engines.proper_motion import linear_correction, proper_motion_3d, space_motion_3d
from .engines.solstice import HighPrecisionFinder, LowPrecisionFinder
from .ephemeris.vsop87_earth import VSOP87Earth

__all__ = [
    "to_julian_epoch",
    "precess_equatorial",
    "precess_ecliptic",
    "reduce_orbit_elements",
    "find_season",
    "PrecessolError",
    "DomainError",
    "ConvergenceError",
    "DependencyError",
    "EphemerisUnavailableError",
    "FinderSettings",
    "Ecliptic",
    "Elements",
    "Equatorial",
    "Season",
    "SeasonEvent",
    "Precessor",
    "EclipticPrecessor",
    "approx_annual_precession",
    "approx_position",
    "position",
    "ecliptic_position",
    "linear_correction",
    "proper_motion_3d",
    "space_motion_3d",
    "HighPrecisionFinder",
    "LowPrecisionFinder",
    "VSOP87Earth",
]
