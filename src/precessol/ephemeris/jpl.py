#ephemeris/jpl.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from ..core.errors import EphemerisUnavailableError
from ..core.types import Ecliptic, HeliocentricPosition
from ..engines.precess import EclipticPrecessor
from ..reference import time_scales as ts
from . import require_ephemeris

_log = logging.getLogger(__name__)


@dataclass(frozen=True)
class JPLEarth:
    """
    Heliocentric Earth from a JPL DE kernel, as an EarthEphemeris.

    Positions are taken in the J2000 ecliptic and precessed to the mean
    ecliptic and equinox of date, so they can stand in for VSOP87.

    Requires optional deps:
      pip install "precessol[ephemeris]"
    """
    kernel: object
    timescale: object
    vsop87_frame: bool = False

    @classmethod
    def load(cls, kernel: str = "de421.bsp", directory: Optional[str] = None) -> "JPLEarth":
        """
        Open (downloading on first use) a DE kernel through skyfield's loader,
        which reads it with jplephem.
        """
        require_ephemeris()
        from skyfield.api import Loader, load as default_load  # type: ignore

        loader = Loader(directory) if directory else default_load
        try:
            eph = loader(kernel)
            timescale = loader.timescale()
        except (OSError, ValueError) as e:
            raise EphemerisUnavailableError(f"cannot open ephemeris kernel {kernel!r}: {e}") from e
        _log.info("opened ephemeris kernel %s", kernel)
        return cls(kernel=eph, timescale=timescale)

    def position(self, jde: float) -> HeliocentricPosition:
        from skyfield.errors import EphemerisRangeError  # type: ignore
        from skyfield.framelib import ecliptic_J2000_frame  # type: ignore

        t = self.timescale.tt_jd(jde)
        try:
            vec = (self.kernel["earth"] - self.kernel["sun"]).at(t)
        except EphemerisRangeError as e:
            raise EphemerisUnavailableError(f"JDE {jde} outside the kernel's time span") from e
        lat, lon, dist = vec.frame_latlon(ecliptic_J2000_frame)

        p = EclipticPrecessor.from_epochs(2000.0, ts.jde_to_julian_year(jde))
        ecl = p.precess(Ecliptic(lon=lon.radians, lat=lat.radians))
        return HeliocentricPosition(lon=ecl.lon, lat=ecl.lat, range=dist.au)
