"""Ephemeris providers for the high-precision equinox/solstice finder.

A bundled truncated VSOP87 Earth series is always available. The JPL adapter
wraps external ephemeris libraries; install with:
  pip install "precessol[ephemeris]"
"""
from __future__ import annotations

from typing import Protocol

from ..core.errors import DependencyError
from ..core.types import HeliocentricPosition


class EarthEphemeris(Protocol):
    """
    Heliocentric ecliptic position of the Earth, referred to the mean
    ecliptic and equinox of date.

    vsop87_frame is True when positions are in the VSOP87 dynamical frame and
    need the FK5 correction before use as apparent coordinates.
    Implementations must be reentrant; failures raise EphemerisUnavailableError.
    """
    vsop87_frame: bool

    def position(self, jde: float) -> HeliocentricPosition:
        ...


def require_ephemeris():
    """Raise a clear error if ephemeris extras aren't installed."""
    try:
        import jplephem  # noqa: F401
        import skyfield  # noqa: F401
    except ImportError as e:
        raise DependencyError('Ephemeris support requires: pip install "precessol[ephemeris]"') from e
