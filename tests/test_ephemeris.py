# tests/test_ephemeris.py

import math
import sys
from types import SimpleNamespace

import pytest

from precessol.core.errors import DependencyError, EphemerisUnavailableError
from precessol.core.types import Ecliptic
from precessol.engines.precess import EclipticPrecessor
from precessol.ephemeris import require_ephemeris
from precessol.ephemeris.vsop87_earth import VSOP87Earth
from precessol.reference import time_scales as ts


def test_vsop87_earth_is_in_dynamical_frame():
    e = VSOP87Earth()
    assert e.vsop87_frame is True
    p = e.position(ts.J2000)
    assert 0.0 <= p.lon < 2.0 * math.pi
    assert p.range == pytest.approx(0.9833, abs=1e-3)


def test_require_ephemeris_missing(monkeypatch):
    monkeypatch.setitem(sys.modules, "skyfield", None)
    with pytest.raises(DependencyError) as exc:
        require_ephemeris()
    assert "precessol[ephemeris]" in str(exc.value)


# ------------------------------------------------------------
# JPL adapter against stand-in kernel objects
# ------------------------------------------------------------

class _Position:
    def __init__(self, lon, lat, au):
        self._lon, self._lat, self._au = lon, lat, au

    def frame_latlon(self, frame):
        return (
            SimpleNamespace(radians=self._lat),
            SimpleNamespace(radians=self._lon),
            SimpleNamespace(au=self._au),
        )


class _Vector:
    def __init__(self, fail=None):
        self.fail = fail

    def at(self, t):
        if self.fail is not None:
            raise self.fail
        return _Position(1.25, 1e-6, 1.0167)


class _Body:
    def __init__(self, fail=None):
        self.fail = fail

    def __sub__(self, other):
        return _Vector(self.fail)


def _timescale():
    return SimpleNamespace(tt_jd=lambda jd: jd)


def test_jpl_earth_precesses_to_date():
    pytest.importorskip("skyfield")
    from precessol.ephemeris.jpl import JPLEarth

    earth = JPLEarth(kernel={"earth": _Body(), "sun": _Body()}, timescale=_timescale())
    assert earth.vsop87_frame is False

    at_j2000 = earth.position(ts.J2000)
    assert at_j2000.lon == pytest.approx(1.25, abs=1e-12)
    assert at_j2000.range == 1.0167

    jde = ts.julian_year_to_jde(2100.0)
    later = earth.position(jde)
    expected = EclipticPrecessor.from_epochs(2000.0, 2100.0).precess(Ecliptic(1.25, 1e-6))
    assert later.lon == pytest.approx(expected.lon, abs=1e-12)
    assert later.lat == pytest.approx(expected.lat, abs=1e-12)


def test_jpl_earth_out_of_range():
    pytest.importorskip("skyfield")
    from skyfield.errors import EphemerisRangeError

    from precessol.ephemeris.jpl import JPLEarth

    class _RangeError(EphemerisRangeError):
        def __init__(self):
            Exception.__init__(self, "outside the segment")

    earth = JPLEarth(
        kernel={"earth": _Body(fail=_RangeError()), "sun": _Body()},
        timescale=_timescale(),
    )
    with pytest.raises(EphemerisUnavailableError):
        earth.position(0.0)

