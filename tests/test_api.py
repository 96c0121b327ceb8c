# tests/test_api.py

import math

import pytest

import precessol as ps
from precessol.core.errors import DomainError
from precessol.core.settings import FinderSettings
from precessol.core.types import Ecliptic, Elements, Equatorial, Season
from precessol.engines import precess as pr
from precessol.engines import solstice as sol
from precessol.reference import astro_args as aa
from precessol.reference import time_scales as ts


def test_public_surface():
    for name in ps.__all__:
        assert hasattr(ps, name), name


def test_to_julian_epoch():
    assert ps.to_julian_epoch(2050.0) == 2050.0
    assert ps.to_julian_epoch(1950.0, "besselian") == ts.besselian_to_julian_year(1950.0)
    assert ps.to_julian_epoch(ts.J2000, "jde") == 2000.0
    with pytest.raises(DomainError):
        ps.to_julian_epoch(2000.0, "gregorian")


def test_precess_equatorial_with_besselian_epochs():
    eq = Equatorial(aa.hms_to_rad(2, 31, 48.704), aa.dms_to_rad(89, 15, 50.72))
    out = ps.precess_equatorial(eq, 1950.0, 1900.0, system="besselian")
    ref = pr.position(
        eq, ts.besselian_to_julian_year(1950.0), ts.besselian_to_julian_year(1900.0)
    )
    assert out == ref


def test_precess_ecliptic_and_elements():
    ecl = Ecliptic(math.radians(149.48194), math.radians(1.76549))
    jde_to = ts.calendar_julian_to_jd(-214, 6, 30)
    out = ps.precess_ecliptic(ecl, ts.J2000, jde_to, system="jde")
    assert math.degrees(out.lon) == pytest.approx(118.704, abs=5e-4)

    el = Elements(inc=math.radians(47.122), peri=math.radians(151.4486), node=math.radians(45.7481))
    red = ps.reduce_orbit_elements(el, 1744.0, 1950.0, system="besselian")
    assert math.degrees(red.node) == pytest.approx(48.6037, abs=1e-4)


def test_find_season_low():
    event = ps.find_season("june", 1962)
    assert event.season is Season.JUNE
    assert event.method == "low"
    assert event.jde == pytest.approx(2437837.39245, abs=1e-5)


def test_find_season_high_uses_bundled_earth():
    event = ps.find_season(Season.JUNE, 1962, method="high")
    assert event.converged
    assert event.jde == sol.june2(1962, ps.VSOP87Earth())


def test_find_season_settings_pass_through():
    with pytest.raises(DomainError):
        ps.find_season("march", 5000, settings=FinderSettings(strict_range=True))


@pytest.mark.parametrize("season, method", [("spring", "low"), ("march", "exact")])
def test_find_season_rejects_unknown(season, method):
    with pytest.raises(DomainError):
        ps.find_season(season, 2000, method=method)


def test_season_targets():
    assert Season.MARCH.target_lon == 0.0
    assert Season.JUNE.target_lon == pytest.approx(math.pi / 2)
    assert Season.SEPTEMBER.target_lon == pytest.approx(math.pi)
    assert Season.DECEMBER.target_lon == pytest.approx(3 * math.pi / 2)


@pytest.mark.parametrize(
    "kwargs",
    [{"tolerance": 0.0}, {"max_iterations": 0}, {"days_per_radian": -58.0}],
)
def test_finder_settings_validation(kwargs):
    with pytest.raises(DomainError):
        FinderSettings(**kwargs)


def test_errors_share_a_base():
    for err in (ps.DomainError, ps.ConvergenceError, ps.DependencyError, ps.EphemerisUnavailableError):
        assert issubclass(err, ps.PrecessolError)
    assert issubclass(ps.EphemerisUnavailableError, ps.DependencyError)
