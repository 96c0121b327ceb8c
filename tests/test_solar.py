# tests/test_solar.py

import math

import pytest

from precessol.core.types import HeliocentricPosition
from precessol.ephemeris.vsop87_earth import VSOP87Earth
from precessol.reference import astro_args as aa
from precessol.reference import nutation as nut
from precessol.reference import solar

# Meeus Example 22.a: 1987 April 10, 0h TD
JDE_22A = 2446895.5
# Meeus Example 25.b: 1992 October 13, 0h TD
JDE_25B = 2448908.5


def test_meeus_example_22a_nutation():
    dpsi, deps = nut.nutation(JDE_22A)
    assert aa.rad_to_arcsec(dpsi) == pytest.approx(-3.788, abs=1e-3)
    assert aa.rad_to_arcsec(deps) == pytest.approx(9.443, abs=1e-3)
    assert nut.nutation_in_longitude(JDE_22A) == dpsi


def test_meeus_example_22a_obliquity():
    eps0 = nut.mean_obliquity(JDE_22A)
    assert aa.rad_to_arcsec(eps0) == pytest.approx((23 * 60 + 26) * 60 + 27.407, abs=1e-3)
    eps = nut.true_obliquity(JDE_22A)
    assert aa.rad_to_arcsec(eps) == pytest.approx((23 * 60 + 26) * 60 + 36.850, abs=2e-3)


def test_nutation_table_size():
    assert len(nut.NUTATION_TERMS) == 63


def test_fundamental_args_at_j2000():
    fa = aa.fundamental_args(0.0)
    assert fa.D_deg == pytest.approx(297.85036)
    assert fa.Omega_deg == pytest.approx(125.04452)


def test_meeus_example_25b_heliocentric_earth():
    e = VSOP87Earth().position(JDE_25B)
    assert math.degrees(e.lon) == pytest.approx(19.907372, abs=1e-5)
    assert math.degrees(e.lat) == pytest.approx(-0.000179, abs=1e-5)
    assert e.range == pytest.approx(0.99760775, abs=1e-7)


def test_meeus_example_25b_apparent_longitude():
    """Apparent solar longitude 199°54'21.818"."""
    lam = solar.apparent_solar_longitude(VSOP87Earth(), JDE_25B)
    assert aa.rad_to_arcsec(lam) == pytest.approx((199 * 60 + 54) * 60 + 21.818, abs=0.02)


def test_aberration_at_one_au():
    assert aa.rad_to_arcsec(solar.aberration(1.0)) == pytest.approx(-20.4898)


def test_fk5_correction_only_for_vsop87_frame():
    class _Fixed:
        def __init__(self, vsop87_frame):
            self.vsop87_frame = vsop87_frame

        def position(self, jde):
            return HeliocentricPosition(lon=1.0, lat=0.0, range=1.0)

    plain = solar.true_solar(_Fixed(False), JDE_25B)
    fk5 = solar.true_solar(_Fixed(True), JDE_25B)
    assert plain.lon == pytest.approx(1.0 + math.pi)
    assert plain.lat == 0.0
    assert aa.rad_to_arcsec(fk5.lon - plain.lon) == pytest.approx(-0.09033, abs=1e-9)
    assert fk5.lat != 0.0
