"""
precessol.engines.precess
-------------------------
Precession of equatorial and ecliptic coordinates and of orbital elements
between two epochs (Meeus, Astronomical Algorithms, ch. 21 and 24).

Epochs are Julian years (use reference.time_scales to convert Besselian years
or JDE). Proper motions are radians per Julian year.

The rigorous precessors are immutable: build one per epoch pair and reuse it
for any number of positions.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Tuple

from ..core.types import Ecliptic, Elements, Equatorial
from ..reference import astro_args as aa
from . import _rotation as rot
from .proper_motion import linear_correction


# ------------------------------------------------------------
# Low precision: annual rates (21.1)
# ------------------------------------------------------------

def approx_annual_precession(
    eq: Equatorial, epoch_from: float, epoch_to: float
) -> Tuple[float, float]:
    """
    First-order annual precession (radians per year) in RA and Dec at eq.

    The rates m, n are evaluated at the mean of the two epochs; results are
    only meaningful for spans of a few decades.
    """
    T = ((epoch_from + epoch_to) * 0.5 - 2000.0) * 0.01
    m = aa.sec_ra_to_rad(3.07496 + 0.00186 * T)
    na = aa.sec_ra_to_rad(1.33621 - 0.00057 * T)
    nd = aa.arcsec_to_rad(20.0431 - 0.0085 * T)
    dra = m + na * math.sin(eq.ra) * math.tan(eq.dec)
    ddec = nd * math.cos(eq.ra)
    return dra, ddec


def approx_position(
    eq: Equatorial,
    epoch_from: float,
    epoch_to: float,
    mra: float = 0.0,
    mdec: float = 0.0,
) -> Equatorial:
    """
    Annual precession plus proper motion, times the elapsed years.
    A declination carried past a pole is folded back, with RA shifted by pi.
    """
    dra, ddec = approx_annual_precession(eq, epoch_from, epoch_to)
    dy = epoch_to - epoch_from
    v = rot.from_spherical(eq.ra + (dra + mra) * dy, eq.dec + (ddec + mdec) * dy)
    ra, dec, _ = rot.to_spherical(v)
    return Equatorial(ra=aa.wrap_rad(ra), dec=dec)


# ------------------------------------------------------------
# Rigorous precession angles
# ------------------------------------------------------------

def equatorial_angles(epoch_from: float, epoch_to: float) -> Tuple[float, float, float]:
    """
    (21.2)/(21.3) zeta, z, theta in radians.
    T: centuries of epoch_from from J2000; t: centuries from epoch_from to epoch_to.
    """
    T = (epoch_from - 2000.0) * 0.01
    t = (epoch_to - epoch_from) * 0.01
    c1 = aa.horner(T, 2306.2181, 1.39656, -0.000139)
    zeta = aa.horner(t, 0.0, c1, 0.30188 - 0.000344 * T, 0.017998)
    z = aa.horner(t, 0.0, c1, 1.09468 + 0.000066 * T, 0.018203)
    theta = aa.horner(
        t, 0.0,
        aa.horner(T, 2004.3109, -0.85330, -0.000217),
        -0.42665 - 0.000217 * T,
        -0.041833,
    )
    return aa.arcsec_to_rad(zeta), aa.arcsec_to_rad(z), aa.arcsec_to_rad(theta)


def ecliptic_angles(epoch_from: float, epoch_to: float) -> Tuple[float, float, float]:
    """
    (21.5) eta, Pi, p in radians.
    eta: inclination of the new ecliptic on the old one; Pi: longitude of its
    ascending node on the old ecliptic; p: general precession in longitude.
    """
    T = (epoch_from - 2000.0) * 0.01
    t = (epoch_to - epoch_from) * 0.01
    eta = aa.horner(
        t, 0.0,
        aa.horner(T, 47.0029, -0.06603, 0.000598),
        -0.03302 + 0.000598 * T,
        0.000060,
    )
    Pi = aa.horner(
        t,
        aa.horner(T, 174.876384 * 3600.0, 3289.4789, 0.60622),
        -869.8089 - 0.50491 * T,
        0.03536,
    )
    p = aa.horner(
        t, 0.0,
        aa.horner(T, 5029.0966, 2.22226, -0.000042),
        1.11113 - 0.000042 * T,
        -0.000006,
    )
    return aa.arcsec_to_rad(eta), aa.arcsec_to_rad(Pi), aa.arcsec_to_rad(p)


# ------------------------------------------------------------
# Equatorial precessor
# ------------------------------------------------------------

@dataclass(frozen=True)
class Precessor:
    """
    Rigorous precession of equatorial coordinates from epoch_from to epoch_to.

    The frame rotation Rz(-z) Ry(theta) Rz(-zeta) is cached at construction.
    """
    epoch_from: float
    epoch_to: float
    zeta: float
    z: float
    theta: float
    matrix: rot.Mat3 = field(repr=False, compare=False)

    @classmethod
    def from_epochs(cls, epoch_from: float, epoch_to: float) -> "Precessor":
        zeta, z, theta = equatorial_angles(epoch_from, epoch_to)
        m = rot.mat_chain(rot.rot_z(-z), rot.rot_y(theta), rot.rot_z(-zeta))
        return cls(epoch_from, epoch_to, zeta, z, theta, m)

    def precess(self, eq: Equatorial) -> Equatorial:
        """Rotate eq into the frame of epoch_to; no proper motion."""
        v = rot.mat_vec(self.matrix, rot.from_spherical(eq.ra, eq.dec))
        ra, dec, _ = rot.to_spherical(v)
        return Equatorial(ra=aa.wrap_rad(ra), dec=dec)

    def apply(self, eq: Equatorial, mra: float = 0.0, mdec: float = 0.0) -> Equatorial:
        """
        Proper motion over the elapsed time (in the frame of epoch_from),
        then precession.
        """
        moved = linear_correction(eq, self.epoch_from, self.epoch_to, mra, mdec)
        return self.precess(moved)


# ------------------------------------------------------------
# Ecliptic precessor
# ------------------------------------------------------------

@dataclass(frozen=True)
class EclipticPrecessor:
    """
    Rigorous precession of ecliptic coordinates and orbital elements.

    The frame rotation Rz(-(Pi + p)) Rx(eta) Rz(Pi) is cached at construction.
    """
    epoch_from: float
    epoch_to: float
    eta: float
    Pi: float
    p: float
    matrix: rot.Mat3 = field(repr=False, compare=False)

    @classmethod
    def from_epochs(cls, epoch_from: float, epoch_to: float) -> "EclipticPrecessor":
        eta, Pi, p = ecliptic_angles(epoch_from, epoch_to)
        m = rot.mat_chain(rot.rot_z(-(Pi + p)), rot.rot_x(eta), rot.rot_z(Pi))
        return cls(epoch_from, epoch_to, eta, Pi, p, m)

    def precess(self, ecl: Ecliptic) -> Ecliptic:
        v = rot.mat_vec(self.matrix, rot.from_spherical(ecl.lon, ecl.lat))
        lon, lat, _ = rot.to_spherical(v)
        return Ecliptic(lon=aa.wrap_rad(lon), lat=lat)

    def apply(self, ecl: Ecliptic, mlon: float = 0.0, mlat: float = 0.0) -> Ecliptic:
        """Proper motion in longitude and latitude, then precession."""
        dt = self.epoch_to - self.epoch_from
        return self.precess(Ecliptic(lon=ecl.lon + mlon * dt, lat=ecl.lat + mlat * dt))

    def reduce_elements(self, el: Elements) -> Elements:
        """
        (24.1)-(24.3) Refer inclination, node and argument of perihelion to the
        ecliptic and equinox of epoch_to.

        When the orbit lies in the new ecliptic the node is undefined; it is
        then carried by the shift in longitude p, and the longitude of
        perihelion is kept.
        """
        psi = self.Pi + self.p
        se, ce = math.sin(self.eta), math.cos(self.eta)
        si, ci = math.sin(el.inc), math.cos(el.inc)
        snp, cnp = math.sin(el.node - self.Pi), math.cos(el.node - self.Pi)

        # sin i' sin(node' - psi), sin i' cos(node' - psi), cos i'
        y = si * snp
        x = ce * si * cnp - se * ci
        cos_inc = ci * ce + si * se * cnp
        sin_inc = math.hypot(y, x)
        inc = math.atan2(sin_inc, cos_inc)

        if sin_inc < 1e-15:
            return Elements(inc=inc, peri=aa.wrap_rad(el.peri), node=aa.wrap_rad(el.node + self.p))

        node = math.atan2(y, x) + psi
        peri = math.atan2(-se * snp, si * ce - ci * se * cnp) + el.peri
        return Elements(inc=inc, peri=aa.wrap_rad(peri), node=aa.wrap_rad(node))


# ------------------------------------------------------------
# One-shot conveniences
# ------------------------------------------------------------

def position(
    eq: Equatorial,
    epoch_from: float,
    epoch_to: float,
    mra: float = 0.0,
    mdec: float = 0.0,
) -> Equatorial:
    """Rigorous precession with proper motion, for a single position."""
    return Precessor.from_epochs(epoch_from, epoch_to).apply(eq, mra, mdec)


def ecliptic_position(
    ecl: Ecliptic,
    epoch_from: float,
    epoch_to: float,
    mlon: float = 0.0,
    mlat: float = 0.0,
) -> Ecliptic:
    """Rigorous ecliptic precession with proper motion, for a single position."""
    return EclipticPrecessor.from_epochs(epoch_from, epoch_to).apply(ecl, mlon, mlat)


def reduce_elements(el: Elements, epoch_from: float, epoch_to: float) -> Elements:
    """Orbital element reduction for a single set of elements."""
    return EclipticPrecessor.from_epochs(epoch_from, epoch_to).reduce_elements(el)
