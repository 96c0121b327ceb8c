from __future__ import annotations

from dataclasses import dataclass
from math import fmod

import math


# ------------------------------------------------------------
# Units & helpers
# ------------------------------------------------------------

TAU = 2.0 * math.pi

ARCSEC = math.pi / (180.0 * 3600.0)  # one arcsecond in radians
SEC_RA = math.pi / (12.0 * 3600.0)   # one second of right ascension in radians


def pmod(x: float, y: float) -> float:
    """Positive modulo: result in [0, y) for y > 0."""
    r = fmod(x, y)
    if r < 0:
        r += y
    # fmod of a tiny negative value can round up to y itself
    if r >= y:
        r = 0.0
    return r

def wrap_rad(x: float) -> float:
    """Wrap radians to [0, 2pi)."""
    return pmod(x, TAU)

def wrap_pi(x: float) -> float:
    """Wrap radians to [-pi, pi); the signed shortest angular difference."""
    return pmod(x + math.pi, TAU) - math.pi

def arcsec_to_rad(arcsec: float) -> float:
    return arcsec * ARCSEC

def rad_to_arcsec(rad: float) -> float:
    return rad / ARCSEC

def sec_ra_to_rad(sec: float) -> float:
    """Seconds of time (of right ascension) to radians."""
    return sec * SEC_RA

def rad_to_sec_ra(rad: float) -> float:
    return rad / SEC_RA

def hms_to_rad(h: float, m: float = 0.0, s: float = 0.0, negative: bool = False) -> float:
    """Hours, minutes, seconds of time to radians."""
    r = sec_ra_to_rad((h * 60.0 + m) * 60.0 + s)
    return -r if negative else r

def dms_to_rad(d: float, m: float = 0.0, s: float = 0.0, negative: bool = False) -> float:
    """Degrees, arcminutes, arcseconds to radians."""
    r = arcsec_to_rad((d * 60.0 + m) * 60.0 + s)
    return -r if negative else r

def horner(x: float, *coeffs: float) -> float:
    """Evaluate c0 + c1*x + c2*x^2 + ... by Horner's scheme."""
    acc = 0.0
    for c in reversed(coeffs):
        acc = acc * x + c
    return acc

# ------------------------------------------------------------
# Time variable (TT)
# ------------------------------------------------------------

J2000_TT = 2451545.0  # JD(TT) at J2000.0


def T_centuries(jd_tt: float) -> float:
    """Julian centuries from J2000.0 in TT."""
    return (jd_tt - J2000_TT) / 36525.0


# ------------------------------------------------------------
# Fundamental arguments for the IAU 1980 nutation (Meeus ch. 22; degrees)
# ------------------------------------------------------------

@dataclass(frozen=True)
class FundamentalArgs:
    """Mean elongation, solar and lunar anomalies, argument of latitude, node (degrees)."""
    D_deg: float
    M_deg: float
    Mp_deg: float
    F_deg: float
    Omega_deg: float


def fundamental_args(T: float) -> FundamentalArgs:
    """
    Fundamental arguments with the polynomials Meeus pairs with Table 22.A:
      D  = 297.85036 + 445267.111480 T - 0.0019142 T^2 + T^3/189474
      M  = 357.52772 +  35999.050340 T - 0.0001603 T^2 - T^3/300000
      M' = 134.96298 + 477198.867398 T + 0.0086972 T^2 + T^3/56250
      F  =  93.27191 + 483202.017538 T - 0.0036825 T^2 + T^3/327270
      Ω  = 125.04452 -   1934.136261 T + 0.0020708 T^2 + T^3/450000
    """
    T2 = T * T
    T3 = T2 * T

    D = 297.85036 + 445267.111480 * T - 0.0019142 * T2 + T3 / 189474.0
    M = 357.52772 + 35999.050340 * T - 0.0001603 * T2 - T3 / 300000.0
    Mp = 134.96298 + 477198.867398 * T + 0.0086972 * T2 + T3 / 56250.0
    F = 93.27191 + 483202.017538 * T - 0.0036825 * T2 + T3 / 327270.0
    Omega = 125.04452 - 1934.136261 * T + 0.0020708 * T2 + T3 / 450000.0

    return FundamentalArgs(
        D_deg=fmod(D, 360.0),
        M_deg=fmod(M, 360.0),
        Mp_deg=fmod(Mp, 360.0),
        F_deg=fmod(F, 360.0),
        Omega_deg=fmod(Omega, 360.0),
    )
