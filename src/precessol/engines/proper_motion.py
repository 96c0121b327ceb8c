"""
precessol.engines.proper_motion
-------------------------------
A star's own motion across the sky between two epochs.

Rates are radians per Julian year; the RA rate is an angle of right ascension
(not multiplied by cos(dec)). Epochs are Julian years.
"""
from __future__ import annotations

import math
from dataclasses import dataclass

from ..core.errors import DomainError
from ..core.types import Equatorial
from ..reference import astro_args as aa
from . import _rotation as rot


def linear_correction(
    eq: Equatorial,
    epoch_from: float,
    epoch_to: float,
    mra: float,
    mdec: float,
) -> Equatorial:
    """
    Tangent-plane proper motion: each coordinate moves at its constant rate.
    Right ascension is not normalized; callers that rotate afterwards do not need it.
    """
    dt = epoch_to - epoch_from
    return Equatorial(ra=eq.ra + mra * dt, dec=eq.dec + mdec * dt)


@dataclass(frozen=True)
class SpaceMotion:
    """Position and distance of a star after rectilinear space motion."""
    position: Equatorial
    distance: float


def space_motion_3d(
    eq: Equatorial,
    epoch_from: float,
    epoch_to: float,
    distance: float,
    mr: float,
    mra: float,
    mdec: float,
) -> SpaceMotion:
    """
    Rigorous proper motion (Meeus 21.d): the star moves on a straight line at
    constant velocity in space.

    distance  any length unit, must be > 0
    mr        radial velocity in that unit per year (e.g. km/s / 977792 for parsecs)
    """
    if not (math.isfinite(distance) and distance > 0):
        raise DomainError(f"distance must be positive and finite, got {distance!r}")

    sa, ca = math.sin(eq.ra), math.cos(eq.ra)
    cd = math.cos(eq.dec)
    x, y, z = rot.from_spherical(eq.ra, eq.dec, distance)

    mrr = mr / distance
    zmd = z * mdec
    vx = x * mrr - zmd * ca - y * mra
    vy = y * mrr - zmd * sa + x * mra
    vz = z * mrr + distance * mdec * cd

    dt = epoch_to - epoch_from
    ra, dec, r = rot.to_spherical((x + dt * vx, y + dt * vy, z + dt * vz))
    return SpaceMotion(position=Equatorial(ra=aa.wrap_rad(ra), dec=dec), distance=r)


def proper_motion_3d(
    eq: Equatorial,
    epoch_from: float,
    epoch_to: float,
    distance: float,
    mr: float,
    mra: float,
    mdec: float,
) -> Equatorial:
    """Position-only view of space_motion_3d."""
    return space_motion_3d(eq, epoch_from, epoch_to, distance, mr, mra, mdec).position
