"""Minimal 3-vector and 3x3 rotation helpers (tuples of tuples, no numpy)."""
from __future__ import annotations

import math
from typing import Tuple

Vec3 = Tuple[float, float, float]
Mat3 = Tuple[Vec3, Vec3, Vec3]

IDENTITY: Mat3 = (
    (1.0, 0.0, 0.0),
    (0.0, 1.0, 0.0),
    (0.0, 0.0, 1.0),
)


def rot_x(angle: float) -> Mat3:
    """Rotation of the frame about the X-axis."""
    c, s = math.cos(angle), math.sin(angle)
    return (
        (1.0, 0.0, 0.0),
        (0.0, c, s),
        (0.0, -s, c),
    )


def rot_y(angle: float) -> Mat3:
    """Rotation of the frame about the Y-axis."""
    c, s = math.cos(angle), math.sin(angle)
    return (
        (c, 0.0, -s),
        (0.0, 1.0, 0.0),
        (s, 0.0, c),
    )


def rot_z(angle: float) -> Mat3:
    """Rotation of the frame about the Z-axis."""
    c, s = math.cos(angle), math.sin(angle)
    return (
        (c, s, 0.0),
        (-s, c, 0.0),
        (0.0, 0.0, 1.0),
    )


def mat_mul(a: Mat3, b: Mat3) -> Mat3:
    """Multiply two 3x3 matrices."""
    return tuple(
        tuple(sum(a[i][k] * b[k][j] for k in range(3)) for j in range(3))
        for i in range(3)
    )


def mat_chain(*ms: Mat3) -> Mat3:
    """Product m0 @ m1 @ ... ; the rightmost rotation acts first."""
    out = IDENTITY
    for m in ms:
        out = mat_mul(out, m)
    return out


def mat_vec(m: Mat3, v: Vec3) -> Vec3:
    """Multiply a 3x3 matrix by a 3-vector."""
    return (
        m[0][0] * v[0] + m[0][1] * v[1] + m[0][2] * v[2],
        m[1][0] * v[0] + m[1][1] * v[1] + m[1][2] * v[2],
        m[2][0] * v[0] + m[2][1] * v[1] + m[2][2] * v[2],
    )


def transpose(m: Mat3) -> Mat3:
    return (
        (m[0][0], m[1][0], m[2][0]),
        (m[0][1], m[1][1], m[2][1]),
        (m[0][2], m[1][2], m[2][2]),
    )


def from_spherical(lon: float, lat: float, r: float = 1.0) -> Vec3:
    cl = math.cos(lat)
    return (r * cl * math.cos(lon), r * cl * math.sin(lon), r * math.sin(lat))


def to_spherical(v: Vec3) -> Tuple[float, float, float]:
    """(lon, lat, r); lon in (-pi, pi], lat uniformly accurate near the poles."""
    x, y, z = v
    rho = math.hypot(x, y)
    return math.atan2(y, x), math.atan2(z, rho), math.sqrt(rho * rho + z * z)
