from __future__ import annotations

from math import acos, asin, atan2, cos, pi, sin, sqrt

from orbit_view.core.mathutil import clamp
from orbit_view.core.types import Cylindrical, Polar, Spherical, Vector2, Vector3

# Below this a radius counts as the origin and an inclination as a pole.
EPSILON = 1e-6

TWO_PI = 2.0 * pi


def wrap_angle(theta: float) -> float:
    """Map an angle in radians into [0, 2*pi)."""
    t = theta % TWO_PI
    # Tiny negative inputs can round up to exactly 2*pi.
    if t >= TWO_PI:
        return 0.0
    return t


def _azimuth(x: float, r: float, z: float) -> float:
    # asin only covers [-pi/2, pi/2]; the z < 0 half is the reflection.
    theta = asin(clamp(x / r, -1.0, 1.0))
    if z < 0.0:
        theta = pi - theta
    return theta


def cartesian_to_polar(p: Vector2, keep_theta_positive: bool = True) -> Polar:
    x, y = p
    theta = atan2(y, x)
    if keep_theta_positive and theta < 0.0:
        theta = wrap_angle(theta)
    return Polar(rho=sqrt(x * x + y * y), theta=theta)


def polar_to_cartesian(polar: Polar) -> Vector2:
    return (polar.rho * cos(polar.theta), polar.rho * sin(polar.theta))


def cartesian_to_cylindrical(p: Vector3) -> Cylindrical:
    """Cylinder axis is +Y; theta is measured from +Z towards +X.

    Points on the axis have no azimuth and get theta = 0.
    """
    x, y, z = p
    rho = sqrt(x * x + z * z)
    theta = 0.0
    if rho >= EPSILON:
        theta = _azimuth(x, rho, z)
    return Cylindrical(rho=rho, theta=theta, height=y)


def cylindrical_to_cartesian(c: Cylindrical) -> Vector3:
    if c.rho < EPSILON:
        return (0.0, c.height, 0.0)
    return (c.rho * sin(c.theta), c.height, c.rho * cos(c.theta))


def cartesian_to_spherical(p: Vector3) -> Spherical:
    """Inverse of spherical_to_cartesian.

    The origin maps to (0, 0, 0). Points on the Y axis keep phi (0 or pi)
    and get theta = 0, since the azimuth is undefined there.
    """
    x, y, z = p
    rho = sqrt(x * x + y * y + z * z)
    theta = 0.0
    phi = 0.0
    if rho >= EPSILON:
        phi = acos(clamp(y / rho, -1.0, 1.0))
        if EPSILON <= phi <= pi - EPSILON:
            theta = _azimuth(x, rho * sin(phi), z)
    return Spherical(rho=rho, theta=theta, phi=phi)


def spherical_to_cartesian(s: Spherical) -> Vector3:
    sp = sin(s.phi)
    return (
        s.rho * sp * sin(s.theta),
        s.rho * cos(s.phi),
        s.rho * sp * cos(s.theta),
    )
