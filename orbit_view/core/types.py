from __future__ import annotations

from dataclasses import dataclass

Vector2 = tuple[float, float]
Vector3 = tuple[float, float, float]


@dataclass(frozen=True)
class Polar:
    rho: float
    theta: float


@dataclass(frozen=True)
class Cylindrical:
    rho: float
    theta: float
    height: float


@dataclass(frozen=True)
class Spherical:
    # phi is the inclination from +Y: 0 at the north pole, pi at the south.
    rho: float
    theta: float
    phi: float
