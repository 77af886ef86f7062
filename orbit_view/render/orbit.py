from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from math import pi, radians

from orbit_view.core.convert import spherical_to_cartesian
from orbit_view.core.mathutil import clamp
from orbit_view.core.types import Spherical, Vector2, Vector3

logger = logging.getLogger(__name__)

ORBIT_TARGET: Vector3 = (0.0, 0.0, 0.0)
ORBIT_UP: Vector3 = (0.0, 1.0, 0.0)


@dataclass(frozen=True)
class OrbitParams:
    # Initial orbit.
    rho: float = 10.0
    theta: float = pi / 4.0
    phi: float = pi / 4.0

    # Per scroll step / per pixel of pointer travel.
    rho_speed: float = 2.0
    theta_speed: float = 0.04
    phi_speed: float = 0.04

    # rho bounds are distances, phi bounds are degrees off the +Y axis.
    rho_min: float = 4.0
    rho_max: float = 40.0
    phi_min_deg: float = 1.0
    phi_max_deg: float = 179.0

    def __post_init__(self) -> None:
        if self.rho_min <= 0.0:
            raise ValueError(f"rho_min must be positive, got {self.rho_min}")
        if self.rho_min > self.rho_max:
            raise ValueError(
                f"rho_min ({self.rho_min}) is greater than rho_max ({self.rho_max})"
            )
        if not 0.0 < self.phi_min_deg < self.phi_max_deg < 180.0:
            raise ValueError(
                "phi bounds must satisfy 0 < phi_min_deg < phi_max_deg < 180, "
                f"got ({self.phi_min_deg}, {self.phi_max_deg})"
            )

    @property
    def phi_min(self) -> float:
        return radians(self.phi_min_deg)

    @property
    def phi_max(self) -> float:
        return radians(self.phi_max_deg)


@dataclass(frozen=True)
class PointerInput:
    pointer: Vector2
    scroll: float = 0.0
    orbit_held: bool = False


@dataclass(frozen=True)
class OrbitalCameraState:
    position: Spherical
    prev_pointer: Vector2 = (0.0, 0.0)


class OrbitalCameraController:
    """Orbit camera around the origin driven by pointer input.

    Scrolling zooms every frame; dragging with the orbit button held rotates.
    `update` is pure and returns the next state; `step` keeps the state on
    the controller for hosts that just want an eye position per frame.
    """

    def __init__(self, params: OrbitParams | None = None):
        self.params = params if params is not None else OrbitParams()
        self.state = self.initialize()

    @property
    def eye(self) -> Vector3:
        return spherical_to_cartesian(self.state.position)

    @property
    def target(self) -> Vector3:
        return ORBIT_TARGET

    @property
    def up(self) -> Vector3:
        return ORBIT_UP

    def initialize(self) -> OrbitalCameraState:
        p = self.params
        return OrbitalCameraState(
            position=Spherical(rho=p.rho, theta=p.theta, phi=p.phi)
        )

    def reset(self) -> None:
        # Keep the pointer so the next frame does not see a jump.
        self.state = replace(self.initialize(), prev_pointer=self.state.prev_pointer)

    def update(
        self, state: OrbitalCameraState, inp: PointerInput, dt: float
    ) -> tuple[OrbitalCameraState, Vector3]:
        # dt is unused until the orbit gets time-based easing.
        p = self.params
        px, py = inp.pointer
        dx = px - state.prev_pointer[0]
        dy = py - state.prev_pointer[1]

        pos = state.position
        rho = clamp(pos.rho + inp.scroll * p.rho_speed, p.rho_min, p.rho_max)
        if inp.scroll != 0.0 and rho in (p.rho_min, p.rho_max):
            logger.debug("zoom clamped at rho=%.2f", rho)

        theta = pos.theta
        phi = pos.phi
        if inp.orbit_held:
            theta += dx * p.theta_speed
            phi += dy * p.phi_speed
        phi = clamp(phi, p.phi_min, p.phi_max)

        new_pos = Spherical(rho=rho, theta=theta, phi=phi)
        new_state = OrbitalCameraState(position=new_pos, prev_pointer=(px, py))
        return new_state, spherical_to_cartesian(new_pos)

    def step(self, inp: PointerInput, dt: float) -> Vector3:
        self.state, eye = self.update(self.state, inp, dt)
        return eye
