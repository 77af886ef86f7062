from __future__ import annotations

from dataclasses import replace
from math import pi, radians

import pytest

from orbit_view.core.convert import spherical_to_cartesian
from orbit_view.core.types import Spherical
from orbit_view.render.orbit import (
    OrbitalCameraController,
    OrbitalCameraState,
    OrbitParams,
    PointerInput,
)


def _at(rho: float, pointer: tuple[float, float] = (0.0, 0.0)) -> OrbitalCameraState:
    return OrbitalCameraState(
        position=Spherical(rho=rho, theta=pi / 4.0, phi=pi / 4.0), prev_pointer=pointer
    )


def test_initial_orbit() -> None:
    s = OrbitalCameraController().initialize()
    assert s.position == Spherical(rho=10.0, theta=pi / 4.0, phi=pi / 4.0)
    assert s.prev_pointer == (0.0, 0.0)


def test_idle_frame_returns_default_eye() -> None:
    cam = OrbitalCameraController()
    state, eye = cam.update(cam.initialize(), PointerInput(pointer=(0.0, 0.0)), 0.016)
    expected = spherical_to_cartesian(Spherical(10.0, pi / 4.0, pi / 4.0))
    for i in range(3):
        assert abs(eye[i] - expected[i]) < 1e-9
    assert state.position == Spherical(10.0, pi / 4.0, pi / 4.0)


def test_zoom_is_clamped_to_bounds() -> None:
    cam = OrbitalCameraController()
    s, _ = cam.update(_at(4.0), PointerInput(pointer=(0.0, 0.0), scroll=-3.0), 0.016)
    assert s.position.rho == 4.0
    s, _ = cam.update(_at(40.0), PointerInput(pointer=(0.0, 0.0), scroll=5.0), 0.016)
    assert s.position.rho == 40.0
    s, _ = cam.update(_at(10.0), PointerInput(pointer=(0.0, 0.0), scroll=1.0), 0.016)
    assert abs(s.position.rho - 12.0) < 1e-12


def test_zoom_applies_without_orbit_button() -> None:
    cam = OrbitalCameraController()
    s, eye = cam.update(
        _at(10.0), PointerInput(pointer=(0.0, 0.0), scroll=-1.0, orbit_held=False), 0.0
    )
    assert abs(s.position.rho - 8.0) < 1e-12
    assert abs((eye[0] ** 2 + eye[1] ** 2 + eye[2] ** 2) ** 0.5 - 8.0) < 1e-9


def test_rotation_requires_orbit_button() -> None:
    cam = OrbitalCameraController()
    state = cam.initialize()
    for pointer in [(120.0, 40.0), (-300.0, 75.0), (10.0, 900.0)]:
        state, _ = cam.update(state, PointerInput(pointer=pointer), 0.016)
        assert state.position.theta == pi / 4.0
        assert state.position.phi == pi / 4.0
        assert state.prev_pointer == pointer


def test_rotation_follows_pointer_when_held() -> None:
    cam = OrbitalCameraController()
    start = _at(10.0, pointer=(100.0, 100.0))
    s, _ = cam.update(
        start, PointerInput(pointer=(110.0, 105.0), orbit_held=True), 0.016
    )
    assert abs(s.position.theta - (pi / 4.0 + 10.0 * 0.04)) < 1e-12
    assert abs(s.position.phi - (pi / 4.0 + 5.0 * 0.04)) < 1e-12
    assert s.position.rho == 10.0


def test_phi_never_leaves_clamp_range() -> None:
    cam = OrbitalCameraController()
    state = cam.initialize()
    y = 0.0
    for _ in range(50):
        y += 500.0
        state, eye = cam.update(
            state, PointerInput(pointer=(0.0, y), orbit_held=True), 0.016
        )
        assert radians(1.0) <= state.position.phi <= radians(179.0)
    assert abs(state.position.phi - radians(179.0)) < 1e-12
    for _ in range(50):
        y -= 500.0
        state, eye = cam.update(
            state, PointerInput(pointer=(0.0, y), orbit_held=True), 0.016
        )
        assert radians(1.0) <= state.position.phi <= radians(179.0)
    assert abs(state.position.phi - radians(1.0)) < 1e-12


def test_update_does_not_touch_controller_state() -> None:
    cam = OrbitalCameraController()
    before = cam.state
    cam.update(before, PointerInput(pointer=(5.0, 5.0), scroll=1.0, orbit_held=True), 0.1)
    assert cam.state == before


def test_step_threads_state_and_reset() -> None:
    cam = OrbitalCameraController()
    cam.step(PointerInput(pointer=(50.0, 0.0)), 0.016)
    eye = cam.step(PointerInput(pointer=(60.0, 0.0), scroll=2.0, orbit_held=True), 0.016)
    assert abs(cam.state.position.rho - 14.0) < 1e-12
    assert abs(cam.state.position.theta - (pi / 4.0 + 0.4)) < 1e-12
    assert eye == cam.eye

    cam.reset()
    assert cam.state.position == Spherical(10.0, pi / 4.0, pi / 4.0)
    assert cam.state.prev_pointer == (60.0, 0.0)
    assert cam.target == (0.0, 0.0, 0.0)
    assert cam.up == (0.0, 1.0, 0.0)


def test_custom_params() -> None:
    params = replace(OrbitParams(), rho=20.0, rho_speed=0.5, rho_max=21.0)
    cam = OrbitalCameraController(params)
    s, _ = cam.update(
        cam.initialize(), PointerInput(pointer=(0.0, 0.0), scroll=4.0), 0.016
    )
    assert s.position.rho == 21.0


def test_params_reject_inconsistent_bounds() -> None:
    with pytest.raises(ValueError):
        OrbitParams(rho_min=0.0)
    with pytest.raises(ValueError):
        OrbitParams(rho_min=50.0, rho_max=40.0)
    with pytest.raises(ValueError):
        OrbitParams(phi_min_deg=0.0)
    with pytest.raises(ValueError):
        OrbitParams(phi_min_deg=90.0, phi_max_deg=45.0)
    with pytest.raises(ValueError):
        OrbitParams(phi_max_deg=180.0)
