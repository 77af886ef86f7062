from __future__ import annotations

from dataclasses import dataclass
from math import radians, tan

from orbit_view.core.types import Vector3


def _dot(a: Vector3, b: Vector3) -> float:
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def _sub(a: Vector3, b: Vector3) -> Vector3:
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def _cross(a: Vector3, b: Vector3) -> Vector3:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def _norm(v: Vector3) -> float:
    return (v[0] * v[0] + v[1] * v[1] + v[2] * v[2]) ** 0.5


def _normalize(v: Vector3) -> Vector3:
    n = _norm(v)
    if n == 0.0:
        return (0.0, 0.0, 0.0)
    return (v[0] / n, v[1] / n, v[2] / n)


@dataclass(frozen=True)
class CameraFrame:
    w: int
    h: int
    near: float
    f: float
    cam_pos: Vector3
    right: Vector3
    up: Vector3
    forward: Vector3

    @classmethod
    def look_at(
        cls,
        eye: Vector3,
        target: Vector3,
        up: Vector3,
        viewport: tuple[int, int],
        fov_deg: float = 45.0,
        near: float = 0.1,
    ) -> CameraFrame:
        # fov_deg is the vertical field of view.
        w, h = viewport
        forward = _normalize(_sub(target, eye))
        right = _normalize(_cross(forward, up))
        cam_up = _cross(right, forward)
        f = (h * 0.5) / tan(radians(fov_deg) * 0.5)
        return cls(
            w=w,
            h=h,
            near=near,
            f=f,
            cam_pos=eye,
            right=right,
            up=cam_up,
            forward=forward,
        )

    def project(self, p: Vector3) -> tuple[float, float, float] | None:
        d = _sub(p, self.cam_pos)
        cx = _dot(d, self.right)
        cy = _dot(d, self.up)
        cz = _dot(d, self.forward)

        if cz <= self.near:
            return None

        sx = (self.w * 0.5) + (cx * self.f) / cz
        sy = (self.h * 0.5) - (cy * self.f) / cz
        return (sx, sy, cz)

    def project_radius(self, radius: float, depth: float) -> float:
        return radius * self.f / depth
