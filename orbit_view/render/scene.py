from __future__ import annotations

from dataclasses import dataclass

from orbit_view.core.types import Vector3

Color = tuple[int, int, int]

GRID_COLOR: Color = (200, 200, 200)
AXIS_COLOR: Color = (80, 80, 80)


@dataclass(frozen=True)
class Segment:
    a: Vector3
    b: Vector3
    color: Color


@dataclass(frozen=True)
class Marker:
    center: Vector3
    radius: float
    color: Color


def grid_segments(slices: int = 20, spacing: float = 1.0) -> list[Segment]:
    """Square grid on the y = 0 plane centred on the origin."""
    half = slices // 2
    ext = half * spacing
    out: list[Segment] = []
    for i in range(-half, half + 1):
        k = i * spacing
        out.append(Segment((k, 0.0, -ext), (k, 0.0, ext), GRID_COLOR))
        out.append(Segment((-ext, 0.0, k), (ext, 0.0, k), GRID_COLOR))
    return out


def reference_scene() -> tuple[list[Segment], list[Marker]]:
    segments = grid_segments()
    segments.append(Segment((0.0, 0.0, 0.0), (0.0, 10.0, 0.0), AXIS_COLOR))
    markers = [
        Marker((10.0, 0.0, 0.0), 0.2, (230, 41, 55)),
        Marker((0.0, 10.0, 0.0), 0.2, (0, 228, 48)),
        Marker((0.0, 0.0, 10.0), 0.2, (0, 121, 241)),
    ]
    return segments, markers
