"""Camera state of the 3D cell view."""

from __future__ import annotations

from dataclasses import dataclass, field

Vec2 = tuple[float, float]
Vec3 = tuple[float, float, float]
Mat4 = tuple[tuple[float, float, float, float], ...]

IDENTITY: Mat4 = (
    (1.0, 0.0, 0.0, 0.0),
    (0.0, 1.0, 0.0, 0.0),
    (0.0, 0.0, 1.0, 0.0),
    (0.0, 0.0, 0.0, 1.0),
)


@dataclass
class ViewState:
    """Zoom, camera, rotation and framing; the inverse rotation is not compared."""

    zoom: float = 45.0
    camera: Vec3 = (0.5, 0.5, 2.5)
    up: Vec3 = (0.0, 1.0, 0.0)
    rotate: Mat4 = IDENTITY
    irotate: Mat4 = field(default=IDENTITY, compare=False)
    size: Vec2 = (0.0, 0.0)
    offset: Vec2 = (0.0, 0.0)
    target: Vec3 = (0.0, 0.0, 0.0)