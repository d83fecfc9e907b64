"""Perspective camera."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import numpy as np

from myengine.transform import Transform


def perspective(fov: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Right-handed perspective projection to clip depth -1..1; ``fov`` in radians."""
    if aspect == 0:
        raise ValueError("aspect ratio must not be zero")
    if far == near:
        raise ValueError("near and far planes must differ")
    tan_half = math.tan(fov / 2.0)
    m = np.zeros((4, 4))
    m[0, 0] = 1.0 / (aspect * tan_half)
    m[1, 1] = 1.0 / tan_half
    m[2, 2] = -(far + near) / (far - near)
    m[2, 3] = -(2.0 * far * near) / (far - near)
    m[3, 2] = -1.0
    return m


@dataclass(eq=False)
class Camera:
    """A viewpoint with a perspective projection."""

    fov: float
    aspect: float
    near: float
    far: float
    transform: Transform = field(default_factory=Transform)
    movement_speed: float = 1.0

    def perspective_matrix(self) -> np.ndarray:
        return perspective(self.fov, self.aspect, self.near, self.far)