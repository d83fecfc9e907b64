"""Position, rotation and scale, and the quaternion helpers they rely on.

Quaternions are arrays ordered (w, x, y, z). Matrices are 4x4 numpy arrays
that act on column vectors.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

IDENTITY_QUAT = (1.0, 0.0, 0.0, 0.0)


def _normalize_quat(q: np.ndarray) -> np.ndarray:
    length = float(np.sqrt(np.dot(q, q)))
    if length <= 0.0:
        return np.array(IDENTITY_QUAT)
    return q / length


def quat_from_vectors(u, v) -> np.ndarray:
    """Shortest rotation taking direction ``u`` onto direction ``v``."""
    u = np.asarray(u, dtype=float)
    v = np.asarray(v, dtype=float)
    norm_uv = float(np.sqrt(np.dot(u, u) * np.dot(v, v)))
    real = norm_uv + float(np.dot(u, v))
    if real < 1e-6 * norm_uv:
        # Opposite directions: rotate half a turn around any orthogonal axis.
        real = 0.0
        if abs(u[0]) > abs(u[2]):
            axis = np.array([-u[1], u[0], 0.0])
        else:
            axis = np.array([0.0, -u[2], u[1]])
    else:
        axis = np.cross(u, v)
    return _normalize_quat(np.array([real, *axis]))


def quat_to_matrix(q) -> np.ndarray:
    """4x4 rotation matrix of a unit quaternion."""
    w, x, y, z = np.asarray(q, dtype=float)
    m = np.eye(4)
    m[:3, :3] = [
        [1 - 2 * (y * y + z * z), 2 * (x * y - w * z), 2 * (x * z + w * y)],
        [2 * (x * y + w * z), 1 - 2 * (x * x + z * z), 2 * (y * z - w * x)],
        [2 * (x * z - w * y), 2 * (y * z + w * x), 1 - 2 * (x * x + y * y)],
    ]
    return m


def _rotate(v: np.ndarray, q: np.ndarray) -> np.ndarray:
    vec = q[1:]
    uv = np.cross(vec, v)
    uuv = np.cross(vec, uv)
    return v + (uv * q[0] + uuv) * 2.0


def rotate_inverse(v, q) -> np.ndarray:
    """Rotate ``v`` by the inverse of ``q``."""
    q = np.asarray(q, dtype=float)
    norm2 = float(np.dot(q, q))
    inverse = np.array([q[0], -q[1], -q[2], -q[3]]) / norm2
    return _rotate(np.asarray(v, dtype=float), inverse)


def _translation(position: np.ndarray) -> np.ndarray:
    m = np.eye(4)
    m[:3, 3] = position
    return m


def _scaling(scale: np.ndarray) -> np.ndarray:
    return np.diag([*scale, 1.0])


def _fmt(values) -> str:
    return ", ".join(f"{float(c):f}" for c in values)


@dataclass(eq=False)
class Transform:
    """Placement of something in space."""

    position: np.ndarray = field(default_factory=lambda: np.zeros(3))
    scale: np.ndarray = field(default_factory=lambda: np.ones(3))
    rotation: np.ndarray = field(default_factory=lambda: np.array(IDENTITY_QUAT))

    def __post_init__(self) -> None:
        self.position = np.array(self.position, dtype=float)
        self.scale = np.array(self.scale, dtype=float)
        self.rotation = np.array(self.rotation, dtype=float)
        if self.position.shape != (3,) or self.scale.shape != (3,):
            raise ValueError("position and scale must have 3 components")
        if self.rotation.shape != (4,):
            raise ValueError("rotation must be a (w, x, y, z) quaternion")

    def view_matrix(self) -> np.ndarray:
        return (
            _scaling(self.scale)
            @ quat_to_matrix(self.rotation)
            @ _translation(self.position)
        )

    def model_matrix(self) -> np.ndarray:
        return (
            _translation(self.position)
            @ quat_to_matrix(self.rotation)
            @ _scaling(self.scale)
        )

    def front(self) -> np.ndarray:
        return rotate_inverse((0.0, 0.0, -1.0), self.rotation)

    def right(self) -> np.ndarray:
        return rotate_inverse((1.0, 0.0, 0.0), self.rotation)

    def up(self) -> np.ndarray:
        return rotate_inverse((0.0, 1.0, 0.0), self.rotation)

    def __str__(self) -> str:
        w, x, y, z = self.rotation
        return (
            f"SCALE: vec3({_fmt(self.scale)})\n"
            f"ROT: quat({w:f}, {{{_fmt((x, y, z))}}})\n"
            f"POS: vec3({_fmt(self.position)})\n"
        )