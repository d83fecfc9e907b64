"""Axis-aligned bounding boxes."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np


def _vec3(values) -> np.ndarray:
    arr = np.array(values, dtype=float)
    if arr.shape != (3,):
        raise ValueError(f"expected a 3-component vector, got shape {arr.shape}")
    return arr


@dataclass(eq=False)
class Bounds:
    """An axis-aligned box that starts empty and grows to enclose what it is given."""

    min: np.ndarray = field(default_factory=lambda: np.full(3, np.inf))
    max: np.ndarray = field(default_factory=lambda: np.full(3, -np.inf))

    def __post_init__(self) -> None:
        self.min = _vec3(self.min)
        self.max = _vec3(self.max)

    def expand(self, other: Bounds | np.ndarray | tuple | list) -> None:
        """Grow to enclose another box or a single point."""
        if isinstance(other, Bounds):
            low, high = other.min, other.max
        else:
            low = high = _vec3(other)
        self.max = np.maximum(high, self.max)
        self.min = np.minimum(low, self.min)

    def center(self) -> np.ndarray:
        return (self.min + self.max) / 2.0

    def diagonal(self) -> np.ndarray:
        return self.max - self.min