"""Triangle meshes and their vertices."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Iterable, Sequence

import numpy as np

from myengine.bounds import Bounds

log = logging.getLogger(__name__)


class MeshError(ValueError):
    """Raised when mesh data is unusable."""


@dataclass(eq=False)
class Vertex:
    """A position, a normal and a texture coordinate."""

    position: np.ndarray
    normal: np.ndarray = field(default_factory=lambda: np.zeros(3))
    uv: np.ndarray = field(default_factory=lambda: np.zeros(2))

    def __post_init__(self) -> None:
        self.position = np.array(self.position, dtype=float)
        self.normal = np.array(self.normal, dtype=float)
        self.uv = np.array(self.uv, dtype=float)
        if self.position.shape != (3,) or self.normal.shape != (3,):
            raise MeshError("position and normal must have 3 components")
        if self.uv.shape != (2,):
            raise MeshError("uv must have 2 components")


class Mesh:
    """Vertices joined into triangles, with the box that encloses them."""

    def __init__(
        self,
        name: str = "",
        vertices: Iterable[Vertex] | None = None,
        tris: Iterable[Sequence[int]] | None = None,
        material: Any = None,
    ) -> None:
        self.name = name
        self.material = material
        self.bounds = Bounds()
        self.vertices: tuple[Vertex, ...] = ()
        self.triangles: tuple[tuple[int, int, int], ...] = ()
        self._loaded = False
        if vertices is not None:
            vertices = list(vertices)
            bounds = Bounds()
            for vertex in vertices:
                bounds.expand(vertex.position)
            self.set_vertices(vertices, list(tris or ()), bounds)

    def set_vertices(
        self,
        vertices: Iterable[Vertex],
        tris: Iterable[Sequence[int]],
        bounds: Bounds,
    ) -> None:
        """Store the geometry once; raise MeshError if it is unusable."""
        self.bounds = bounds
        vertices = tuple(vertices)
        tris = [tuple(int(i) for i in tri) for tri in tris]
        if not vertices or not tris:
            log.error("Empty vertex or index data")
            raise MeshError("empty vertex or index data")
        count = len(vertices)
        for tri in tris:
            if len(tri) != 3:
                raise MeshError(f"triangle {tri} does not have 3 indices")
            if any(i < 0 or i >= count for i in tri):
                log.error("Index out of bounds")
                raise MeshError(f"index out of bounds in triangle {tri}")
        if self._loaded:
            raise MeshError("cannot assign vertices twice")
        self.vertices = vertices
        self.triangles = tuple(tris)
        self._loaded = True

    def triangle_count(self) -> int:
        return len(self.triangles)