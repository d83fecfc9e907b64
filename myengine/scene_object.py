"""Instances of models placed in the scene tree."""

from __future__ import annotations

from typing import Callable

import numpy as np

from myengine.bounds import Bounds
from myengine.mesh import Mesh
from myengine.model import Model
from myengine.transform import Transform


def _copy_transform(transform: Transform) -> Transform:
    return Transform(
        position=transform.position.copy(),
        scale=transform.scale.copy(),
        rotation=transform.rotation.copy(),
    )


class SceneObject:
    """A node of the scene tree, optionally carrying a mesh."""

    def __init__(
        self,
        name: str,
        mesh: Mesh | None = None,
        transform: Transform | None = None,
    ) -> None:
        self.rendered = True
        self.name = name
        self.transform = (
            _copy_transform(transform) if transform is not None else Transform()
        )
        self.mesh = mesh
        self.children: list[SceneObject] = []
        self.model_matrix = np.eye(4)
        self.bounds = Bounds()
        if mesh is not None:
            self.bounds = Bounds(mesh.bounds.min.copy(), mesh.bounds.max.copy())

    @classmethod
    def from_model(cls, model: Model) -> SceneObject:
        """Build an object tree mirroring a model hierarchy."""
        created = cls(model.name, None, model.transform)
        for mesh in model.meshes:
            created.add_child(cls(mesh.name, mesh, model.transform))
        for submodel in model.submodels:
            created.add_child(cls.from_model(submodel))
        return created

    def add_child(self, obj: SceneObject) -> None:
        """Attach a child and grow the bounds to enclose it."""
        self.children.append(obj)
        self.bounds.expand(obj.bounds)

    def instantiate(self, model: Model) -> SceneObject:
        """Create objects from a model, attach them here and return their root."""
        created = SceneObject.from_model(model)
        self.add_child(created)
        return created

    def apply(self, fn: Callable[[SceneObject], bool]) -> None:
        """Call ``fn`` on this node, then on the children if it returned true."""
        if fn(self):
            for child in self.children:
                child.apply(fn)

    def cache_model_matrices(self, parent_matrix) -> None:
        """Compute and store world matrices for this subtree."""
        self.model_matrix = np.asarray(parent_matrix, dtype=float) @ (
            self.transform.model_matrix()
        )
        for child in self.children:
            child.cache_model_matrices(self.model_matrix)

    def __iter__(self):
        """Depth-first walk over this node and all its descendants."""
        yield self
        for child in self.children:
            yield from child

    def __repr__(self) -> str:
        return f"SceneObject(name={self.name!r}, children={len(self.children)})"