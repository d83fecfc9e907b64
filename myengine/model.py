"""Loaded hierarchies of meshes, ready to be placed in a scene."""

from __future__ import annotations

from myengine.bounds import Bounds
from myengine.mesh import Mesh
from myengine.transform import Transform


class Model:
    """A named node holding meshes and sub-models, with a box that encloses them all."""

    def __init__(
        self,
        name: str,
        parent: Model | None = None,
        transform: Transform | None = None,
    ) -> None:
        self.name = name
        self.parent = parent
        self.transform = transform if transform is not None else Transform()
        self.bounds = Bounds()
        self.meshes: list[Mesh] = []
        self.submodels: list[Model] = []

    def add_mesh(self, mesh: Mesh) -> None:
        """Attach a mesh and grow the bounds to enclose it."""
        self.meshes.append(mesh)
        self.bounds.expand(mesh.bounds)

    def add_submodel(self, submodel: Model) -> None:
        """Attach a child model and grow the bounds to enclose it."""
        self.submodels.append(submodel)
        self.bounds.expand(submodel.bounds)

    def __repr__(self) -> str:
        return (
            f"Model(name={self.name!r}, meshes={len(self.meshes)}, "
            f"submodels={len(self.submodels)})"
        )