"""The scene: a camera, a tree of objects and the highlighted one."""

from __future__ import annotations

import numpy as np

from myengine.camera import Camera
from myengine.model import Model
from myengine.scene_object import SceneObject
from myengine.transform import Transform, quat_from_vectors

DEFAULT_LOOK_DIR = (0.0, 0.0, -1.0)


class Scene:
    """Holds the object tree and points the camera at the highlighted object."""

    def __init__(self, camera: Camera) -> None:
        self.camera = camera
        self.root_object = SceneObject("root", None, Transform())
        self.highlighted: SceneObject = self.root_object

    def instantiate(self, model: Model) -> SceneObject:
        """Place a model under the root object."""
        return self.root_object.instantiate(model)

    def update_highlighted(
        self, new_highlight: SceneObject, look_dir=DEFAULT_LOOK_DIR
    ) -> None:
        """Highlight an object and move the camera to frame it from ``look_dir``."""
        self.highlighted = new_highlight
        bounds = new_highlight.bounds
        look = np.asarray(look_dir, dtype=float)
        with np.errstate(invalid="ignore", over="ignore"):
            center = bounds.center()
            distance = 0.5 * float(np.linalg.norm(bounds.diagonal()))
            position = -center + look * distance
            self.camera.transform.position = position
            self.camera.transform.rotation = quat_from_vectors(
                position + center, DEFAULT_LOOK_DIR
            )

    def update(self) -> None:
        """Advance the scene by one frame; nothing changes on its own yet."""