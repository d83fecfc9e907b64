import numpy as np
import pytest

from myengine.camera import Camera
from myengine.command_manager import CommandManager
from myengine.mesh import Mesh, Vertex
from myengine.model import Model
from myengine.orient import Orient, parse_orientation
from myengine.scene import Scene


@pytest.fixture
def manager():
    scene = Scene(Camera(90.0, 1.5, 0.1, 1000.0))
    mesh = Mesh(
        "cube",
        [Vertex((0, 0, 0)), Vertex((1, 1, 1)), Vertex((1, 0, 0))],
        [(0, 1, 2)],
    )
    model = Model("m")
    model.add_mesh(mesh)
    scene.instantiate(model)
    mgr = CommandManager(scene)
    mgr.register(Orient)
    cube = next(o for o in scene.root_object if o.name == "cube")
    scene.update_highlighted(cube)
    return mgr


@pytest.mark.parametrize(
    "text, expected",
    [
        ("x", (1, 0, 0)),
        ("x+", (1, 0, 0)),
        ("y-", (0, -1, 0)),
        ("z+", (0, 0, 1)),
        ("z-", (0, 0, -1)),
        ("x+extra", (1, 0, 0)),
    ],
)
def test_parse_orientation(text, expected):
    assert np.array_equal(parse_orientation(text), np.array(expected, dtype=float))


@pytest.mark.parametrize("text", ["", "w", "x*", "-x", "X"])
def test_parse_orientation_rejects(text):
    with pytest.raises(ValueError, match="Please provide a valid direction"):
        parse_orientation(text)


def test_orient_places_camera_along_axis(manager):
    scene = manager.scene
    cmd = manager.commands[0]
    assert cmd.execute(manager, ["orient", "y-"]) is True
    center = scene.highlighted.bounds.center()
    offset = scene.camera.transform.position + center
    assert np.allclose(offset / np.linalg.norm(offset), [0, -1, 0])
    assert scene.highlighted.name == "cube"


def test_orient_invalid_logs_and_keeps_camera(manager):
    scene = manager.scene
    before = scene.camera.transform.position.copy()
    cmd = manager.commands[0]
    assert cmd.execute(manager, ["orient", "q"]) is False
    assert manager.logger.getvalue() == "Please provide a valid direction\n"
    assert np.array_equal(scene.camera.transform.position, before)


def test_orient_through_manager(manager):
    assert manager.execute("orient x") is True
    offset = manager.scene.camera.transform.position + manager.scene.highlighted.bounds.center()
    assert np.allclose(offset / np.linalg.norm(offset), [1, 0, 0])