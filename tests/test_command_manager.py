import pytest

from myengine.camera import Camera
from myengine.command_manager import CommandManager, split_command_line
from myengine.mesh import Mesh, Vertex
from myengine.model import Model
from myengine.orient import Orient
from myengine.scene import Scene
from myengine.select import Select


def make_scene():
    scene = Scene(Camera(90.0, 1.5, 0.1, 1000.0))
    mesh = Mesh(
        "cube",
        [Vertex((0, 0, 0)), Vertex((1, 1, 1)), Vertex((1, 0, 0))],
        [(0, 1, 2)],
    )
    model = Model("m")
    model.add_mesh(mesh)
    scene.instantiate(model)
    return scene


@pytest.fixture
def manager():
    mgr = CommandManager(make_scene())
    mgr.register(Select)
    mgr.register(Orient)
    return mgr


def test_split_ignores_extra_whitespace():
    assert split_command_line("  select \t cube  ", False) == ["select", "cube"]


def test_split_trailing_space_adds_empty_arg():
    assert split_command_line("select ", True) == ["select", ""]


def test_split_empty_line():
    assert split_command_line("", True) == []


def test_register_returns_bound_instance(manager):
    cmd = manager.register(Select)
    assert cmd.scene is manager.scene
    assert cmd in manager.commands


def test_execute_selects_object(manager):
    assert manager.execute("select cube") is True
    assert manager.scene.highlighted.name == "cube"


def test_execute_uses_default_argument(manager):
    manager.execute("select cube")
    assert manager.execute("select") is True
    assert manager.scene.highlighted is manager.scene.root_object


def test_execute_empty_and_unknown(manager):
    assert manager.execute("") is False
    assert manager.execute("   ") is False
    assert manager.execute("nope") is False


def test_execute_missing_argument_logs_help(manager):
    assert manager.execute("orient") is False
    orient = next(c for c in manager.commands if c.name == "orient")
    assert manager.logger.getvalue() == orient.help_string()


def test_completions_of_command_names(manager):
    assert manager.completions("s") == ["select"]
    assert manager.completions("") == []
    assert sorted(manager.completions("o")) == ["orient"]


def test_completions_of_arguments(manager):
    assert manager.completions("select cu") == ["cube"]
    assert manager.completions("orient z") == ["z", "z+", "z-"]
    assert manager.completions("unknown x") == []


def test_log_and_process(manager):
    manager.log("> %s\n", "select cube")
    manager.process_log()
    assert manager.logs == ["> select cube"]
    assert manager.logger.getvalue() == ""


def test_process_log_keeps_empty_lines(manager):
    manager.logger.write("a\n\nb")
    manager.process_log()
    assert manager.logs == ["a", "", "b"]


def test_log_truncates_long_messages(manager):
    manager.log("%s", "x" * 2000)
    manager.process_log()
    assert len(manager.logs[0]) == 1023


def test_log_without_args_keeps_percent(manager):
    manager.log("100%")
    manager.process_log()
    assert manager.logs == ["100%"]


def test_attach_scene_rebinds_commands(manager):
    other = make_scene()
    manager.attach_scene(other)
    assert all(cmd.scene is other for cmd in manager.commands)