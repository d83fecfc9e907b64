"""Command that highlights a scene object by name."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Sequence

from myengine.arg import Arg, ArgType
from myengine.command import Command

if TYPE_CHECKING:
    from myengine.command_manager import CommandManager


class Select(Command):
    """``select <target>``: highlight the first object with that name."""

    def __init__(self) -> None:
        super().__init__(
            "select",
            [Arg("target", "the new focus target", ArgType.SCENE_OBJECT, "root")],
        )

    def execute(self, manager: CommandManager, args: Sequence[str]) -> bool:
        scene = manager.scene
        target = args[1]
        found = next((obj for obj in scene.root_object if obj.name == target), None)
        if found is None:
            print(f"Not found : {target}", file=sys.stderr)
            return False
        scene.update_highlighted(found)
        return True