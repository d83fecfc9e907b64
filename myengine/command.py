"""Base class of console commands."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Iterable, Sequence

from myengine.arg import Arg, ArgType

if TYPE_CHECKING:
    from myengine.command_manager import CommandManager
    from myengine.scene import Scene

ORIENTATIONS = ("x", "y", "z", "x+", "x-", "y+", "y-", "z+", "z-")


class Command(ABC):
    """A named action with positional arguments, run against a scene."""

    def __init__(self, name: str, positional_params: Iterable[Arg] = ()) -> None:
        self.name = name
        self.positional_params: list[Arg] = list(positional_params)
        self.scene: Scene | None = None

    def setup(self, scene: Scene | None) -> None:
        """Bind the command to a scene."""
        self.scene = scene

    @abstractmethod
    def execute(self, manager: CommandManager, args: Sequence[str]) -> bool:
        """Run the command; ``args[0]`` is the command name. Return True on success."""

    def help_string(self) -> str:
        """Usage text listing every positional argument."""
        lines = [f"[Help] {self.name}"]
        lines.append(
            self.name + "".join(f" <{arg.full_name}>" for arg in self.positional_params)
        )
        for arg in self.positional_params:
            line = f"{arg.full_name}: {arg.desc}"
            if arg.default is not None:
                line += f"(default = {arg.default})"
            lines.append(line)
        return "\n".join(lines) + "\n"

    def _scene_object_names(self) -> list[str]:
        if self.scene is None:
            return []
        return [obj.name for obj in self.scene.root_object]

    def argument_completion(self, args: Sequence[str]) -> list[str]:
        """Candidates for the last argument of ``args`` containing what was typed."""
        params = list(args[1:])
        if not params or len(params) > len(self.positional_params):
            return []
        kind = self.positional_params[len(params) - 1].type
        if kind is ArgType.SCENE_OBJECT:
            candidates = self._scene_object_names()
        elif kind is ArgType.ORIENTATION:
            candidates = list(ORIENTATIONS)
        else:
            return []
        typed = params[-1]
        return [candidate for candidate in candidates if typed in candidate]