"""Registry that parses command lines and dispatches them to commands."""

from __future__ import annotations

import io
from typing import Callable, TypeVar

from myengine.command import Command
from myengine.scene import Scene

_LOG_LIMIT = 1023

C = TypeVar("C", bound=Command)


def split_command_line(line: str, ending_space_is_arg: bool) -> list[str]:
    """Split on whitespace; a trailing space may count as an empty last argument."""
    args = line.split()
    if ending_space_is_arg and line.endswith(" "):
        args.append("")
    return args


class CommandManager:
    """Holds the registered commands and the console log."""

    def __init__(self, scene: Scene) -> None:
        self.scene = scene
        self.commands: list[Command] = []
        self.logs: list[str] = []
        self.logger = io.StringIO()

    def register(self, command_type: Callable[[], C]) -> C:
        """Create a command, bind it to the scene and add it to the registry."""
        cmd = command_type()
        self.commands.append(cmd)
        cmd.setup(self.scene)
        return cmd

    def _find(self, name: str) -> Command | None:
        return next((cmd for cmd in self.commands if cmd.name == name), None)

    def execute(self, cmd_line: str) -> bool:
        """Run a command line; False if no command ran.

        Missing arguments are filled from defaults; when that is not
        enough, the command's help is logged instead.
        """
        args = split_command_line(cmd_line, False)
        if not args:
            return False
        cmd = self._find(args[0])
        if cmd is None:
            return False
        positionals = cmd.positional_params
        missing = max(0, len(positionals) - (len(args) - 1))
        insert_at = 1
        for param in positionals:
            if missing == 0:
                break
            if param.default is None:
                insert_at += 1
                continue
            args.insert(insert_at, param.default)
            missing -= 1
        if missing:
            self.logger.write(cmd.help_string())
            return False
        cmd.execute(self, args)
        return True

    def completions(self, partial: str) -> list[str]:
        """Proposals for the word being typed at the end of ``partial``."""
        args = split_command_line(partial, True)
        if not args:
            return []
        if len(args) == 1:
            return [cmd.name for cmd in self.commands if cmd.name.startswith(args[0])]
        cmd = self._find(args[0])
        if cmd is None:
            return []
        return cmd.argument_completion(args)

    def log(self, fmt: str, *args) -> None:
        """Append printf-style formatted text to the log buffer."""
        text = fmt % args if args else fmt
        self.logger.write(text[:_LOG_LIMIT])

    def process_log(self) -> None:
        """Move the buffered text into ``logs``, one entry per line."""
        text = self.logger.getvalue()
        self.logger = io.StringIO()
        if not text:
            return
        lines = text.split("\n")
        if text.endswith("\n"):
            lines.pop()
        self.logs.extend(lines)

    def attach_scene(self, scene: Scene) -> None:
        """Bind every registered command to another scene."""
        for cmd in self.commands:
            cmd.setup(scene)