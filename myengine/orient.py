"""Command that turns the camera to look at the highlighted object along an axis."""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

import numpy as np

from myengine.arg import Arg, ArgType
from myengine.command import Command

if TYPE_CHECKING:
    from myengine.command_manager import CommandManager

_AXES = {"x": (1.0, 0.0, 0.0), "y": (0.0, 1.0, 0.0), "z": (0.0, 0.0, 1.0)}
_INVALID = "Please provide a valid direction"


def parse_orientation(text: str) -> np.ndarray:
    """Turn ``x``, ``y+``, ``z-`` and the like into a unit axis vector."""
    axis = _AXES.get(text[:1])
    if axis is None:
        raise ValueError(_INVALID)
    direction = np.array(axis)
    sign = text[1:2]
    if sign == "-":
        direction = -direction
    elif sign not in ("+", ""):
        raise ValueError(_INVALID)
    return direction


class Orient(Command):
    """``orient <orientation>``: reframe the highlighted object from an axis."""

    def __init__(self) -> None:
        super().__init__(
            "orient",
            [
                Arg(
                    "orientation",
                    "An axis (x y z) and an (optional) + or -",
                    ArgType.ORIENTATION,
                )
            ],
        )

    def execute(self, manager: CommandManager, args: Sequence[str]) -> bool:
        try:
            direction = parse_orientation(args[1])
        except ValueError as exc:
            manager.logger.write(f"{exc}\n")
            return False
        if self.scene is None:
            return False
        self.scene.update_highlighted(self.scene.highlighted, direction)
        return True