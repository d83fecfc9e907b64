"""Descriptions of the positional arguments a command accepts."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class ArgType(enum.Enum):
    """What kind of value an argument holds; drives completion."""

    VOID = enum.auto()
    STR = enum.auto()
    SCENE_OBJECT = enum.auto()
    ORIENTATION = enum.auto()


@dataclass(frozen=True)
class Arg:
    """A named positional argument with an optional default value."""

    full_name: str
    desc: str
    type: ArgType = ArgType.STR
    default: str | None = None