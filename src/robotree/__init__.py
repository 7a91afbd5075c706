"""
robotree - Parse textual robot movement commands into replayable action trees

robotree reads FORWARD / LEFT / RIGHT commands and nestable REPEAT blocks and
builds an immutable action tree that can be applied to any robot.
"""

from importlib.metadata import version

from robotree.core.actions import (
    Action,
    MoveForward,
    Repeat,
    Sequence,
    TurnLeft,
    TurnRight,
)
from robotree.core.robot import Robot
from robotree.parsing.parser import CommandParser, parse_commands, parse_program
from robotree.settings import ParserSettings

__version__ = version("robotree")

__all__ = [
    "__version__",
    "Action",
    "MoveForward",
    "TurnLeft",
    "TurnRight",
    "Sequence",
    "Repeat",
    "Robot",
    "CommandParser",
    "ParserSettings",
    "parse_commands",
    "parse_program",
]
