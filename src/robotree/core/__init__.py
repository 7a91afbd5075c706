"""
Core robotree components.

This package provides the action tree node types and the robot capability
set they are applied to.
"""

from robotree.core.actions import (
    Action,
    ActionNode,
    MoveForward,
    Repeat,
    Sequence,
    TurnLeft,
    TurnRight,
)
from robotree.core.robot import Robot

__all__ = [
    "Action",
    "ActionNode",
    "MoveForward",
    "TurnLeft",
    "TurnRight",
    "Sequence",
    "Repeat",
    "Robot",
]
