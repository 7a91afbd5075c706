"""
Robot capability set driven by action trees.

Any object exposing these three methods can be controlled by an action tree;
robotree itself never implements or simulates robot state.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class Robot(Protocol):
    """Abstract robot to be controlled."""

    def move_forward(self) -> None:
        """Move the robot forward."""
        ...

    def turn_left(self) -> None:
        """Turn the robot to the left."""
        ...

    def turn_right(self) -> None:
        """Turn the robot to the right."""
        ...
