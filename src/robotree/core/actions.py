"""
Action tree node types.

An action tree is the parsed form of a command sequence. Nodes are frozen
pydantic models forming a closed set of variants, discriminated by their
`kind` field:

- `MoveForward`, `TurnLeft`, `TurnRight`: leaves, one robot call each
- `Sequence`: ordered children, applied in order (empty means no-op)
- `Repeat`: one child applied `count` times (zero means no-op)

Trees are immutable once built and can be dumped to and validated from
plain data through the `ActionNode` union. Container nodes are walked with
explicit stacks, so applying or rendering a tree works at any nesting depth.
"""

import itertools
import logging
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from robotree.core.robot import Robot

logger = logging.getLogger(__name__)


class Action(BaseModel):
    """
    Base class for all action tree nodes.

    Subclasses implement `apply`, `to_commands` and `call_count`.
    """

    model_config = ConfigDict(frozen=True)

    def apply(self, robot: Robot) -> None:
        """
        Apply this action to the given robot.

        Params:
            robot: Object exposing the robot capability set
        """
        raise NotImplementedError

    def to_commands(self) -> list[str]:
        """
        Render this action back to a command list.

        Returns:
            Commands that parse to an equivalent tree
        """
        raise NotImplementedError

    def call_count(self) -> int:
        """Number of robot capability calls `apply` performs."""
        raise NotImplementedError

    def __str__(self) -> str:
        return "\n".join(self.to_commands())


class MoveForward(Action):
    """Moves the robot forward."""

    kind: Literal["forward"] = "forward"

    def apply(self, robot: Robot) -> None:
        robot.move_forward()

    def to_commands(self) -> list[str]:
        return ["FORWARD"]

    def call_count(self) -> int:
        return 1


class TurnLeft(Action):
    """Turns the robot to the left."""

    kind: Literal["left"] = "left"

    def apply(self, robot: Robot) -> None:
        robot.turn_left()

    def to_commands(self) -> list[str]:
        return ["LEFT"]

    def call_count(self) -> int:
        return 1


class TurnRight(Action):
    """Turns the robot to the right."""

    kind: Literal["right"] = "right"

    def apply(self, robot: Robot) -> None:
        robot.turn_right()

    def to_commands(self) -> list[str]:
        return ["RIGHT"]

    def call_count(self) -> int:
        return 1


class Sequence(Action):
    """Ordered actions applied one after another."""

    kind: Literal["sequence"] = "sequence"
    actions: tuple["ActionNode", ...] = ()

    def apply(self, robot: Robot) -> None:
        _apply_tree(self, robot)

    def to_commands(self) -> list[str]:
        return _render_tree(self)

    def call_count(self) -> int:
        return _count_calls(self)


class Repeat(Action):
    """Applies another action a fixed number of times."""

    kind: Literal["repeat"] = "repeat"
    count: int = Field(ge=0)
    action: "ActionNode"

    def apply(self, robot: Robot) -> None:
        _apply_tree(self, robot)

    def to_commands(self) -> list[str]:
        return _render_tree(self)

    def call_count(self) -> int:
        return _count_calls(self)


ActionNode = Annotated[
    Union[MoveForward, TurnLeft, TurnRight, Sequence, Repeat],
    Field(discriminator="kind"),
]

Sequence.model_rebuild()
Repeat.model_rebuild()


def _apply_tree(root: Action, robot: Robot) -> None:
    """Apply a tree depth-first, keeping one child iterator per open container."""
    logger.debug("Applying %s action", root.kind)
    pending = [iter((root,))]
    while pending:
        action = next(pending[-1], None)
        if action is None:
            pending.pop()
        elif isinstance(action, Sequence):
            pending.append(iter(action.actions))
        elif isinstance(action, Repeat):
            pending.append(itertools.repeat(action.action, action.count))
        else:
            action.apply(robot)


def _render_tree(root: Action) -> list[str]:
    commands = []
    # Holds actions still to render and literal END REPEAT markers
    stack: list[Action | str] = [root]
    while stack:
        item = stack.pop()
        if isinstance(item, str):
            commands.append(item)
        elif isinstance(item, Sequence):
            stack.extend(reversed(item.actions))
        elif isinstance(item, Repeat):
            commands.append(f"REPEAT {item.count}")
            stack.extend(("END REPEAT", item.action))
        else:
            commands.extend(item.to_commands())
    return commands


def _count_calls(root: Action) -> int:
    total = 0
    # Each entry pairs an action with the product of its enclosing repeat counts
    stack: list[tuple[Action, int]] = [(root, 1)]
    while stack:
        action, factor = stack.pop()
        if isinstance(action, Sequence):
            stack.extend((child, factor) for child in action.actions)
        elif isinstance(action, Repeat):
            if action.count:
                stack.append((action.action, factor * action.count))
        else:
            total += factor * action.call_count()
    return total
