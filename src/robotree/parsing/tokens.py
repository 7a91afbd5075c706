"""
Command classification for robot programs.

Each input command is a whitespace-delimited phrase. This module normalises
a raw command and classifies it into one of the recognised command types,
extracting the count of `REPEAT <N>`.
"""

import re
from dataclasses import dataclass
from enum import Enum

from robotree.exceptions import MalformedRepeatCountError, UnknownCommandError


class CommandType(Enum):
    """Type of robot command."""

    FORWARD = "FORWARD"
    LEFT = "LEFT"
    RIGHT = "RIGHT"
    REPEAT = "REPEAT"
    END_REPEAT = "END REPEAT"


# Commands without arguments, keyed by their exact text
SIMPLE_COMMANDS = {
    "FORWARD": CommandType.FORWARD,
    "LEFT": CommandType.LEFT,
    "RIGHT": CommandType.RIGHT,
    "END REPEAT": CommandType.END_REPEAT,
}

REPEAT_PATTERN = re.compile(r"^REPEAT(?: (?P<count>.*))?$")
COUNT_PATTERN = re.compile(r"^[0-9]+$")


@dataclass(frozen=True)
class Token:
    """A classified command with its position in the input sequence."""

    command_type: CommandType
    text: str
    position: int
    count: int | None = None  # REPEAT only

    def __str__(self) -> str:
        return self.text


def normalize_command(command: str, ignore_case: bool = False) -> str:
    """
    Collapse runs of whitespace in a command to single spaces and trim it.

    Params:
        command: Raw command text
        ignore_case: Upper-case the result so keywords match in any case

    Returns:
        Normalised command text, empty for blank input
    """
    text = " ".join(command.split())
    return text.upper() if ignore_case else text


def classify_token(
    command: str, position: int = 0, ignore_case: bool = False
) -> Token | None:
    """
    Classify a single command.

    Params:
        command: Raw command text
        position: Index of the command in the input sequence, for error reporting
        ignore_case: Accept keywords in any letter case

    Returns:
        The classified token, or None if the command is blank. The token
        text keeps the caller's letter case.

    Raises:
        UnknownCommandError: If the command is not a recognised form
        MalformedRepeatCountError: If REPEAT has a missing or invalid count
    """
    text = normalize_command(command)
    if not text:
        return None
    # Matching uses the folded form; errors and tokens report `text`
    key = text.upper() if ignore_case else text

    if key in SIMPLE_COMMANDS:
        return Token(SIMPLE_COMMANDS[key], text, position)

    repeat_match = REPEAT_PATTERN.match(key)
    if repeat_match:
        count = repeat_match.group("count")
        if count is None or not COUNT_PATTERN.match(count):
            raise MalformedRepeatCountError(text, position)
        try:
            repeat_count = int(count)
        except ValueError:
            # More digits than the interpreter converts to int
            raise MalformedRepeatCountError(text, position) from None
        return Token(CommandType.REPEAT, text, position, count=repeat_count)

    raise UnknownCommandError(text, position)
