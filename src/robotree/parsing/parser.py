"""
Parser for robot command sequences.

This module converts a flat sequence of commands into an action tree.
REPEAT blocks are resolved with an explicit stack of open blocks: a REPEAT
pushes a new body, its matching END REPEAT pops it and wraps it in a
`Repeat` node, so each body holds exactly the commands between its own
delimiters and nesting depth is not bounded by the interpreter stack.
"""

import logging
from collections.abc import Iterable

from robotree.core.actions import (
    Action,
    MoveForward,
    Repeat,
    Sequence,
    TurnLeft,
    TurnRight,
)
from robotree.exceptions import (
    NestingTooDeepError,
    UnmatchedEndRepeatError,
    UnterminatedRepeatError,
)
from robotree.parsing.tokens import CommandType, Token, classify_token
from robotree.settings import ParserSettings

logger = logging.getLogger(__name__)

LEAF_ACTIONS: dict[CommandType, type[Action]] = {
    CommandType.FORWARD: MoveForward,
    CommandType.LEFT: TurnLeft,
    CommandType.RIGHT: TurnRight,
}


class CommandParser:
    """Parser for robot command sequences."""

    def __init__(self, settings: ParserSettings | None = None):
        self.settings = settings or ParserSettings()

    def parse(self, commands: Iterable[str]) -> Sequence:
        """
        Parse a sequence of commands into an action tree.

        Blank commands are skipped; positions in error messages still refer
        to the caller's original sequence.

        Params:
            commands: Ordered commands, one per item (e.g. "REPEAT 3")

        Returns:
            Root `Sequence` of the parsed program

        Raises:
            CommandParseError: If any command is unknown or blocks are unbalanced
            TypeError: If given a single string instead of a sequence of commands
        """
        tokens = self.tokenize(commands)
        root = self._build_tree(tokens)
        logger.debug("Parsed %d commands", len(tokens))
        return root

    def parse_program(self, text: str) -> Sequence:
        """
        Parse program text holding one command per line.

        Params:
            text: The program, e.g. "FORWARD\\nREPEAT 2\\nLEFT\\nEND REPEAT"

        Returns:
            Root `Sequence` of the parsed program
        """
        return self.parse(text.splitlines())

    def tokenize(self, commands: Iterable[str]) -> list[Token]:
        """
        Classify every command, dropping blank ones.

        Params:
            commands: Ordered commands

        Returns:
            Classified tokens in input order

        Raises:
            CommandParseError: On the first command that is not a recognised form
        """
        if isinstance(commands, str):
            raise TypeError(
                "Expected a sequence of commands, got a string; use parse_program for program text"
            )

        tokens = []
        for position, command in enumerate(commands):
            if not isinstance(command, str):
                raise TypeError(
                    f"Command at position {position} must be a string, got {type(command).__name__}"
                )
            token = classify_token(command, position, self.settings.ignore_case)
            if token is not None:
                tokens.append(token)
        return tokens

    def _build_tree(self, tokens: list[Token]) -> Sequence:
        """
        Build the action tree from classified tokens.

        `open_blocks` holds, per open REPEAT, its token and the body list of
        the enclosing block; its length is the current nesting depth. A node
        is created only once its block is closed, so nothing is modified
        after being attached to its parent.
        """
        root: list[Action] = []
        actions = root
        open_blocks: list[tuple[Token, list[Action]]] = []

        for token in tokens:
            if token.command_type in LEAF_ACTIONS:
                actions.append(LEAF_ACTIONS[token.command_type]())

            elif token.command_type is CommandType.REPEAT:
                depth = len(open_blocks)
                if not self.settings.allows_depth(depth + 1):
                    raise NestingTooDeepError(
                        token.text, token.position, depth, self.settings.max_depth
                    )
                open_blocks.append((token, actions))
                actions = []

            elif token.command_type is CommandType.END_REPEAT:
                if not open_blocks:
                    raise UnmatchedEndRepeatError(token.text, token.position)
                opener, parent = open_blocks.pop()
                parent.append(
                    Repeat(count=opener.count, action=Sequence(actions=tuple(actions)))
                )
                logger.debug(
                    "Resolved %s at position %d with %d body actions",
                    opener.text,
                    opener.position,
                    len(actions),
                )
                actions = parent

        if open_blocks:
            # Report the outermost block left open
            opener, _ = open_blocks[0]
            raise UnterminatedRepeatError(opener.text, opener.position, 0)

        return Sequence(actions=tuple(root))


def parse_commands(
    commands: Iterable[str], settings: ParserSettings | None = None
) -> Sequence:
    """
    Convenience function to parse a sequence of commands.

    Params:
        commands: Ordered commands, one per item
        settings: Optional parser settings

    Returns:
        Root `Sequence` of the parsed program

    Raises:
        CommandParseError: If the commands are malformed
    """
    parser = CommandParser(settings)
    return parser.parse(commands)


def parse_program(text: str, settings: ParserSettings | None = None) -> Sequence:
    """
    Convenience function to parse program text with one command per line.

    Params:
        text: The program text
        settings: Optional parser settings

    Returns:
        Root `Sequence` of the parsed program

    Raises:
        CommandParseError: If the program is malformed
    """
    parser = CommandParser(settings)
    return parser.parse_program(text)
