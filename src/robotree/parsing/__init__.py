"""
robotree parsing components.

This package provides command classification and the parser that builds
action trees from command sequences.
"""

from robotree.exceptions import CommandParseError
from robotree.parsing.parser import CommandParser, parse_commands, parse_program
from robotree.parsing.tokens import (
    CommandType,
    Token,
    classify_token,
    normalize_command,
)

__all__ = [
    "CommandParseError",
    "CommandParser",
    "CommandType",
    "Token",
    "classify_token",
    "normalize_command",
    "parse_commands",
    "parse_program",
]
