"""
robotree exception classes.

This package provides all exception types raised while parsing robot
command sequences, for consistent error handling and reporting.
"""

from robotree.exceptions.core import (
    CommandParseError,
    ErrorContext,
    MalformedRepeatCountError,
    NestingTooDeepError,
    RobotreeError,
    UnknownCommandError,
    UnmatchedEndRepeatError,
    UnterminatedRepeatError,
)

__all__ = [
    "RobotreeError",
    "CommandParseError",
    "ErrorContext",
    "UnknownCommandError",
    "MalformedRepeatCountError",
    "UnterminatedRepeatError",
    "UnmatchedEndRepeatError",
    "NestingTooDeepError",
]
