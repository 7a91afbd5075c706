"""
Exception classes for robot command parsing.

This module defines the error taxonomy raised while turning a command
sequence into an action tree. Every parse failure is fail-fast: the first
problem found aborts parsing and no partial tree is returned.
"""

from dataclasses import dataclass


@dataclass
class ErrorContext:
    """
    Location information for parse error messages.

    Params:
        token: The command text that caused the error, after whitespace normalisation
        position: Index of the command in the caller's input sequence
        depth: Number of REPEAT blocks open around the command
    """

    token: str | None = None
    position: int | None = None
    depth: int | None = None

    def format_location(self) -> str:
        """
        Format location information for inclusion in an error message.

        Returns:
            Indented location lines, or an empty string when nothing is known
        """
        lines = []

        if self.position is not None:
            lines.append(f"  at command {self.position}")
        if self.depth:
            lines.append(f"  inside {self.depth} open REPEAT block(s)")
        if self.token is not None:
            lines.append(f"  command: {self.token}")

        return "\n".join(lines)


class RobotreeError(Exception):
    """Base exception for all robotree errors."""

    pass


class CommandParseError(RobotreeError, ValueError):
    """Raised when a command sequence cannot be parsed into an action tree."""

    def __init__(self, reason: str, context: ErrorContext | None = None):
        """
        Initialize the exception.

        Params:
            reason: Short description of the failure
            context: Where in the input the failure was detected
        """
        self.reason = reason
        self.context = context or ErrorContext()
        location = self.context.format_location()
        super().__init__(f"{reason}\n{location}" if location else reason)

    @property
    def token(self) -> str | None:
        return self.context.token

    @property
    def position(self) -> int | None:
        return self.context.position


class UnknownCommandError(CommandParseError):
    """Raised when a command is none of the recognised forms."""

    def __init__(self, token: str, position: int | None = None):
        super().__init__(
            f"Unknown command '{token}'",
            ErrorContext(token=token, position=position),
        )


class MalformedRepeatCountError(CommandParseError):
    """Raised when REPEAT is not followed by a non-negative integer count."""

    def __init__(self, token: str, position: int | None = None):
        super().__init__(
            f"REPEAT requires a non-negative integer count, got '{token}'",
            ErrorContext(token=token, position=position),
        )


class UnterminatedRepeatError(CommandParseError):
    """Raised when a REPEAT block has no matching END REPEAT."""

    def __init__(self, token: str, position: int | None = None, depth: int = 0):
        super().__init__(
            "Missing END REPEAT statement",
            ErrorContext(token=token, position=position, depth=depth),
        )


class UnmatchedEndRepeatError(CommandParseError):
    """Raised when END REPEAT appears without an open REPEAT block."""

    def __init__(self, token: str, position: int | None = None):
        super().__init__(
            "END REPEAT without a matching REPEAT",
            ErrorContext(token=token, position=position),
        )


class NestingTooDeepError(CommandParseError):
    """Raised when REPEAT blocks nest deeper than the configured limit."""

    def __init__(
        self, token: str, position: int | None = None, depth: int = 0, limit: int = 0
    ):
        self.limit = limit
        super().__init__(
            f"REPEAT nesting too deep (maximum is {limit})",
            ErrorContext(token=token, position=position, depth=depth),
        )
