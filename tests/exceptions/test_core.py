"""
Tests for error context and exception formatting.

This module tests ErrorContext and how each parse error formats its
message and exposes the offending command.
"""

import pytest

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


class TestErrorContext:
    """Tests for ErrorContext dataclass."""

    def test_empty_context_formats_to_nothing(self):
        assert ErrorContext().format_location() == ""

    def test_full_context(self):
        ctx = ErrorContext(token="REPEAT 2", position=3, depth=2)
        formatted = ctx.format_location()
        assert "at command 3" in formatted
        assert "inside 2 open REPEAT block(s)" in formatted
        assert "command: REPEAT 2" in formatted

    def test_zero_depth_omitted(self):
        formatted = ErrorContext(token="JUMP", position=0, depth=0).format_location()
        assert "REPEAT block" not in formatted
        assert "at command 0" in formatted


class TestExceptionHierarchy:
    """All parse errors share one base and remain ValueErrors."""

    @pytest.mark.parametrize(
        "error",
        [
            UnknownCommandError("JUMP", 0),
            MalformedRepeatCountError("REPEAT x", 0),
            UnterminatedRepeatError("REPEAT 2", 0),
            UnmatchedEndRepeatError("END REPEAT", 0),
            NestingTooDeepError("REPEAT 2", 0, depth=1, limit=1),
        ],
    )
    def test_subclasses(self, error):
        assert isinstance(error, CommandParseError)
        assert isinstance(error, RobotreeError)
        assert isinstance(error, ValueError)

    def test_plain_parse_error_has_reason_only(self):
        error = CommandParseError("Empty program")
        assert str(error) == "Empty program"
        assert error.token is None
        assert error.position is None


class TestMessages:
    """Each error names what went wrong and where."""

    def test_unknown_command(self):
        error = UnknownCommandError("JUMP", 4)
        assert error.reason == "Unknown command 'JUMP'"
        assert error.token == "JUMP"
        assert error.position == 4
        assert "at command 4" in str(error)

    def test_malformed_count(self):
        error = MalformedRepeatCountError("REPEAT abc", 0)
        assert "non-negative integer" in str(error)

    def test_unterminated(self):
        error = UnterminatedRepeatError("REPEAT 2", 1, depth=1)
        assert str(error).startswith("Missing END REPEAT statement")
        assert "inside 1 open REPEAT block(s)" in str(error)

    def test_unmatched_end(self):
        error = UnmatchedEndRepeatError("END REPEAT", 5)
        assert "without a matching REPEAT" in str(error)

    def test_nesting_too_deep(self):
        error = NestingTooDeepError("REPEAT 2", 2, depth=3, limit=3)
        assert error.limit == 3
        assert "maximum is 3" in str(error)
