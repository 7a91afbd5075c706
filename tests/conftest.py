"""
Shared test fixtures and utilities for the robotree test suite.
"""

import pytest

from robotree.parsing.parser import CommandParser


class RecordingRobot:
    """Robot that records every capability call in order."""

    def __init__(self):
        self.calls: list[str] = []

    def move_forward(self) -> None:
        self.calls.append("forward")

    def turn_left(self) -> None:
        self.calls.append("left")

    def turn_right(self) -> None:
        self.calls.append("right")


@pytest.fixture
def robot():
    """Fresh recording robot.

    Usage:
        def test_something(robot):
            action.apply(robot)
            assert robot.calls == ["forward"]
    """
    return RecordingRobot()


@pytest.fixture
def make_robot():
    """Factory for additional recording robots within one test."""
    return RecordingRobot


@pytest.fixture
def parser():
    """Parser with default settings."""
    return CommandParser()
