"""
Tests for parser settings.
"""

import attrs
import pytest

from robotree.settings import ParserSettings


class TestParserSettings:
    """ParserSettings defaults, validation and immutability."""

    def test_defaults(self):
        settings = ParserSettings()
        assert settings.max_depth is None
        assert settings.ignore_case is False

    def test_unbounded_depth_allows_anything(self):
        assert ParserSettings().allows_depth(10_000)

    def test_limit_is_inclusive(self):
        settings = ParserSettings(max_depth=3)
        assert settings.allows_depth(3)
        assert not settings.allows_depth(4)

    @pytest.mark.parametrize("max_depth", [0, -1])
    def test_non_positive_limit_rejected(self, max_depth):
        with pytest.raises(ValueError):
            ParserSettings(max_depth=max_depth)

    def test_frozen(self):
        settings = ParserSettings()
        with pytest.raises(attrs.exceptions.FrozenInstanceError):
            settings.ignore_case = True

    def test_evolve(self):
        settings = attrs.evolve(ParserSettings(), ignore_case=True)
        assert settings.ignore_case is True
        assert settings.max_depth is None
