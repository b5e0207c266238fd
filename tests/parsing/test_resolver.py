"""
Tests for option resolution and result data assembly.
"""

import pytest

from json_terminal.core.types import BoolValue, NumberValue, StringValue
from json_terminal.exceptions import (
    DuplicateOptionError,
    ErrorLevel,
    ShapeMismatchError,
    UnexpectedArgumentError,
    UnknownOptionError,
)
from json_terminal.parsing.resolver import resolve_options


class TestResolveOptions:
    """Test mapping flags to options and building result data."""

    def test_no_options(self, feed_tomato):
        """Test that a command without flags yields empty data."""
        assert resolve_options(feed_tomato, "") == {}

    def test_boolean_flag(self, feed_tomato):
        """Test that a bare flag without a format is true."""
        assert resolve_options(feed_tomato, "--smile") == {"smile": BoolValue(True)}

    def test_short_name_is_an_alias(self, feed_tomato):
        """Test that short names resolve to the same option and key."""
        assert resolve_options(feed_tomato, "-s") == resolve_options(
            feed_tomato, "--smile"
        )
        assert resolve_options(feed_tomato, "-v early girl") == {
            "variety": StringValue("early girl")
        }

    def test_scalar_values_are_inferred(self, feed_tomato):
        """Test options without a format that are given a value."""
        data = resolve_options(feed_tomato, "--quantity 12 --variety Roma")
        assert data == {"quantity": NumberValue(12), "variety": StringValue("Roma")}

    def test_option_order_is_free(self, feed_tomato):
        """Test that options may appear in any order."""
        first = resolve_options(feed_tomato, "--quantity 2 --smile")
        second = resolve_options(feed_tomato, "--smile --quantity 2")
        assert first == second

    def test_hyphenated_names_become_camel_case(self, feed_tomato):
        """Test result keys for hyphenated long names."""
        data = resolve_options(
            feed_tomato,
            "--make-soup {Bisque, [cream]} --matching-all [{1, red, Roma}]",
        )
        assert set(data) == {"makeSoup", "matchingAll"}

    def test_absent_options_have_no_key(self, feed_tomato):
        """Test that no defaults are substituted."""
        data = resolve_options(feed_tomato, "--smile")
        assert "variety" not in data
        assert len(data) == 1

    def test_unknown_long_option(self, feed_tomato):
        """Test that undeclared long flags are rejected."""
        with pytest.raises(UnknownOptionError) as exc_info:
            resolve_options(feed_tomato, "--frown")
        assert exc_info.value.name == "frown"
        assert exc_info.value.command_name == "feed-tomato"

    def test_unknown_short_option(self, feed_tomato):
        """Test that undeclared short flags are rejected."""
        with pytest.raises(UnknownOptionError, match="Unknown option 'x'"):
            resolve_options(feed_tomato, "-x")

    def test_short_name_is_not_a_long_name(self, feed_tomato):
        """Test that a short name is only accepted after a single dash."""
        with pytest.raises(UnknownOptionError):
            resolve_options(feed_tomato, "--s")

    def test_repeated_option(self, feed_tomato):
        """Test that the same option cannot be given twice."""
        with pytest.raises(DuplicateOptionError) as exc_info:
            resolve_options(feed_tomato, "--quantity 1 --quantity 2")
        assert exc_info.value.long_name == "quantity"

    def test_repeated_option_through_alias(self, feed_tomato):
        """Test that long and short names count as the same option."""
        with pytest.raises(DuplicateOptionError, match="--smile"):
            resolve_options(feed_tomato, "--smile -s")

    def test_structured_option_requires_value(self, feed_tomato):
        """Test that an option with a format cannot be used as a bare flag."""
        with pytest.raises(ShapeMismatchError, match="missing value"):
            resolve_options(feed_tomato, "--matching --smile")

    def test_stray_argument(self, feed_tomato):
        """Test that text before the first flag is rejected with context."""
        with pytest.raises(UnexpectedArgumentError) as exc_info:
            resolve_options(
                feed_tomato, "now --smile", command_text="feed-tomato now --smile"
            )
        assert exc_info.value.context.command_text == "feed-tomato now --smile"


class TestErrorContext:
    """Test the context attached to value errors."""

    def test_option_name_attached(self, feed_tomato):
        """Test that value errors name the option they belong to."""
        with pytest.raises(ShapeMismatchError) as exc_info:
            resolve_options(feed_tomato, "--matching {1, red}", command_text="x")

        error = exc_info.value
        assert error.context.option_name == "matching"
        assert "in option --matching" in str(error)
        assert "command:" not in str(error)

    def test_developer_level_includes_command(self, feed_tomato):
        """Test that DEVELOPER level shows the full command string."""
        command_text = "feed-tomato --matching {1, red}"
        with pytest.raises(ShapeMismatchError) as exc_info:
            resolve_options(
                feed_tomato,
                "--matching {1, red}",
                command_text=command_text,
                error_level=ErrorLevel.DEVELOPER,
            )
        assert f"command: {command_text}" in str(exc_info.value)
