"""
Tests for command and option definition models.
"""

import pytest
from pydantic import ValidationError

from json_terminal.commands.definitions import CommandDefinition, OptionDefinition
from json_terminal.commands.utils import to_result_key
from json_terminal.core.types import ArrayShape, ObjectShape, ScalarShape
from json_terminal.exceptions import InvalidFormatTemplateError


class TestOptionDefinition:
    """Test OptionDefinition construction and compiled shapes."""

    def test_from_json_layout(self):
        """Test building an option from camel-cased keys."""
        option = OptionDefinition.model_validate(
            {"longName": "make-soup", "shortName": "p", "format": "{name, ingredients[]}"}
        )

        assert option.long_name == "make-soup"
        assert option.short_name == "p"
        assert option.shape == ObjectShape(
            (("name", ScalarShape()), ("ingredients", ArrayShape(None)))
        )
        assert option.is_structured is True
        assert option.result_key == "makeSoup"

    def test_from_python_names(self):
        """Test building an option with field names instead of aliases."""
        option = OptionDefinition(long_name="smile", short_name="s")

        assert option.format is None
        assert option.shape == ScalarShape()
        assert option.is_structured is False

    def test_shape_is_compiled_once(self):
        """Test that the compiled shape is cached on the instance."""
        option = OptionDefinition(long_name="to", format="[]")
        assert option.shape is option.shape

    def test_definitions_are_frozen(self):
        """Test that options cannot be modified after construction."""
        option = OptionDefinition(long_name="smile")
        with pytest.raises(ValidationError):
            option.long_name = "frown"

    def test_invalid_format_aborts_registration(self):
        """Test that malformed templates raise InvalidFormatTemplateError directly."""
        with pytest.raises(InvalidFormatTemplateError, match="unclosed"):
            OptionDefinition(long_name="matching", format="{size, color")

    @pytest.mark.parametrize("long_name", ["", "--smile", "make soup", "-smile", "a--b"])
    def test_invalid_long_name(self, long_name):
        """Test long name validation."""
        with pytest.raises(ValidationError):
            OptionDefinition(long_name=long_name)

    @pytest.mark.parametrize("short_name", ["", "sm", "1", "-"])
    def test_invalid_short_name(self, short_name):
        """Test that short names are single letters."""
        with pytest.raises(ValidationError):
            OptionDefinition(long_name="smile", short_name=short_name)


class TestCommandDefinition:
    """Test CommandDefinition validation and option lookup."""

    def test_options_keep_declaration_order(self, feed_tomato):
        """Test that options are stored in declaration order."""
        assert feed_tomato.name == "feed-tomato"
        assert len(feed_tomato.options) == 8
        assert [o.long_name for o in feed_tomato.options][:3] == [
            "smile",
            "variety",
            "quantity",
        ]

    def test_find_option(self, feed_tomato):
        """Test lookup by long and short name."""
        assert feed_tomato.find_option("matching-all").short_name == "a"
        assert feed_tomato.find_short_option("a").long_name == "matching-all"
        assert feed_tomato.find_option("a") is None
        assert feed_tomato.find_short_option("z") is None

    def test_command_without_options(self):
        """Test that options default to an empty tuple."""
        command = CommandDefinition(name="rest")
        assert command.options == ()

    @pytest.mark.parametrize("name", ["", "feed tomato"])
    def test_invalid_name(self, name):
        """Test that command names are single non-empty words."""
        with pytest.raises(ValidationError):
            CommandDefinition(name=name)

    def test_duplicate_long_name(self):
        """Test that two options cannot share a long name."""
        with pytest.raises(ValidationError, match="long name"):
            CommandDefinition(
                name="feed",
                options=[{"longName": "smile"}, {"longName": "smile", "shortName": "s"}],
            )

    def test_duplicate_short_name(self):
        """Test that two options cannot share a short name."""
        with pytest.raises(ValidationError, match="short name"):
            CommandDefinition(
                name="feed",
                options=[
                    {"longName": "smile", "shortName": "s"},
                    {"longName": "sing", "shortName": "s"},
                ],
            )

    def test_colliding_result_keys(self):
        """Test that two long names mapping to one result key are rejected."""
        with pytest.raises(ValidationError, match="result key"):
            CommandDefinition(
                name="feed",
                options=[{"longName": "make-soup"}, {"longName": "makeSoup"}],
            )


class TestResultKeys:
    """Test hyphen to camelCase conversion."""

    @pytest.mark.parametrize(
        ("long_name", "expected"),
        [
            ("smile", "smile"),
            ("make-soup", "makeSoup"),
            ("matching-all", "matchingAll"),
            ("feed-the-tomato", "feedTheTomato"),
            ("level-2", "level2"),
            ("URL-path", "URLPath"),
            ("max-HP", "maxHP"),
            ("Smile", "Smile"),
            ("get-URL-list", "getURLList"),
        ],
    )
    def test_to_result_key(self, long_name, expected):
        """Test conversion of long option names."""
        assert to_result_key(long_name) == expected
