"""
Option resolution for a matched command.

Walks the flags that follow the command name, maps each one to the command's
OptionDefinition, parses its raw value and builds the result data keyed by
the option's camel-cased long name.
"""

from typing import TYPE_CHECKING

from json_terminal.core.types import BoolValue, ParsedValue
from json_terminal.exceptions import (
    ContextualError,
    DuplicateOptionError,
    ErrorContext,
    ErrorLevel,
    LiteralError,
    ShapeMismatchError,
    UnknownOptionError,
)
from json_terminal.parsing.lexer import split_flags
from json_terminal.parsing.values import parse_scalar, parse_value

if TYPE_CHECKING:
    from json_terminal.commands.definitions import CommandDefinition, OptionDefinition


def resolve_options(
    command: "CommandDefinition",
    text: str,
    command_text: str | None = None,
    error_level: ErrorLevel = ErrorLevel.USER,
) -> dict[str, ParsedValue]:
    """
    Resolve and parse every option given to a command.

    Params:
        command: The matched command
        text: Everything after the command name
        command_text: Full command string, used for error context
        error_level: Level of detail for error messages

    Returns:
        Mapping of result key to parsed value, containing only the options
        present in `text`, in input order

    Raises:
        UnknownOptionError: If a flag is not declared by the command
        DuplicateOptionError: If an option is given more than once
        UnexpectedArgumentError: If text appears before the first flag
        MalformedLiteralError: If a value has unbalanced brackets
        ShapeMismatchError: If a value does not fit its option's format
    """
    context = ErrorContext(command_text=command_text)
    try:
        flags = split_flags(text)
    except ContextualError as err:
        err.attach_context(context, error_level)
        raise

    data: dict[str, ParsedValue] = {}
    seen: set[str] = set()

    for token, raw_value in flags:
        option = _lookup_option(command, token, context, error_level)
        option_context = ErrorContext(
            command_text=command_text, option_name=option.long_name
        )

        if option.long_name in seen:
            raise DuplicateOptionError(option.long_name, option_context, error_level)
        seen.add(option.long_name)

        try:
            data[option.result_key] = _option_value(option, raw_value)
        except LiteralError as err:
            err.attach_context(option_context, error_level)
            raise

    return data


def _lookup_option(
    command: "CommandDefinition",
    token: str,
    context: ErrorContext,
    error_level: ErrorLevel,
) -> "OptionDefinition":
    if token.startswith("--"):
        name = token[2:]
        option = command.find_option(name)
    else:
        name = token[1:]
        option = command.find_short_option(name)

    if option is None:
        raise UnknownOptionError(name, command.name, context, error_level)
    return option


def _option_value(option: "OptionDefinition", raw_value: str) -> ParsedValue:
    """Parse an option's raw value span against its compiled shape."""
    if not option.is_structured:
        # Bare flag without a value
        if not raw_value:
            return BoolValue(True)
        return parse_scalar(raw_value)

    if not raw_value:
        raise ShapeMismatchError(
            raw_value, f"missing value for format {option.shape.describe()}"
        )
    return parse_value(raw_value, option.shape)
