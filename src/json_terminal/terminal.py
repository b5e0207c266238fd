"""
Terminal: parses command strings against a command table.

A Terminal holds nothing but an immutable CommandTable and an error detail
level, so `parse` is a pure function of its input and a single Terminal can
serve concurrent callers.
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from attrs import field, frozen

from json_terminal.commands.definitions import CommandDefinition
from json_terminal.commands.registry import CommandTable
from json_terminal.core.types import ParsedValue, PythonValue
from json_terminal.exceptions import ErrorLevel
from json_terminal.parsing.resolver import resolve_options

logger = logging.getLogger(__name__)


@frozen
class ParseResult:
    """
    Result of parsing one command string.

    Params:
        command: The matched CommandDefinition (the registered instance)
        data: Parsed option values keyed by camel-cased long option name;
            options absent from the command string have no key
    """

    command: CommandDefinition
    data: dict[str, ParsedValue] = field(hash=False)

    def to_python(self) -> dict[str, PythonValue]:
        """Return `data` with every ParsedValue converted to plain Python values."""
        return {key: value.to_python() for key, value in self.data.items()}


class Terminal:
    """Parser for command strings of the form `name --option value ...`.

    Params:
        commands: A CommandTable, or CommandDefinitions / plain dicts to build one
        error_level: Detail level of parse error messages
    """

    def __init__(
        self,
        commands: CommandTable | Iterable[CommandDefinition | Mapping[str, Any]],
        error_level: ErrorLevel = ErrorLevel.USER,
    ):
        if not isinstance(commands, CommandTable):
            commands = CommandTable(commands)
        self._commands = commands
        self._error_level = error_level

    @property
    def commands(self) -> CommandTable:
        return self._commands

    @property
    def error_level(self) -> ErrorLevel:
        return self._error_level

    def parse(self, command_string: str) -> ParseResult:
        """
        Parse a command string.

        Params:
            command_string: Raw command line, e.g.
                "feed-tomato --matching {3.23, green, Green Zebra}"

        Returns:
            ParseResult with the matched command and the parsed option data

        Raises:
            UnknownCommandError: If the command name is not registered
            UnknownOptionError: If a flag is not declared by the command
            DuplicateOptionError: If an option is given more than once
            UnexpectedArgumentError: If text appears before the first flag
            MalformedLiteralError: If a value has unbalanced brackets
            ShapeMismatchError: If a value does not fit its option's format
        """
        parts = command_string.strip().split(maxsplit=1)
        name = parts[0] if parts else ""
        remainder = parts[1] if len(parts) > 1 else ""

        command = self._commands.match(name)
        data = resolve_options(
            command,
            remainder,
            command_text=command_string,
            error_level=self._error_level,
        )

        logger.debug("Parsed command %s with options %s", command.name, list(data))
        return ParseResult(command=command, data=data)


def parse_command(
    commands: CommandTable | Iterable[CommandDefinition | Mapping[str, Any]],
    command_string: str,
    error_level: ErrorLevel = ErrorLevel.USER,
) -> ParseResult:
    """
    Convenience function to parse a single command string.

    Params:
        commands: A CommandTable, or CommandDefinitions / plain dicts to build one
        command_string: The command string to parse
        error_level: Detail level of parse error messages

    Returns:
        ParseResult with the matched command and the parsed option data

    Raises:
        UnknownCommandError: If the command name is not registered
        JSONTerminalError: If the options cannot be parsed
    """
    return Terminal(commands, error_level=error_level).parse(command_string)
