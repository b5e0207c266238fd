"""
Command table: the registered set of commands a terminal accepts.

The table is built once and is read-only afterwards, so a single instance can
be shared by any number of concurrent parses.
"""

import logging
from collections.abc import Iterable, Iterator, Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any

from json_terminal.commands.definitions import CommandDefinition
from json_terminal.exceptions import UnknownCommandError

logger = logging.getLogger(__name__)


class CommandTable:
    """Immutable registry of CommandDefinitions keyed by command name.

    Responsibilities:
      - Validate plain-dict command descriptions into CommandDefinitions.
      - Reject two commands registered under the same name.
      - Match a command name exactly, failing with UnknownCommandError.
    """

    def __init__(self, commands: Iterable[CommandDefinition | Mapping[str, Any]] = ()):
        definitions: dict[str, CommandDefinition] = {}
        for command in commands:
            if not isinstance(command, CommandDefinition):
                command = CommandDefinition.model_validate(command)
            if command.name in definitions:
                raise ValueError(f"Command {command.name} is registered more than once")
            definitions[command.name] = command
            logger.debug(
                "Registered command %s with %d options",
                command.name,
                len(command.options),
            )
        self._commands = MappingProxyType(definitions)

    @classmethod
    def from_dict(cls, config: list[Mapping[str, Any]] | Mapping[str, Any]) -> "CommandTable":
        """Create a table from plain data.

        Args:
            config: Either a list of command descriptions, or a mapping with a
                   "commands" key holding that list.

        Returns:
            CommandTable with every described command registered

        Example:
            config = {"commands": [{"name": "feed-tomato", "options": [
                {"longName": "smile", "shortName": "s"}]}]}
            table = CommandTable.from_dict(config)
        """
        if isinstance(config, Mapping):
            config = config.get("commands") or []
        return cls(config)

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> "CommandTable":
        """Create a table from a YAML file.

        Args:
            yaml_path: Path to YAML file containing the command descriptions

        Returns:
            CommandTable with every described command registered

        Example YAML:
            commands:
              - name: feed-tomato
                options:
                  - longName: matching
                    shortName: m
                    format: "{size, color, variety}"
        """
        import yaml

        path = Path(yaml_path)
        with path.open() as f:
            config = yaml.safe_load(f) or []

        logger.debug("Loading command table from %s", path)
        return cls.from_dict(config)

    def match(self, name: str) -> CommandDefinition:
        """Look up a command by exact name.

        Params:
            name: Command name as written in the command string.

        Returns:
            The registered CommandDefinition.

        Raises:
            UnknownCommandError: If no command has this name.
        """
        try:
            return self._commands[name]
        except KeyError:
            raise UnknownCommandError(name) from None

    def names(self) -> list[str]:
        """List registered command names in registration order."""
        return list(self._commands.keys())

    def __contains__(self, name: object) -> bool:
        return name in self._commands

    def __iter__(self) -> Iterator[CommandDefinition]:
        return iter(self._commands.values())

    def __len__(self) -> int:
        return len(self._commands)
