"""
json-terminal command definitions and registration.

This package contains the command and option definition models and the
read-only command table that the parser matches command names against.
"""

from json_terminal.commands.definitions import CommandDefinition, OptionDefinition
from json_terminal.commands.registry import CommandTable
from json_terminal.commands.utils import to_result_key

__all__ = [
    "CommandDefinition",
    "CommandTable",
    "OptionDefinition",
    "to_result_key",
]
