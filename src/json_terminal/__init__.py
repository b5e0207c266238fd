"""
json-terminal - parse command strings with typed, nested option values

json-terminal matches a command string against a declarative table of
commands and options, and parses option values written in a compact literal
grammar (`{a, b}`, `[x, y]`, nested freely) into typed data.
"""

from importlib.metadata import version

from json_terminal.commands import CommandDefinition, CommandTable, OptionDefinition
from json_terminal.terminal import ParseResult, Terminal, parse_command

__version__ = version("json-terminal")

__all__ = [
    "__version__",
    "CommandDefinition",
    "CommandTable",
    "OptionDefinition",
    "ParseResult",
    "Terminal",
    "parse_command",
]
