"""
json-terminal parsing components.

This package provides the bracket-aware lexer, the format template compiler,
the value parser and option resolution.
"""

from json_terminal.parsing.format_template import compile_format
from json_terminal.parsing.lexer import (
    check_balanced,
    find_closing,
    split_flags,
    split_top_level,
)
from json_terminal.parsing.resolver import resolve_options
from json_terminal.parsing.values import parse_scalar, parse_value

__all__ = [
    "check_balanced",
    "compile_format",
    "find_closing",
    "parse_scalar",
    "parse_value",
    "resolve_options",
    "split_flags",
    "split_top_level",
]
