"""
json-terminal exception classes.

This package provides all exception types used throughout json-terminal for
consistent error handling and reporting.
"""

from json_terminal.exceptions.core import (
    ContextualError,
    DuplicateOptionError,
    ErrorContext,
    ErrorLevel,
    InvalidFormatTemplateError,
    JSONTerminalError,
    LiteralError,
    MalformedLiteralError,
    ShapeMismatchError,
    UnexpectedArgumentError,
    UnknownCommandError,
    UnknownOptionError,
)

__all__ = [
    "JSONTerminalError",
    "ContextualError",
    "ErrorContext",
    "ErrorLevel",
    "UnknownCommandError",
    "UnknownOptionError",
    "DuplicateOptionError",
    "UnexpectedArgumentError",
    "InvalidFormatTemplateError",
    "LiteralError",
    "MalformedLiteralError",
    "ShapeMismatchError",
]
