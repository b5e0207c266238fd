"""
Exception classes for json-terminal command parsing.

This module defines specific exception types for the error conditions that
can occur while registering command tables and parsing command strings.
"""

from dataclasses import dataclass
from enum import Enum


class ErrorLevel(Enum):
    """Error message detail level for end users vs developers."""

    USER = "user"  # Offending option only
    DEVELOPER = "developer"  # Full context including the raw command string


@dataclass
class ErrorContext:
    """
    Context information for parse-time error messages.

    Captures which command string and which option an error was raised for,
    and formats it at different detail levels for user-facing messages vs
    developer debugging.

    Params:
        command_text: The raw command string being parsed
        option_name: Long name of the option whose value failed to parse
    """

    command_text: str | None = None
    option_name: str | None = None

    def format_location(self, error_level: ErrorLevel) -> str:
        """
        Format location information based on error level.

        Params:
            error_level: Whether to show USER or DEVELOPER level details

        Returns:
            Formatted location string with appropriate detail level
        """
        lines = []

        if self.option_name:
            lines.append(f"  in option --{self.option_name}")

        if error_level == ErrorLevel.DEVELOPER and self.command_text:
            lines.append(f"  command: {self.command_text}")

        return "\n".join(lines)


class JSONTerminalError(Exception):
    """Base exception for all json-terminal errors."""

    pass


class UnknownCommandError(JSONTerminalError):
    """Raised when a command string names a command that is not registered."""

    def __init__(self, name: str):
        """
        Initialize the exception.

        Params:
            name: The command name that could not be matched
        """
        self.name = name
        super().__init__(f"Sorry, there is no command named {name}.")


class InvalidFormatTemplateError(JSONTerminalError):
    """Raised at registration time when an option's format template is malformed."""

    def __init__(self, template: str, reason: str):
        """
        Initialize the exception.

        Params:
            template: The offending format template
            reason: Why the template is invalid
        """
        self.template = template
        self.reason = reason
        super().__init__(f"Invalid format template '{template}': {reason}")


class ContextualError(JSONTerminalError):
    """Base for parse-time errors that can carry an ErrorContext."""

    def __init__(
        self,
        primary_error: str,
        context: ErrorContext | None = None,
        error_level: ErrorLevel = ErrorLevel.USER,
    ):
        """
        Initialize the exception.

        Params:
            primary_error: The error message without location information
            context: ErrorContext with command and option information
            error_level: Level of detail to show in error message
        """
        self.primary_error = primary_error
        self.context = context
        self.error_level = error_level
        super().__init__(self._render())

    def attach_context(
        self, context: ErrorContext, error_level: ErrorLevel = ErrorLevel.USER
    ) -> None:
        """
        Attach location information to an error raised without it.

        Params:
            context: ErrorContext describing where the error occurred
            error_level: Level of detail to show in error message
        """
        self.context = context
        self.error_level = error_level
        self.args = (self._render(),)

    def _render(self) -> str:
        if self.context:
            location_info = self.context.format_location(self.error_level)
            if location_info:
                return f"{self.primary_error}\n{location_info}"
        return self.primary_error


class UnknownOptionError(ContextualError):
    """Raised when a flag is not declared by the matched command."""

    def __init__(
        self,
        name: str,
        command_name: str,
        context: ErrorContext | None = None,
        error_level: ErrorLevel = ErrorLevel.USER,
    ):
        """
        Initialize the exception.

        Params:
            name: The flag name as written, without leading dashes
            command_name: Name of the command the flag was given to
            context: ErrorContext with command and option information
            error_level: Level of detail to show in error message
        """
        self.name = name
        self.command_name = command_name
        super().__init__(
            f"Unknown option '{name}' for command '{command_name}'",
            context,
            error_level,
        )


class DuplicateOptionError(ContextualError):
    """Raised when the same option is given more than once, under either name."""

    def __init__(
        self,
        long_name: str,
        context: ErrorContext | None = None,
        error_level: ErrorLevel = ErrorLevel.USER,
    ):
        """
        Initialize the exception.

        Params:
            long_name: Long name of the repeated option
            context: ErrorContext with command and option information
            error_level: Level of detail to show in error message
        """
        self.long_name = long_name
        super().__init__(
            f"Option '--{long_name}' is given more than once", context, error_level
        )


class UnexpectedArgumentError(ContextualError):
    """Raised when text appears between the command name and the first flag."""

    def __init__(
        self,
        text: str,
        context: ErrorContext | None = None,
        error_level: ErrorLevel = ErrorLevel.USER,
    ):
        """
        Initialize the exception.

        Params:
            text: The stray text
            context: ErrorContext with command information
            error_level: Level of detail to show in error message
        """
        self.text = text
        super().__init__(
            f"Unexpected argument '{text}' before the first option",
            context,
            error_level,
        )


class LiteralError(ContextualError):
    """Base exception for option values that cannot be parsed."""

    def __init__(
        self,
        text: str,
        reason: str,
        context: ErrorContext | None = None,
        error_level: ErrorLevel = ErrorLevel.USER,
    ):
        """
        Initialize the exception.

        Params:
            text: The offending value text
            reason: Why the value cannot be parsed
            context: ErrorContext with command and option information
            error_level: Level of detail to show in error message
        """
        self.text = text
        self.reason = reason
        super().__init__(self._describe(text, reason), context, error_level)

    @staticmethod
    def _describe(text: str, reason: str) -> str:
        return f"Cannot parse '{text}': {reason}"


class MalformedLiteralError(LiteralError):
    """Raised for unbalanced brackets/braces or empty elements in a value."""

    @staticmethod
    def _describe(text: str, reason: str) -> str:
        return f"Malformed literal '{text}': {reason}"


class ShapeMismatchError(LiteralError):
    """Raised when a value does not fit the shape of its format template."""

    @staticmethod
    def _describe(text: str, reason: str) -> str:
        return f"Value '{text}' does not match its format: {reason}"
