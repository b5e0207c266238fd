"""
Command and option definitions.

Definitions are validated, immutable pydantic models. They can be built from
keyword arguments or from plain dicts in the camel-cased JSON layout
(`longName`, `shortName`, `format`). Each option compiles its format template
once, at construction time, and keeps the resulting FormatShape for every
later parse.
"""

import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, field_validator

from json_terminal.commands.utils import to_result_key
from json_terminal.core.types import FormatShape, ScalarShape
from json_terminal.parsing.format_template import compile_format

LONG_NAME_PATTERN = re.compile(r"^[a-zA-Z][a-zA-Z0-9]*(?:-[a-zA-Z0-9]+)*$")


class OptionDefinition(BaseModel):
    """
    A single option accepted by a command.

    Params:
        long_name: Name used with `--`, may contain hyphens (e.g., "make-soup")
        short_name: Optional single-letter alias used with `-`
        format: Optional format template; None means a boolean/scalar option

    Raises:
        InvalidFormatTemplateError: If `format` is malformed
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    long_name: str = Field(alias="longName")
    short_name: str | None = Field(default=None, alias="shortName")
    format: str | None = None

    _shape: FormatShape = PrivateAttr(default_factory=ScalarShape)

    @field_validator("long_name")
    @classmethod
    def _validate_long_name(cls, value: str) -> str:
        if not LONG_NAME_PATTERN.match(value):
            raise ValueError(f"Invalid long option name: {value!r}")
        return value

    @field_validator("short_name")
    @classmethod
    def _validate_short_name(cls, value: str | None) -> str | None:
        if value is not None and (len(value) != 1 or not value.isalpha()):
            raise ValueError(f"Short option name must be a single letter, got {value!r}")
        return value

    def model_post_init(self, __context: Any) -> None:
        self._shape = compile_format(self.format)

    @property
    def shape(self) -> FormatShape:
        """The compiled format template."""
        return self._shape

    @property
    def result_key(self) -> str:
        """Key under which this option's value appears in parse results."""
        return to_result_key(self.long_name)

    @property
    def is_structured(self) -> bool:
        """True when the option's value must be an object or array literal."""
        return not isinstance(self._shape, ScalarShape)


class CommandDefinition(BaseModel):
    """
    A command and the ordered options it accepts.

    Params:
        name: Unique command name, matched exactly (e.g., "feed-tomato")
        options: Options accepted by the command, in declaration order
    """

    model_config = ConfigDict(frozen=True)

    name: str
    options: tuple[OptionDefinition, ...] = ()

    @field_validator("name")
    @classmethod
    def _validate_name(cls, value: str) -> str:
        if not value or any(char.isspace() for char in value):
            raise ValueError(f"Command name must be a non-empty word, got {value!r}")
        return value

    @field_validator("options")
    @classmethod
    def _validate_unique_options(
        cls, options: tuple[OptionDefinition, ...]
    ) -> tuple[OptionDefinition, ...]:
        for label, names in (
            ("long name", [option.long_name for option in options]),
            ("short name", [o.short_name for o in options if o.short_name]),
            ("result key", [option.result_key for option in options]),
        ):
            duplicates = sorted({name for name in names if names.count(name) > 1})
            if duplicates:
                raise ValueError(
                    f"Options share a {label}: {', '.join(duplicates)}"
                )
        return options

    def find_option(self, long_name: str) -> OptionDefinition | None:
        """Return the option with this long name, or None."""
        for option in self.options:
            if option.long_name == long_name:
                return option
        return None

    def find_short_option(self, short_name: str) -> OptionDefinition | None:
        """Return the option with this short name, or None."""
        for option in self.options:
            if option.short_name == short_name:
                return option
        return None
