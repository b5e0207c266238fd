"""
Core type definitions for json-terminal.

This module contains the two tree types the parser works with: the compiled
shape of an option's format template, and the typed value parsed out of a
command string. Both are immutable.
"""

from typing import Any, TypeAlias

from attrs import field, frozen

PythonValue: TypeAlias = bool | int | float | str | dict[str, Any] | list[Any]


@frozen
class ScalarShape:
    """Leaf shape: the value is inferred as boolean, number or string."""

    def describe(self) -> str:
        return ""


@frozen
class ObjectShape:
    """Object shape with a fixed, ordered list of named fields."""

    fields: tuple[tuple[str, "FormatShape"], ...] = field(converter=tuple)

    @property
    def field_names(self) -> list[str]:
        return [name for name, _ in self.fields]

    def describe(self) -> str:
        """Render the shape back into format template syntax."""
        parts = [f"{name}{shape.describe()}" for name, shape in self.fields]
        return "{" + ", ".join(parts) + "}"


@frozen
class ArrayShape:
    """Array shape; `element` is None when elements are type-inferred scalars."""

    element: "FormatShape | None" = None

    def describe(self) -> str:
        """Render the shape back into format template syntax."""
        inner = self.element.describe() if self.element is not None else ""
        return f"[{inner}]"


FormatShape: TypeAlias = ScalarShape | ObjectShape | ArrayShape


@frozen
class BoolValue:
    value: bool

    def to_python(self) -> bool:
        return self.value


@frozen
class NumberValue:
    """Numeric value; int for literals without a fractional part, float otherwise."""

    value: int | float

    def to_python(self) -> int | float:
        return self.value


@frozen
class StringValue:
    value: str

    def to_python(self) -> str:
        return self.value


def _to_entries(fields: Any) -> tuple[tuple[str, "ParsedValue"], ...]:
    if isinstance(fields, dict):
        fields = fields.items()
    return tuple((name, value) for name, value in fields)


@frozen
class ObjectValue:
    """Object value; field order follows the format template."""

    entries: tuple[tuple[str, "ParsedValue"], ...] = field(converter=_to_entries)

    @property
    def fields(self) -> dict[str, "ParsedValue"]:
        return dict(self.entries)

    def __getitem__(self, name: str) -> "ParsedValue":
        return self.fields[name]

    def to_python(self) -> dict[str, PythonValue]:
        return {name: value.to_python() for name, value in self.entries}


@frozen
class ListValue:
    """Sequence value in input order."""

    items: tuple["ParsedValue", ...] = field(converter=tuple)

    def __getitem__(self, index: int) -> "ParsedValue":
        return self.items[index]

    def __len__(self) -> int:
        return len(self.items)

    def to_python(self) -> list[PythonValue]:
        return [item.to_python() for item in self.items]


ParsedValue: TypeAlias = BoolValue | NumberValue | StringValue | ObjectValue | ListValue
