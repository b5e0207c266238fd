"""
Core json-terminal components.

This package provides the fundamental type definitions shared by the parsing
and command layers.
"""

from json_terminal.core.types import (
    ArrayShape,
    BoolValue,
    FormatShape,
    ListValue,
    NumberValue,
    ObjectShape,
    ObjectValue,
    ParsedValue,
    PythonValue,
    ScalarShape,
    StringValue,
)

__all__ = [
    "ArrayShape",
    "BoolValue",
    "FormatShape",
    "ListValue",
    "NumberValue",
    "ObjectShape",
    "ObjectValue",
    "ParsedValue",
    "PythonValue",
    "ScalarShape",
    "StringValue",
]
