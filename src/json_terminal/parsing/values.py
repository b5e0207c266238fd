"""
Recursive-descent parser for option values.

Values are parsed against the FormatShape compiled from their option's
format template. Object and array literals recurse into each other without a
depth limit; scalar leaves are typed by inference.
"""

import re

from json_terminal.core.types import (
    ArrayShape,
    BoolValue,
    FormatShape,
    ListValue,
    NumberValue,
    ObjectShape,
    ObjectValue,
    ParsedValue,
    ScalarShape,
    StringValue,
)
from json_terminal.exceptions import MalformedLiteralError, ShapeMismatchError
from json_terminal.parsing.lexer import check_balanced, find_closing, split_top_level

NUMBER_PATTERN = re.compile(r"^-?[0-9]+(?:\.[0-9]+)?$")


def parse_scalar(text: str) -> BoolValue | NumberValue | StringValue:
    """
    Infer the type of a scalar value.

    Params:
        text: Raw scalar text

    Returns:
        BoolValue for exactly `true`/`false`, NumberValue for numeric
        literals, otherwise StringValue with the stripped text verbatim

    Examples:
        "true" -> BoolValue(True)
        "12" -> NumberValue(12)
        "3.23" -> NumberValue(3.23)
        "early girl" -> StringValue("early girl")
    """
    text = text.strip()

    if text == "true":
        return BoolValue(True)
    elif text == "false":
        return BoolValue(False)

    if NUMBER_PATTERN.match(text):
        if "." not in text:
            return NumberValue(int(text))
        return NumberValue(float(text))

    return StringValue(text)


def parse_value(text: str, shape: FormatShape | None = None) -> ParsedValue:
    """
    Parse a raw value against a FormatShape.

    Params:
        text: Raw value text
        shape: Compiled shape; None behaves like ScalarShape

    Returns:
        The typed ParsedValue

    Raises:
        ShapeMismatchError: If the value lacks the wrapper its shape requires
            or an object literal has the wrong number of elements
        MalformedLiteralError: If brackets are unbalanced or an element is empty
    """
    text = text.strip()

    if shape is None or isinstance(shape, ScalarShape):
        return parse_scalar(text)
    elif isinstance(shape, ObjectShape):
        return _parse_object(text, shape)
    elif isinstance(shape, ArrayShape):
        return _parse_array(text, shape)

    raise TypeError(f"Unsupported shape: {shape!r}")


def _unwrap(text: str, opener: str, shape: FormatShape) -> str:
    """Return the interior of a `{...}` or `[...]` literal that spans all of `text`."""
    check_balanced(text)

    kind = "object" if opener == "{" else "array"
    if not text.startswith(opener):
        raise ShapeMismatchError(
            text, f"expected an {kind} literal for format {shape.describe()}"
        )

    end = find_closing(text, 0)
    if end != len(text) - 1:
        raise ShapeMismatchError(
            text, f"unexpected text after {kind} literal: '{text[end + 1:].strip()}'"
        )
    return text[1:end]


def _split_elements(text: str, interior: str) -> list[str]:
    if not interior.strip():
        return []

    segments = split_top_level(interior)
    if any(not segment for segment in segments):
        raise MalformedLiteralError(text, "empty element")
    return segments


def _parse_object(text: str, shape: ObjectShape) -> ObjectValue:
    segments = _split_elements(text, _unwrap(text, "{", shape))

    if len(segments) != len(shape.fields):
        raise ShapeMismatchError(
            text,
            f"expected {len(shape.fields)} elements for format {shape.describe()}, "
            f"got {len(segments)}",
        )

    return ObjectValue(
        {
            name: parse_value(segment, field_shape)
            for (name, field_shape), segment in zip(shape.fields, segments)
        }
    )


def _parse_array(text: str, shape: ArrayShape) -> ListValue:
    segments = _split_elements(text, _unwrap(text, "[", shape))
    return ListValue(parse_value(segment, shape.element) for segment in segments)
