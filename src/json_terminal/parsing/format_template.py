"""
Compiler for option format templates.

A format template describes the shape of an option's value:

    shape  := object | array | ""
    object := "{" field ("," field)* "}"
    field  := identifier (shape)?
    array  := "[" shape? "]"

Templates are compiled once, when the option is defined, into a FormatShape
tree that the value parser walks on every parse.
"""

import re

from json_terminal.core.types import ArrayShape, FormatShape, ObjectShape, ScalarShape
from json_terminal.exceptions import InvalidFormatTemplateError, MalformedLiteralError
from json_terminal.parsing.lexer import check_balanced, find_closing, split_top_level

FIELD_NAME_PATTERN = re.compile(r"^[a-zA-Z_][a-zA-Z0-9_]*$")


def compile_format(template: str | None) -> FormatShape:
    """
    Compile a format template into a FormatShape tree.

    Params:
        template: Raw format template, or None for a scalar/boolean option

    Returns:
        ScalarShape for a missing or blank template, otherwise the compiled
        ObjectShape or ArrayShape

    Raises:
        InvalidFormatTemplateError: If the template is malformed

    Examples:
        "{size, color}" -> ObjectShape((("size", ScalarShape()), ("color", ScalarShape())))
        "[]" -> ArrayShape(None)
    """
    if template is None or not template.strip():
        return ScalarShape()

    text = template.strip()
    try:
        check_balanced(text)
    except MalformedLiteralError as err:
        raise InvalidFormatTemplateError(template, err.reason) from err

    return _compile_shape(text, template)


def _compile_shape(text: str, template: str) -> FormatShape:
    if text[0] not in "{[":
        raise InvalidFormatTemplateError(
            template, f"expected '{{' or '[' but found '{text}'"
        )

    end = find_closing(text, 0)
    if end != len(text) - 1:
        raise InvalidFormatTemplateError(
            template, f"unexpected text after shape: '{text[end + 1:].strip()}'"
        )

    inner = text[1:end].strip()
    if text[0] == "[":
        return ArrayShape(_compile_shape(inner, template) if inner else None)

    if not inner:
        raise InvalidFormatTemplateError(template, "object shape has no fields")

    fields = [_compile_field(segment, template) for segment in split_top_level(inner)]

    names = [name for name, _ in fields]
    duplicates = sorted({name for name in names if names.count(name) > 1})
    if duplicates:
        raise InvalidFormatTemplateError(
            template, f"duplicate field names: {', '.join(duplicates)}"
        )

    return ObjectShape(fields)


def _compile_field(segment: str, template: str) -> tuple[str, FormatShape]:
    """Compile one `identifier (shape)?` field of an object template."""
    if not segment:
        raise InvalidFormatTemplateError(template, "empty field")

    nested_at = [index for index in (segment.find("{"), segment.find("[")) if index >= 0]
    split_at = min(nested_at) if nested_at else len(segment)
    name = segment[:split_at].strip()
    nested = segment[split_at:].strip()

    if not FIELD_NAME_PATTERN.match(name):
        raise InvalidFormatTemplateError(template, f"invalid field name '{name}'")

    shape = _compile_shape(nested, template) if nested else ScalarShape()
    return name, shape
