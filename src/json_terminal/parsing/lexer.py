"""
Bracket-aware scanning primitives for command strings and value literals.

Everything above this module relies on "top-level" operations: splitting or
searching text only where the `{`/`[` nesting depth is zero. The characters
`{ } [ ] ,` are structural; everything else, spaces included, is content.
"""

from json_terminal.exceptions import MalformedLiteralError, UnexpectedArgumentError

OPENING = "{["
CLOSING = "}]"
MATCHING = {"{": "}", "[": "]"}


def _step_depth(char: str, depth: int, text: str) -> int:
    """Return the nesting depth after consuming `char`."""
    if char in OPENING:
        return depth + 1
    if char in CLOSING:
        if depth == 0:
            raise MalformedLiteralError(text, f"unmatched closing '{char}'")
        return depth - 1
    return depth


def check_balanced(text: str) -> None:
    """
    Validate that every bracket/brace in `text` is matched.

    Params:
        text: Text to validate

    Raises:
        MalformedLiteralError: If depth goes negative or does not return to zero
    """
    stack = []
    for char in text:
        if char in OPENING:
            stack.append(char)
        elif char in CLOSING:
            if not stack:
                raise MalformedLiteralError(text, f"unmatched closing '{char}'")
            opener = stack.pop()
            if MATCHING[opener] != char:
                raise MalformedLiteralError(
                    text, f"'{opener}' closed by '{char}'"
                )
    if stack:
        raise MalformedLiteralError(text, f"unclosed '{stack[-1]}'")


def find_closing(text: str, start: int) -> int:
    """
    Find the index of the bracket matching the one at `text[start]`.

    Params:
        text: Text containing the bracketed region
        start: Index of an opening `{` or `[`

    Returns:
        Index of the matching closing character

    Raises:
        MalformedLiteralError: If the region is never closed or is closed by
            the wrong kind of bracket
    """
    opener = text[start]
    if opener not in OPENING:
        raise MalformedLiteralError(text, f"expected '{{' or '[' at position {start}")

    stack = []
    for index in range(start, len(text)):
        char = text[index]
        if char in OPENING:
            stack.append(char)
        elif char in CLOSING:
            expected = MATCHING[stack.pop()]
            if char != expected:
                raise MalformedLiteralError(text, f"expected '{expected}', got '{char}'")
            if not stack:
                return index

    raise MalformedLiteralError(text, f"unclosed '{opener}'")


def split_top_level(text: str, delimiter: str = ",") -> list[str]:
    """
    Split text at `delimiter` wherever the nesting depth is zero.

    Segments are stripped of surrounding whitespace; interior whitespace is
    kept so values such as "Green Zebra" survive intact.

    Params:
        text: Text to split
        delimiter: Single delimiter character

    Returns:
        List of stripped segments (one segment for text without delimiters)

    Raises:
        MalformedLiteralError: If the brackets in `text` are unbalanced

    Examples:
        "a, {b, c}, [d, e]" -> ["a", "{b, c}", "[d, e]"]
    """
    check_balanced(text)

    segments = []
    depth = 0
    current_start = 0
    for index, char in enumerate(text):
        depth = _step_depth(char, depth, text)
        if char == delimiter and depth == 0:
            segments.append(text[current_start:index].strip())
            current_start = index + 1
    segments.append(text[current_start:].strip())
    return segments


def _flag_at(text: str, index: int) -> str | None:
    """
    Return the flag token starting at `index`, or None if there is none.

    A flag is `--name` or `-n` at the start of the text or after whitespace,
    whose first name character is a letter. A dash followed by a digit is a
    negative number, not a flag.
    """
    if text[index] != "-":
        return None
    if index > 0 and not text[index - 1].isspace():
        return None

    name_start = index + 2 if text.startswith("--", index) else index + 1
    if name_start >= len(text) or not text[name_start].isalpha():
        return None

    end = name_start
    while end < len(text) and not text[end].isspace():
        end += 1
    return text[index:end]


def split_flags(text: str) -> list[tuple[str, str]]:
    """
    Split the option part of a command string into flags and raw values.

    Params:
        text: Everything after the command name

    Returns:
        List of (flag_token, raw_value) pairs in input order; flag tokens keep
        their leading dashes and raw values are stripped (possibly empty)

    Raises:
        MalformedLiteralError: If the brackets in `text` are unbalanced
        UnexpectedArgumentError: If text appears before the first flag

    Examples:
        "--smile --quantity 12" -> [("--smile", ""), ("--quantity", "12")]
    """
    check_balanced(text)

    boundaries = []
    depth = 0
    for index, char in enumerate(text):
        if depth == 0:
            token = _flag_at(text, index)
            if token is not None:
                boundaries.append((index, token))
        depth = _step_depth(char, depth, text)

    leading = text[: boundaries[0][0]] if boundaries else text
    if leading.strip():
        raise UnexpectedArgumentError(leading.strip())

    pairs = []
    for position, (index, token) in enumerate(boundaries):
        value_start = index + len(token)
        value_end = (
            boundaries[position + 1][0] if position + 1 < len(boundaries) else len(text)
        )
        pairs.append((token, text[value_start:value_end].strip()))
    return pairs
