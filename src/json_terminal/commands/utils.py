"""
Naming helpers for command and option definitions.
"""

from inflection import camelize


def to_result_key(long_name: str) -> str:
    """
    Convert a hyphenated long option name into its result data key.

    The first word is kept as written; every later word has its first
    character upper-cased and the rest left untouched.

    Params:
        long_name: Long option name (e.g., "make-soup")

    Returns:
        The words joined without hyphens

    Examples:
        "make-soup" -> "makeSoup"
        "matching-all" -> "matchingAll"
        "URL-path" -> "URLPath"
        "max-HP" -> "maxHP"
    """
    first, *rest = long_name.split("-")
    if not rest:
        return first
    return first + camelize("_".join(rest))
