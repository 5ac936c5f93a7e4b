"""Field-level helpers: type inference, name humanizing, descriptions."""

import re
from typing import Any

from apibook.parser.base import FieldType

# lower/digit -> Upper ("userId"), or acronym -> Capitalized word ("HTTPStatus").
# A plural "s" stays with its acronym ("userIDs").
_WORD_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z](?!s(?:[^a-z]|$))[a-z])")


def infer_type(value: Any) -> FieldType:
    """Map a decoded JSON value to its type tag. Never raises."""
    if value is None:
        return "null"
    # bool is a subclass of int
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int):
        return "integer"
    if isinstance(value, float):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return "unknown"


def humanize(name: str) -> str:
    """Turn a snake_case or camelCase identifier into a sentence-case label.

    >>> humanize("user_id"), humanize("userId"), humanize("ID")
    ('User id', 'User id', 'ID')
    """
    if not name:
        return ""
    spaced = _WORD_BOUNDARY.sub(" ", name.replace("_", " "))
    # acronyms ("ID", "IDs") keep their case, other words are lowercased
    words = [w if w[:2].isupper() else w.lower() for w in spaced.split(" ")]
    label = " ".join(words)
    return label[0].upper() + label[1:]


def describe(name: str, field_type: FieldType, value: Any = None) -> str:
    """One-line description for a body field."""
    readable = humanize(name)

    if field_type == "string":
        if isinstance(value, str) and value:
            return f"{readable} (example: {value})"
        return readable
    if field_type in ("integer", "number"):
        return f"{readable} value"
    if field_type == "boolean":
        return f"{readable} flag"
    if field_type == "array":
        return f"List of {readable}"
    if field_type == "object":
        return f"{readable} object details"
    return readable
