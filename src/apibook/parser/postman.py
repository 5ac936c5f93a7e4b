"""Postman Collection parser.

Parses exported collection JSON into a Collection model. Only the
top-level item list is read; folders are not walked.
"""

import json
from pathlib import Path

from pydantic import ValidationError

from apibook.errors import CollectionParseError

from .base import Collection


def parse_collection(data: bytes | str) -> Collection:
    """Parse raw collection bytes (or text) into a Collection."""
    if isinstance(data, bytes):
        try:
            data = data.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise CollectionParseError(f"collection is not UTF-8 text: {e}") from e

    try:
        doc = json.loads(data)
    except (ValueError, RecursionError) as e:
        raise CollectionParseError(f"invalid JSON: {e}") from e

    if not isinstance(doc, dict):
        raise CollectionParseError(f"expected a JSON object, got {type(doc).__name__}")

    info = doc.get("info") or {}
    if not isinstance(info, dict):
        raise CollectionParseError("'info' must be an object")

    try:
        return Collection.model_validate({"name": info.get("name"), "item": doc.get("item")})
    except ValidationError as e:
        raise CollectionParseError(_summarize(e)) from e


def parse_collection_file(file_path: Path) -> Collection:
    """Parse a collection export stored on disk."""
    return parse_collection(file_path.read_bytes())


def _summarize(error: ValidationError) -> str:
    first = error.errors()[0]
    location = ".".join(str(part) for part in first["loc"]) or "collection"
    count = error.error_count()
    more = f" (+{count - 1} more)" if count > 1 else ""
    return f"unexpected collection shape at {location}: {first['msg']}{more}"
