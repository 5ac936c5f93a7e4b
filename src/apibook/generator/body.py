"""Body normalizer — turns one request body into typed fields or raw text."""

import json

from apibook.parser.base import Body, FormEntry, NormalizedField

from .fields import describe, humanize, infer_type

FORM_MODES = ("formdata", "urlencoded")


def normalize_body(body: Body | None) -> tuple[list[NormalizedField], str]:
    """Normalize a request body.

    Returns (fields, raw_text). At most one of them carries content: fields
    when the body could be broken down, otherwise the raw text as-is.
    """
    if body is None:
        return [], ""

    if body.mode == "raw" and body.raw:
        fields = parse_json_fields(body.raw)
        if fields:
            return fields, ""
        return [], body.raw

    if body.mode in FORM_MODES:
        entries = body.formdata if body.mode == "formdata" else body.urlencoded
        if entries:
            return _form_fields(entries), ""

    return [], body.raw


def parse_json_fields(raw: str) -> list[NormalizedField]:
    """Extract one field per member of a JSON object body.

    Returns an empty list when the text is not a JSON object.
    """
    try:
        data = json.loads(raw)
    except (ValueError, RecursionError):
        return []
    if not isinstance(data, dict):
        return []

    fields = []
    for number, (key, value) in enumerate(data.items(), start=1):
        field_type = infer_type(value)
        fields.append(
            NormalizedField(
                number=number,
                field=key,
                type=field_type,
                description=describe(key, field_type, value),
            )
        )
    return fields


def _form_fields(entries: list[FormEntry]) -> list[NormalizedField]:
    # Form entries are described by their name only, without the example clause.
    return [
        NormalizedField(
            number=number,
            field=entry.key,
            type=infer_type(entry.value),
            description=humanize(entry.key),
        )
        for number, entry in enumerate(entries, start=1)
    ]
