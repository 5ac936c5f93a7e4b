"""Collection transformer — builds the render-ready Document."""

from typing import Any

from apibook.parser.base import Collection, Document, DocumentEntry, Item

from .body import normalize_body


def build_document(collection: Collection) -> Document:
    """Map every item to one entry, keeping source order."""
    return Document(
        collection_name=collection.name,
        entries=[_build_entry(item) for item in collection.items],
    )


def _build_entry(item: Item) -> DocumentEntry:
    req = item.request
    fields, body = normalize_body(req.body)
    return DocumentEntry(
        name=item.name,
        method=req.method,
        url=flatten_url(req.url),
        headers=list(req.headers),
        fields=fields,
        body=body,
        body_mode=req.body.mode if req.body else "",
    )


def flatten_url(url: Any) -> str:
    """Plain string URLs pass through; structured URLs yield their `raw` value."""
    if isinstance(url, str):
        return url
    if isinstance(url, dict):
        raw = url.get("raw")
        if isinstance(raw, str):
            return raw
    return ""
