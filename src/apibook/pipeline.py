"""Collection-to-document pipeline entry point."""

from apibook.generator.document import build_document
from apibook.generator.renderer import render_document
from apibook.parser.base import Document
from apibook.parser.postman import parse_collection


def convert_document(data: bytes | str, template: str) -> tuple[Document, str]:
    """Parse collection bytes and render them through `template`.

    Returns the document model together with the rendered text. Raises
    CollectionParseError for malformed input; rendering problems come back
    as diagnostic text instead.
    """
    document = build_document(parse_collection(data))
    return document, render_document(document, template)


def convert(data: bytes | str, template: str) -> str:
    """Rendered text only; see `convert_document`."""
    return convert_document(data, template)[1]
