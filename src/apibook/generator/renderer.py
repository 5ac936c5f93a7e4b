"""Document renderer — binds a Document into a Jinja2 template."""

import logging
from pathlib import Path

from jinja2 import Environment, StrictUndefined, TemplateError

from apibook.parser.base import Document

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).parent.parent / "templates"
DEFAULT_TEMPLATE = "api_book.html"

_env = Environment(autoescape=True, undefined=StrictUndefined)


def render_document(document: Document, template: str) -> str:
    """Render the document through the given template source.

    Template errors do not raise; a diagnostic string is returned instead.
    """
    try:
        compiled = _env.from_string(template)
        return compiled.render(
            collection_name=document.collection_name,
            entries=document.entries,
        )
    except TemplateError as e:
        logger.warning("Template rendering failed: %s", e)
        return f"Template execution error: {e}"


def load_template(file_path: Path) -> str:
    """Read a template file as a single line, as Confluence storage bodies expect."""
    text = file_path.read_text(encoding="utf-8")
    return "".join(text.splitlines())


def default_template() -> str:
    """Load the packaged API book template."""
    return load_template(TEMPLATES_DIR / DEFAULT_TEMPLATE)
