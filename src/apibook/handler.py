"""Chat command handler — turns incoming messages into text replies.

Transport-agnostic: the caller downloads attachments and delivers the
returned reply. A `None` reply means the message is ignored.
"""

import logging

from apibook.errors import CollectionParseError
from apibook.pipeline import convert_document
from apibook.publisher.confluence import ConfluencePublisher

logger = logging.getLogger(__name__)

GENERATE_COMMAND = "/generate"
GENERATE_PROMPT = "Please send a Postman collection JSON file."


class CommandHandler:
    """Handles `/generate` and uploaded collection files."""

    def __init__(self, template: str, publisher: ConfluencePublisher, page_title: str = ""):
        self.template = template
        self.publisher = publisher
        self.page_title = page_title

    def handle_text(self, text: str) -> str | None:
        if text.strip().startswith(GENERATE_COMMAND):
            return GENERATE_PROMPT
        return None

    def handle_document(self, file_name: str, data: bytes) -> str | None:
        """Convert an uploaded collection and publish it to the wiki."""
        if not file_name.lower().endswith(".json"):
            return None

        try:
            document, body = convert_document(data, self.template)
        except CollectionParseError as e:
            logger.info("Rejected %s: %s", file_name, e)
            return f"Failed to parse Postman collection: {e}"

        title = self.page_title or document.collection_name or file_name

        result = self.publisher.publish(title, body)
        if result.success:
            link = f" {result.url}" if result.url else ""
            return f"Created Confluence page '{title}' ({len(document.entries)} requests).{link}"
        return f"Failed to create Confluence page: {result.reason}"
