"""Confluence publisher — creates a wiki page from a rendered document."""

import logging

import requests
from pydantic import BaseModel
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from apibook.config import Settings

logger = logging.getLogger(__name__)

RETRY_STATUSES = (429, 502, 503, 504)


class Ancestor(BaseModel):
    id: str


class Space(BaseModel):
    key: str


class Storage(BaseModel):
    value: str
    representation: str = "storage"


class PageBody(BaseModel):
    storage: Storage


class ConfluencePage(BaseModel):
    """Payload for `POST /content/`."""

    type: str = "page"
    title: str
    ancestors: list[Ancestor] = []
    space: Space
    body: PageBody


class PublishResult(BaseModel):
    """Outcome of a publish attempt. `reason` is set when it failed."""

    success: bool
    reason: str = ""
    page_id: str = ""
    url: str = ""


def build_page(title: str, body: str, space_key: str, parent_id: str = "") -> ConfluencePage:
    ancestors = [Ancestor(id=parent_id)] if parent_id else []
    return ConfluencePage(
        title=title,
        ancestors=ancestors,
        space=Space(key=space_key),
        body=PageBody(storage=Storage(value=body)),
    )


class ConfluencePublisher:
    """Posts pages to the Confluence REST API configured in Settings."""

    def __init__(self, settings: Settings, session: requests.Session | None = None):
        self.settings = settings
        self.session = session or self._make_session(settings)

    @staticmethod
    def _make_session(settings: Settings) -> requests.Session:
        session = requests.Session()
        session.headers["Content-Type"] = "application/json"
        if settings.basic_auth:
            session.headers["Authorization"] = f"Basic {settings.basic_auth}"
        elif settings.username:
            session.auth = (settings.username, settings.password)

        retry = Retry(
            total=settings.retry_count,
            backoff_factor=1,
            status_forcelist=RETRY_STATUSES,
            allowed_methods=frozenset({"POST"}),
        )
        adapter = HTTPAdapter(max_retries=retry)
        session.mount("http://", adapter)
        session.mount("https://", adapter)
        return session

    def page_for(self, title: str, body: str) -> ConfluencePage:
        return build_page(title, body, self.settings.space_key, self.settings.parent_id)

    def publish(self, title: str, body: str) -> PublishResult:
        """Create a page holding `body`. Failures are reported, not raised."""
        if not self.settings.base_url:
            return PublishResult(success=False, reason="BASE_URL is not configured")

        page = self.page_for(title, body)
        url = f"{self.settings.base_url.rstrip('/')}/content/"
        logger.info("Publishing page %r to space %s", title, self.settings.space_key)

        try:
            resp = self.session.post(
                url,
                data=page.model_dump_json(),
                timeout=self.settings.timeout,
            )
        except requests.RequestException as e:
            logger.error("Publishing page %r failed: %s", title, e)
            return PublishResult(success=False, reason=str(e))

        payload = _json_or_empty(resp)
        if not resp.ok:
            reason = f"HTTP {resp.status_code}: {payload.get('message') or resp.reason}"
            logger.error("Confluence rejected page %r: %s", title, reason)
            return PublishResult(success=False, reason=reason)

        links = payload.get("_links") or {}
        page_url = f"{links.get('base', '')}{links.get('webui', '')}"
        logger.info("Created page %s", payload.get("id", "?"))
        return PublishResult(success=True, page_id=str(payload.get("id", "")), url=page_url)


def _json_or_empty(resp: requests.Response) -> dict:
    try:
        data = resp.json()
    except ValueError:
        return {}
    return data if isinstance(data, dict) else {}
