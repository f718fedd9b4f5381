"""Page fetching and structural extraction.

Fetching goes through ``requests`` and parsing through BeautifulSoup with
the ``html5lib`` backend, which follows the HTML5 tree-building rules: a
page that omits ``<html>``, ``<head>`` or ``<body>`` still gets both
sections filled in.  Each page is fetched exactly once:
transport errors propagate as :class:`~web_rag.errors.TransportError`
without retries.
"""

from __future__ import annotations

import logging

import requests
from bs4 import BeautifulSoup

from web_rag.config import settings
from web_rag.errors import InvalidInputError, TransportError
from web_rag.ingestion.models import ExtractedPage

logger = logging.getLogger(__name__)

EXTERNAL_SCHEMES = ("http://", "https://")

DEFAULT_HEADERS = {
    "User-Agent": "web-rag/0.1",
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
}


def _inner_html(soup: BeautifulSoup, tag_name: str) -> str:
    tag = soup.find(tag_name)
    if tag is None:
        return ""
    return tag.decode_contents()


def classify_links(soup: BeautifulSoup) -> tuple[list[str], list[str]]:
    """Split every ``<a href>`` into ``(external, internal)`` lists.

    Anchors without an href, and the bare root link ``"/"``, are skipped.
    Both lists are de-duplicated while keeping first-seen order.
    """
    external: dict[str, None] = {}
    internal: dict[str, None] = {}
    for anchor in soup.find_all("a"):
        href = anchor.get("href")
        if not href or href == "/":
            continue
        if href.startswith(EXTERNAL_SCHEMES):
            external.setdefault(href, None)
        else:
            internal.setdefault(href, None)
    return list(external), list(internal)


def parse_page(url: str, html: str) -> ExtractedPage:
    """Build an :class:`ExtractedPage` from already-fetched *html*."""
    soup = BeautifulSoup(html, "html5lib")
    external, internal = classify_links(soup)
    return ExtractedPage(
        url=url,
        head=_inner_html(soup, "head"),
        body=_inner_html(soup, "body"),
        external_links=external,
        internal_links=internal,
    )


class PageExtractor:
    """Fetch a URL and return its structural representation.

    Parameters
    ----------
    session:
        HTTP session to use.  A fresh :class:`requests.Session` is created
        when omitted.
    timeout:
        Per-request timeout in seconds.
    """

    def __init__(
        self,
        session: requests.Session | None = None,
        *,
        timeout: float = settings.request_timeout,
    ) -> None:
        self._session = session or requests.Session()
        self._timeout = timeout

    def fetch(self, url: str) -> str:
        try:
            resp = self._session.get(url, headers=DEFAULT_HEADERS, timeout=self._timeout)
            resp.raise_for_status()
        except requests.RequestException as exc:
            raise TransportError(f"failed to fetch {url}: {exc}") from exc
        return resp.text or ""

    def extract(self, url: str) -> ExtractedPage:
        """Fetch *url* and extract head, body and outbound links."""
        if not url or not url.strip():
            raise InvalidInputError("a URL is required")

        url = url.strip()
        html = self.fetch(url)
        page = parse_page(url, html)
        logger.debug(
            "Extracted %s: head=%d chars, body=%d chars, %d external / %d internal links",
            url,
            len(page.head),
            len(page.body),
            len(page.external_links),
            len(page.internal_links),
        )
        return page

    def close(self) -> None:
        self._session.close()
