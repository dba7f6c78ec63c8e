"""
Outbound link extraction for HTML pages.
"""
from __future__ import annotations

from typing import List, Optional, Protocol

import requests
from bs4 import BeautifulSoup, SoupStrainer

from sitemap_crawler.errors import ExtractionError

# Same elements as document.links: <a> and <area> carrying an href
LINK_STRAINER = SoupStrainer(["a", "area"], href=True)


class LinkExtractor(Protocol):
    def __call__(self, url: str, user_agent: Optional[str] = None) -> List[str]:
        ...


def extract_links(html: str) -> List[str]:
    """Extract href values in document order, first occurrence wins."""
    soup = BeautifulSoup(html, "lxml", parse_only=LINK_STRAINER)
    hrefs = (tag["href"].strip() for tag in soup.find_all(["a", "area"]) if tag.get("href"))
    return list(dict.fromkeys(href for href in hrefs if href))


class HtmlLinkExtractor:
    """
    Fetch a page over HTTP and return the links found in it.

    Error pages (404, 500) are parsed like any other; only a failed request
    raises ExtractionError.
    """

    def __init__(self, session: requests.Session, timeout_s: float) -> None:
        self.session = session
        self.timeout_s = timeout_s

    def __call__(self, url: str, user_agent: Optional[str] = None) -> List[str]:
        headers = {"User-Agent": user_agent} if user_agent else None
        try:
            resp = self.session.get(url, headers=headers, timeout=self.timeout_s, allow_redirects=False)
        except requests.RequestException as e:
            raise ExtractionError(url, str(e)) from e
        return extract_links(resp.text)
