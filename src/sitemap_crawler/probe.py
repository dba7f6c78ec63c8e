"""
Lightweight content-type check for a URL.
"""
from __future__ import annotations

from typing import Optional

import requests

from sitemap_crawler.errors import TypeUnavailableError, UnreachableError


def parse_mime_type(content_type: Optional[str]) -> Optional[str]:
    """Return the `type/subtype` token of a Content-Type header value."""
    if not content_type:
        return None
    for token in content_type.split(";"):
        if token.find("/") > 0:
            return token.strip().lower()
    return None


def probe_content_type(session: requests.Session, url: str, timeout_s: float) -> str:
    """
    Issue a HEAD request against the URL and return its MIME type.

    Redirects are not followed and the status code is not interpreted.

    Raises:
        UnreachableError: the request itself failed (connection, timeout).
        TypeUnavailableError: no Content-Type, or no type/subtype token in it.
    """
    try:
        resp = session.head(url, timeout=timeout_s, allow_redirects=False)
    except requests.RequestException as e:
        raise UnreachableError(url, f"connection error: {e}") from e

    header = resp.headers.get("content-type")
    if not header:
        raise TypeUnavailableError(url, "content-type not available")

    mime_type = parse_mime_type(header)
    if mime_type is None:
        raise TypeUnavailableError(url, f"no mime type in content-type {header!r}")
    return mime_type
