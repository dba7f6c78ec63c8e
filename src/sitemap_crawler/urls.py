"""
URL parsing, canonicalization and scope classification.

Everything here is a pure function of its arguments.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional
from urllib.parse import urldefrag, urljoin, urlparse, urlunparse

from sitemap_crawler.errors import MalformedURLError

DEFAULT_PORTS: dict[str, int] = {"http": 80, "https": 443}

# Schemes a same-host link may carry; anything else (ftp:, mailto:) is dropped
CRAWLABLE_SCHEMES: frozenset[str] = frozenset(("", "http", "https"))


class LinkKind(Enum):
    SAME_HOST = "same_host"
    RELATIVE = "relative"
    EXTERNAL = "external"


@dataclass(frozen=True, slots=True)
class ParsedURL:
    scheme: str
    host: str
    port: Optional[int]
    path: str


@dataclass(frozen=True, slots=True)
class RootContext:
    """Scope boundary and resolution base for one crawl."""
    scheme: str
    host: str
    port: Optional[int]
    url: str
    canonical_url: str

    @classmethod
    def from_url(cls, url: str) -> "RootContext":
        """Build the root context, rejecting URLs without scheme or host."""
        if not url:
            raise MalformedURLError("url required")
        try:
            parsed = parse(url)
        except ValueError as e:
            raise MalformedURLError(f"invalid url {url!r}: {e}") from e
        if not parsed.scheme or not parsed.host:
            raise MalformedURLError(f"complete url required (with scheme): {url!r}")
        return cls(
            scheme=parsed.scheme,
            host=parsed.host,
            port=parsed.port,
            url=url,
            canonical_url=canonicalize(url),
        )


def parse(url: str) -> ParsedURL:
    """Split a URL into scheme, host, port and path.

    Raises ValueError when the port is not a number.
    """
    parsed = urlparse(url)
    return ParsedURL(
        scheme=parsed.scheme.lower(),
        host=(parsed.hostname or "").lower(),
        port=parsed.port,
        path=parsed.path,
    )


def classify(link: str, root: RootContext) -> LinkKind:
    """Decide whether a discovered link is in scope."""
    try:
        parsed = parse(link)
    except ValueError:
        return LinkKind.EXTERNAL

    if not parsed.scheme and not parsed.host:
        return LinkKind.RELATIVE
    if parsed.host == root.host and parsed.scheme in CRAWLABLE_SCHEMES:
        return LinkKind.SAME_HOST
    return LinkKind.EXTERNAL


def resolve(link: str, base: str) -> str:
    """Resolve a (possibly relative) reference against base."""
    return urljoin(base, link)


def canonicalize(url: str) -> str:
    """
    Canonical form used as the registry key.

    - Lowercases scheme and host
    - Removes default ports (:80, :443)
    - Drops fragments (#...)
    - Turns an empty path into "/"
    - Keeps querystrings and trailing slashes as they are
    """
    joined, _ = urldefrag(url)
    parsed = urlparse(joined)
    scheme = parsed.scheme.lower()

    hostname = (parsed.hostname or "").lower()
    if ":" in hostname:
        hostname = f"[{hostname}]"
    port = parsed.port

    if port is None or DEFAULT_PORTS.get(scheme) == port:
        netloc = hostname
    else:
        netloc = f"{hostname}:{port}"

    if parsed.username is not None:
        userinfo = parsed.username
        if parsed.password is not None:
            userinfo = f"{userinfo}:{parsed.password}"
        netloc = f"{userinfo}@{netloc}"

    return urlunparse((
        scheme,
        netloc,
        parsed.path or "/",
        parsed.params,
        parsed.query,
        "",
    ))
