"""
Exceptions raised by the crawler.

Only MalformedURLError reaches the caller; the per-URL errors are absorbed
by the engine and recorded as outcomes.
"""
from __future__ import annotations


class CrawlerError(Exception):
    """Base class for crawler errors."""


class MalformedURLError(CrawlerError, ValueError):
    """The root URL is missing a scheme or a host."""


class ProbeError(CrawlerError):
    """The content-type probe could not determine a MIME type."""

    outcome = "probe_failed"

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"{url}: {reason}")
        self.url = url
        self.reason = reason


class UnreachableError(ProbeError):
    """Network or connection failure while probing."""

    outcome = "unreachable"


class TypeUnavailableError(ProbeError):
    """Response had no usable Content-Type header."""

    outcome = "type_unavailable"


class ExtractionError(CrawlerError):
    """The page could not be fetched or parsed for links."""

    outcome = "extraction_failed"

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"{url}: {reason}")
        self.url = url
        self.reason = reason
