"""
Crawl configuration.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

DEFAULT_SITEMAP_PATH = "sitemap.xml"
DEFAULT_USER_AGENT = "SitemapCrawler/1.0 (+https://www.sitemaps.org/)"
DEFAULT_TIMEOUT_S = 15.0


@dataclass(slots=True)
class CrawlConfig:
    """Options for a single crawl.

    sitemap: output path for the XML sitemap, or None to skip it.
    user_agent: User-Agent header sent with every request.
    verbose: print progress and a summary to stderr.
    timeout_s: timeout for each probe and page fetch.
    relative_to_page: resolve relative links against the page they were
        found on instead of the root URL.
    """
    sitemap: Optional[str] = DEFAULT_SITEMAP_PATH
    user_agent: str = DEFAULT_USER_AGENT
    verbose: bool = False
    timeout_s: float = DEFAULT_TIMEOUT_S
    relative_to_page: bool = False
