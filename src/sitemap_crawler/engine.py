"""
Crawl frontier engine.

Drives the probe -> extract -> enqueue cycle one URL at a time until every
discovered URL has been visited, then hands the registry to the sitemap
assembler.
"""
from __future__ import annotations

import sys
from dataclasses import dataclass
from functools import partial
from typing import Any, Callable, Dict, Iterable, Iterator, Optional

import requests

from sitemap_crawler.config import CrawlConfig
from sitemap_crawler.errors import ExtractionError, ProbeError
from sitemap_crawler.extract import HtmlLinkExtractor, LinkExtractor
from sitemap_crawler.probe import probe_content_type
from sitemap_crawler.sitemap import assemble_sitemap, write_sitemap
from sitemap_crawler.state import CrawlState, Outcome
from sitemap_crawler.urls import LinkKind, RootContext, canonicalize, classify, resolve

HTML_MIME_TYPE = "text/html"

Prober = Callable[[str], str]


@dataclass(frozen=True, slots=True)
class CrawlProgress:
    """Notification emitted when processing of a URL starts."""
    url: str
    index: int
    discovered: int


@dataclass(frozen=True, slots=True)
class CrawlResult:
    """URLs processed and, when a sitemap was written, its entry count."""
    urls: int
    sitemap: Optional[int] = None

    def as_dict(self) -> Dict[str, int]:
        """Return the result as a dict, omitting the sitemap count when disabled."""
        result = {"urls": self.urls}
        if self.sitemap is not None:
            result["sitemap"] = self.sitemap
        return result


def fold_links(state: CrawlState, links: Iterable[str], root: RootContext, base: str) -> int:
    """Add in-scope links to the registry. Returns how many were new."""
    added = 0
    for link in links:
        kind = classify(link, root)
        if kind is LinkKind.EXTERNAL:
            continue
        # Same-host links go through resolve too so //host/path picks up a scheme
        target = canonicalize(resolve(link, base))
        if state.add(target):
            added += 1
    state.stats.links_discovered += added
    return added


def _record_failure(state: CrawlState, url: str, outcome: str, reason: str, verbose: bool) -> CrawlState:
    """Mark a failed URL visited and move past it."""
    if verbose:
        sys.stderr.write(f"  ✗ {outcome.upper()} {url}: {reason}\n")
    state.mark_visited(url, outcome)
    state.advance()
    return state


def crawl_step(
    state: CrawlState,
    root: RootContext,
    probe: Prober,
    extract: LinkExtractor,
    *,
    user_agent: Optional[str] = None,
    relative_to_page: bool = False,
    verbose: bool = False,
) -> CrawlState:
    """
    Process the URL under the cursor and advance past it.

    Per-URL failures are recorded in the state and never raised. Calling this
    on a finished state is a no-op.
    """
    url = state.current()
    if url is None:
        return state

    try:
        mime_type = probe(url)
    except ProbeError as e:
        return _record_failure(state, url, e.outcome, e.reason, verbose)
    except Exception as e:
        # Pluggable probers may raise anything; it still only fails this URL
        return _record_failure(state, url, ProbeError.outcome, repr(e), verbose)

    if mime_type != HTML_MIME_TYPE:
        if verbose:
            sys.stderr.write(f"  → {mime_type} {url}\n")
        state.mark_visited(url, Outcome.OTHER)
        state.advance()
        return state

    try:
        links = extract(url, user_agent)
    except ExtractionError as e:
        return _record_failure(state, url, e.outcome, e.reason, verbose)
    except Exception as e:
        return _record_failure(state, url, ExtractionError.outcome, repr(e), verbose)

    base = url if relative_to_page else root.url
    added = fold_links(state, links, root, base)
    if verbose:
        sys.stderr.write(f"  → {mime_type} {url} (+{added} links)\n")
    state.mark_visited(url, Outcome.HTML)
    state.advance()
    return state


class SitemapCrawler:
    """
    Crawl every page reachable under one root URL and write a sitemap.

    Raises MalformedURLError from the constructor when the root URL has no
    scheme or host; nothing raised during the crawl is per-URL.
    """

    def __init__(
        self,
        url: str,
        config: Optional[CrawlConfig] = None,
        *,
        session: Optional[requests.Session] = None,
        prober: Optional[Prober] = None,
        extractor: Optional[LinkExtractor] = None,
    ) -> None:
        self.root = RootContext.from_url(url)
        self.config = config or CrawlConfig()

        if session is None:
            session = requests.Session()
            session.headers["User-Agent"] = self.config.user_agent
        self.session = session

        self.prober = prober or partial(probe_content_type, self.session, timeout_s=self.config.timeout_s)
        self.extractor = extractor or HtmlLinkExtractor(self.session, self.config.timeout_s)
        self.state = CrawlState.seeded(self.root.canonical_url)

    def iter_crawl(self) -> Iterator[CrawlProgress]:
        """Run the crawl, yielding one progress record per URL started."""
        state = self.state
        if self.config.verbose:
            sys.stderr.write(f"Starting crawl from: {self.root.url}\n")

        while not state.finished:
            url = state.current()
            progress = CrawlProgress(url=url, index=state.cursor, discovered=len(state.keys))
            if self.config.verbose:
                sys.stderr.write(f"\n> checking [{progress.index + 1}/{progress.discovered}] {url}\n")
            yield progress
            state = crawl_step(
                state,
                self.root,
                self.prober,
                self.extractor,
                user_agent=self.config.user_agent,
                relative_to_page=self.config.relative_to_page,
                verbose=self.config.verbose,
            )
            self.state = state

        if self.config.verbose:
            sys.stderr.write("\n> finished\n")

    def crawl(self) -> CrawlResult:
        """Run the crawl to exhaustion and return the result."""
        for _ in self.iter_crawl():
            pass
        return self.finish()

    def finish(self) -> CrawlResult:
        """Build the result and, if enabled, write the sitemap."""
        sitemap_count = None
        if self.config.sitemap:
            if self.config.verbose:
                sys.stderr.write(f"> generating {self.config.sitemap}...\n")
            document = assemble_sitemap(self.state.keys, self.root.url)
            sitemap_count = write_sitemap(document, self.config.sitemap)
        return CrawlResult(urls=self.state.cursor, sitemap=sitemap_count)


def crawl(url: str, **options: Any) -> CrawlResult:
    """Crawl url with CrawlConfig options and return the result."""
    return SitemapCrawler(url, CrawlConfig(**options)).crawl()
