"""
Command-line interface for the crawler.
"""
from __future__ import annotations

import argparse
import json
import sys
from typing import List, Optional

from sitemap_crawler.config import DEFAULT_SITEMAP_PATH, DEFAULT_TIMEOUT_S, DEFAULT_USER_AGENT, CrawlConfig
from sitemap_crawler.engine import SitemapCrawler
from sitemap_crawler.errors import MalformedURLError
from sitemap_crawler.state import CrawlStats

OUTCOME_LABELS = {
    "html": "HTML pages",
    "other": "Other content",
    "unreachable": "Unreachable",
    "type_unavailable": "No content type",
    "probe_failed": "Probe failed",
    "extraction_failed": "Extraction failed",
}


def print_summary(stats: CrawlStats) -> None:
    """Print crawl summary to stderr."""
    sys.stderr.write("=" * 50 + "\n")
    sys.stderr.write("CRAWL SUMMARY\n")
    sys.stderr.write("=" * 50 + "\n\n")

    sys.stderr.write(f"Total URLs processed:   {stats.urls_processed}\n")
    sys.stderr.write(f"HTML pages:             {stats.html_pages}\n")
    sys.stderr.write(f"Links discovered:       {stats.links_discovered}\n\n")

    sys.stderr.write("URLs by outcome:\n")
    for outcome, count in sorted(stats.outcome_counts.items()):
        label = OUTCOME_LABELS.get(outcome, outcome)
        sys.stderr.write(f"  {label}: {count}\n")

    sys.stderr.write("\n")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the crawler CLI."""
    parser = argparse.ArgumentParser(
        description="Crawl every page under a URL on the same host and write a sitemap."
    )
    parser.add_argument("url", help="Start URL, complete with scheme (e.g. https://example.com)")
    output = parser.add_mutually_exclusive_group()
    output.add_argument(
        "--sitemap",
        default=DEFAULT_SITEMAP_PATH,
        help=f"Sitemap output path (default: {DEFAULT_SITEMAP_PATH})",
    )
    output.add_argument("--no-sitemap", action="store_true", help="Do not write a sitemap")
    parser.add_argument("--user-agent", default=DEFAULT_USER_AGENT, help="User-Agent header")
    parser.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_TIMEOUT_S,
        help=f"Probe and fetch timeout in seconds (default: {DEFAULT_TIMEOUT_S:g})",
    )
    parser.add_argument(
        "--relative-to-page",
        action="store_true",
        help="Resolve relative links against the page they appear on instead of the start URL",
    )
    parser.add_argument("--verbose", action="store_true", help="Show progress and summary")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the crawler CLI."""
    args = build_parser().parse_args(argv)

    config = CrawlConfig(
        sitemap=None if args.no_sitemap else args.sitemap,
        user_agent=args.user_agent,
        verbose=args.verbose,
        timeout_s=args.timeout,
        relative_to_page=args.relative_to_page,
    )

    try:
        crawler = SitemapCrawler(args.url, config)
    except MalformedURLError as e:
        sys.stderr.write(f"error: {e}\n")
        return 2

    result = crawler.crawl()

    if args.verbose:
        print_summary(crawler.state.stats)

    print(json.dumps(result.as_dict()))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
