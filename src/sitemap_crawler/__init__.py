"""
Single-host crawler that discovers every page reachable from a root URL
and writes an XML sitemap listing them.
"""
from sitemap_crawler.config import CrawlConfig
from sitemap_crawler.engine import CrawlProgress, CrawlResult, SitemapCrawler, crawl
from sitemap_crawler.errors import MalformedURLError

__version__ = "1.0.0"
__all__ = ["crawl", "CrawlConfig", "CrawlProgress", "CrawlResult", "MalformedURLError", "SitemapCrawler"]
