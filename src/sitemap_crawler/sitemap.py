"""
Sitemap assembly and XML output.
"""
from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Tuple, Union

SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"
CHANGEFREQ = "weekly"
PRIORITY = 0.8
# 600 sec (10 min) cache purge period, in milliseconds
CACHE_TIME_MS = 600_000


@dataclass(frozen=True, slots=True)
class SitemapEntry:
    url: str
    changefreq: str = CHANGEFREQ
    priority: float = PRIORITY


@dataclass(frozen=True, slots=True)
class SitemapDocument:
    hostname: str
    entries: Tuple[SitemapEntry, ...]
    cache_time: int = CACHE_TIME_MS

    def __len__(self) -> int:
        return len(self.entries)


def assemble_sitemap(urls: Iterable[str], root_url: str) -> SitemapDocument:
    """One entry per registry key, in registry order, whatever its status."""
    return SitemapDocument(
        hostname=root_url,
        entries=tuple(SitemapEntry(url=url) for url in urls),
    )


def build_urlset(document: SitemapDocument) -> ET.Element:
    """Build the sitemaps.org urlset element for a document."""
    root = ET.Element("urlset", xmlns=SITEMAP_NS)
    for entry in document.entries:
        url_node = ET.SubElement(root, "url")
        ET.SubElement(url_node, "loc").text = entry.url
        ET.SubElement(url_node, "changefreq").text = entry.changefreq
        ET.SubElement(url_node, "priority").text = f"{entry.priority:.1f}"
    return root


def render_sitemap(document: SitemapDocument) -> bytes:
    """Serialize a document to indented UTF-8 XML with declaration."""
    root = build_urlset(document)
    ET.indent(root, space="  ")
    return ET.tostring(root, encoding="utf-8", xml_declaration=True)


def write_sitemap(document: SitemapDocument, path: Union[str, Path]) -> int:
    """Write the sitemap to path and return the number of entries written."""
    output_path = Path(path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_bytes(render_sitemap(document))
    return len(document)
