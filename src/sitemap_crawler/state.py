"""
Crawl state: the URL registry, the cursor and per-URL outcomes.
"""
from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional


class UrlStatus(Enum):
    PENDING = "pending"
    VISITED = "visited"


class Outcome:
    HTML = "html"
    OTHER = "other"


@dataclass(slots=True)
class CrawlStats:
    """Statistics collected during crawl for summary output."""
    urls_processed: int = 0
    html_pages: int = 0
    links_discovered: int = 0
    outcome_counts: Dict[str, int] = field(default_factory=lambda: defaultdict(int))

    def record_outcome(self, outcome: str) -> None:
        """Record how a visited URL ended up."""
        self.urls_processed += 1
        self.outcome_counts[outcome] += 1
        if outcome == Outcome.HTML:
            self.html_pages += 1


@dataclass(slots=True)
class CrawlState:
    """
    Registry of discovered URLs in discovery order plus the crawl cursor.

    Keys are never removed, so the cursor only moves forward and the crawl
    is finished exactly when it reaches the end of the key list.
    """
    urls: Dict[str, UrlStatus] = field(default_factory=dict)
    cursor: int = 0
    outcomes: Dict[str, str] = field(default_factory=dict)
    stats: CrawlStats = field(default_factory=CrawlStats)
    _keys: List[str] = field(default_factory=list)

    @classmethod
    def seeded(cls, root_url: str) -> "CrawlState":
        state = cls()
        state.add(root_url)
        return state

    @property
    def keys(self) -> List[str]:
        return self._keys

    @property
    def finished(self) -> bool:
        return self.cursor == len(self._keys)

    def current(self) -> Optional[str]:
        """URL under the cursor, or None once the crawl is finished."""
        if self.finished:
            return None
        return self._keys[self.cursor]

    def add(self, url: str) -> bool:
        """Insert url as pending. Returns False if it was already known."""
        if url in self.urls:
            return False
        self.urls[url] = UrlStatus.PENDING
        self._keys.append(url)
        return True

    def mark_visited(self, url: str, outcome: str) -> None:
        """Mark url visited and record how it ended up."""
        self.urls[url] = UrlStatus.VISITED
        self.outcomes[url] = outcome
        self.stats.record_outcome(outcome)

    def advance(self) -> None:
        """Move the cursor past the current URL."""
        if self.finished:
            raise IndexError("cursor already at end of registry")
        self.cursor += 1

