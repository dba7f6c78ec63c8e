"""Fake collaborators so tests never touch the network."""
from __future__ import annotations

from typing import Dict, List, Optional, Union

from requests.structures import CaseInsensitiveDict

from sitemap_crawler.errors import ExtractionError, ProbeError


class FakeSite:
    """A site described as url -> mime type (or probe error) and url -> links."""

    def __init__(
        self,
        types: Dict[str, Union[str, ProbeError]],
        links: Optional[Dict[str, List[str]]] = None,
    ) -> None:
        self.types = types
        self.links = links or {}
        self.probed: List[str] = []
        self.extracted: List[str] = []
        self.user_agents: List[Optional[str]] = []

    def probe(self, url: str) -> str:
        self.probed.append(url)
        result = self.types.get(url, "text/html")
        if isinstance(result, ProbeError):
            raise result
        return result

    def extract(self, url: str, user_agent: Optional[str] = None) -> List[str]:
        self.extracted.append(url)
        self.user_agents.append(user_agent)
        links = self.links.get(url, [])
        if isinstance(links, ExtractionError):
            raise links
        return list(links)


class FakeResponse:
    def __init__(self, headers=None, text: str = "", status_code: int = 200) -> None:
        self.headers = CaseInsensitiveDict(headers or {})
        self.text = text
        self.status_code = status_code


class FakeSession:
    """Records calls and replays a canned response or exception."""

    def __init__(self, response=None, error: Optional[Exception] = None) -> None:
        self.response = response
        self.error = error
        self.calls = []
        self.headers = CaseInsensitiveDict()

    def _request(self, method, url, **kwargs):
        self.calls.append((method, url, kwargs))
        if self.error is not None:
            raise self.error
        return self.response

    def head(self, url, **kwargs):
        return self._request("HEAD", url, **kwargs)

    def get(self, url, **kwargs):
        return self._request("GET", url, **kwargs)
