import pytest
import requests

from sitemap_crawler.errors import ExtractionError
from sitemap_crawler.extract import HtmlLinkExtractor, extract_links
from tests.fakes import FakeResponse, FakeSession

PAGE = """
<html>
  <head><link href="/style.css" rel="stylesheet"></head>
  <body>
    <a href="/about">About</a>
    <a href="http://other.com/x">Elsewhere</a>
    <a name="anchor-without-href">Nothing</a>
    <a href="">Empty</a>
    <a href="  /padded  ">Padded</a>
    <map><area href="/area-link" alt="area"></map>
    <a href="/about">About again</a>
  </body>
</html>
"""


def test_extract_links_keeps_document_order_without_duplicates():
    assert extract_links(PAGE) == ["/about", "http://other.com/x", "/padded", "/area-link"]


def test_extract_links_ignores_non_anchor_hrefs():
    assert "/style.css" not in extract_links(PAGE)


def test_extract_links_empty_document():
    assert extract_links("") == []


def test_extractor_fetches_page_with_user_agent():
    session = FakeSession(FakeResponse({"Content-Type": "text/html"}, text=PAGE))
    extractor = HtmlLinkExtractor(session, timeout_s=5.0)

    links = extractor("http://example.com/", user_agent="Facebot")

    assert links[0] == "/about"
    method, url, kwargs = session.calls[0]
    assert (method, url) == ("GET", "http://example.com/")
    assert kwargs["headers"] == {"User-Agent": "Facebot"}
    assert kwargs["timeout"] == 5.0


def test_extractor_without_user_agent_sends_no_override():
    session = FakeSession(FakeResponse(text=PAGE))
    HtmlLinkExtractor(session, timeout_s=5.0)("http://example.com/")

    assert session.calls[0][2]["headers"] is None


def test_extractor_wraps_request_errors():
    session = FakeSession(error=requests.ConnectionError("reset"))
    extractor = HtmlLinkExtractor(session, timeout_s=1.0)

    with pytest.raises(ExtractionError) as excinfo:
        extractor("http://example.com/")

    assert excinfo.value.outcome == "extraction_failed"


def test_extractor_times_out_as_extraction_failure():
    extractor = HtmlLinkExtractor(FakeSession(error=requests.Timeout("read timed out")), timeout_s=0.1)

    with pytest.raises(ExtractionError) as excinfo:
        extractor("http://example.com/slow")

    assert excinfo.value.url == "http://example.com/slow"


def test_extractor_reads_links_from_error_pages():
    response = FakeResponse(text='<a href="/still-linked">Home</a>', status_code=404)
    extractor = HtmlLinkExtractor(FakeSession(response), timeout_s=1.0)

    assert extractor("http://example.com/missing") == ["/still-linked"]
