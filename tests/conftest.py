"""Pytest configuration and fixtures for mcp-server-scraper tests."""

from __future__ import annotations

from collections.abc import Iterator
from unittest.mock import patch

import pytest
import requests

from mcp_server_scraper.core.providers import default_provider


def make_response(
    body: str,
    status_code: int = 200,
    reason: str = "OK",
    url: str = "",
) -> requests.Response:
    """Build a real requests.Response carrying an HTML body."""
    response = requests.Response()
    response.status_code = status_code
    response.reason = reason
    response._content = body.encode("utf-8")
    response.encoding = "utf-8"
    response.headers["Content-Type"] = "text/html; charset=utf-8"
    response.url = url
    return response


@pytest.fixture
def fake_http() -> Iterator[dict[str, requests.Response | Exception]]:
    """Route the default provider's GETs to a URL -> response table.

    An Exception value is raised instead of returned.
    """
    pages: dict[str, requests.Response | Exception] = {}

    def fake_get(url: str, **kwargs: object) -> requests.Response:
        page = pages[url]
        if isinstance(page, Exception):
            raise page
        return page

    with patch.object(default_provider.session, "get", side_effect=fake_get):
        yield pages


@pytest.fixture
def article_html() -> str:
    """A page with an identifiable article body."""
    return """
    <!DOCTYPE html>
    <html lang="en">
    <head>
        <meta charset="UTF-8">
        <title>Test Article</title>
        <meta name="author" content="Jane Doe">
        <meta name="description" content="A short summary of the test article.">
    </head>
    <body>
        <nav><a href="/">Home</a> <a href="/about">About</a></nav>
        <article>
            <h1>My Article Title</h1>
            <p>This is the first paragraph of the article, written so that the
            readability extractor has enough running text to recognise it as
            the main content of the page rather than navigation or boilerplate.</p>
            <p>The second paragraph continues the story with more sentences.
            Readable content is usually made of several paragraphs of prose,
            each carrying a couple of complete sentences about the topic.</p>
            <p>A third paragraph adds detail about how pages are fetched,
            parsed into a document tree and reduced to their article text,
            which is then returned together with its title and excerpt.</p>
            <p>Finally, the closing paragraph wraps up the article and makes
            sure the body is comfortably longer than the minimum size the
            extractor expects before it accepts a page as an article.</p>
        </article>
        <footer>Copyright Example Corp</footer>
    </body>
    </html>
    """


@pytest.fixture
def empty_html() -> str:
    """A page with no extractable article body."""
    return """
    <!DOCTYPE html>
    <html>
    <head><title>Empty</title></head>
    <body><div></div></body>
    </html>
    """


@pytest.fixture
def links_html() -> str:
    """HTML with navigable, in-page and script links."""
    return """
    <!DOCTYPE html>
    <html>
    <head><title>Links Page</title></head>
    <body>
        <a href="/page1">Link 1</a>
        <a href="https://example.com/page2">Link 2</a>
        <a href="#">Skip anchor</a>
        <a href="#section">Skip section</a>
        <a href="javascript:void(0)">Skip js</a>
        <a href="relative">  Relative  </a>
        <a href="/no-text"></a>
        <a>No href</a>
    </body>
    </html>
    """


@pytest.fixture
def metadata_html() -> str:
    """HTML with every metadata field present."""
    return """
    <!DOCTYPE html>
    <html>
    <head>
        <title>Page Title</title>
        <meta name="description" content="Page description here">
        <meta property="og:title" content="OG Title">
        <meta property="og:description" content="OG Description">
        <meta property="og:image" content="https://example.com/image.png">
        <link rel="canonical" href="https://example.com/canonical">
        <link rel="icon" href="/favicon.ico">
    </head>
    <body></body>
    </html>
    """


@pytest.fixture
def searchable_html() -> str:
    """HTML whose body text spans several lines."""
    return """
    <!DOCTYPE html>
    <html>
    <head><title>Search Page</title></head>
    <body>
      Line one with authentication
      Line two without match
      Line three with Authentication token
      Line four normal
    </body>
    </html>
    """
