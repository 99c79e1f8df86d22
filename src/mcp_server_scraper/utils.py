"""Utility functions for HTML processing."""

from __future__ import annotations

import json
from urllib.parse import urljoin, urlparse

import trafilatura
from bs4 import BeautifulSoup
from pydantic import AnyHttpUrl, TypeAdapter, ValidationError

from mcp_server_scraper.errors import ExtractionError
from mcp_server_scraper.models import PageLink, PageMetadata, ScrapedContent

SKIPPED_HREF_PREFIXES = ("#", "javascript:")

_http_url_adapter = TypeAdapter(AnyHttpUrl)


def validate_url(url: str) -> str:
    """Reject anything that is not a well-formed absolute http(s) URL.

    The URL is returned unchanged; pydantic only checks it.

    Raises:
        ValueError: If the URL is malformed
    """
    try:
        _http_url_adapter.validate_python(url)
    except ValidationError as e:
        raise ValueError(f"Invalid URL: {url!r} (must be an absolute http or https URL)") from e
    return url


def parse_html(html: str) -> BeautifulSoup:
    """Parse HTML into a navigable document."""
    return BeautifulSoup(html, "lxml")


def _first_paragraph(content: str, title: str) -> str:
    # Headings come through as their own lines; skip the one repeating the title
    for line in content.split("\n"):
        line = line.strip()
        if line and line != title.strip():
            return line
    return ""


def extract_article(html: str, url: str | None = None) -> ScrapedContent:
    """Extract the readable article from HTML.

    Args:
        html: The HTML content to process
        url: Optional page URL, used by the extractor for metadata hints

    Returns:
        ScrapedContent with the cleaned body text and article metadata

    Raises:
        ExtractionError: If no article body can be identified
    """
    extracted = trafilatura.extract(
        html,
        url=url,
        output_format="json",
        with_metadata=True,
        include_comments=False,
    )
    if not extracted:
        raise ExtractionError("Could not extract readable content from the page")

    article = json.loads(extracted)
    content = (article.get("text") or "").strip()
    if not content:
        raise ExtractionError("Could not extract readable content from the page")

    title = article.get("title") or ""
    return ScrapedContent(
        title=title,
        content=content,
        excerpt=article.get("excerpt") or _first_paragraph(content, title),
        byline=article.get("author") or "",
        site_name=article.get("source-hostname") or "",
        # The extractor never reports a length of its own
        length=len(content),
    )


def _resolve(base_url: str, href: str) -> str | None:
    try:
        resolved = urljoin(base_url, href)
        scheme = urlparse(resolved).scheme
    except ValueError:
        return None

    if not scheme:
        return None
    if scheme in ("http", "https"):
        try:
            validate_url(resolved)
        except ValueError:
            return None
    return resolved


def extract_links(html: str, base_url: str) -> list[PageLink]:
    """Extract every navigable link from HTML.

    In-page anchors (``#...``) and ``javascript:`` links are skipped; the rest
    are resolved against ``base_url``. Links that cannot be resolved are
    dropped.

    Args:
        html: The HTML content to process
        base_url: URL of the page, used to resolve relative hrefs

    Returns:
        List of PageLink in document order
    """
    soup = parse_html(html)
    links: list[PageLink] = []

    for anchor in soup.select("a[href]"):
        href = anchor["href"].strip()
        if not href or href.lower().startswith(SKIPPED_HREF_PREFIXES):
            continue

        resolved = _resolve(base_url, href)
        if resolved is None:
            continue

        links.append(PageLink(href=resolved, text=anchor.get_text().strip()))

    return links


def _meta_content(soup: BeautifulSoup, name: str) -> str:
    element = soup.select_one(f'meta[property="{name}"], meta[name="{name}"]')
    if element is None:
        return ""
    return element.get("content") or ""


def _link_href(soup: BeautifulSoup, selector: str, base_url: str) -> str:
    element = soup.select_one(selector)
    if element is None or not element.get("href"):
        return ""
    return _resolve(base_url, element["href"].strip()) or ""


def extract_metadata(html: str, base_url: str) -> PageMetadata:
    """Extract title, description, Open Graph tags, canonical URL and favicon.

    Args:
        html: The HTML content to process
        base_url: URL of the page, used to resolve canonical and favicon hrefs

    Returns:
        PageMetadata with an empty string for every absent field
    """
    soup = parse_html(html)
    title_tag = soup.select_one("title")

    return PageMetadata(
        title=title_tag.get_text().strip() if title_tag else "",
        description=_meta_content(soup, "description"),
        og_title=_meta_content(soup, "og:title"),
        og_description=_meta_content(soup, "og:description"),
        og_image=_meta_content(soup, "og:image"),
        canonical=_link_href(soup, "link[rel='canonical']", base_url),
        favicon=_link_href(soup, "link[rel='icon'], link[rel='shortcut icon']", base_url),
    )


def search_lines(html: str, query: str) -> list[str]:
    """Find the lines of the page body that contain a query.

    Matching is case-insensitive substring containment.

    Args:
        html: The HTML content to process
        query: Text to look for

    Returns:
        Matching trimmed lines in document order
    """
    soup = parse_html(html)
    text = soup.body.get_text() if soup.body else ""

    query_lower = query.lower()
    lines = [line.strip() for line in text.split("\n")]
    return [line for line in lines if line and query_lower in line.lower()]
