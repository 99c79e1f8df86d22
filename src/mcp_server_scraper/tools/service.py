"""Business logic for the extraction tools."""

from __future__ import annotations

import asyncio
import logging

from mcp_server_scraper.core.providers import get_provider
from mcp_server_scraper.models import BatchResult, PageLink, PageMetadata, ScrapedContent
from mcp_server_scraper.utils import (
    extract_article,
    extract_links as extract_links_from_html,
    extract_metadata as extract_metadata_from_html,
    search_lines,
)

logger = logging.getLogger(__name__)


async def fetch_page(url: str) -> str:
    """Fetch the raw HTML of a page.

    Args:
        url: The URL to fetch

    Returns:
        The decoded response body

    Raises:
        HttpError: If the response status is not 2xx
    """
    result = await get_provider(url).fetch(url)
    return result.content


async def scrape_url(url: str) -> ScrapedContent:
    """Fetch a page and extract its readable article.

    Raises:
        HttpError: If the page could not be fetched
        ExtractionError: If no article body can be identified
    """
    html = await fetch_page(url)
    return extract_article(html, url=url)


async def extract_links(url: str) -> list[PageLink]:
    """Fetch a page and return its links resolved against the page URL."""
    html = await fetch_page(url)
    return extract_links_from_html(html, url)


async def extract_metadata(url: str) -> PageMetadata:
    """Fetch a page and return its title, description and Open Graph tags."""
    html = await fetch_page(url)
    return extract_metadata_from_html(html, url)


async def search_page(url: str, query: str) -> list[str]:
    """Fetch a page and return the body lines containing ``query``."""
    html = await fetch_page(url)
    return search_lines(html, query)


async def scrape_multiple(urls: list[str]) -> list[BatchResult]:
    """Scrape several URLs concurrently.

    Every URL is scraped independently; a failure is recorded on that URL's
    result and never affects the others.

    Args:
        urls: URLs to scrape

    Returns:
        One BatchResult per input URL, in input order
    """
    outcomes = await asyncio.gather(
        *(scrape_url(url) for url in urls),
        return_exceptions=True,
    )

    results: list[BatchResult] = []
    for url, outcome in zip(urls, outcomes):
        if isinstance(outcome, ScrapedContent):
            results.append(BatchResult(url=url, title=outcome.title, excerpt=outcome.excerpt))
            continue

        if not isinstance(outcome, Exception):
            raise outcome

        logger.warning(f"Batch scrape failed for {url}: {outcome}")
        results.append(BatchResult(url=url, error=str(outcome) or type(outcome).__name__))

    return results
