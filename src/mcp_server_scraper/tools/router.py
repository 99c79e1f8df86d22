"""MCP tool definitions for page extraction."""

from __future__ import annotations

from typing import Annotated

from mcp.server.fastmcp import FastMCP
from pydantic import AfterValidator, Field

from mcp_server_scraper.tools import rendering, service
from mcp_server_scraper.utils import validate_url

HttpUrl = Annotated[str, AfterValidator(validate_url)]


async def scrape_url(
    url: Annotated[HttpUrl, Field(description="The URL to scrape")],
) -> str:
    """Extract clean, readable text content from a URL.

    Returns title, byline, excerpt and main content. Best for articles, docs,
    and blog posts.
    """
    content = await service.scrape_url(url)
    return rendering.render_article(content)


async def extract_links(
    url: Annotated[HttpUrl, Field(description="The URL to extract links from")],
) -> str:
    """Extract all links from a page with their href and anchor text.

    Resolves relative URLs. Skips in-page anchors and javascript: links.
    """
    links = await service.extract_links(url)
    return rendering.render_links(links)


async def extract_metadata(
    url: Annotated[HttpUrl, Field(description="The URL to extract metadata from")],
) -> str:
    """Extract page metadata: title, description, Open Graph tags
    (og:title, og:description, og:image), canonical URL, and favicon.
    """
    meta = await service.extract_metadata(url)
    return rendering.render_metadata(meta)


async def search_page(
    url: Annotated[HttpUrl, Field(description="The URL to search")],
    query: Annotated[str, Field(description="The search query")],
) -> str:
    """Search for a query string within the page text.

    Returns matching lines, case-insensitive. Use for finding mentions of a term.
    """
    lines = await service.search_page(url, query)
    return rendering.render_search_results(lines, query)


async def scrape_multiple(
    urls: Annotated[list[HttpUrl], Field(description="Array of URLs to scrape")],
) -> str:
    """Batch scrape multiple URLs. Returns title and excerpt for each.

    Failures are reported per URL without failing the whole batch.
    """
    results = await service.scrape_multiple(urls)
    return rendering.render_batch(results)


def register_scraping_tools(mcp: FastMCP) -> None:
    """Register the extraction tools on the MCP server.

    Args:
        mcp: FastMCP server instance to register tools on
    """
    mcp.tool()(scrape_url)
    mcp.tool()(extract_links)
    mcp.tool()(extract_metadata)
    mcp.tool()(search_page)
    mcp.tool()(scrape_multiple)
