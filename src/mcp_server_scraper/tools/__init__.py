"""MCP extraction tools and business logic.

This module provides the extraction functionality exposed as MCP tools:
- scrape_url: Readable article extraction
- extract_links: Link discovery with relative URL resolution
- extract_metadata: Title, description and Open Graph tags
- search_page: Case-insensitive line search over the page text
- scrape_multiple: Batch article extraction with per-URL failures

The tools module follows a router -> service pattern:
- router.py: MCP tool definitions, input validation and registration
- service.py: Fetching, parsing and batch operations
- rendering.py: Text formatting of results
"""

from mcp_server_scraper.tools.router import (
    extract_links,
    extract_metadata,
    register_scraping_tools,
    scrape_multiple,
    scrape_url,
    search_page,
    validate_url,
)

__all__ = [
    # MCP tool functions
    "scrape_url",
    "extract_links",
    "extract_metadata",
    "search_page",
    "scrape_multiple",
    # Registration and validation
    "register_scraping_tools",
    "validate_url",
]
