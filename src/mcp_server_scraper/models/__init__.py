"""Pydantic data models for extraction results.

This module defines the value records produced by the extraction library:
- Readable article content (ScrapedContent)
- Page metadata and Open Graph tags (PageMetadata)
- Resolved anchors (PageLink)
- Per-URL batch outcomes (BatchResult)

Every record is built fresh for a single request and frozen once constructed.
"""

from mcp_server_scraper.models.batch import BatchResult
from mcp_server_scraper.models.page import PageLink, PageMetadata, ScrapedContent

__all__ = [
    # Page models
    "ScrapedContent",
    "PageMetadata",
    "PageLink",
    # Batch models
    "BatchResult",
]
