"""Page fetching providers."""

from mcp_server_scraper.providers.base import FetchResult, ScraperProvider
from mcp_server_scraper.providers.requests_provider import RequestsProvider

__all__ = ["FetchResult", "ScraperProvider", "RequestsProvider"]
