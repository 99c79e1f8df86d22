"""Provider initialization for the scraper MCP server."""

from mcp_server_scraper.providers import RequestsProvider, ScraperProvider

# Shared by every tool call; the session only pools connections
default_provider: ScraperProvider = RequestsProvider()


def get_provider(url: str) -> ScraperProvider:
    """Get the provider for a URL.

    Args:
        url: The URL to fetch

    Returns:
        A provider that supports the URL

    Raises:
        ValueError: If no provider supports the URL
    """
    if default_provider.supports_url(url):
        return default_provider

    raise ValueError(f"No provider supports URL: {url}")
