"""Core infrastructure shared by the tools module.

Holds the single provider instance used by every extraction operation.
"""

from mcp_server_scraper.core.providers import (
    default_provider,
    get_provider,
)

__all__ = [
    "default_provider",
    "get_provider",
]
