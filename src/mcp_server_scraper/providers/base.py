"""Base provider interface for fetching pages."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any


@dataclass
class FetchResult:
    """Result from fetching a single page."""

    url: str
    final_url: str
    content: str
    status_code: int
    content_type: str | None
    metadata: dict[str, Any]


class ScraperProvider(ABC):
    """Abstract base class for page fetching backends."""

    @abstractmethod
    async def fetch(self, url: str, **kwargs: Any) -> FetchResult:
        """Fetch the HTML of a URL.

        Args:
            url: The URL to fetch
            **kwargs: Additional provider-specific options

        Returns:
            FetchResult containing the decoded body and response details

        Raises:
            HttpError: If the response status is not in the success range
        """
        pass

    @abstractmethod
    def supports_url(self, url: str) -> bool:
        """Check if this provider supports the given URL.

        Args:
            url: The URL to check

        Returns:
            True if this provider can handle the URL
        """
        pass
