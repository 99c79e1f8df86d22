"""Page fetching provider built on the requests library."""

from __future__ import annotations

import asyncio
import logging
from typing import Any
from urllib.parse import urlparse

import requests

from mcp_server_scraper import config
from mcp_server_scraper.errors import HttpError
from mcp_server_scraper.providers.base import FetchResult, ScraperProvider

logger = logging.getLogger(__name__)


class RequestsProvider(ScraperProvider):
    """Fetches pages with a shared requests session.

    No retries and no caching: a single GET per call, redirects followed.
    """

    def __init__(
        self,
        timeout: float | None = config.REQUEST_TIMEOUT,
        user_agent: str = config.USER_AGENT,
        verify_ssl: bool = config.VERIFY_SSL,
    ) -> None:
        """Initialize the requests provider.

        Args:
            timeout: Request timeout in seconds, None for no explicit timeout
            user_agent: User agent sent with every request
            verify_ssl: Verify TLS certificates
        """
        self.timeout = timeout
        self.user_agent = user_agent
        self.verify_ssl = verify_ssl

        self.session = requests.Session()

        logger.info(
            f"RequestsProvider initialized (timeout={timeout}, verify_ssl={verify_ssl})"
        )

    def supports_url(self, url: str) -> bool:
        """Check if this provider supports the given URL.

        Args:
            url: The URL to check

        Returns:
            True if the URL uses http or https scheme and names a host
        """
        try:
            parsed = urlparse(url)
            return parsed.scheme in ("http", "https") and bool(parsed.netloc)
        except ValueError:
            return False

    def _headers(self) -> dict[str, str]:
        return {
            "User-Agent": self.user_agent,
            "Accept": config.DEFAULT_ACCEPT,
        }

    async def fetch(self, url: str, **kwargs: Any) -> FetchResult:
        """Fetch a page with a single GET request.

        Args:
            url: The URL to fetch
            **kwargs: Additional options
                - timeout: Request timeout in seconds

        Returns:
            FetchResult with the decoded HTML

        Raises:
            HttpError: If the response status is not 2xx
            requests.RequestException: If the request itself fails
        """
        timeout = kwargs.get("timeout", self.timeout)
        headers = self._headers()

        # Run requests in thread pool to avoid blocking
        loop = asyncio.get_running_loop()
        response = await loop.run_in_executor(
            None,
            lambda: self.session.get(
                url,
                headers=headers,
                timeout=timeout,
                allow_redirects=True,
                verify=self.verify_ssl,
            ),
        )

        elapsed_ms = response.elapsed.total_seconds() * 1000
        logger.debug(f"GET {url} -> {response.status_code} ({elapsed_ms:.0f} ms)")

        if not 200 <= response.status_code < 300:
            raise HttpError(response.status_code, response.reason or "")

        return FetchResult(
            url=url,
            final_url=response.url or url,
            content=response.text,
            status_code=response.status_code,
            content_type=response.headers.get("Content-Type"),
            metadata={
                "encoding": response.encoding,
                "elapsed_ms": elapsed_ms,
            },
        )
