"""Exceptions raised by the extraction library."""

from __future__ import annotations


class ScraperError(Exception):
    """Base class for scraper failures."""


class HttpError(ScraperError):
    """The page responded with a non-success HTTP status."""

    def __init__(self, status_code: int, reason: str) -> None:
        self.status_code = status_code
        self.reason = reason
        super().__init__(f"HTTP {status_code}: {reason}")


class ExtractionError(ScraperError):
    """The readability pass found no usable article body."""
