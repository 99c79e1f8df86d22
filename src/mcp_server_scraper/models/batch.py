"""Pydantic models for batch scrape operations."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class BatchResult(BaseModel):
    """Outcome of scraping one URL within a batch."""

    model_config = ConfigDict(frozen=True)

    url: str = Field(description="The URL that was requested")
    title: str = Field(default="", description="Article title if successful")
    excerpt: str = Field(default="", description="Article excerpt if successful")
    error: str | None = Field(default=None, description="Error message if failed")

    @property
    def success(self) -> bool:
        return self.error is None
