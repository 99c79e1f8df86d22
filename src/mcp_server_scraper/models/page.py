"""Pydantic models for values extracted from a single page."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ScrapedContent(BaseModel):
    """Readable article content extracted from a page."""

    model_config = ConfigDict(frozen=True)

    title: str = Field(default="", description="Article title")
    content: str = Field(default="", description="Cleaned article body text")
    excerpt: str = Field(default="", description="Short summary of the article")
    byline: str = Field(default="", description="Author information")
    site_name: str = Field(default="", description="Name of the publishing site")
    length: int = Field(default=0, description="Character count of the cleaned body text")


class PageMetadata(BaseModel):
    """Title, description, Open Graph tags and link hints of a page."""

    model_config = ConfigDict(frozen=True)

    title: str = Field(default="", description="Document title")
    description: str = Field(default="", description="Meta description")
    og_title: str = Field(default="", description="og:title")
    og_description: str = Field(default="", description="og:description")
    og_image: str = Field(default="", description="og:image")
    canonical: str = Field(default="", description="Canonical URL")
    favicon: str = Field(default="", description="Favicon URL")


class PageLink(BaseModel):
    """An anchor resolved to an absolute URL."""

    model_config = ConfigDict(frozen=True)

    href: str = Field(description="Absolute link target")
    text: str = Field(default="", description="Trimmed anchor text")
