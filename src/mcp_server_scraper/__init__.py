"""MCP server exposing readable-article, link, metadata and text-search tools."""

__version__ = "1.0.0"
