"""MCP server for page extraction."""

from __future__ import annotations

from mcp.server.fastmcp import FastMCP

from mcp_server_scraper.tools import register_scraping_tools

mcp = FastMCP(
    "mcp-server-scraper",
    instructions=(
        "A web page extraction MCP server. Extracts readable article text, "
        "links, metadata and matching lines from webpages, one URL or a batch "
        "at a time."
    ),
)

register_scraping_tools(mcp)


def run_server(transport: str = "stdio", host: str = "127.0.0.1", port: int = 8000) -> None:
    """Run the MCP server.

    Args:
        transport: Transport type ('stdio', 'sse' or 'streamable-http')
        host: Host to bind to for HTTP transports
        port: Port to bind to for HTTP transports
    """
    mcp.settings.host = host
    mcp.settings.port = port

    mcp.run(transport=transport)


if __name__ == "__main__":
    run_server()
