"""Main entry point for the scraper MCP server."""

from __future__ import annotations

import logging
import sys

from mcp_server_scraper import config
from mcp_server_scraper.server import run_server

logger = logging.getLogger(__name__)


def main() -> None:
    """Main entry point."""
    # stdout carries the stdio transport, so logs go to stderr
    logging.basicConfig(
        level=config.LOG_LEVEL,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    transport = "stdio"
    host = "127.0.0.1"
    port = 8000

    if len(sys.argv) > 1:
        transport = sys.argv[1]
    if len(sys.argv) > 2:
        host = sys.argv[2]
    if len(sys.argv) > 3:
        port = int(sys.argv[3])

    logger.info(f"Starting mcp-server-scraper with {transport} transport")
    try:
        run_server(transport=transport, host=host, port=port)
    except Exception:
        logger.exception("Fatal error")
        sys.exit(1)


if __name__ == "__main__":
    main()
