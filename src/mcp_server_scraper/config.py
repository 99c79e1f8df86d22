"""Environment-driven configuration for the scraper server."""

from __future__ import annotations

import os

DEFAULT_USER_AGENT = "Mozilla/5.0 (compatible; mcp-server-scraper/1.0)"
DEFAULT_ACCEPT = "text/html,application/xhtml+xml"


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value.lower() in ("true", "1", "yes")


def _env_timeout(name: str) -> float | None:
    value = os.getenv(name, "").strip()
    if not value:
        return None
    try:
        return float(value)
    except ValueError as e:
        raise ValueError(f"{name} must be a number of seconds, got {value!r}") from e


USER_AGENT = os.getenv("SCRAPER_USER_AGENT") or DEFAULT_USER_AGENT

# None leaves the timeout to the transport
REQUEST_TIMEOUT = _env_timeout("SCRAPER_TIMEOUT")

VERIFY_SSL = _env_bool("SCRAPER_VERIFY_SSL", True)

LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()
