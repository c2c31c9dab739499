"""Plugin sources — read payloads from local files or download them from URLs.

Both JSON and YAML are accepted; YAML's ``safe_load`` parses JSON documents
as well, so a single decoder covers either format.
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Any
from urllib.parse import urlparse

import httpx
import yaml

from teleport.errors import (
    PluginConfigError,
    PluginEnvironmentError,
    PluginFetchError,
    PluginNotFoundError,
    PluginParseError,
)

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Environment configuration
# ---------------------------------------------------------------------------

TELEPORT_HTTP_TIMEOUT = os.environ.get("TELEPORT_HTTP_TIMEOUT", "")
TELEPORT_USER_AGENT = os.environ.get("TELEPORT_USER_AGENT", "teleport-plugin-loader")


def is_url(source: str) -> bool:
    """True if ``source`` is lexically an http(s) URL with a host."""
    parsed = urlparse(source)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def is_browser_runtime() -> bool:
    """True when running inside a browser-hosted interpreter (Pyodide)."""
    return sys.platform == "emscripten"


def default_timeout() -> float | None:
    """Seconds from ``TELEPORT_HTTP_TIMEOUT``; None (no timeout) when unset."""
    if not TELEPORT_HTTP_TIMEOUT:
        return None
    try:
        timeout = float(TELEPORT_HTTP_TIMEOUT)
    except ValueError:
        raise PluginConfigError(
            "TELEPORT_HTTP_TIMEOUT", TELEPORT_HTTP_TIMEOUT, "expected a number of seconds"
        ) from None
    if timeout <= 0:
        raise PluginConfigError("TELEPORT_HTTP_TIMEOUT", TELEPORT_HTTP_TIMEOUT, "must be positive")
    return timeout


# ---------------------------------------------------------------------------
# Files
# ---------------------------------------------------------------------------


def read_plugin_file(path: str | Path) -> Any:
    """Read and decode a plugin definition from a local file.

    Raises:
        PluginEnvironmentError: In a browser runtime with no filesystem.
        PluginNotFoundError: If ``path`` does not exist.
        PluginParseError: If the file cannot be read (a directory, no
            permission), is empty, or is not valid JSON/YAML.
    """
    if is_browser_runtime():
        raise PluginEnvironmentError(
            "reading from files can only be used in a host runtime, not within a browser"
        )

    path = Path(path)
    if not path.exists():
        raise PluginNotFoundError(str(path))

    logger.debug("Reading plugin file %s", path)
    try:
        content = path.read_text(encoding="utf-8")
        data = yaml.safe_load(content)
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
        raise PluginParseError(str(path), str(e)) from e

    if data is None:
        raise PluginParseError(str(path), "file is empty")
    return data


# ---------------------------------------------------------------------------
# URLs
# ---------------------------------------------------------------------------


async def fetch_plugin_url(url: str, client: httpx.AsyncClient | None = None) -> Any:
    """Download and decode a plugin definition with a single GET request.

    When ``client`` is given it is used as-is (its timeout and transport
    apply) and left open. Otherwise a short-lived client is created.
    Redirects are followed either way.

    Raises:
        PluginFetchError: On a non-200 status, an empty body, an undecodable
            body, or a transport failure.
    """
    if client is None:
        async with httpx.AsyncClient(
            timeout=default_timeout(),
            headers={"User-Agent": TELEPORT_USER_AGENT},
        ) as owned:
            return await _fetch(owned, url)
    return await _fetch(client, url)


async def _fetch(client: httpx.AsyncClient, url: str) -> Any:
    logger.debug("Fetching plugin %s", url)
    try:
        response = await client.get(url, follow_redirects=True)
    except httpx.HTTPError as e:
        raise PluginFetchError(url, str(e)) from e

    if response.status_code != 200:
        raise PluginFetchError(
            url, response.reason_phrase or str(response.status_code), response.status_code
        )

    if not response.content.strip():
        raise PluginFetchError(url, "EMPTY RESPONSE", response.status_code)

    try:
        data = yaml.safe_load(response.text)
    except yaml.YAMLError as e:
        raise PluginFetchError(url, f"invalid body: {e}", response.status_code) from e

    if not data:
        raise PluginFetchError(url, "EMPTY RESPONSE", response.status_code)
    return data
