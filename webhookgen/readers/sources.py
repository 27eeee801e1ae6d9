"""
Loading the raw markdown document.

The document comes either from a local file or from the GitHub docs
repository over HTTP. Both are all-or-nothing: the whole body is returned
or an error is raised. There are no retries.
"""

from __future__ import annotations

import logging
from pathlib import Path

import requests

from webhookgen._version import __version__
from webhookgen.exceptions import FetchError, SourceReadError

logger = logging.getLogger(__name__)

USER_AGENT = f"webhookgen/{__version__}"


def fetch_markdown(url: str, *, timeout: float | None = None) -> bytes:
    """Fetch a markdown document over HTTP.

    Args:
        url: Address of the raw markdown file.
        timeout: Seconds to wait for the server, or None to wait indefinitely.

    Returns:
        The response body.

    Raises:
        FetchError: On connection failure or a non-2xx status.
    """
    logger.debug("Fetching %s", url)

    try:
        response = requests.get(url, headers={"User-Agent": USER_AGENT}, timeout=timeout)
    except requests.RequestException as exc:
        raise FetchError(f"could not fetch {url}: {exc}") from exc

    if not 200 <= response.status_code < 300:
        raise FetchError(
            f"request was not successful for {url}: {response.status_code} {response.reason}"
        )

    body = response.content
    logger.info("Fetched %d bytes from %s", len(body), url)
    return body


def read_markdown_file(path: str | Path) -> bytes:
    """Read a markdown document from disk.

    Raises:
        SourceReadError: If the file is missing or unreadable.
    """
    path = Path(path)
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise SourceReadError(f"could not read {path}: {exc}") from exc

    logger.debug("Read %d bytes from %s", len(data), path)
    return data
