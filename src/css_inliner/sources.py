"""Load external stylesheets from a local path or an http(s) URL."""

from __future__ import annotations

import logging
from pathlib import Path

import httpx

from css_inliner.errors import StylesheetLoadError

__all__ = ["load_stylesheet", "is_url"]

logger = logging.getLogger(__name__)


def is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def load_stylesheet(
    source: str, timeout: float = 10.0, client: httpx.Client | None = None
) -> str:
    """Return the CSS text found at *source*.

    Raises:
        StylesheetLoadError: on a missing or unreadable file, an HTTP error
            status, a timeout or a transport failure.
    """
    if is_url(source):
        return _fetch(source, timeout, client)

    path = Path(source)
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise StylesheetLoadError(
            f"Could not read stylesheet {source}: {exc}", source=source, cause=exc
        ) from exc


def _fetch(url: str, timeout: float, client: httpx.Client | None) -> str:
    logger.debug("Fetching stylesheet %s", url)
    try:
        if client is not None:
            resp = client.get(url, timeout=timeout)
        else:
            resp = httpx.get(url, timeout=timeout, follow_redirects=True)
    except httpx.TimeoutException as exc:
        raise StylesheetLoadError(
            f"Timed out fetching stylesheet {url}", source=url, cause=exc
        ) from exc
    except httpx.HTTPError as exc:
        raise StylesheetLoadError(
            f"Could not fetch stylesheet {url}: {exc}", source=url, cause=exc
        ) from exc

    if resp.status_code >= 400:
        raise StylesheetLoadError(
            f"Fetching stylesheet {url} failed with status {resp.status_code}",
            source=url,
        )
    return resp.text
