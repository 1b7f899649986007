"""
Brand payload transport.

The theme manager only needs something that turns a brand id into a parsed
payload document or raises ThemeFetchError. Two transports are provided:
HTTP (httpx) for deployed themes and files for bundled themes.

Deployed themes live at ``<base>/<scope>/themes/<brand-id>.json``.
"""

from __future__ import annotations

import asyncio
import json
import logging
import re
from pathlib import Path
from typing import Any, Protocol

import httpx

from tinct.core.errors import ThemeFetchError

logger = logging.getLogger(__name__)

BRAND_ID_PATTERN = re.compile(r"^[A-Za-z0-9][A-Za-z0-9._-]*$")


class ThemeFetcher(Protocol):
    """Anything that can fetch a brand payload document."""

    async def fetch(self, brand_id: str) -> Any:
        """
        Return the parsed payload for a brand.

        Raises:
            ThemeFetchError: On any transport or parse failure.
        """
        ...


def check_brand_id(brand_id: str) -> str:
    """
    Reject brand ids that cannot safely become a path segment.

    Raises:
        ThemeFetchError: If the id is empty or contains path characters.
    """
    if not BRAND_ID_PATTERN.match(brand_id):
        raise ThemeFetchError(brand_id, f"Invalid brand id: {brand_id!r}")
    return brand_id


def theme_url(base_url: str, scope: str, brand_id: str) -> str:
    """
    Build the payload URL for a brand.

    Example:
        theme_url("https://cdn.example.com", "shell", "acme")
        -> "https://cdn.example.com/shell/themes/acme.json"
    """
    check_brand_id(brand_id)
    parts = [base_url.rstrip("/")]
    if scope.strip("/"):
        parts.append(scope.strip("/"))
    parts.append(f"themes/{brand_id}.json")
    return "/".join(parts)


def parse_payload(brand_id: str, text: str | bytes, *, url: str | None = None) -> Any:
    """
    Parse a payload document.

    Raises:
        ThemeFetchError: If the text is not JSON.
    """
    try:
        return json.loads(text)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ThemeFetchError(brand_id, f"Unparseable theme document: {e}", url=url) from e


class HttpThemeFetcher:
    """
    Fetch brand payloads over HTTP.

    Example:
        fetcher = HttpThemeFetcher("https://cdn.example.com", scope="shell")
        payload = await fetcher.fetch("acme")
        await fetcher.aclose()
    """

    def __init__(
        self,
        base_url: str,
        scope: str = "",
        *,
        client: httpx.AsyncClient | None = None,
        timeout: float = 10.0,
    ):
        self.base_url = base_url
        self.scope = scope
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout)

    def url_for(self, brand_id: str) -> str:
        return theme_url(self.base_url, self.scope, brand_id)

    async def fetch(self, brand_id: str) -> Any:
        url = self.url_for(brand_id)
        logger.debug("Fetching theme %s from %s", brand_id, url)
        try:
            response = await self._client.get(url, headers={"Accept": "application/json"})
        except httpx.HTTPError as e:
            raise ThemeFetchError(brand_id, f"Request failed: {e}", url=url) from e

        if response.status_code != 200:
            raise ThemeFetchError(
                brand_id,
                f"HTTP {response.status_code} for {url}",
                url=url,
                status=response.status_code,
            )
        return parse_payload(brand_id, response.content, url=url)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> HttpThemeFetcher:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()


class FileThemeFetcher:
    """
    Read brand payloads bundled as ``<directory>/<brand-id>.json``.
    """

    def __init__(self, directory: Path):
        self.directory = directory

    def path_for(self, brand_id: str) -> Path:
        return self.directory / f"{check_brand_id(brand_id)}.json"

    async def fetch(self, brand_id: str) -> Any:
        path = self.path_for(brand_id)
        try:
            text = await asyncio.to_thread(path.read_bytes)
        except OSError as e:
            raise ThemeFetchError(brand_id, f"Cannot read {path}: {e}", url=str(path)) from e
        return parse_payload(brand_id, text, url=str(path))
